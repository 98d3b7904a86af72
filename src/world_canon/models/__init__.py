"""Data models for world documents, registry entries and snapshots."""

from world_canon.models.domain import (
    Domain,
    DomainCreate,
    DomainRef,
    DomainRegistry,
    DomainSummary,
)
from world_canon.models.meta import ChangelogEntry, Meta, MetaUpdate
from world_canon.models.question import Question, QuestionCreate
from world_canon.models.snapshot import Snapshot, SnapshotCreate, SnapshotInfo

__all__ = [
    "ChangelogEntry",
    "Domain",
    "DomainCreate",
    "DomainRef",
    "DomainRegistry",
    "DomainSummary",
    "Meta",
    "MetaUpdate",
    "Question",
    "QuestionCreate",
    "Snapshot",
    "SnapshotCreate",
    "SnapshotInfo",
]
