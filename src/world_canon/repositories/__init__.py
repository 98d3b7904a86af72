"""Repositories over the world storage, one per document family."""

from world_canon.repositories.documents import DocumentStore
from world_canon.repositories.domains import DomainRepository
from world_canon.repositories.meta import MetaRepository
from world_canon.repositories.questions import QuestionRepository
from world_canon.repositories.snapshots import SnapshotRepository

__all__ = [
    "DocumentStore",
    "DomainRepository",
    "MetaRepository",
    "QuestionRepository",
    "SnapshotRepository",
]
