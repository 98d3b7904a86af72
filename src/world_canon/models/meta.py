"""World metadata — current version, last edit date and changelog."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from world_canon.models.base import DocumentBase


class ChangelogEntry(DocumentBase):
    """One snapshot or restore event."""

    version: str
    date: str
    changes: list[str] = Field(default_factory=list)


class Meta(DocumentBase):
    """Contents of ``meta.yaml``.

    Changelog entries are kept as written; only new entries are built from
    ``ChangelogEntry``.
    """

    version: str = "0.0.0"
    last_modified: Any = None
    description: Any = ""
    changelog: list[Any] = Field(default_factory=list)


class MetaUpdate(DocumentBase):
    """Editable subset of the metadata."""

    description: str | None = None
