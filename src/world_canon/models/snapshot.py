"""Snapshot models — immutable captures of the whole world store."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class Snapshot(BaseModel):
    """A sealed version: every tracked document keyed by its path."""

    version: str
    created: str
    notes: str = ""
    files: dict[str, Any] = Field(default_factory=dict)


class SnapshotInfo(BaseModel):
    """Listing entry; ``error`` is set when the stored record is unreadable."""

    version: str
    created: str | None = None
    notes: str | None = None
    error: str | None = None


class SnapshotCreate(BaseModel):
    """Request body for creating a snapshot."""

    version: str | None = None
    notes: str | None = None
