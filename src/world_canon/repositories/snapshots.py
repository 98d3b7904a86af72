"""Snapshot records — one JSON file per sealed version under ``versions/``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from world_canon.errors import DocumentNotFoundError, NotFoundError, StorageError
from world_canon.models.snapshot import Snapshot

if TYPE_CHECKING:
    from world_canon.storage.base import Storage

VERSIONS_DIR = "versions"
SNAPSHOT_FILE = "snapshot.json"
VERSION_DIR_PREFIX = "v"

logger = logging.getLogger(__name__)


def version_dir(version: str) -> str:
    return f"{VERSIONS_DIR}/{VERSION_DIR_PREFIX}{version}"


def snapshot_path(version: str) -> str:
    return f"{version_dir(version)}/{SNAPSHOT_FILE}"


class SnapshotRepository:
    """Persist and load sealed snapshots. Records are never rewritten."""

    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    def exists(self, version: str) -> bool:
        """Return True when a version directory is already present."""
        return self._storage.exists(version_dir(version))

    def has_record(self, version: str) -> bool:
        return self._storage.exists(snapshot_path(version))

    def save(self, snapshot: Snapshot) -> str:
        """Write the snapshot record and return its store path."""
        path = snapshot_path(snapshot.version)
        self._storage.write(path, snapshot.model_dump_json(indent=2))
        return path

    def load(self, version: str) -> Snapshot:
        return self.load_entry(f"{VERSION_DIR_PREFIX}{version}")

    def load_entry(self, entry: str) -> Snapshot:
        """Load the record stored in the ``versions/<entry>`` directory."""
        path = f"{VERSIONS_DIR}/{entry}/{SNAPSHOT_FILE}"
        try:
            text = self._storage.read(path)
        except DocumentNotFoundError as exc:
            raise NotFoundError("Version not found") from exc
        try:
            return Snapshot.model_validate_json(text)
        except ValidationError as exc:
            logger.error("Invalid snapshot record %s: %s", path, exc)
            raise StorageError("Failed to load version snapshot", path=path) from exc

    def list_entries(self) -> list[str]:
        """Return version directory names (``v<version>``)."""
        return [
            name
            for name in self._storage.list_dir(VERSIONS_DIR)
            if name.startswith(VERSION_DIR_PREFIX)
        ]
