"""Snapshot manager — capture, list, fetch and restore whole-world versions.

A snapshot reads every tracked document one after another with no isolation
from concurrent edits, so a capture taken while the store is being edited may
mix pre- and post-edit state. Restores overwrite live documents path by path
and are not rolled back if a write fails part way through.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from world_canon import clock
from world_canon.errors import (
    ConflictError,
    InvalidFieldError,
    MissingFieldError,
    NotFoundError,
    StorageError,
)
from world_canon.models.snapshot import Snapshot, SnapshotInfo
from world_canon.repositories.documents import DocumentStore
from world_canon.repositories.domains import REGISTRY_PATH, domain_path
from world_canon.repositories.meta import META_PATH, MetaRepository
from world_canon.repositories.questions import QUESTIONS_PATH
from world_canon.repositories.snapshots import VERSION_DIR_PREFIX, SnapshotRepository

if TYPE_CHECKING:
    from world_canon.storage.base import Storage

logger = logging.getLogger(__name__)

TRACKED_DOCUMENTS = (
    META_PATH,
    "setting.yaml",
    "thesis.yaml",
    "devices.yaml",
    "system-architecture.yaml",
    QUESTIONS_PATH,
)
INVALID_SNAPSHOT = "Invalid snapshot"

_NUMBER_RUN = re.compile(r"(\d+)")
_SAFE_VERSION = re.compile(r"[0-9A-Za-z][0-9A-Za-z._-]*")


def version_sort_key(version: str) -> tuple[tuple[int, int, str], ...]:
    """Natural ordering key: digit runs compare as numbers (``1.10.0 > 1.2.0``)."""
    return tuple(
        (0, int(chunk), "") if chunk.isdigit() else (1, 0, chunk)
        for chunk in _NUMBER_RUN.split(version)
        if chunk
    )


class SnapshotManager:
    """High-level snapshot operations over one world store."""

    def __init__(self, storage: Storage) -> None:
        self.documents = DocumentStore(storage)
        self.snapshots = SnapshotRepository(storage)
        self.meta = MetaRepository(storage)

    # =========================================================================
    # Capture
    # =========================================================================

    def _capture_document(self, path: str) -> Any:
        try:
            return self.documents.read(path)
        except (NotFoundError, StorageError):
            logger.warning("Snapshot captured %s as empty — document unavailable", path)
            return None

    def capture(self) -> dict[str, Any]:
        """Read every tracked document, then the registry and each domain it lists."""
        files: dict[str, Any] = {}
        for path in TRACKED_DOCUMENTS:
            files[path] = self._capture_document(path)

        registry = self._capture_document(REGISTRY_PATH)
        files[REGISTRY_PATH] = registry

        refs = registry.get("domains") if isinstance(registry, dict) else None
        for ref in refs or []:
            if isinstance(ref, dict) and ref.get("file"):
                path = domain_path(str(ref["file"]))
                files[path] = self._capture_document(path)
        return files

    def create(self, version: str | None, notes: str | None = None) -> Snapshot:
        """Seal the current world state as ``version`` and make it current in meta."""
        if not version:
            raise MissingFieldError('version is required (e.g., "0.1.0")')
        if not _SAFE_VERSION.fullmatch(version):
            raise InvalidFieldError(
                "version may only contain letters, digits, dots, dashes and underscores",
                version=version,
            )
        if self.snapshots.exists(version):
            raise ConflictError("Version already exists", version=version)
        # Fail before sealing if meta cannot be updated afterwards.
        self.meta.get()

        snapshot = Snapshot(
            version=version,
            created=clock.timestamp(),
            notes=notes or "",
            files=self.capture(),
        )
        self.snapshots.save(snapshot)
        self.meta.record_version(version, notes)

        logger.info(
            "Snapshot created — version=%s files=%d", version, len(snapshot.files)
        )
        return snapshot

    # =========================================================================
    # Query
    # =========================================================================

    def list_versions(self) -> list[SnapshotInfo]:
        """List sealed versions, newest first by numeric-aware version order.

        Records that cannot be read are reported with an error instead of
        being dropped.
        """
        versions: list[SnapshotInfo] = []
        for entry in self.snapshots.list_entries():
            try:
                snapshot = self.snapshots.load_entry(entry)
            except (NotFoundError, StorageError):
                versions.append(
                    SnapshotInfo(
                        version=entry.removeprefix(VERSION_DIR_PREFIX),
                        error=INVALID_SNAPSHOT,
                    )
                )
                continue
            versions.append(
                SnapshotInfo(
                    version=snapshot.version,
                    created=snapshot.created,
                    notes=snapshot.notes,
                )
            )

        versions.sort(key=lambda info: version_sort_key(info.version), reverse=True)
        return versions

    def get(self, version: str) -> Snapshot:
        if not self.snapshots.has_record(version):
            raise NotFoundError("Version not found", version=version)
        return self.snapshots.load(version)

    # =========================================================================
    # Restore
    # =========================================================================

    def restore(self, version: str) -> Snapshot:
        """Overwrite every live document captured in ``version``.

        The changelog entry is recorded under the meta version as it reads
        after the restore; ``meta.version`` itself is not changed.
        """
        snapshot = self.get(version)

        for path, document in snapshot.files.items():
            self.documents.write(path, document)

        self.meta.record_restore(version)
        logger.info(
            "Snapshot restored — version=%s files=%d", version, len(snapshot.files)
        )
        return snapshot
