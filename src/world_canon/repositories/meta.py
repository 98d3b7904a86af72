"""Metadata tracker — ``meta.yaml`` version, last edit date and changelog."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from world_canon import clock
from world_canon.errors import DocumentNotFoundError, StorageError
from world_canon.models.meta import ChangelogEntry, Meta
from world_canon.repositories.documents import DocumentStore

if TYPE_CHECKING:
    from world_canon.storage.base import Storage

META_PATH = "meta.yaml"
DEFAULT_SNAPSHOT_NOTE = "Version snapshot created"

logger = logging.getLogger(__name__)


class MetaRepository:
    """Read-modify-write access to ``meta.yaml``. Last writer wins."""

    def __init__(self, storage: Storage) -> None:
        self._documents = DocumentStore(storage)

    def get(self) -> Meta:
        try:
            data = self._documents.read(META_PATH)
        except DocumentNotFoundError as exc:
            raise StorageError(f"Failed to load {META_PATH}") from exc
        try:
            return Meta.model_validate(data)
        except ValidationError as exc:
            raise StorageError(f"Failed to load {META_PATH}") from exc

    def save(self, meta: Meta) -> Meta:
        self._documents.write(META_PATH, meta.to_document())
        return meta

    def touch(self) -> None:
        """Set ``last_modified`` to today; skipped when there is no meta yet."""
        if not self._documents.exists(META_PATH):
            logger.warning("Skipping last_modified update — %s is missing", META_PATH)
            return
        meta = self.get()
        meta.last_modified = clock.today()
        self.save(meta)

    def update_description(self, description: str | None) -> Meta:
        meta = self.get()
        if description:
            meta.description = description
        meta.last_modified = clock.today()
        return self.save(meta)

    def record_version(self, version: str, notes: str | None = None) -> Meta:
        """Mark ``version`` as current and log it in the changelog."""
        meta = self.get()
        meta.version = version
        meta.changelog.append(
            ChangelogEntry(
                version=version,
                date=clock.today(),
                changes=[notes or DEFAULT_SNAPSHOT_NOTE],
            ).to_document()
        )
        return self.save(meta)

    def record_restore(self, restored_from: str) -> Meta:
        """Log a restore under the meta's current version, which is left as is."""
        meta = self.get()
        today = clock.today()
        meta.last_modified = today
        meta.changelog.append(
            ChangelogEntry(
                version=meta.version,
                date=today,
                changes=[f"Restored from version {restored_from}"],
            ).to_document()
        )
        return self.save(meta)
