"""Key-value access to YAML documents by logical path."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import yaml

from world_canon.errors import StorageError
from world_canon.storage import yaml_codec

if TYPE_CHECKING:
    from world_canon.storage.base import Storage

logger = logging.getLogger(__name__)


class DocumentStore:
    """Load and save whole YAML documents. Holds no cached state."""

    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    def read(self, path: str) -> Any:
        """Load a document.

        Raises ``DocumentNotFoundError`` when nothing is stored at ``path`` and
        ``StorageError`` when the stored text is not valid YAML.
        """
        text = self._storage.read(path)
        try:
            return yaml_codec.loads(text)
        except yaml.YAMLError as exc:
            logger.error("Error loading %s: %s", path, exc)
            raise StorageError(f"Failed to load {path}", path=path) from exc

    def write(self, path: str, document: Any) -> None:
        """Serialize and overwrite the document at ``path``."""
        try:
            text = yaml_codec.dumps(document)
        except yaml.YAMLError as exc:
            logger.error("Error serializing %s: %s", path, exc)
            raise StorageError(f"Failed to save {path}", path=path) from exc
        self._storage.write(path, text)

    def exists(self, path: str) -> bool:
        return self._storage.exists(path)

    def delete(self, path: str) -> None:
        self._storage.delete(path)
