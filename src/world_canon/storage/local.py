"""Filesystem storage rooted at the world directory."""

from __future__ import annotations

import logging
from pathlib import Path

from world_canon.errors import DocumentNotFoundError, StorageError

logger = logging.getLogger(__name__)


class LocalStorage:
    """Read and write world files under a single root directory."""

    def __init__(self, root: Path) -> None:
        self._root = root.resolve()

    def _resolve(self, path: str) -> Path:
        """Map a relative path onto the root, refusing anything that escapes it."""
        full = (self._root / path).resolve()
        if full != self._root and self._root not in full.parents:
            raise StorageError("Path escapes the world root", path=path)
        return full

    def read(self, path: str) -> str:
        full = self._resolve(path)
        try:
            return full.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise DocumentNotFoundError(path) from exc
        except OSError as exc:
            logger.error("Failed to read %s: %s", full, exc)
            raise StorageError(f"Failed to read {path}", path=path) from exc

    def write(self, path: str, text: str) -> None:
        full = self._resolve(path)
        try:
            full.parent.mkdir(parents=True, exist_ok=True)
            full.write_text(text, encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to write %s: %s", full, exc)
            raise StorageError(f"Failed to save {path}", path=path) from exc

    def exists(self, path: str) -> bool:
        return self._resolve(path).exists()

    def delete(self, path: str) -> None:
        full = self._resolve(path)
        try:
            full.unlink()
        except FileNotFoundError as exc:
            raise DocumentNotFoundError(path) from exc
        except OSError as exc:
            raise StorageError(f"Failed to delete {path}", path=path) from exc

    def list_dir(self, path: str) -> list[str]:
        full = self._resolve(path)
        if not full.is_dir():
            return []
        return sorted(child.name for child in full.iterdir())
