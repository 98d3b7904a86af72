"""In-memory storage used by tests and local experiments."""

from __future__ import annotations

from posixpath import normpath

from world_canon.errors import DocumentNotFoundError, StorageError


def _normalize(path: str) -> str:
    normalized = normpath(path.strip("/"))
    if normalized == ".." or normalized.startswith("../"):
        raise StorageError("Path escapes the world root", path=path)
    return "" if normalized == "." else normalized


class MemoryStorage:
    """Dict-backed storage honouring the same contract as ``LocalStorage``.

    Directories exist implicitly whenever a file lives beneath them.
    """

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files: dict[str, str] = {}
        for path, text in (files or {}).items():
            self.write(path, text)

    def read(self, path: str) -> str:
        key = _normalize(path)
        if key not in self.files:
            raise DocumentNotFoundError(path)
        return self.files[key]

    def write(self, path: str, text: str) -> None:
        self.files[_normalize(path)] = text

    def exists(self, path: str) -> bool:
        key = _normalize(path)
        if not key:
            return True
        return key in self.files or any(name.startswith(f"{key}/") for name in self.files)

    def delete(self, path: str) -> None:
        key = _normalize(path)
        if key not in self.files:
            raise DocumentNotFoundError(path)
        del self.files[key]

    def list_dir(self, path: str) -> list[str]:
        key = _normalize(path)
        prefix = f"{key}/" if key else ""
        children = {
            name[len(prefix):].split("/", 1)[0]
            for name in self.files
            if name.startswith(prefix)
        }
        return sorted(children)
