"""Storage contract shared by the filesystem and in-memory backends."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Storage(Protocol):
    """Text storage addressed by POSIX-style paths relative to the world root.

    ``read`` and ``delete`` raise ``DocumentNotFoundError`` for a missing path
    and ``StorageError`` for any other failure. ``write`` is a full overwrite
    that creates intermediate directories.
    """

    def read(self, path: str) -> str: ...

    def write(self, path: str, text: str) -> None: ...

    def exists(self, path: str) -> bool: ...

    def delete(self, path: str) -> None: ...

    def list_dir(self, path: str) -> list[str]: ...
