"""Storage backends for world documents and snapshot records."""

from world_canon.storage.base import Storage
from world_canon.storage.local import LocalStorage
from world_canon.storage.memory import MemoryStorage

__all__ = [
    "LocalStorage",
    "MemoryStorage",
    "Storage",
]
