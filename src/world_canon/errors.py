"""Error kinds raised by the store and mapped to HTTP responses by the app."""

from __future__ import annotations

from typing import Any


class WorldError(Exception):
    """Base error carrying an HTTP status and JSON-safe context."""

    status_code = 500

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self) -> dict[str, Any]:
        """Render as the ``{error, ...context}`` response body."""
        return {"error": self.message, **self.context}


class NotFoundError(WorldError):
    """A document, domain, question or version does not exist."""

    status_code = 404


class DocumentNotFoundError(NotFoundError):
    """Nothing is stored at the requested path."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Document not found: {path}", path=path)
        self.path = path


class ConflictError(WorldError):
    """A domain id or snapshot version is already taken."""

    status_code = 409


class MissingFieldError(WorldError):
    """A required request field was omitted or empty."""

    status_code = 400


class StorageError(WorldError):
    """Read, write or parse failure at the storage boundary."""

    status_code = 500


class InvalidFieldError(WorldError):
    """A request field has a value the store cannot accept."""

    status_code = 400
