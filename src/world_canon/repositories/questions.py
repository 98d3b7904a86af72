"""Open-questions ledger stored in ``open-questions.yaml``."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from world_canon.errors import DocumentNotFoundError, StorageError
from world_canon.models.question import QUESTION_ID_PREFIX
from world_canon.repositories.documents import DocumentStore

if TYPE_CHECKING:
    from world_canon.storage.base import Storage

QUESTIONS_PATH = "open-questions.yaml"

_LEADING_DIGITS = re.compile(r"\s*([+-]?\d+)")


def question_number(question_id: Any) -> int:
    """Return the numeric part of an ``OQ-<n>`` id, or 0 when there is none."""
    suffix = str(question_id).replace(QUESTION_ID_PREFIX, "", 1)
    match = _LEADING_DIGITS.match(suffix)
    return int(match.group(1)) if match else 0


def record_id(record: Any) -> str:
    """Return a ledger record's id, or "" for records that are not mappings."""
    return str(record.get("id", "")) if isinstance(record, dict) else ""


def next_question_id(questions: list[dict[str, Any]]) -> str:
    highest = max((question_number(record_id(q)) for q in questions), default=0)
    return f"{QUESTION_ID_PREFIX}{max(highest, 0) + 1}"


class QuestionRepository:
    """Load and persist the whole ledger; records are kept as plain mappings."""

    def __init__(self, storage: Storage) -> None:
        self._documents = DocumentStore(storage)

    def load(self) -> dict[str, Any] | None:
        """Return the ledger document, or None when the file is absent or empty.

        A ledger that is not a mapping holding a ``questions`` list raises
        ``StorageError``.
        """
        try:
            data = self._documents.read(QUESTIONS_PATH)
        except DocumentNotFoundError:
            return None
        if data is None:
            return None
        if not isinstance(data, dict) or not isinstance(data.get("questions") or [], list):
            raise StorageError(f"Failed to load {QUESTIONS_PATH}", path=QUESTIONS_PATH)
        return data

    def list_all(self) -> list[dict[str, Any]]:
        data = self.load()
        if data is None:
            return []
        return list(data.get("questions") or [])

    def save(self, data: dict[str, Any]) -> None:
        self._documents.write(QUESTIONS_PATH, data)
