"""Open question models."""

from __future__ import annotations

from world_canon.models.base import DocumentBase

QUESTION_ID_PREFIX = "OQ-"


class Question(DocumentBase):
    """An entry in ``open-questions.yaml``."""

    id: str
    name: str
    status: str = "open"
    domain: str = "architecture"
    question: str
    notes: str = ""
    created: str


class QuestionCreate(DocumentBase):
    """Request body for creating a question."""

    name: str | None = None
    question: str | None = None
    domain: str | None = None
    notes: str | None = None
