"""Open question business logic — list, fetch, create, update and delete."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from world_canon import clock
from world_canon.errors import MissingFieldError, NotFoundError
from world_canon.models.question import Question
from world_canon.repositories.questions import next_question_id, record_id

if TYPE_CHECKING:
    from world_canon.repositories.meta import MetaRepository
    from world_canon.repositories.questions import QuestionRepository

logger = logging.getLogger(__name__)


def _index_of(questions: list[dict[str, Any]], question_id: str) -> int | None:
    return next(
        (i for i, q in enumerate(questions) if record_id(q) == question_id),
        None,
    )


def _not_found(questions: list[dict[str, Any]]) -> NotFoundError:
    return NotFoundError(
        "Question not found",
        available=[record_id(q) for q in questions],
    )


def list_questions(questions_repo: QuestionRepository) -> list[dict[str, Any]]:
    return questions_repo.list_all()


def get_question(question_id: str, questions_repo: QuestionRepository) -> dict[str, Any]:
    questions = questions_repo.list_all()
    index = _index_of(questions, question_id)
    if index is None:
        raise _not_found(questions)
    return questions[index]


def create_question(
    name: str | None,
    question: str | None,
    questions_repo: QuestionRepository,
    meta_repo: MetaRepository,
    domain: str | None = None,
    notes: str | None = None,
) -> dict[str, Any]:
    """Append a question numbered one past the highest existing ``OQ-<n>`` id."""
    if not name or not question:
        raise MissingFieldError("name and question are required")

    data = questions_repo.load() or {}
    questions = list(data.get("questions") or [])

    record = Question(
        id=next_question_id(questions),
        name=name,
        domain=domain or "architecture",
        question=question,
        notes=notes or "",
        created=clock.today(),
    ).to_document()
    questions.append(record)
    questions_repo.save({**data, "questions": questions})

    meta_repo.touch()
    logger.info("Question created — id=%s domain=%s", record["id"], record["domain"])
    return record


def update_question(
    question_id: str,
    body: dict[str, Any],
    questions_repo: QuestionRepository,
    meta_repo: MetaRepository,
) -> dict[str, Any]:
    """Replace a question record wholesale, keeping the id from the path."""
    data = questions_repo.load() or {}
    questions = list(data.get("questions") or [])
    index = _index_of(questions, question_id)
    if index is None:
        raise NotFoundError("Question not found")

    updated = {**body, "id": question_id}
    questions[index] = updated
    questions_repo.save({**data, "questions": questions})

    meta_repo.touch()
    logger.info("Question updated — id=%s", question_id)
    return updated


def delete_question(
    question_id: str,
    questions_repo: QuestionRepository,
    meta_repo: MetaRepository,
) -> None:
    data = questions_repo.load()
    if data is None or not isinstance(data.get("questions"), list):
        raise NotFoundError("Questions file not found")

    questions = data["questions"]
    index = _index_of(questions, question_id)
    if index is None:
        raise NotFoundError("Question not found")

    del questions[index]
    questions_repo.save(data)

    meta_repo.touch()
    logger.info("Question deleted — id=%s", question_id)
