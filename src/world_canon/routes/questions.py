"""Open question routes — list, create, fetch, update and delete."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from world_canon.models.question import QuestionCreate
from world_canon.repositories.meta import MetaRepository
from world_canon.repositories.questions import QuestionRepository
from world_canon.services import questions as questions_svc

router = APIRouter(prefix="/open-questions", tags=["open-questions"])


@router.get("")
def list_questions(request: Request) -> dict[str, Any]:
    repo = QuestionRepository(request.app.state.storage)
    return {"questions": questions_svc.list_questions(repo)}


@router.post("")
def create_question(request: Request, body: QuestionCreate) -> JSONResponse:
    storage = request.app.state.storage
    question = questions_svc.create_question(
        body.name,
        body.question,
        QuestionRepository(storage),
        MetaRepository(storage),
        domain=body.domain,
        notes=body.notes,
    )
    return JSONResponse(status_code=201, content=question)


@router.get("/{question_id}")
def get_question(request: Request, question_id: str) -> dict[str, Any]:
    repo = QuestionRepository(request.app.state.storage)
    return questions_svc.get_question(question_id, repo)


@router.put("/{question_id}")
def update_question(
    request: Request,
    question_id: str,
    body: Annotated[dict[str, Any], Body()],
) -> dict[str, Any]:
    storage = request.app.state.storage
    return questions_svc.update_question(
        question_id, body, QuestionRepository(storage), MetaRepository(storage)
    )


@router.delete("/{question_id}")
def delete_question(request: Request, question_id: str) -> dict[str, str]:
    storage = request.app.state.storage
    questions_svc.delete_question(
        question_id, QuestionRepository(storage), MetaRepository(storage)
    )
    return {"message": "Question deleted", "id": question_id}
