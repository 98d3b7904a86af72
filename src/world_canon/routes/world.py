"""World routes — full state, metadata and the whole-document sections."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Request

from world_canon.models.meta import MetaUpdate
from world_canon.repositories.documents import DocumentStore
from world_canon.repositories.meta import MetaRepository
from world_canon.services import world as world_svc

router = APIRouter(tags=["world"])


@router.get("")
def world_state(request: Request) -> dict[str, Any]:
    """Return every world document in one response."""
    documents = DocumentStore(request.app.state.storage)
    return world_svc.get_world_state(documents)


@router.get("/meta")
def get_meta(request: Request) -> dict[str, Any]:
    repo = MetaRepository(request.app.state.storage)
    return repo.get().to_document()


@router.put("/meta")
def update_meta(request: Request, body: MetaUpdate) -> dict[str, Any]:
    """Update the world description; other metadata is managed by the store."""
    repo = MetaRepository(request.app.state.storage)
    return repo.update_description(body.description).to_document()


def _document_routes(name: str, path: str) -> None:
    """Register GET and PUT handlers for a document edited as a whole."""

    def read_document(request: Request) -> Any:
        documents = DocumentStore(request.app.state.storage)
        return world_svc.get_document(path, documents)

    def write_document(request: Request, body: Annotated[Any, Body()]) -> Any:
        storage = request.app.state.storage
        return world_svc.put_document(
            path, body, DocumentStore(storage), MetaRepository(storage)
        )

    router.add_api_route(
        f"/{name}", read_document, methods=["GET"], name=f"get_{name}"
    )
    router.add_api_route(
        f"/{name}", write_document, methods=["PUT"], name=f"put_{name}"
    )


for _name, _path in world_svc.WORLD_DOCUMENTS.items():
    _document_routes(_name, _path)
