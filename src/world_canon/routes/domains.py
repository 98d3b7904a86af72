"""Domain routes — list, create, fetch, update and delete domains."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from world_canon.models.domain import DomainCreate
from world_canon.repositories.domains import DomainRepository
from world_canon.repositories.meta import MetaRepository
from world_canon.services import domains as domains_svc

router = APIRouter(prefix="/domains", tags=["domains"])


@router.get("")
def list_domains(request: Request) -> dict[str, Any]:
    """List registered domains with summary fields from each document."""
    repo = DomainRepository(request.app.state.storage)
    summaries = domains_svc.list_domains(repo)
    return {"domains": [summary.to_document() for summary in summaries]}


@router.post("")
def create_domain(request: Request, body: DomainCreate) -> JSONResponse:
    storage = request.app.state.storage
    domain = domains_svc.create_domain(
        body.id,
        body.name,
        DomainRepository(storage),
        MetaRepository(storage),
        description=body.description,
    )
    return JSONResponse(status_code=201, content=domain)


@router.get("/{domain_id}")
def get_domain(request: Request, domain_id: str) -> Any:
    repo = DomainRepository(request.app.state.storage)
    return domains_svc.get_domain(domain_id, repo)


@router.put("/{domain_id}")
def update_domain(
    request: Request,
    domain_id: str,
    body: Annotated[dict[str, Any], Body()],
) -> dict[str, Any]:
    storage = request.app.state.storage
    return domains_svc.update_domain(
        domain_id, body, DomainRepository(storage), MetaRepository(storage)
    )


@router.delete("/{domain_id}")
def delete_domain(request: Request, domain_id: str) -> dict[str, str]:
    storage = request.app.state.storage
    domains_svc.delete_domain(
        domain_id, DomainRepository(storage), MetaRepository(storage)
    )
    return {"message": "Domain deleted", "id": domain_id}
