"""Domain business logic — list, fetch, create, update and delete."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from world_canon.errors import (
    ConflictError,
    InvalidFieldError,
    MissingFieldError,
    NotFoundError,
    StorageError,
)
from world_canon.models.domain import Domain, DomainRef, DomainSummary
from world_canon.repositories.domains import domain_filename

if TYPE_CHECKING:
    from world_canon.models.domain import DomainRegistry
    from world_canon.repositories.domains import DomainRepository
    from world_canon.repositories.meta import MetaRepository

logger = logging.getLogger(__name__)

_SAFE_ID = re.compile(r"[A-Za-z0-9][A-Za-z0-9_-]*")


def _require_ref(registry: DomainRegistry, domain_id: str) -> DomainRef:
    ref = registry.find(domain_id)
    if ref is None:
        raise NotFoundError("Domain not found", available=registry.ids())
    return ref


def list_domains(domains_repo: DomainRepository) -> list[DomainSummary]:
    """Return every registered domain, enriched from its document."""
    registry = domains_repo.load_registry()
    return [domains_repo.summarize(ref) for ref in registry.domains]


def get_domain(domain_id: str, domains_repo: DomainRepository) -> Any:
    registry = domains_repo.load_registry()
    ref = _require_ref(registry, domain_id)
    return domains_repo.read_domain(ref)


def create_domain(
    domain_id: str | None,
    name: str | None,
    domains_repo: DomainRepository,
    meta_repo: MetaRepository,
    description: str | None = None,
) -> dict[str, Any]:
    """Write a new domain document and register it after the existing ones.

    If the registry cannot be saved the new document is removed again.
    """
    if not domain_id or not name:
        raise MissingFieldError("id and name are required")
    if not _SAFE_ID.fullmatch(domain_id):
        raise InvalidFieldError("id may only contain letters, digits, dashes and underscores")

    registry = domains_repo.load_registry()
    if registry.find(domain_id) is not None:
        raise ConflictError("Domain already exists", id=domain_id)

    ref = DomainRef(
        id=domain_id,
        name=name,
        file=domain_filename(domain_id),
        order=registry.next_order(),
    )
    document = Domain(id=domain_id, name=name, description=description or "").to_document()

    try:
        domains_repo.write_domain(ref, document)
    except StorageError as exc:
        raise StorageError("Failed to create domain file", id=domain_id) from exc

    registry.domains.append(ref)
    try:
        domains_repo.save_registry(registry)
    except StorageError as exc:
        try:
            domains_repo.delete_domain(ref)
        except (NotFoundError, StorageError):
            logger.warning(
                "Failed to remove orphaned domain file — id=%s file=%s",
                ref.id,
                ref.file,
                exc_info=True,
            )
        raise StorageError("Failed to update registry", id=domain_id) from exc

    meta_repo.touch()
    logger.info("Domain created — id=%s order=%d", ref.id, ref.order)
    return document


def update_domain(
    domain_id: str,
    document: dict[str, Any],
    domains_repo: DomainRepository,
    meta_repo: MetaRepository,
) -> dict[str, Any]:
    """Overwrite a registered domain's document; its ``id`` always follows the path."""
    registry = domains_repo.load_registry()
    ref = _require_ref(registry, domain_id)

    document = {**document, "id": domain_id}
    try:
        domains_repo.write_domain(ref, document)
    except StorageError as exc:
        raise StorageError("Failed to save domain", id=domain_id) from exc

    meta_repo.touch()
    logger.info("Domain updated — id=%s", domain_id)
    return document


def delete_domain(
    domain_id: str,
    domains_repo: DomainRepository,
    meta_repo: MetaRepository,
) -> None:
    """Unregister a domain, then remove its document on a best-effort basis.

    The registry is the source of truth: a stray document left behind after
    a failed delete is tolerated.
    """
    registry = domains_repo.load_registry()
    ref = _require_ref(registry, domain_id)

    registry.domains = [r for r in registry.domains if r.id != domain_id]
    try:
        domains_repo.save_registry(registry)
    except StorageError as exc:
        raise StorageError("Failed to update registry", id=domain_id) from exc

    try:
        domains_repo.delete_domain(ref)
    except (NotFoundError, StorageError):
        logger.warning(
            "Failed to delete domain file — id=%s file=%s",
            ref.id,
            ref.file,
            exc_info=True,
        )

    meta_repo.touch()
    logger.info("Domain deleted — id=%s", domain_id)
