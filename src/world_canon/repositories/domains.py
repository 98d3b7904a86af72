"""Domain registry — ``domains/_registry.yaml`` and the documents it references."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from world_canon.errors import DocumentNotFoundError, StorageError
from world_canon.models.domain import DomainRef, DomainRegistry, DomainSummary
from world_canon.repositories.documents import DocumentStore

if TYPE_CHECKING:
    from world_canon.storage.base import Storage

DOMAINS_DIR = "domains"
REGISTRY_PATH = f"{DOMAINS_DIR}/_registry.yaml"

logger = logging.getLogger(__name__)


def domain_path(file: str) -> str:
    """Return the store path of a domain document named in the registry."""
    return f"{DOMAINS_DIR}/{file}"


def domain_filename(domain_id: str) -> str:
    return f"{domain_id}.yaml"


class DomainRepository:
    """Provide data access for the registry and its domain documents."""

    def __init__(self, storage: Storage) -> None:
        self._documents = DocumentStore(storage)

    def load_registry(self) -> DomainRegistry:
        """Load the registry; a missing or unreadable registry is a hard failure."""
        try:
            data = self._documents.read(REGISTRY_PATH)
        except DocumentNotFoundError as exc:
            raise StorageError("Failed to load domain registry") from exc
        if data is None:
            raise StorageError("Failed to load domain registry")
        try:
            return DomainRegistry.model_validate(data)
        except ValidationError as exc:
            raise StorageError("Failed to load domain registry") from exc

    def save_registry(self, registry: DomainRegistry) -> None:
        self._documents.write(REGISTRY_PATH, registry.to_document())

    def read_domain(self, ref: DomainRef) -> Any:
        try:
            return self._documents.read(domain_path(ref.file))
        except DocumentNotFoundError as exc:
            raise StorageError(f"Failed to load {ref.file}", file=ref.file) from exc

    def write_domain(self, ref: DomainRef, document: Any) -> None:
        self._documents.write(domain_path(ref.file), document)

    def delete_domain(self, ref: DomainRef) -> None:
        self._documents.delete(domain_path(ref.file))

    def summarize(self, ref: DomainRef) -> DomainSummary:
        """Build a listing entry, falling back to defaults if the document is unusable."""
        try:
            document = self.read_domain(ref)
        except StorageError:
            logger.warning("Domain document unavailable — id=%s file=%s", ref.id, ref.file)
            document = None
        return DomainSummary.from_ref(ref, document)
