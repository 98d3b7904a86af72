"""Domain registry models."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from world_canon.models.base import DocumentBase

DEFAULT_DOMAIN_STATUS = "open"
DEFAULT_DOMAIN_VERSION = "0.1.0"


class DomainRef(DocumentBase):
    """Registry entry pointing at a domain document."""

    id: str
    name: str
    file: str
    order: int


class DomainRegistry(DocumentBase):
    """Contents of ``domains/_registry.yaml``."""

    domains: list[DomainRef] = Field(default_factory=list)

    def find(self, domain_id: str) -> DomainRef | None:
        return next((ref for ref in self.domains if ref.id == domain_id), None)

    def ids(self) -> list[str]:
        return [ref.id for ref in self.domains]

    def next_order(self) -> int:
        return max((ref.order for ref in self.domains), default=0) + 1


class DomainSummary(DocumentBase):
    """Registry entry enriched with fields from the domain document."""

    id: str
    name: str
    file: str
    order: int
    description: Any = ""
    status: Any = "unknown"
    version: Any = "0.0.0"

    @classmethod
    def from_ref(cls, ref: DomainRef, document: Any) -> DomainSummary:
        data = document if isinstance(document, dict) else {}
        return cls(
            id=ref.id,
            name=ref.name,
            file=ref.file,
            order=ref.order,
            description=data.get("description") or "",
            status=data.get("status") or "unknown",
            version=data.get("version") or "0.0.0",
        )


class DomainCreate(DocumentBase):
    """Request body for creating a domain."""

    id: str | None = None
    name: str | None = None
    description: str | None = None


class Domain(DocumentBase):
    """A freshly created domain document."""

    id: str
    name: str
    description: str = ""
    status: str = DEFAULT_DOMAIN_STATUS
    version: str = DEFAULT_DOMAIN_VERSION
    sections: list[Any] = Field(default_factory=list)
