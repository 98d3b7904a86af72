"""Base model for YAML-backed world documents."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class DocumentBase(BaseModel):
    """Lenient model for hand-edited YAML.

    Unknown keys are kept so a load/save cycle never drops content, and
    numeric scalars (``version: 0.1``) are accepted where strings are expected.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    def to_document(self) -> dict[str, Any]:
        """Dump to a plain mapping suitable for the YAML codec."""
        return self.model_dump(mode="json")
