"""Top-level world documents and the assembled world state."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from world_canon.errors import NotFoundError, StorageError
from world_canon.repositories.domains import REGISTRY_PATH, domain_path
from world_canon.repositories.meta import META_PATH
from world_canon.repositories.questions import QUESTIONS_PATH

if TYPE_CHECKING:
    from world_canon.repositories.documents import DocumentStore
    from world_canon.repositories.meta import MetaRepository

logger = logging.getLogger(__name__)

# Route name -> file for the documents edited as a whole.
WORLD_DOCUMENTS = {
    "setting": "setting.yaml",
    "thesis": "thesis.yaml",
    "devices": "devices.yaml",
    "system-architecture": "system-architecture.yaml",
}


def get_document(path: str, documents: DocumentStore) -> Any:
    document = documents.read(path)
    if document is None:
        raise StorageError(f"Failed to load {path}", path=path)
    return document


def put_document(
    path: str,
    document: Any,
    documents: DocumentStore,
    meta_repo: MetaRepository,
) -> Any:
    """Overwrite a world document with ``document`` and touch the metadata."""
    documents.write(path, document)
    meta_repo.touch()
    logger.info("Document saved — path=%s", path)
    return document


def _try_read(path: str, documents: DocumentStore) -> Any:
    try:
        return documents.read(path)
    except (NotFoundError, StorageError):
        return None


def get_world_state(documents: DocumentStore) -> dict[str, Any]:
    """Assemble every world document into a single mapping.

    Missing documents come back as None; domains that cannot be loaded are
    left out.
    """
    registry = _try_read(REGISTRY_PATH, documents)
    domains: dict[str, Any] = {}
    refs = registry.get("domains") if isinstance(registry, dict) else None
    for ref in refs or []:
        if not isinstance(ref, dict) or not ref.get("file"):
            continue
        document = _try_read(domain_path(str(ref["file"])), documents)
        if document is not None:
            domains[str(ref.get("id"))] = document

    open_questions = _try_read(QUESTIONS_PATH, documents)
    return {
        "meta": _try_read(META_PATH, documents),
        "setting": _try_read(WORLD_DOCUMENTS["setting"], documents),
        "thesis": _try_read(WORLD_DOCUMENTS["thesis"], documents),
        "devices": _try_read(WORLD_DOCUMENTS["devices"], documents),
        "systemArchitecture": _try_read(WORLD_DOCUMENTS["system-architecture"], documents),
        "domains": domains,
        "openQuestions": (
            open_questions.get("questions") or []
            if isinstance(open_questions, dict)
            else []
        ),
    }
