"""Shared fixtures: a seeded in-memory world and an app client bound to it."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from world_canon.app import create_app
from world_canon.config import AppConfig, Settings, StorageConfig
from world_canon.storage import MemoryStorage, yaml_codec

FROZEN_NOW = datetime(2026, 3, 14, 9, 30, tzinfo=UTC)
TODAY = "2026-03-14"

WORLD_FILES = {
    "meta.yaml": {
        "version": "0.0.1",
        "last_modified": "2026-01-02",
        "description": "LifeOS world canon",
        "changelog": [],
    },
    "setting.yaml": {
        "year": 2030,
        "summary": "Ambient assistants are ordinary household infrastructure.",
    },
    "thesis.yaml": {"statement": "Tools should fade into the background.", "pillars": []},
    "devices.yaml": {"devices": [{"id": "ring", "modality": "haptic"}]},
    "system-architecture.yaml": {"layers": ["sensing", "memory", "agency"]},
    "open-questions.yaml": {
        "questions": [
            {
                "id": "OQ-1",
                "name": "Consent",
                "status": "open",
                "domain": "identity",
                "question": "How is consent revoked?",
                "notes": "",
                "created": "2026-01-02",
            },
            {
                "id": "OQ-2",
                "name": "Retention",
                "status": "open",
                "domain": "memory",
                "question": "How long are memories kept?",
                "notes": "",
                "created": "2026-01-03",
            },
        ]
    },
    "domains/_registry.yaml": {
        "domains": [
            {"id": "identity", "name": "Identity", "file": "identity.yaml", "order": 1},
            {"id": "memory", "name": "Memory", "file": "memory.yaml", "order": 2},
        ]
    },
    "domains/identity.yaml": {
        "id": "identity",
        "name": "Identity",
        "description": "Who the user is to the system",
        "status": "draft",
        "version": "0.2.0",
        "sections": [{"title": "Profiles"}],
    },
    "domains/memory.yaml": {"id": "memory", "name": "Memory", "sections": []},
}


@pytest.fixture(autouse=True)
def frozen_clock() -> Iterator[datetime]:
    """Pin the store clock so dates in documents are predictable."""
    with patch("world_canon.clock.now", return_value=FROZEN_NOW):
        yield FROZEN_NOW


@pytest.fixture
def storage() -> MemoryStorage:
    """Create an in-memory world seeded with every tracked document."""
    return MemoryStorage(
        {path: yaml_codec.dumps(document) for path, document in WORLD_FILES.items()}
    )


@pytest.fixture
def client(storage: MemoryStorage) -> Iterator[TestClient]:
    """Create an app client whose store is the in-memory world."""
    settings = Settings(
        app=AppConfig(env="test", log_level="INFO", log_file=""),
        storage=StorageConfig(world_path="unused"),
    )
    with (
        patch("world_canon.app.load_settings", return_value=settings),
        patch("world_canon.app.configure_logging"),
        patch("world_canon.app.init_storage", return_value=storage),
    ):
        app = create_app()
        with TestClient(app) as test_client:
            yield test_client
