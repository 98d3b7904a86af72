"""Version routes — create, list, fetch and restore world snapshots."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from world_canon.models.snapshot import SnapshotCreate
from world_canon.repositories.snapshots import version_dir
from world_canon.services.snapshots import SnapshotManager

router = APIRouter(prefix="/versions", tags=["versions"])


@router.post("")
def create_version(request: Request, body: SnapshotCreate) -> JSONResponse:
    """Snapshot the current world state under a new version."""
    manager = SnapshotManager(request.app.state.storage)
    snapshot = manager.create(body.version, body.notes)
    return JSONResponse(
        status_code=201,
        content={
            "message": "Version created",
            "version": snapshot.version,
            "created": snapshot.created,
            "notes": snapshot.notes,
            "path": version_dir(snapshot.version),
        },
    )


@router.get("")
def list_versions(request: Request) -> dict[str, Any]:
    manager = SnapshotManager(request.app.state.storage)
    versions = manager.list_versions()
    return {"versions": [info.model_dump(exclude_none=True) for info in versions]}


@router.get("/{version}")
def get_version(request: Request, version: str) -> dict[str, Any]:
    manager = SnapshotManager(request.app.state.storage)
    return manager.get(version).model_dump()


@router.post("/{version}/restore")
def restore_version(request: Request, version: str) -> dict[str, str]:
    """Overwrite the live documents with the contents of ``version``."""
    manager = SnapshotManager(request.app.state.storage)
    manager.restore(version)
    return {"message": "Restored successfully", "version": version}
