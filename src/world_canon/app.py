"""Web app entry point — FastAPI application serving the world store."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from world_canon.config import load_settings
from world_canon.errors import WorldError
from world_canon.logging import configure_logging
from world_canon.routes import domains, questions, versions, world
from world_canon.storage import LocalStorage

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from world_canon.config import Settings
    from world_canon.storage.base import Storage

logger = logging.getLogger(__name__)

API_PREFIX = "/api/world"


def init_storage(settings: Settings) -> Storage:
    """Open the world root on the local filesystem."""
    root = settings.storage.root
    if not root.is_dir():
        logger.warning("World path %s does not exist yet", root)
    return LocalStorage(root)


async def handle_world_error(request: Request, exc: WorldError) -> JSONResponse:
    """Render store errors as ``{error, ...context}`` with their status code."""
    if exc.status_code >= 500:  # noqa: PLR2004
        logger.error(
            "%s %s failed — %s", request.method, request.url.path, exc.message
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = load_settings()
    configure_logging(settings.app.log_level, log_file=settings.app.log_file or None)

    app.state.settings = settings
    app.state.storage = init_storage(settings)
    logger.info("World store ready — root=%s env=%s", settings.storage.root, settings.app.env)

    yield

    logger.info("World store shutting down")


def create_app() -> FastAPI:
    """Build the FastAPI application with all world routes."""
    app = FastAPI(title="World Canon", lifespan=lifespan)
    app.add_exception_handler(WorldError, handle_world_error)

    app.include_router(world.router, prefix=API_PREFIX)
    app.include_router(domains.router, prefix=API_PREFIX)
    app.include_router(questions.router, prefix=API_PREFIX)
    app.include_router(versions.router, prefix=API_PREFIX)

    @app.get("/healthz", tags=["health"])
    def healthz(request: Request) -> JSONResponse:
        storage = request.app.state.storage
        if not storage.exists(""):
            return JSONResponse(status_code=503, content={"status": "unavailable"})
        return JSONResponse(content={"status": "ok"})

    return app


def main() -> None:
    """Entry point for ``world-canon``."""
    settings = load_settings()
    uvicorn.run(
        "world_canon.app:create_app",
        factory=True,
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.app.log_level.lower(),
        reload=settings.app.is_development,
    )


if __name__ == "__main__":
    main()
