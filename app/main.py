"""FastAPI application: entry point."""

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.routes import delegates, health, home
from config import Settings, get_settings

logger: logging.Logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings: Settings = get_settings()
    logger.info("Node: %s", settings.node.node_info_for_logging())
    yield


def create_app() -> FastAPI:
    settings: Settings = get_settings()
    app: FastAPI = FastAPI(
        title="Node Explorer",
        version="0.1.0",
        lifespan=_lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    @app.exception_handler(Exception)
    async def _on_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled: %s", exc)
        return JSONResponse(
            status_code=500,
            content={"detail": str(exc), "type": type(exc).__name__},
        )

    app.include_router(health.router)
    app.include_router(home.router)
    app.include_router(delegates.router)

    return app


app: FastAPI = create_app()


def start() -> None:
    """Entry point for explorer-api."""
    root: Path = Path(__file__).resolve().parent.parent
    os.chdir(root)

    for candidate in (root / ".env", root.parent / ".env"):
        if candidate.exists():
            load_dotenv(candidate, override=False)

    reload: bool = os.environ.get("EXPLORER_RELOAD", "false").lower() in ("1", "true", "yes")
    uvicorn.run(
        "app.main:app",
        host=os.environ.get("EXPLORER_HOST", "127.0.0.1"),
        port=int(os.environ.get("EXPLORER_PORT", "8000")),
        reload=reload,
    )
