"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from achgen.api.routes import ach, health
from achgen.core.config import AppSettings
from achgen.core.exceptions import BatchRejectedError, FileStoreError
from achgen.core.log import configure_logging
from achgen.core.protocols import IFileStore
from achgen.persistence import create_file_store
from achgen.services.ach_file_service import AchFileService


async def _batch_rejected(request: Request, exc: BatchRejectedError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"issues": [issue.model_dump(mode="json") for issue in exc.issues]},
    )


async def _file_store_failed(request: Request, exc: FileStoreError) -> JSONResponse:
    return JSONResponse(status_code=502, content={"detail": "NACHA file could not be archived"})


def create_app(settings: AppSettings | None = None, file_store: IFileStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    ``settings`` and ``file_store`` default to environment-driven values; tests
    pass their own.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize and tear down application resources."""
        app_settings = settings or AppSettings()
        configure_logging(app_settings.log_level)
        app.state.settings = app_settings
        app.state.ach_service = AchFileService(
            settings=app_settings,
            file_store=file_store or create_file_store(app_settings),
        )
        yield

    app = FastAPI(
        title="achgen NACHA File Service",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.add_exception_handler(BatchRejectedError, _batch_rejected)
    app.add_exception_handler(FileStoreError, _file_store_failed)
    app.include_router(health.router)
    app.include_router(ach.router, prefix="/ach")
    return app
