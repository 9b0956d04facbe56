"""FastAPI application for the selffit JSON API."""

from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
from typing import Callable

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..errors import NotFoundError
from ..services.app import SelfFitApp
from .routers import settings, stats, types, workouts


def create_app(
    data_dir: Path | None = None,
    clock: Callable[[], datetime] = datetime.now,
) -> FastAPI:
    """Create and configure the FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the store for the data directory on startup."""
        app.state.selffit = await SelfFitApp.open(data_dir, clock=clock)
        yield

    app = FastAPI(
        title="selffit",
        description="Personal workout scheduling tracker",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(workouts.router)
    app.include_router(stats.router)
    app.include_router(settings.router)
    app.include_router(types.router)

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"error": str(exc)})

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        return JSONResponse(status_code=422, content={"error": str(exc)})

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app