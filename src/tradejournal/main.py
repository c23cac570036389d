"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tradejournal.api.routers import (
    analysis_router,
    days_router,
    dividends_router,
    sync_router,
    transfer_router,
)
from tradejournal.app_context import AppContext
from tradejournal.config.logging_config import setup_logging
from tradejournal.config.settings import get_settings
from tradejournal.core.exceptions import (
    AppError,
    NotAuthenticatedError,
    NotFoundError,
    SyncError,
)


def _error_response(status_code: int, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.code, "message": exc.message},
    )


def create_app(context: Optional[AppContext] = None) -> FastAPI:
    """
    Build the FastAPI application.

    A pre-built context (already initialized) is attached as is; otherwise
    one is created from settings when the application starts.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        # Startup
        setup_logging()
        if getattr(app.state, "context", None) is None:
            app.state.context = AppContext(get_settings())
        await app.state.context.initialize()
        yield
        # Shutdown
        await app.state.context.close()

    settings = context.settings if context else get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Offline-first trade journal with realized-profit accounting",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.context = context

    # Include routers
    app.include_router(days_router)
    app.include_router(analysis_router)
    app.include_router(dividends_router)
    app.include_router(sync_router)
    app.include_router(transfer_router)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        """Global handler for application errors."""
        return _error_response(400, exc)

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return _error_response(404, exc)

    @app.exception_handler(NotAuthenticatedError)
    async def not_authenticated_handler(request: Request, exc: NotAuthenticatedError) -> JSONResponse:
        return _error_response(401, exc)

    @app.exception_handler(SyncError)
    async def sync_error_handler(request: Request, exc: SyncError) -> JSONResponse:
        return _error_response(503, exc)

    @app.get("/health")
    def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/")
    def root() -> dict[str, str]:
        """Root endpoint with API info."""
        return {
            "app": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
        }

    return app


app = create_app()


def run(host: str = "127.0.0.1", port: int = 8000) -> None:
    """Run the API server."""
    uvicorn.run("tradejournal.main:app", host=host, port=port)
