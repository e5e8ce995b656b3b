"""FastAPI application factory.

API layer:
- Validates inputs, reads/writes the content store
- Returns payloads for UI
- Forbidden: summary computation (delegated to awardops.aggregation)
"""

from __future__ import annotations

import logging
import os
from typing import Generator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from awardops import __version__
from awardops.config import StoreConfig, StoreConfigError
from awardops.store.session import StoreSession

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",  # Next.js dev server
    "http://127.0.0.1:3000",
]


def _store_config(app: FastAPI) -> StoreConfig:
    """Return the app's store config, reading the environment on first use."""
    config = app.state.store_config
    if config is None:
        config = StoreConfig.from_env()
        app.state.store_config = config
    return config


def get_store_session(request: Request) -> Generator[StoreSession, None, None]:
    """Dependency to get a content store session.

    Yields:
        Store session that is automatically closed after request.

    Raises:
        StoreConfigError: If the store connection is not configured.
    """
    session = StoreSession(_store_config(request.app))
    try:
        yield session
    finally:
        session.close()


def _cors_origins() -> list[str]:
    raw = os.environ.get("AWARDOPS_CORS_ORIGINS", "")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or DEFAULT_CORS_ORIGINS


def create_app(store_config: StoreConfig | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        store_config: Content store connection. When omitted it is read from
            the environment on the first request that needs the store.

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(
        title="Award Operations API",
        description="Ceremony award nominations, approvals and recognition summaries",
        version=__version__,
    )
    app.state.store_config = store_config

    # Add CORS middleware for UI access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StoreConfigError)
    async def store_not_configured(request: Request, exc: StoreConfigError) -> JSONResponse:
        """Report a missing store configuration as a server error."""
        logger.error(f"[{request.url.path}] Content store is not configured: {exc}")
        return JSONResponse(status_code=500, content={"detail": "Content store is not configured."})

    # Include routes
    from awardops.api.routes import awards, overview, reference

    app.include_router(reference.router, prefix="/api")
    app.include_router(overview.router, prefix="/api")
    app.include_router(awards.router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()


def main() -> None:
    """Serve the default app with uvicorn."""
    import uvicorn

    host = os.environ.get("AWARDOPS_HOST", "127.0.0.1")
    port = int(os.environ.get("AWARDOPS_PORT", "8000"))
    uvicorn.run(app, host=host, port=port)
