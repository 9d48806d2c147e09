"""FastAPI application factory (create_app)."""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable

import structlog
from fastapi import FastAPI, Request
from starlette.responses import Response

from streamvix import __version__
from streamvix.infrastructure.config import AppConfig
from streamvix.interfaces.app_state import AppState
from streamvix.interfaces.composition import lifespan

log = structlog.get_logger(__name__)


def create_app(config: AppConfig) -> FastAPI:
    """Create FastAPI app: configuration ONLY, NO resource initialization.

    Resources (HTTP client, use case) are created in lifespan().
    """
    app = FastAPI(
        title="StreamViX",
        description="Stremio addon for vixsrc.to streams",
        version=__version__,
        lifespan=lifespan,
    )

    app.state = AppState()
    app.state.config = config

    from streamvix.interfaces.api.stremio import router as stremio_router

    app.include_router(stremio_router)

    @app.get("/healthz")
    async def healthz() -> dict[str, str | bool]:
        """Liveness probe; returns 200 as long as the process is running."""
        return {"status": "ok", "proxy": config.proxy_enabled}

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ):
        start = time.perf_counter()
        try:
            response = await call_next(request)
            return response
        finally:
            duration_ms = (time.perf_counter() - start) * 1000.0
            status_code = getattr(locals().get("response", None), "status_code", 500)

            log.info(
                "http_request",
                method=request.method,
                path=request.url.path,
                status_code=status_code,
                duration_ms=round(duration_ms, 2),
                client_host=(request.client.host if request.client else None),
            )

    return app
