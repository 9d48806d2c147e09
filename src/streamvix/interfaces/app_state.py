"""Application state container for FastAPI dependency injection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from starlette.datastructures import State

from streamvix.infrastructure.config import AppConfig

if TYPE_CHECKING:
    from streamvix.application.use_cases.stremio_stream import StremioStreamUseCase


class AppState(State):
    """FastAPI application state with all DI resources.

    Lifecycle managed by composition.py::lifespan().
    """

    # Configuration
    config: AppConfig

    # Infrastructure
    http_client: httpx.AsyncClient

    # Application Services
    stremio_stream_uc: StremioStreamUseCase
