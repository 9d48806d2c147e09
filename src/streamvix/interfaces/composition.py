"""Composition root: dependency injection via FastAPI lifespan."""

from __future__ import annotations

import functools
from contextlib import asynccontextmanager
from typing import AsyncIterator, cast

import httpx
import structlog
from fastapi import FastAPI

from streamvix.application.use_cases.stremio_stream import StremioStreamUseCase
from streamvix.infrastructure.config.schema import AppConfig
from streamvix.infrastructure.mediaflow import MediaFlowProxy
from streamvix.infrastructure.tmdb import HttpxTmdbClient
from streamvix.infrastructure.vixsrc import (
    VixSrcCatalog,
    VixSrcExtractor,
    build_target_url,
)
from streamvix.interfaces.app_state import AppState

log = structlog.get_logger(__name__)


def _build_proxy(config: AppConfig) -> MediaFlowProxy | None:
    """MediaFlow proxy when both URL and password are configured."""
    if not config.proxy_enabled:
        log.info(
            "mediaflow_proxy_disabled",
            url_set=bool(config.mediaflow_url),
            password_set=bool(config.mediaflow_password),
        )
        return None
    log.info("mediaflow_proxy_enabled", url=config.mediaflow_url)
    return MediaFlowProxy(
        base_url=cast(str, config.mediaflow_url),
        api_password=cast(str, config.mediaflow_password),
    )


def build_stream_use_case(
    config: AppConfig, http_client: httpx.AsyncClient
) -> StremioStreamUseCase:
    """Wire the stream use case from configuration and a shared HTTP client."""
    if not config.tmdb_api_key:
        log.warning("tmdb_api_key_missing", effect="no stream can be resolved")

    return StremioStreamUseCase(
        tmdb=HttpxTmdbClient(
            api_key=config.tmdb_api_key,
            http_client=http_client,
            language=config.tmdb_language,
        ),
        catalog=VixSrcCatalog(
            http_client=http_client,
            origin=config.vixsrc_origin,
            lang=config.vixsrc_lang,
        ),
        extractor=VixSrcExtractor(http_client=http_client),
        target_url_fn=functools.partial(build_target_url, config.vixsrc_origin),
        proxy=_build_proxy(config),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan Hook: Initialize and cleanup all resources (DI Composition Root).

    Order matters:
        1. HTTP Client (shared by TMDB, catalog and extractor)
        2. Stream use case
    """
    state = cast(AppState, app.state)
    config = state.config

    # 1) HTTP client; no retry transport, a failed call fails the step.
    state.http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(config.http_timeout_seconds),
        headers={"User-Agent": config.http_user_agent},
        follow_redirects=True,
    )
    log.info("http_client_initialized", timeout=config.http_timeout_seconds)

    # 2) Stremio use case
    state.stremio_stream_uc = build_stream_use_case(config, state.http_client)

    log.info("app_startup_complete")

    try:
        yield
    finally:
        await state.http_client.aclose()
        log.info("http_client_closed")

        log.info("app_shutdown_complete")
