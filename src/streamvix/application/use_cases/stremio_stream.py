"""Stremio stream resolution use case.

IMDb ID -> TMDB ID -> vixsrc catalog check -> target page
-> (MediaFlow proxy URL | scraped playlist URL) -> StreamDescriptor list.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

import structlog

from streamvix.domain.entities.stremio import (
    ContentIdentifier,
    ResolvedTarget,
    StreamDescriptor,
    StremioContentType,
)
from streamvix.domain.ports.catalog import CatalogPort
from streamvix.domain.ports.extractor import PageExtractorPort
from streamvix.domain.ports.tmdb import MetadataResolverPort

log = structlog.get_logger(__name__)


class _ProxyRewriter(Protocol):
    """Rewrites a target page URL into a proxy extractor URL."""

    def rewrite(self, target_url: str) -> str: ...


# (numeric_id, content_type, identifier) -> target page URL
_TargetUrlFn = Callable[[str, StremioContentType, ContentIdentifier], str]

_FALLBACK_TITLES: dict[tuple[bool, str], str] = {
    (False, "movie"): "Movie Stream (Direct)",
    (False, "series"): "Series Stream (Direct)",
    (True, "movie"): "Movie Stream (Proxy)",
    (True, "series"): "Series Stream (Proxy)",
}


def _build_title(
    base_title: str | None,
    content_type: StremioContentType,
    identifier: ContentIdentifier,
    *,
    proxied: bool,
) -> str:
    """Pick the display title; series always get the ``(SxEy)`` suffix."""
    is_movie = content_type == "movie"
    title = base_title or _FALLBACK_TITLES[(proxied, "movie" if is_movie else "series")]
    if is_movie:
        return title
    return f"{title} {identifier.episode_tag}"


class StremioStreamUseCase:
    """Resolve a Stremio stream request into playable stream descriptors.

    Flow:
        1. Split the Stremio ID into IMDb ID + season/episode.
        2. Translate the IMDb ID to a TMDB ID.
        3. Confirm vixsrc lists that TMDB ID.
        4. Build the target page URL.
        5. Proxy mode: rewrite the URL through MediaFlow.
           Direct mode: scrape token/expires/playlist from the page.
        6. Synthesize the title and emit one StreamDescriptor.

    Every network call is awaited in sequence. ``execute`` never raises.
    """

    def __init__(
        self,
        *,
        tmdb: MetadataResolverPort,
        catalog: CatalogPort,
        extractor: PageExtractorPort,
        target_url_fn: _TargetUrlFn,
        proxy: _ProxyRewriter | None = None,
    ) -> None:
        self._tmdb = tmdb
        self._catalog = catalog
        self._extractor = extractor
        self._target_url_fn = target_url_fn
        self._proxy = proxy

    async def execute(
        self, raw_id: str, content_type: StremioContentType
    ) -> list[StreamDescriptor]:
        """Resolve streams for ``raw_id``; empty list on any failure."""
        try:
            return await self._resolve(raw_id, content_type)
        except Exception:
            log.error(
                "stremio_stream_failed",
                raw_id=raw_id,
                content_type=content_type,
                exc_info=True,
            )
            return []

    async def _resolve(
        self, raw_id: str, content_type: StremioContentType
    ) -> list[StreamDescriptor]:
        identifier = ContentIdentifier.parse(raw_id)

        target = await self._resolve_target(identifier, content_type)
        if target is None:
            return []

        descriptor: StreamDescriptor | None
        if self._proxy is not None:
            descriptor = await self._proxied_stream(
                self._proxy, target, identifier, content_type
            )
        else:
            descriptor = await self._direct_stream(target, identifier, content_type)

        if descriptor is None:
            return []

        log.info(
            "stremio_stream_resolved",
            raw_id=raw_id,
            tmdb_id=target.numeric_id,
            proxied=self._proxy is not None,
            name=descriptor.name,
        )
        return [descriptor]

    async def _resolve_target(
        self, identifier: ContentIdentifier, content_type: StremioContentType
    ) -> ResolvedTarget | None:
        numeric_id = await self._tmdb.resolve_numeric_id(identifier.base_id)
        if not numeric_id:
            log.info("stremio_no_tmdb_id", imdb_id=identifier.base_id)
            return None

        if not await self._catalog.exists(numeric_id, content_type):
            log.info(
                "stremio_not_in_catalog",
                imdb_id=identifier.base_id,
                tmdb_id=numeric_id,
                content_type=content_type,
            )
            return None

        return ResolvedTarget(
            numeric_id=numeric_id,
            target_url=self._target_url_fn(numeric_id, content_type, identifier),
        )

    async def _proxied_stream(
        self,
        proxy: _ProxyRewriter,
        target: ResolvedTarget,
        identifier: ContentIdentifier,
        content_type: StremioContentType,
    ) -> StreamDescriptor:
        stream_url = proxy.rewrite(target.target_url)
        log.debug("stremio_proxy_url_built", target_url=target.target_url)

        tmdb_title = await self._tmdb.resolve_title(identifier.base_id, content_type)
        return StreamDescriptor(
            name=_build_title(tmdb_title, content_type, identifier, proxied=True),
            stream_url=stream_url,
            referer=target.target_url,
        )

    async def _direct_stream(
        self,
        target: ResolvedTarget,
        identifier: ContentIdentifier,
        content_type: StremioContentType,
    ) -> StreamDescriptor | None:
        playback = await self._extractor.extract(target.target_url)
        if playback is None:
            log.info("stremio_extraction_empty", target_url=target.target_url)
            return None

        base_title = playback.page_title or await self._tmdb.resolve_title(
            identifier.base_id, content_type
        )
        return StreamDescriptor(
            name=_build_title(base_title, content_type, identifier, proxied=False),
            stream_url=playback.stream_url,
            referer=playback.referer,
        )
