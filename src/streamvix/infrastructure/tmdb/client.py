"""TMDB API client, async httpx implementation."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from streamvix.domain.entities.stremio import StremioContentType
from streamvix.domain.exceptions import (
    ConfigurationMissing,
    NotFound,
    ParseFailure,
    StreamResolutionError,
    UpstreamUnavailable,
)

log = structlog.get_logger(__name__)

_BASE_URL = "https://api.themoviedb.org/3"


class HttpxTmdbClient:
    """Async TMDB client using httpx.

    Implements ``MetadataResolverPort`` from domain.ports.tmdb. Lookups are
    not cached; every call hits the API.
    """

    def __init__(
        self,
        *,
        api_key: str | None,
        http_client: httpx.AsyncClient,
        language: str = "it",
        base_url: str = _BASE_URL,
    ) -> None:
        self._api_key = api_key
        self._http = http_client
        self._language = language
        self._base_url = base_url

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    async def _get(self, path: str, **extra: Any) -> dict[str, Any]:
        """GET a TMDB endpoint and return the decoded JSON object."""
        if not self._api_key:
            raise ConfigurationMissing("TMDB API key is not configured")

        url = f"{self._base_url}{path}"
        try:
            resp = await self._http.get(url, params={"api_key": self._api_key, **extra})
        except httpx.HTTPError as exc:
            raise UpstreamUnavailable(url) from exc

        if resp.status_code == 401:
            log.error("tmdb_api_key_invalid", status=401)
        if not resp.is_success:
            raise UpstreamUnavailable(url, resp.status_code)

        try:
            data = resp.json()
        except ValueError as exc:
            raise ParseFailure(f"{path}: invalid JSON") from exc
        if not isinstance(data, dict):
            raise ParseFailure(f"{path}: expected a JSON object")
        return data

    async def _find_numeric_id(self, imdb_id: str) -> str:
        data = await self._get(f"/find/{imdb_id}", external_source="imdb_id")

        # /find returns lists grouped by media type; movies win over TV.
        for media_type in ("movie_results", "tv_results"):
            results = data.get(media_type) or []
            first = results[0] if isinstance(results, list) and results else None
            if isinstance(first, dict) and first.get("id") is not None:
                return str(first["id"])

        raise NotFound(f"no TMDB movie or TV result for {imdb_id}")

    async def _detail_title(self, tmdb_id: str, content_type: StremioContentType) -> str:
        endpoint, field = ("movie", "title") if content_type == "movie" else ("tv", "name")
        data = await self._get(f"/{endpoint}/{tmdb_id}", language=self._language)
        title = data.get(field)
        if not title:
            raise ParseFailure(f"/{endpoint}/{tmdb_id}: {field} missing")
        return str(title)

    # ------------------------------------------------------------------
    # Public API (MetadataResolverPort)
    # ------------------------------------------------------------------

    async def resolve_numeric_id(self, base_id: str) -> str | None:
        """Translate an IMDb ID to a TMDB ID. None on any failure."""
        try:
            tmdb_id = await self._find_numeric_id(base_id)
        except ConfigurationMissing:
            log.error("tmdb_api_key_missing", imdb_id=base_id)
            return None
        except NotFound:
            log.warning("tmdb_no_results", imdb_id=base_id)
            return None
        except StreamResolutionError as exc:
            log.warning("tmdb_find_failed", imdb_id=base_id, reason=str(exc))
            return None

        log.debug("tmdb_id_resolved", imdb_id=base_id, tmdb_id=tmdb_id)
        return tmdb_id

    async def get_title_by_tmdb_id(
        self, tmdb_id: str, content_type: StremioContentType
    ) -> str | None:
        """Localized title for a TMDB numeric ID.

        Args:
            tmdb_id: TMDB numeric ID.
            content_type: "movie" or "series" (maps to TMDB "tv").

        Returns:
            Title or None if the lookup failed.
        """
        try:
            return await self._detail_title(tmdb_id, content_type)
        except StreamResolutionError as exc:
            log.warning(
                "tmdb_title_failed",
                tmdb_id=tmdb_id,
                content_type=content_type,
                reason=str(exc),
            )
            return None

    async def resolve_title(
        self, base_id: str, content_type: StremioContentType
    ) -> str | None:
        """Localized title for an IMDb ID (find + detail lookup)."""
        tmdb_id = await self.resolve_numeric_id(base_id)
        if tmdb_id is None:
            return None
        return await self.get_title_by_tmdb_id(tmdb_id, content_type)
