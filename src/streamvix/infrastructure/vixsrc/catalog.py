"""vixsrc catalog membership check via the public list API."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from streamvix.domain.entities.stremio import StremioContentType
from streamvix.infrastructure.vixsrc.urls import DEFAULT_ORIGIN, site_type

log = structlog.get_logger(__name__)


def _contains_tmdb_id(items: list[Any], numeric_id: str) -> bool:
    for item in items:
        if not isinstance(item, dict):
            continue
        tmdb_id = item.get("tmdb_id")
        if tmdb_id and str(tmdb_id) == str(numeric_id):
            return True
    return False


class VixSrcCatalog:
    """Checks a TMDB ID against the full per-type vixsrc listing.

    Implements ``CatalogPort``. The listing is downloaded on every call and
    any failure counts as "not listed".
    """

    def __init__(
        self,
        *,
        http_client: httpx.AsyncClient,
        origin: str = DEFAULT_ORIGIN,
        lang: str = "it",
    ) -> None:
        self._http = http_client
        self._origin = origin
        self._lang = lang

    async def exists(self, numeric_id: str, content_type: StremioContentType) -> bool:
        kind = site_type(content_type)
        url = f"{self._origin}/api/list/{kind}"
        log.debug("vixsrc_catalog_check", tmdb_id=numeric_id, kind=kind)

        try:
            resp = await self._http.get(url, params={"lang": self._lang})
        except httpx.HTTPError:
            log.warning("vixsrc_catalog_request_failed", kind=kind, exc_info=True)
            return False

        if not resp.is_success:
            log.warning("vixsrc_catalog_http_error", kind=kind, status=resp.status_code)
            return False

        try:
            data = resp.json()
        except ValueError:
            log.warning("vixsrc_catalog_invalid_json", kind=kind)
            return False

        if not isinstance(data, list):
            log.warning("vixsrc_catalog_unexpected_format", kind=kind)
            return False

        found = _contains_tmdb_id(data, numeric_id)
        log.info("vixsrc_catalog_result", tmdb_id=numeric_id, kind=kind, found=found)
        return found
