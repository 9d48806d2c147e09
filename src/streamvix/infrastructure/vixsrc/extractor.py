"""vixsrc page extractor: navigates to the player page and scrapes credentials.

Two page shapes exist:

* direct embed (``/movie/{id}/``, ``/tv/{id}/{s}/{e}/``): the player script
  is in the target page itself.
* versioned iframe (``/iframe/...``): the page is an Inertia.js app. It is
  fetched with the current asset version and the player lives in a nested
  ``<iframe>`` which is fetched in a second hop.
"""

from __future__ import annotations

from urllib.parse import urljoin, urlparse

import httpx
import structlog

from streamvix.domain.entities.stremio import ExtractedPlayback
from streamvix.domain.exceptions import StreamResolutionError, UpstreamUnavailable
from streamvix.infrastructure.vixsrc.player_parser import (
    extract_iframe_src,
    parse_player_page,
    parse_site_version,
)
from streamvix.infrastructure.vixsrc.urls import IFRAME_SEGMENT, VERSION_PATH

log = structlog.get_logger(__name__)


def _origin_of(url: str) -> str:
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}"


def _inertia_headers(version: str, referer: str) -> dict[str, str]:
    return {
        "x-inertia": "true",
        "x-inertia-version": version,
        "Referer": referer,
    }


class VixSrcExtractor:
    """Resolves a vixsrc target page to ``ExtractedPlayback``.

    Implements ``PageExtractorPort``.
    """

    def __init__(self, *, http_client: httpx.AsyncClient) -> None:
        self._http = http_client

    async def extract(self, target_url: str) -> ExtractedPlayback | None:
        """Return playback credentials, or None if any step fails."""
        try:
            html, referer = await self._load_player_page(target_url)
            playback = parse_player_page(html, referer=referer)
        except httpx.HTTPError:
            log.warning("vixsrc_request_failed", url=target_url, exc_info=True)
            return None
        except StreamResolutionError as exc:
            log.warning("vixsrc_extraction_failed", url=target_url, reason=str(exc))
            return None

        log.debug("vixsrc_extracted", url=target_url, referer=playback.referer)
        return playback

    async def _load_player_page(self, target_url: str) -> tuple[str, str]:
        """Fetch the markup holding the player script and its referer."""
        if IFRAME_SEGMENT not in target_url:
            return await self._fetch(target_url), target_url

        origin = _origin_of(target_url)
        version = await self._site_version(origin)

        outer = await self._fetch(
            target_url, headers=_inertia_headers(version, f"{origin}/")
        )
        player_url = urljoin(origin, extract_iframe_src(outer))
        log.debug("vixsrc_iframe_found", url=target_url, player_url=player_url)

        inner = await self._fetch(
            player_url, headers=_inertia_headers(version, target_url)
        )
        return inner, player_url

    async def _site_version(self, origin: str) -> str:
        html = await self._fetch(
            f"{origin}{VERSION_PATH}",
            headers={"Referer": f"{origin}/", "Origin": origin},
        )
        return parse_site_version(html)

    async def _fetch(self, url: str, *, headers: dict[str, str] | None = None) -> str:
        resp = await self._http.get(url, headers=headers)
        if not resp.is_success:
            raise UpstreamUnavailable(url, resp.status_code)
        return resp.text
