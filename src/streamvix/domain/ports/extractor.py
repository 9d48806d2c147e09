"""Port for extracting playback credentials from a player page."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from streamvix.domain.entities.stremio import ExtractedPlayback


@runtime_checkable
class PageExtractorPort(Protocol):
    """Navigates a target page and scrapes token, expiry and server URL.

    Implementations handle site-specific navigation (iframes, version
    headers) and return None when any step fails.
    """

    async def extract(self, target_url: str) -> ExtractedPlayback | None:
        ...
