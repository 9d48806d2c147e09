"""vixsrc.to URL layout."""

from __future__ import annotations

from streamvix.domain.entities.stremio import ContentIdentifier, StremioContentType

DEFAULT_ORIGIN = "https://vixsrc.to"
VERSION_PATH = "/richiedi-un-titolo"

# Path segment that marks pages needing the versioned iframe hop.
IFRAME_SEGMENT = "/iframe"


def site_type(content_type: StremioContentType) -> str:
    """vixsrc uses ``tv`` where Stremio says ``series``."""
    return "movie" if content_type == "movie" else "tv"


def build_target_url(
    origin: str,
    numeric_id: str,
    content_type: StremioContentType,
    identifier: ContentIdentifier,
) -> str:
    """Page URL for a title; also the default Referer for playback.

    Series IDs without season/episode produce empty path segments.
    """
    if content_type == "movie":
        return f"{origin}/movie/{numeric_id}/"
    season = identifier.season or ""
    episode = identifier.episode or ""
    return f"{origin}/tv/{numeric_id}/{season}/{episode}/"
