"""Domain entities for the Stremio stream pipeline.

Pure value objects with no framework dependencies, no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from streamvix.domain.exceptions import ParseFailure

StremioContentType = Literal["movie", "series"]

# Appended to every direct stream URL; asks the CDN for the 1080p rendition.
_QUALITY_MARKER = "&h=1"


@dataclass(frozen=True)
class ContentIdentifier:
    """Stremio content ID split into its positional parts.

    Created from URL path: ``tt1234567`` (movie) or
    ``tt1234567:1:5`` (series, season 1, episode 5).
    """

    base_id: str
    season: str | None = None
    episode: str | None = None

    @classmethod
    def parse(cls, raw_id: str) -> ContentIdentifier:
        """Split a colon-delimited ID. Missing parts stay ``None``."""
        parts = raw_id.split(":")
        return cls(
            base_id=parts[0],
            season=parts[1] if len(parts) > 1 else None,
            episode=parts[2] if len(parts) > 2 else None,
        )

    @property
    def episode_tag(self) -> str:
        """``(S2E5)`` style suffix used in series stream titles."""
        return f"(S{self.season or ''}E{self.episode or ''})"


@dataclass(frozen=True)
class ResolvedTarget:
    """A vixsrc page that is known to exist in the site catalog."""

    numeric_id: str  # TMDB ID, used by vixsrc as its catalog key
    target_url: str  # Page to scrape or proxy; also the default Referer


@dataclass(frozen=True)
class ExtractedPlayback:
    """Short-lived playback credentials scraped from the player page."""

    token: str
    expires: str
    server_url: str
    referer: str
    page_title: str = ""

    def __post_init__(self) -> None:
        missing = [
            name
            for name in ("token", "expires", "server_url")
            if not getattr(self, name)
        ]
        if missing:
            raise ParseFailure(f"incomplete playback data: {', '.join(missing)}")

    @property
    def stream_url(self) -> str:
        """Server URL with token, expiry and the quality marker appended."""
        sep = "&" if "?b=1" in self.server_url else "?"
        return (
            f"{self.server_url}{sep}token={self.token}&expires={self.expires}"
            f"{_QUALITY_MARKER}"
        )


@dataclass(frozen=True)
class StreamDescriptor:
    """One playable stream produced by the resolution pipeline."""

    name: str
    stream_url: str
    referer: str


@dataclass(frozen=True)
class StremioStream:
    """Stremio protocol Stream object (JSON-serializable)."""

    title: str
    url: str
    referer: str
    not_web_ready: bool = True

    def to_dict(self) -> dict[str, object]:
        return {
            "title": self.title,
            "url": self.url,
            "behaviorHints": {
                "notWebReady": self.not_web_ready,
                "proxyHeaders": {"request": {"Referer": self.referer}},
            },
        }
