"""Stream resolution errors.

Raised inside a component and collapsed to ``None``/``False`` at its
public boundary; none of these reach the Stremio surface.
"""

from __future__ import annotations


class StreamResolutionError(Exception):
    """Base class for all resolution pipeline errors."""


class ConfigurationMissing(StreamResolutionError):
    """Raised when an optional setting (API key, proxy credentials) is unset."""


class UpstreamUnavailable(StreamResolutionError):
    """Raised on a transport failure or non-2xx answer from a dependency."""

    def __init__(self, url: str, status_code: int | None = None) -> None:
        self.url = url
        self.status_code = status_code
        detail = f"status {status_code}" if status_code is not None else "no response"
        super().__init__(f"{url}: {detail}")


class ParseFailure(StreamResolutionError):
    """Raised when expected HTML/JSON structure is absent."""


class NotFound(StreamResolutionError):
    """Raised when a lookup yields no matching entry."""
