"""Port for TMDB metadata lookups."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from streamvix.domain.entities.stremio import StremioContentType


@runtime_checkable
class MetadataResolverPort(Protocol):
    """Async interface for IMDb -> TMDB translation and title lookup.

    Every method returns ``None`` on failure instead of raising.
    """

    async def resolve_numeric_id(self, base_id: str) -> str | None:
        """Translate an IMDb ID into the TMDB numeric ID (movie preferred)."""
        ...

    async def resolve_title(
        self, base_id: str, content_type: StremioContentType
    ) -> str | None:
        """Get the localized display title for an IMDb ID."""
        ...
