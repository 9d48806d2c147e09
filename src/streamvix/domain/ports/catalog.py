"""Port for checking whether the streaming site serves a title."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from streamvix.domain.entities.stremio import StremioContentType


@runtime_checkable
class CatalogPort(Protocol):
    async def exists(self, numeric_id: str, content_type: StremioContentType) -> bool:
        """True only when the site lists ``numeric_id``; fails closed."""
        ...
