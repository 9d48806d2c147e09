"""Stremio addon API endpoints (manifest, stream)."""

from __future__ import annotations

from typing import Any, cast

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from streamvix import __version__
from streamvix.domain.entities.stremio import (
    StreamDescriptor,
    StremioContentType,
    StremioStream,
)
from streamvix.interfaces.app_state import AppState

log = structlog.get_logger(__name__)

router = APIRouter(tags=["stremio"])

_ADDON_ID = "org.stremio.vixsrc"

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "*",
}


def _build_manifest() -> dict[str, Any]:
    """Build the Stremio addon manifest."""
    return {
        "id": _ADDON_ID,
        "version": __version__,
        "name": "StreamViX",
        "description": "Addon for Vixsrc streams.",
        "icon": "icon.png",
        "types": ["movie", "series"],
        "idPrefixes": ["tt"],
        "catalogs": [],
        "resources": ["stream"],
    }


def _to_stremio_streams(descriptors: list[StreamDescriptor]) -> list[dict[str, Any]]:
    """Format descriptors for Stremio, skipping any without a stream URL."""
    return [
        StremioStream(title=d.name, url=d.stream_url, referer=d.referer).to_dict()
        for d in descriptors
        if d.stream_url
    ]


@router.get("/manifest.json")
async def stremio_manifest() -> JSONResponse:
    """Serve the Stremio addon manifest."""
    return JSONResponse(content=_build_manifest(), headers=_CORS_HEADERS)


@router.get("/stream/{content_type}/{stream_id}.json")
async def stremio_stream(
    request: Request,
    content_type: str,
    stream_id: str,
) -> JSONResponse:
    """Resolve streams for a movie or episode.

    Always answers 200; resolution failures yield an empty list.
    """
    if content_type not in ("movie", "series"):
        return JSONResponse(content={"streams": []}, headers=_CORS_HEADERS)

    state = cast(AppState, request.app.state)
    ct = cast(StremioContentType, content_type)

    log.info("stremio_stream_request", stream_id=stream_id, content_type=ct)
    descriptors = await state.stremio_stream_uc.execute(stream_id, ct)
    streams = _to_stremio_streams(descriptors)

    log.info(
        "stremio_stream_response",
        stream_id=stream_id,
        streams_returned=len(streams),
    )
    return JSONResponse(content={"streams": streams}, headers=_CORS_HEADERS)
