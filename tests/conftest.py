"""Shared test fixtures for StreamViX test suite."""

from __future__ import annotations

from unittest.mock import AsyncMock

import httpx
import pytest
import respx

from streamvix.domain.entities.stremio import ExtractedPlayback

# ---------------------------------------------------------------------------
# HTML fixtures (literal vixsrc markup)
# ---------------------------------------------------------------------------

_PLAYER_PAGE = """<!DOCTYPE html>
<html>
<head><title>Dune - Parte Due</title></head>
<body>
<script src="/js/app.js"></script>
<script>window.video = {"id": 245591, "name": "Dune"};</script>
<script>
    window.masterPlaylist = {
        params: {
            'token': 'abc123XYZ',
            'expires': '1735689600',
            'asn': '',
        },
        url: 'https://vixsrc.to/playlist/245591?b=1',
    }
    window.canPlayFHD = true
</script>
</body>
</html>
"""

_VERSION_PAGE = """<html><body>
<div id="app" data-page='{"component":"RequestTitle","version":"d8c4a1f0e2"}'></div>
</body></html>"""

_IFRAME_PAGE = """<html><body>
<iframe src="/embed/245591?token=t0&amp;canPlayFHD=1" allowfullscreen></iframe>
</body></html>"""


@pytest.fixture()
def player_page() -> str:
    return _PLAYER_PAGE


@pytest.fixture()
def version_page() -> str:
    return _VERSION_PAGE


@pytest.fixture()
def iframe_page() -> str:
    return _IFRAME_PAGE


# ---------------------------------------------------------------------------
# Domain fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def playback() -> ExtractedPlayback:
    return ExtractedPlayback(
        token="abc123XYZ",
        expires="1735689600",
        server_url="https://vixsrc.to/playlist/245591?b=1",
        referer="https://vixsrc.to/movie/693134/",
        page_title="Dune - Parte Due",
    )


# ---------------------------------------------------------------------------
# Mock port fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_tmdb() -> AsyncMock:
    """Mock MetadataResolverPort: resolves to TMDB 999 titled 'Titolo'."""
    tmdb = AsyncMock()
    tmdb.resolve_numeric_id = AsyncMock(return_value="999")
    tmdb.resolve_title = AsyncMock(return_value="Titolo")
    return tmdb


@pytest.fixture()
def mock_catalog() -> AsyncMock:
    """Mock CatalogPort: every ID is listed."""
    catalog = AsyncMock()
    catalog.exists = AsyncMock(return_value=True)
    return catalog


@pytest.fixture()
def mock_extractor(playback: ExtractedPlayback) -> AsyncMock:
    extractor = AsyncMock()
    extractor.extract = AsyncMock(return_value=playback)
    return extractor


@pytest.fixture()
def http_client() -> httpx.AsyncClient:
    """Real httpx.AsyncClient for use with respx mocking."""
    return httpx.AsyncClient()


@pytest.fixture()
def respx_mock() -> respx.MockRouter:
    """Explicit respx mock router for request interception."""
    with respx.mock(assert_all_called=False) as router:
        yield router
