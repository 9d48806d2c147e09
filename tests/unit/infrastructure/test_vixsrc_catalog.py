"""Tests for VixSrcCatalog (list API membership)."""

from __future__ import annotations

import httpx
import pytest
import respx

from streamvix.infrastructure.vixsrc.catalog import VixSrcCatalog

_MOVIE_LIST = "https://vixsrc.to/api/list/movie"
_TV_LIST = "https://vixsrc.to/api/list/tv"


@pytest.fixture()
def catalog(http_client: httpx.AsyncClient) -> VixSrcCatalog:
    return VixSrcCatalog(http_client=http_client)


class TestExists:
    @pytest.mark.asyncio()
    @respx.mock
    async def test_movie_found(self, catalog: VixSrcCatalog) -> None:
        route = respx.get(_MOVIE_LIST).respond(
            200, json=[{"tmdb_id": 11}, {"tmdb_id": 693134}]
        )

        assert await catalog.exists("693134", "movie") is True
        assert route.calls.last.request.url.params["lang"] == "it"

    @pytest.mark.asyncio()
    @respx.mock
    async def test_series_uses_tv_list(self, catalog: VixSrcCatalog) -> None:
        respx.get(_TV_LIST).respond(200, json=[{"tmdb_id": "1399"}])
        assert await catalog.exists("1399", "series") is True

    @pytest.mark.asyncio()
    @respx.mock
    async def test_not_listed(self, catalog: VixSrcCatalog) -> None:
        respx.get(_MOVIE_LIST).respond(200, json=[{"tmdb_id": 1}, {"title": "x"}])
        assert await catalog.exists("2", "movie") is False

    @pytest.mark.asyncio()
    @respx.mock
    async def test_empty_list(self, catalog: VixSrcCatalog) -> None:
        respx.get(_MOVIE_LIST).respond(200, json=[])
        assert await catalog.exists("2", "movie") is False

    @pytest.mark.asyncio()
    @respx.mock
    async def test_http_error_status(self, catalog: VixSrcCatalog) -> None:
        respx.get(_MOVIE_LIST).respond(500)
        assert await catalog.exists("1", "movie") is False

    @pytest.mark.asyncio()
    @respx.mock
    async def test_network_error(self, catalog: VixSrcCatalog) -> None:
        respx.get(_MOVIE_LIST).mock(side_effect=httpx.ConnectError("down"))
        assert await catalog.exists("1", "movie") is False

    @pytest.mark.asyncio()
    @respx.mock
    async def test_invalid_json(self, catalog: VixSrcCatalog) -> None:
        respx.get(_MOVIE_LIST).respond(200, text="<html>maintenance</html>")
        assert await catalog.exists("1", "movie") is False

    @pytest.mark.asyncio()
    @respx.mock
    async def test_non_list_body(self, catalog: VixSrcCatalog) -> None:
        respx.get(_MOVIE_LIST).respond(200, json={"tmdb_id": 1})
        assert await catalog.exists("1", "movie") is False

    @pytest.mark.asyncio()
    @respx.mock
    async def test_custom_origin_and_lang(self, http_client: httpx.AsyncClient) -> None:
        catalog = VixSrcCatalog(
            http_client=http_client, origin="https://mirror.example", lang="en"
        )
        route = respx.get("https://mirror.example/api/list/movie").respond(
            200, json=[{"tmdb_id": 5}]
        )

        assert await catalog.exists("5", "movie") is True
        assert route.calls.last.request.url.params["lang"] == "en"
