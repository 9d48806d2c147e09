"""End-to-end tests for the Stremio addon API.

Tests the full request-response cycle through:
    HTTP Request -> FastAPI Router -> Use Case -> real adapters -> JSON Response

Only the network is mocked (respx), so TMDB, catalog, extractor and proxy
adapters all run for real.

Endpoints covered:
    GET /manifest.json
    GET /stream/{type}/{id}.json
"""

from __future__ import annotations

import httpx
import pytest
import respx
from fastapi import FastAPI
from fastapi.testclient import TestClient

from streamvix.infrastructure.config import AppConfig
from streamvix.interfaces.api.stremio.router import router
from streamvix.interfaces.composition import build_stream_use_case

_TMDB = "https://api.themoviedb.org/3"
_VIXSRC = "https://vixsrc.to"


def _make_app(config: AppConfig) -> FastAPI:
    app = FastAPI()
    app.include_router(router)
    app.state.stremio_stream_uc = build_stream_use_case(config, httpx.AsyncClient())
    return app


def _mock_tmdb_movie(
    respx_mock: respx.MockRouter, title: str = "Dune - Parte due"
) -> None:
    respx_mock.get(f"{_TMDB}/find/tt15239678").respond(
        200, json={"movie_results": [{"id": 693134}], "tv_results": []}
    )
    respx_mock.get(f"{_TMDB}/movie/693134").respond(200, json={"title": title})


def _mock_tmdb_series(respx_mock: respx.MockRouter) -> None:
    respx_mock.get(f"{_TMDB}/find/tt0944947").respond(
        200, json={"movie_results": [], "tv_results": [{"id": 1399}]}
    )
    respx_mock.get(f"{_TMDB}/tv/1399").respond(200, json={"name": "Il Trono di Spade"})


@pytest.fixture()
def direct_config() -> AppConfig:
    return AppConfig(tmdb_api_key="k")


@pytest.fixture()
def proxy_config() -> AppConfig:
    return AppConfig(
        tmdb_api_key="k",
        mediaflow_url="https://mfp.example",
        mediaflow_password="pw",
    )


class TestManifest:
    def test_manifest(self, direct_config: AppConfig) -> None:
        client = TestClient(_make_app(direct_config))
        data = client.get("/manifest.json").json()
        assert data["id"] == "org.stremio.vixsrc"
        assert data["resources"] == ["stream"]


class TestDirectMode:
    def test_movie_stream(
        self,
        direct_config: AppConfig,
        player_page: str,
        respx_mock: respx.MockRouter,
    ) -> None:
        _mock_tmdb_movie(respx_mock)
        respx_mock.get(f"{_VIXSRC}/api/list/movie").respond(
            200, json=[{"tmdb_id": 693134}]
        )
        respx_mock.get(f"{_VIXSRC}/movie/693134/").respond(200, text=player_page)

        client = TestClient(_make_app(direct_config))
        streams = client.get("/stream/movie/tt15239678.json").json()["streams"]

        assert streams == [
            {
                "title": "Dune - Parte Due",
                "url": (
                    "https://vixsrc.to/playlist/245591?b=1"
                    "&token=abc123XYZ&expires=1735689600&h=1"
                ),
                "behaviorHints": {
                    "notWebReady": True,
                    "proxyHeaders": {
                        "request": {"Referer": "https://vixsrc.to/movie/693134/"}
                    },
                },
            }
        ]

    def test_series_stream(
        self,
        direct_config: AppConfig,
        player_page: str,
        respx_mock: respx.MockRouter,
    ) -> None:
        _mock_tmdb_series(respx_mock)
        respx_mock.get(f"{_VIXSRC}/api/list/tv").respond(200, json=[{"tmdb_id": 1399}])
        respx_mock.get(f"{_VIXSRC}/tv/1399/1/5/").respond(200, text=player_page)

        client = TestClient(_make_app(direct_config))
        streams = client.get("/stream/series/tt0944947:1:5.json").json()["streams"]

        assert len(streams) == 1
        assert streams[0]["title"] == "Dune - Parte Due (S1E5)"
        assert streams[0]["behaviorHints"]["proxyHeaders"]["request"] == {
            "Referer": "https://vixsrc.to/tv/1399/1/5/"
        }

    def test_not_in_catalog(
        self,
        direct_config: AppConfig,
        respx_mock: respx.MockRouter,
    ) -> None:
        respx_mock.get(f"{_TMDB}/find/tt15239678").respond(
            200, json={"movie_results": [{"id": 693134}], "tv_results": []}
        )
        respx_mock.get(f"{_VIXSRC}/api/list/movie").respond(200, json=[{"tmdb_id": 1}])

        client = TestClient(_make_app(direct_config))
        resp = client.get("/stream/movie/tt15239678.json")

        assert resp.status_code == 200
        assert resp.json() == {"streams": []}

    def test_player_page_down(
        self,
        direct_config: AppConfig,
        respx_mock: respx.MockRouter,
    ) -> None:
        respx_mock.get(f"{_TMDB}/find/tt15239678").respond(
            200, json={"movie_results": [{"id": 693134}], "tv_results": []}
        )
        respx_mock.get(f"{_VIXSRC}/api/list/movie").respond(
            200, json=[{"tmdb_id": 693134}]
        )
        respx_mock.get(f"{_VIXSRC}/movie/693134/").respond(503)

        client = TestClient(_make_app(direct_config))
        assert client.get("/stream/movie/tt15239678.json").json() == {"streams": []}


class TestProxyMode:
    def test_series_proxy_stream(
        self,
        proxy_config: AppConfig,
        respx_mock: respx.MockRouter,
    ) -> None:
        _mock_tmdb_series(respx_mock)
        respx_mock.get(f"{_VIXSRC}/api/list/tv").respond(200, json=[{"tmdb_id": 1399}])

        client = TestClient(_make_app(proxy_config))
        streams = client.get("/stream/series/tt0944947:2:5.json").json()["streams"]

        assert streams == [
            {
                "title": "Il Trono di Spade (S2E5)",
                "url": (
                    "https://mfp.example/extractor/video?host=VixCloud"
                    "&redirect_stream=true&api_password=pw"
                    "&d=https%3A%2F%2Fvixsrc.to%2Ftv%2F1399%2F2%2F5%2F"
                ),
                "behaviorHints": {
                    "notWebReady": True,
                    "proxyHeaders": {
                        "request": {"Referer": "https://vixsrc.to/tv/1399/2/5/"}
                    },
                },
            }
        ]
