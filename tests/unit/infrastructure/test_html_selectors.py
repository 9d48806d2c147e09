"""Tests for the BeautifulSoup selector helpers."""

from __future__ import annotations

from bs4 import BeautifulSoup

from streamvix.infrastructure.common.html_selectors import (
    extract_attr,
    extract_text,
    parse_html,
)

_HTML = """<html>
<head><title>  Dune - Parte Due  </title></head>
<body>
<div id="app" data-page='{"version":"v1"}'></div>
<span class="empty"></span>
<span class="name">Fallback name</span>
<iframe src="/embed/1"></iframe>
<iframe></iframe>
</body>
</html>"""


class TestParseHtml:
    def test_returns_soup(self) -> None:
        assert isinstance(parse_html(_HTML), BeautifulSoup)

    def test_empty_html(self) -> None:
        soup = parse_html("")
        assert soup.select_one("title") is None


class TestExtractText:
    def test_primary_selector_stripped(self) -> None:
        assert extract_text(parse_html(_HTML), "title") == "Dune - Parte Due"

    def test_skips_empty_match_for_fallback(self) -> None:
        soup = parse_html(_HTML)
        assert extract_text(soup, "span.empty", "span.name") == "Fallback name"

    def test_empty_when_no_match(self) -> None:
        soup = parse_html(_HTML)
        assert extract_text(soup, "h1", "h2") == ""


class TestExtractAttr:
    def test_primary_selector(self) -> None:
        soup = parse_html(_HTML)
        assert extract_attr(soup, "div#app", "data-page") == '{"version":"v1"}'

    def test_fallback_selector(self) -> None:
        soup = parse_html(_HTML)
        assert extract_attr(soup, "video", "src", "iframe") == "/embed/1"

    def test_default_when_missing(self) -> None:
        soup = parse_html("<iframe></iframe>")
        assert extract_attr(soup, "iframe", "src") == ""
