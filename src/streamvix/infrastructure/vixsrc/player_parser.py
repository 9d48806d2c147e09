"""Markup parsing for vixsrc pages.

Everything here is pure (str in, value out) so that site markup drift shows
up in the parser tests instead of somewhere in the HTTP pipeline.

The player page embeds its credentials in an inline script::

    window.masterPlaylist = {
        params: {
            'token': 'a1b2c3',
            'expires': '1735689600',
        },
        url: 'https://vixsrc.to/playlist/12345?b=1',
    }
"""

from __future__ import annotations

import json
import re

from bs4 import BeautifulSoup

from streamvix.domain.entities.stremio import ExtractedPlayback
from streamvix.domain.exceptions import ParseFailure
from streamvix.infrastructure.common.html_selectors import (
    extract_attr,
    extract_text,
    parse_html,
)

_TOKEN_MARKER = "'token':"
_EXPIRES_MARKER = "'expires':"

_TOKEN_RE = re.compile(r"'token':\s*'(\w+)'")
_EXPIRES_RE = re.compile(r"'expires':\s*'(\d+)'")
_SERVER_URL_RE = re.compile(r"url:\s*'([^']+)'")


def parse_site_version(html: str) -> str:
    """Read the Inertia asset version from ``div#app[data-page]``."""
    data_page = extract_attr(
        parse_html(html), "div#app", "data-page", "[data-page]"
    )
    if not data_page:
        raise ParseFailure("div#app[data-page] not found")
    try:
        data = json.loads(data_page)
    except ValueError as exc:
        raise ParseFailure("data-page is not valid JSON") from exc
    version = data.get("version") if isinstance(data, dict) else None
    if not version:
        raise ParseFailure("version missing from data-page")
    return str(version)


def extract_iframe_src(html: str) -> str:
    """``src`` of the player iframe, else of the first iframe on the page."""
    src = extract_attr(parse_html(html), "#player iframe", "src", "iframe")
    if not src:
        raise ParseFailure("iframe src not found")
    return src


def find_player_script(soup: BeautifulSoup) -> str:
    """Text of the first inline script holding both token and expiry."""
    for script in soup.select("script"):
        text = script.string or ""
        if _TOKEN_MARKER in text and _EXPIRES_MARKER in text:
            return text
    raise ParseFailure("player script with token/expires not found")


def parse_player_script(script: str) -> tuple[str, str, str]:
    """Extract ``(token, expires, server_url)``; all three are mandatory."""
    token = _TOKEN_RE.search(script)
    expires = _EXPIRES_RE.search(script)
    server_url = _SERVER_URL_RE.search(script)
    if not token or not expires or not server_url:
        raise ParseFailure("token, expires or server url missing from script")
    return token.group(1), expires.group(1), server_url.group(1)


def build_stream_url(server_url: str, token: str, expires: str) -> str:
    """Append credentials and the 1080p marker to the playlist URL."""
    return ExtractedPlayback(
        token=token,
        expires=expires,
        server_url=server_url,
        referer="",
    ).stream_url


def parse_player_page(html: str, *, referer: str) -> ExtractedPlayback:
    """Parse a player page into playback credentials plus the page title."""
    soup = parse_html(html)
    token, expires, server_url = parse_player_script(find_player_script(soup))
    return ExtractedPlayback(
        token=token,
        expires=expires,
        server_url=server_url,
        referer=referer,
        page_title=extract_text(soup, "title"),
    )
