"""CSS-selector helpers over BeautifulSoup with fallback chains.

Each helper accepts a primary selector and optional *fallback_selectors*;
the first selector that yields a match wins, so small markup changes on the
streaming site (extra wrapper, moved ``<script>``) do not break extraction.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag


def parse_html(html: str) -> BeautifulSoup:
    """Parse an HTML string with the ``lxml`` parser."""
    return BeautifulSoup(html, "lxml")


def extract_text(
    root: BeautifulSoup | Tag,
    selector: str,
    *fallback_selectors: str,
) -> str:
    """Stripped text of the first non-empty match, or an empty string."""
    for sel in (selector, *fallback_selectors):
        match = root.select_one(sel)
        if match:
            text = match.get_text(strip=True)
            if text:
                return text
    return ""


def extract_attr(
    root: BeautifulSoup | Tag,
    selector: str,
    attr: str,
    *fallback_selectors: str,
) -> str:
    """Attribute value of the first matching element that carries it, or ""."""
    for sel in (selector, *fallback_selectors):
        match = root.select_one(sel)
        if match:
            val = match.get(attr)
            if val:
                return str(val)
    return ""
