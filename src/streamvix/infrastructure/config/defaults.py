"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "streamvix",
    "environment": "dev",
    "http": {
        "timeout_seconds": None,  # no timeout, a hung upstream hangs the request
    },
    "logging": {
        "level": "INFO",
        "format": None,  # Derived from environment in schema.py
    },
    "vixsrc": {
        "origin": "https://vixsrc.to",
        "lang": "it",
    },
    "tmdb": {
        "api_key": None,
        "language": "it",
    },
    "mediaflow": {
        "url": None,
        "password": None,
    },
}
