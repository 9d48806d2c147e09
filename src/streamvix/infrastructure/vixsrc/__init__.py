"""vixsrc.to adapters: catalog check, page extraction, URL layout."""

from __future__ import annotations

from .catalog import VixSrcCatalog
from .extractor import VixSrcExtractor
from .urls import build_target_url

__all__ = ["VixSrcCatalog", "VixSrcExtractor", "build_target_url"]
