"""StreamViX: Stremio addon resolving vixsrc.to streams."""

__version__ = "0.1.0"
