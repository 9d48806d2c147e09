from .stremio import (
    ContentIdentifier,
    ExtractedPlayback,
    ResolvedTarget,
    StreamDescriptor,
    StremioContentType,
    StremioStream,
)

__all__ = [
    "ContentIdentifier",
    "ExtractedPlayback",
    "ResolvedTarget",
    "StreamDescriptor",
    "StremioContentType",
    "StremioStream",
]
