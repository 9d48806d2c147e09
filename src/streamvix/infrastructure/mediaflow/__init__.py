from .proxy import MediaFlowProxy

__all__ = ["MediaFlowProxy"]
