"""Message types and helpers for building and combining visualization markers."""

__version__ = "0.1.0"
__all__ = ["marker_helper", "messages"]