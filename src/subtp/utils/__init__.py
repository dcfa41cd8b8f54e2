"""Utility modules."""

from subtp.utils.config import ParseOptions, RenderOptions

__all__ = [
    "ParseOptions",
    "RenderOptions",
]
