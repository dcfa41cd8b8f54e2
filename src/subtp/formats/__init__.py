"""Subtitle format handlers."""

from subtp.formats.srt import parse_srt, render_srt
from subtp.formats.vtt import parse_vtt, render_vtt

__all__ = [
    "parse_srt",
    "parse_vtt",
    "render_srt",
    "render_vtt",
]
