"""Parse and render SubRip (.srt) and WebVTT (.vtt) subtitles."""

from subtp.core import (
    ErrorKind,
    SrtParseError,
    SrtSubtitle,
    SrtTimestamp,
    SubRip,
    SubtitleParseError,
    Timestamp,
    TimestampError,
    VttBlock,
    VttComment,
    VttCue,
    VttHeader,
    VttParseError,
    VttRegion,
    VttStyle,
    VttTimestamp,
    VttTimings,
    WebVtt,
)
from subtp.formats import parse_srt, parse_vtt, render_srt, render_vtt
from subtp.utils import ParseOptions, RenderOptions

__version__ = "0.3.0"

__all__ = [
    "ErrorKind",
    "ParseOptions",
    "RenderOptions",
    "SrtParseError",
    "SrtSubtitle",
    "SrtTimestamp",
    "SubRip",
    "SubtitleParseError",
    "Timestamp",
    "TimestampError",
    "VttBlock",
    "VttComment",
    "VttCue",
    "VttHeader",
    "VttParseError",
    "VttRegion",
    "VttStyle",
    "VttTimestamp",
    "VttTimings",
    "WebVtt",
    "__version__",
    "parse_srt",
    "parse_vtt",
    "render_srt",
    "render_vtt",
]
