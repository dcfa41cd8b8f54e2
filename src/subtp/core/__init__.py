"""Subtitle models, timestamps and line scanning."""

from subtp.core.errors import (
    ErrorKind,
    SrtParseError,
    SubtitleParseError,
    TimestampError,
    VttParseError,
)
from subtp.core.subrip import SrtSubtitle, SubRip
from subtp.core.timestamp import SrtTimestamp, Timestamp, VttTimestamp
from subtp.core.webvtt import (
    VttBlock,
    VttComment,
    VttCue,
    VttHeader,
    VttRegion,
    VttStyle,
    VttTimings,
    WebVtt,
)

__all__ = [
    "ErrorKind",
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
]
