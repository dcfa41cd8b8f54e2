"""Pytest configuration and shared fixtures."""

import pytest

from subtp import SrtSubtitle, SrtTimestamp, SubRip


@pytest.fixture
def sample_srt_content() -> str:
    """Return sample SRT content for testing."""
    return """1
00:00:01,000 --> 00:00:04,000
Hello, this is a test.

2
00:00:05,000 --> 00:00:08,000
This is the second subtitle.

3
00:00:09,000 --> 00:00:12,000
And this is the third one.
It spans two lines.
"""


@pytest.fixture
def sample_vtt_content() -> str:
    """Return sample WebVTT content covering every block kind."""
    return """WEBVTT - Sample track
Kind: captions
Language: en

STYLE
::cue {
  color: yellow;
}

REGION
id:fred
width:40%

NOTE This file was written by hand

intro
00:00.000 --> 00:02.500 region:fred align:left
Welcome!

00:00:02.500 --> 00:00:05.000
- Never drink liquid nitrogen.
- It will perforate your stomach.

NOTE
Multi-line comment
below the marker
"""


@pytest.fixture
def sample_subrip() -> SubRip:
    """Return a three-subtitle SubRip document."""
    return SubRip(
        subtitles=[
            SrtSubtitle(
                sequence=1,
                start=SrtTimestamp(seconds=1),
                end=SrtTimestamp(seconds=4),
                text=["Hello, this is a test."],
            ),
            SrtSubtitle(
                sequence=2,
                start=SrtTimestamp(seconds=5),
                end=SrtTimestamp(seconds=8),
                text=["This is the second subtitle."],
            ),
            SrtSubtitle(
                sequence=3,
                start=SrtTimestamp(seconds=9),
                end=SrtTimestamp(seconds=12),
                text=["And this is the third one.", "It spans two lines."],
            ),
        ]
    )
