"""Unit tests for SubRip and WebVTT domain models."""

from dataclasses import FrozenInstanceError
from datetime import timedelta

import pytest

from subtp.core.subrip import SrtSubtitle, SubRip
from subtp.core.timestamp import SrtTimestamp, VttTimestamp
from subtp.core.webvtt import (
    VttComment,
    VttCue,
    VttHeader,
    VttRegion,
    VttStyle,
    VttTimings,
    WebVtt,
)

pytestmark = pytest.mark.unit


def _cue(start: int, end: int, *payload: str) -> VttCue:
    return VttCue(
        timings=VttTimings(
            start=VttTimestamp(seconds=start), end=VttTimestamp(seconds=end)
        ),
        payload=payload,
    )


class TestSrtSubtitle:
    """Test cases for SrtSubtitle."""

    def test_text_normalized_to_tuple(self):
        subtitle = SrtSubtitle(
            sequence=1,
            start=SrtTimestamp(),
            end=SrtTimestamp(seconds=1),
            text=["Hello", "World"],
        )

        assert subtitle.text == ("Hello", "World")
        assert subtitle.position is None

    def test_duration(self):
        subtitle = SrtSubtitle(
            sequence=1,
            start=SrtTimestamp(seconds=1),
            end=SrtTimestamp(seconds=3, milliseconds=500),
            text=["Hi"],
        )

        assert subtitle.duration == timedelta(seconds=2.5)

    def test_is_immutable(self):
        subtitle = SrtSubtitle(sequence=1, start=SrtTimestamp(), end=SrtTimestamp())

        with pytest.raises(FrozenInstanceError):
            subtitle.sequence = 2

    def test_equality_compares_all_fields(self):
        first = SrtSubtitle(
            sequence=1, start=SrtTimestamp(), end=SrtTimestamp(), text=["a"]
        )
        second = SrtSubtitle(
            sequence=1, start=SrtTimestamp(), end=SrtTimestamp(), text=["b"]
        )

        assert first != second


class TestSubRip:
    """Test cases for the SubRip container."""

    def test_sequence_protocol(self, sample_subrip):
        assert len(sample_subrip) == 3
        assert sample_subrip[0].sequence == 1
        assert [s.sequence for s in sample_subrip] == [1, 2, 3]

    def test_default_is_empty(self):
        assert len(SubRip()) == 0
        assert SubRip().subtitles == ()

    def test_is_hashable(self, sample_subrip):
        assert hash(sample_subrip) == hash(SubRip(subtitles=list(sample_subrip)))


class TestWebVtt:
    """Test cases for WebVTT models."""

    def test_default_header(self):
        vtt = WebVtt()

        assert vtt.header == VttHeader()
        assert vtt.header.description is None
        assert vtt.header.metadata == ()
        assert vtt.blocks == ()

    def test_empty_description_differs_from_absent(self):
        assert VttHeader(description="") != VttHeader()

    def test_block_views(self):
        cue = _cue(0, 1, "Hello")
        comment = VttComment(lines=["note"])
        style = VttStyle(lines=["::cue { color: red; }"])
        region = VttRegion(lines=["id:fred"])
        vtt = WebVtt(blocks=[style, cue, comment, region])

        assert len(vtt) == 4
        assert vtt[1] is cue
        assert vtt.cues == [cue]
        assert vtt.comments == [comment]
        assert vtt.styles == [style]
        assert vtt.regions == [region]
        assert list(vtt) == [style, cue, comment, region]

    def test_cue_defaults(self):
        cue = _cue(0, 2)

        assert cue.identifier is None
        assert cue.payload == ()
        assert cue.timings.settings is None
        assert cue.timings.duration == timedelta(seconds=2)

    def test_comment_defaults(self):
        comment = VttComment()

        assert comment.lines == ()
        assert comment.inline is False

    def test_blocks_of_different_kinds_are_not_equal(self):
        assert VttStyle(lines=["x"]) != VttRegion(lines=["x"])
