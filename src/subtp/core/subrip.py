"""SubRip domain models."""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING, Self

from subtp.core.timestamp import SrtTimestamp

if TYPE_CHECKING:
    from subtp.utils.config import ParseOptions, RenderOptions


@dataclass(frozen=True)
class SrtSubtitle:
    """Single numbered subtitle block.

    Attributes:
        sequence: Sequence number as written; not required to be contiguous
        start: Time the subtitle appears
        end: Time the subtitle disappears
        text: Text lines, in display order
        position: Unofficial trailing text on the timing line, such as
            ``X1:100 X2:200 Y1:10 Y2:20``
    """

    sequence: int
    start: SrtTimestamp
    end: SrtTimestamp
    text: tuple[str, ...] = ()
    position: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "text", tuple(self.text))

    @property
    def duration(self) -> timedelta:
        return self.end - self.start


@dataclass(frozen=True)
class SubRip:
    """SubRip document: subtitles in document order."""

    subtitles: tuple[SrtSubtitle, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "subtitles", tuple(self.subtitles))

    @classmethod
    def parse(cls, text: str, options: "ParseOptions | None" = None) -> Self:
        """Parse SRT text. See ``subtp.formats.srt.parse_srt``."""
        from subtp.formats.srt import parse_srt

        return parse_srt(text, options)

    def render(self, options: "RenderOptions | None" = None) -> str:
        """Render to SRT text. See ``subtp.formats.srt.render_srt``."""
        from subtp.formats.srt import render_srt

        return render_srt(self, options)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        """Return number of subtitles."""
        return len(self.subtitles)

    def __iter__(self) -> Iterator[SrtSubtitle]:
        """Iterate over subtitles."""
        return iter(self.subtitles)

    def __getitem__(self, index: int) -> SrtSubtitle:
        """Get subtitle by position (0-based)."""
        return self.subtitles[index]
