"""WebVTT domain models."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import timedelta
from typing import TYPE_CHECKING, Self

from subtp.core.timestamp import VttTimestamp

if TYPE_CHECKING:
    from subtp.utils.config import RenderOptions


@dataclass(frozen=True)
class VttHeader:
    """Document header.

    Attributes:
        description: Text after ``WEBVTT`` on the first line
        metadata: Lines directly below the magic line, e.g. ``Kind: captions``
    """

    description: str | None = None
    metadata: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", tuple(self.metadata))


@dataclass(frozen=True)
class VttTimings:
    """Cue timing line: start, end and opaque cue settings."""

    start: VttTimestamp
    end: VttTimestamp
    settings: str | None = None

    @property
    def duration(self) -> timedelta:
        return self.end - self.start


@dataclass(frozen=True)
class VttCue:
    """Timed text cue with optional identifier."""

    timings: VttTimings
    payload: tuple[str, ...] = ()
    identifier: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload", tuple(self.payload))


@dataclass(frozen=True)
class VttComment:
    """``NOTE`` block.

    ``inline`` marks that the first line sat on the ``NOTE`` line itself.
    """

    lines: tuple[str, ...] = ()
    inline: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))


@dataclass(frozen=True)
class VttStyle:
    """``STYLE`` block holding raw stylesheet lines."""

    lines: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))


@dataclass(frozen=True)
class VttRegion:
    """``REGION`` block holding raw region setting lines."""

    lines: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))


VttBlock = VttCue | VttComment | VttStyle | VttRegion


@dataclass(frozen=True)
class WebVtt:
    """WebVTT document: header plus blocks in document order."""

    header: VttHeader = field(default_factory=VttHeader)
    blocks: tuple[VttBlock, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "blocks", tuple(self.blocks))

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse WebVTT text. See ``subtp.formats.vtt.parse_vtt``."""
        from subtp.formats.vtt import parse_vtt

        return parse_vtt(text)

    def render(self, options: "RenderOptions | None" = None) -> str:
        """Render to WebVTT text. See ``subtp.formats.vtt.render_vtt``."""
        from subtp.formats.vtt import render_vtt

        return render_vtt(self, options)

    @property
    def cues(self) -> list[VttCue]:
        return [block for block in self.blocks if isinstance(block, VttCue)]

    @property
    def comments(self) -> list[VttComment]:
        return [block for block in self.blocks if isinstance(block, VttComment)]

    @property
    def styles(self) -> list[VttStyle]:
        return [block for block in self.blocks if isinstance(block, VttStyle)]

    @property
    def regions(self) -> list[VttRegion]:
        return [block for block in self.blocks if isinstance(block, VttRegion)]

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        """Return number of blocks."""
        return len(self.blocks)

    def __iter__(self) -> Iterator[VttBlock]:
        """Iterate over blocks."""
        return iter(self.blocks)

    def __getitem__(self, index: int) -> VttBlock:
        """Get block by position (0-based)."""
        return self.blocks[index]
