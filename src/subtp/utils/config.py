"""Parse and render options."""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class ParseOptions(BaseModel):
    """Options accepted by the parsers.

    Attributes:
        strict_sequence: Reject SRT sequence numbers that do not strictly
            increase. Off by default, document order is authoritative.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strict_sequence: bool = False


class RenderOptions(BaseModel):
    """Options accepted by the renderers.

    Attributes:
        newline: Line terminator used throughout the rendered text
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    newline: Literal["\n", "\r\n"] = "\n"


DEFAULT_PARSE_OPTIONS = ParseOptions()
DEFAULT_RENDER_OPTIONS = RenderOptions()
