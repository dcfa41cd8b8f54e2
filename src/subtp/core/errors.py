"""Parse error hierarchy for the subtitle grammars."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Closed set of reasons a subtitle document can fail to parse."""

    MISSING_MAGIC = "missing_magic"
    MALFORMED_TIMESTAMP = "malformed_timestamp"
    MISSING_ARROW = "missing_arrow"
    INVALID_SEQUENCE = "invalid_sequence"
    EMPTY_SUBTITLE = "empty_subtitle"
    MISSING_TIMING = "missing_timing"
    INVALID_BLOCK_KEYWORD = "invalid_block_keyword"
    UNEXPECTED_END_OF_INPUT = "unexpected_end_of_input"


class SubtitleParseError(ValueError):
    """Base parse error with error kind and source position."""

    def __init__(
        self,
        *,
        kind: ErrorKind,
        message: str,
        line: int | None = None,
        text: str | None = None,
        field: str | None = None,
        found: str | None = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.line = line
        self.text = text
        self.field = field
        self.found = found
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.line is None:
            return self.message
        if self.text is None:
            return f"Line {self.line}: {self.message}"
        return f"Line {self.line}: {self.message} (got {self.text!r})"


class TimestampError(SubtitleParseError):
    """Raised when a single timestamp cannot be parsed."""

    def __init__(self, field: str, found: str, message: str) -> None:
        super().__init__(
            kind=ErrorKind.MALFORMED_TIMESTAMP,
            message=message,
            field=field,
            found=found,
        )


class SrtParseError(SubtitleParseError):
    """Raised when SRT parsing fails."""


class VttParseError(SubtitleParseError):
    """Raised when WebVTT parsing fails."""
