"""SRT format parser and renderer."""

import re

import structlog

from subtp.core.errors import ErrorKind, SrtParseError, TimestampError
from subtp.core.lines import (
    ARROW,
    LineCursor,
    is_blank,
    split_lines,
    split_timing_line,
    trim,
)
from subtp.core.subrip import SrtSubtitle, SubRip
from subtp.core.timestamp import SrtTimestamp
from subtp.utils.config import (
    DEFAULT_PARSE_OPTIONS,
    DEFAULT_RENDER_OPTIONS,
    ParseOptions,
    RenderOptions,
)

logger = structlog.get_logger()

_SEQUENCE = re.compile(r"[0-9]+")


def parse_srt(content: str, options: ParseOptions | None = None) -> SubRip:
    """Parse SRT format string into a SubRip document.

    Blocks are separated by one or more blank lines. Inside a block, lines
    holding only whitespace are dropped from the text instead of ending it.

    Args:
        content: SRT format string content
        options: Parse options, defaults when omitted

    Returns:
        SubRip document with subtitles in document order

    Raises:
        SrtParseError: If content is malformed
    """
    options = options or DEFAULT_PARSE_OPTIONS
    cursor = LineCursor(split_lines(content))

    subtitles: list[SrtSubtitle] = []
    try:
        cursor.skip_blank()
        while not cursor.at_end:
            line_number = cursor.line_number
            subtitle = _parse_subtitle(cursor)
            if (
                options.strict_sequence
                and subtitles
                and subtitle.sequence <= subtitles[-1].sequence
            ):
                raise SrtParseError(
                    kind=ErrorKind.INVALID_SEQUENCE,
                    message=(
                        f"Sequence {subtitle.sequence} does not follow "
                        f"sequence {subtitles[-1].sequence}"
                    ),
                    line=line_number,
                    text=str(subtitle.sequence),
                )
            subtitles.append(subtitle)
            cursor.skip_blank()
    except SrtParseError as e:
        logger.debug("srt_parse_failed", kind=str(e.kind), line=e.line)
        raise

    logger.debug("srt_parsed", subtitles=len(subtitles))
    return SubRip(subtitles=subtitles)


def render_srt(subrip: SubRip, options: RenderOptions | None = None) -> str:
    """Render a SubRip document to SRT format string.

    Args:
        subrip: Document to render
        options: Render options, defaults when omitted

    Returns:
        SRT text ending with a single newline, or an empty string for an
        empty document
    """
    newline = (options or DEFAULT_RENDER_OPTIONS).newline

    blocks = []
    for subtitle in subrip.subtitles:
        timing = f"{subtitle.start} {ARROW} {subtitle.end}"
        if subtitle.position is not None:
            timing = f"{timing} {subtitle.position}"
        blocks.append(newline.join([str(subtitle.sequence), timing, *subtitle.text]))

    logger.debug("srt_rendered", subtitles=len(blocks))
    if not blocks:
        return ""
    return (newline * 2).join(blocks) + newline


def _parse_subtitle(cursor: LineCursor) -> SrtSubtitle:
    """Parse one block starting at the cursor's current (non-blank) line."""
    sequence_line_number = cursor.line_number
    sequence_line = cursor.next()
    sequence = _parse_sequence(sequence_line, sequence_line_number)

    next_line = cursor.peek()
    if next_line is None:
        raise SrtParseError(
            kind=ErrorKind.UNEXPECTED_END_OF_INPUT,
            message=f"Subtitle {sequence} ends before its timing line",
            line=sequence_line_number,
            text=sequence_line,
        )

    timing_line_number = cursor.line_number
    start, end, position = _parse_timing(cursor.next(), timing_line_number)

    text = [line for line in cursor.take_block() if not is_blank(line)]
    if not text:
        raise SrtParseError(
            kind=ErrorKind.EMPTY_SUBTITLE,
            message=f"Subtitle {sequence} has no text",
            line=sequence_line_number,
            text=sequence_line,
        )

    return SrtSubtitle(
        sequence=sequence, start=start, end=end, text=text, position=position
    )


def _parse_sequence(line: str, line_number: int) -> int:
    value = trim(line)
    if not _SEQUENCE.fullmatch(value):
        raise SrtParseError(
            kind=ErrorKind.INVALID_SEQUENCE,
            message="Invalid sequence number, must be a non-negative integer",
            line=line_number,
            text=line,
        )
    try:
        return int(value)
    except ValueError as e:
        raise SrtParseError(
            kind=ErrorKind.INVALID_SEQUENCE,
            message="Invalid sequence number, too many digits",
            line=line_number,
            text=line,
        ) from e


def _parse_timing(
    line: str, line_number: int
) -> tuple[SrtTimestamp, SrtTimestamp, str | None]:
    parts = split_timing_line(line)
    if parts is None:
        raise SrtParseError(
            kind=ErrorKind.MISSING_ARROW,
            message=f"Invalid timing line, expected 'start {ARROW} end'",
            line=line_number,
            text=line,
        )

    start_text, end_text, position = parts
    try:
        start = SrtTimestamp.parse(start_text)
        end = SrtTimestamp.parse(end_text)
    except TimestampError as e:
        raise SrtParseError(
            kind=ErrorKind.MALFORMED_TIMESTAMP,
            message=e.message,
            line=line_number,
            text=line,
            field=e.field,
            found=e.found,
        ) from e

    return start, end, position
