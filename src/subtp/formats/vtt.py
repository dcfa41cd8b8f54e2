"""WebVTT format parser and renderer."""

import re
from typing import NoReturn, assert_never

import structlog

from subtp.core.errors import ErrorKind, TimestampError, VttParseError
from subtp.core.lines import ARROW, LineCursor, is_blank, split_lines, split_timing_line
from subtp.core.timestamp import VttTimestamp
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
from subtp.utils.config import DEFAULT_RENDER_OPTIONS, RenderOptions

logger = structlog.get_logger()

MAGIC = "WEBVTT"
NOTE = "NOTE"
STYLE = "STYLE"
REGION = "REGION"

_MAGIC_LINE = re.compile(rf"{MAGIC}(?:[ \t](?P<description>.*))?")
_NOTE_LINE = re.compile(rf"{NOTE}(?:[ \t](?P<text>.*))?")
_STYLE_LINE = re.compile(rf"{STYLE}[ \t]*")
_REGION_LINE = re.compile(rf"{REGION}[ \t]*")
_RESERVED_KEYWORDS = (NOTE, STYLE, REGION)


def parse_vtt(content: str) -> WebVtt:
    """Parse WebVTT format string into a WebVtt document.

    Args:
        content: WebVTT format string content

    Returns:
        WebVtt document with blocks in document order

    Raises:
        VttParseError: If content is malformed
    """
    cursor = LineCursor(split_lines(content))

    blocks: list[VttBlock] = []
    try:
        header = _parse_header(cursor)
        cursor.skip_blank()
        while not cursor.at_end:
            blocks.append(_parse_block(cursor))
            cursor.skip_blank()
    except VttParseError as e:
        logger.debug("vtt_parse_failed", kind=str(e.kind), line=e.line)
        raise

    logger.debug("vtt_parsed", blocks=len(blocks))
    return WebVtt(header=header, blocks=blocks)


def render_vtt(vtt: WebVtt, options: RenderOptions | None = None) -> str:
    """Render a WebVtt document to WebVTT format string.

    Args:
        vtt: Document to render
        options: Render options, defaults when omitted

    Returns:
        WebVTT text ending with a single newline
    """
    newline = (options or DEFAULT_RENDER_OPTIONS).newline

    magic = MAGIC
    if vtt.header.description is not None:
        magic = f"{MAGIC} {vtt.header.description}"
    lines = [magic, *vtt.header.metadata, ""]

    for i, block in enumerate(vtt.blocks):
        if i > 0:
            lines.append("")
        lines.extend(_render_block(block))

    logger.debug("vtt_rendered", blocks=len(vtt.blocks))
    return newline.join(lines) + newline


def _parse_header(cursor: LineCursor) -> VttHeader:
    first = cursor.peek()
    match = _MAGIC_LINE.fullmatch(first) if first is not None else None
    if match is None:
        raise VttParseError(
            kind=ErrorKind.MISSING_MAGIC,
            message=f"First line must be '{MAGIC}'",
            line=1,
            text=first,
        )
    cursor.next()

    description = (match.group("description") or "").strip(" \t") or None

    # Header lines run up to the first blank line or an early cue timing line.
    metadata = []
    while (line := cursor.peek()) is not None and not is_blank(line):
        if ARROW in line:
            break
        metadata.append(cursor.next())

    return VttHeader(description=description, metadata=metadata)


def _parse_block(cursor: LineCursor) -> VttBlock:
    """Parse one block starting at the cursor's current (non-blank) line."""
    first = cursor.peek()

    note = _NOTE_LINE.fullmatch(first)
    if note is not None:
        cursor.next()
        inline_text = (note.group("text") or "").lstrip(" \t")
        rest = cursor.take_block()
        if inline_text:
            return VttComment(lines=[inline_text, *rest], inline=True)
        return VttComment(lines=rest)

    if _STYLE_LINE.fullmatch(first):
        cursor.next()
        return VttStyle(lines=cursor.take_block())

    if _REGION_LINE.fullmatch(first):
        cursor.next()
        return VttRegion(lines=cursor.take_block())

    return _parse_cue(cursor)


def _parse_cue(cursor: LineCursor) -> VttCue:
    first_line_number = cursor.line_number
    first = cursor.next()

    if ARROW in first:
        identifier = None
        timing_line, timing_line_number = first, first_line_number
    else:
        following = cursor.peek()
        if following is None or ARROW not in following:
            _raise_missing_timing(first, first_line_number, following)
        identifier = first
        timing_line_number = cursor.line_number
        timing_line = cursor.next()

    timings = _parse_timings(timing_line, timing_line_number)
    return VttCue(timings=timings, payload=cursor.take_block(), identifier=identifier)


def _raise_missing_timing(
    first: str, line_number: int, following: str | None
) -> NoReturn:
    if first.startswith(_RESERVED_KEYWORDS):
        raise VttParseError(
            kind=ErrorKind.INVALID_BLOCK_KEYWORD,
            message="Unrecognized block keyword, expected NOTE, STYLE or REGION",
            line=line_number,
            text=first,
        )
    if following is None:
        raise VttParseError(
            kind=ErrorKind.UNEXPECTED_END_OF_INPUT,
            message="Cue identifier is not followed by a timing line",
            line=line_number,
            text=first,
        )
    raise VttParseError(
        kind=ErrorKind.MISSING_TIMING,
        message=f"Expected cue timing line 'start {ARROW} end'",
        line=line_number + 1,
        text=following,
    )


def _parse_timings(line: str, line_number: int) -> VttTimings:
    parts = split_timing_line(line)
    if parts is None:
        raise VttParseError(
            kind=ErrorKind.MISSING_TIMING,
            message=f"Expected cue timing line 'start {ARROW} end'",
            line=line_number,
            text=line,
        )

    start_text, end_text, settings = parts
    try:
        start = VttTimestamp.parse(start_text)
        end = VttTimestamp.parse(end_text)
    except TimestampError as e:
        raise VttParseError(
            kind=ErrorKind.MALFORMED_TIMESTAMP,
            message=e.message,
            line=line_number,
            text=line,
            field=e.field,
            found=e.found,
        ) from e

    return VttTimings(start=start, end=end, settings=settings)


def _render_block(block: VttBlock) -> list[str]:
    if isinstance(block, VttCue):
        lines = [] if block.identifier is None else [block.identifier]
        timings = block.timings
        timing = f"{timings.start} {ARROW} {timings.end}"
        if timings.settings is not None:
            timing = f"{timing} {timings.settings}"
        return [*lines, timing, *block.payload]
    if isinstance(block, VttComment):
        if block.inline and block.lines:
            return [f"{NOTE} {block.lines[0]}", *block.lines[1:]]
        return [NOTE, *block.lines]
    if isinstance(block, VttStyle):
        return [STYLE, *block.lines]
    if isinstance(block, VttRegion):
        return [REGION, *block.lines]
    assert_never(block)
