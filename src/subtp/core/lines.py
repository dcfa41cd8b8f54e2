"""Line scanning helpers shared by the SRT and WebVTT grammars."""

import re

_NEWLINE = re.compile(r"\r\n|\r|\n")
_BOM = "\ufeff"

ARROW = "-->"


def split_lines(text: str) -> list[str]:
    """Split text into lines on any of ``\\r\\n``, ``\\r`` or ``\\n``.

    A line terminator at the very end of the text does not produce an extra
    empty line, and a leading byte-order mark is dropped.

    Args:
        text: Decoded subtitle text

    Returns:
        Lines without their terminators
    """
    if text.startswith(_BOM):
        text = text[len(_BOM) :]
    if not text:
        return []

    lines = _NEWLINE.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def is_empty(line: str) -> bool:
    """Return True for a line with no characters at all."""
    return line == ""


def is_blank(line: str) -> bool:
    """Return True for an empty or whitespace-only line."""
    return not line.strip()


def trim(line: str) -> str:
    """Strip surrounding spaces and tabs."""
    return line.strip(" \t")


def split_timing_line(line: str) -> tuple[str, str, str | None] | None:
    """Split a timing line into start text, end text and trailing remainder.

    Whitespace around the arrow is optional. The remainder is whatever follows
    the end timestamp after whitespace, or None when nothing does.

    Returns:
        ``(start, end, remainder)`` or None if the line has no ``-->``
    """
    head, arrow, tail = line.partition(ARROW)
    if not arrow:
        return None

    parts = trim(tail).split(maxsplit=1)
    end = parts[0] if parts else ""
    remainder = trim(parts[1]) if len(parts) > 1 else None
    return trim(head), end, remainder or None


class LineCursor:
    """Forward-only cursor over a list of lines.

    Line numbers are 1-based and refer to the line that ``peek()`` returns.
    """

    def __init__(self, lines: list[str]) -> None:
        self._lines = lines
        self._index = 0

    @property
    def at_end(self) -> bool:
        return self._index >= len(self._lines)

    @property
    def line_number(self) -> int:
        return self._index + 1

    def peek(self) -> str | None:
        """Return the current line without consuming it, or None at the end."""
        if self.at_end:
            return None
        return self._lines[self._index]

    def next(self) -> str:
        """Consume and return the current line.

        Raises:
            IndexError: If the cursor is already past the last line
        """
        if self.at_end:
            raise IndexError("No more lines")
        line = self._lines[self._index]
        self._index += 1
        return line

    def skip_blank(self) -> None:
        """Advance past any empty or whitespace-only lines."""
        while not self.at_end and is_blank(self._lines[self._index]):
            self._index += 1

    def take_block(self) -> list[str]:
        """Consume lines up to the next empty line or the end of input.

        The terminating empty line is consumed but not returned.
        """
        block = []
        while not self.at_end:
            line = self.next()
            if is_empty(line):
                break
            block.append(line)
        return block
