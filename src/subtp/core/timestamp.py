"""Timestamp primitive shared by the SRT and WebVTT formats."""

import re
from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar, Self

from subtp.core.errors import TimestampError

_MS_PER_SECOND = 1000
_MS_PER_MINUTE = 60 * _MS_PER_SECOND
_MS_PER_HOUR = 60 * _MS_PER_MINUTE

# Loose shape only; each group is validated separately so errors can name the field.
_TIMESTAMP_SHAPE = re.compile(
    r"(?:(?P<hours>[^:]*):)?(?P<minutes>[^:]*):(?P<seconds>[^:.,]*)"
    r"(?P<separator>[.,]?)(?P<milliseconds>[^:.,]*)"
)
_TWO_DIGITS = re.compile(r"[0-9]{2}")
_THREE_DIGITS = re.compile(r"[0-9]{3}")
_HOUR_DIGITS = re.compile(r"[0-9]{2,}")


@dataclass(frozen=True, order=True)
class Timestamp:
    """Point in time within a subtitle track, at millisecond resolution.

    Fields are compared in declaration order, so timestamps with in-range
    values sort chronologically. Use the format-specific subclasses
    ``SrtTimestamp`` and ``VttTimestamp``.
    """

    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0

    separator: ClassVar[str] = ","
    hours_optional: ClassVar[bool] = False

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse a timestamp string.

        Args:
            text: Timestamp such as ``01:02:03,456``

        Returns:
            Parsed timestamp with all fields in range

        Raises:
            TimestampError: If any field is missing, mis-sized or out of range
        """
        candidate = text.strip()
        match = _TIMESTAMP_SHAPE.fullmatch(candidate)
        if match is None:
            raise TimestampError(
                "timestamp",
                candidate,
                f"Invalid timestamp {candidate!r}, expected "
                f"'HH:MM:SS{cls.separator}mmm'",
            )

        raw_hours = match.group("hours")
        if raw_hours is None:
            if not cls.hours_optional:
                raise TimestampError(
                    "hours", "", f"Missing hours in timestamp {candidate!r}"
                )
            hours = 0
        else:
            hours = _parse_group(raw_hours, "hours", _HOUR_DIGITS, candidate)

        minutes = _parse_group(match.group("minutes"), "minutes", _TWO_DIGITS, candidate)
        seconds = _parse_group(match.group("seconds"), "seconds", _TWO_DIGITS, candidate)

        separator = match.group("separator")
        if not separator and not match.group("milliseconds"):
            raise TimestampError(
                "milliseconds", "", f"Missing milliseconds in timestamp {candidate!r}"
            )
        if separator != cls.separator:
            raise TimestampError(
                "separator",
                separator,
                f"Invalid separator {separator!r} in timestamp {candidate!r}, "
                f"expected {cls.separator!r}",
            )

        milliseconds = _parse_group(
            match.group("milliseconds"), "milliseconds", _THREE_DIGITS, candidate
        )

        _check_range("minutes", minutes, 60, candidate)
        _check_range("seconds", seconds, 60, candidate)
        _check_range("milliseconds", milliseconds, 1000, candidate)

        return cls(
            hours=hours, minutes=minutes, seconds=seconds, milliseconds=milliseconds
        )

    @classmethod
    def from_milliseconds(cls, total: int) -> Self:
        """Build a timestamp from a non-negative millisecond count.

        Raises:
            ValueError: If total is negative
        """
        if total < 0:
            raise ValueError(f"Timestamp cannot be negative, got {total} ms")
        hours, rest = divmod(total, _MS_PER_HOUR)
        minutes, rest = divmod(rest, _MS_PER_MINUTE)
        seconds, milliseconds = divmod(rest, _MS_PER_SECOND)
        return cls(
            hours=hours, minutes=minutes, seconds=seconds, milliseconds=milliseconds
        )

    @classmethod
    def from_duration(cls, duration: timedelta) -> Self:
        """Build a timestamp from a duration, truncating below one millisecond.

        Raises:
            ValueError: If duration is negative
        """
        return cls.from_milliseconds(duration // timedelta(milliseconds=1))

    @property
    def total_milliseconds(self) -> int:
        return (
            ((self.hours * 60 + self.minutes) * 60 + self.seconds) * _MS_PER_SECOND
            + self.milliseconds
        )

    def to_duration(self) -> timedelta:
        return timedelta(milliseconds=self.total_milliseconds)

    def render(self) -> str:
        """Render as ``HH:MM:SS<sep>mmm`` with the format's separator."""
        return (
            f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"
            f"{self.separator}{self.milliseconds:03d}"
        )

    def __str__(self) -> str:
        return self.render()

    def __add__(self, other: object) -> Self:
        if not isinstance(other, timedelta):
            return NotImplemented
        return self.from_duration(self.to_duration() + other)

    def __sub__(self, other: object) -> "timedelta | Self":
        if isinstance(other, Timestamp):
            return self.to_duration() - other.to_duration()
        if isinstance(other, timedelta):
            return self.from_duration(self.to_duration() - other)
        return NotImplemented


class SrtTimestamp(Timestamp):
    """SubRip timestamp, ``HH:MM:SS,mmm`` with mandatory hours."""

    separator: ClassVar[str] = ","
    hours_optional: ClassVar[bool] = False


class VttTimestamp(Timestamp):
    """WebVTT timestamp, ``[HH:]MM:SS.mmm``; always rendered with hours."""

    separator: ClassVar[str] = "."
    hours_optional: ClassVar[bool] = True


def _parse_group(value: str, field: str, pattern: re.Pattern[str], text: str) -> int:
    if not pattern.fullmatch(value):
        if not value:
            message = f"Missing {field} in timestamp {text!r}"
        else:
            message = f"Invalid {field} {value!r} in timestamp {text!r}"
        raise TimestampError(field, value, message)
    try:
        return int(value)
    except ValueError as e:
        # Digit strings past the interpreter's int conversion limit.
        raise TimestampError(
            field, value, f"Too many digits in {field} of timestamp"
        ) from e


def _check_range(field: str, value: int, limit: int, text: str) -> None:
    if value >= limit:
        raise TimestampError(
            field,
            str(value),
            f"{field.capitalize()} out of range in timestamp {text!r}: "
            f"{value} >= {limit}",
        )
