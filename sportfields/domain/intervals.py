"""Minute-granularity wall-clock arithmetic.

Times are ``HH:MM`` strings on a single calendar day. Windows are half-open,
``[start, end)``, so a booking ending at 10:00 never collides with one
starting at 10:00.
"""

import re

from sportfields.domain.errors import InvalidTimeFormatError

MINUTES_PER_DAY = 24 * 60

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


def to_minutes(time: str) -> int:
    """Convert ``HH:MM`` (seconds, if present, are ignored) to minutes since midnight.

    ``24:00`` is accepted as the end-of-day sentinel.

    Raises:
        InvalidTimeFormatError: If the string is not a wall-clock time.
    """
    if not isinstance(time, str):
        raise InvalidTimeFormatError(time)
    match = _TIME_RE.match(time.strip())
    if match is None:
        raise InvalidTimeFormatError(time)

    hours, minutes = int(match.group(1)), int(match.group(2))
    seconds = int(match.group(3) or 0)
    if minutes > 59 or seconds > 59:
        raise InvalidTimeFormatError(time)
    if hours > 24 or (hours == 24 and (minutes or seconds)):
        raise InvalidTimeFormatError(time)
    return hours * 60 + minutes


def format_minutes(minutes: int) -> str:
    """Render minutes since midnight as ``HH:MM``, wrapping the hour modulo 24."""
    return f"{(minutes // 60) % 24:02d}:{minutes % 60:02d}"


def overlaps(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    """Return True if ``[a_start, a_end)`` and ``[b_start, b_end)`` intersect."""
    return a_start < b_end and b_start < a_end


def compute_end_time(start: str, duration_hours: float) -> str:
    """Return the wall-clock end of a booking starting at ``start``.

    The hour wraps modulo 24: 23:00 plus three hours reports ``02:00`` and
    does not signal the day rollover.
    """
    end = to_minutes(start) + round(duration_hours * 60)
    return format_minutes(end)
