"""Domain primitives that enforce validity at creation time."""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Self

from sportfields.domain.errors import InvalidDateError, InvalidWindowError
from sportfields.domain.intervals import format_minutes, overlaps, to_minutes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimeWindow:
    """Half-open ``[start, end)`` window in minutes since midnight."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise InvalidWindowError(format_minutes(self.start), format_minutes(self.end))

    @classmethod
    def from_strings(cls, start: str, end: str) -> Self:
        start_minutes, end_minutes = to_minutes(start), to_minutes(end)
        if start_minutes >= end_minutes:
            raise InvalidWindowError(start, end)
        return cls(start=start_minutes, end=end_minutes)

    def overlaps_with(self, start: int, end: int) -> bool:
        return overlaps(self.start, self.end, start, end)

    @property
    def duration_minutes(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"{format_minutes(self.start)}-{format_minutes(self.end)}"


class FieldStatus(Enum):
    """Canonical field statuses."""

    AVAILABLE = "available"
    MAINTENANCE = "maintenance"
    BOOKED = "booked"
    INACTIVE = "inactive"
    DRAFT = "draft"


# Raw status spellings seen in shop data, keyed by their folded form.
_STATUS_ALIASES = {
    "available": FieldStatus.AVAILABLE,
    "active": FieldStatus.AVAILABLE,
    "open": FieldStatus.AVAILABLE,
    "trống": FieldStatus.AVAILABLE,
    "sẵn sàng": FieldStatus.AVAILABLE,
    "maintenance": FieldStatus.MAINTENANCE,
    "under-maintenance": FieldStatus.MAINTENANCE,
    "on_maintenance": FieldStatus.MAINTENANCE,
    "bảo trì": FieldStatus.MAINTENANCE,
    "booked": FieldStatus.BOOKED,
    "reserved": FieldStatus.BOOKED,
    "confirmed": FieldStatus.BOOKED,
    "held": FieldStatus.BOOKED,
    "on_hold": FieldStatus.BOOKED,
    "đã đặt": FieldStatus.BOOKED,
    "inactive": FieldStatus.INACTIVE,
    "closed": FieldStatus.INACTIVE,
    "unavailable": FieldStatus.INACTIVE,
    "blocked": FieldStatus.INACTIVE,
    "disabled": FieldStatus.INACTIVE,
    "tạm đóng": FieldStatus.INACTIVE,
    "tạm khóa": FieldStatus.INACTIVE,
    "draft": FieldStatus.DRAFT,
    "bản nháp": FieldStatus.DRAFT,
}


def status_category(status: str | None) -> FieldStatus | None:
    """Map a raw status string to its canonical status, or None if unknown."""
    if not status:
        return None
    return _STATUS_ALIASES.get(status.strip().lower())


def coerce_price(value: object) -> Decimal:
    """Coerce an hourly price input to a non-negative Decimal.

    Anything non-numeric, non-finite or negative becomes 0 instead of
    raising.
    """
    if isinstance(value, bool) or value is None:
        price = None
    elif isinstance(value, Decimal):
        price = value
    elif isinstance(value, (int, float)):
        price = Decimal(str(value)) if math.isfinite(value) else None
    else:
        try:
            price = Decimal(str(value).strip())
        except InvalidOperation:
            price = None

    if price is None or not price.is_finite() or price < 0:
        logger.warning("Coercing hourly price %r to 0", value)
        return Decimal(0)
    return price


def to_date(value: date | str) -> date:
    """Accept a ``date`` or an ISO ``YYYY-MM-DD`` string.

    Raises:
        InvalidDateError: If the string is not a calendar day.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise InvalidDateError(value) from None
