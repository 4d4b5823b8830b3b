"""Time-window feasibility checks against the booking ledger."""

from datetime import date

from sportfields.domain import Booking
from sportfields.domain.intervals import overlaps, to_minutes
from sportfields.stores.interfaces import BookingLedger


class AvailabilityService:
    """Answers whether a field is free for a window on a given day.

    This is a point-in-time check. Whoever writes the booking afterwards
    must re-validate atomically; two callers can both see a window as free.
    """

    def __init__(self, ledger: BookingLedger) -> None:
        self._ledger = ledger

    def conflicts(self, field_id: int, on_date: date, start: str, end: str) -> list[Booking]:
        """Return the bookings on ``on_date`` that overlap ``[start, end)``.

        Raises:
            InvalidTimeFormatError: If ``start`` or ``end`` is not HH:MM.
        """
        start_minutes, end_minutes = to_minutes(start), to_minutes(end)
        if start_minutes >= end_minutes:
            return []
        return [
            booking
            for booking in self._ledger.reservations_for(field_id, on_date)
            if overlaps(start_minutes, end_minutes, booking.start_minutes, booking.end_minutes)
        ]

    def is_available(self, field_id: int, on_date: date, start: str, end: str) -> bool:
        """Return True if no booking overlaps ``[start, end)`` on ``on_date``.

        A window that does not start before it ends is never available.

        Raises:
            InvalidTimeFormatError: If ``start`` or ``end`` is not HH:MM.
        """
        start_minutes, end_minutes = to_minutes(start), to_minutes(end)
        if start_minutes >= end_minutes:
            return False
        return not any(
            overlaps(start_minutes, end_minutes, booking.start_minutes, booking.end_minutes)
            for booking in self._ledger.reservations_for(field_id, on_date)
        )
