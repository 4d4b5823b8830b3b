"""In-memory implementations of the store interfaces.

Neither store synchronizes access; FieldCatalogEngine holds the lock.
"""

from collections import defaultdict
from collections.abc import Iterable
from datetime import date

from sportfields.domain import Booking, Field
from sportfields.stores.interfaces import BookingLedger, FieldStore


class InMemoryBookingLedger(BookingLedger):
    """Booking ledger indexed by field ID."""

    def __init__(self, bookings: Iterable[Booking] = ()) -> None:
        self._bookings = list(bookings)
        self._by_field: dict[int, list[Booking]] = defaultdict(list)
        for booking in self._bookings:
            self._by_field[booking.field_id].append(booking)

    def reservations_for(self, field_id: int, on_date: date | None = None) -> list[Booking]:
        bookings = self._by_field.get(field_id, [])
        if on_date is None:
            return list(bookings)
        return [b for b in bookings if b.date == on_date]

    def all_bookings(self) -> list[Booking]:
        return list(self._bookings)

    def __len__(self) -> int:
        return len(self._bookings)


class InMemoryFieldStore(FieldStore):
    """Field records keyed by ID, preserving insertion order."""

    def __init__(self, fields: Iterable[Field] = ()) -> None:
        self._fields: dict[int, Field] = {}
        for field in fields:
            self.add_field(field)

    def list_fields(self) -> list[Field]:
        return list(self._fields.values())

    def get_field(self, field_id: int) -> Field | None:
        return self._fields.get(field_id)

    def add_field(self, field: Field) -> None:
        if field.id in self._fields:
            raise ValueError(f"Field {field.id} already exists")
        self._fields[field.id] = field

    def save_field(self, field: Field) -> None:
        if field.id not in self._fields:
            raise KeyError(field.id)
        self._fields[field.id] = field

    def next_field_id(self) -> int:
        return max([0, *self._fields]) + 1

    def __len__(self) -> int:
        return len(self._fields)
