"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import date

from sportfields.domain import Booking, Field


class BookingLedger(ABC):
    """Read-only view over the externally owned booking ledger."""

    @abstractmethod
    def reservations_for(self, field_id: int, on_date: date | None = None) -> list[Booking]:
        """Return bookings for a field in source order, optionally on one date.

        The list is a fresh copy; mutating it does not affect the ledger.
        """
        ...

    @abstractmethod
    def all_bookings(self) -> list[Booking]:
        """Return every booking in source order."""
        ...


class FieldStore(ABC):
    """Interface for raw field records owned by the mutation store."""

    @abstractmethod
    def list_fields(self) -> list[Field]:
        """Return all fields in insertion order."""
        ...

    @abstractmethod
    def get_field(self, field_id: int) -> Field | None:
        """Return a field by ID, or None if not found."""
        ...

    @abstractmethod
    def add_field(self, field: Field) -> None:
        """Append a new field."""
        ...

    @abstractmethod
    def save_field(self, field: Field) -> None:
        """Replace an existing field with the same ID."""
        ...

    @abstractmethod
    def next_field_id(self) -> int:
        """Return the identifier the next created field receives."""
        ...
