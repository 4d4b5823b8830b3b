"""Domain models for the field catalog.

These are pure domain objects. Raw records come from the external loader
(see sportfields/loaders.py); nothing here touches persistence.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from sportfields.domain.intervals import to_minutes


@dataclass(frozen=True)
class Shop:
    """Domain representation of a Shop (the owner of fields)."""

    id: int
    name: str
    address: str = ""
    bank_account_number: str = ""
    bank_name: str = ""
    is_approved: bool = True


@dataclass(frozen=True)
class Field:
    """Domain representation of a bookable Field."""

    id: int
    shop_id: int
    name: str
    sport_type: str
    price_per_hour: Decimal
    address: str
    status: str


@dataclass(frozen=True)
class FieldImage:
    """Domain representation of a field image."""

    id: int
    field_id: int
    url: str
    sort_order: int = 0
    is_primary: bool = False


@dataclass(frozen=True)
class Review:
    """Domain representation of a customer Review."""

    id: int
    field_id: int
    rating: int
    comment: str = ""
    customer_name: str = ""


@dataclass(frozen=True)
class Booking:
    """Domain representation of a Booking in the external ledger."""

    id: int
    field_id: int
    date: date
    start_time: str
    end_time: str
    customer_name: str = ""
    total_price: Decimal = Decimal(0)
    payment_status: str = "pending"

    @property
    def start_minutes(self) -> int:
        return to_minutes(self.start_time)

    @property
    def end_minutes(self) -> int:
        return to_minutes(self.end_time)


@dataclass(frozen=True)
class JoinedField:
    """A Field merged with its shop, images, reviews and derived rating."""

    field: Field
    shop: Shop
    images: tuple[FieldImage, ...] = ()
    reviews: tuple[Review, ...] = ()
    average_rating: float = 0.0

    @property
    def id(self) -> int:
        return self.field.id

    @property
    def shop_id(self) -> int:
        return self.field.shop_id

    @property
    def name(self) -> str:
        return self.field.name

    @property
    def sport_type(self) -> str:
        return self.field.sport_type

    @property
    def price_per_hour(self) -> Decimal:
        return self.field.price_per_hour

    @property
    def address(self) -> str:
        return self.field.address

    @property
    def status(self) -> str:
        return self.field.status


@dataclass(frozen=True)
class CatalogSnapshot:
    """Raw records handed over by the bulk loader at startup."""

    fields: tuple[Field, ...] = ()
    shops: tuple[Shop, ...] = ()
    images: tuple[FieldImage, ...] = ()
    reviews: tuple[Review, ...] = ()
    bookings: tuple[Booking, ...] = ()
