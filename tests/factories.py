"""Builders for domain records used across the test suite."""

from datetime import date
from decimal import Decimal

from sportfields.domain import Booking, Field

PLAY_DATE = date(2025, 6, 1)


def make_field(field_id, name, sport_type, price, address, shop_id=1, status="available") -> Field:
    return Field(
        id=field_id,
        shop_id=shop_id,
        name=name,
        sport_type=sport_type,
        price_per_hour=Decimal(price),
        address=address,
        status=status,
    )


def make_booking(booking_id, field_id, start, end, on_date=PLAY_DATE) -> Booking:
    return Booking(id=booking_id, field_id=field_id, date=on_date, start_time=start, end_time=end)
