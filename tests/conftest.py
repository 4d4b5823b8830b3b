"""Pytest configuration and shared fixtures."""

import pytest

from sportfields.domain import CatalogSnapshot, Field, FieldImage, Review, Shop
from sportfields.services.engine import FieldCatalogEngine
from tests.factories import make_booking, make_field


@pytest.fixture
def shops() -> tuple[Shop, ...]:
    return (
        Shop(id=1, name="Sân Bóng Hòa Xuân", address="Cẩm Lệ, Da Nang"),
        Shop(id=2, name="Tennis Club Saigon", address="Quận 1, Ho Chi Minh", is_approved=False),
    )


@pytest.fixture
def fields() -> tuple[Field, ...]:
    return (
        make_field(1, "Alpha Arena", "soccer", 100000, "12 Le Loi, Hai Chau, Da Nang"),
        make_field(2, "Bravo Court", "tennis", 200000, "5 Nguyen Hue, Quan 1, Ho Chi Minh", shop_id=2),
        make_field(3, "Charlie Pitch", "soccer", 150000, "9 Tran Phu, Son Tra, Da Nang", status="maintenance"),
    )


@pytest.fixture
def snapshot(shops, fields) -> CatalogSnapshot:
    return CatalogSnapshot(
        fields=fields,
        shops=shops,
        images=(FieldImage(id=1, field_id=1, url="https://img.example/alpha.jpg", is_primary=True),),
        reviews=(
            Review(id=1, field_id=1, rating=5),
            Review(id=2, field_id=1, rating=4),
            Review(id=3, field_id=2, rating=3),
        ),
        bookings=(make_booking(1, 1, "10:00", "11:00"),),
    )


@pytest.fixture
def engine(snapshot) -> FieldCatalogEngine:
    return FieldCatalogEngine(snapshot)
