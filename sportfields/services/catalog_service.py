"""Catalog join - the denormalized field view every read path uses.

Services:
- Depend only on interfaces (stores)
- Keep the joined view in step with the raw field records
- Treat a missing shop as data corruption, never as "not found"
"""

import logging
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, replace

from sportfields.domain import (
    DanglingOwnerReferenceError,
    Field,
    FieldImage,
    FieldStatus,
    JoinedField,
    Review,
    Shop,
    status_category,
)
from sportfields.services.facets import SearchFacets, compute_facets
from sportfields.stores.interfaces import FieldStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogSummary:
    """Field counts per status category and shop approval counts."""

    total_fields: int
    available: int
    maintenance: int
    booked: int
    approved_shops: int
    pending_shops: int


def average_rating(reviews: Iterable[Review]) -> float:
    ratings = [review.rating for review in reviews]
    if not ratings:
        return 0.0
    return sum(ratings) / len(ratings)


class CatalogService:
    """Builds and serves JoinedField records."""

    def __init__(
        self,
        store: FieldStore,
        shops: Iterable[Shop],
        images: Iterable[FieldImage] = (),
        reviews: Iterable[Review] = (),
    ) -> None:
        self._store = store
        self._shops = {shop.id: shop for shop in shops}
        self._images: dict[int, list[FieldImage]] = defaultdict(list)
        for image in images:
            self._images[image.field_id].append(image)
        self._reviews: dict[int, list[Review]] = defaultdict(list)
        for review in reviews:
            self._reviews[review.field_id].append(review)
        self._joined: dict[int, JoinedField] = {}
        self.rebuild()

    def rebuild(self) -> None:
        """Join every raw field from scratch.

        Raises:
            DanglingOwnerReferenceError: If any field's shop was not loaded.
        """
        joined = {}
        for field in self._store.list_fields():
            joined[field.id] = self.join(field)
        self._joined = joined
        logger.info("Joined %d fields across %d shops", len(joined), len(self._shops))

    def get_shop(self, shop_id: int) -> Shop | None:
        return self._shops.get(shop_id)

    def require_shop(self, shop_id: int, field_id: int | None = None) -> Shop:
        """Return the shop or raise DanglingOwnerReferenceError."""
        shop = self._shops.get(shop_id)
        if shop is None:
            logger.error("Field %s references missing shop %s", field_id, shop_id)
            raise DanglingOwnerReferenceError(field_id, shop_id)
        return shop

    def join(self, field: Field) -> JoinedField:
        reviews = tuple(self._reviews.get(field.id, ()))
        return JoinedField(
            field=field,
            shop=self.require_shop(field.shop_id, field.id),
            images=tuple(self._images.get(field.id, ())),
            reviews=reviews,
            average_rating=average_rating(reviews),
        )

    def add(self, field: Field) -> JoinedField:
        """Join a newly created field with no images, no reviews and rating 0.

        Images or reviews already filed under the new id are dropped.

        Raises:
            DanglingOwnerReferenceError: If the field's shop was not loaded.
        """
        shop = self.require_shop(field.shop_id, field.id)
        stray_images = self._images.pop(field.id, [])
        stray_reviews = self._reviews.pop(field.id, [])
        if stray_images or stray_reviews:
            logger.warning(
                "Dropping %d images and %d reviews filed under new field %s",
                len(stray_images),
                len(stray_reviews),
                field.id,
            )
        joined = JoinedField(field=field, shop=shop)
        self._joined[field.id] = joined
        return joined

    def refresh(self, field_id: int) -> JoinedField | None:
        """Re-run the join for one field from its stored record."""
        field = self._store.get_field(field_id)
        if field is None:
            return None
        joined = self.join(field)
        self._joined[field_id] = joined
        return joined

    def patch(self, field: Field) -> JoinedField:
        """Swap in updated field data, keeping shop, images, reviews and rating."""
        current = self._joined.get(field.id)
        if current is None:
            return self.refresh(field.id)
        patched = replace(current, field=field)
        self._joined[field.id] = patched
        return patched

    def all_fields(self) -> list[JoinedField]:
        return list(self._joined.values())

    def fields_for_shop(self, shop_id: int) -> list[JoinedField]:
        return [joined for joined in self._joined.values() if joined.shop_id == shop_id]

    def field_by_id(self, field_id: int) -> JoinedField | None:
        return self._joined.get(field_id)

    def reviews_for_field(self, field_id: int) -> list[Review]:
        return list(self._reviews.get(field_id, ()))

    def catalog_facets(self) -> SearchFacets:
        """Facets over the whole catalog, regardless of any filter."""
        return compute_facets(self._joined.values())

    def summary(self) -> CatalogSummary:
        categories = [status_category(joined.status) for joined in self._joined.values()]
        approved = sum(1 for shop in self._shops.values() if shop.is_approved)
        return CatalogSummary(
            total_fields=len(categories),
            available=categories.count(FieldStatus.AVAILABLE),
            maintenance=categories.count(FieldStatus.MAINTENANCE),
            booked=categories.count(FieldStatus.BOOKED),
            approved_shops=approved,
            pending_shops=len(self._shops) - approved,
        )
