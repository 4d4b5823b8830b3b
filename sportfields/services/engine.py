"""FieldCatalogEngine - the single entry point callers use.

The engine owns the field store, the joined catalog and the ledger snapshot,
and guards them with one reader-writer lock. Reads run concurrently; writes
exclude every reader, so nobody observes a half-updated joined field.
"""

import logging
from collections.abc import Mapping
from datetime import date
from typing import Any

from readerwriterlock import rwlock

from sportfields.domain import Booking, CatalogSnapshot, JoinedField, Review, to_date
from sportfields.services.availability_service import AvailabilityService
from sportfields.services.catalog_service import CatalogService, CatalogSummary
from sportfields.services.facets import SearchFacets
from sportfields.services.mutation_service import MutationService
from sportfields.services.query_service import QueryService, SearchQuery, SearchResult
from sportfields.stores.memory_store import InMemoryBookingLedger, InMemoryFieldStore

logger = logging.getLogger(__name__)


class FieldCatalogEngine:
    """Thread-safe facade over the catalog, query, availability and mutation services."""

    def __init__(self, snapshot: CatalogSnapshot) -> None:
        self._lock = rwlock.RWLockFairD()
        self._store = InMemoryFieldStore(snapshot.fields)
        self._catalog = CatalogService(
            self._store,
            shops=snapshot.shops,
            images=snapshot.images,
            reviews=snapshot.reviews,
        )
        self._install_ledger(InMemoryBookingLedger(snapshot.bookings))
        self._mutations = MutationService(self._store, self._catalog)
        logger.info(
            "Catalog engine loaded: %d fields, %d bookings",
            len(self._store),
            len(snapshot.bookings),
        )

    def _install_ledger(self, ledger: InMemoryBookingLedger) -> None:
        self._ledger = ledger
        self._availability = AvailabilityService(ledger)
        self._query = QueryService(self._catalog, self._availability)

    # Read path

    def search(self, query: SearchQuery | None = None) -> SearchResult:
        with self._lock.gen_rlock():
            return self._query.search(query or SearchQuery())

    def field_by_id(self, field_id: int) -> JoinedField | None:
        with self._lock.gen_rlock():
            return self._catalog.field_by_id(field_id)

    def fields_for_shop(self, shop_id: int) -> list[JoinedField]:
        with self._lock.gen_rlock():
            return self._catalog.fields_for_shop(shop_id)

    def all_fields(self) -> list[JoinedField]:
        with self._lock.gen_rlock():
            return self._catalog.all_fields()

    def is_available(self, field_id: int, on_date: date | str, start: str, end: str) -> bool:
        with self._lock.gen_rlock():
            return self._availability.is_available(field_id, to_date(on_date), start, end)

    def conflicts(self, field_id: int, on_date: date | str, start: str, end: str) -> list[Booking]:
        with self._lock.gen_rlock():
            return self._availability.conflicts(field_id, to_date(on_date), start, end)

    def reservations_for(self, field_id: int, on_date: date | str | None = None) -> list[Booking]:
        day = None if on_date is None else to_date(on_date)
        with self._lock.gen_rlock():
            return self._ledger.reservations_for(field_id, day)

    def reviews_for_field(self, field_id: int) -> list[Review]:
        with self._lock.gen_rlock():
            return self._catalog.reviews_for_field(field_id)

    def catalog_facets(self) -> SearchFacets:
        with self._lock.gen_rlock():
            return self._catalog.catalog_facets()

    def summary(self) -> CatalogSummary:
        with self._lock.gen_rlock():
            return self._catalog.summary()

    # Write path

    def create_field(self, shop_id: int, data: Mapping[str, Any]) -> JoinedField:
        with self._lock.gen_wlock():
            return self._mutations.create_field(shop_id, data)

    def update_field(self, field_id: int, patch: Mapping[str, Any]) -> JoinedField | None:
        with self._lock.gen_wlock():
            return self._mutations.update_field(field_id, patch)

    def set_status(self, field_id: int, status: str) -> JoinedField | None:
        with self._lock.gen_wlock():
            return self._mutations.set_status(field_id, status)

    def refresh_ledger(self, bookings: list[Booking]) -> None:
        """Replace the booking snapshot between requests."""
        ledger = InMemoryBookingLedger(bookings)
        with self._lock.gen_wlock():
            self._install_ledger(ledger)
        logger.info("Booking ledger refreshed: %d bookings", len(ledger))
