"""Faceted search over the joined catalog.

The pipeline order is fixed: text, sport type, location, price, availability,
then facets, sort and pagination. Facets see the filtered set before it is
paginated.
"""

import datetime
import logging
import math
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from functools import lru_cache

import icu

from sportfields.conf import engine_settings
from sportfields.domain import JoinedField, to_date
from sportfields.domain.intervals import to_minutes
from sportfields.services.availability_service import AvailabilityService
from sportfields.services.catalog_service import CatalogService
from sportfields.services.facets import SearchFacets, compute_facets, normalize_location

logger = logging.getLogger(__name__)


class SortKey(Enum):
    PRICE = "price"
    RATING = "rating"
    NAME = "name"


class SortDirection(Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SearchQuery:
    """Filters, ordering and page selection for a catalog search.

    Every filter is optional. The availability filter only applies when
    ``date``, ``start_time`` and ``end_time`` are all set.
    Price bounds are compared as Decimals; a bound that does not parse as a
    number is ignored.
    """

    search: str | None = None
    sport_type: str | None = None
    location: str | None = None
    price_min: Decimal | int | float | str | None = None
    price_max: Decimal | int | float | str | None = None
    date: datetime.date | str | None = None
    start_time: str | None = None
    end_time: str | None = None
    sort_by: SortKey | str | None = None
    sort_dir: SortDirection | str = SortDirection.ASC
    page: int | None = None
    page_size: int | None = None


@dataclass(frozen=True)
class SearchResult:
    """Result envelope for a catalog search."""

    items: list[JoinedField]
    total: int
    facets: SearchFacets = field(default_factory=SearchFacets)
    page: int = 1
    page_size: int = 12

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total / self.page_size))

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1


@lru_cache(maxsize=None)
def get_collator() -> icu.Collator:
    """Vietnamese collator used for name ordering.

    Letters such as "ă", "ơ" and "đ" sort after their base letter, so
    "Az Arena" comes before "Ăn Khang".
    """

    return icu.Collator.createInstance(icu.Locale("vi"))


def name_sort_key(name: str) -> bytes:
    return get_collator().getSortKey(name)


def _positive_or(value: object, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return default
    return value


def _price_bound(value: object) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        bound = Decimal(str(value).strip())
    except InvalidOperation:
        logger.debug("Ignoring unparseable price bound %r", value)
        return None
    return bound if bound.is_finite() else None


def _parse_enum(enum_cls, value):
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        logger.debug("Ignoring unknown %s %r", enum_cls.__name__, value)
        return None


_SORT_KEYS = {
    SortKey.PRICE: lambda f: f.price_per_hour,
    SortKey.RATING: lambda f: f.average_rating or 0,
    SortKey.NAME: lambda f: name_sort_key(f.name),
}


class QueryService:
    """Service for filtered, sorted and paginated field listings."""

    def __init__(self, catalog: CatalogService, availability: AvailabilityService) -> None:
        self._catalog = catalog
        self._availability = availability

    def search(self, query: SearchQuery) -> SearchResult:
        """Run the search pipeline.

        Pagination input never fails a search: missing or non-positive
        ``page``/``page_size`` fall back to the defaults.

        Raises:
            InvalidTimeFormatError: If a supplied start or end time is malformed.
            InvalidDateError: If the supplied date is malformed.
        """
        items = self._catalog.all_fields()
        items = self._filter(items, query)

        facets = compute_facets(items)
        items = self._sort(items, query)

        total = len(items)
        page = _positive_or(query.page, 1)
        page_size = _positive_or(query.page_size, engine_settings.DEFAULT_PAGE_SIZE)
        offset = (page - 1) * page_size
        return SearchResult(
            items=items[offset:offset + page_size],
            total=total,
            facets=facets,
            page=page,
            page_size=page_size,
        )

    def _filter(self, items: list[JoinedField], query: SearchQuery) -> list[JoinedField]:
        if query.search and query.search.strip():
            needle = query.search.lower()
            items = [
                f for f in items
                if needle in f.name.lower()
                or needle in f.shop.name.lower()
                or needle in f.address.lower()
            ]

        if query.sport_type:
            items = [f for f in items if f.sport_type == query.sport_type]

        if query.location:
            items = [f for f in items if query.location in normalize_location(f.address)]

        price_min, price_max = _price_bound(query.price_min), _price_bound(query.price_max)
        if price_min is not None:
            items = [f for f in items if f.price_per_hour >= price_min]
        if price_max is not None:
            items = [f for f in items if f.price_per_hour <= price_max]

        if query.date and query.start_time and query.end_time:
            if to_minutes(query.start_time) < to_minutes(query.end_time):
                on_date = to_date(query.date)
                items = [
                    f for f in items
                    if self._availability.is_available(f.id, on_date, query.start_time, query.end_time)
                ]
        return items

    def _sort(self, items: list[JoinedField], query: SearchQuery) -> list[JoinedField]:
        sort_by = _parse_enum(SortKey, query.sort_by)
        if sort_by is None:
            return items

        descending = _parse_enum(SortDirection, query.sort_dir) is SortDirection.DESC
        # sorted() keeps ties in their filtered order in both directions
        return sorted(items, key=_SORT_KEYS[sort_by], reverse=descending)
