"""Facet computation over joined fields."""

from collections.abc import Iterable
from dataclasses import dataclass

from sportfields.domain import JoinedField


@dataclass(frozen=True)
class SearchFacets:
    """Distinct sport types and locations of a field set, sorted ascending."""

    sport_types: tuple[str, ...] = ()
    locations: tuple[str, ...] = ()


def normalize_location(address: str) -> str:
    """Reduce an address to its last two comma-separated segments.

    "12 Le Loi, Hai Chau, Da Nang" becomes "Hai Chau,Da Nang".
    """
    return ",".join(part.strip() for part in address.split(",")[-2:])


def compute_facets(fields: Iterable[JoinedField]) -> SearchFacets:
    sport_types: set[str] = set()
    locations: set[str] = set()
    for joined in fields:
        sport_types.add(joined.sport_type)
        locations.add(normalize_location(joined.address))
    return SearchFacets(sport_types=tuple(sorted(sport_types)), locations=tuple(sorted(locations)))
