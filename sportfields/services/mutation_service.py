"""Create and update field records.

Writes go to the field store first, then into the joined view, so the next
read sees them. Input is coerced rather than rejected: a non-numeric price
becomes 0 and missing text becomes an empty string.
"""

import logging
from collections.abc import Mapping
from dataclasses import replace
from enum import Enum
from typing import Any

from sportfields.conf import engine_settings
from sportfields.domain import Field, JoinedField, coerce_price
from sportfields.services.catalog_service import CatalogService
from sportfields.stores.interfaces import FieldStore

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({"name", "sport_type", "price_per_hour", "address", "status"})


def _clean_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
    return str(value).strip()


def _coerce(key: str, value: Any) -> Any:
    if key == "price_per_hour":
        return coerce_price(value)
    return _clean_text(value)


class MutationService:
    """Service for field create/update operations."""

    def __init__(self, store: FieldStore, catalog: CatalogService) -> None:
        self._store = store
        self._catalog = catalog

    def create_field(self, shop_id: int, data: Mapping[str, Any]) -> JoinedField:
        """Create a field for a shop and return its joined view.

        The identifier is always assigned here, never taken from ``data``.

        Raises:
            DanglingOwnerReferenceError: If the shop does not exist. Nothing
                is written in that case.
        """
        field_id = self._store.next_field_id()
        self._catalog.require_shop(shop_id, field_id)

        status = _clean_text(data.get("status")) or engine_settings.DEFAULT_STATUS
        field = Field(
            id=field_id,
            shop_id=shop_id,
            name=_clean_text(data.get("name")),
            sport_type=_clean_text(data.get("sport_type")),
            price_per_hour=coerce_price(data.get("price_per_hour")),
            address=_clean_text(data.get("address")),
            status=status,
        )
        self._store.add_field(field)
        joined = self._catalog.add(field)
        logger.info("Created field %s for shop %s", field_id, shop_id)
        return joined

    def update_field(self, field_id: int, patch: Mapping[str, Any]) -> JoinedField | None:
        """Apply a partial patch; return None if the field does not exist.

        Only name, sport_type, price_per_hour, address and status can change.
        Shop, images, reviews and rating are left as they are.
        """
        field = self._store.get_field(field_id)
        if field is None:
            logger.debug("Update skipped, field %s not found", field_id)
            return None

        ignored = set(patch) - UPDATABLE_FIELDS
        if ignored:
            logger.warning("Ignoring non-updatable keys %s for field %s", sorted(ignored), field_id)

        changes = {key: _coerce(key, value) for key, value in patch.items() if key in UPDATABLE_FIELDS}
        updated = replace(field, **changes)
        self._store.save_field(updated)
        logger.info("Updated field %s: %s", field_id, sorted(changes))
        return self._catalog.patch(updated)

    def set_status(self, field_id: int, status: str) -> JoinedField | None:
        return self.update_field(field_id, {"status": status})
