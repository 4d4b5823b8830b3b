"""Bulk loading of the raw catalog records.

The external data source hands over shops, fields, images, reviews and
bookings once at startup, either as in-memory lists of dicts or as a
directory of JSON files (``shops.json``, ``fields.json``, ``fieldImages.json``,
``reviews.json``, ``bookings.json``). Every record is validated here, so the
engine only ever sees well-formed domain models.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from sportfields.domain import CatalogSnapshot
from sportfields.handlers.serializers import (
    BookingRecordSerializer,
    FieldImageRecordSerializer,
    FieldRecordSerializer,
    ReviewRecordSerializer,
    ShopRecordSerializer,
)

logger = logging.getLogger(__name__)

RECORD_FILES = {
    "shops": "shops.json",
    "fields": "fields.json",
    "images": "fieldImages.json",
    "reviews": "reviews.json",
    "bookings": "bookings.json",
}

_SERIALIZERS = {
    "shops": ShopRecordSerializer,
    "fields": FieldRecordSerializer,
    "images": FieldImageRecordSerializer,
    "reviews": ReviewRecordSerializer,
    "bookings": BookingRecordSerializer,
}


def _load_records(kind: str, records: Iterable[Mapping[str, Any]]) -> tuple:
    serializer = _SERIALIZERS[kind](data=list(records), many=True)
    serializer.is_valid(raise_exception=True)
    return tuple(serializer.save())


def load_snapshot(payload: Mapping[str, Iterable[Mapping[str, Any]]]) -> CatalogSnapshot:
    """Validate raw record lists keyed by kind and build a CatalogSnapshot.

    Missing kinds load as empty.

    Raises:
        rest_framework.exceptions.ValidationError: If any record is malformed.
    """
    loaded = {kind: _load_records(kind, payload.get(kind, ())) for kind in RECORD_FILES}
    logger.info(
        "Loaded snapshot: %s",
        ", ".join(f"{len(records)} {kind}" for kind, records in loaded.items()),
    )
    return CatalogSnapshot(**loaded)


def load_snapshot_from_directory(directory: str | Path) -> CatalogSnapshot:
    """Read the JSON record files in ``directory``; absent files load as empty."""
    directory = Path(directory)
    payload = {}
    for kind, filename in RECORD_FILES.items():
        path = directory / filename
        if not path.exists():
            logger.warning("No %s found in %s", filename, directory)
            continue
        with path.open(encoding="utf-8") as fh:
            payload[kind] = json.load(fh)
    return load_snapshot(payload)
