from sportfields.domain.errors import (
    DanglingOwnerReferenceError,
    DomainError,
    ErrorCode,
    InvalidDateError,
    InvalidTimeFormatError,
    InvalidWindowError,
)
from sportfields.domain.models import (
    Booking,
    CatalogSnapshot,
    Field,
    FieldImage,
    JoinedField,
    Review,
    Shop,
)
from sportfields.domain.value_objects import (
    FieldStatus,
    TimeWindow,
    coerce_price,
    status_category,
    to_date,
)

__all__ = [
    "Booking",
    "CatalogSnapshot",
    "Field",
    "FieldImage",
    "JoinedField",
    "Review",
    "Shop",
    "FieldStatus",
    "TimeWindow",
    "coerce_price",
    "status_category",
    "to_date",
    "DomainError",
    "ErrorCode",
    "InvalidDateError",
    "InvalidTimeFormatError",
    "InvalidWindowError",
    "DanglingOwnerReferenceError",
]
