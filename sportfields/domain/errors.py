"""Domain error codes for the sportfields module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_TIME_FORMAT = "INVALID_TIME_FORMAT"
    INVALID_WINDOW = "INVALID_WINDOW"
    INVALID_DATE = "INVALID_DATE"
    DANGLING_OWNER_REFERENCE = "DANGLING_OWNER_REFERENCE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidTimeFormatError(DomainError):
    """Raised when a wall-clock string is not HH:MM."""

    def __init__(self, value: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TIME_FORMAT,
            message="Time must use the HH:MM format",
        )
        self.value = value


class InvalidWindowError(DomainError):
    """Raised when a time window does not start before it ends."""

    def __init__(self, start: str, end: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_WINDOW,
            message="Window start must be before its end",
        )
        self.start = start
        self.end = end


class DanglingOwnerReferenceError(DomainError):
    """Raised when a field points at a shop that was never loaded.

    This means the loader broke its contract; callers must not recover.
    """

    def __init__(self, field_id: int | None, shop_id: int) -> None:
        super().__init__(
            code=ErrorCode.DANGLING_OWNER_REFERENCE,
            message="Field references a shop that does not exist",
        )
        self.field_id = field_id
        self.shop_id = shop_id


class InvalidDateError(DomainError):
    """Raised when a calendar day is not YYYY-MM-DD."""

    def __init__(self, value: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE,
            message="Date must use the YYYY-MM-DD format",
        )
        self.value = value
