"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import date, datetime
from decimal import Decimal

import pytest

from sportfields.domain import (
    DanglingOwnerReferenceError,
    ErrorCode,
    FieldStatus,
    InvalidDateError,
    InvalidTimeFormatError,
    InvalidWindowError,
    TimeWindow,
    coerce_price,
    status_category,
    to_date,
)
from sportfields.domain.intervals import compute_end_time, format_minutes, overlaps, to_minutes
from tests.factories import make_booking


class TestToMinutes:
    """Tests for wall-clock parsing."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("00:00", 0),
            ("09:30", 570),
            ("9:30", 570),
            ("23:59", 1439),
            ("10:15:45", 615),
            ("24:00", 1440),
        ],
    )
    def test_valid_times(self, value, expected):
        """HH:MM, H:MM and HH:MM:SS all parse; seconds are dropped."""
        assert to_minutes(value) == expected

    @pytest.mark.parametrize("value", ["", "noon", "10", "10:5", "25:00", "24:30", "10:60", "10:00:61", None, 600])
    def test_invalid_times_raise(self, value):
        """Anything that is not a wall-clock time raises InvalidTimeFormatError."""
        with pytest.raises(InvalidTimeFormatError) as exc_info:
            to_minutes(value)
        assert exc_info.value.code is ErrorCode.INVALID_TIME_FORMAT
        assert exc_info.value.value == value

    def test_format_minutes_pads_and_wraps(self):
        """format_minutes zero-pads and wraps the hour past midnight."""
        assert format_minutes(65) == "01:05"
        assert format_minutes(1440 + 30) == "00:30"


class TestOverlaps:
    """Tests for half-open interval overlap."""

    def test_partial_overlap(self):
        """Windows sharing some minutes overlap."""
        assert overlaps(600, 660, 630, 690)

    def test_containment(self):
        """A window inside another overlaps it."""
        assert overlaps(600, 720, 630, 640)

    def test_touching_windows_do_not_overlap(self):
        """[09:00, 10:00) and [10:00, 11:00) share no minute."""
        assert not overlaps(540, 600, 600, 660)
        assert not overlaps(600, 660, 540, 600)

    def test_disjoint_windows(self):
        """Windows far apart do not overlap."""
        assert not overlaps(480, 540, 720, 780)


class TestComputeEndTime:
    """Tests for compute_end_time."""

    def test_whole_hours(self):
        """Adds whole hours to the start."""
        assert compute_end_time("10:00", 2) == "12:00"

    def test_fractional_hours(self):
        """Fractional durations round to the minute."""
        assert compute_end_time("10:15", 1.5) == "11:45"

    def test_wraps_past_midnight(self):
        """23:00 plus three hours reports 02:00."""
        assert compute_end_time("23:00", 3) == "02:00"


class TestTimeWindow:
    """Tests for TimeWindow value object."""

    def test_from_strings(self):
        """TimeWindow.from_strings converts both ends to minutes."""
        window = TimeWindow.from_strings("10:00", "11:30")
        assert (window.start, window.end) == (600, 690)
        assert window.duration_minutes == 90
        assert str(window) == "10:00-11:30"

    def test_rejects_empty_window(self):
        """A window whose start equals its end raises InvalidWindowError."""
        with pytest.raises(InvalidWindowError) as exc_info:
            TimeWindow.from_strings("10:00", "10:00")
        assert exc_info.value.start == "10:00"
        assert exc_info.value.code is ErrorCode.INVALID_WINDOW

    def test_rejects_reversed_window(self):
        """Constructing with start after end raises InvalidWindowError."""
        with pytest.raises(InvalidWindowError):
            TimeWindow(start=660, end=600)

    def test_overlaps_with(self):
        """overlaps_with follows half-open semantics."""
        window = TimeWindow(start=600, end=660)
        assert window.overlaps_with(630, 690)
        assert not window.overlaps_with(660, 720)


class TestCoercePrice:
    """Tests for permissive price coercion."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (150000, Decimal("150000")),
            (99.5, Decimal("99.5")),
            ("120000", Decimal("120000")),
            (" 80000 ", Decimal("80000")),
            (Decimal("5.25"), Decimal("5.25")),
            (0, Decimal(0)),
        ],
    )
    def test_numeric_input_is_kept(self, value, expected):
        """Numbers and numeric strings become Decimals."""
        assert coerce_price(value) == expected

    @pytest.mark.parametrize("value", ["abc", "", None, True, -5, float("nan"), float("inf"), "NaN"])
    def test_bad_input_becomes_zero(self, value):
        """Non-numeric, non-finite or negative input coerces to 0."""
        assert coerce_price(value) == Decimal(0)

    def test_coercion_is_logged(self, caplog):
        """Coercing to 0 logs a warning."""
        with caplog.at_level("WARNING", logger="sportfields"):
            coerce_price("free")
        assert "Coercing hourly price" in caplog.text


class TestStatusCategory:
    """Tests for status alias folding."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("available", FieldStatus.AVAILABLE),
            (" Active ", FieldStatus.AVAILABLE),
            ("Bảo trì", FieldStatus.MAINTENANCE),
            ("under-maintenance", FieldStatus.MAINTENANCE),
            ("RESERVED", FieldStatus.BOOKED),
            ("tạm đóng", FieldStatus.INACTIVE),
            ("draft", FieldStatus.DRAFT),
        ],
    )
    def test_known_aliases(self, raw, expected):
        """Known spellings map to their canonical status."""
        assert status_category(raw) is expected

    @pytest.mark.parametrize("raw", ["", None, "mystery"])
    def test_unknown_is_none(self, raw):
        """Empty or unrecognized statuses have no category."""
        assert status_category(raw) is None


class TestToDate:
    """Tests for calendar day parsing."""

    def test_accepts_date(self):
        """A date passes through unchanged."""
        assert to_date(date(2025, 6, 1)) == date(2025, 6, 1)

    def test_accepts_datetime(self):
        """A datetime is truncated to its day."""
        assert to_date(datetime(2025, 6, 1, 18, 30)) == date(2025, 6, 1)

    def test_accepts_iso_string(self):
        """An ISO string is parsed."""
        assert to_date("2025-06-01") == date(2025, 6, 1)

    @pytest.mark.parametrize("value", ["01/06/2025", "2025-13-01", "tomorrow"])
    def test_rejects_bad_strings(self, value):
        """Malformed days raise InvalidDateError."""
        with pytest.raises(InvalidDateError) as exc_info:
            to_date(value)
        assert exc_info.value.code is ErrorCode.INVALID_DATE


class TestErrors:
    """Tests for domain error rendering."""

    def test_str_includes_code(self):
        """str() prefixes the message with the error code."""
        error = DanglingOwnerReferenceError(7, 99)
        assert str(error) == "DANGLING_OWNER_REFERENCE: Field references a shop that does not exist"
        assert (error.field_id, error.shop_id) == (7, 99)


class TestBooking:
    """Tests for Booking minute accessors."""

    def test_minutes(self):
        """start_minutes and end_minutes parse the stored times."""
        booking = make_booking(1, 1, "10:00", "11:30")
        assert (booking.start_minutes, booking.end_minutes) == (600, 690)
