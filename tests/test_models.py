"""Tests for DateTimeFields."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from isostrict.errors import InvalidTimestampError
from isostrict.models import DateTimeFields


def _fields(**overrides: object) -> DateTimeFields:
    data: dict[str, object] = {
        "year": 2025,
        "month": 11,
        "day": 2,
        "hour": 10,
        "minute": 20,
        "second": 30,
        "fractional_second": None,
        "offset": "Z",
    }
    data.update(overrides)
    return DateTimeFields(**data)


def test_to_string_pads_numeric_fields() -> None:
    assert _fields(year=7, month=1, day=9, hour=0, minute=5, second=0).to_string() == (
        "0007-01-09T00:05:00Z"
    )


def test_to_string_keeps_fraction_digits() -> None:
    assert _fields(fractional_second="5").to_string() == "2025-11-02T10:20:30.5Z"
    assert _fields(fractional_second="050", offset="-03:30").to_string() == (
        "2025-11-02T10:20:30.050-03:30"
    )


def test_utc_offset() -> None:
    assert _fields().utc_offset == timedelta(0)
    assert _fields(offset="+00:00").utc_offset == timedelta(0)
    assert _fields(offset="-00:00").utc_offset == timedelta(0)
    assert _fields(offset="+05:45").utc_offset == timedelta(hours=5, minutes=45)
    assert _fields(offset="-09:30").utc_offset == -timedelta(hours=9, minutes=30)


def test_to_datetime_scales_fraction_to_microseconds() -> None:
    dt = _fields(fractional_second="5", offset="+01:00").to_datetime()
    assert dt == datetime(
        2025, 11, 2, 10, 20, 30, 500000, tzinfo=timezone(timedelta(hours=1))
    )

    assert _fields(fractional_second="045").to_datetime().microsecond == 45000


def test_to_datetime_is_aware_for_utc_marker() -> None:
    dt = _fields().to_datetime()
    assert dt.utcoffset() == timedelta(0)


def test_to_datetime_rejects_year_zero() -> None:
    with pytest.raises(InvalidTimestampError, match="Cannot represent"):
        _fields(year=0).to_datetime()


def test_fields_are_frozen() -> None:
    fields = _fields()
    with pytest.raises(ValidationError):
        fields.year = 2026  # type: ignore[misc]


@pytest.mark.parametrize(
    "overrides",
    [
        {"month": 4, "day": 31},
        {"year": 2023, "month": 2, "day": 29},
        {"hour": 24},
        {"second": 60},
        {"fractional_second": ""},
        {"fractional_second": "1234"},
        {"offset": "z"},
        {"offset": "+14:01"},
        {"offset": "-13:00"},
        {"offset": "+0100"},
    ],
)
def test_invalid_fields_rejected(overrides: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        _fields(**overrides)


def test_model_dump_keeps_raw_strings() -> None:
    assert _fields(fractional_second="5", offset="-00:00").model_dump() == {
        "year": 2025,
        "month": 11,
        "day": 2,
        "hour": 10,
        "minute": 20,
        "second": 30,
        "fractional_second": "5",
        "offset": "-00:00",
    }
