"""The declarative pattern must accept exactly what the recognizer accepts."""

from __future__ import annotations

import pytest

from isostrict.pattern import ISO8601_PATTERN, ISO8601_REGEX, pattern_matches
from isostrict.recognizer import matches

_YEARS = [0, 1, 4, 100, 400, 1900, 1996, 2000, 2019, 2023, 2024, 2100, 2400, 9996, 9999]


def test_pattern_has_no_lookaround() -> None:
    assert "(?=" not in ISO8601_PATTERN
    assert "(?!" not in ISO8601_PATTERN
    assert "(?<" not in ISO8601_PATTERN


def test_agrees_on_every_month_day_pair() -> None:
    for year in _YEARS:
        for month in range(0, 14):
            for day in range(0, 33):
                value = f"{year:04d}-{month:02d}-{day:02d}T12:00:00Z"
                assert pattern_matches(value) is matches(value), value


def test_agrees_on_feb_29_for_every_year() -> None:
    for year in range(0, 10000):
        value = f"{year:04d}-02-29T00:00:00Z"
        assert pattern_matches(value) is matches(value), value


def test_agrees_on_every_offset() -> None:
    for sign in "+-":
        for hours in range(0, 25):
            for minutes in range(0, 61):
                value = f"2025-11-02T10:20:30{sign}{hours:02d}:{minutes:02d}"
                assert pattern_matches(value) is matches(value), value


def test_agrees_on_every_time() -> None:
    for hour in range(0, 25):
        for minute in (0, 30, 59, 60):
            for second in (0, 59, 60):
                value = f"2025-11-02T{hour:02d}:{minute:02d}:{second:02d}Z"
                assert pattern_matches(value) is matches(value), value


@pytest.mark.parametrize(
    "value",
    [
        "2025-11-02T10:20:30Z",
        "2025-11-02T10:20:30.Z",
        "2025-11-02T10:20:30.1234Z",
        "2025-11-02T10:20:30.045+14:00",
        "2025-11-02t10:20:30z",
        "2025-11-02T10:20:30Z\n",
        " 2025-11-02T10:20:30Z",
        "2025-11-02T10:20:30+0100",
    ],
)
def test_agrees_on_shape_edge_cases(value: str) -> None:
    assert pattern_matches(value) is matches(value)


def test_search_is_not_full_span() -> None:
    # Callers must use fullmatch; search finds embedded values.
    assert ISO8601_REGEX.search("x2025-11-02T10:20:30Zx") is not None
    assert not pattern_matches("x2025-11-02T10:20:30Zx")
