"""Proleptic Gregorian calendar rules and UTC offset bounds."""

from __future__ import annotations

from .constants import (
    DAYS_IN_MONTH,
    LEAP_FEBRUARY_DAYS,
    MAX_OFFSET_MINUTES,
    MIN_OFFSET_MINUTES,
)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year``.

    Raises:
        ValueError: If ``month`` is outside 1-12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month out of range: {month}")
    if month == 2 and is_leap_year(year):
        return LEAP_FEBRUARY_DAYS
    return DAYS_IN_MONTH[month - 1]


def is_valid_date(year: int, month: int, day: int) -> bool:
    if not 0 <= year <= 9999 or not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_month(year, month)


def offset_minutes(sign: str, hours: int, minutes: int) -> int:
    total = hours * 60 + minutes
    return -total if sign == "-" else total


def is_offset_in_bounds(sign: str, hours: int, minutes: int) -> bool:
    """Check a signed ``HH:MM`` offset against the -12:00..+14:00 range.

    ``minutes`` must already be a lexically valid 00-59 value; the bound is
    applied to the signed total so that +14:00 and -12:00 are the only
    accepted values with those hour components.
    """
    if not 0 <= minutes <= 59:
        return False
    return MIN_OFFSET_MINUTES <= offset_minutes(sign, hours, minutes) <= MAX_OFFSET_MINUTES
