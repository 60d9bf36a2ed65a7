"""Strict ISO 8601 / RFC 3339 date-time recognition."""

from .calendar_rules import days_in_month, is_leap_year
from .errors import InvalidTimestampError, IsostrictError
from .models import DateTimeFields
from .pattern import ISO8601_PATTERN, ISO8601_REGEX
from .recognizer import (
    StrictDateTimeRecognizer,
    ensure_strict_datetime,
    matches,
    recognize,
)

__all__ = [
    "DateTimeFields",
    "ISO8601_PATTERN",
    "ISO8601_REGEX",
    "InvalidTimestampError",
    "IsostrictError",
    "StrictDateTimeRecognizer",
    "days_in_month",
    "ensure_strict_datetime",
    "is_leap_year",
    "matches",
    "recognize",
]
