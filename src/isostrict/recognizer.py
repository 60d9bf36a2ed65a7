"""Strict ISO 8601 / RFC 3339 date-time recognition.

Recognition is a lexical match followed by semantic guards. The lexical
pattern fixes the shape and the per-field numeric ranges that do not depend
on other fields; the guards then check the day against the month and the
year's leap status, and the offset against the -12:00..+14:00 range.

Every function here is pure. Malformed input of any kind is a rejection,
never an exception.
"""

from __future__ import annotations

import re

from .calendar_rules import days_in_month, is_offset_in_bounds
from .constants import MAX_INPUT_LENGTH, UTC_MARKER
from .errors import InvalidTimestampError
from .models import DateTimeFields

# ASCII digits only: ``\d`` would also accept other Unicode decimal digits.
_LEXICAL_PATTERN = re.compile(
    r"(?P<year>[0-9]{4})"
    r"-(?P<month>0[1-9]|1[0-2])"
    r"-(?P<day>0[1-9]|[12][0-9]|3[01])"
    r"T(?P<hour>[01][0-9]|2[0-3])"
    r":(?P<minute>[0-5][0-9])"
    r":(?P<second>[0-5][0-9])"
    r"(?:\.(?P<fraction>[0-9]{1,3}))?"
    r"(?:(?P<utc>Z)|(?P<sign>[+-])(?P<offset_hour>[01][0-9]|2[0-3]):(?P<offset_minute>[0-5][0-9]))"
)


class StrictDateTimeRecognizer:
    """Recognizer for ``YYYY-MM-DDTHH:mm:ss[.sss](Z|±HH:mm)``.

    Holds no per-call state; a single instance can be shared between threads.
    """

    def __init__(self) -> None:
        self._pattern = _LEXICAL_PATTERN

    def matches(self, text: object) -> bool:
        return self._match(text) is not None

    def recognize(self, text: object) -> DateTimeFields | None:
        """Return the captured fields, or ``None`` when ``text`` is rejected."""
        match = self._match(text)
        if match is None:
            return None

        offset = (
            UTC_MARKER
            if match["utc"]
            else f"{match['sign']}{match['offset_hour']}:{match['offset_minute']}"
        )
        return DateTimeFields(
            year=int(match["year"]),
            month=int(match["month"]),
            day=int(match["day"]),
            hour=int(match["hour"]),
            minute=int(match["minute"]),
            second=int(match["second"]),
            fractional_second=match["fraction"],
            offset=offset,
        )

    def _match(self, text: object) -> re.Match[str] | None:
        candidate = _coerce_candidate(text)
        if candidate is None or len(candidate) > MAX_INPUT_LENGTH:
            return None

        match = self._pattern.fullmatch(candidate)
        if match is None:
            return None

        year = int(match["year"])
        month = int(match["month"])
        if int(match["day"]) > days_in_month(year, month):
            return None

        if not match["utc"] and not is_offset_in_bounds(
            match["sign"], int(match["offset_hour"]), int(match["offset_minute"])
        ):
            return None

        return match


def _coerce_candidate(text: object) -> str | None:
    if isinstance(text, str):
        return text
    if isinstance(text, (bytes, bytearray)):
        try:
            return bytes(text).decode("ascii")
        except UnicodeDecodeError:
            return None
    return None


_DEFAULT_RECOGNIZER = StrictDateTimeRecognizer()


def matches(text: object) -> bool:
    """Return True iff ``text`` is a complete, calendar-correct strict date-time."""
    return _DEFAULT_RECOGNIZER.matches(text)


def recognize(text: object) -> DateTimeFields | None:
    """Return the fields of ``text`` when accepted, otherwise ``None``."""
    return _DEFAULT_RECOGNIZER.recognize(text)


def ensure_strict_datetime(text: object) -> DateTimeFields:
    """Recognize ``text`` or raise.

    Raises:
        InvalidTimestampError: If ``text`` is not a strict date-time.
    """
    fields = recognize(text)
    if fields is None:
        raise InvalidTimestampError(text)
    return fields
