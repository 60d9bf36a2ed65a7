"""Declarative single-regex form of the strict date-time grammar.

The day alternatives are chosen by month, and February 29 is only reachable
through the leap-year alternation, so the whole acceptance set (including the
offset range) lives in one pattern without lookaround. Always apply it with
``fullmatch``.
"""

from __future__ import annotations

import re

_YEAR = r"[0-9]{4}"

# Divisible by 4 but not a century, or a century divisible by 400.
_LEAP_YEAR = (
    r"(?:[0-9]{2}(?:0[48]|[2468][048]|[13579][26])"
    r"|(?:[02468][048]|[13579][26])00)"
)

_MONTH_DAY = (
    r"(?:(?:0[13578]|1[02])-(?:0[1-9]|[12][0-9]|3[01])"
    r"|(?:0[469]|11)-(?:0[1-9]|[12][0-9]|30)"
    r"|02-(?:0[1-9]|1[0-9]|2[0-8]))"
)

_DATE = rf"(?:{_YEAR}-{_MONTH_DAY}|{_LEAP_YEAR}-02-29)"

_TIME = r"(?:[01][0-9]|2[0-3]):[0-5][0-9]:[0-5][0-9](?:\.[0-9]{1,3})?"

_OFFSET = (
    r"(?:Z"
    r"|\+(?:0[0-9]|1[0-3]):[0-5][0-9]|\+14:00"
    r"|-(?:0[0-9]|1[01]):[0-5][0-9]|-12:00)"
)

ISO8601_PATTERN = rf"{_DATE}T{_TIME}{_OFFSET}"

ISO8601_REGEX = re.compile(ISO8601_PATTERN)


def pattern_matches(text: str) -> bool:
    return ISO8601_REGEX.fullmatch(text) is not None
