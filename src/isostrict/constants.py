"""Literal constants used by isostrict."""

APP_NAME = "isostrict"

UTC_MARKER = "Z"

# Longest accepted form: 2038-01-19T03:14:07.045+13:59
MAX_INPUT_LENGTH = 29

DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
LEAP_FEBRUARY_DAYS = 29

# Real-world UTC offset bounds, in minutes, inclusive on both ends.
MIN_OFFSET_MINUTES = -(12 * 60)
MAX_OFFSET_MINUTES = 14 * 60

FRACTION_MAX_DIGITS = 3

OK_PREFIX = "OK"
REJECTED_PREFIX = "REJECTED"
ERROR_PREFIX = "ERROR:"
