"""User-facing text rendering."""

from __future__ import annotations

from .constants import ERROR_PREFIX, OK_PREFIX, REJECTED_PREFIX
from .models import DateTimeFields


def render_value(value: str) -> str:
    # repr without the quotes, so control characters stay visible on one line
    return repr(value)[1:-1]


def render_accepted(value: str) -> str:
    return f"{OK_PREFIX} {render_value(value)}"


def render_rejected(value: str) -> str:
    return f"{REJECTED_PREFIX} {render_value(value)}"


def render_fields(fields: DateTimeFields) -> str:
    return fields.model_dump_json()


def render_error(message: str) -> str:
    return f"{ERROR_PREFIX} {message}"
