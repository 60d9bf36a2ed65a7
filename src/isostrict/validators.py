"""pydantic field types for strict date-time strings."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator

from .models import DateTimeFields
from .recognizer import recognize


def _require_strict_datetime(value: str) -> str:
    if recognize(value) is None:
        raise ValueError("value is not a strict ISO 8601 date-time")
    return value


def _to_fields(value: Any) -> Any:
    # Dicts and DateTimeFields go on to the model's own validation.
    if not isinstance(value, (str, bytes, bytearray)):
        return value
    fields = recognize(value)
    if fields is None:
        raise ValueError("value is not a strict ISO 8601 date-time")
    return fields


# Keeps the input string as written.
StrictDateTimeStr = Annotated[str, AfterValidator(_require_strict_datetime)]

# Accepts a strict date-time string or its dumped fields.
StrictDateTimeFields = Annotated[DateTimeFields, BeforeValidator(_to_fields)]
