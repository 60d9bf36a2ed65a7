"""Domain models for isostrict."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .calendar_rules import is_offset_in_bounds, is_valid_date, offset_minutes
from .constants import FRACTION_MAX_DIGITS, UTC_MARKER
from .errors import InvalidTimestampError


class DateTimeFields(BaseModel):
    """The eight logical fields of an accepted strict date-time.

    ``fractional_second`` and ``offset`` keep the digits exactly as written: a
    fraction of ``"5"`` is not padded to ``"500"`` and ``"+00:00"`` is not
    folded into ``"Z"``.
    """

    model_config = ConfigDict(frozen=True)

    year: int = Field(ge=0, le=9999)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    hour: int = Field(ge=0, le=23)
    minute: int = Field(ge=0, le=59)
    second: int = Field(ge=0, le=59)
    fractional_second: str | None = Field(default=None, pattern=r"^[0-9]{1,3}$")
    offset: str = Field(pattern=r"^(Z|[+-][0-9]{2}:[0-9]{2})$")

    @model_validator(mode="after")
    def check_calendar_and_offset(self) -> DateTimeFields:
        if not is_valid_date(self.year, self.month, self.day):
            raise ValueError(
                f"{self.year:04d}-{self.month:02d}-{self.day:02d} is not a calendar date"
            )
        if self.offset != UTC_MARKER:
            sign, hours, minutes = _split_offset(self.offset)
            if not is_offset_in_bounds(sign, hours, minutes):
                raise ValueError(f"UTC offset out of range: {self.offset}")
        return self

    @property
    def is_utc_marker(self) -> bool:
        return self.offset == UTC_MARKER

    @property
    def utc_offset(self) -> timedelta:
        if self.is_utc_marker:
            return timedelta(0)
        sign, hours, minutes = _split_offset(self.offset)
        return timedelta(minutes=offset_minutes(sign, hours, minutes))

    def to_string(self) -> str:
        """Rebuild the accepted input string from the captured fields."""
        text = (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )
        if self.fractional_second is not None:
            text += f".{self.fractional_second}"
        return text + self.offset

    def to_datetime(self) -> datetime:
        """Build an aware datetime.

        The fraction is scaled to microseconds here only. Year 0000 is a valid
        strict date-time but has no ``datetime`` representation.

        Raises:
            InvalidTimestampError: If the year is below ``datetime.MINYEAR``.
        """
        microsecond = 0
        if self.fractional_second is not None:
            microsecond = int(self.fractional_second.ljust(FRACTION_MAX_DIGITS, "0")) * 1000
        try:
            return datetime(
                self.year,
                self.month,
                self.day,
                self.hour,
                self.minute,
                self.second,
                microsecond,
                tzinfo=timezone(self.utc_offset),
            )
        except ValueError as exc:
            raise InvalidTimestampError(
                self.to_string(),
                f"Cannot represent {self.to_string()} as a datetime: {exc}",
            ) from exc


def _split_offset(offset: str) -> tuple[str, int, int]:
    return offset[0], int(offset[1:3]), int(offset[4:6])
