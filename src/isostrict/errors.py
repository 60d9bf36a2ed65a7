"""Typed exceptions for isostrict."""

from __future__ import annotations


class IsostrictError(Exception):
    """Base exception for isostrict failures."""


class InvalidTimestampError(ValueError, IsostrictError):
    """Raised by caller-side gates when a value is not a strict date-time."""

    def __init__(self, value: object, message: str | None = None) -> None:
        self.value = value
        super().__init__(message or f"Invalid timestamp: {value!r}")


class StartupValidationError(IsostrictError):
    """Raised when startup arguments are invalid."""
