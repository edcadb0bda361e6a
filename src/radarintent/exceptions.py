"""Custom exception hierarchy for radarintent."""

from __future__ import annotations

from typing import Any


class RadarIntentError(Exception):
    """Base exception for all radarintent errors."""


class RadarIntentConfigError(RadarIntentError):
    """Invalid or missing configuration."""


class RadarIntentDecodeError(RadarIntentError):
    """A position could not be decoded from a message."""

    def __init__(
        self,
        message: str,
        *,
        field: str = "",
    ) -> None:
        self.field = field
        super().__init__(message)


class MissingFieldError(RadarIntentDecodeError):
    """A required extra (latitude or longitude) is absent.

    Raised by :func:`radarintent.decode_position` when a message passed
    classification but does not carry a complete position.
    """


class UnsupportedValueError(RadarIntentDecodeError):
    """An extra holds a value that is neither a 32-bit nor a 64-bit float."""

    def __init__(
        self,
        message: str,
        *,
        field: str = "",
        value: Any = None,
    ) -> None:
        self.value = value
        super().__init__(message, field=field)
