from __future__ import annotations

from typing import Optional


class FormatError(ValueError):
    """Base error for malformed cells in the climatological tables."""

    def __init__(self, message: str = "", *, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class InvalidLength(FormatError):
    """Raised when a fixed-width field has the wrong number of characters."""


class InvalidComponent(FormatError):
    """Raised when a fixed-width sub-field is not a non-negative integer."""


class InvalidDirection(FormatError):
    """Raised when a longitude ends in something other than 1 (E) or 2 (W)."""


class EmptyValue(FormatError):
    """Raised when a value-with-date cell has no number before the date."""


class MissingDate(FormatError):
    """Raised when a value-with-date cell has no opening parenthesis."""


class MissingClosingParen(FormatError):
    """Raised when a value-with-date cell never closes its date."""


class TrailingContent(FormatError):
    """Raised when text follows the closing parenthesis of a date."""


class InvalidParameter(FormatError):
    """Raised when an aggregate row names an unknown statistical parameter."""


class DuplicateAggregate(FormatError):
    """Raised when a (station, parameter) pair repeats in an aggregate table."""


class ConfigurationError(RuntimeError):
    """Raised for invalid METEOSTATS_* settings."""


class RecordDecodeError(RuntimeError):
    """A cell failed to decode; carries where it happened.

    The original codec error is available as ``__cause__`` and ``reason``.
    """

    def __init__(
        self,
        reason: Exception,
        *,
        source: Optional[str] = None,
        row: Optional[int] = None,
        field: Optional[str] = None,
        station_id: Optional[str] = None,
    ) -> None:
        self.reason = reason
        self.source = source
        self.row = row
        self.field = field
        self.station_id = station_id
        super().__init__(self._describe())

    def _describe(self) -> str:
        where = []
        if self.source:
            where.append(self.source)
        if self.row is not None:
            where.append(f"row {self.row}")
        if self.station_id:
            where.append(f"station {self.station_id}")
        if self.field:
            where.append(f"field {self.field}")
        prefix = ", ".join(where) or "unknown location"
        return f"{prefix}: {self.reason}"


__all__ = [
    "FormatError",
    "InvalidLength",
    "InvalidComponent",
    "InvalidDirection",
    "EmptyValue",
    "MissingDate",
    "MissingClosingParen",
    "TrailingContent",
    "InvalidParameter",
    "DuplicateAggregate",
    "ConfigurationError",
    "RecordDecodeError",
]
