"""Library exception classes."""

from __future__ import annotations


class MetOfficeError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(MetOfficeError):
    """Raised when configuration is invalid or incomplete."""


class CoordinateValidationError(MetOfficeError, ValueError):
    """Raised when a latitude/longitude pair cannot form a coordinate."""


class OutOfRangeError(CoordinateValidationError):
    """Raised when latitude is outside [-90, 90] or longitude outside [-180, 180]."""


class NotFiniteError(CoordinateValidationError):
    """Raised when a coordinate component is NaN or infinite."""


class DecodeError(MetOfficeError):
    """Raised when forecast response bytes cannot be decoded."""


class MalformedDocumentError(DecodeError):
    """Raised when response bytes are not a syntactically valid JSON document."""


class _FieldError(DecodeError):
    def __init__(self, field: str, message: str | None = None) -> None:
        super().__init__(message or field)
        self.field = field


class MissingRequiredFieldError(_FieldError):
    """Raised when a field the cadence schema marks mandatory is absent."""

    def __init__(self, field: str) -> None:
        super().__init__(field, f"Missing required field '{field}'.")


class TypeMismatchError(_FieldError):
    """Raised when a field is present but holds the wrong JSON type or an unusable value."""

    def __init__(self, field: str, *, expected: str, actual: str) -> None:
        super().__init__(field, f"Field '{field}' expected {expected}, got {actual}.")
        self.expected = expected
        self.actual = actual


class TimeZoneError(MetOfficeError):
    """Raised when an instant cannot be rendered in a time zone."""


class UnknownZoneError(TimeZoneError):
    """Raised when the zone database cannot resolve an identifier."""

    def __init__(self, zone: str) -> None:
        super().__init__(f"Unknown time zone identifier {zone!r}.")
        self.zone = zone
