# src/tcmb_evds/domain/errors.py
"""
Domain Errors - Validation and Transport Exceptions

This module defines the exceptions raised while constructing EVDS request
values. Every validation error is raised by the constructor of the offending
value object; nothing is deferred to request building or dispatch.

Files that USE this module:
- tcmb_evds.domain.* (value objects raise these errors)
- tcmb_evds.adapters.transport (raises TransportError)
- tcmb_evds.app (maps errors to exit codes)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""


class EvdsError(Exception):
    """Base exception for all tcmb_evds errors."""
    pass


# --- Dates ---

class DateError(EvdsError):
    """Base exception for date and date-range errors."""
    pass


class MalformedDateError(DateError):
    """Raised when date text does not follow the DD-MM-YYYY layout."""
    pass


class InvalidCalendarDateError(DateError):
    """Raised when day, month and year do not form a real Gregorian date."""
    pass


class InvalidDateRangeError(DateError):
    """Raised when a date range starts after it ends."""
    pass


# --- Access configuration ---

class AccessConfigError(EvdsError):
    """Base exception for access token and return format errors."""
    pass


class EmptyTokenError(AccessConfigError):
    """Raised when the access token is empty after trimming."""
    pass


class UnsupportedReturnFormatError(AccessConfigError):
    """Raised when a return format outside json/xml/csv is requested."""
    pass


# --- Currency domain ---

class CurrencyError(EvdsError):
    """Base exception for currency domain errors."""
    pass


class UnsupportedCurrencyCodeError(CurrencyError):
    """Raised when a currency code is not part of the EVDS currency table."""
    pass


class EmptyCurrencyCodeSetError(CurrencyError):
    """Raised when a currency code set is built without any code."""
    pass


class UnsupportedExchangeDirectionError(CurrencyError):
    """Raised when an exchange direction is not buying, selling or both."""
    pass


class UnsupportedCutoffPolicyError(CurrencyError):
    """Raised when a legacy cutoff policy is not one of the known policies."""
    pass


class LegacyNotationDateMismatchError(CurrencyError):
    """Raised when YTL notation is combined with dates it cannot cover."""
    pass


# --- Advanced options ---

class AdvancedOptionsError(EvdsError):
    """Base exception for frequency/aggregation/formula errors."""
    pass


class UnsupportedValueError(AdvancedOptionsError):
    """
    Raised when an advanced option is outside its closed enumeration.

    Attributes:
        field: Name of the rejected option (e.g. "frequency")
        value: The rejected value as given by the caller
    """

    def __init__(self, field: str, value: object):
        self.field = field
        self.value = value
        super().__init__(f"Unsupported {field} value: {value!r}")


# --- Series identifiers ---

class SeriesIdentifierError(EvdsError):
    """Base exception for raw series and data group code errors."""
    pass


class EmptyRawSeriesError(SeriesIdentifierError):
    """Raised when a raw series or data group code is empty."""
    pass


# --- Transport ---

class TransportError(EvdsError):
    """
    Raised when the remote service cannot be reached or rejects a request.

    Attributes:
        status_code: HTTP status code when the service answered, else None
    """

    def __init__(self, message: str, status_code=None):
        self.status_code = status_code
        super().__init__(message)
