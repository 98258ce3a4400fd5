# src/tcmb_evds/domain/__init__.py
"""
Domain Layer - Validated Value Objects

This package contains the immutable values an EVDS request is built from.
Every value validates itself at construction time.
No dependencies on infrastructure or external systems.
"""

from tcmb_evds.domain.access import AccessConfig, ReturnFormat
from tcmb_evds.domain.advanced import (
    AdvancedQueryOptions,
    AggregationType,
    DataFrequency,
    DataGroupListing,
    DataGroupMode,
    Formula,
)
from tcmb_evds.domain.currency import (
    CurrencyCode,
    CurrencyCodeSet,
    ExchangeDirection,
    LegacyCutoffPolicy,
)
from tcmb_evds.domain.dates import LEGACY_NOTATION_CUTOFF, CalendarDate, DateSelector
from tcmb_evds.domain.errors import (
    AccessConfigError,
    AdvancedOptionsError,
    CurrencyError,
    DateError,
    EmptyCurrencyCodeSetError,
    EmptyRawSeriesError,
    EmptyTokenError,
    EvdsError,
    InvalidCalendarDateError,
    InvalidDateRangeError,
    LegacyNotationDateMismatchError,
    MalformedDateError,
    SeriesIdentifierError,
    TransportError,
    UnsupportedCurrencyCodeError,
    UnsupportedCutoffPolicyError,
    UnsupportedExchangeDirectionError,
    UnsupportedReturnFormatError,
    UnsupportedValueError,
)
from tcmb_evds.domain.series import (
    CurrencySeries,
    DataGroupCode,
    MultipleCurrencySeries,
    RawSeries,
)

__all__ = [
    "AccessConfig",
    "ReturnFormat",
    "AdvancedQueryOptions",
    "AggregationType",
    "DataFrequency",
    "DataGroupListing",
    "DataGroupMode",
    "Formula",
    "CurrencyCode",
    "CurrencyCodeSet",
    "ExchangeDirection",
    "LegacyCutoffPolicy",
    "LEGACY_NOTATION_CUTOFF",
    "CalendarDate",
    "DateSelector",
    "CurrencySeries",
    "DataGroupCode",
    "MultipleCurrencySeries",
    "RawSeries",
    "EvdsError",
    "DateError",
    "MalformedDateError",
    "InvalidCalendarDateError",
    "InvalidDateRangeError",
    "AccessConfigError",
    "EmptyTokenError",
    "UnsupportedReturnFormatError",
    "CurrencyError",
    "UnsupportedCurrencyCodeError",
    "EmptyCurrencyCodeSetError",
    "UnsupportedExchangeDirectionError",
    "UnsupportedCutoffPolicyError",
    "LegacyNotationDateMismatchError",
    "AdvancedOptionsError",
    "UnsupportedValueError",
    "SeriesIdentifierError",
    "EmptyRawSeriesError",
    "TransportError",
]
