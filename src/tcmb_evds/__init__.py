# src/tcmb_evds/__init__.py
"""
tcmb-evds - Validated Request Construction for the CBRT EVDS Web Service

Builds syntactically and semantically valid requests for the Electronic
Data Delivery System of the Central Bank of the Republic of Turkey:
dates, currency series, frequency formulas and access settings are
validated before any network call is made.
"""

__version__ = "0.1.0"

from tcmb_evds.domain import (
    AccessConfig,
    AdvancedQueryOptions,
    CalendarDate,
    CurrencyCode,
    CurrencyCodeSet,
    CurrencySeries,
    DataGroupListing,
    DateSelector,
    EvdsError,
    ExchangeDirection,
    MultipleCurrencySeries,
    RawSeries,
    ReturnFormat,
)
from tcmb_evds.application import EndpointKind, EvdsService, RequestBuilder

__all__ = [
    "AccessConfig",
    "AdvancedQueryOptions",
    "CalendarDate",
    "CurrencyCode",
    "CurrencyCodeSet",
    "CurrencySeries",
    "DataGroupListing",
    "DateSelector",
    "EvdsError",
    "ExchangeDirection",
    "MultipleCurrencySeries",
    "RawSeries",
    "ReturnFormat",
    "EndpointKind",
    "EvdsService",
    "RequestBuilder",
]
