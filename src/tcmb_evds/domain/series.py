# src/tcmb_evds/domain/series.py
"""
Series Identifiers - Raw Codes and Currency Series Composites

This module produces the exact series-code strings EVDS looks up:
- RawSeries / DataGroupCode: caller-chosen codes for the unrestricted path
- CurrencySeries: one currency derived as TP.DK.<CODE>.<A|S>
- MultipleCurrencySeries: several currencies joined with "-"

With legacy notation enabled the "YTL" segment is inserted after the table
segment (TP.DK.YTL.<CODE>.<A|S>). Legacy notation only exists for dates
before LEGACY_NOTATION_CUTOFF; the check lives in check_legacy_notation()
and is shared by both composites.

Files that USE this module:
- tcmb_evds.application.request_builder (serializes series codes)
- tcmb_evds.application.evds_service (operation facade)
- tcmb_evds.app (builds series from CLI arguments)
- tests.test_series (unit tests)

Files that this module USES:
- tcmb_evds.domain.currency (CurrencyCode, CurrencyCodeSet, ExchangeDirection, LegacyCutoffPolicy)
- tcmb_evds.domain.dates (DateSelector, LEGACY_NOTATION_CUTOFF)
- tcmb_evds.domain.errors (validation errors)
- tcmb_evds.shared.validators (validate_series_code)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from typing import List, Union  # Type hints

from tcmb_evds.domain.currency import (
    CurrencyCode,
    CurrencyCodeSet,
    ExchangeDirection,
    LegacyCutoffPolicy,
)
from tcmb_evds.domain.dates import LEGACY_NOTATION_CUTOFF, DateSelector
from tcmb_evds.domain.errors import EmptyRawSeriesError, LegacyNotationDateMismatchError
from tcmb_evds.shared.validators import validate_series_code

SERIES_PREFIX = "TP"
CURRENCY_TABLE = "DK"
LEGACY_SEGMENT = "YTL"
SEGMENT_SEPARATOR = "."
MULTI_SERIES_SEPARATOR = "-"


def count_series(code: str) -> int:
    """Number of series joined with '-' in a series code string."""
    return len([part for part in code.split(MULTI_SERIES_SEPARATOR) if part])


def check_legacy_notation(
    dates: DateSelector,
    legacy_notation: bool,
    policy: LegacyCutoffPolicy = LegacyCutoffPolicy.ALLOW_STRADDLING,
) -> None:
    """
    Validate legacy (YTL) notation against the requested dates.

    Args:
        dates: Date scope of the request
        legacy_notation: Whether YTL series were requested
        policy: Treatment of ranges straddling the cutoff

    Raises:
        LegacyNotationDateMismatchError: If the dates lie entirely on or
            after the cutoff, or straddle it under REJECT_STRADDLING
    """
    if not legacy_notation:
        return
    if dates.lies_entirely_on_or_after(LEGACY_NOTATION_CUTOFF):
        raise LegacyNotationDateMismatchError(
            f"YTL notation needs dates before {LEGACY_NOTATION_CUTOFF}; got {dates}"
        )
    if policy is LegacyCutoffPolicy.REJECT_STRADDLING and dates.straddles(LEGACY_NOTATION_CUTOFF):
        raise LegacyNotationDateMismatchError(
            f"Date range {dates} straddles the YTL cutoff {LEGACY_NOTATION_CUTOFF}"
        )


def derive_currency_codes(
    direction: ExchangeDirection,
    currency: CurrencyCode,
    legacy_notation: bool,
) -> List[str]:
    """
    Derive the series codes for one currency.

    Returns one code per direction token: a single code for BUYING or
    SELLING, buying then selling for BOTH.
    """
    head = [SERIES_PREFIX, CURRENCY_TABLE]
    if legacy_notation:
        head.append(LEGACY_SEGMENT)
    return [
        SEGMENT_SEPARATOR.join(head + [currency.code, token])
        for token in direction.tokens
    ]


@dataclass(frozen=True)
class RawSeries:
    """
    Caller-supplied series code for the unrestricted path.

    No grammar is enforced; several series may be joined with "-",
    e.g. "TP.DK.USD.A-TP.DK.EUR.A".
    """
    code: str

    def __post_init__(self) -> None:
        if not validate_series_code(self.code):
            raise EmptyRawSeriesError("Series code must not be empty")
        object.__setattr__(self, "code", self.code.strip())

    @property
    def series_count(self) -> int:
        return count_series(self.code)

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class DataGroupCode:
    """Caller-supplied data group code, e.g. "bie_yssk"."""
    code: str

    def __post_init__(self) -> None:
        if not validate_series_code(self.code):
            raise EmptyRawSeriesError("Data group code must not be empty")
        object.__setattr__(self, "code", self.code.strip())

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class CurrencySeries:
    """
    Validated series for a single currency.

    Attributes:
        direction: Buying, selling or both quotations (member, name or token)
        currency: Currency from the EVDS table (member or ISO string)
        dates: Date scope of the request
        legacy_notation: Request the pre-2005 YTL series
        cutoff_policy: Treatment of ranges straddling the YTL cutoff
    """
    direction: ExchangeDirection
    currency: CurrencyCode
    dates: DateSelector
    legacy_notation: bool = False
    cutoff_policy: LegacyCutoffPolicy = LegacyCutoffPolicy.ALLOW_STRADDLING

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", ExchangeDirection.parse(self.direction))
        object.__setattr__(self, "currency", CurrencyCode.parse(self.currency))
        object.__setattr__(self, "cutoff_policy", LegacyCutoffPolicy.parse(self.cutoff_policy))
        check_legacy_notation(self.dates, self.legacy_notation, self.cutoff_policy)

    @property
    def code(self) -> str:
        """Series code string sent as the 'series' parameter."""
        return MULTI_SERIES_SEPARATOR.join(
            derive_currency_codes(self.direction, self.currency, self.legacy_notation)
        )

    @property
    def series_count(self) -> int:
        return len(self.direction.tokens)

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class MultipleCurrencySeries:
    """
    Validated series for several currencies sharing one direction and notation.

    Attributes:
        direction: Buying, selling or both quotations, applied to every currency
        currencies: Ordered currency set; an iterable of codes is accepted
        dates: Date scope of the request
        legacy_notation: Request the pre-2005 YTL series for every currency
        cutoff_policy: Treatment of ranges straddling the YTL cutoff
    """
    direction: ExchangeDirection
    currencies: CurrencyCodeSet
    dates: DateSelector
    legacy_notation: bool = False
    cutoff_policy: LegacyCutoffPolicy = LegacyCutoffPolicy.ALLOW_STRADDLING

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", ExchangeDirection.parse(self.direction))
        object.__setattr__(self, "cutoff_policy", LegacyCutoffPolicy.parse(self.cutoff_policy))
        if not isinstance(self.currencies, CurrencyCodeSet):
            object.__setattr__(self, "currencies", CurrencyCodeSet(self.currencies))
        check_legacy_notation(self.dates, self.legacy_notation, self.cutoff_policy)

    @property
    def code(self) -> str:
        codes: List[str] = []
        for currency in self.currencies:
            codes.extend(derive_currency_codes(self.direction, currency, self.legacy_notation))
        return MULTI_SERIES_SEPARATOR.join(codes)

    @property
    def series_count(self) -> int:
        return len(self.currencies) * len(self.direction.tokens)

    def __str__(self) -> str:
        return self.code


SeriesIdentifier = Union[RawSeries, CurrencySeries, MultipleCurrencySeries]
