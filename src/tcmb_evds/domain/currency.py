# src/tcmb_evds/domain/currency.py
"""
Currency Domain - Currency Codes, Exchange Direction and Cutoff Policy

This module contains the closed enumerations used to derive EVDS currency
series codes:
- CurrencyCode: currencies quoted in the CBRT indicative rates table (TP.DK)
- CurrencyCodeSet: ordered, de-duplicated group of codes for multi-series requests
- ExchangeDirection: buying, selling, or both quotations
- LegacyCutoffPolicy: treatment of ranges straddling the YTL cutoff

Files that USE this module:
- tcmb_evds.domain.series (CurrencySeries and MultipleCurrencySeries)
- tcmb_evds.app (parses currency codes from the command line)
- tests.test_currency (unit tests)

Files that this module USES:
- tcmb_evds.domain.errors (CurrencyError subclasses)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from enum import Enum  # Closed enumerations with wire codes
from typing import Iterable, Iterator, Tuple, Union  # Type hints

from tcmb_evds.domain.errors import (
    EmptyCurrencyCodeSetError,
    UnsupportedCurrencyCodeError,
    UnsupportedCutoffPolicyError,
    UnsupportedExchangeDirectionError,
)


class CurrencyCode(Enum):
    """Currencies in the CBRT indicative exchange rate table, valued by wire code."""
    USD = "USD"  # US dollar
    AUD = "AUD"  # Australian dollar
    DKK = "DKK"  # Danish krone
    EUR = "EUR"  # Euro
    GBP = "GBP"  # Pound sterling
    CHF = "CHF"  # Swiss franc
    SEK = "SEK"  # Swedish krona
    CAD = "CAD"  # Canadian dollar
    KWD = "KWD"  # Kuwaiti dinar
    NOK = "NOK"  # Norwegian krone
    SAR = "SAR"  # Saudi riyal
    JPY = "JPY"  # Japanese yen
    BGN = "BGN"  # Bulgarian lev
    RON = "RON"  # Romanian leu
    RUB = "RUB"  # Russian ruble
    IRR = "IRR"  # Iranian rial
    CNY = "CNY"  # Chinese renminbi
    PKR = "PKR"  # Pakistani rupee
    QAR = "QAR"  # Qatari riyal
    KRW = "KRW"  # South Korean won
    AZN = "AZN"  # Azerbaijani manat
    AED = "AED"  # UAE dirham
    XDR = "XDR"  # IMF special drawing right

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union["CurrencyCode", str]) -> "CurrencyCode":
        """
        Resolve a currency from a member or its ISO code (case-insensitive).

        Raises:
            UnsupportedCurrencyCodeError: If the code is not in the EVDS table
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise UnsupportedCurrencyCodeError(f"Unsupported currency code: {value!r}")


class CurrencyCodeSet:
    """
    Ordered set of currency codes for a multi-series request.

    Duplicates are dropped silently; first insertion wins the position.
    Instances are immutable: with_code() returns a new set.
    """

    __slots__ = ("_codes",)

    def __init__(self, codes: Iterable[Union[CurrencyCode, str]]):
        """
        Args:
            codes: Currency codes (members or ISO strings), in request order

        Raises:
            UnsupportedCurrencyCodeError: If any code is unknown
            EmptyCurrencyCodeSetError: If no code is given
        """
        ordered = []
        for value in codes:
            code = CurrencyCode.parse(value)
            if code not in ordered:
                ordered.append(code)
        if not ordered:
            raise EmptyCurrencyCodeSetError("At least one currency code is required")
        object.__setattr__(self, "_codes", tuple(ordered))

    def __setattr__(self, name, value):
        raise AttributeError("CurrencyCodeSet is immutable")

    @property
    def codes(self) -> Tuple[CurrencyCode, ...]:
        return self._codes

    def with_code(self, code: Union[CurrencyCode, str]) -> "CurrencyCodeSet":
        return CurrencyCodeSet(self._codes + (CurrencyCode.parse(code),))

    def __iter__(self) -> Iterator[CurrencyCode]:
        return iter(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def __contains__(self, item) -> bool:
        return item in self._codes

    def __eq__(self, other) -> bool:
        if not isinstance(other, CurrencyCodeSet):
            return NotImplemented
        return self._codes == other._codes

    def __hash__(self) -> int:
        return hash(self._codes)

    def __repr__(self) -> str:
        return f"CurrencyCodeSet([{', '.join(c.name for c in self._codes)}])"


class ExchangeDirection(Enum):
    """
    Quotation side of a currency series.

    BOTH is the neutral default and expands to the buying and the selling
    series, in that order.
    """
    BUYING = "A"
    SELLING = "S"
    BOTH = "A-S"

    @property
    def tokens(self) -> Tuple[str, ...]:
        """Series suffix tokens selected by this direction."""
        if self is ExchangeDirection.BOTH:
            return (ExchangeDirection.BUYING.value, ExchangeDirection.SELLING.value)
        return (self.value,)

    @classmethod
    def parse(cls, value: Union["ExchangeDirection", str]) -> "ExchangeDirection":
        """
        Resolve a direction from a member, its name or its token ("A", "S", "A-S").

        Raises:
            UnsupportedExchangeDirectionError: If value names no direction
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            for member in cls:
                if member.value == text.upper() or member.name == text.upper():
                    return member
        raise UnsupportedExchangeDirectionError(f"Unsupported exchange direction: {value!r}")

    @classmethod
    def default(cls) -> "ExchangeDirection":
        return cls.BOTH


class LegacyCutoffPolicy(Enum):
    """
    How YTL notation treats a date range straddling the redenomination cutoff.

    A selector lying entirely on or after the cutoff is rejected under
    either policy.
    """
    ALLOW_STRADDLING = "allow_straddling"
    REJECT_STRADDLING = "reject_straddling"

    @classmethod
    def parse(cls, value: Union["LegacyCutoffPolicy", str]) -> "LegacyCutoffPolicy":
        """
        Resolve a policy from a member or its value/name (case-insensitive).

        Raises:
            UnsupportedCutoffPolicyError: If value names no policy
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip().lower()
            for member in cls:
                if member.value == text:
                    return member
        raise UnsupportedCutoffPolicyError(f"Unsupported legacy cutoff policy: {value!r}")
