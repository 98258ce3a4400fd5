# src/tcmb_evds/application/request_builder.py
"""
Request Builder - Serialization of Validated Values into EVDS Requests

This module turns already-validated value objects into an immutable request
descriptor: the endpoint kind, the path below the service root and the
ordered query parameters. Every input was validated when it was constructed;
the one exception is a currency composite handed new dates, which is
rebuilt so its legacy notation check runs again.

EVDS expects its parameters glued directly onto the path, e.g.
    https://evds2.tcmb.gov.tr/service/evds/series=TP.DK.USD.S&startDate=...

Files that USE this module:
- tcmb_evds.application.evds_service (builds requests for each operation)
- tcmb_evds.adapters.transport.* (sends RequestBuilder descriptors)
- tcmb_evds.adapters.formatting.formatter (renders descriptors for display)
- tests.test_request_builder (unit tests)

Files that this module USES:
- tcmb_evds.domain.* (validated value objects)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from collections import OrderedDict  # Ordered query parameter mapping
from dataclasses import dataclass, replace  # Data classes; replace re-runs validation
from enum import Enum  # Endpoint kinds
from typing import List, Optional, Tuple, Union  # Type hints
from urllib.parse import quote  # Percent-encoding of parameter values

from tcmb_evds.domain.access import AccessConfig, mask_token
from tcmb_evds.domain.advanced import AdvancedQueryOptions, DataGroupListing
from tcmb_evds.domain.dates import DateSelector
from tcmb_evds.domain.series import (
    MULTI_SERIES_SEPARATOR,
    CurrencySeries,
    DataGroupCode,
    MultipleCurrencySeries,
    SeriesIdentifier,
)

# Query parameter names, as EVDS spells them
PARAM_SERIES = "series"
PARAM_DATA_GROUP = "datagroup"
PARAM_START_DATE = "startDate"
PARAM_END_DATE = "endDate"
PARAM_TYPE = "type"
PARAM_KEY = "key"
PARAM_FREQUENCY = "frequency"
PARAM_AGGREGATION = "aggregationTypes"
PARAM_FORMULA = "formulas"
PARAM_MODE = "mode"
PARAM_CODE = "code"

PARAM_SEPARATOR = "&"
# Series grammar characters stay literal in the URL
SAFE_CHARACTERS = ".-_~"


class EndpointKind(Enum):
    """Operations offered by EVDS, valued by their path below the service root."""
    # Unrestricted path
    DATA = "data"
    ADVANCED_DATA = "advanced_data"
    DATA_GROUP = "data_group"
    CATEGORIES = "categories"
    ADVANCED_DATA_GROUP = "advanced_data_group"
    SERIES_LIST = "series_list"
    # Currency path
    CURRENCY_DATA = "currency_data"
    CURRENCY_ADVANCED_DATA = "currency_advanced_data"
    CURRENCY_MULTIPLE_DATA = "currency_multiple_data"

    @property
    def path(self) -> str:
        return ENDPOINT_PATHS[self]


ENDPOINT_PATHS = {
    EndpointKind.DATA: "",
    EndpointKind.ADVANCED_DATA: "",
    EndpointKind.DATA_GROUP: "",
    EndpointKind.CATEGORIES: "categories/",
    EndpointKind.ADVANCED_DATA_GROUP: "datagroups/",
    EndpointKind.SERIES_LIST: "serieList/",
    EndpointKind.CURRENCY_DATA: "",
    EndpointKind.CURRENCY_ADVANCED_DATA: "",
    EndpointKind.CURRENCY_MULTIPLE_DATA: "",
}

Params = Tuple[Tuple[str, str], ...]


def _date_params(dates: DateSelector) -> List[Tuple[str, str]]:
    return [
        (PARAM_START_DATE, dates.start.to_text()),
        (PARAM_END_DATE, dates.end.to_text()),
    ]


def _access_params(access: AccessConfig) -> List[Tuple[str, str]]:
    return [(PARAM_TYPE, access.return_format.code), (PARAM_KEY, access.token)]


def _advanced_params(options: AdvancedQueryOptions, series_count: int) -> List[Tuple[str, str]]:
    """
    Frequency formula parameters.

    EVDS wants one aggregation type and one formula per requested series,
    joined with '-'; the frequency applies to the whole request.
    """
    count = max(series_count, 1)
    return [
        (PARAM_FREQUENCY, options.frequency.value),
        (PARAM_AGGREGATION, MULTI_SERIES_SEPARATOR.join([options.aggregation.value] * count)),
        (PARAM_FORMULA, MULTI_SERIES_SEPARATOR.join([options.formula.value] * count)),
    ]


def _series_kind(series: SeriesIdentifier, advanced: bool) -> EndpointKind:
    if isinstance(series, MultipleCurrencySeries):
        return EndpointKind.CURRENCY_MULTIPLE_DATA
    if isinstance(series, CurrencySeries):
        return EndpointKind.CURRENCY_ADVANCED_DATA if advanced else EndpointKind.CURRENCY_DATA
    return EndpointKind.ADVANCED_DATA if advanced else EndpointKind.DATA


@dataclass(frozen=True)
class RequestBuilder:
    """
    Fully resolved EVDS request.

    Attributes:
        kind: Operation this request performs
        path: Path below the service root ("" for series operations)
        params: Ordered (name, value) query parameters, unencoded
    """
    kind: EndpointKind
    path: str
    params: Params

    @classmethod
    def build(
        cls,
        access: AccessConfig,
        series: SeriesIdentifier,
        dates: DateSelector,
        advanced: Optional[AdvancedQueryOptions] = None,
    ) -> "RequestBuilder":
        """
        Build a series data request.

        Args:
            access: Token and return format
            series: Raw series or currency series composite
            dates: Date scope of the request
            advanced: Optional frequency formulas

        Returns:
            RequestBuilder for DATA/ADVANCED_DATA or one of the currency kinds

        Raises:
            LegacyNotationDateMismatchError: If a currency composite is given
                dates other than its own and its YTL notation cannot cover them
        """
        if isinstance(series, (CurrencySeries, MultipleCurrencySeries)) and series.dates != dates:
            # Rebuilding re-runs the composite's legacy notation check on the new dates
            series = replace(series, dates=dates)
        return cls._series_request(access, series, dates, advanced)

    @classmethod
    def for_currency(
        cls,
        access: AccessConfig,
        series: Union[CurrencySeries, MultipleCurrencySeries],
        advanced: Optional[AdvancedQueryOptions] = None,
    ) -> "RequestBuilder":
        """Build a currency request over the dates the composite was validated with."""
        return cls._series_request(access, series, series.dates, advanced)

    @classmethod
    def _series_request(
        cls,
        access: AccessConfig,
        series: SeriesIdentifier,
        dates: DateSelector,
        advanced: Optional[AdvancedQueryOptions],
    ) -> "RequestBuilder":
        kind = _series_kind(series, advanced is not None)
        params = [(PARAM_SERIES, series.code)]
        params += _date_params(dates)
        params += _access_params(access)
        if advanced is not None:
            params += _advanced_params(advanced, series.series_count)
        return cls(kind=kind, path=kind.path, params=tuple(params))

    @classmethod
    def for_data_group(
        cls, access: AccessConfig, group: DataGroupCode, dates: DateSelector
    ) -> "RequestBuilder":
        kind = EndpointKind.DATA_GROUP
        params = [(PARAM_DATA_GROUP, group.code)] + _date_params(dates) + _access_params(access)
        return cls(kind=kind, path=kind.path, params=tuple(params))

    @classmethod
    def for_categories(cls, access: AccessConfig) -> "RequestBuilder":
        kind = EndpointKind.CATEGORIES
        return cls(kind=kind, path=kind.path, params=tuple(_access_params(access)))

    @classmethod
    def for_advanced_data_group(
        cls, access: AccessConfig, listing: DataGroupListing = DataGroupListing()
    ) -> "RequestBuilder":
        """
        Build a data group listing request.

        Args:
            access: Token and return format
            listing: Validated mode and code (all groups by default)
        """
        kind = EndpointKind.ADVANCED_DATA_GROUP
        params = [(PARAM_MODE, listing.mode.value)]
        if listing.code is not None:
            params.append((PARAM_CODE, listing.code.code))
        params += _access_params(access)
        return cls(kind=kind, path=kind.path, params=tuple(params))

    @classmethod
    def for_series_list(cls, access: AccessConfig, group: DataGroupCode) -> "RequestBuilder":
        kind = EndpointKind.SERIES_LIST
        params = [(PARAM_CODE, group.code)] + _access_params(access)
        return cls(kind=kind, path=kind.path, params=tuple(params))

    @property
    def query_params(self) -> "OrderedDict[str, str]":
        return OrderedDict(self.params)

    def query_string(self, mask_key: bool = False) -> str:
        """
        Percent-encode the parameters as name=value pairs joined with '&'.

        Args:
            mask_key: Replace the API key with a masked form (for logs)
        """
        pairs = []
        for name, value in self.params:
            if mask_key and name == PARAM_KEY:
                pairs.append(f"{name}={mask_token(value)}")
                continue
            pairs.append(f"{name}={quote(value, safe=SAFE_CHARACTERS)}")
        return PARAM_SEPARATOR.join(pairs)

    def to_url(self, base_url: str, mask_key: bool = False) -> str:
        """Render the request in the EVDS layout: <base><path><query>."""
        return f"{base_url}{self.path}{self.query_string(mask_key=mask_key)}"
