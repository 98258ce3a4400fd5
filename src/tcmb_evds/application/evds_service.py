# src/tcmb_evds/application/evds_service.py
"""
EVDS Service - Operation Facade for Both Access Paths

This module exposes every EVDS operation as a method. Each method builds a
RequestBuilder from validated values and hands it to a Transport, returning
the raw response body. Response parsing is left to the caller.

Unrestricted path: get_data, get_advanced_data, get_data_group,
get_categories, get_advanced_data_group, get_series_list.
Currency path: get_currency_data, get_currency_advanced_data,
get_multiple_currency_data.

Files that USE this module:
- tcmb_evds.app (fetch command)
- tests.test_evds_service (unit tests)

Files that this module USES:
- tcmb_evds.application.request_builder (RequestBuilder)
- tcmb_evds.adapters.transport (Transport interface, RequestsTransport default)
- tcmb_evds.domain.* (validated value objects)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging
from typing import Optional  # Type hints for optional values

from tcmb_evds.adapters.transport.base import Transport
from tcmb_evds.application.request_builder import RequestBuilder
from tcmb_evds.domain.access import AccessConfig
from tcmb_evds.domain.advanced import AdvancedQueryOptions, DataGroupListing, DataGroupMode
from tcmb_evds.domain.dates import DateSelector
from tcmb_evds.domain.series import (
    CurrencySeries,
    DataGroupCode,
    MultipleCurrencySeries,
    RawSeries,
)

log = logging.getLogger(__name__)


class EvdsService:
    """
    Builds and dispatches EVDS requests for one access configuration.

    Attributes:
        access: Token and return format sent with every request
        transport: Executes built requests
    """

    def __init__(self, access: AccessConfig, transport: Optional[Transport] = None):
        """
        Args:
            access: Validated access configuration
            transport: Transport to use (defaults to RequestsTransport)
        """
        if transport is None:
            # requests_transport imports this package, so resolve it at call time
            from tcmb_evds.adapters.transport.requests_transport import RequestsTransport
            transport = RequestsTransport()
        self.access = access
        self.transport = transport

    def _send(self, request: RequestBuilder) -> bytes:
        log.debug("Dispatching %s request (%d params)", request.kind.value, len(request.params))
        return self.transport.send(request)

    # --- Unrestricted path ---

    def get_data(self, series: RawSeries, dates: DateSelector) -> bytes:
        """Level values of one or more raw series ("TP.DK.USD.A-TP.DK.EUR.A")."""
        return self._send(RequestBuilder.build(self.access, series, dates))

    def get_advanced_data(
        self, series: RawSeries, dates: DateSelector, options: AdvancedQueryOptions
    ) -> bytes:
        """Raw series values with frequency formulas applied."""
        return self._send(RequestBuilder.build(self.access, series, dates, options))

    def get_data_group(self, group: DataGroupCode, dates: DateSelector) -> bytes:
        """All series of a data group (e.g. "bie_yssk") over the given dates."""
        return self._send(RequestBuilder.for_data_group(self.access, group, dates))

    def get_categories(self) -> bytes:
        return self._send(RequestBuilder.for_categories(self.access))

    def get_advanced_data_group(
        self, mode: DataGroupMode = DataGroupMode.ALL, code: Optional[DataGroupCode] = None
    ) -> bytes:
        """Data group metadata: all groups, groups of a category, or one group."""
        return self._send(RequestBuilder.for_advanced_data_group(self.access, DataGroupListing(mode, code)))

    def get_series_list(self, group: DataGroupCode) -> bytes:
        return self._send(RequestBuilder.for_series_list(self.access, group))

    # --- Currency path ---

    def get_currency_data(self, series: CurrencySeries) -> bytes:
        return self._send(RequestBuilder.for_currency(self.access, series))

    def get_currency_advanced_data(
        self, series: CurrencySeries, options: AdvancedQueryOptions
    ) -> bytes:
        return self._send(RequestBuilder.for_currency(self.access, series, options))

    def get_multiple_currency_data(self, series: MultipleCurrencySeries) -> bytes:
        return self._send(RequestBuilder.for_currency(self.access, series))
