# tests/test_evds_service.py
"""
EVDS Service Tests - Unit Tests for the Operation Facade

A mock Transport records the requests each operation builds.

Files that this module USES:
- tcmb_evds.application.evds_service (EvdsService)
- tcmb_evds.application.request_builder (EndpointKind)
- unittest.mock (Mock)
"""
from unittest.mock import Mock

import pytest

from tcmb_evds.application.evds_service import EvdsService
from tcmb_evds.application.request_builder import EndpointKind
from tcmb_evds.adapters.transport import RequestsTransport
from tcmb_evds.domain.advanced import AdvancedQueryOptions, DataFrequency, DataGroupMode
from tcmb_evds.domain.currency import CurrencyCode, CurrencyCodeSet, ExchangeDirection
from tcmb_evds.domain.errors import EmptyRawSeriesError, TransportError
from tcmb_evds.domain.series import CurrencySeries, DataGroupCode, MultipleCurrencySeries, RawSeries


@pytest.fixture
def transport():
    mock_transport = Mock()
    mock_transport.send.return_value = b"body"
    return mock_transport


@pytest.fixture
def service(access, transport):
    return EvdsService(access, transport=transport)


def sent_request(transport):
    transport.send.assert_called_once()
    return transport.send.call_args[0][0]


class TestEvdsService:
    def test_init(self, access, transport):
        service = EvdsService(access, transport=transport)
        assert service.access == access
        assert service.transport == transport

    def test_default_transport(self, access):
        assert isinstance(EvdsService(access).transport, RequestsTransport)

    def test_get_data(self, service, transport, post_cutoff_single):
        assert service.get_data(RawSeries("TP.DK.USD.A"), post_cutoff_single) == b"body"
        assert sent_request(transport).kind is EndpointKind.DATA

    def test_get_advanced_data(self, service, transport, post_cutoff_single):
        service.get_advanced_data(RawSeries("TP.DK.USD.A"), post_cutoff_single, AdvancedQueryOptions(DataFrequency.MONTHLY))
        request = sent_request(transport)
        assert request.kind is EndpointKind.ADVANCED_DATA
        assert request.query_params["frequency"] == "5"

    def test_get_data_group(self, service, transport, post_cutoff_single):
        service.get_data_group(DataGroupCode("bie_yssk"), post_cutoff_single)
        assert sent_request(transport).query_params["datagroup"] == "bie_yssk"

    def test_get_categories(self, service, transport):
        service.get_categories()
        assert sent_request(transport).kind is EndpointKind.CATEGORIES

    def test_get_advanced_data_group(self, service, transport):
        service.get_advanced_data_group(DataGroupMode.CATEGORY, DataGroupCode("2"))
        request = sent_request(transport)
        assert request.kind is EndpointKind.ADVANCED_DATA_GROUP
        assert request.query_params["mode"] == "1"
        assert request.query_params["code"] == "2"

    def test_get_advanced_data_group_defaults_to_all(self, service, transport):
        service.get_advanced_data_group()
        assert sent_request(transport).params == (("mode", "0"), ("type", "json"), ("key", "T"))

    def test_get_advanced_data_group_needs_code(self, service, transport):
        with pytest.raises(EmptyRawSeriesError):
            service.get_advanced_data_group("data_group")
        transport.send.assert_not_called()

    def test_get_series_list(self, service, transport):
        service.get_series_list(DataGroupCode("bie_yssk"))
        assert sent_request(transport).kind is EndpointKind.SERIES_LIST

    def test_get_currency_data(self, service, transport, post_cutoff_single):
        service.get_currency_data(CurrencySeries(ExchangeDirection.SELLING, CurrencyCode.USD, post_cutoff_single))
        request = sent_request(transport)
        assert request.kind is EndpointKind.CURRENCY_DATA
        assert request.query_params["series"] == "TP.DK.USD.S"

    def test_get_currency_advanced_data(self, service, transport, post_cutoff_single):
        series = CurrencySeries(ExchangeDirection.BUYING, CurrencyCode.EUR, post_cutoff_single)
        service.get_currency_advanced_data(series, AdvancedQueryOptions("weekly"))
        assert sent_request(transport).kind is EndpointKind.CURRENCY_ADVANCED_DATA

    def test_get_multiple_currency_data(self, service, transport, post_cutoff_single):
        series = MultipleCurrencySeries(ExchangeDirection.BUYING, CurrencyCodeSet(["USD", "GBP"]), post_cutoff_single)
        service.get_multiple_currency_data(series)
        request = sent_request(transport)
        assert request.kind is EndpointKind.CURRENCY_MULTIPLE_DATA
        assert request.query_params["series"] == "TP.DK.USD.A-TP.DK.GBP.A"

    def test_transport_errors_propagate(self, service, transport):
        transport.send.side_effect = TransportError("EVDS HTTP error: 400", status_code=400)
        with pytest.raises(TransportError):
            service.get_categories()
