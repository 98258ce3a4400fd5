# tests/test_app.py
"""
CLI Tests - Unit Tests for the Command Line Entry Point

Logging setup and the HTTP transport are patched out.

Files that this module USES:
- tcmb_evds.app (main, build_parser, build_request)
- unittest.mock (patch)
"""
from unittest.mock import patch

import pytest

from tcmb_evds.app import EXIT_INVALID_INPUT, EXIT_OK, EXIT_TRANSPORT_ERROR, build_parser, build_request, main
from tcmb_evds.application.request_builder import EndpointKind
from tcmb_evds.domain.errors import LegacyNotationDateMismatchError, TransportError

BASE = ["--key", "T", "--base-url", "https://evds.example/"]


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch("tcmb_evds.app.setup_logging"):
        yield


class TestBuildRequest:
    def test_raw_series(self):
        args = build_parser().parse_args(BASE + ["url", "--series", "TP.DK.USD.A", "--dates", "13-12-2011"])
        request = build_request(args)
        assert request.kind is EndpointKind.DATA
        assert request.query_params["series"] == "TP.DK.USD.A"

    def test_single_currency(self):
        args = build_parser().parse_args(
            BASE + ["url", "--currency", "usd", "--direction", "selling", "--dates", "13-12-2011"]
        )
        request = build_request(args)
        assert request.kind is EndpointKind.CURRENCY_DATA
        assert request.query_params["series"] == "TP.DK.USD.S"

    def test_multiple_currencies(self):
        args = build_parser().parse_args(
            BASE + ["url", "--currency", "USD", "--currency", "USD", "--currency", "GBP",
                    "--direction", "buying", "--dates", "13-12-2011"]
        )
        request = build_request(args)
        assert request.kind is EndpointKind.CURRENCY_MULTIPLE_DATA
        assert request.query_params["series"] == "TP.DK.USD.A-TP.DK.GBP.A"

    def test_advanced_options(self):
        args = build_parser().parse_args(
            BASE + ["url", "--series", "TP.DK.USD.A", "--dates", "13-12-2011", "--frequency", "monthly",
                    "--aggregation", "last"]
        )
        request = build_request(args)
        assert request.kind is EndpointKind.ADVANCED_DATA
        assert request.query_params["frequency"] == "5"
        assert request.query_params["aggregationTypes"] == "last"

    def test_ytl_after_cutoff(self):
        args = build_parser().parse_args(BASE + ["url", "--currency", "USD", "--ytl", "--dates", "13-12-2011"])
        with pytest.raises(LegacyNotationDateMismatchError):
            build_request(args)


class TestMain:
    def test_url_command(self, capsys):
        code = main(BASE + ["url", "--series", "TP.DK.USD.A", "--dates", "13-12-2011", "--reveal-key"])
        assert code == EXIT_OK
        assert capsys.readouterr().out.strip() == (
            "https://evds.example/series=TP.DK.USD.A&startDate=13-12-2011&endDate=13-12-2011&type=json&key=T"
        )

    def test_url_verbose(self, capsys):
        code = main(BASE + ["url", "--currency", "EUR", "--dates", "01-01-2020, 31-01-2020", "--verbose"])
        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert "series    = TP.DK.EUR.A-TP.DK.EUR.S" in out
        assert "endDate   = 31-01-2020" in out

    def test_invalid_date(self, capsys):
        code = main(BASE + ["url", "--series", "TP.DK.USD.A", "--dates", "31-04-2020"])
        assert code == EXIT_INVALID_INPUT
        assert capsys.readouterr().err.startswith("invalid input:")

    def test_invalid_frequency(self, capsys):
        code = main(BASE + ["url", "--series", "TP.DK.USD.A", "--dates", "13-12-2011", "--frequency", "hourly"])
        assert code == EXIT_INVALID_INPUT
        assert "invalid frequency" in capsys.readouterr().err

    def test_formula_without_frequency(self):
        with pytest.raises(SystemExit) as exc_info:
            main(BASE + ["url", "--series", "TP.DK.USD.A", "--dates", "13-12-2011", "--formula", "1"])
        assert exc_info.value.code == 2

    def test_missing_key(self, capsys):
        with patch("tcmb_evds.app.settings") as mock_settings:
            mock_settings.api_key = ""
            mock_settings.return_format = "json"
            mock_settings.base_url = "https://evds.example/"
            mock_settings.log_level = "INFO"
            code = main(["url", "--series", "TP.DK.USD.A", "--dates", "13-12-2011"])
        assert code == EXIT_INVALID_INPUT

    @patch("tcmb_evds.app.RequestsTransport")
    def test_fetch_command(self, mock_transport_cls, capsysbinary):
        mock_transport_cls.return_value.send.return_value = b'{"items": []}'
        code = main(BASE + ["fetch", "--series", "TP.DK.USD.A", "--dates", "13-12-2011"])
        assert code == EXIT_OK
        assert capsysbinary.readouterr().out == b'{"items": []}'
        mock_transport_cls.assert_called_once_with(base_url="https://evds.example/")

    @patch("tcmb_evds.app.RequestsTransport")
    def test_fetch_transport_error(self, mock_transport_cls, capsys):
        mock_transport_cls.return_value.send.side_effect = TransportError("EVDS HTTP error: 500", status_code=500)
        code = main(BASE + ["fetch", "--series", "TP.DK.USD.A", "--dates", "13-12-2011"])
        assert code == EXIT_TRANSPORT_ERROR
        assert "transport error" in capsys.readouterr().err
