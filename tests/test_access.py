# tests/test_access.py
"""
Access Tests - Unit Tests for AccessConfig and ReturnFormat

Files that this module USES:
- tcmb_evds.domain.access (AccessConfig, ReturnFormat, mask_token)
- tcmb_evds.domain.errors (AccessConfigError subclasses)
"""
from unittest.mock import Mock

import pytest

from tcmb_evds.domain.access import AccessConfig, ReturnFormat, mask_token
from tcmb_evds.domain.errors import AccessConfigError, EmptyTokenError, UnsupportedReturnFormatError


class TestReturnFormat:
    def test_wire_codes(self):
        assert [f.code for f in ReturnFormat] == ["json", "xml", "csv"]

    @pytest.mark.parametrize("text,expected", [
        ("json", ReturnFormat.JSON),
        ("XML", ReturnFormat.XML),
        (" Csv ", ReturnFormat.CSV),
        (ReturnFormat.XML, ReturnFormat.XML),
    ])
    def test_parse(self, text, expected):
        assert ReturnFormat.parse(text) is expected

    @pytest.mark.parametrize("value", ["yaml", "", None, 1])
    def test_parse_unsupported(self, value):
        with pytest.raises(UnsupportedReturnFormatError):
            ReturnFormat.parse(value)


class TestAccessConfig:
    def test_defaults_to_json(self):
        config = AccessConfig(token="abc")
        assert config.return_format is ReturnFormat.JSON

    def test_token_is_trimmed(self):
        assert AccessConfig(token="  key123  ").token == "key123"

    def test_format_given_as_text(self):
        assert AccessConfig(token="k", return_format="csv").return_format is ReturnFormat.CSV

    @pytest.mark.parametrize("token", ["", "   ", "\t\n", None])
    def test_empty_token(self, token):
        with pytest.raises(EmptyTokenError):
            AccessConfig(token=token)

    def test_unsupported_format(self):
        with pytest.raises(AccessConfigError):
            AccessConfig(token="k", return_format="html")

    def test_repr_masks_token(self):
        text = repr(AccessConfig(token="supersecret1234"))
        assert "supersecret" not in text
        assert "1234" in text

    def test_from_settings(self):
        settings = Mock(api_key="from-env", return_format="xml")
        config = AccessConfig.from_settings(settings)
        assert config.token == "from-env"
        assert config.return_format is ReturnFormat.XML

    def test_from_settings_without_key(self):
        with pytest.raises(EmptyTokenError):
            AccessConfig.from_settings(Mock(api_key="", return_format="json"))


class TestMaskToken:
    def test_keeps_last_four(self):
        assert mask_token("abcdefgh") == "****efgh"

    def test_short_token_fully_masked(self):
        assert mask_token("abc") == "***"
