# tests/test_advanced.py
"""
Advanced Options Tests - Unit Tests for Frequency Formula Selectors

Files that this module USES:
- tcmb_evds.domain.advanced (AdvancedQueryOptions, DataGroupListing and enumerations)
- tcmb_evds.domain.errors (UnsupportedValueError)
"""
import pytest

from tcmb_evds.domain.advanced import (
    AdvancedQueryOptions,
    AggregationType,
    DataFrequency,
    DataGroupListing,
    DataGroupMode,
    Formula,
    parse_option,
)
from tcmb_evds.domain.errors import AdvancedOptionsError, EmptyRawSeriesError, UnsupportedValueError
from tcmb_evds.domain.series import DataGroupCode


class TestEnumerations:
    def test_frequency_codes(self):
        assert [f.value for f in DataFrequency] == [str(n) for n in range(1, 9)]

    def test_formula_codes(self):
        assert [f.value for f in Formula] == [str(n) for n in range(0, 9)]

    def test_aggregation_codes(self):
        assert {a.value for a in AggregationType} == {"avg", "min", "max", "first", "last", "sum"}


class TestParseOption:
    @pytest.mark.parametrize("value", [DataFrequency.MONTHLY, "5", 5, "monthly", "MONTHLY"])
    def test_accepted_forms(self, value):
        assert parse_option(DataFrequency, value, "frequency") is DataFrequency.MONTHLY

    def test_aggregation_by_code(self):
        assert parse_option(AggregationType, "AVG", "aggregation") is AggregationType.AVERAGE

    def test_bool_is_rejected(self):
        with pytest.raises(UnsupportedValueError):
            parse_option(DataFrequency, True, "frequency")

    def test_mode(self):
        assert parse_option(DataGroupMode, 2, "mode") is DataGroupMode.DATA_GROUP


class TestAdvancedQueryOptions:
    def test_defaults(self):
        options = AdvancedQueryOptions(DataFrequency.MONTHLY)
        assert options.aggregation is AggregationType.AVERAGE
        assert options.formula is Formula.LEVEL

    def test_text_values_resolved(self):
        options = AdvancedQueryOptions(frequency="annual", aggregation="last", formula="7")
        assert options.frequency is DataFrequency.ANNUAL
        assert options.aggregation is AggregationType.LAST
        assert options.formula is Formula.MOVING_AVERAGE

    @pytest.mark.parametrize("frequency", [0, 9, "hourly", "", None])
    def test_unsupported_frequency(self, frequency):
        with pytest.raises(UnsupportedValueError) as exc_info:
            AdvancedQueryOptions(frequency=frequency)
        assert exc_info.value.field == "frequency"
        assert exc_info.value.value == frequency

    def test_unsupported_aggregation(self):
        with pytest.raises(UnsupportedValueError) as exc_info:
            AdvancedQueryOptions(DataFrequency.DAILY, aggregation="median")
        assert exc_info.value.field == "aggregation"

    def test_unsupported_formula(self):
        with pytest.raises(AdvancedOptionsError):
            AdvancedQueryOptions(DataFrequency.DAILY, formula=42)

    def test_no_cross_field_validation(self):
        options = AdvancedQueryOptions(DataFrequency.DAILY, AggregationType.SUM, Formula.MOVING_SUM)
        assert options.formula is Formula.MOVING_SUM

    def test_integer_frequency_code(self):
        assert AdvancedQueryOptions(frequency=5).frequency is DataFrequency.MONTHLY


class TestDataGroupListing:
    def test_defaults_to_all(self):
        listing = DataGroupListing()
        assert listing.mode is DataGroupMode.ALL
        assert listing.code is None

    @pytest.mark.parametrize("mode", ["2", "data_group", 2, DataGroupMode.DATA_GROUP])
    def test_mode_forms(self, mode):
        listing = DataGroupListing(mode, DataGroupCode("bie_yssk"))
        assert listing.mode is DataGroupMode.DATA_GROUP

    def test_text_code_coerced(self):
        listing = DataGroupListing(DataGroupMode.CATEGORY, " 2 ")
        assert listing.code == DataGroupCode("2")

    @pytest.mark.parametrize("mode", [DataGroupMode.CATEGORY, DataGroupMode.DATA_GROUP])
    def test_code_required(self, mode):
        with pytest.raises(EmptyRawSeriesError):
            DataGroupListing(mode)

    def test_all_drops_code(self):
        assert DataGroupListing(DataGroupMode.ALL, DataGroupCode("bie_yssk")).code is None

    @pytest.mark.parametrize("mode", ["3", "everything", None])
    def test_unsupported_mode(self, mode):
        with pytest.raises(UnsupportedValueError) as exc_info:
            DataGroupListing(mode, DataGroupCode("bie_yssk"))
        assert exc_info.value.field == "mode"
