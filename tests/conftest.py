# tests/conftest.py
"""
Shared Fixtures - Common Test Data

Provides the access configuration and dates reused across test modules.
"""
import pytest

from tcmb_evds.domain.access import AccessConfig, ReturnFormat
from tcmb_evds.domain.dates import CalendarDate, DateSelector


@pytest.fixture
def access():
    return AccessConfig(token="T", return_format=ReturnFormat.JSON)


@pytest.fixture
def pre_cutoff_range():
    return DateSelector.range(CalendarDate.parse("01-06-2003"), CalendarDate.parse("31-12-2004"))


@pytest.fixture
def post_cutoff_single():
    return DateSelector.single(CalendarDate.parse("13-12-2011"))
