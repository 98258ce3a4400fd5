# src/tcmb_evds/shared/validators.py
"""
Input Validation Utilities - Pure Predicates

This module provides the small validation predicates shared by the domain
value objects and the settings layer: token checks, date layout checks and
Gregorian calendar arithmetic.

Files that USE this module:
- tcmb_evds.domain.dates (date layout and calendar checks)
- tcmb_evds.domain.access (token check)
- tcmb_evds.domain.series (series code check)
- tcmb_evds.config.settings (uses validation functions in Settings field validators)

Files that this module USES:
- None (pure utility functions)
"""
import re
from typing import Optional

DATE_TEXT_PATTERN = re.compile(r"([0-9]{2})-([0-9]{2})-([0-9]{4})")

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Gregorian rule: divisible by 4, except centuries not divisible by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    """
    Return the number of days in a month.

    Args:
        month: Month number (1-12)
        year: Four-digit year

    Returns:
        Day count for that month, honouring leap years

    Raises:
        ValueError: If month is outside 1-12
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month out of range: {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def is_valid_calendar_date(day: int, month: int, year: int) -> bool:
    if year < 1 or not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_month(month, year)


def split_date_text(text: str) -> Optional[tuple]:
    """
    Split DD-MM-YYYY text into integer components.

    Args:
        text: Date text to split

    Returns:
        (day, month, year) tuple, or None if the layout does not match
    """
    if not isinstance(text, str):
        return None
    match = DATE_TEXT_PATTERN.fullmatch(text)
    if not match:
        return None
    day, month, year = match.groups()
    return int(day), int(month), int(year)


def validate_api_key(api_key: str) -> bool:
    """
    Validate API key format.

    EVDS keys are opaque; the only rule is that something remains after
    trimming whitespace.

    Args:
        api_key: API key to validate

    Returns:
        True if valid, False otherwise
    """
    if not api_key or not isinstance(api_key, str):
        return False
    return not api_key.isspace()


def validate_series_code(code: str) -> bool:
    """Return True if a raw series/data group code is non-empty after trimming."""
    if not code or not isinstance(code, str):
        return False
    return bool(code.strip())


def validate_base_url(url: str) -> bool:
    """
    Validate service base URL.

    Args:
        url: Base URL to validate

    Returns:
        True if the URL is http(s) and ends with a slash, False otherwise
    """
    if not url:
        return False
    return bool(re.match(r"^https?://[^\s/]+(/[^\s]*)?/$", url))
