# src/tcmb_evds/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation predicates
- Logging configuration
"""

from tcmb_evds.shared.validators import (
    days_in_month,
    is_leap_year,
    is_valid_calendar_date,
    validate_api_key,
    validate_base_url,
    validate_series_code,
)
from tcmb_evds.shared.logging_conf import setup_logging

__all__ = [
    "days_in_month",
    "is_leap_year",
    "is_valid_calendar_date",
    "validate_api_key",
    "validate_base_url",
    "validate_series_code",
    "setup_logging",
]
