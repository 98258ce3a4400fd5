# src/tcmb_evds/adapters/formatting/__init__.py
"""
Formatting Adapters - Text Output

This package contains plain text renderers for the command line.
"""

from tcmb_evds.adapters.formatting.formatter import (
    format_error,
    format_request,
    format_url,
)

__all__ = [
    "format_error",
    "format_request",
    "format_url",
]
