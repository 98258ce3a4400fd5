# src/tcmb_evds/adapters/formatting/formatter.py
"""
Request Formatter - Text Presentation of Requests and Errors

This module renders request descriptors and errors as plain text for the
command line. API keys are always masked.

Files that USE this module:
- tcmb_evds.app (url and fetch commands)
- tests.test_formatter (unit tests)

Files that this module USES:
- tcmb_evds.application.request_builder (RequestBuilder, PARAM_KEY)
- tcmb_evds.domain.access (mask_token)
- tcmb_evds.domain.errors (error types)
"""
from __future__ import annotations

from typing import List

from tcmb_evds.application.request_builder import PARAM_KEY, RequestBuilder
from tcmb_evds.domain.access import mask_token
from tcmb_evds.domain.errors import EvdsError, TransportError, UnsupportedValueError


def format_url(request: RequestBuilder, base_url: str, reveal_key: bool = False) -> str:
    """
    Format the request URL.

    Args:
        request: Built request
        base_url: Service root
        reveal_key: Show the API key in clear text (default: masked)
    """
    return request.to_url(base_url, mask_key=not reveal_key)


def format_request(request: RequestBuilder, base_url: str) -> str:
    """
    Format a request as a URL followed by one indented line per parameter.

    Example:
        GET https://evds2.tcmb.gov.tr/service/evds/series=TP.DK.USD.S&...
          series    = TP.DK.USD.S
          startDate = 13-12-2011
    """
    lines: List[str] = [f"GET {format_url(request, base_url)}"]
    width = max((len(name) for name, _ in request.params), default=0)
    for name, value in request.params:
        shown = mask_token(value) if name == PARAM_KEY else value
        lines.append(f"  {name.ljust(width)} = {shown}")
    return "\n".join(lines)


def format_error(error: EvdsError) -> str:
    """Format an error as a single line prefixed with its category."""
    if isinstance(error, TransportError):
        return f"transport error: {error}"
    if isinstance(error, UnsupportedValueError):
        return f"invalid {error.field}: {error.value!r}"
    return f"invalid input: {error}"
