# src/tcmb_evds/adapters/transport/requests_transport.py
"""
Requests Transport - Synchronous HTTP Dispatch

This module implements the Transport interface with the requests library.
It issues a single GET per request descriptor; there is no retry and no
caching. Every failure surfaces as TransportError, kept apart from local
validation errors.

Files that USE this module:
- tcmb_evds.application.evds_service (default transport)
- tcmb_evds.app (fetch command)
- tests.test_transport (unit tests)

Files that this module USES:
- tcmb_evds.adapters.transport.base (Transport interface)
- tcmb_evds.application.request_builder (RequestBuilder descriptor)
- tcmb_evds.config (settings for base URL and timeout)
- tcmb_evds.domain.errors (TransportError)
"""
import logging
from typing import Optional

import requests

from tcmb_evds.adapters.transport.base import Transport
from tcmb_evds.application.request_builder import RequestBuilder
from tcmb_evds.config import settings
from tcmb_evds.domain.errors import TransportError

log = logging.getLogger(__name__)


class RequestsTransport(Transport):
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the HTTP transport.

        Args:
            base_url: Optional service root (defaults to settings.base_url)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
            session: Optional requests session to reuse connections
        """
        self.base_url = base_url or settings.base_url
        self.timeout = timeout or settings.http_timeout_seconds
        self.session = session

    def _get(self, url: str) -> requests.Response:
        if self.session is not None:
            return self.session.get(url, timeout=self.timeout)
        return requests.get(url, timeout=self.timeout)

    def send(self, request: RequestBuilder) -> bytes:
        """
        Send a request descriptor with an HTTP GET.

        Args:
            request: Built request

        Returns:
            Raw response body

        Raises:
            TransportError: On timeout, connection failure or HTTP status >= 400
        """
        url = request.to_url(self.base_url)
        log.debug("EVDS %s request: %s", request.kind.value, request.to_url(self.base_url, mask_key=True))

        try:
            resp = self._get(url)
            resp.raise_for_status()
        except requests.exceptions.Timeout:
            log.warning("EVDS request timeout after %d seconds", self.timeout)
            raise TransportError(f"EVDS request timeout after {self.timeout}s")
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            log.error("EVDS rejected %s request with HTTP %s", request.kind.value, status)
            raise TransportError(f"EVDS HTTP error: {status}", status_code=status) from e
        except requests.exceptions.RequestException as e:
            log.warning("EVDS request failed (network/connection error): %s", e)
            raise TransportError(f"EVDS request failed: {e}") from e

        log.info("EVDS %s request succeeded (%d bytes)", request.kind.value, len(resp.content))
        return resp.content
