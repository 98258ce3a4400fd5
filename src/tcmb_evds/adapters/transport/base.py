# src/tcmb_evds/adapters/transport/base.py
"""
Base Transport Interface

This module defines the contract between the request builder and whatever
executes requests over the network.

Files that USE this module:
- tcmb_evds.adapters.transport.requests_transport (RequestsTransport implements Transport)
- tcmb_evds.application.evds_service (depends on the Transport interface)

Files that this module USES:
- tcmb_evds.application.request_builder (RequestBuilder descriptor type)
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tcmb_evds.application.request_builder import RequestBuilder


class Transport(ABC):
    @abstractmethod
    def send(self, request: "RequestBuilder") -> bytes:
        """
        Execute a built request and return the raw response body.

        Raises:
            TransportError: If the service is unreachable or answers with an error
        """
        raise NotImplementedError
