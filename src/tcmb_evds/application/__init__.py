# src/tcmb_evds/application/__init__.py
"""
Application Layer - Request Building and Operations

This package turns validated domain values into EVDS requests and
dispatches them through a Transport.
"""

from tcmb_evds.application.request_builder import EndpointKind, RequestBuilder
from tcmb_evds.application.evds_service import EvdsService

__all__ = [
    "EndpointKind",
    "RequestBuilder",
    "EvdsService",
]
