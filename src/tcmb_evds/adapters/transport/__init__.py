# src/tcmb_evds/adapters/transport/__init__.py
"""
Transport Adapters - Request Execution

All transports implement the Transport interface.
"""

from tcmb_evds.adapters.transport.base import Transport
from tcmb_evds.adapters.transport.requests_transport import RequestsTransport

__all__ = [
    "Transport",
    "RequestsTransport",
]
