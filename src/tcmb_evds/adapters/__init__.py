# src/tcmb_evds/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Transport (HTTP execution of built requests)
- Formatting (text output)
"""

__all__ = []
