# src/tcmb_evds/config/__init__.py
"""
Configuration Module

Provides centralized configuration management using Pydantic Settings.
"""

from tcmb_evds.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
