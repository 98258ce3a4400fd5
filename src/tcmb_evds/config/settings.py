# src/tcmb_evds/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables or a local .env file. Only the
adapters and the CLI read settings; domain value objects never do.

Files that USE this module:
- tcmb_evds.app (loads settings for CLI defaults and logging)
- tcmb_evds.adapters.transport.requests_transport (base URL and HTTP timeout)
- tcmb_evds.domain.access (AccessConfig.from_settings)
- tests.test_settings (unit tests)

Files that this module USES:
- tcmb_evds.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from tcmb_evds.shared.validators import (
    validate_api_key,  # Validate API key format
    validate_base_url,  # Validate service base URL format
)

DEFAULT_BASE_URL = "https://evds2.tcmb.gov.tr/service/evds/"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- EVDS service ---
    api_key: str = Field(default="", alias="EVDS_API_KEY")
    base_url: str = Field(default=DEFAULT_BASE_URL, alias="EVDS_BASE_URL")
    return_format: str = Field(default="json", alias="EVDS_RETURN_FORMAT")

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=30, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=120)

    # --- Currency series ---
    legacy_cutoff_policy: str = Field(default="allow_straddling", alias="LEGACY_CUTOFF_POLICY")

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="EVDS_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate API key format (empty means not configured)."""
        if v and not validate_api_key(v):
            raise ValueError("Invalid EVDS_API_KEY format")
        return v.strip()

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL format."""
        if not validate_base_url(v):
            raise ValueError("EVDS_BASE_URL must be an http(s) URL ending with '/'")
        return v

    @field_validator("return_format")
    @classmethod
    def validate_return_format(cls, v: str) -> str:
        """Validate return format."""
        v = v.strip().lower()
        if v not in ["json", "xml", "csv"]:
            raise ValueError("EVDS_RETURN_FORMAT must be 'json', 'xml' or 'csv'")
        return v

    @field_validator("legacy_cutoff_policy")
    @classmethod
    def validate_cutoff_policy(cls, v: str) -> str:
        """Validate legacy cutoff policy."""
        v = v.strip().lower()
        if v not in ["allow_straddling", "reject_straddling"]:
            raise ValueError("LEGACY_CUTOFF_POLICY must be 'allow_straddling' or 'reject_straddling'")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        v = v.strip().upper()
        if v not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError("LOG_LEVEL must be a standard logging level name")
        return v


# Global settings instance
settings = Settings()
