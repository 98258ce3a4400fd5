# src/tcmb_evds/domain/access.py
"""
Access Configuration - Token and Return Format

Every EVDS request carries the caller's API key and the desired response
format. AccessConfig bundles the two after validating the key.

Files that USE this module:
- tcmb_evds.application.request_builder (renders key and type parameters)
- tcmb_evds.application.evds_service (default access configuration)
- tcmb_evds.app (builds access config from settings or CLI flags)
- tests.test_access (unit tests)

Files that this module USES:
- tcmb_evds.domain.errors (AccessConfigError subclasses)
- tcmb_evds.shared.validators (validate_api_key)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass, field  # Decorator for creating data classes
from enum import Enum  # Closed set of return formats
from typing import Union  # Type hints for accepted inputs

from tcmb_evds.domain.errors import EmptyTokenError, UnsupportedReturnFormatError
from tcmb_evds.shared.validators import validate_api_key


class ReturnFormat(Enum):
    """Response formats offered by EVDS, valued by their wire code."""
    JSON = "json"
    XML = "xml"
    CSV = "csv"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union["ReturnFormat", str]) -> "ReturnFormat":
        """
        Resolve a return format from a member or its case-insensitive name.

        Raises:
            UnsupportedReturnFormatError: If value is not json, xml or csv
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip().lower()
            for member in cls:
                if member.value == text:
                    return member
        raise UnsupportedReturnFormatError(
            f"Unsupported return format {value!r}; expected one of json, xml, csv"
        )


def mask_token(token: str) -> str:
    """Mask all but the last 4 characters of a token for logs and reprs."""
    if len(token) <= 4:
        return "*" * len(token)
    return "*" * (len(token) - 4) + token[-4:]


@dataclass(frozen=True)
class AccessConfig:
    """
    Per-request service credentials.

    Attributes:
        token: EVDS API key (surrounding whitespace removed)
        return_format: Response format requested from the service
    """
    token: str = field(repr=False)
    return_format: ReturnFormat = ReturnFormat.JSON

    def __post_init__(self) -> None:
        if not isinstance(self.token, str) or not validate_api_key(self.token):
            raise EmptyTokenError("EVDS API key must not be empty")
        object.__setattr__(self, "token", self.token.strip())
        object.__setattr__(self, "return_format", ReturnFormat.parse(self.return_format))

    @classmethod
    def from_settings(cls, settings) -> "AccessConfig":
        """
        Build access configuration from application settings.

        Args:
            settings: tcmb_evds.config.Settings instance

        Raises:
            EmptyTokenError: If EVDS_API_KEY is not configured
        """
        return cls(token=settings.api_key, return_format=settings.return_format)

    def __repr__(self) -> str:
        return (
            f"AccessConfig(token={mask_token(self.token)!r}, "
            f"return_format={self.return_format.name})"
        )
