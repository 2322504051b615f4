"""
Settings and configuration for MWS Easy Ship.

Centralizes configuration values and provides validation with fail-fast behavior.
Loads settings from environment variables at client construction time.
"""
from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Optional

__all__ = ["Settings", "create_settings_from_env", "DEFAULT_ENDPOINT"]

# Easy Ship is only offered on the India marketplace
DEFAULT_ENDPOINT = "https://mws.amazonservices.in"

_ENDPOINT_PATTERN = r"^https?://[a-zA-Z0-9.-]+(?::[0-9]+)?/?$"
_ID_PATTERN = r"^[A-Z0-9]+$"


@dataclass(frozen=True)
class Settings:
    """
    Configuration settings for the MWS shared client.

    Attributes:
        endpoint: MWS endpoint base URL (scheme and host, no path)
        seller_id: Seller (merchant) identifier stored as SellerId on every operation
        marketplace_id: Default marketplace for CLI commands
    """
    endpoint: str = DEFAULT_ENDPOINT
    seller_id: Optional[str] = None
    marketplace_id: Optional[str] = None

    def __post_init__(self):
        """Validate settings on construction."""
        if not self.endpoint:
            raise ValueError("endpoint is required")

        if not re.match(_ENDPOINT_PATTERN, self.endpoint):
            raise ValueError(f"Invalid endpoint format: {self.endpoint}")

        # Empty strings are treated as misconfiguration, not as "unset"
        if self.seller_id is not None and not re.match(_ID_PATTERN, self.seller_id):
            raise ValueError(f"Invalid seller_id format: {self.seller_id!r}")

        if self.marketplace_id is not None and not re.match(_ID_PATTERN, self.marketplace_id):
            raise ValueError(f"Invalid marketplace_id format: {self.marketplace_id!r}")


def create_settings_from_env() -> Settings:
    """
    Load settings from environment variables.

    Environment Variables:
        - MWS_ENDPOINT (default: https://mws.amazonservices.in)
        - MWS_SELLER_ID (optional)
        - MWS_MARKETPLACE_ID (optional)

    Returns:
        Settings object with validated configuration

    Raises:
        ValueError: If configuration is invalid

    Note:
        Creates a fresh Settings instance every time (no caching).
    """
    endpoint = os.getenv("MWS_ENDPOINT") or DEFAULT_ENDPOINT
    seller_id = os.getenv("MWS_SELLER_ID") or None
    marketplace_id = os.getenv("MWS_MARKETPLACE_ID") or None

    return Settings(
        endpoint=endpoint.rstrip("/"),
        seller_id=seller_id,
        marketplace_id=marketplace_id,
    )
