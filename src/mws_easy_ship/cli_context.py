"""
CLI Context for managing application dependencies.

Provides a clean way to manage CLI-level dependencies like settings and the
transport, avoiding global state and enabling proper dependency injection.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .operations.facade import EasyShipClient
from .settings import Settings, create_settings_from_env
from .transports import DryRunTransport


@dataclass
class CLIContext:
    """
    Shared context for CLI commands.

    CLI commands only ever build requests, so the transport is always a
    DryRunTransport.
    """
    settings: Settings
    transport: DryRunTransport = field(default_factory=DryRunTransport)
    _client: Optional[EasyShipClient] = None

    @classmethod
    def from_env(cls) -> CLIContext:
        """
        Create CLI context from environment variables.

        Returns:
            CLIContext with settings loaded from environment
        """
        return cls(settings=create_settings_from_env())

    @property
    def client(self) -> EasyShipClient:
        """Get or create the Easy Ship facade (lazy initialization)."""
        if self._client is None:
            self._client = EasyShipClient.from_settings(self.settings, self.transport)
        return self._client

    def marketplace_id(self, override: Optional[str]) -> str:
        """
        Pick the marketplace for a command.

        Args:
            override: Value of the --marketplace-id option

        Raises:
            ValueError: If neither the option nor MWS_MARKETPLACE_ID is set
        """
        marketplace_id = override or self.settings.marketplace_id
        if not marketplace_id:
            raise ValueError("--marketplace-id is required when MWS_MARKETPLACE_ID is not set")
        return marketplace_id
