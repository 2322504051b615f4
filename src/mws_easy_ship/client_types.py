"""
Shared client types for MWS Easy Ship.

These types define the boundary between the Easy Ship facade and the shared
MWS client, and between the shared client and the transport that actually
talks to the service. Both boundaries are protocols so tests and callers can
inject their own implementations.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable

__all__ = ["PreparedRequest", "OperationBuilder", "SharedClient", "Transport"]


@dataclass(frozen=True)
class PreparedRequest:
    """
    A fully assembled, unsigned MWS request.

    params holds flattened name/value pairs in insertion order, starting
    with Action. Signing adds its own parameters at send time.
    """
    endpoint: str                # "https://mws.amazonservices.in"
    path: str                    # "/EasyShip/2018-09-01"
    params: Dict[str, str] = field(default_factory=dict)

    @property
    def action(self) -> Optional[str]:
        return self.params.get("Action")

    @property
    def url(self) -> str:
        return f"{self.endpoint.rstrip('/')}{self.path}"


@runtime_checkable
class OperationBuilder(Protocol):
    """Parameters for one named remote action."""

    def add(self, params: Optional[Mapping[str, Any]]) -> OperationBuilder:
        """
        Attach parameters to the operation.

        Args:
            params: Field name to value mapping; composite values are allowed

        Returns:
            The same builder, for chaining
        """
        ...


@runtime_checkable
class SharedClient(Protocol):
    """
    Protocol for the client that owns request construction and execution.

    A facade starts an operation with operation(), attaches parameters with
    add(), and executes it with run(). Implementations decide how the request
    is authenticated, sent, retried and parsed.
    """

    def operation(self, name: str) -> OperationBuilder:
        """
        Begin a new named remote call.

        Args:
            name: MWS action name, e.g. "ListPickupSlots"

        Returns:
            Builder for the operation's parameters
        """
        ...

    def run(self) -> Any:
        """
        Execute the pending operation.

        Returns:
            Parsed response, opaque to the caller of this protocol

        Raises:
            Exception: Whatever the implementation raises; never translated
        """
        ...


@runtime_checkable
class Transport(Protocol):
    """Protocol for sending a prepared request to the service."""

    def send(self, request: PreparedRequest) -> Any:
        """
        Sign, send and parse a request.

        Args:
            request: Request to send

        Returns:
            Parsed response
        """
        ...
