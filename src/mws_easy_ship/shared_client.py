"""
Shared MWS client.

Owns operation construction for every API section and hands finished
requests to an injected Transport. Request signing, HTTP, retries and
response parsing are the transport's business.
"""
from __future__ import annotations

import logging
import threading
from typing import Any, Optional

from .client_types import PreparedRequest, Transport
from .errors import OperationNotStartedError
from .operation import Operation
from .settings import Settings

logger = logging.getLogger(__name__)

__all__ = ["MWSClient"]


class MWSClient:
    """
    Shared client for one MWS API section.

    The pending operation is kept per thread, so one client may be shared by
    concurrent callers as long as each thread calls operation() and run() in
    sequence.
    """

    def __init__(self, settings: Settings, transport: Transport, *, path: str, version: str):
        """
        Initialize shared client.

        Args:
            settings: Endpoint and seller configuration
            transport: Sends prepared requests and returns parsed responses
            path: API section path (e.g., "/EasyShip/2018-09-01")
            version: API section version sent as the Version parameter
        """
        self.settings = settings
        self.transport = transport
        self.path = path
        self.version = version
        self._local = threading.local()

    @property
    def pending(self) -> Optional[Operation]:
        """Operation started by this thread and not yet run."""
        return getattr(self._local, "operation", None)

    def operation(self, name: str) -> Operation:
        """
        Start a new operation, replacing any pending one.

        Args:
            name: MWS action name

        Returns:
            The new operation, with SellerId stored when configured
        """
        op = Operation(name)
        if self.settings.seller_id:
            op.store("SellerId", self.settings.seller_id)
        self._local.operation = op
        logger.debug(f"Started operation {name} on {self.path}")
        return op

    def run(self) -> Any:
        """
        Send the pending operation through the transport.

        Returns:
            Whatever the transport returns

        Raises:
            OperationNotStartedError: If no operation is pending
        """
        op = self.pending
        if op is None:
            raise OperationNotStartedError("run() called without a pending operation")
        # Cleared before sending so a failed call cannot be re-run by accident
        self._local.operation = None

        params = dict(op)
        params["Version"] = self.version
        request = PreparedRequest(endpoint=self.settings.endpoint, path=self.path, params=params)

        logger.debug(f"Sending {op.action} to {request.url} with {len(params)} parameters")
        return self.transport.send(request)
