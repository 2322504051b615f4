"""
Transports that ship with the package.

Only a dry-run transport is provided: it returns the prepared request
instead of sending it, which is what the CLI preview commands show.
"""
from __future__ import annotations

import logging
from typing import List

from .client_types import PreparedRequest, Transport

logger = logging.getLogger(__name__)

__all__ = ["DryRunTransport"]


class DryRunTransport(Transport):
    """Records requests and returns them unsent."""

    def __init__(self) -> None:
        self.sent: List[PreparedRequest] = []

    def send(self, request: PreparedRequest) -> PreparedRequest:
        logger.debug(f"Dry run: not sending {request.action} to {request.url}")
        self.sent.append(request)
        return request
