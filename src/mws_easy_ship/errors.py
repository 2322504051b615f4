"""
Easy Ship client error classes.

Only the parameter-building and shared client layers raise these. Errors from
the transport (network, authentication, remote error codes) are not wrapped
and reach the caller as raised.
"""
from __future__ import annotations


class EasyShipError(Exception):
    """Base class for all errors raised by this package."""
    pass


class OperationNotStartedError(EasyShipError):
    """
    run() was called with no pending operation.

    Raised when:
    - run() is called before operation()
    - run() is called twice for the same operation
    """
    pass


class UnsupportedParameterValue(EasyShipError, TypeError):
    """
    A parameter value cannot be flattened to MWS name/value pairs.
    """

    def __init__(self, key: str, value: object):
        super().__init__(
            f"Unsupported value for parameter {key!r}: {type(value).__name__}"
        )
        self.key = key
        self.value = value


__all__ = [
    "EasyShipError",
    "OperationNotStartedError",
    "UnsupportedParameterValue",
]
