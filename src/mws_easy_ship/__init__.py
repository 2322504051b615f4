"""
MWS Easy Ship - a thin binding to the Amazon MWS Easy Ship API section.

Public API:
- EasyShipClient: One method per Easy Ship operation
- MWSClient: Shared client that builds operations and hands them to a Transport
- Settings: Endpoint and seller configuration
"""
from .client_types import OperationBuilder, PreparedRequest, SharedClient, Transport
from .errors import EasyShipError, OperationNotStartedError, UnsupportedParameterValue
from .operation import Operation
from .operations import EasyShipClient
from .settings import Settings, create_settings_from_env
from .shared_client import MWSClient
from .transports import DryRunTransport

__version__ = "0.1.0"

__all__ = [
    "EasyShipClient",
    "MWSClient",
    "Operation",
    "OperationBuilder",
    "SharedClient",
    "Transport",
    "PreparedRequest",
    "DryRunTransport",
    "Settings",
    "create_settings_from_env",
    "EasyShipError",
    "OperationNotStartedError",
    "UnsupportedParameterValue",
]
