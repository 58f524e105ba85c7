"""Async JSON-RPC client for Avalanche nodes."""
from .client import AvalancheClient
from .config import ClientConfig, load_config
from .errors import (
    ApiNotConfigured,
    AvalancheError,
    BadProtocol,
    ProtocolViolation,
    RemoteCallError,
    TransportFailure,
)
from .network import NetworkRegistry, build_default_registry
from .transport import Transport, TransportResponse

__all__ = [
    "ApiNotConfigured",
    "AvalancheClient",
    "AvalancheError",
    "BadProtocol",
    "ClientConfig",
    "NetworkRegistry",
    "ProtocolViolation",
    "RemoteCallError",
    "Transport",
    "TransportFailure",
    "TransportResponse",
    "build_default_registry",
    "load_config",
]

__version__ = "0.1.0"
