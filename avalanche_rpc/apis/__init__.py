"""Endpoint clients."""
from .base import JsonRpcEndpoint
from .evm import EvmApi
from .health import HealthApi
from .info import InfoApi

__all__ = ["EvmApi", "HealthApi", "InfoApi", "JsonRpcEndpoint"]
