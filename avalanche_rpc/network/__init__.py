"""Network parameter registry."""
from .models import (
    CChainParameters,
    ChainParameters,
    NetworkEntry,
    PChainParameters,
    XChainParameters,
)
from .registry import NetworkRegistry, build_default_registry

__all__ = [
    "CChainParameters",
    "ChainParameters",
    "NetworkEntry",
    "NetworkRegistry",
    "PChainParameters",
    "XChainParameters",
    "build_default_registry",
]
