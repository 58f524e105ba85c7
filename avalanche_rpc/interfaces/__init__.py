"""Protocol interfaces for the Avalanche RPC client."""
from .endpoint import EndpointClient
from .http import HttpTransport

__all__ = ["EndpointClient", "HttpTransport"]
