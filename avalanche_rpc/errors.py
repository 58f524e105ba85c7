"""Error taxonomy for the transport, codec and endpoint layers."""
from __future__ import annotations


class AvalancheError(Exception):
    """Base class for every error raised by this package."""


class BadProtocol(AvalancheError, ValueError):
    """A protocol literal outside ``http``/``https`` was supplied."""

    def __init__(self, protocol: str) -> None:
        super().__init__(f"Unsupported protocol '{protocol}' (expected 'http' or 'https')")
        self.protocol = protocol


class TransportFailure(AvalancheError):
    """Network or I/O level failure while talking to the node."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Request to {url} failed: {reason}")
        self.url = url
        self.reason = reason


class RemoteCallError(AvalancheError):
    """The node answered with a well-formed JSON-RPC error envelope."""

    def __init__(self, call: str, code: str, message: str) -> None:
        super().__init__(f"{call} failed with code {code}: {message}")
        self.call = call
        self.code = code
        self.message = message


class ProtocolViolation(AvalancheError):
    """The response body is neither a success nor an error envelope."""

    def __init__(self, call: str, body: str = "") -> None:
        preview = body if len(body) <= 200 else f"{body[:200]}..."
        super().__init__(f"{call} returned a malformed JSON-RPC response: {preview!r}")
        self.call = call
        self.body = body


class ApiNotConfigured(AvalancheError, LookupError):
    """An endpoint client was requested that was never registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"API '{name}' is not configured on this client")
        self.name = name
