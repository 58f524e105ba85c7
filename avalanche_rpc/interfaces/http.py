"""HTTP transport protocol: what endpoint clients need from a transport."""
from typing import Protocol

from ..transport import TransportResponse


class HttpTransport(Protocol):
    """Abstract interface for issuing requests against the node's base URL."""

    @property
    def base_url(self) -> str: ...

    async def post(
        self, path: str, body: bytes, headers: dict[str, str] | None = None
    ) -> TransportResponse: ...
