"""Endpoint client protocol: one remote API family on the node."""
from typing import Any, Callable, Protocol, TypeVar

from ..jsonrpc.params import MappingParam

T = TypeVar("T")


class EndpointClient(Protocol):
    """Abstract interface for a JSON-RPC endpoint wrapper."""

    @property
    def base_path(self) -> str: ...

    async def call_method(
        self,
        method: str,
        params: MappingParam | None = None,
        path: str | None = None,
        headers: dict[str, str] | None = None,
        parse_result: Callable[[Any], T] | None = None,
    ) -> T: ...
