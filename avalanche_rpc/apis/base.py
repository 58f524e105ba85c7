"""Shared plumbing for JSON-RPC endpoint clients."""
from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, TypeVar

from cachetools import LRUCache

from ..interfaces.http import HttpTransport
from ..jsonrpc.envelope import build_request, decode_response
from ..jsonrpc.params import MappingParam

logger = logging.getLogger(__name__)

T = TypeVar("T")

CACHE_SIZE = 2


class JsonRpcEndpoint:
    """Transport + envelope codec + a tiny memoization cache.

    The cache has no coherence with live node state; only values that do not
    change for the lifetime of a node (ids, names) go through it.
    """

    def __init__(
        self,
        transport: HttpTransport,
        base_path: str,
        jsonrpc_version: str = "2.0",
        request_id: int = 1,
    ) -> None:
        self._transport = transport
        self._base_path = base_path
        self.jsonrpc_version = jsonrpc_version
        self.request_id = request_id
        self._cache: LRUCache = LRUCache(maxsize=CACHE_SIZE)

    @property
    def base_path(self) -> str:
        return self._base_path

    @property
    def transport(self) -> HttpTransport:
        return self._transport

    @property
    def cache(self) -> LRUCache:
        return self._cache

    async def call_method(
        self,
        method: str,
        params: MappingParam | None = None,
        path: str | None = None,
        headers: dict[str, str] | None = None,
        parse_result: Callable[[Any], T] | None = None,
    ) -> T:
        """Send one JSON-RPC call and decode its result."""
        request = build_request(
            method,
            params,
            request_id=self.request_id,
            version=self.jsonrpc_version,
            headers=headers,
        )
        logger.debug("Calling %s on %s", method, path or self._base_path)
        response = await self._transport.post(
            path or self._base_path, request.body, request.headers
        )
        return decode_response(response.body, method, parse_result)

    async def _cached(self, key: str, factory: Callable[[], Awaitable[T]]) -> T:
        """Return the memoized value for ``key``, computing it on a miss."""
        if key in self._cache:
            return self._cache[key]
        value = await factory()
        self._cache[key] = value
        return value

    def clear_cache(self) -> None:
        self._cache.clear()
