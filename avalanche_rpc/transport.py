"""HTTP transport and connection configuration for an Avalanche node."""
from __future__ import annotations

import asyncio
import logging
import re
import ssl
from dataclasses import dataclass, field
from typing import Any

import aiohttp
import certifi

from .errors import BadProtocol, TransportFailure
from .network import NetworkRegistry, build_default_registry
from .network.constants import DEFAULT_NETWORK_ID

logger = logging.getLogger(__name__)

PLAIN = "http"
SECURE = "https"
PROTOCOLS = (PLAIN, SECURE)

# Characters that are unsafe inside a URL authority component.
_UNSAFE_HOST_CHARS = re.compile(r"[&#,@+()$~%':*?<>{}]")


def sanitize_host(host: str) -> str:
    """Strip URL-unsafe characters from a host name."""
    return _UNSAFE_HOST_CHARS.sub("", host)


def _merge_headers(target: dict[str, str], overrides: dict[str, str]) -> None:
    """Apply ``overrides`` onto ``target``, replacing any case variant of a name."""
    for key, value in overrides.items():
        lowered = key.lower()
        for existing in [k for k in target if k.lower() == lowered]:
            del target[existing]
        target[key] = value


@dataclass(frozen=True)
class TransportResponse:
    """Status, headers and fully read body of one HTTP exchange."""

    status: int
    body: bytes
    headers: dict[str, str] = field(default_factory=dict)

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class Transport:
    """Connection settings plus HTTP dispatch to one node.

    ``base_url`` is only ever composed by :meth:`configure`, so it always
    reflects the last protocol/host/port triple.
    """

    def __init__(
        self,
        host: str,
        port: int,
        protocol: str = PLAIN,
        network_id: int = DEFAULT_NETWORK_ID,
        registry: NetworkRegistry | None = None,
        timeout: float | None = None,
    ) -> None:
        self._registry = registry if registry is not None else build_default_registry()
        self._protocol = PLAIN
        self._host = ""
        self._port = 0
        self._base_url = ""
        self._headers: dict[str, str] = {}
        self._auth_token: str | None = None
        self.timeout = timeout
        self._network_id = DEFAULT_NETWORK_ID
        self._hrp = ""
        self.configure(host, port, protocol)
        self.set_network_id(network_id)

    # ------------------------------------------------------------------
    # Address
    # ------------------------------------------------------------------

    def configure(self, host: str, port: int, protocol: str = PLAIN) -> None:
        """Validate and store the node address, recomputing ``base_url``.

        Raises:
            BadProtocol: ``protocol`` is not ``http`` or ``https``. The
                current configuration is left untouched.
        """
        if protocol not in PROTOCOLS:
            raise BadProtocol(protocol)
        clean_host = sanitize_host(host)
        if clean_host != host:
            logger.debug("Sanitized host %r to %r", host, clean_host)
        self._protocol = protocol
        self._host = clean_host
        self._port = port
        self._base_url = f"{protocol}://{clean_host}:{port}"

    @property
    def protocol(self) -> str:
        return self._protocol

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    @property
    def base_url(self) -> str:
        return self._base_url

    # ------------------------------------------------------------------
    # Network id / prefix
    # ------------------------------------------------------------------

    @property
    def registry(self) -> NetworkRegistry:
        return self._registry

    @property
    def network_id(self) -> int:
        return self._network_id

    @property
    def hrp(self) -> str:
        return self._hrp

    def set_network_id(self, network_id: int) -> None:
        """Store the network id and re-resolve the human-readable prefix."""
        if not 0 <= network_id <= 0xFFFF:
            raise ValueError(f"Network id {network_id} is outside 0..65535")
        self._network_id = network_id
        self._hrp = self._registry.resolve_prefix(network_id)

    def set_hrp(self, hrp: str) -> None:
        if not hrp:
            raise ValueError("hrp must not be empty")
        self._hrp = hrp

    # ------------------------------------------------------------------
    # Headers / auth
    # ------------------------------------------------------------------

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    @property
    def auth_token(self) -> str | None:
        return self._auth_token

    def set_header(self, key: str, value: str) -> None:
        if not key:
            raise ValueError("Header name must not be empty")
        self._headers[key] = value

    def remove_header(self, key: str) -> None:
        self._headers.pop(key, None)

    def clear_headers(self) -> None:
        self._headers.clear()

    def set_auth_token(self, token: str) -> None:
        if not token:
            raise ValueError("Auth token must not be empty")
        self._auth_token = token

    def clear_auth_token(self) -> None:
        self._auth_token = None

    def build_headers(self, extra_headers: dict[str, str] | None = None) -> dict[str, str]:
        """Merge headers: caller extras < stored headers < bearer auth.

        Names are compared case-insensitively; the later layer's spelling wins.
        """
        merged: dict[str, str] = dict(extra_headers or {})
        _merge_headers(merged, self._headers)
        if self._auth_token is not None:
            _merge_headers(merged, {"Authorization": f"Bearer {self._auth_token}"})
        return merged

    # ------------------------------------------------------------------
    # Cloning
    # ------------------------------------------------------------------

    def clone(self) -> "Transport":
        """Independent copy: same address and registry, own headers and token."""
        twin = Transport(
            self._host,
            self._port,
            self._protocol,
            network_id=self._network_id,
            registry=self._registry,
            timeout=self.timeout,
        )
        twin._hrp = self._hrp
        twin._headers = dict(self._headers)
        twin._auth_token = self._auth_token
        return twin

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------

    def url_for(self, path: str) -> str:
        if path and not path.startswith("/"):
            path = f"/{path}"
        return f"{self._base_url}{path}"

    def _connector(self) -> aiohttp.TCPConnector:
        if self._protocol == SECURE:
            ssl_context = ssl.create_default_context(cafile=certifi.where())
            return aiohttp.TCPConnector(ssl=ssl_context)
        return aiohttp.TCPConnector(ssl=False)

    async def send(
        self,
        method: str,
        path: str,
        query_params: dict[str, str] | None = None,
        body: bytes | None = None,
        extra_headers: dict[str, str] | None = None,
    ) -> TransportResponse:
        """Issue one HTTP request and read the full response.

        Raises:
            TransportFailure: connection, TLS, URL or body read failure.
        """
        url = self.url_for(path)
        headers = self.build_headers(extra_headers)
        request_kwargs: dict[str, Any] = {"headers": headers}
        if query_params:
            request_kwargs["params"] = dict(query_params)
        if body is not None:
            request_kwargs["data"] = body
        if self.timeout is not None:
            request_kwargs["timeout"] = aiohttp.ClientTimeout(total=self.timeout)

        logger.debug("%s %s", method, url)
        try:
            connector = self._connector()
            async with aiohttp.ClientSession(connector=connector) as session:
                async with session.request(method, url, **request_kwargs) as response:
                    payload = await response.read()
                    return TransportResponse(
                        status=response.status,
                        body=payload,
                        headers=dict(response.headers),
                    )
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError, ValueError) as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise TransportFailure(url, str(e) or type(e).__name__) from e

    async def get(
        self,
        path: str,
        query_params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> TransportResponse:
        return await self.send("GET", path, query_params, None, headers)

    async def delete(
        self,
        path: str,
        query_params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> TransportResponse:
        return await self.send("DELETE", path, query_params, None, headers)

    async def post(
        self, path: str, body: bytes, headers: dict[str, str] | None = None
    ) -> TransportResponse:
        return await self.send("POST", path, None, body, headers)

    async def put(
        self, path: str, body: bytes, headers: dict[str, str] | None = None
    ) -> TransportResponse:
        return await self.send("PUT", path, None, body, headers)

    async def patch(
        self, path: str, body: bytes, headers: dict[str, str] | None = None
    ) -> TransportResponse:
        return await self.send("PATCH", path, None, body, headers)
