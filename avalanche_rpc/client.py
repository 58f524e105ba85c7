"""Top-level client: one transport plus a registry of endpoint clients."""
from __future__ import annotations

import logging

from .apis import EvmApi, HealthApi, InfoApi
from .config import ClientConfig
from .errors import ApiNotConfigured
from .interfaces.endpoint import EndpointClient
from .network import NetworkRegistry, build_default_registry
from .network.constants import C_CHAIN_ALIAS, DEFAULT_NETWORK_ID, X_CHAIN_ALIAS
from .transport import PLAIN, Transport

logger = logging.getLogger(__name__)

# Endpoint clients registered at construction unless ``skip_init`` is set.
_DEFAULT_APIS = {
    "info": InfoApi,
    "health": HealthApi,
    "evm": EvmApi,
}


class AvalancheClient:
    """Entry point for talking to an Avalanche node.

    Every registered endpoint client shares this client's :class:`Transport`,
    so header, auth and address changes apply to all of them.
    """

    def __init__(
        self,
        host: str,
        port: int,
        protocol: str = PLAIN,
        network_id: int | None = None,
        x_chain_id: str | None = None,
        c_chain_id: str | None = None,
        hrp: str | None = None,
        skip_init: bool = False,
        registry: NetworkRegistry | None = None,
        timeout: float | None = None,
    ) -> None:
        self._registry = registry if registry is not None else build_default_registry()
        resolved_network_id = DEFAULT_NETWORK_ID if network_id is None else network_id
        self._transport = Transport(
            host,
            port,
            protocol,
            network_id=resolved_network_id,
            registry=self._registry,
            timeout=timeout,
        )
        if hrp is not None:
            self._transport.set_hrp(hrp)

        entry = self._registry.lookup(resolved_network_id)
        self.x_chain_id = x_chain_id or entry.chain(X_CHAIN_ALIAS).blockchain_id
        self.c_chain_id = c_chain_id or entry.chain(C_CHAIN_ALIAS).blockchain_id

        self._apis: dict[str, EndpointClient] = {}
        if not skip_init:
            for name, factory in _DEFAULT_APIS.items():
                self.add_api(name, factory(self._transport))

        logger.debug(
            "Client for %s (network %s, hrp %s) with APIs %s",
            self._transport.base_url,
            self._transport.network_id,
            self._transport.hrp,
            sorted(self._apis),
        )

    @classmethod
    def from_config(
        cls, config: ClientConfig, registry: NetworkRegistry | None = None
    ) -> "AvalancheClient":
        client = cls(
            config.host,
            config.port,
            config.protocol,
            network_id=config.network_id,
            x_chain_id=config.chains.x_chain_id,
            c_chain_id=config.chains.c_chain_id,
            hrp=config.hrp,
            skip_init=config.skip_init,
            registry=registry,
            timeout=config.timeout,
        )
        for key, value in config.headers.items():
            client.transport.set_header(key, value)
        if config.auth_token:
            client.transport.set_auth_token(config.auth_token)
        return client

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def registry(self) -> NetworkRegistry:
        return self._registry

    @property
    def api_names(self) -> tuple[str, ...]:
        return tuple(sorted(self._apis))

    # ------------------------------------------------------------------
    # Endpoint registry
    # ------------------------------------------------------------------

    def add_api(self, name: str, api: EndpointClient) -> None:
        self._apis[name] = api

    def api(self, name: str) -> EndpointClient:
        try:
            return self._apis[name]
        except KeyError:
            raise ApiNotConfigured(name) from None

    @property
    def info(self) -> InfoApi:
        return self.api("info")  # type: ignore[return-value]

    @property
    def health(self) -> HealthApi:
        return self.api("health")  # type: ignore[return-value]

    @property
    def evm(self) -> EvmApi:
        return self.api("evm")  # type: ignore[return-value]

    def clone(self) -> "AvalancheClient":
        """Copy with an independent transport and no registered endpoints."""
        twin = AvalancheClient.__new__(AvalancheClient)
        twin._registry = self._registry
        twin._transport = self._transport.clone()
        twin.x_chain_id = self.x_chain_id
        twin.c_chain_id = self.c_chain_id
        twin._apis = {}
        return twin
