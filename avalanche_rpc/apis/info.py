"""Info API: node identity, network and peer information."""
from __future__ import annotations

from ..interfaces.http import HttpTransport
from ..jsonrpc.params import MappingParam, TextListParam, TextParam
from ..models import Peer, TxFee, Uptime
from . import parser
from .base import JsonRpcEndpoint


class InfoApi(JsonRpcEndpoint):
    """Wrapper for ``/ext/info``."""

    def __init__(self, transport: HttpTransport) -> None:
        super().__init__(transport, "/ext/info")

    async def get_blockchain_id(self, alias: str) -> str:
        """Blockchain id for a chain alias such as ``X`` or ``C``."""

        async def fetch() -> str:
            return await self.call_method(
                "info.getBlockchainID",
                MappingParam({"alias": TextParam(alias)}),
                parse_result=parser.string_field("blockchainID"),
            )

        return await self._cached(f"blockchain_id:{alias}", fetch)

    async def get_network_id(self) -> int:
        async def fetch() -> int:
            return await self.call_method(
                "info.getNetworkID", parse_result=parser.parse_network_id
            )

        return await self._cached("network_id", fetch)

    async def get_network_name(self) -> str:
        return await self.call_method(
            "info.getNetworkName", parse_result=parser.string_field("networkName")
        )

    async def get_node_id(self) -> str:
        async def fetch() -> str:
            return await self.call_method(
                "info.getNodeID", parse_result=parser.string_field("nodeID")
            )

        return await self._cached("node_id", fetch)

    async def get_node_version(self) -> str:
        return await self.call_method(
            "info.getNodeVersion", parse_result=parser.string_field("version")
        )

    async def get_tx_fee(self) -> TxFee:
        return await self.call_method("info.getTxFee", parse_result=parser.parse_tx_fee)

    async def is_bootstrapped(self, chain: str) -> bool:
        return await self.call_method(
            "info.isBootstrapped",
            MappingParam({"chain": TextParam(chain)}),
            parse_result=parser.parse_is_bootstrapped,
        )

    async def peers(self, node_ids: list[str] | None = None) -> list[Peer]:
        """Connected peers, optionally filtered to ``node_ids``."""
        return await self.call_method(
            "info.peers",
            MappingParam({"nodeIDs": TextListParam(tuple(node_ids or ()))}),
            parse_result=parser.parse_peers,
        )

    async def uptime(self) -> Uptime:
        return await self.call_method("info.uptime", parse_result=parser.parse_uptime)
