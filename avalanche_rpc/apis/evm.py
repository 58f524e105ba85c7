"""EVM API: C-chain fee queries."""
from __future__ import annotations

from ..interfaces.http import HttpTransport
from . import parser
from .base import JsonRpcEndpoint

# eth_* methods are served on the RPC path, not the avax namespace.
ETH_RPC_PATH = "/ext/bc/C/rpc"


class EvmApi(JsonRpcEndpoint):
    """Wrapper for ``/ext/bc/C/avax`` and the C-chain ``eth_*`` methods."""

    def __init__(self, transport: HttpTransport) -> None:
        super().__init__(transport, "/ext/bc/C/avax")

    async def get_base_fee(self) -> str:
        """Current base fee as a hex quantity, e.g. ``"0x5d21dba00"``."""
        return await self.call_method(
            "eth_baseFee", path=ETH_RPC_PATH, parse_result=parser.parse_string
        )

    async def get_max_priority_fee_per_gas(self) -> str:
        return await self.call_method(
            "eth_maxPriorityFeePerGas", path=ETH_RPC_PATH, parse_result=parser.parse_string
        )

    @staticmethod
    def hex_to_int(value: str) -> int:
        return parser.hex_to_int(value)
