"""Immutable registry of per-network chain parameters.

The registry is an explicit value: build it once with
:func:`build_default_registry` and hand it to whatever needs it. Tests can
construct isolated instances from their own :class:`NetworkEntry` objects.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from types import MappingProxyType
from typing import Iterable, Mapping

from . import constants as c
from .models import (
    CChainParameters,
    ChainParameters,
    NetworkEntry,
    PChainParameters,
    XChainParameters,
)

logger = logging.getLogger(__name__)

_TWO_WEEKS = 2 * 7 * 24 * 60 * 60
_ONE_DAY = 24 * 60 * 60
_ONE_YEAR = 365 * 24 * 60 * 60


class NetworkRegistry:
    """Read-only lookup table keyed by 16-bit network id."""

    def __init__(
        self,
        entries: Iterable[NetworkEntry],
        default_network_id: int = c.DEFAULT_NETWORK_ID,
        fallback_network_id: int = c.LOCAL_NETWORK_ID,
        fallback_hrp: str = c.FALLBACK_HRP,
        network_names: Mapping[int, tuple[str, ...]] | None = None,
    ) -> None:
        table: dict[int, NetworkEntry] = {}
        for entry in entries:
            if not entry.addresses:
                raise ValueError(f"Network {entry.network_id} has an empty address index")
            if not entry.hrp:
                raise ValueError(f"Network {entry.network_id} has no hrp")
            table[entry.network_id] = entry
        if not table:
            raise ValueError("A network registry needs at least one entry")

        self._entries = MappingProxyType(table)
        self._hrp_index = MappingProxyType(
            {entry.hrp: nid for nid, entry in table.items()}
        )
        names = dict(network_names or {})
        self._names = MappingProxyType(names)
        self._name_index = MappingProxyType(
            {name: nid for nid, aliases in names.items() for name in aliases}
        )
        self._default_network_id = default_network_id
        self._fallback_network_id = fallback_network_id
        self._fallback_hrp = fallback_hrp

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def network_ids(self) -> tuple[int, ...]:
        return tuple(sorted(self._entries))

    @property
    def default_network_id(self) -> int:
        return self._default_network_id

    def __contains__(self, network_id: object) -> bool:
        return network_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def resolve_prefix(self, network_id: int | None) -> str:
        """Human-readable prefix for ``network_id``.

        Unknown ids resolve to the default network's prefix; ``None`` (or a
        registry without the default network) yields the fallback literal.
        """
        if network_id is None:
            return self._fallback_hrp
        entry = self._entries.get(network_id)
        if entry is not None:
            return entry.hrp
        default = self._entries.get(self._default_network_id)
        if default is not None:
            return default.hrp
        return self._fallback_hrp

    def lookup(self, network_id: int) -> NetworkEntry:
        """Full parameter record, falling back to the local/custom entry."""
        entry = self._entries.get(network_id)
        if entry is not None:
            return entry

        logger.debug(
            "Unknown network id %s, using network %s parameters",
            network_id,
            self._fallback_network_id,
        )
        fallback = self._entries.get(self._fallback_network_id)
        if fallback is None:
            fallback = self._entries.get(self._default_network_id)
        if fallback is None:
            fallback = self._entries[min(self._entries)]
        return fallback

    def resolve_chain_by_address(
        self, network_id: int, blockchain_id: str
    ) -> ChainParameters | None:
        """Find the chain record owning ``blockchain_id``; None if unknown."""
        return self.lookup(network_id).addresses.get(blockchain_id)

    def blockchain_id(self, network_id: int, alias: str) -> str:
        """Blockchain id of the ``X``/``P``/``C`` chain on ``network_id``."""
        return self.lookup(network_id).chain(alias).blockchain_id

    def network_id_for_prefix(self, hrp: str) -> int | None:
        return self._hrp_index.get(hrp)

    def network_names(self, network_id: int) -> tuple[str, ...]:
        return self._names.get(network_id, (c.FALLBACK_NETWORK_NAME,))

    def network_id_for_name(self, name: str) -> int | None:
        return self._name_index.get(name)


# ---------------------------------------------------------------------------
# Default table
# ---------------------------------------------------------------------------


def _platform_chain(
    *,
    tx_fee: int | None = None,
    creation_tx_fee: int | None = None,
    fee: int | None = None,
    avax_asset_id: str | None = None,
    min_stake: int = c.ONE_AVAX * 2000,
    min_stake_duration: int = _TWO_WEEKS,
    min_delegation_stake: int = c.ONE_AVAX * 25,
) -> PChainParameters:
    return PChainParameters(
        blockchain_id=c.PLATFORM_CHAIN_ID,
        alias=c.P_CHAIN_ALIAS,
        vm=c.P_CHAIN_VM_NAME,
        min_consumption=0.1,
        max_consumption=0.12,
        max_staking_duration=31_536_000,
        max_supply=720_000_000 * c.ONE_AVAX,
        min_stake=min_stake,
        min_stake_duration=min_stake_duration,
        max_stake_duration=_ONE_YEAR,
        min_delegation_stake=min_delegation_stake,
        min_delegation_fee=2,
        tx_fee=tx_fee,
        creation_tx_fee=creation_tx_fee,
        fee=fee,
        avax_asset_id=avax_asset_id,
    )


def _exchange_chain(blockchain_id: str, **kwargs) -> XChainParameters:
    return XChainParameters(
        blockchain_id=blockchain_id, alias=c.X_CHAIN_ALIAS, vm=c.X_CHAIN_VM_NAME, **kwargs
    )


def _contract_chain(blockchain_id: str, **kwargs) -> CChainParameters:
    return CChainParameters(
        blockchain_id=blockchain_id, alias=c.C_CHAIN_ALIAS, vm=c.C_CHAIN_VM_NAME, **kwargs
    )


def _entry(
    network_id: int, x: XChainParameters, p: PChainParameters, cc: CChainParameters
) -> NetworkEntry:
    return NetworkEntry(
        network_id=network_id,
        hrp=c.NETWORK_ID_TO_HRP[network_id],
        x=x,
        p=p,
        c=cc,
        addresses={x.blockchain_id: x, p.blockchain_id: p, cc.blockchain_id: cc},
    )


def _default_entries() -> list[NetworkEntry]:
    entries: list[NetworkEntry] = []

    # Manhattan
    entries.append(
        _entry(
            0,
            _exchange_chain(
                "2vrXWHgGxh5n3YsLHMV16YVVJTpT4z45Fmb4y3bL6si8kLCyg9",
                fee=c.MILLIAVAX,
                creation_tx_fee=c.CENTIAVAX,
            ),
            _platform_chain(fee=c.MILLIAVAX, creation_tx_fee=c.CENTIAVAX),
            _contract_chain(
                "2fFZQibQXcd6LTE4rpBPBAkLVXFE91Kit8pgxaBG1mRnh5xqbb",
                fee=c.MILLIAVAX,
                gas_price=c.GWEI * 470,
                chain_id=43111,
            ),
        )
    )

    # Mainnet
    entries.append(
        _entry(
            1,
            _exchange_chain(
                "2oYMBNV4eNHyqk2fjjV5nVQLDbtmNJzq5s3qs3Lo6ftnC6FByM",
                tx_fee=c.MILLIAVAX,
                creation_tx_fee=c.CENTIAVAX,
                avax_asset_id=c.AVAX_ASSET_ID_MAINNET,
            ),
            _platform_chain(
                tx_fee=c.MILLIAVAX,
                creation_tx_fee=c.CENTIAVAX,
                avax_asset_id=c.AVAX_ASSET_ID_MAINNET,
            ),
            _contract_chain(
                "2q9e4r6Mu3U68nU1fYjgbR6JvwrRx36CohpAX5UQxse55x1Q5",
                tx_bytes_gas=1,
                cost_per_signature=1000,
                tx_fee=c.MILLIAVAX,
                gas_price=c.GWEI * 225,
                chain_id=43114,
                min_gas_price=c.GWEI * 25,
                max_gas_price=c.GWEI * 1000,
            ),
        )
    )

    # Cascade, Denali: zero fees, no EVM chain id
    for network_id, x_id, c_id in (
        (
            2,
            "4ktRjsAKxgMr2aEzv9SWmrU7Xk5FniHUrVCX4P1TZSfTLZWFM",
            "2mUYSXfLrDtigwbzj1LxKVsHwELghc5sisoXrzJwLqAAQHF4i",
        ),
        (
            3,
            "rrEWX7gc7D9mwcdrdBxBTdqh1a7WDVsMuadhTZgyXfFcRz45L",
            "zJytnh96Pc8rM337bBrtMvJDbEdDNjcXG3WkTNCiLp18ergm9",
        ),
    ):
        entries.append(
            _entry(
                network_id,
                _exchange_chain(x_id, tx_fee=0, creation_tx_fee=0),
                _platform_chain(tx_fee=0, creation_tx_fee=0),
                _contract_chain(c_id, gas_price=0),
            )
        )

    # Everest
    entries.append(
        _entry(
            4,
            _exchange_chain(
                "jnUjZSRt16TcRnZzmh5aMhavwVHz3zBrSN8GfFMTQkzUnoBxC",
                tx_fee=c.MILLIAVAX,
                creation_tx_fee=c.CENTIAVAX,
            ),
            _platform_chain(tx_fee=c.MILLIAVAX, creation_tx_fee=c.CENTIAVAX),
            _contract_chain(
                "saMG5YgNsFxzjz4NMkEkt3bAH6hVxWdZkWcEnGB3Z15pcAmsK",
                gas_price=c.GWEI * 470,
                chain_id=43110,
            ),
        )
    )

    # Fuji
    fuji_x = _exchange_chain(
        "2JVSBoinj9C2J33VntvzYtVJNZdN2NKiwwKjcumHUWEb5DbBrm",
        tx_fee=c.MILLIAVAX,
        creation_tx_fee=c.CENTIAVAX,
        avax_asset_id=c.AVAX_ASSET_ID_FUJI,
    )
    fuji_p = _platform_chain(
        tx_fee=c.MILLIAVAX,
        creation_tx_fee=c.CENTIAVAX,
        avax_asset_id=c.AVAX_ASSET_ID_FUJI,
        min_stake=c.ONE_AVAX,
        min_stake_duration=_ONE_DAY,
        min_delegation_stake=c.ONE_AVAX,
    )
    fuji_c = _contract_chain(
        "yH8D7ThNJkxmtkuv2jgBa4P1Rn3Qpr4pPr7QYNfcdoS6k6HWp",
        tx_bytes_gas=1,
        cost_per_signature=1000,
        tx_fee=c.MILLIAVAX,
        gas_price=c.GWEI * 225,
        chain_id=43113,
        min_gas_price=c.GWEI * 25,
        max_gas_price=c.GWEI * 100,
    )
    entries.append(_entry(5, fuji_x, fuji_p, fuji_c))

    # Local network: Fuji parameters with local ids
    entries.append(
        _entry(
            c.LOCAL_NETWORK_ID,
            replace(
                fuji_x,
                blockchain_id="2eNy1mUFdmaxXNj1eQHUe7Np4gju9sJsEtWQ4MX3ToiNKuADed",
                avax_asset_id=c.AVAX_ASSET_ID_LOCAL,
            ),
            fuji_p,
            replace(
                fuji_c,
                blockchain_id="2CA6j5zYzasynPsFeNoqWkmTCt3VScMvXUZHbfDJ8k3oGzAPtU",
                avax_asset_id=c.AVAX_ASSET_ID_LOCAL,
                chain_id=c.FALLBACK_EVM_CHAIN_ID,
            ),
        )
    )

    return entries


def build_default_registry() -> NetworkRegistry:
    """Build the full table of supported Avalanche networks."""
    return NetworkRegistry(
        _default_entries(),
        default_network_id=c.DEFAULT_NETWORK_ID,
        fallback_network_id=c.LOCAL_NETWORK_ID,
        fallback_hrp=c.FALLBACK_HRP,
        network_names=c.NETWORK_ID_TO_NETWORK_NAMES,
    )
