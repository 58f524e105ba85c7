"""Chain parameter records (frozen)."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Union


@dataclass(frozen=True)
class XChainParameters:
    """Exchange chain (AVM) constants."""

    blockchain_id: str
    alias: str
    vm: str
    tx_fee: int | None = None
    creation_tx_fee: int | None = None
    fee: int | None = None
    avax_asset_id: str | None = None


@dataclass(frozen=True)
class PChainParameters:
    """Platform chain constants, including staking bounds.

    Durations are in seconds, amounts in nAVAX.
    """

    blockchain_id: str
    alias: str
    vm: str
    min_consumption: float
    max_consumption: float
    max_staking_duration: int
    max_supply: int
    min_stake: int
    min_stake_duration: int
    max_stake_duration: int
    min_delegation_stake: int
    min_delegation_fee: int
    tx_fee: int | None = None
    creation_tx_fee: int | None = None
    fee: int | None = None
    avax_asset_id: str | None = None


@dataclass(frozen=True)
class CChainParameters:
    """Contract chain (EVM) constants. Gas prices are in wei."""

    blockchain_id: str
    alias: str
    vm: str
    gas_price: int
    chain_id: int | None = None
    min_gas_price: int | None = None
    max_gas_price: int | None = None
    tx_bytes_gas: int | None = None
    cost_per_signature: int | None = None
    tx_fee: int | None = None
    fee: int | None = None
    avax_asset_id: str | None = None


ChainParameters = Union[XChainParameters, PChainParameters, CChainParameters]


@dataclass(frozen=True)
class NetworkEntry:
    """Everything known about one network id."""

    network_id: int
    hrp: str
    x: XChainParameters
    p: PChainParameters
    c: CChainParameters
    addresses: Mapping[str, ChainParameters] = field(default_factory=dict)

    def __post_init__(self) -> None:
        index = dict(self.addresses)
        if not index:
            for chain in (self.x, self.p, self.c):
                index.setdefault(chain.blockchain_id, chain)
        object.__setattr__(self, "addresses", MappingProxyType(index))

    def chain(self, alias: str) -> ChainParameters:
        """Return the chain record for ``X``, ``P`` or ``C`` (case-insensitive)."""
        key = alias.upper()
        if key == self.x.alias:
            return self.x
        if key == self.p.alias:
            return self.p
        if key == self.c.alias:
            return self.c
        raise ValueError(f"Unknown chain alias '{alias}'")
