"""Well-known identifiers and denominations for Avalanche networks."""
from __future__ import annotations

PRIVATE_KEY_PREFIX = "PrivateKey-"
NODE_ID_PREFIX = "NodeID-"
PRIMARY_ASSET_ALIAS = "AVAX"

MAINNET_API = "api.avax.network"
FUJI_API = "api.avax-test.network"

DEFAULT_NETWORK_ID = 1
LOCAL_NETWORK_ID = 12345

FALLBACK_HRP = "custom"
FALLBACK_NETWORK_NAME = "Custom Network"
FALLBACK_EVM_CHAIN_ID = 43112

PLATFORM_CHAIN_ID = "11111111111111111111111111111111LpoYY"
PRIMARY_NETWORK_ID = "11111111111111111111111111111111LpoYY"

X_CHAIN_ALIAS = "X"
P_CHAIN_ALIAS = "P"
C_CHAIN_ALIAS = "C"
X_CHAIN_VM_NAME = "avm"
P_CHAIN_VM_NAME = "platformvm"
C_CHAIN_VM_NAME = "evm"

AVAX_ASSET_ID_MAINNET = "FvwEAhmxKfeiG8SnEvq42hc6whRyY3EFYAvebMqDNDGCgxN5Z"
AVAX_ASSET_ID_FUJI = "U8iRqJoiJm8xZHAacmvYyZVwqQx6uDNtQeP3CQ6fcgQk3JqnK"
AVAX_ASSET_ID_LOCAL = "2fombhL7aGPwj3KH4bfrmJwW6PVnMobf9Y2fn9GwxiAAJyFDbe"

# ---------------------------------------------------------------------------
# Denominations (X/P chain amounts are in nAVAX, C chain gas in wei)
# ---------------------------------------------------------------------------

ONE_AVAX = 10**9
DECIAVAX = ONE_AVAX // 10
CENTIAVAX = ONE_AVAX // 100
MILLIAVAX = ONE_AVAX // 1_000
MICROAVAX = ONE_AVAX // 1_000_000
NANOAVAX = ONE_AVAX // 1_000_000_000

WEI = 1
GWEI = WEI * 10**9
AVAX_GWEI = NANOAVAX

AVAX_STAKE_CAP = ONE_AVAX * 3_000_000

# ---------------------------------------------------------------------------
# Network id <-> prefix / name tables
# ---------------------------------------------------------------------------

NETWORK_ID_TO_HRP: dict[int, str] = {
    0: "custom",
    1: "avax",
    2: "cascade",
    3: "denali",
    4: "everest",
    5: "fuji",
    12345: "local",
}

HRP_TO_NETWORK_ID: dict[str, int] = {hrp: nid for nid, hrp in NETWORK_ID_TO_HRP.items()}

NETWORK_ID_TO_NETWORK_NAMES: dict[int, tuple[str, ...]] = {
    0: ("Manhattan",),
    1: ("Avalanche", "Mainnet"),
    2: ("Cascade",),
    3: ("Denali",),
    4: ("Everest",),
    5: ("Fuji", "Testnet"),
    12345: ("Local Network",),
}

NETWORK_NAME_TO_NETWORK_ID: dict[str, int] = {
    name: nid for nid, names in NETWORK_ID_TO_NETWORK_NAMES.items() for name in names
}
