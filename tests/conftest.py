"""Shared test fixtures and sample data."""
from __future__ import annotations

import json
import textwrap
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from avalanche_rpc.network import (
    CChainParameters,
    NetworkEntry,
    NetworkRegistry,
    PChainParameters,
    XChainParameters,
    build_default_registry,
)
from avalanche_rpc.transport import Transport, TransportResponse


# ---------------------------------------------------------------------------
# Registry fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def registry() -> NetworkRegistry:
    return build_default_registry()


def _make_entry(network_id: int, hrp: str, suffix: str) -> NetworkEntry:
    return NetworkEntry(
        network_id=network_id,
        hrp=hrp,
        x=XChainParameters(blockchain_id=f"x-{suffix}", alias="X", vm="avm", tx_fee=1),
        p=PChainParameters(
            blockchain_id=f"p-{suffix}",
            alias="P",
            vm="platformvm",
            min_consumption=0.1,
            max_consumption=0.12,
            max_staking_duration=100,
            max_supply=1000,
            min_stake=10,
            min_stake_duration=1,
            max_stake_duration=100,
            min_delegation_stake=5,
            min_delegation_fee=2,
        ),
        c=CChainParameters(blockchain_id=f"c-{suffix}", alias="C", vm="evm", gas_price=7),
    )


@pytest.fixture()
def small_registry() -> NetworkRegistry:
    """Isolated two-network registry: 1 is the default, 99 the fallback."""
    return NetworkRegistry(
        [_make_entry(1, "one", "a"), _make_entry(99, "ninetynine", "b")],
        default_network_id=1,
        fallback_network_id=99,
        fallback_hrp="nothing",
        network_names={1: ("One",), 99: ("Ninety Nine",)},
    )


# ---------------------------------------------------------------------------
# Transport fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def transport(registry: NetworkRegistry) -> Transport:
    return Transport("node.example.com", 9650, "http", registry=registry)


def rpc_response(result=None, error=None, status: int = 200) -> TransportResponse:
    """Build a transport response carrying a JSON-RPC envelope."""
    envelope: dict = {"jsonrpc": "2.0", "id": "1"}
    if error is not None:
        envelope["error"] = error
    else:
        envelope["result"] = result
    return TransportResponse(status=status, body=json.dumps(envelope).encode())


@pytest.fixture()
def make_rpc_response():
    return rpc_response


@pytest.fixture()
def mock_transport() -> AsyncMock:
    """Stand-in transport whose ``post`` returns a canned response."""
    fake = AsyncMock()
    fake.base_url = "http://node.example.com:9650"
    fake.post.return_value = rpc_response({})
    return fake


# ---------------------------------------------------------------------------
# Config YAML fixture
# ---------------------------------------------------------------------------

SAMPLE_YAML = textwrap.dedent("""\
    node:
      host: api.avax-test.network
      port: 443
      protocol: https
      network_id: 5
      hrp: fuji
      chains:
        x_chain_id: "XCHAIN"
      auth_token: "tok-123"
      headers:
        User-Agent: tests/1.0
      timeout: 12.5
      skip_init: false
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file


# ---------------------------------------------------------------------------
# Sample node results
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_peer() -> dict:
    return {
        "ip": "206.189.137.87:9651",
        "publicIP": "206.189.137.87:9651",
        "nodeID": "NodeID-8PYXX47kqLDe2wD4oPbvRRchcnSzMA4J4",
        "version": "avalanche/1.10.0",
        "lastSent": "2020-06-01T15:23:02Z",
        "lastReceived": "2020-06-01T15:22:57Z",
    }


@pytest.fixture()
def sample_health_result() -> dict:
    check = {
        "message": {"consensus": {"outstandingVertices": 0}},
        "timestamp": "2024-01-01T00:00:00Z",
        "duration": 3000,
        "contiguousFailures": 0,
        "timeOfFirstFailure": None,
    }
    failing = dict(check, contiguousFailures=2, timeOfFirstFailure="2024-01-01T00:00:00Z")
    return {
        "healthy": False,
        "checks": {"C": check, "P": check, "X": check, "network": failing},
    }
