"""Pure parsing functions for endpoint results, no I/O.

Each parser raises ``KeyError``/``TypeError``/``ValueError`` when the result
does not have the expected shape, which the envelope decoder treats as "not a
success envelope".
"""
from __future__ import annotations

from typing import Any

from ..models import HealthCheck, HealthReport, Peer, TxFee, Uptime


def _require_dict(result: Any) -> dict[str, Any]:
    if not isinstance(result, dict):
        raise TypeError(f"expected an object, got {type(result).__name__}")
    return result


def _require_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value


def parse_decimal(value: Any) -> int:
    """Parse an amount that the node encodes as a decimal string.

    Examples:
        "1000000" → 1000000
    """
    text = _require_str(value).strip()
    if not text.lstrip("-").isdigit():
        raise ValueError(f"not a decimal integer: {value!r}")
    return int(text)


def hex_to_int(value: str) -> int:
    """Convert an EVM quantity such as ``"0x5d21dba00"`` to an int."""
    text = _require_str(value)
    if not text.lower().startswith("0x"):
        raise ValueError(f"not a hex quantity: {value!r}")
    return int(text, 16)


def string_field(name: str):
    """Build a parser returning ``result[name]`` as a string."""

    def parse(result: Any) -> str:
        return _require_str(_require_dict(result)[name])

    return parse


def parse_string(result: Any) -> str:
    return _require_str(result)


def parse_network_id(result: Any) -> int:
    return parse_decimal(_require_dict(result)["networkID"])


def parse_tx_fee(result: Any) -> TxFee:
    data = _require_dict(result)
    return TxFee(
        tx_fee=parse_decimal(data["txFee"]),
        creation_tx_fee=parse_decimal(data["creationTxFee"]),
    )


def parse_is_bootstrapped(result: Any) -> bool:
    value = _require_dict(result)["isBootstrapped"]
    if not isinstance(value, bool):
        raise TypeError("isBootstrapped is not a boolean")
    return value


def parse_peer(entry: Any) -> Peer:
    data = _require_dict(entry)
    return Peer(
        ip=_require_str(data["ip"]),
        public_ip=_require_str(data.get("publicIP", "")),
        node_id=_require_str(data["nodeID"]),
        version=_require_str(data.get("version", "")),
        last_sent=_require_str(data.get("lastSent", "")),
        last_received=_require_str(data.get("lastReceived", "")),
    )


def parse_peers(result: Any) -> list[Peer]:
    data = _require_dict(result)
    peers = data.get("peers") or []
    if not isinstance(peers, list):
        raise TypeError("peers is not a list")
    return [parse_peer(p) for p in peers]


def parse_uptime(result: Any) -> Uptime:
    data = _require_dict(result)
    return Uptime(
        rewarding_stake_percentage=_require_str(data["rewardingStakePercentage"]),
        weighted_average_percentage=_require_str(data["weightedAveragePercentage"]),
    )


def parse_health_check(entry: Any) -> HealthCheck:
    data = _require_dict(entry)
    return HealthCheck(
        message=data.get("message"),
        timestamp=_require_str(data["timestamp"]),
        duration=int(data["duration"]),
        contiguous_failures=int(data.get("contiguousFailures", 0)),
        time_of_first_failure=data.get("timeOfFirstFailure"),
    )


def parse_health(result: Any) -> HealthReport:
    data = _require_dict(result)
    healthy = data["healthy"]
    if not isinstance(healthy, bool):
        raise TypeError("healthy is not a boolean")
    checks = _require_dict(data.get("checks") or {})
    return HealthReport(
        healthy=healthy,
        checks={name: parse_health_check(check) for name, check in checks.items()},
    )
