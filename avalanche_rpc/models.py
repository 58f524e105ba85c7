"""Response models for the endpoint clients (frozen)."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class TxFee:
    """Transaction fees in nAVAX."""

    tx_fee: int
    creation_tx_fee: int


@dataclass(frozen=True)
class Peer:
    ip: str
    public_ip: str
    node_id: str
    version: str
    last_sent: str
    last_received: str


@dataclass(frozen=True)
class Uptime:
    """Percentages are kept as the decimal strings the node returns."""

    rewarding_stake_percentage: str
    weighted_average_percentage: str


@dataclass(frozen=True)
class HealthCheck:
    message: Any
    timestamp: str
    duration: int
    contiguous_failures: int
    time_of_first_failure: str | None = None


@dataclass(frozen=True)
class HealthReport:
    healthy: bool
    checks: dict[str, HealthCheck] = field(default_factory=dict)

    def failing(self) -> tuple[str, ...]:
        """Names of checks that are currently failing."""
        return tuple(
            name for name, check in sorted(self.checks.items()) if check.contiguous_failures > 0
        )
