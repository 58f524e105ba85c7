"""Configuration loader: reads config.yaml and interpolates env vars."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .network.constants import DEFAULT_NETWORK_ID

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChainOverrides:
    x_chain_id: str | None = None
    c_chain_id: str | None = None


@dataclass(frozen=True)
class ClientConfig:
    host: str = "127.0.0.1"
    port: int = 9650
    protocol: str = "http"
    network_id: int = DEFAULT_NETWORK_ID
    hrp: str | None = None
    chains: ChainOverrides = field(default_factory=ChainOverrides)
    auth_token: str | None = None
    headers: dict[str, str] = field(default_factory=dict)
    timeout: float | None = None
    skip_init: bool = False


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text or None


def _build_chains(raw: dict[str, Any]) -> ChainOverrides:
    return ChainOverrides(
        x_chain_id=_optional_str(raw.get("x_chain_id")),
        c_chain_id=_optional_str(raw.get("c_chain_id")),
    )


def _build_client(raw: dict[str, Any]) -> ClientConfig:
    timeout = raw.get("timeout")
    return ClientConfig(
        host=str(raw.get("host", ClientConfig.host)),
        port=int(raw.get("port", ClientConfig.port)),
        protocol=str(raw.get("protocol", ClientConfig.protocol)),
        network_id=int(raw.get("network_id", DEFAULT_NETWORK_ID)),
        hrp=_optional_str(raw.get("hrp")),
        chains=_build_chains(raw.get("chains") or {}),
        auth_token=_optional_str(raw.get("auth_token")),
        headers={str(k): str(v) for k, v in (raw.get("headers") or {}).items()},
        timeout=float(timeout) if timeout not in (None, "") else None,
        skip_init=bool(raw.get("skip_init", False)),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> ClientConfig:
    """Load and validate client configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            project root (one level up from this package).
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = _build_client(raw.get("node", {}) or {})

    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: ClientConfig) -> None:
    """Raise on invalid configuration."""
    if not cfg.host:
        raise ValueError("Node host must not be empty")
    if cfg.protocol not in ("http", "https"):
        raise ValueError(f"Unsupported protocol '{cfg.protocol}'")
    if not 1 <= cfg.port <= 65535:
        raise ValueError(f"Port {cfg.port} is outside 1..65535")
    if not 0 <= cfg.network_id <= 65535:
        raise ValueError(f"Network id {cfg.network_id} is outside 0..65535")
    if cfg.timeout is not None and cfg.timeout <= 0:
        raise ValueError("Timeout must be positive")
