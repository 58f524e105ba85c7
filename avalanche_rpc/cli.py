"""Command-line interface for querying an Avalanche node."""
from __future__ import annotations

import argparse
import asyncio
import dataclasses
import json
import logging
import sys
from typing import Any

from .client import AvalancheClient
from .config import load_config
from .errors import AvalancheError
from .logging_setup import configure_logging
from .network import build_default_registry

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="avalanche-rpc",
        description="Query an Avalanche node over JSON-RPC",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: config.yaml in project root)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("node-id", help="Node id of the connected node")
    sub.add_parser("node-version", help="Node software version")
    sub.add_parser("network-id", help="Network id reported by the node")
    sub.add_parser("network-name", help="Network name reported by the node")
    sub.add_parser("tx-fee", help="Transaction fees in nAVAX")
    sub.add_parser("uptime", help="Node uptime percentages")
    sub.add_parser("base-fee", help="C-chain base fee")
    sub.add_parser("priority-fee", help="C-chain max priority fee per gas")

    blockchain_parser = sub.add_parser("blockchain-id", help="Blockchain id for an alias")
    blockchain_parser.add_argument("alias", help="Chain alias, e.g. X or C")

    bootstrapped_parser = sub.add_parser("bootstrapped", help="Is a chain bootstrapped")
    bootstrapped_parser.add_argument("chain", help="Chain alias or id")

    peers_parser = sub.add_parser("peers", help="Connected peers")
    peers_parser.add_argument("node_ids", nargs="*", help="Only these node ids")

    health_parser = sub.add_parser("health", help="Node health checks")
    health_parser.add_argument(
        "--tag", dest="tags", action="append", default=None, help="Restrict to a tag"
    )

    network_parser = sub.add_parser(
        "network", help="Show registered parameters for a network id (offline)"
    )
    network_parser.add_argument("network_id", type=int)

    return parser


def _to_jsonable(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {k: _to_jsonable(v) for k, v in dataclasses.asdict(value).items()}
    if isinstance(value, dict):
        return {str(k): _to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]
    return value


def _describe_network(network_id: int) -> dict[str, Any]:
    registry = build_default_registry()
    entry = registry.lookup(network_id)
    return {
        "requested_network_id": network_id,
        "network_id": entry.network_id,
        "hrp": registry.resolve_prefix(network_id),
        "names": list(registry.network_names(entry.network_id)),
        "x": _to_jsonable(entry.x),
        "p": _to_jsonable(entry.p),
        "c": _to_jsonable(entry.c),
    }


async def _execute(client: AvalancheClient, args: argparse.Namespace) -> Any:
    """Run the selected remote command and return its result."""
    command = args.command
    if command == "node-id":
        return await client.info.get_node_id()
    if command == "node-version":
        return await client.info.get_node_version()
    if command == "network-id":
        return await client.info.get_network_id()
    if command == "network-name":
        return await client.info.get_network_name()
    if command == "tx-fee":
        return await client.info.get_tx_fee()
    if command == "uptime":
        return await client.info.uptime()
    if command == "blockchain-id":
        return await client.info.get_blockchain_id(args.alias)
    if command == "bootstrapped":
        return await client.info.is_bootstrapped(args.chain)
    if command == "peers":
        return await client.info.peers(args.node_ids or None)
    if command == "health":
        return await client.health.health(args.tags)
    if command == "base-fee":
        return await client.evm.get_base_fee()
    if command == "priority-fee":
        return await client.evm.get_max_priority_fee_per_gas()
    raise ValueError(f"Unknown command: {command}")


async def _run(args: argparse.Namespace) -> Any:
    configure_logging(args.log_level)
    if args.command == "network":
        return _describe_network(args.network_id)
    config = load_config(args.config)
    client = AvalancheClient.from_config(config)
    return await _execute(client, args)


def main() -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        result = asyncio.run(_run(args))
    except (AvalancheError, FileNotFoundError) as e:
        logger.error("%s", e)
        sys.exit(1)

    print(json.dumps(_to_jsonable(result), indent=2))
