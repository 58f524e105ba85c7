"""Unit tests for CLI argument parsing and command dispatch."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from avalanche_rpc import cli
from avalanche_rpc.cli import _execute, build_parser
from avalanche_rpc.models import TxFee


class TestBuildParser:
    def test_simple_command(self) -> None:
        parser = build_parser()
        args = parser.parse_args(["node-id"])
        assert args.command == "node-id"

    def test_blockchain_id_alias(self) -> None:
        args = build_parser().parse_args(["blockchain-id", "X"])
        assert args.command == "blockchain-id"
        assert args.alias == "X"

    def test_peers_without_ids(self) -> None:
        args = build_parser().parse_args(["peers"])
        assert args.node_ids == []

    def test_peers_with_ids(self) -> None:
        args = build_parser().parse_args(["peers", "NodeID-1", "NodeID-2"])
        assert args.node_ids == ["NodeID-1", "NodeID-2"]

    def test_health_tags(self) -> None:
        args = build_parser().parse_args(["health", "--tag", "a", "--tag", "b"])
        assert args.tags == ["a", "b"]
        assert build_parser().parse_args(["health"]).tags is None

    def test_network_command(self) -> None:
        args = build_parser().parse_args(["network", "5"])
        assert args.network_id == 5

    def test_config_flag(self) -> None:
        args = build_parser().parse_args(["--config", "/tmp/c.yaml", "uptime"])
        assert args.config == "/tmp/c.yaml"

    def test_log_level_flag(self) -> None:
        args = build_parser().parse_args(["--log-level", "DEBUG", "tx-fee"])
        assert args.log_level == "DEBUG"

    def test_no_command(self) -> None:
        args = build_parser().parse_args([])
        assert args.command is None


def _fake_client() -> MagicMock:
    client = MagicMock()
    client.info = AsyncMock()
    client.health = AsyncMock()
    client.evm = AsyncMock()
    return client


class TestExecute:
    @pytest.mark.asyncio
    async def test_dispatches_info_commands(self) -> None:
        client = _fake_client()
        client.info.get_tx_fee.return_value = TxFee(1, 2)
        args = argparse.Namespace(command="tx-fee")
        assert await _execute(client, args) == TxFee(1, 2)

    @pytest.mark.asyncio
    async def test_peers_empty_list_means_all(self) -> None:
        client = _fake_client()
        client.info.peers.return_value = []
        await _execute(client, argparse.Namespace(command="peers", node_ids=[]))
        client.info.peers.assert_awaited_once_with(None)

    @pytest.mark.asyncio
    async def test_dispatches_health_and_evm(self) -> None:
        client = _fake_client()
        await _execute(client, argparse.Namespace(command="health", tags=["x"]))
        client.health.health.assert_awaited_once_with(["x"])
        await _execute(client, argparse.Namespace(command="base-fee"))
        client.evm.get_base_fee.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unknown_command(self) -> None:
        with pytest.raises(ValueError, match="Unknown command"):
            await _execute(_fake_client(), argparse.Namespace(command="bogus"))


class TestMain:
    def test_network_command_runs_offline(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr(sys, "argv", ["avalanche-rpc", "network", "5"])
        cli.main()
        out = json.loads(capsys.readouterr().out)
        assert out["network_id"] == 5
        assert out["hrp"] == "fuji"
        assert out["names"] == ["Fuji", "Testnet"]
        assert out["c"]["chain_id"] == 43113

    def test_unknown_network_reports_fallback(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr(sys, "argv", ["avalanche-rpc", "network", "777"])
        cli.main()
        out = json.loads(capsys.readouterr().out)
        assert out["requested_network_id"] == 777
        assert out["network_id"] == 12345
        assert out["hrp"] == "avax"

    def test_no_command_exits(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "argv", ["avalanche-rpc"])
        with pytest.raises(SystemExit) as exc_info:
            cli.main()
        assert exc_info.value.code == 1

    def test_missing_config_exits(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        missing = tmp_path / "missing.yaml"
        monkeypatch.setattr(
            sys, "argv", ["avalanche-rpc", "--config", str(missing), "node-id"]
        )
        with pytest.raises(SystemExit) as exc_info:
            cli.main()
        assert exc_info.value.code == 1
