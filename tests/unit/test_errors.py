"""Unit tests for the error taxonomy."""
from __future__ import annotations

import pytest

from avalanche_rpc.errors import (
    ApiNotConfigured,
    AvalancheError,
    BadProtocol,
    ProtocolViolation,
    RemoteCallError,
    TransportFailure,
)


class TestMessages:
    def test_remote_call_error(self) -> None:
        err = RemoteCallError("info.getNodeID", "-32601", "method not found")
        assert str(err) == "info.getNodeID failed with code -32601: method not found"

    def test_protocol_violation_truncates_body(self) -> None:
        err = ProtocolViolation("m", "x" * 500)
        assert "..." in str(err)
        assert len(err.body) == 500

    def test_transport_failure(self) -> None:
        err = TransportFailure("http://h:1/x", "refused")
        assert str(err) == "Request to http://h:1/x failed: refused"


class TestHierarchy:
    @pytest.mark.parametrize(
        "err",
        [
            BadProtocol("ftp"),
            TransportFailure("u", "r"),
            RemoteCallError("c", "1", "m"),
            ProtocolViolation("c"),
            ApiNotConfigured("info"),
        ],
    )
    def test_all_share_base(self, err: Exception) -> None:
        assert isinstance(err, AvalancheError)

    def test_bad_protocol_is_value_error(self) -> None:
        assert isinstance(BadProtocol("ftp"), ValueError)

    def test_api_not_configured_is_lookup_error(self) -> None:
        err = ApiNotConfigured("evm")
        assert isinstance(err, LookupError)
        assert err.name == "evm"
