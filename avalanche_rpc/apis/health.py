"""Health API: node liveness checks."""
from __future__ import annotations

from ..interfaces.http import HttpTransport
from ..jsonrpc.params import MappingParam, TextListParam
from ..models import HealthReport
from . import parser
from .base import JsonRpcEndpoint


class HealthApi(JsonRpcEndpoint):
    """Wrapper for ``/ext/health``."""

    def __init__(self, transport: HttpTransport) -> None:
        super().__init__(transport, "/ext/health")

    async def health(self, tags: list[str] | None = None) -> HealthReport:
        """Run the node's health checks, optionally restricted to ``tags``."""
        params = MappingParam({"tags": TextListParam(tuple(tags))}) if tags else None
        return await self.call_method(
            "health.health", params, parse_result=parser.parse_health
        )
