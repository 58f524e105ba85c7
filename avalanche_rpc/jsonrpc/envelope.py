"""JSON-RPC request building and response decoding, no I/O."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

from ..errors import ProtocolViolation, RemoteCallError
from .params import MappingParam

logger = logging.getLogger(__name__)

T = TypeVar("T")

CONTENT_TYPE = "application/json;charset=UTF-8"

# Servers speaking this version reject a "jsonrpc" member.
LEGACY_VERSION = "1.0"

# Raised by result parsers when the payload does not have the expected shape.
_STRUCTURAL_ERRORS = (KeyError, TypeError, ValueError, AttributeError, IndexError)


@dataclass(frozen=True)
class EncodedRequest:
    """Serialized request body plus the headers it must be sent with."""

    body: bytes
    headers: dict[str, str] = field(default_factory=dict)


def build_envelope(
    method: str,
    params: MappingParam | None = None,
    request_id: int = 1,
    version: str = "2.0",
) -> dict[str, Any]:
    """Assemble the request envelope as a plain dict."""
    envelope: dict[str, Any] = {"id": str(request_id), "method": method}
    if params is not None:
        envelope["params"] = params.to_json()
    if version != LEGACY_VERSION:
        envelope["jsonrpc"] = version
    return envelope


def build_request(
    method: str,
    params: MappingParam | None = None,
    request_id: int = 1,
    version: str = "2.0",
    headers: dict[str, str] | None = None,
) -> EncodedRequest:
    """Serialize a request envelope.

    The returned headers always carry the JSON content type; a caller-supplied
    ``Content-Type`` in any letter case is replaced.
    """
    body = json.dumps(build_envelope(method, params, request_id, version)).encode("utf-8")
    merged = {
        key: value
        for key, value in (headers or {}).items()
        if key.lower() != "content-type"
    }
    merged["Content-Type"] = CONTENT_TYPE
    return EncodedRequest(body=body, headers=merged)


def _identity(result: Any) -> Any:
    return result


def _decode_success(payload: Any, parse_result: Callable[[Any], T]) -> T:
    if not isinstance(payload, dict) or "result" not in payload:
        raise KeyError("result")
    if payload.get("error") is not None:
        raise ValueError("envelope carries an error")
    return parse_result(payload["result"])


def _decode_error(payload: Any) -> tuple[str, str]:
    if not isinstance(payload, dict):
        raise TypeError("envelope is not an object")
    error = payload["error"]
    if not isinstance(error, dict):
        raise TypeError("error member is not an object")
    code = error["code"]
    message = error["message"]
    if isinstance(code, bool) or not isinstance(code, int) or not isinstance(message, str):
        raise TypeError("error member has wrong types")
    return str(code), message


def decode_response(
    raw: bytes | str,
    call_name: str,
    parse_result: Callable[[Any], T] | None = None,
) -> T:
    """Decode a response body into a typed result.

    The success shape is tried first. ``parse_result`` turns the raw
    ``result`` into ``T`` and signals a shape mismatch by raising
    ``KeyError``/``TypeError``/``ValueError``. Only then is the body read as an
    error envelope.

    Raises:
        RemoteCallError: the node returned a JSON-RPC error.
        ProtocolViolation: the body is neither envelope shape.
    """
    text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
    try:
        payload = json.loads(text)
    except (ValueError, RecursionError):
        logger.warning("%s: response body is not JSON", call_name)
        raise ProtocolViolation(call_name, text) from None

    parser = parse_result or _identity
    try:
        return _decode_success(payload, parser)
    except _STRUCTURAL_ERRORS as success_error:
        logger.debug("%s: not a success envelope (%s)", call_name, success_error)

    try:
        code, message = _decode_error(payload)
    except (KeyError, TypeError):
        logger.warning("%s: response matches neither envelope shape", call_name)
        raise ProtocolViolation(call_name, text) from None

    raise RemoteCallError(call_name, code, message)
