"""JSON-RPC parameter types and envelope codec."""
from .envelope import (
    CONTENT_TYPE,
    EncodedRequest,
    build_envelope,
    build_request,
    decode_response,
)
from .params import (
    MappingParam,
    ParamValue,
    TextListParam,
    TextParam,
    param_from_json,
    to_param,
)

__all__ = [
    "CONTENT_TYPE",
    "EncodedRequest",
    "MappingParam",
    "ParamValue",
    "TextListParam",
    "TextParam",
    "build_envelope",
    "build_request",
    "decode_response",
    "param_from_json",
    "to_param",
]
