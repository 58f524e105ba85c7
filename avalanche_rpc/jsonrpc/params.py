"""Typed JSON-RPC parameter values.

``ParamValue`` is a closed set of three variants. Each serializes to the plain
JSON shape it wraps; the variant itself never shows up on the wire.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class TextParam:
    value: str

    def to_json(self) -> str:
        return self.value


@dataclass(frozen=True)
class TextListParam:
    values: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    def to_json(self) -> list[str]:
        return list(self.values)


@dataclass(frozen=True)
class MappingParam:
    items: dict[str, "ParamValue"] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        return {key: value.to_json() for key, value in self.items.items()}


ParamValue = Union[TextParam, MappingParam, TextListParam]


def to_param(value: Any) -> ParamValue:
    """Lift a plain str / dict / list of str into a ParamValue."""
    if isinstance(value, (TextParam, MappingParam, TextListParam)):
        return value
    if isinstance(value, str):
        return TextParam(value)
    if isinstance(value, dict):
        return MappingParam({str(k): to_param(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        if not all(isinstance(item, str) for item in value):
            raise TypeError("List parameters may only contain strings")
        return TextListParam(tuple(value))
    raise TypeError(f"Unsupported parameter type: {type(value).__name__}")


def param_from_json(value: Any) -> ParamValue:
    """Rebuild a ParamValue from decoded JSON."""
    return to_param(value)
