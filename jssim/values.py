"""Runtime values — undefined, plain objects, and their display forms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .ast_nodes import FunctionDeclaration
from . import constants


class _Undefined:
    """Singleton standing in for JavaScript ``undefined`` (distinct from ``None``)."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return constants.UNDEFINED_TEXT

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Undefined:
        return self

    def __deepcopy__(self, memo: dict) -> _Undefined:
        return self

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


@dataclass
class JSObject:
    """An object literal's value: heap address plus ordered, mutable properties."""

    addr: str
    properties: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str) -> Any:
        return self.properties.get(key, UNDEFINED)

    def set(self, key: str, value: Any) -> None:
        self.properties[key] = value

    def to_dict(self) -> dict:
        return {
            "addr": self.addr,
            "properties": {k: serialize_value(v) for k, v in self.properties.items()},
        }


def is_undefined(value: Any) -> bool:
    return value is UNDEFINED


def serialize_value(v: Any) -> Any:
    """Convert a runtime value into a JSON-compatible structure."""
    if v is UNDEFINED:
        return {"__undefined__": True}
    if isinstance(v, JSObject):
        return v.to_dict()
    if isinstance(v, FunctionDeclaration):
        return {"__function__": v.name}
    if isinstance(v, Mapping):
        return {k: serialize_value(val) for k, val in v.items()}
    if isinstance(v, (list, tuple)):
        return [serialize_value(val) for val in v]
    return v


def format_value(v: Any) -> str:
    """Render a value the way string interpolation would show it."""
    if v is UNDEFINED:
        return constants.UNDEFINED_TEXT
    if v is None:
        return "null"
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    if isinstance(v, JSObject):
        return constants.OBJECT_TEXT
    if isinstance(v, FunctionDeclaration):
        return constants.FUNCTION_TEXT_TEMPLATE.format(name=v.name)
    return str(v)
