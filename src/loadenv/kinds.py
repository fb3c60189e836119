"""Field kinds understood by the binder and the string conversions behind them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Annotated, Any, Literal, Optional, get_args, get_origin

Category = Literal["string", "int", "uint", "bool"]

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_DECIMAL = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class Kind:
    name: str
    category: Category
    bits: int = 0

    @property
    def min_value(self) -> int:
        if self.category == "uint":
            return 0
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        if self.category == "uint":
            return (1 << self.bits) - 1
        return (1 << (self.bits - 1)) - 1


STRING = Kind("string", "string")
BOOL = Kind("bool", "bool")
INT = Kind("int", "int", 64)

Int8 = Annotated[int, Kind("int8", "int", 8)]
Int16 = Annotated[int, Kind("int16", "int", 16)]
Int32 = Annotated[int, Kind("int32", "int", 32)]
Int64 = Annotated[int, Kind("int64", "int", 64)]
UInt = Annotated[int, Kind("uint", "uint", 64)]
UInt8 = Annotated[int, Kind("uint8", "uint", 8)]
UInt16 = Annotated[int, Kind("uint16", "uint", 16)]
UInt32 = Annotated[int, Kind("uint32", "uint", 32)]
UInt64 = Annotated[int, Kind("uint64", "uint", 64)]

_PLAIN_KINDS: dict[Any, Kind] = {str: STRING, bool: BOOL, int: INT}


def resolve_kind(annotation: Any) -> Optional[Kind]:
    """Return the kind declared by `annotation`, or None when it is not supported."""
    if get_origin(annotation) is Annotated:
        base, *metadata = get_args(annotation)
        for item in metadata:
            if isinstance(item, Kind):
                return item if base is int and item.category in ("int", "uint") else None
        return resolve_kind(base)
    return _PLAIN_KINDS.get(annotation)


def kind_name(annotation: Any) -> str:
    kind = resolve_kind(annotation)
    if kind is not None:
        return kind.name
    if isinstance(annotation, type):
        return annotation.__name__
    return str(annotation).replace("typing.", "")


def parse_bool(value: str) -> bool:
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"invalid bool value: {value!r}")


def parse_int(value: str, kind: Kind) -> int:
    """
    Parse a base-10 integer as int64, then narrow it to the width of `kind`.

    Out-of-range values raise ValueError at either step; nothing is truncated.
    """
    if not _DECIMAL.fullmatch(value):
        raise ValueError(f"invalid integer value: {value!r}")
    number = int(value)
    if number < INT.min_value or number > INT.max_value:
        raise ValueError(f"value {number} out of range for int64")
    if number < kind.min_value or number > kind.max_value:
        raise ValueError(f"value {number} out of range for {kind.name}")
    return number
