"""Dynamically typed values usable as Datalog constants."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from minidatalog.atom import Atom

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class ValueKind(enum.IntEnum):
    """The kind of a value; the numeric order is the cross-kind sort order."""

    INTEGER = 0
    ATOM = 1
    STRING = 2
    FLOAT = 3
    BOOLEAN = 4


Payload = Union[int, Atom, str, float, bool]


def _format_float(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    if x == 0:
        return "-0" if math.copysign(1.0, x) < 0 else "0"
    if x.is_integer():
        return str(int(x))
    text = repr(x)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


def _sign(a, b) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


@dataclass(frozen=True, eq=False)
class Value:
    """A tagged value: integer, atom, string, float or boolean.

    Values of different kinds never compare equal. Ordering sorts by kind
    first (integer < atom < string < float < boolean), then by payload;
    floats that cannot be ordered (NaN) compare as neither less nor greater.
    """

    kind: ValueKind
    payload: Payload

    @classmethod
    def integer(cls, value: int) -> Value:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")
        if not _I64_MIN <= value <= _I64_MAX:
            raise OverflowError(f"integer out of 64-bit range: {value}")
        return cls(ValueKind.INTEGER, value)

    @classmethod
    def atom(cls, atom: Atom) -> Value:
        if not isinstance(atom, Atom):
            raise TypeError(f"expected Atom, got {type(atom).__name__}")
        return cls(ValueKind.ATOM, atom)

    @classmethod
    def string(cls, value: str) -> Value:
        if not isinstance(value, str):
            raise TypeError(f"expected str, got {type(value).__name__}")
        return cls(ValueKind.STRING, value)

    @classmethod
    def float(cls, value: float) -> Value:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"expected float, got {type(value).__name__}")
        return cls(ValueKind.FLOAT, float(value))

    @classmethod
    def boolean(cls, value: bool) -> Value:
        if not isinstance(value, bool):
            raise TypeError(f"expected bool, got {type(value).__name__}")
        return cls(ValueKind.BOOLEAN, value)

    def __str__(self) -> str:
        if self.kind is ValueKind.STRING:
            return f'"{self.payload}"'
        if self.kind is ValueKind.FLOAT:
            return _format_float(self.payload)  # type: ignore[arg-type]
        if self.kind is ValueKind.BOOLEAN:
            return "true" if self.payload else "false"
        return str(self.payload)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.kind is other.kind and self.payload == other.payload

    def __hash__(self) -> int:
        return hash((self.kind, self.payload))

    def _compare(self, other: Value) -> int:
        if self.kind is not other.kind:
            return _sign(self.kind, other.kind)
        return _sign(self.payload, other.payload)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._compare(other) >= 0