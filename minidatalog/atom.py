"""Atoms: opaque identifiers compared by identity number."""

from __future__ import annotations

from dataclasses import dataclass

_U64_MAX = 2**64 - 1


@dataclass(frozen=True, order=True)
class Atom:
    """A unique value, usually standing for an interned string.

    Atoms are hashable and comparable; two atoms are equal exactly when
    their ids are equal.
    """

    id: int

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise TypeError(f"atom id must be an int, not {type(self.id).__name__}")
        if not 0 <= self.id <= _U64_MAX:
            raise ValueError(f"atom id out of range: {self.id}")

    def __str__(self) -> str:
        return f"Atom({self.id})"