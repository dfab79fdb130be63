"""A relation split into stable facts and newly derived (delta) facts."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import chain
from typing import Hashable, Iterable, Iterator

Fact = tuple


@dataclass
class DeltaRelation:
    """A named set of facts, partitioned into ``stable`` and ``delta``.

    New facts go to ``delta`` unless already stable; :meth:`ground` moves
    every delta fact into the stable set.
    """

    name: str
    stable: set[Fact] = field(default_factory=set)
    delta: set[Fact] = field(default_factory=set)

    def insert(self, fact: Iterable[Hashable]) -> None:
        """Add a fact to the delta set unless it is already stable."""
        item = tuple(fact)
        if item not in self.stable:
            self.delta.add(item)

    def insert_all(self, facts: Iterable[Iterable[Hashable]]) -> None:
        """Insert every fact in ``facts``."""
        for fact in facts:
            self.insert(fact)

    def contains(self, fact: Iterable[Hashable]) -> bool:
        """Return True if the fact is stable or delta."""
        item = tuple(fact)
        return item in self.stable or item in self.delta

    def __contains__(self, fact: object) -> bool:
        if not isinstance(fact, (tuple, list)):
            return False
        return self.contains(fact)

    def __iter__(self) -> Iterator[Fact]:
        """Iterate over stable facts, then delta facts."""
        return chain(self.stable_iter(), self.delta_iter())

    def stable_iter(self) -> Iterator[Fact]:
        return iter(self.stable)

    def delta_iter(self) -> Iterator[Fact]:
        return iter(self.delta)

    def __len__(self) -> int:
        return len(self.stable) + len(self.delta)

    def ground(self) -> None:
        """Move all delta facts into the stable set."""
        self.stable.update(self.delta)
        self.delta.clear()