"""A naive bottom-up Datalog engine: every rule is re-run over all facts until fixpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Iterable, Iterator

from minidatalog.terms import Rule, Tuple, instantiate, unify

Fact = tuple


@dataclass
class Relation:
    """A named set of ground facts; each fact is a tuple of values."""

    name: str
    tuples: set[Fact] = field(default_factory=set)

    def insert(self, fact: Iterable[Hashable]) -> None:
        """Add a fact; duplicates are ignored."""
        self.tuples.add(tuple(fact))

    def contains(self, fact: Iterable[Hashable]) -> bool:
        """Return True if the fact is present."""
        return tuple(fact) in self.tuples

    def __contains__(self, fact: object) -> bool:
        if not isinstance(fact, (tuple, list)):
            return False
        return self.contains(fact)

    def __iter__(self) -> Iterator[Fact]:
        return iter(self.tuples)

    def __len__(self) -> int:
        return len(self.tuples)


class Database:
    """Relations plus rules, evaluated naively to a fixpoint."""

    def __init__(self) -> None:
        self._relations: dict[str, Relation] = {}
        self._rules: list[Rule] = []

    def add_relation(self, relation: Relation) -> None:
        """Register a relation, replacing any relation of the same name."""
        self._relations[relation.name] = relation

    def get_relation(self, name: str) -> Relation | None:
        """Return the relation called ``name``, or None if there is none."""
        return self._relations.get(name)

    def add_rule(self, rule: Rule) -> None:
        """Add a rule to be applied by :meth:`evaluate`."""
        self._rules.append(rule)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    def insert_fact(self, relation_name: str, fact: Iterable[Hashable]) -> None:
        """Insert a fact, creating the relation if needed."""
        relation = self._relations.get(relation_name)
        if relation is None:
            relation = Relation(relation_name)
            self._relations[relation_name] = relation
        relation.insert(fact)

    def _size(self, relation_name: str) -> int:
        relation = self._relations.get(relation_name)
        return len(relation) if relation is not None else 0

    def evaluate(self) -> None:
        """Apply all rules repeatedly until no new fact is derived."""
        changed = True
        while changed:
            changed = False
            for rule in list(self._rules):
                if self._apply_rule(rule):
                    changed = True

    def _apply_rule(self, rule: Rule) -> bool:
        new_facts = [
            (relation_name, fact)
            for substitution in self._find_substitutions(rule.body)
            for relation_name, pattern in rule.heads
            if (fact := instantiate(pattern, substitution)) is not None
        ]
        changed = False
        for relation_name, fact in new_facts:
            old_size = self._size(relation_name)
            self.insert_fact(relation_name, fact)
            if self._size(relation_name) > old_size:
                changed = True
        return changed

    def _find_substitutions(
        self, goals: Iterable[tuple[str, Tuple]]
    ) -> list[dict[str, Hashable]]:
        results: list[dict[str, Hashable]] = [{}]
        for relation_name, pattern in goals:
            relation = self._relations.get(relation_name)
            if relation is None:
                results = []
                continue
            results = [
                extended
                for substitution in results
                for fact in relation
                if (extended := unify(pattern, fact, substitution)) is not None
            ]
        return results