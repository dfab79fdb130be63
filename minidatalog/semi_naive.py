"""A semi-naive bottom-up Datalog engine.

Relations keep their facts split into stable and delta sets. A rule body is
only matched in combinations that bind at least one goal to a delta fact,
so combinations of stable facts that were already examined are skipped.
"""

from __future__ import annotations

from typing import Hashable, Iterable, Sequence

from minidatalog.delta_relation import DeltaRelation
from minidatalog.terms import Rule, Tuple, instantiate, unify

Substitution = dict


class Database:
    """Relations plus rules, evaluated semi-naively to a fixpoint."""

    def __init__(self) -> None:
        self._relations: dict[str, DeltaRelation] = {}
        self._rules: list[Rule] = []

    def add_relation(self, relation: DeltaRelation) -> None:
        """Register a relation, replacing any relation of the same name."""
        self._relations[relation.name] = relation

    def get_relation(self, name: str) -> DeltaRelation | None:
        """Return the relation called ``name``, or None if there is none."""
        return self._relations.get(name)

    def add_rule(self, rule: Rule) -> None:
        """Add a rule to be applied by :meth:`evaluate`."""
        self._rules.append(rule)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    def ground_relation(self, relation_name: str) -> None:
        """Move the delta facts of one relation into its stable set, if it exists."""
        relation = self._relations.get(relation_name)
        if relation is not None:
            relation.ground()

    def _relation_for(self, relation_name: str) -> DeltaRelation:
        relation = self._relations.get(relation_name)
        if relation is None:
            relation = DeltaRelation(relation_name)
            self._relations[relation_name] = relation
        return relation

    def insert_fact(self, relation_name: str, fact: Iterable[Hashable]) -> None:
        """Insert a fact, creating the relation if needed."""
        self._relation_for(relation_name).insert(fact)

    def insert_facts(
        self, relation_name: str, facts: Iterable[Iterable[Hashable]]
    ) -> None:
        """Insert several facts, creating the relation if needed."""
        self._relation_for(relation_name).insert_all(facts)

    def ground_all(self) -> None:
        """Ground every relation."""
        for relation in self._relations.values():
            relation.ground()

    def size_of_relation(self, relation_name: str) -> int:
        """Return the number of facts in a relation, or 0 if it does not exist."""
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
        new_facts: dict[str, list[tuple[Hashable, ...]]] = {}
        for substitution in self._find_substitutions(rule.body):
            for relation_name, pattern in rule.heads:
                fact = instantiate(pattern, substitution)
                if fact is not None:
                    new_facts.setdefault(relation_name, []).append(fact)

        changed = False
        for relation_name, facts in new_facts.items():
            self.ground_relation(relation_name)
            old_size = self.size_of_relation(relation_name)
            self.insert_facts(relation_name, facts)
            if self.size_of_relation(relation_name) > old_size:
                changed = True
        return changed

    def _find_substitutions(
        self, goals: Sequence[tuple[str, Tuple]]
    ) -> list[Substitution]:
        goals = list(goals)
        if not goals:
            return [{}]

        # For goal d taken from delta: goals before d use stable facts only,
        # goals after d use all facts. The partial results reached just before
        # goal d are reused as the starting point for the next round.
        all_results: list[Substitution] = []
        starting_point: list[Substitution] | None = [{}]

        for delta_idx in range(len(goals)):
            results = starting_point if starting_point is not None else [{}]
            starting_point = None

            start = max(delta_idx - 1, 0)
            for goal_idx, (relation_name, pattern) in enumerate(goals[start:], start):
                relation = self._relations.get(relation_name)
                if relation is None:
                    results = []
                    continue
                if goal_idx == delta_idx:
                    if results:
                        starting_point = list(results)
                    facts = list(relation.delta_iter())
                elif goal_idx < delta_idx:
                    facts = list(relation.stable_iter())
                else:
                    facts = list(relation)
                results = [
                    extended
                    for substitution in results
                    for fact in facts
                    if (extended := unify(pattern, fact, substitution)) is not None
                ]

            all_results.extend(results)

        return all_results