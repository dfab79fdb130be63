"""Terms, goal tuples, rules and the unification helpers shared by the engines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Iterable, Iterator, Mapping

Substitution = dict
Atom = tuple  # a (relation name, tuple pattern) pair in a rule


@dataclass(frozen=True)
class Term:
    """Either a constant value or a named variable.

    A value term never equals a variable term, even if the payloads match.
    """

    payload: Any
    is_variable: bool = False

    @classmethod
    def value(cls, value: Hashable) -> Term:
        """Make a constant term."""
        return cls(value, False)

    @classmethod
    def variable(cls, name: str) -> Term:
        """Make a variable term named ``name``."""
        if not isinstance(name, str):
            raise TypeError(f"variable name must be a str, not {type(name).__name__}")
        return cls(name, True)

    def __str__(self) -> str:
        if self.is_variable:
            return f"?{self.payload}"
        return str(self.payload)


@dataclass(frozen=True, init=False)
class Tuple:
    """An ordered sequence of terms: the argument list of a fact or goal."""

    terms: tuple[Term, ...]

    def __init__(self, terms: Iterable[Term] = ()) -> None:
        items = tuple(terms)
        for term in items:
            if not isinstance(term, Term):
                raise TypeError(f"expected Term, got {type(term).__name__}")
        object.__setattr__(self, "terms", items)

    @classmethod
    def from_values(cls, values: Iterable[Hashable]) -> Tuple:
        """Build a tuple of constant terms."""
        return cls(Term.value(v) for v in values)

    @classmethod
    def from_variables(cls, names: Iterable[str]) -> Tuple:
        """Build a tuple of variable terms."""
        return cls(Term.variable(n) for n in names)

    def __iter__(self) -> Iterator[Term]:
        return iter(self.terms)

    def __len__(self) -> int:
        return len(self.terms)

    def __getitem__(self, index: int) -> Term:
        return self.terms[index]

    def __str__(self) -> str:
        return "(" + ", ".join(str(t) for t in self.terms) + ")"


def _format_atoms(atoms: Iterable[tuple[str, Tuple]]) -> str:
    return ", ".join(f"{relation}({pattern})" for relation, pattern in atoms)


@dataclass(frozen=True)
class Rule:
    """A Datalog rule ``heads :- body``; every head is derived from each body match."""

    heads: tuple[tuple[str, Tuple], ...] = field(default=())
    body: tuple[tuple[str, Tuple], ...] = field(default=())

    @classmethod
    def builder(cls) -> RuleBuilder:
        """Start building a rule."""
        return RuleBuilder()

    def __str__(self) -> str:
        return f"{_format_atoms(self.heads)} :- {_format_atoms(self.body)}"


class RuleBuilder:
    """Chainable builder for :class:`Rule`."""

    def __init__(self) -> None:
        self._heads: list[tuple[str, Tuple]] = []
        self._body: list[tuple[str, Tuple]] = []

    def head(self, relation: str, tuple: Tuple) -> RuleBuilder:
        """Add a head atom and return the builder."""
        self._heads.append((str(relation), tuple))
        return self

    def body(self, relation: str, tuple: Tuple) -> RuleBuilder:
        """Add a body goal and return the builder."""
        self._body.append((str(relation), tuple))
        return self

    def build(self) -> Rule:
        """Produce the rule built so far."""
        return Rule(tuple(self._heads), tuple(self._body))


def unify(
    pattern: Tuple, fact: Iterable[Hashable], substitution: Mapping[str, Hashable]
) -> dict[str, Hashable] | None:
    """Match ``fact`` against ``pattern`` under ``substitution``.

    Returns an extended copy of the substitution, or None when the arity
    differs, a constant does not match, or a bound variable disagrees.
    The given substitution is never modified.
    """
    values = tuple(fact)
    if len(pattern) != len(values):
        return None
    result = dict(substitution)
    for term, value in zip(pattern, values):
        if term.is_variable:
            if term.payload in result:
                if result[term.payload] != value:
                    return None
            else:
                result[term.payload] = value
        elif term.payload != value:
            return None
    return result


def instantiate(
    pattern: Tuple, substitution: Mapping[str, Hashable]
) -> tuple[Hashable, ...] | None:
    """Replace the variables of ``pattern`` by their bindings.

    Returns None if any variable is unbound.
    """
    result = []
    for term in pattern:
        if term.is_variable:
            if term.payload not in substitution:
                return None
            result.append(substitution[term.payload])
        else:
            result.append(term.payload)
    return tuple(result)