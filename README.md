# minidatalog

A small Datalog engine for Python. You supply facts and rules. The engine
evaluates them bottom-up until nothing new can be derived, which is called a
fixpoint.

There are two engines, and they work in the same way from the caller's side:

- `minidatalog.naive.Database` runs every rule against all known facts on
  each round. Its relations are `minidatalog.naive.Relation` objects.
- `minidatalog.semi_naive.Database` keeps each relation as a
  `minidatalog.delta_relation.DeltaRelation`, split into *stable* facts and
  *delta* (newly derived) facts. On each round a rule body is matched only in
  combinations that use at least one delta fact. This saves a lot of repeated
  work on recursive rules. This engine also provides `insert_facts`,
  `ground_relation`, `ground_all` and `size_of_relation`.

## Installation

```
pip install .
```

## Example: transitive closure

```python
from minidatalog.semi_naive import Database
from minidatalog.terms import Rule, Tuple

db = Database()
for edge in [(1, 2), (2, 3), (3, 4), (4, 5)]:
    db.insert_fact("edge", edge)

# path(X, Y) :- edge(X, Y)
db.add_rule(
    Rule.builder()
    .head("path", Tuple.from_variables(["X", "Y"]))
    .body("edge", Tuple.from_variables(["X", "Y"]))
    .build()
)

# path(X, Z) :- edge(X, Y), path(Y, Z)
db.add_rule(
    Rule.builder()
    .head("path", Tuple.from_variables(["X", "Z"]))
    .body("edge", Tuple.from_variables(["X", "Y"]))
    .body("path", Tuple.from_variables(["Y", "Z"]))
    .build()
)

db.evaluate()

path = db.get_relation("path")
print(path.contains([1, 5]))        # True
print((1, 5) in path)               # True
print(db.size_of_relation("path"))  # 10
```

Facts are stored as Python tuples. Any iterable of hashable values can be
passed in, and `get_relation` returns `None` for a relation that does not
exist.

A rule may have more than one head. Every head is derived from each match of
the body:

```python
# human(X), mortal(X) :- person(X)
rule = (
    Rule.builder()
    .head("human", Tuple.from_variables(["X"]))
    .head("mortal", Tuple.from_variables(["X"]))
    .body("person", Tuple.from_variables(["X"]))
    .build()
)
print(rule)  # human((?X)), mortal((?X)) :- person((?X))
```

Patterns can mix constants and variables. Use `Term.value` for a constant and
`Term.variable` for a variable, and pass the terms to `Tuple`:

```python
from minidatalog.terms import Term, Tuple

pattern = Tuple([Term.value("alice"), Term.variable("Y")])
```

`minidatalog.terms` also exposes the matching helpers the engines use:

- `unify(pattern, fact, substitution)` returns an extended copy of the
  substitution dict, or `None` if the fact does not match.
- `instantiate(pattern, substitution)` returns the ground tuple, or `None` if
  a variable is unbound.

## Values

Facts can hold any hashable Python objects. `minidatalog.value.Value` is a
tagged value that can be an integer (64-bit range), atom, string, float or
boolean, and `Value.kind` is a `ValueKind`. Values of different kinds never
compare equal. They sort by kind first, in the order integer, atom, string,
float, boolean, and then by payload:

```python
from minidatalog.value import Value
from minidatalog.atom import Atom

Value.integer(25) == Value.float(25.0)   # False
Value.integer(99) < Value.string("a")    # True
str(Value.string("alice"))               # '"alice"'
str(Value.atom(Atom(1)))                 # 'Atom(1)'
str(Value.boolean(True))                 # 'true'
```

## Atoms and interning

`minidatalog.internalizer.Internalizer` maps strings to `Atom` identifiers.
The same string always gives the same atom, and ids are handed out in order
starting at 0:

```python
from minidatalog.internalizer import Internalizer

names = Internalizer()
alice = names.intern("alice")
assert names.intern("alice") == alice
assert names.get_string(alice) == "alice"
assert len(names) == 1
```

## What it does not do

Everything is built through the Python API. There is no parser for Datalog
source text, no command-line tool or interactive prompt, and no on-disk
storage, because all facts live in memory. Rules are plain conjunctive Horn
clauses, with no negation, aggregation or built-in comparisons.

## Running the tests

```
pip install .[test]
pytest
```