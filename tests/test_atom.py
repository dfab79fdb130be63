import pytest

from minidatalog.atom import Atom


def test_id_round_trip():
    assert Atom(42).id == 42


def test_str_format():
    assert str(Atom(5)) == "Atom(5)"


def test_equality_and_hash():
    assert Atom(3) == Atom(3)
    assert Atom(3) != Atom(4)
    assert len({Atom(3), Atom(3), Atom(4)}) == 2


def test_ordering_follows_id():
    atoms = [Atom(7), Atom(1), Atom(4)]
    assert [a.id for a in sorted(atoms)] == [1, 4, 7]
    assert Atom(1) < Atom(2)


def test_atom_is_immutable():
    atom = Atom(1)
    with pytest.raises(AttributeError):
        atom.id = 2  # type: ignore[misc]
    assert atom.id == 1
    assert atom == Atom(1)


def test_negative_id_rejected():
    with pytest.raises(ValueError):
        Atom(-1)


def test_non_int_id_rejected():
    with pytest.raises(TypeError):
        Atom("1")  # type: ignore[arg-type]