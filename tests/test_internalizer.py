from minidatalog.atom import Atom
from minidatalog.internalizer import Internalizer


def test_new_internalizer():
    internalizer = Internalizer()
    assert not internalizer
    assert len(internalizer) == 0


def test_intern_single_string():
    internalizer = Internalizer()
    atom = internalizer.intern("hello")
    assert len(internalizer) == 1
    assert internalizer.get_string(atom) == "hello"


def test_intern_same_string_twice():
    internalizer = Internalizer()
    atom1 = internalizer.intern("hello")
    atom2 = internalizer.intern("hello")
    assert atom1 == atom2
    assert len(internalizer) == 1
    assert internalizer.get_string(atom1) == "hello"
    assert internalizer.get_string(atom2) == "hello"


def test_intern_different_strings():
    internalizer = Internalizer()
    atom1 = internalizer.intern("hello")
    atom2 = internalizer.intern("world")
    assert atom1 != atom2
    assert len(internalizer) == 2
    assert internalizer.get_string(atom1) == "hello"
    assert internalizer.get_string(atom2) == "world"


def test_get_string_nonexistent():
    internalizer = Internalizer()
    assert internalizer.get_string(Atom(999)) is None


def test_multiple_interns():
    internalizer = Internalizer()
    atoms = [
        internalizer.intern(s)
        for s in ["apple", "banana", "cherry", "apple", "date", "banana"]
    ]
    assert len(internalizer) == 4
    assert atoms[0] == atoms[3]
    assert atoms[1] == atoms[5]
    assert atoms[0] != atoms[1]
    assert atoms[1] != atoms[2]


def test_empty_string():
    internalizer = Internalizer()
    atom = internalizer.intern("")
    assert len(internalizer) == 1
    assert internalizer.get_string(atom) == ""


def test_atom_ids_sequential():
    internalizer = Internalizer()
    atom1 = internalizer.intern("first")
    atom2 = internalizer.intern("second")
    atom3 = internalizer.intern("third")
    assert atom1.id == 0
    assert atom2.id == 1
    assert atom3.id == 2


def test_len_tracks_unique_strings():
    internalizer = Internalizer()
    assert len(internalizer) == 0
    internalizer.intern("hello")
    assert len(internalizer) == 1
    internalizer.intern("hello")
    assert len(internalizer) == 1
    internalizer.intern("world")
    assert len(internalizer) == 2
    assert bool(internalizer) is True