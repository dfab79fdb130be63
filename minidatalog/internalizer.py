"""String interning: map strings to atoms and back."""

from __future__ import annotations

from minidatalog.atom import Atom


class Internalizer:
    """Turns strings into unique atoms; the same string always yields the same atom.

    Atom ids are assigned sequentially from zero in order of first interning.
    """

    def __init__(self) -> None:
        self._strings: list[str] = []
        self._ids: dict[str, int] = {}

    def intern(self, s: str) -> Atom:
        """Return the atom for ``s``, creating one if it has not been seen."""
        existing = self._ids.get(s)
        if existing is not None:
            return Atom(existing)
        new_id = len(self._strings)
        self._strings.append(s)
        self._ids[s] = new_id
        return Atom(new_id)

    def get_string(self, atom: Atom) -> str | None:
        """Return the string behind ``atom``, or None if it is unknown here."""
        if atom.id < len(self._strings):
            return self._strings[atom.id]
        return None

    def __len__(self) -> int:
        return len(self._strings)

    def __contains__(self, s: object) -> bool:
        return s in self._ids