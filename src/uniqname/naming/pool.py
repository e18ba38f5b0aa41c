"""Interned name pool.

Maps raw symbol strings to dense integer identities. Identities are stable
for the lifetime of the pool and never reused, so records can compare names
by integer equality instead of text.
"""

from __future__ import annotations

import threading
from typing import NewType

InternedName = NewType("InternedName", int)


class NamePool:
    """Deduplicating string -> InternedName map.

    Insertion is guarded by a lock so one pool can be shared by builders
    running on independent branches of an inheritance forest. Lookups of
    already-interned names are lock-free.
    """

    def __init__(self) -> None:
        self._ids: dict[str, InternedName] = {}
        self._names: list[str] = []
        self._lock = threading.Lock()

    def find_or_add(self, text: str) -> tuple[InternedName, bool]:
        """Intern ``text``.

        Returns:
            The identity and whether this call inserted it.
        """
        existing = self._ids.get(text)
        if existing is not None:
            return existing, False
        with self._lock:
            existing = self._ids.get(text)
            if existing is not None:
                return existing, False
            name = InternedName(len(self._names))
            self._names.append(text)
            self._ids[text] = name
            return name, True

    def find(self, text: str) -> InternedName | None:
        return self._ids.get(text)

    def text(self, name: InternedName) -> str:
        """Return the raw string for an identity produced by this pool."""
        return self._names[name]

    def __contains__(self, text: object) -> bool:
        return text in self._ids

    def __len__(self) -> int:
        return len(self._names)
