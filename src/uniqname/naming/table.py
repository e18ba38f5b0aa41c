"""Symbol tables and the per-scope table store."""

from __future__ import annotations

import threading
from collections.abc import Hashable, Iterator

from uniqname.core.errors import InternalError
from uniqname.naming.pool import InternedName
from uniqname.naming.records import CollisionRecord


class SymbolTable:
    """Append-only, ordered sequence of collision records for one scope.

    Positions returned by :meth:`append` are stable. Once frozen the table
    rejects further appends.
    """

    __slots__ = ("scope", "_records", "_frozen")

    def __init__(self, scope: Hashable | None = None) -> None:
        self.scope = scope
        self._records: list[CollisionRecord] = []
        self._frozen = False

    def append(self, record: CollisionRecord) -> int:
        if self._frozen:
            raise InternalError.unexpected(
                "append to a frozen symbol table", scope=repr(self.scope)
            )
        self._records.append(record)
        return len(self._records) - 1

    def find_latest(self, name: InternedName) -> CollisionRecord | None:
        """Return the most recently added record named ``name``, if any."""
        for record in reversed(self._records):
            if record.name == name:
                return record
        return None

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __getitem__(self, position: int) -> CollisionRecord:
        return self._records[position]

    def __iter__(self) -> Iterator[CollisionRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"SymbolTable(scope={self.scope!r}, records={len(self._records)})"


class ScopeStore:
    """Scope identity -> SymbolTable.

    Types and functions share one identity space; the reflection source is
    responsible for keeping their identities distinct.
    """

    def __init__(self) -> None:
        self._tables: dict[Hashable, SymbolTable] = {}
        self._lock = threading.Lock()

    def ensure(self, scope: Hashable) -> SymbolTable:
        """Return the table for ``scope``, creating an empty one on first use."""
        table = self._tables.get(scope)
        if table is not None:
            return table
        with self._lock:
            return self._tables.setdefault(scope, SymbolTable(scope))

    def get(self, scope: Hashable) -> SymbolTable | None:
        return self._tables.get(scope)

    def __contains__(self, scope: object) -> bool:
        return scope in self._tables

    def __len__(self) -> int:
        return len(self._tables)
