"""Reserved word table.

Generated names must never equal a reserved word. Reserved words live in
their own symbol table, seeded once before any type is registered. Entries
reserved in every context carry ``SUPER_MEMBER_NAME`` as their own kind, so a
member hitting one is suffixed like a shadowed inherited member. Entries
reserved only for parameters carry ``PARAMETER_NAME``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from uniqname.config.constants import DEFAULT_RESERVED_PARAMETER_WORDS, DEFAULT_RESERVED_WORDS
from uniqname.naming.kinds import SymbolKind
from uniqname.naming.records import CollisionRecord
from uniqname.naming.table import SymbolTable

if TYPE_CHECKING:
    from uniqname.config.models import NamingConfig
    from uniqname.naming.pool import NamePool


class ReservedWords:
    """The process-wide reserved word table.

    Usage::

        reserved = ReservedWords(pool)
        reserved.add("class")
        reserved.add("Parms", parameter=True)
        reserved.freeze()
    """

    def __init__(self, pool: NamePool) -> None:
        self._pool = pool
        self.table = SymbolTable(scope="<reserved>")
        self._words: list[tuple[str, bool]] = []

    @classmethod
    def from_config(cls, pool: NamePool, config: NamingConfig) -> ReservedWords:
        """Seed and freeze a table from configuration."""
        reserved = cls(pool)
        if config.include_default_reserved:
            reserved.extend(DEFAULT_RESERVED_WORDS)
            reserved.extend(DEFAULT_RESERVED_PARAMETER_WORDS, parameter=True)
        for word in config.reserved_words:
            reserved.add(word.name, parameter=word.parameter)
        reserved.freeze()
        return reserved

    def add(self, word: str, *, parameter: bool = False) -> None:
        name, _ = self._pool.find_or_add(word)
        kind = SymbolKind.PARAMETER_NAME if parameter else SymbolKind.SUPER_MEMBER_NAME
        self.table.append(CollisionRecord(name=name, own_kind=kind))
        self._words.append((word, parameter))

    def extend(self, words: Iterable[str], *, parameter: bool = False) -> None:
        for word in words:
            self.add(word, parameter=parameter)

    def freeze(self) -> None:
        self.table.freeze()

    @property
    def words(self) -> list[tuple[str, bool]]:
        """Seeded words as ``(word, parameter_only)`` in seeding order."""
        return list(self._words)

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        name = self._pool.find(word)
        return name is not None and self.table.find_latest(name) is not None

    def __len__(self) -> int:
        return len(self.table)
