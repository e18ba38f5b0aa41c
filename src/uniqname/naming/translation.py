"""Translation lookup.

Maps an opaque symbol key to the position of its record so a renderer can
fetch the final name without re-running the collision search.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from dataclasses import dataclass

from uniqname.core.errors import NamingError
from uniqname.naming.pool import InternedName


@dataclass(frozen=True, slots=True)
class MemberKey:
    """Identity of a data member or a parameter.

    ``scope`` is the table the record lives in: the owning type for data
    members, the owning function for parameters. Number, offset and size
    tell apart same-named members of one scope.
    """

    scope: Hashable
    name: InternedName
    number: int
    offset: int
    size: int


@dataclass(frozen=True, slots=True)
class FunctionKey:
    """Identity of a function; ``index`` is its declaration index."""

    scope: Hashable
    name: InternedName
    number: int
    index: int


SymbolKey = MemberKey | FunctionKey


class TranslationIndex:
    """SymbolKey -> record position within the key's scope table."""

    def __init__(self) -> None:
        self._positions: dict[SymbolKey, int] = {}

    def publish(self, key: SymbolKey, position: int, *, symbol: str = "") -> None:
        """Record ``position`` for ``key``.

        Raises:
            NamingError: DUPLICATE_KEY if ``key`` was already published. The
                index is left unchanged.
        """
        if key in self._positions:
            raise NamingError.duplicate_key(key, scope=repr(key.scope), symbol=symbol)
        self._positions[key] = position

    def resolve(self, key: SymbolKey) -> int:
        """Return the position published for ``key``.

        Raises:
            NamingError: SYMBOL_NOT_FOUND if ``key`` was never published.
        """
        try:
            return self._positions[key]
        except KeyError:
            raise NamingError.not_found(key) from None

    def __contains__(self, key: object) -> bool:
        return key in self._positions

    def __iter__(self) -> Iterator[SymbolKey]:
        return iter(self._positions)

    def __len__(self) -> int:
        return len(self._positions)
