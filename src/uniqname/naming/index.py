"""Collision index builder.

Registers every member, function and parameter of a type universe into
per-scope symbol tables, recording how often each name collided with an
earlier symbol of the same scope, of an ancestor, or with a reserved word.

Search order for a symbol (first match wins, each table scanned from the
most recent record backwards):

1. the owning function's parameters (parameters only)
2. reserved words (parameters only)
3. the type's own table
4. each ancestor's table, nearest first (a "super" hit)
5. reserved words

Ancestors are always built before their descendants, each type exactly once.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass

import structlog

from uniqname.config.constants import COUNT_BITS_DEFAULT
from uniqname.core.errors import InternalError, NamingError
from uniqname.naming.kinds import OWN_KINDS, SymbolKind
from uniqname.naming.pool import InternedName, NamePool
from uniqname.naming.records import CollisionRecord, counter_limit
from uniqname.naming.reflection import (
    ReflectedFunction,
    ReflectedMember,
    ReflectedType,
    ancestors,
)
from uniqname.naming.reserved import ReservedWords
from uniqname.naming.table import ScopeStore, SymbolTable
from uniqname.naming.translation import FunctionKey, MemberKey, SymbolKey, TranslationIndex

log = structlog.get_logger(__name__)

_UNKNOWN_NAME = InternedName(-1)


@dataclass
class IndexStats:
    """Counters accumulated while building."""

    types_built: int = 0
    symbols_registered: int = 0
    collisions: int = 0
    duplicate_keys: int = 0
    saturated_counters: int = 0


class CollisionIndex:
    """Builds collision records for a type universe.

    Usage::

        pool = NamePool()
        index = CollisionIndex(pool, ReservedWords.from_config(pool, config))
        for type_ in universe:
            index.add_type(type_)
        position = index.translation.resolve(index.member_key(type_, member))
    """

    def __init__(
        self,
        pool: NamePool,
        reserved: ReservedWords,
        *,
        count_bits: int = COUNT_BITS_DEFAULT,
        check_reserved: bool = True,
    ) -> None:
        self._pool = pool
        self._reserved = reserved.table
        self._count_bits = count_bits
        self._check_reserved = check_reserved

        self.scopes = ScopeStore()
        self.translation = TranslationIndex()
        self.stats = IndexStats()
        self.diagnostics: list[NamingError] = []

        self._built: set[Hashable] = set()
        self._build_order: list[ReflectedType] = []
        # scope id -> type owning that scope (a type owns itself and its functions)
        self._owners: dict[Hashable, ReflectedType] = {}

    # =========================================================================
    # Registration
    # =========================================================================

    def register_symbol(
        self,
        type_: ReflectedType,
        raw_name: str,
        kind: SymbolKind,
        function: ReflectedFunction | None = None,
        *,
        check_reserved: bool | None = None,
    ) -> int:
        """Register one symbol of ``type_`` and return its record position.

        The position is relative to the function's table for parameters and
        to the type's table otherwise.

        Raises:
            InternalError: ``kind`` is not an own kind, or ``function`` is
                missing for a parameter (or given for anything else).
        """
        if kind not in OWN_KINDS:
            raise InternalError.unexpected("not an own symbol kind", kind=kind.name)
        is_parameter = kind == SymbolKind.PARAMETER_NAME
        if is_parameter != (function is not None):
            raise InternalError.unexpected(
                "parameters, and only parameters, need an owning function",
                symbol=raw_name,
                kind=kind.name,
            )
        if check_reserved is None:
            check_reserved = self._check_reserved

        name, inserted = self._pool.find_or_add(raw_name)
        type_table = self.scopes.ensure(type_.scope_id)
        func_table = self.scopes.ensure(function.scope_id) if function is not None else None
        target = func_table if func_table is not None else type_table

        self.stats.symbols_registered += 1

        # A name seen for the first time cannot collide with anything.
        if inserted:
            return target.append(CollisionRecord(name=name, own_kind=kind))

        if func_table is not None:
            match = func_table.find_latest(name)
            if match is None and check_reserved:
                # For parameters, reserved words take precedence over the type tables
                match = self._reserved.find_latest(name)
            if match is not None:
                return self._add_colliding(target, match, kind, raw_name, is_super=False)

        match = type_table.find_latest(name)
        if match is not None:
            return self._add_colliding(target, match, kind, raw_name, is_super=False)

        for ancestor in ancestors(type_):
            ancestor_table = self.scopes.get(ancestor.scope_id)
            if ancestor_table is None:
                continue
            match = ancestor_table.find_latest(name)
            if match is not None:
                return self._add_colliding(
                    target, match, kind, raw_name, is_super=True, origin=ancestor.scope_id
                )

        if check_reserved:
            match = self._reserved.find_latest(name)
            if match is not None:
                return self._add_colliding(target, match, kind, raw_name, is_super=False)

        return target.append(CollisionRecord(name=name, own_kind=kind))

    def _add_colliding(
        self,
        target: SymbolTable,
        match: CollisionRecord,
        kind: SymbolKind,
        raw_name: str,
        *,
        is_super: bool,
        origin: Hashable | None = None,
    ) -> int:
        record, saturated = match.derive(
            kind, is_super=is_super, origin=origin, count_bits=self._count_bits
        )
        self.stats.collisions += 1
        if saturated:
            slot = SymbolKind(match.own_kind + int(is_super))
            diagnostic = NamingError.counter_saturated(
                raw_name, slot.name, counter_limit(self._count_bits)
            )
            log.warning(
                "collision_counter_saturated",
                symbol=raw_name,
                slot=slot.name,
                scope=repr(target.scope),
                limit=counter_limit(self._count_bits),
            )
            self.stats.saturated_counters += 1
            self.diagnostics.append(diagnostic)
        return target.append(record)

    # =========================================================================
    # Per-type driver
    # =========================================================================

    def add_type(self, type_: ReflectedType, *, check_reserved: bool | None = None) -> None:
        """Build ``type_`` and any of its ancestors not yet built."""
        pending: list[ReflectedType] = []
        current: ReflectedType | None = type_
        while current is not None and current.scope_id not in self._built:
            pending.append(current)
            current = current.super

        for item in reversed(pending):
            self._build_type(item, check_reserved)

    def add_types(
        self, types: Iterable[ReflectedType], *, check_reserved: bool | None = None
    ) -> None:
        for type_ in types:
            self.add_type(type_, check_reserved=check_reserved)

    def _build_type(self, type_: ReflectedType, check_reserved: bool | None) -> None:
        scope = type_.scope_id
        self._built.add(scope)
        self._build_order.append(type_)
        self._owners[scope] = type_
        table = self.scopes.ensure(scope)

        for member in type_.members:
            position = self.register_symbol(
                type_, member.name, SymbolKind.MEMBER_NAME, check_reserved=check_reserved
            )
            self._publish(self.member_key(scope, member), position, type_, member.name)

        for function in type_.functions:
            self._owners[function.scope_id] = type_
            position = self.register_symbol(
                type_, function.name, SymbolKind.FUNCTION_NAME, check_reserved=check_reserved
            )
            self._publish(self.function_key(scope, function), position, type_, function.name)

            for param in function.params:
                position = self.register_symbol(
                    type_,
                    param.name,
                    SymbolKind.PARAMETER_NAME,
                    function,
                    check_reserved=check_reserved,
                )
                self._publish(
                    self.member_key(function.scope_id, param), position, type_, param.name
                )

            func_table = self.scopes.get(function.scope_id)
            if func_table is not None:
                func_table.freeze()

        table.freeze()
        self.stats.types_built += 1
        log.debug(
            "type_built",
            type=type_.name,
            symbols=len(table),
            super=type_.super.name if type_.super is not None else None,
        )

    def _publish(
        self, key: SymbolKey, position: int, type_: ReflectedType, symbol: str
    ) -> None:
        try:
            self.translation.publish(key, position, symbol=symbol)
        except NamingError as e:
            log.error(
                "duplicate_translation_key",
                type=type_.name,
                symbol=symbol,
                key=repr(key),
            )
            self.stats.duplicate_keys += 1
            self.diagnostics.append(e)

    # =========================================================================
    # Keys and lookups
    # =========================================================================

    def _interned(self, raw_name: str) -> InternedName:
        name = self._pool.find(raw_name)
        return _UNKNOWN_NAME if name is None else name

    def member_key(self, scope: Hashable, member: ReflectedMember) -> MemberKey:
        """Key of a data member of type ``scope`` or a parameter of function ``scope``."""
        return MemberKey(
            scope=scope,
            name=self._interned(member.name),
            number=member.number,
            offset=member.offset,
            size=member.size,
        )

    def function_key(self, scope: Hashable, function: ReflectedFunction) -> FunctionKey:
        return FunctionKey(
            scope=scope,
            name=self._interned(function.name),
            number=function.number,
            index=function.index,
        )

    def record(self, key: SymbolKey) -> CollisionRecord:
        """Return the record published for ``key``.

        Raises:
            NamingError: SYMBOL_NOT_FOUND if ``key`` was never published.
        """
        position = self.translation.resolve(key)
        table = self.scopes.get(key.scope)
        if table is None:
            raise NamingError.not_found(key)
        return table[position]

    def owner(self, scope: Hashable) -> ReflectedType | None:
        """The type owning ``scope`` (itself for types, the declaring type for functions)."""
        return self._owners.get(scope)

    def is_built(self, type_: ReflectedType) -> bool:
        return type_.scope_id in self._built

    @property
    def pool(self) -> NamePool:
        return self._pool

    @property
    def built_types(self) -> list[ReflectedType]:
        """Built types, ancestors before descendants."""
        return list(self._build_order)
