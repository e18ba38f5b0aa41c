"""Naming operations.

Renderer-facing surface over a built collision index: final names,
collision checks and the build report.

Usage::

    ops = NamingOps.create(config.naming)
    report = ops.build(types)
    name = ops.resolve(ops.member_key(type_, member))
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Literal

import structlog

from uniqname.config.models import NamingConfig
from uniqname.core.errors import NamingError, UniqnameError
from uniqname.core.logging import clear_build_id, set_build_id
from uniqname.naming.index import CollisionIndex
from uniqname.naming.kinds import SymbolKind
from uniqname.naming.pool import NamePool
from uniqname.naming.records import CollisionRecord
from uniqname.naming.reflection import ReflectedFunction, ReflectedMember, ReflectedType
from uniqname.naming.reserved import ReservedWords
from uniqname.naming.stringify import has_collisions, stringify
from uniqname.naming.translation import FunctionKey, MemberKey, SymbolKey

log = structlog.get_logger(__name__)


@dataclass
class BuildReport:
    """Outcome of one build pass."""

    build_id: str
    types: int = 0
    symbols: int = 0
    collisions: int = 0
    diagnostics: list[UniqnameError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    def to_dict(self) -> dict[str, object]:
        return {
            "build_id": self.build_id,
            "types": self.types,
            "symbols": self.symbols,
            "collisions": self.collisions,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


@dataclass(frozen=True, slots=True)
class ResolvedSymbol:
    """One symbol with its raw and final names."""

    type_name: str
    kind: SymbolKind
    raw: str
    final: str
    collided: bool
    function: str | None = None  # owning function, for parameters


class NamingOps:
    """Final-name queries backed by a :class:`CollisionIndex`."""

    def __init__(
        self,
        index: CollisionIndex,
        *,
        super_suffix: Literal["ancestor", "owner"] = "ancestor",
    ) -> None:
        self._index = index
        self._super_suffix = super_suffix

    @classmethod
    def create(cls, config: NamingConfig | None = None) -> NamingOps:
        """Seed reserved words and set up an empty index from ``config``."""
        config = config or NamingConfig()
        pool = NamePool()
        reserved = ReservedWords.from_config(pool, config)
        index = CollisionIndex(
            pool,
            reserved,
            count_bits=config.counter_bits,
            check_reserved=config.check_reserved,
        )
        log.debug("reserved_words_seeded", count=len(reserved))
        return cls(index, super_suffix=config.super_suffix)

    @property
    def index(self) -> CollisionIndex:
        return self._index

    def build(
        self, types: Iterable[ReflectedType], *, check_reserved: bool | None = None
    ) -> BuildReport:
        """Register every type of ``types`` (ancestors first) and report."""
        build_id = set_build_id()
        index = self._index
        before = (
            index.stats.types_built,
            index.stats.symbols_registered,
            index.stats.collisions,
            len(index.diagnostics),
        )
        try:
            index.add_types(types, check_reserved=check_reserved)
            report = BuildReport(
                build_id=build_id,
                types=index.stats.types_built - before[0],
                symbols=index.stats.symbols_registered - before[1],
                collisions=index.stats.collisions - before[2],
                diagnostics=list(index.diagnostics[before[3] :]),
            )
            log.info(
                "naming_build_done",
                types=report.types,
                symbols=report.symbols,
                collisions=report.collisions,
                diagnostics=len(report.diagnostics),
            )
            return report
        finally:
            clear_build_id()

    # =========================================================================
    # Keys
    # =========================================================================

    def member_key(self, type_: ReflectedType, member: ReflectedMember) -> MemberKey:
        return self._index.member_key(type_.scope_id, member)

    def function_key(self, type_: ReflectedType, function: ReflectedFunction) -> FunctionKey:
        return self._index.function_key(type_.scope_id, function)

    def parameter_key(self, function: ReflectedFunction, param: ReflectedMember) -> MemberKey:
        return self._index.member_key(function.scope_id, param)

    # =========================================================================
    # Queries
    # =========================================================================

    def record(self, key: SymbolKey) -> CollisionRecord:
        return self._index.record(key)

    def resolve(self, key: SymbolKey) -> str:
        """Final, collision-free name of the symbol published under ``key``.

        Raises:
            NamingError: SYMBOL_NOT_FOUND if ``key`` was never published.
        """
        record = self._index.record(key)
        raw = self._index.pool.text(record.name)
        return stringify(raw, record, self._suffix_type_name(key.scope, record))

    def has_collisions(self, key: SymbolKey) -> bool:
        return has_collisions(self._index.record(key))

    def _suffix_type_name(self, scope: Hashable, record: CollisionRecord) -> str:
        owner = self._index.owner(scope)
        if owner is None:
            raise NamingError.not_found(scope)
        if self._super_suffix == "ancestor" and record.origin is not None:
            origin = self._index.owner(record.origin)
            if origin is not None:
                return origin.name
        return owner.name

    def symbols(self) -> Iterator[ResolvedSymbol]:
        """Every published symbol of every built type, in registration order.

        Symbols skipped for a duplicate key are listed once, under the key's
        first owner.
        """
        seen: set[SymbolKey] = set()
        for type_ in self._index.built_types:
            entries: list[tuple[SymbolKey, str, str | None]] = []
            for member in type_.members:
                entries.append((self.member_key(type_, member), member.name, None))
            for function in type_.functions:
                entries.append((self.function_key(type_, function), function.name, None))
                for param in function.params:
                    entries.append((self.parameter_key(function, param), param.name, function.name))

            for key, raw, function_name in entries:
                if key in seen:
                    continue
                seen.add(key)
                yield self._resolved(type_, key, raw, function=function_name)

    def _resolved(
        self,
        type_: ReflectedType,
        key: SymbolKey,
        raw: str,
        *,
        function: str | None = None,
    ) -> ResolvedSymbol:
        record = self._index.record(key)
        return ResolvedSymbol(
            type_name=type_.name,
            kind=record.own_kind,
            raw=raw,
            final=self.resolve(key),
            collided=has_collisions(record),
            function=function,
        )
