"""Interfaces consumed from the reflection walker.

The collision index never enumerates a type universe itself; it reads
whatever the walker hands it through these protocols. ``scope_id`` values
must be hashable and unique across all types and functions of one build.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Protocol


class ReflectedMember(Protocol):
    """A data member or a function parameter."""

    @property
    def name(self) -> str: ...

    @property
    def number(self) -> int: ...

    @property
    def offset(self) -> int: ...

    @property
    def size(self) -> int: ...


class ReflectedFunction(Protocol):
    @property
    def scope_id(self) -> Hashable: ...

    @property
    def name(self) -> str: ...

    @property
    def number(self) -> int: ...

    @property
    def index(self) -> int: ...

    @property
    def params(self) -> Sequence[ReflectedMember]: ...


class ReflectedType(Protocol):
    @property
    def scope_id(self) -> Hashable: ...

    @property
    def name(self) -> str: ...

    @property
    def super(self) -> ReflectedType | None: ...

    @property
    def members(self) -> Sequence[ReflectedMember]: ...

    @property
    def functions(self) -> Sequence[ReflectedFunction]: ...


def ancestors(type_: ReflectedType) -> list[ReflectedType]:
    """Ancestor chain of ``type_``, nearest first."""
    chain: list[ReflectedType] = []
    current = type_.super
    while current is not None:
        chain.append(current)
        current = current.super
    return chain
