"""Shared fixtures for naming tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from uniqname.config.models import NamingConfig
from uniqname.naming.index import CollisionIndex
from uniqname.naming.models import TypeInfo, parse_universe
from uniqname.naming.ops import NamingOps
from uniqname.naming.pool import NamePool
from uniqname.naming.reserved import ReservedWords


@pytest.fixture
def pool() -> NamePool:
    return NamePool()


@pytest.fixture
def reserved(pool: NamePool) -> ReservedWords:
    """Small reserved table: 'class' everywhere, 'Parms' for parameters only."""
    words = ReservedWords(pool)
    words.add("class")
    words.add("Parms", parameter=True)
    words.freeze()
    return words


@pytest.fixture
def index(pool: NamePool, reserved: ReservedWords) -> CollisionIndex:
    return CollisionIndex(pool, reserved)


@pytest.fixture
def ops() -> NamingOps:
    return NamingOps.create(NamingConfig())


def _universe(*types: dict[str, Any]) -> dict[str, TypeInfo]:
    return {t.name: t for t in parse_universe({"types": list(types)})}


@pytest.fixture
def make_universe() -> Callable[..., dict[str, TypeInfo]]:
    """Build a universe from type dicts, indexed by type name."""
    return _universe
