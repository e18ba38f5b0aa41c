"""Symbol disambiguation: collision index, translation lookup and final names."""

from uniqname.naming.index import CollisionIndex, IndexStats
from uniqname.naming.kinds import SymbolKind
from uniqname.naming.models import (
    FunctionInfo,
    MemberInfo,
    TypeInfo,
    build_universe,
    load_universe,
    parse_universe,
)
from uniqname.naming.ops import BuildReport, NamingOps, ResolvedSymbol
from uniqname.naming.pool import InternedName, NamePool
from uniqname.naming.records import CollisionRecord
from uniqname.naming.reserved import ReservedWords
from uniqname.naming.stringify import has_collisions, stringify
from uniqname.naming.table import ScopeStore, SymbolTable
from uniqname.naming.translation import FunctionKey, MemberKey, SymbolKey, TranslationIndex

__all__ = [
    "BuildReport",
    "CollisionIndex",
    "CollisionRecord",
    "FunctionInfo",
    "FunctionKey",
    "IndexStats",
    "InternedName",
    "MemberInfo",
    "MemberKey",
    "NamePool",
    "NamingOps",
    "ReservedWords",
    "ResolvedSymbol",
    "ScopeStore",
    "SymbolKey",
    "SymbolKind",
    "SymbolTable",
    "TranslationIndex",
    "TypeInfo",
    "build_universe",
    "has_collisions",
    "load_universe",
    "parse_universe",
    "stringify",
]
