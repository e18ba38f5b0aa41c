"""Symbol kinds.

The ordinal of each kind doubles as the index of its collision counter.
A hit in an ancestor's table bumps the slot one above the matched record's
own kind, so every own-level kind is directly followed by its ``SUPER_``
counterpart.
"""

from enum import IntEnum


class SymbolKind(IntEnum):
    MEMBER_NAME = 0
    SUPER_MEMBER_NAME = 1
    FUNCTION_NAME = 2
    SUPER_FUNCTION_NAME = 3
    PARAMETER_NAME = 4


OWN_KINDS = frozenset(
    {SymbolKind.MEMBER_NAME, SymbolKind.FUNCTION_NAME, SymbolKind.PARAMETER_NAME}
)
"""Kinds a registered symbol can carry as its own classification."""

SLOT_COUNT = len(SymbolKind)
