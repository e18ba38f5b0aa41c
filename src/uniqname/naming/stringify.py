"""Final-name construction from a resolved collision record.

Both functions are pure. The order of the checks matters: prefixes are
applied before counter suffixes.
"""

from __future__ import annotations

from uniqname.config.constants import FUNCTION_PREFIX, PARAMETER_PREFIX, SEPARATOR
from uniqname.naming.kinds import SymbolKind
from uniqname.naming.records import CollisionRecord

_MEMBER = SymbolKind.MEMBER_NAME
_SUPER_MEMBER = SymbolKind.SUPER_MEMBER_NAME
_FUNCTION = SymbolKind.FUNCTION_NAME
_SUPER_FUNCTION = SymbolKind.SUPER_FUNCTION_NAME
_PARAMETER = SymbolKind.PARAMETER_NAME


def has_collisions(record: CollisionRecord) -> bool:
    """Whether the record's own kind is under any rename pressure.

    Functions do not consult ``SUPER_FUNCTION_NAME``; only parameters
    look at every slot.
    """
    counts = record.counts
    if record.own_kind == _MEMBER:
        return counts[_SUPER_MEMBER] > 0 or counts[_MEMBER] > 0
    if record.own_kind == _FUNCTION:
        return counts[_MEMBER] > 0 or counts[_SUPER_MEMBER] > 0 or counts[_FUNCTION] > 0
    if record.own_kind == _PARAMETER:
        return any(counts[slot] > 0 for slot in SymbolKind)
    return False


def stringify(raw: str, record: CollisionRecord, owner_type_name: str) -> str:
    """Build the final identifier for ``raw``.

    Args:
        raw: The symbol's raw text.
        record: Its resolved collision record.
        owner_type_name: Type name used to suffix shadowing members.
    """
    counts = record.counts
    name = raw

    if record.own_kind == _MEMBER:
        if counts[_SUPER_MEMBER] > 0:
            name += SEPARATOR + owner_type_name
        if counts[_MEMBER] > 0:
            name += SEPARATOR + str(counts[_MEMBER] - 1)
    elif record.own_kind == _FUNCTION:
        if counts[_MEMBER] > 0 or counts[_SUPER_MEMBER] > 0:
            name = FUNCTION_PREFIX + name
        if counts[_FUNCTION] > 0:
            name += SEPARATOR + str(counts[_FUNCTION] - 1)
    elif record.own_kind == _PARAMETER:
        if (
            counts[_MEMBER] > 0
            or counts[_SUPER_MEMBER] > 0
            or counts[_FUNCTION] > 0
            or counts[_SUPER_FUNCTION] > 0
        ):
            name = PARAMETER_PREFIX + name
        if counts[_PARAMETER] > 0:
            name += SEPARATOR + str(counts[_PARAMETER] - 1)

    return name
