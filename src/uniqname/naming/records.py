"""Collision records.

One record per registered symbol. A record holds the symbol's interned
name, its own kind, and one saturating counter per :class:`SymbolKind`
slot. Records are immutable; a collision produces a new record derived
from the one it matched.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass

from uniqname.config.constants import COUNT_BITS_DEFAULT
from uniqname.naming.kinds import SLOT_COUNT, SymbolKind
from uniqname.naming.pool import InternedName

_ZERO_COUNTS = (0,) * SLOT_COUNT


def counter_limit(count_bits: int = COUNT_BITS_DEFAULT) -> int:
    """Largest value a counter of ``count_bits`` can hold."""
    return (1 << count_bits) - 1


@dataclass(frozen=True, slots=True)
class CollisionRecord:
    """Collision bookkeeping for one symbol."""

    name: InternedName
    own_kind: SymbolKind
    counts: tuple[int, ...] = _ZERO_COUNTS
    origin: Hashable | None = None  # ancestor scope whose symbol this one shadows

    def count(self, slot: SymbolKind) -> int:
        return self.counts[slot]

    @property
    def is_clean(self) -> bool:
        """True when no counter is set."""
        return not any(self.counts)

    def derive(
        self,
        kind: SymbolKind,
        *,
        is_super: bool,
        origin: Hashable | None = None,
        count_bits: int = COUNT_BITS_DEFAULT,
    ) -> tuple[CollisionRecord, bool]:
        """Build the record for a new symbol that collided with this one.

        The new record copies these counts, takes ``kind`` as its own kind,
        and bumps the slot of this record's own kind (one higher for a hit
        in an ancestor's table).

        On an ancestor hit the new record names that ancestor as its origin,
        unless this record is already suffixed with its own type name (a
        shadowing hit without an origin). The new record then has no origin
        and is suffixed with its declaring type instead.

        Returns:
            The derived record and whether the bumped counter saturated.
        """
        slot = self.own_kind + int(is_super)
        limit = counter_limit(count_bits)
        counts = list(self.counts)
        saturated = counts[slot] >= limit
        if not saturated:
            counts[slot] += 1
        derived = CollisionRecord(
            name=self.name,
            own_kind=kind,
            counts=tuple(counts),
            origin=self._shadow_origin(origin) if is_super else self.origin,
        )
        return derived, saturated

    def _shadow_origin(self, ancestor: Hashable | None) -> Hashable | None:
        if self.counts[SymbolKind.SUPER_MEMBER_NAME] > 0 and self.origin is None:
            return None
        return ancestor
