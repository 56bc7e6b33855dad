"""
Ring Inventory - The rings a player still holds, counted per size.

Counts only ever go down. Probing with an unknown size is allowed and
reports nothing left.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any

from .pieces import SIZES, STARTING_RINGS_PER_SIZE, Size


def _full_set() -> dict[Size, int]:
    return {size: STARTING_RINGS_PER_SIZE for size in SIZES}


@dataclass
class RingInventory:
    """Remaining placeable rings for one player."""
    counts: dict[Size, int] = field(default_factory=_full_set)

    def remaining(self, size: Any) -> int:
        """Number of rings left of a size (0 for unknown sizes)."""
        parsed = Size.parse(size)
        if parsed is None:
            return 0
        return self.counts.get(parsed, 0)

    def has_remaining(self, size: Any) -> bool:
        return self.remaining(size) > 0

    def has_any(self) -> bool:
        return any(count > 0 for count in self.counts.values())

    def total_remaining(self) -> int:
        return sum(self.counts.values())

    def consume(self, size: Any) -> None:
        """Use up one ring of a size. Does nothing if none are left."""
        if self.has_remaining(size):
            parsed = Size.parse(size)
            self.counts[parsed] -= 1

    def as_dict(self) -> dict[str, int]:
        return {size.value: self.counts.get(size, 0) for size in SIZES}
