"""User color preference records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional, Tuple


@dataclass(frozen=True)
class ColorCombination:
    """A liked (top color, bottom color) pairing. Order matters."""

    top_color: str
    bottom_color: str
    combination_id: Optional[str] = None

    @property
    def key(self) -> Tuple[str, str]:
        return self.top_color.strip().lower(), self.bottom_color.strip().lower()


def liked_pairs(combinations: Iterable[ColorCombination]) -> FrozenSet[Tuple[str, str]]:
    """Case-folded set of liked pairs for constant-time membership checks."""

    return frozenset(combination.key for combination in combinations)


__all__ = ["ColorCombination", "liked_pairs"]
