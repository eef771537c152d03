"""Cycle through one generation's ranked outfits without re-sampling."""

from __future__ import annotations

from typing import List, Optional, Sequence

from models.outfit import OutfitCandidate


class OutfitSuggestionCycle:
    """Walks a fixed ranked list, wrapping back to the best outfit after the last."""

    def __init__(self, candidates: Sequence[OutfitCandidate]) -> None:
        self._candidates: List[OutfitCandidate] = list(candidates)
        self._index = 0

    def __len__(self) -> int:
        return len(self._candidates)

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> Optional[OutfitCandidate]:
        if not self._candidates:
            return None
        return self._candidates[self._index]

    def advance(self) -> Optional[OutfitCandidate]:
        """Move to the next suggestion and return it."""

        if not self._candidates:
            return None
        self._index = (self._index + 1) % len(self._candidates)
        return self._candidates[self._index]


__all__ = ["OutfitSuggestionCycle"]
