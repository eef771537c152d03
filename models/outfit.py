"""Outfit history and candidate schemas."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Tuple

from models.wardrobe_item import ClothingItem

NO_OUTERWEAR = "none"


@dataclass(frozen=True)
class OutfitWear:
    """An outfit worn on a given day, optionally rated 1-10 overall and for comfort."""

    worn_date: date
    top_id: Optional[str] = None
    bottom_id: Optional[str] = None
    shoes_id: Optional[str] = None
    outerwear_id: Optional[str] = None
    rating: Optional[int] = None
    comfort_rating: Optional[int] = None
    wear_id: Optional[str] = None
    user_id: Optional[str] = None
    outfit_id: Optional[str] = None
    notes: Optional[str] = None

    @property
    def item_ids(self) -> List[str]:
        """Ids of every filled slot, outerwear included."""

        return [
            item_id
            for item_id in (self.top_id, self.bottom_id, self.shoes_id, self.outerwear_id)
            if item_id
        ]


@dataclass(frozen=True)
class SavedOutfit:
    """A favourite combination kept for later, referencing items by id."""

    top_id: str
    bottom_id: str
    shoes_id: str
    outerwear_id: Optional[str] = None
    outfit_id: Optional[str] = None
    user_id: Optional[str] = None
    created_at: Optional[str] = None

    def to_dict(self) -> Dict[str, object]:
        return {
            "outfit_id": self.outfit_id,
            "created_at": self.created_at,
            "outfit_items": {
                "top_id": self.top_id,
                "outerwear_id": self.outerwear_id,
                "bottom_id": self.bottom_id,
                "shoes_id": self.shoes_id,
            },
        }


@dataclass
class OutfitCandidate:
    """A scored outfit proposal returned by one generation call."""

    top: ClothingItem
    bottom: ClothingItem
    shoes: ClothingItem
    outerwear: Optional[ClothingItem] = None
    score: float = 0.0
    sub_scores: Dict[str, float] = field(default_factory=dict)

    @property
    def key(self) -> Tuple[str, str, str, str]:
        """Identity used for de-duplication: (top, outerwear or "none", bottom, shoes)."""

        outerwear_id = self.outerwear.item_id if self.outerwear else NO_OUTERWEAR
        return self.top.item_id, outerwear_id, self.bottom.item_id, self.shoes.item_id

    @property
    def items(self) -> List[ClothingItem]:
        pieces = [self.top]
        if self.outerwear:
            pieces.append(self.outerwear)
        pieces.extend([self.bottom, self.shoes])
        return pieces

    def to_saved(self) -> SavedOutfit:
        return SavedOutfit(
            top_id=self.top.item_id,
            outerwear_id=self.outerwear.item_id if self.outerwear else None,
            bottom_id=self.bottom.item_id,
            shoes_id=self.shoes.item_id,
        )

    def to_dict(self) -> Dict[str, object]:
        def _item(item: Optional[ClothingItem]) -> Optional[Dict[str, object]]:
            if item is None:
                return None
            return {
                "item_id": item.item_id,
                "clothing_type": item.clothing_type,
                "colors": list(item.colors),
                "image_url": item.image_url,
            }

        return {
            "top": _item(self.top),
            "outerwear": _item(self.outerwear),
            "bottom": _item(self.bottom),
            "shoes": _item(self.shoes),
            "score": self.score,
            "sub_scores": dict(self.sub_scores),
        }


__all__ = ["OutfitWear", "SavedOutfit", "OutfitCandidate", "NO_OUTERWEAR"]
