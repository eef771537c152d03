"""Clothing item data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _ensure_list(value: Any) -> List[Any]:
    """Coerce a scalar or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


@dataclass
class ClothingItem:
    """A wardrobe entry.

    Only the first color is used for scoring. ``clothing_type`` is expected to
    come from the taxonomy; unknown types are tolerated and simply never land
    in a section partition.
    """

    item_id: str
    clothing_type: str
    colors: List[str] = field(default_factory=list)
    is_dirty: bool = False
    user_id: Optional[str] = None
    image_url: Optional[str] = None
    created_at: Optional[str] = None

    def __post_init__(self) -> None:
        self.item_id = str(self.item_id)
        self.clothing_type = str(self.clothing_type).strip()
        # positions matter: a blank first entry means "no primary color", not "use the second"
        self.colors = ["" if color is None else str(color).strip() for color in _ensure_list(self.colors)]

    @property
    def primary_color(self) -> Optional[str]:
        """Lower-cased first color, or ``None`` when it is missing or blank."""

        if not self.colors or not self.colors[0]:
            return None
        return self.colors[0].lower()


def from_raw_metadata(metadata: Dict[str, Any]) -> ClothingItem:
    """Factory to build a :class:`ClothingItem` from a loose row or payload."""

    item_id = metadata.get("item_id", metadata.get("id"))
    clothing_type = metadata.get("clothing_type", metadata.get("type"))
    missing = [name for name, value in (("item_id", item_id), ("clothing_type", clothing_type)) if not value]
    if missing:
        raise ValueError(f"Missing required fields for ClothingItem: {missing}")

    return ClothingItem(
        item_id=str(item_id),
        clothing_type=str(clothing_type),
        colors=_ensure_list(metadata.get("colors")),
        is_dirty=bool(metadata.get("is_dirty", False)),
        user_id=metadata.get("user_id"),
        image_url=metadata.get("image_url"),
        created_at=metadata.get("created_at"),
    )


__all__ = ["ClothingItem", "from_raw_metadata"]
