"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.outfit import OutfitCandidate, OutfitWear
from models.preferences import ColorCombination
from models.wardrobe_item import ClothingItem, from_raw_metadata

__all__ = ["ClothingItem", "ColorCombination", "OutfitCandidate", "OutfitWear", "from_raw_metadata"]
