"""Pydantic schemas and helpers for validating raw payloads at the boundary."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from models.outfit import OutfitWear, SavedOutfit
from models.preferences import ColorCombination
from models.taxonomy import validate_occasion, validate_temperature_category
from models.wardrobe_item import ClothingItem


class ClothingItemPayload(BaseModel):
    """Input contract for a wardrobe entry."""

    item_id: str = Field(min_length=1)
    clothing_type: str = Field(min_length=1)
    colors: List[str] = []
    is_dirty: bool = False
    image_url: Optional[str] = None

    def to_item(self, user_id: str | None = None) -> ClothingItem:
        return ClothingItem(
            item_id=self.item_id,
            clothing_type=self.clothing_type,
            colors=self.colors,
            is_dirty=self.is_dirty,
            user_id=user_id,
            image_url=self.image_url,
        )


class ColorCombinationPayload(BaseModel):
    """Input contract for a liked color pairing."""

    top_color: str = Field(min_length=1)
    bottom_color: str = Field(min_length=1)

    def to_combination(self) -> ColorCombination:
        return ColorCombination(top_color=self.top_color, bottom_color=self.bottom_color)


class OutfitWearPayload(BaseModel):
    """Input contract for logging or importing a worn outfit."""

    worn_date: date
    top_id: Optional[str] = None
    bottom_id: str = Field(min_length=1)
    shoes_id: str = Field(min_length=1)
    outerwear_id: Optional[str] = None
    rating: Optional[int] = Field(default=None, ge=1, le=10)
    comfort_rating: Optional[int] = Field(default=None, ge=1, le=10)
    notes: Optional[str] = None

    @model_validator(mode="after")
    def _require_upper_body(self) -> "OutfitWearPayload":
        if not self.top_id and not self.outerwear_id:
            raise ValueError("a wear needs a top or an outerwear item")
        return self

    def to_wear(self, user_id: str | None = None) -> OutfitWear:
        return OutfitWear(
            worn_date=self.worn_date,
            top_id=self.top_id,
            bottom_id=self.bottom_id,
            shoes_id=self.shoes_id,
            outerwear_id=self.outerwear_id,
            rating=self.rating,
            comfort_rating=self.comfort_rating,
            user_id=user_id,
            notes=self.notes,
        )


class ItemRequest(BaseModel):
    """Envelope for adding a wardrobe entry."""

    user_id: str = Field(min_length=1)
    item: ClothingItemPayload


class DirtyFlagRequest(BaseModel):
    """Envelope for marking an item clean or dirty."""

    user_id: str = Field(min_length=1)
    is_dirty: bool


class ColorCombinationRequest(BaseModel):
    """Envelope for liking a color pairing."""

    user_id: str = Field(min_length=1)
    combination: ColorCombinationPayload


class SavedOutfitPayload(BaseModel):
    """Input contract for a favourite outfit. Outerwear is the only optional piece."""

    top_id: str = Field(min_length=1)
    outerwear_id: Optional[str] = None
    bottom_id: str = Field(min_length=1)
    shoes_id: str = Field(min_length=1)

    def to_saved(self) -> SavedOutfit:
        return SavedOutfit(
            top_id=self.top_id,
            outerwear_id=self.outerwear_id or None,
            bottom_id=self.bottom_id,
            shoes_id=self.shoes_id,
        )


class SavedOutfitRequest(BaseModel):
    user_id: str = Field(min_length=1)
    outfit: SavedOutfitPayload


class RatingRequest(BaseModel):
    """Envelope for rating a logged wear."""

    user_id: str = Field(min_length=1)
    rating: int = Field(ge=1, le=10)
    comfort_rating: Optional[int] = Field(default=None, ge=1, le=10)


class SuggestionRequest(BaseModel):
    """Envelope for one outfit suggestion request."""

    user_id: str = Field(min_length=1)
    temperature_f: Optional[float] = None
    temperature_category: Optional[str] = None
    occasion: Optional[str] = None
    zip_code: Optional[str] = None
    count: Optional[int] = Field(default=None, ge=1, le=100)

    @field_validator("temperature_category")
    @classmethod
    def _validate_category(cls, value: Optional[str]) -> Optional[str]:
        return validate_temperature_category(value) if value else None

    @field_validator("occasion")
    @classmethod
    def _validate_occasion(cls, value: Optional[str]) -> Optional[str]:
        return validate_occasion(value) if value else None

    @field_validator("temperature_f")
    @classmethod
    def _validate_temperature(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value != value:
            raise ValueError("temperature_f must be a number")
        return value


class ValidationResult(BaseModel):
    """Wrapper returned to callers when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    details = exc.errors(include_url=False, include_context=False)
    return ValidationResult(message=message, details=[dict(error) for error in details]).model_dump()


__all__ = [
    "ClothingItemPayload",
    "ColorCombinationPayload",
    "OutfitWearPayload",
    "ItemRequest",
    "DirtyFlagRequest",
    "ColorCombinationRequest",
    "SavedOutfitPayload",
    "SavedOutfitRequest",
    "RatingRequest",
    "SuggestionRequest",
    "ValidationResult",
    "validation_failure",
]
