"""Canonical taxonomy definitions for wardrobe items.

This module centralises the clothing-type labels, the body section each type
belongs to, the weather rules per type and the per-occasion allow-lists. The
tables are frozen into a single :class:`Taxonomy` object that scorers and the
outfit generator receive by reference.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Literal, Mapping, Optional

TemperatureCategory = Literal["cold", "cool", "warm", "hot"]
Occasion = Literal["Casual", "Work", "Date", "Active"]
Section = Literal["Top", "Bottom", "Outerwear", "Shoes"]

TEMPERATURE_CATEGORIES: List[str] = ["cold", "cool", "warm", "hot"]
OCCASIONS: List[str] = ["Casual", "Work", "Date", "Active"]
SECTIONS: List[str] = ["Top", "Bottom", "Outerwear", "Shoes"]

# Upper bounds (exclusive, Fahrenheit) for every category but the last.
TEMPERATURE_THRESHOLDS_F: Dict[str, float] = {
    "cold": 45,
    "cool": 65,
    "warm": 80,
}

CLOTHING_TYPES: Dict[str, List[str]] = {
    "Top": ["T-Shirt", "Long Sleeve Shirt", "Polo", "Tank Top", "Button-Up Shirt", "Hoodie"],
    "Bottom": ["Jeans", "Pants", "Shorts", "Sweats", "Skirt", "Leggings"],
    "Outerwear": ["Jacket", "Sweatshirt", "Crewneck", "Sweater"],
    "Shoes": ["Shoes"],
}

# type -> (blocked_in, suggested_in)
_WEATHER_TABLE: Dict[str, tuple] = {
    "Tank Top": (["cold", "cool"], ["hot"]),
    "T-Shirt": (["cold"], ["warm", "hot"]),
    "Long Sleeve Shirt": ([], ["cool", "warm"]),
    "Polo": (["cold"], ["warm"]),
    "Button-Up Shirt": ([], ["cool", "warm"]),
    "Hoodie": ([], ["cold", "cool"]),
    "Jacket": (["hot"], ["cold", "cool"]),
    "Sweatshirt": (["hot"], ["cold", "cool"]),
    "Crewneck": (["hot"], ["cold", "cool"]),
    "Sweater": (["hot"], ["cold", "cool"]),
    "Shorts": (["cold"], ["hot", "warm"]),
    "Skirt": (["cold"], ["warm", "hot"]),
    "Jeans": ([], ["cool", "warm"]),
    "Pants": ([], ["cold", "cool", "warm"]),
    "Sweats": (["hot"], ["cold", "cool"]),
    "Leggings": ([], ["cold", "cool", "warm"]),
}

_OCCASION_TABLE: Dict[str, Dict[str, List[str]]] = {
    "Casual": {
        "tops": ["T-Shirt", "Long Sleeve Shirt", "Polo", "Tank Top", "Hoodie"],
        "bottoms": ["Jeans", "Pants", "Shorts", "Sweats", "Leggings"],
        "outerwear": ["Jacket", "Sweatshirt", "Crewneck", "Sweater"],
        "shoes": ["Shoes"],
    },
    "Work": {
        "tops": ["Long Sleeve Shirt", "Polo", "Button-Up Shirt"],
        "bottoms": ["Jeans", "Pants", "Skirt"],
        "outerwear": ["Sweater", "Crewneck"],
        "shoes": ["Shoes"],
    },
    "Date": {
        "tops": ["Long Sleeve Shirt", "Polo", "Button-Up Shirt"],
        "bottoms": ["Jeans", "Pants", "Skirt"],
        "outerwear": ["Jacket", "Sweater"],
        "shoes": ["Shoes"],
    },
    "Active": {
        "tops": ["T-Shirt", "Tank Top", "Hoodie"],
        "bottoms": ["Shorts", "Sweats", "Leggings"],
        "outerwear": ["Sweatshirt", "Jacket"],
        "shoes": ["Shoes"],
    },
}


@dataclass(frozen=True)
class WeatherRule:
    """Temperature categories a clothing type is blocked in or suggested for."""

    blocked_in: FrozenSet[str] = frozenset()
    suggested_in: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class OccasionRule:
    """Clothing types allowed per section for one occasion."""

    tops: FrozenSet[str] = frozenset()
    bottoms: FrozenSet[str] = frozenset()
    outerwear: FrozenSet[str] = frozenset()
    shoes: FrozenSet[str] = frozenset()


_NO_RULE = WeatherRule()


@dataclass(frozen=True)
class Taxonomy:
    """Immutable lookup tables shared by the scorers and the generator."""

    type_to_section: Mapping[str, str] = field(default_factory=dict)
    weather_rules: Mapping[str, WeatherRule] = field(default_factory=dict)
    occasion_rules: Mapping[str, OccasionRule] = field(default_factory=dict)

    def section_of(self, clothing_type: str) -> Optional[str]:
        """Return the body section of a type, or ``None`` when it is unmapped."""

        return self.type_to_section.get(clothing_type)

    def weather_rule(self, clothing_type: str) -> WeatherRule:
        return self.weather_rules.get(clothing_type, _NO_RULE)

    def occasion_allow_list(self, occasion: str) -> OccasionRule:
        return self.occasion_rules[occasion]

    def is_appropriate(self, clothing_type: str, category: str) -> bool:
        return category not in self.weather_rule(clothing_type).blocked_in

    def is_suggested(self, clothing_type: str, category: str) -> bool:
        return category in self.weather_rule(clothing_type).suggested_in

    @staticmethod
    def outerwear_required(category: str) -> bool:
        return category == "cold"

    @staticmethod
    def outerwear_suggested(category: str) -> bool:
        return category in {"cold", "cool"}


def build_taxonomy(
    clothing_types: Mapping[str, Iterable[str]] = CLOTHING_TYPES,
    weather_table: Mapping[str, tuple] = _WEATHER_TABLE,
    occasion_table: Mapping[str, Mapping[str, Iterable[str]]] = _OCCASION_TABLE,
) -> Taxonomy:
    """Freeze plain tables into a :class:`Taxonomy`."""

    type_to_section = {
        clothing_type: section for section, types in clothing_types.items() for clothing_type in types
    }
    weather_rules = {
        clothing_type: WeatherRule(blocked_in=frozenset(blocked), suggested_in=frozenset(suggested))
        for clothing_type, (blocked, suggested) in weather_table.items()
    }
    occasion_rules = {
        occasion: OccasionRule(
            tops=frozenset(rules.get("tops", [])),
            bottoms=frozenset(rules.get("bottoms", [])),
            outerwear=frozenset(rules.get("outerwear", [])),
            shoes=frozenset(rules.get("shoes", [])),
        )
        for occasion, rules in occasion_table.items()
    }
    return Taxonomy(
        type_to_section=type_to_section,
        weather_rules=weather_rules,
        occasion_rules=occasion_rules,
    )


DEFAULT_TAXONOMY = build_taxonomy()


def validate_temperature_category(value: str) -> str:
    """Validate and normalise a temperature category.

    Raises a :class:`ValueError` if the value is not one of the four categories.
    """

    key = str(value).strip().lower()
    if key not in TEMPERATURE_CATEGORIES:
        raise ValueError(f"Unsupported temperature category '{value}'. Allowed: {TEMPERATURE_CATEGORIES}")
    return key


def validate_occasion(value: str) -> str:
    """Validate an occasion name case-insensitively and return its canonical label."""

    key = str(value).strip().lower()
    for occasion in OCCASIONS:
        if occasion.lower() == key:
            return occasion
    raise ValueError(f"Unsupported occasion '{value}'. Allowed: {OCCASIONS}")


__all__ = [
    "TemperatureCategory",
    "Occasion",
    "Section",
    "TEMPERATURE_CATEGORIES",
    "TEMPERATURE_THRESHOLDS_F",
    "OCCASIONS",
    "SECTIONS",
    "CLOTHING_TYPES",
    "WeatherRule",
    "OccasionRule",
    "Taxonomy",
    "build_taxonomy",
    "DEFAULT_TAXONOMY",
    "validate_temperature_category",
    "validate_occasion",
]
