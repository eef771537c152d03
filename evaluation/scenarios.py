"""Evaluation scenarios exercising weather, occasion and wear-history signals."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, List, Optional

TARGET_DATE = date(2025, 11, 30)


@dataclass
class EvaluationScenario:
    name: str
    description: str
    wardrobe_items: List[Dict[str, object]]
    expectations: Dict[str, object]
    temperature_category: Optional[str] = None
    occasion: Optional[str] = None
    liked_combinations: List[Dict[str, str]] = field(default_factory=list)
    wears: List[Dict[str, object]] = field(default_factory=list)
    target_date: date = TARGET_DATE
    seed: int = 7


def _wardrobe_fixtures() -> List[Dict[str, object]]:
    return [
        {"item_id": "top_tee", "clothing_type": "T-Shirt", "colors": ["white"]},
        {"item_id": "top_tank", "clothing_type": "Tank Top", "colors": ["black"]},
        {"item_id": "top_oxford", "clothing_type": "Button-Up Shirt", "colors": ["light blue"]},
        {"item_id": "top_hoodie", "clothing_type": "Hoodie", "colors": ["gray"]},
        {"item_id": "outer_jacket", "clothing_type": "Jacket", "colors": ["navy blue"]},
        {"item_id": "outer_sweater", "clothing_type": "Sweater", "colors": ["beige"]},
        {"item_id": "bottom_jeans", "clothing_type": "Jeans", "colors": ["denim"]},
        {"item_id": "bottom_shorts", "clothing_type": "Shorts", "colors": ["beige"]},
        {"item_id": "bottom_pants", "clothing_type": "Pants", "colors": ["black"]},
        {"item_id": "shoes_sneakers", "clothing_type": "Shoes", "colors": ["white"]},
        {"item_id": "shoes_boots", "clothing_type": "Shoes", "colors": ["brown"]},
    ]


SCENARIOS: List[EvaluationScenario] = [
    EvaluationScenario(
        name="hot_day",
        description="Hot weather never suggests outerwear, sweats or heavy layers.",
        wardrobe_items=_wardrobe_fixtures(),
        temperature_category="hot",
        expectations={"min_outfits": 1, "forbid_outerwear": True},
    ),
    EvaluationScenario(
        name="cold_day",
        description="Cold weather excludes tees, tanks and shorts, and favours layering.",
        wardrobe_items=_wardrobe_fixtures(),
        temperature_category="cold",
        expectations={
            "min_outfits": 1,
            "forbid_items": ["top_tee", "top_tank", "bottom_shorts"],
            "best_has_outerwear": True,
        },
    ),
    EvaluationScenario(
        name="work_occasion",
        description="Work occasion ranks a work-appropriate top first.",
        wardrobe_items=_wardrobe_fixtures(),
        occasion="Work",
        liked_combinations=[{"top_color": "light blue", "bottom_color": "black"}],
        expectations={"min_outfits": 1, "best_top": "top_oxford"},
    ),
    EvaluationScenario(
        name="fresh_rotation",
        description="Items worn in the last week are ranked below unworn ones.",
        wardrobe_items=_wardrobe_fixtures(),
        temperature_category="warm",
        wears=[
            {
                "worn_date": TARGET_DATE - timedelta(days=1),
                "top_id": "top_tee",
                "bottom_id": "bottom_jeans",
                "shoes_id": "shoes_sneakers",
            }
        ],
        expectations={"min_outfits": 1, "best_avoids": ["top_tee", "bottom_jeans", "shoes_sneakers"]},
    ),
    EvaluationScenario(
        name="no_shoes",
        description="A wardrobe without shoes yields no outfits rather than an error.",
        wardrobe_items=[item for item in _wardrobe_fixtures() if item["clothing_type"] != "Shoes"],
        expectations={"max_outfits": 0},
    ),
]
