"""Scoring function coverage: neutral defaults, edge cases and the weighted composite."""

from __future__ import annotations

import math
import sys
from datetime import date
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.outfit_scoring import (
    NEUTRAL_SCORE,
    WEIGHTS,
    ScoringContext,
    color_harmony_score,
    comfort_score,
    occasion_score,
    score_outfit,
    variety_score,
    weather_score,
)
from models.outfit import OutfitWear
from models.preferences import ColorCombination
from models.taxonomy import build_taxonomy
from models.wardrobe_item import ClothingItem


def _item(item_id: str, clothing_type: str, *colors: str) -> ClothingItem:
    return ClothingItem(item_id=item_id, clothing_type=clothing_type, colors=list(colors))


TOP = _item("A", "T-Shirt", "blue")
BOTTOM = _item("B", "Jeans", "black")
SHOES = _item("C", "Shoes", "white")


def _wear(top="A", bottom="B", shoes="C", outerwear=None, rating=None, comfort=None) -> OutfitWear:
    return OutfitWear(
        worn_date=date(2025, 11, 29),
        top_id=top,
        bottom_id=bottom,
        shoes_id=shoes,
        outerwear_id=outerwear,
        rating=rating,
        comfort_rating=comfort,
    )


def test_weights_sum_to_one():
    assert math.fsum(WEIGHTS.values()) == 1.0
    assert set(WEIGHTS) == {"color_harmony", "weather", "variety", "occasion", "comfort"}


def test_every_scorer_is_neutral_without_context():
    assert color_harmony_score(TOP, BOTTOM, None, []) == NEUTRAL_SCORE
    assert weather_score(TOP, BOTTOM, None, None) == NEUTRAL_SCORE
    assert variety_score(TOP, BOTTOM, SHOES, None, []) == NEUTRAL_SCORE
    assert occasion_score(TOP, BOTTOM, None, None) == NEUTRAL_SCORE
    assert comfort_score(TOP, BOTTOM, SHOES, []) == NEUTRAL_SCORE

    result = score_outfit(TOP, None, BOTTOM, SHOES, ScoringContext())
    assert result.composite == pytest.approx(0.5)
    assert not result.rejected


def test_liked_pair_lifts_composite():
    context = ScoringContext(liked_combinations=[ColorCombination("blue", "black")])
    result = score_outfit(TOP, None, BOTTOM, SHOES, context)
    assert result.sub_scores["color_harmony"] == 1.0
    # 0.30*1.0 + 0.25*0.5 + 0.20*0.5 + 0.15*0.5 + 0.10*0.5
    assert result.composite == pytest.approx(0.65)


def test_scoring_is_deterministic():
    context = ScoringContext(
        liked_combinations=[ColorCombination("blue", "black")],
        temperature_category="warm",
        recent_wears=[_wear(top="X")],
        occasion="Casual",
        rated_wears=[_wear(comfort=7)],
    )
    jacket = _item("J", "Jacket", "navy")
    first = score_outfit(TOP, jacket, BOTTOM, SHOES, context)
    second = score_outfit(TOP, jacket, BOTTOM, SHOES, context)
    assert first == second


def test_color_harmony_is_case_insensitive_and_penalises_missing_colors():
    liked = [ColorCombination("Blue", "BLACK")]
    assert color_harmony_score(_item("t", "Polo", "BLUE"), BOTTOM, None, liked) == 1.0
    assert color_harmony_score(_item("t", "Polo"), BOTTOM, None, liked) == 0.3
    assert color_harmony_score(TOP, _item("b", "Pants", "red"), None, liked) == 0.3


def test_color_harmony_uses_only_primary_color():
    liked = [ColorCombination("blue", "black")]
    assert color_harmony_score(_item("t", "Polo", "red", "blue"), BOTTOM, None, liked) == 0.3


def test_blank_first_color_is_not_replaced_by_the_second():
    liked = [ColorCombination("blue", "black")]
    blank_first = _item("t", "Polo", " ", "blue")
    assert blank_first.colors == ["", "blue"]
    assert blank_first.primary_color is None
    assert color_harmony_score(blank_first, BOTTOM, None, liked) == 0.3


def test_outerwear_bonus_is_capped():
    jacket = _item("J", "Jacket", "Navy")
    liked = [ColorCombination("blue", "black"), ColorCombination("navy", "blue")]
    assert color_harmony_score(TOP, BOTTOM, jacket, liked) == 1.0

    only_layer = [ColorCombination("navy", "blue")]
    assert color_harmony_score(TOP, BOTTOM, jacket, only_layer) == pytest.approx(0.45)


def test_weather_bonuses_and_penalties():
    tank = _item("t", "Tank Top", "white")
    shorts = _item("s", "Shorts", "beige")
    assert weather_score(tank, shorts, None, "hot") == pytest.approx(0.8)

    hoodie = _item("h", "Hoodie", "gray")
    pants = _item("p", "Pants", "black")
    assert weather_score(hoodie, pants, None, "cold") == pytest.approx(0.5)
    assert weather_score(hoodie, pants, _item("j", "Jacket", "navy"), "cold") == 1.0

    shirt = _item("l", "Long Sleeve Shirt", "white")
    assert weather_score(shirt, BOTTOM, None, "cool") == pytest.approx(0.8)
    assert weather_score(shirt, BOTTOM, _item("w", "Sweater", "beige"), "cool") == 1.0


def test_unknown_types_never_block_weather():
    cape = _item("y", "Cape", "red")
    assert weather_score(_item("l", "Long Sleeve Shirt"), cape, None, "warm") == pytest.approx(0.65)
    assert weather_score(_item("l", "Long Sleeve Shirt"), _item("p", "Pants"), None, "warm") == pytest.approx(0.8)


def test_blocked_item_hard_rejects_candidate():
    context = ScoringContext(
        liked_combinations=[ColorCombination("blue", "black")],
        temperature_category="cold",
    )
    assert weather_score(TOP, BOTTOM, None, "cold") == 0.0
    result = score_outfit(TOP, None, BOTTOM, SHOES, context)
    assert result.composite == 0.0
    assert result.rejected
    assert result.sub_scores["color_harmony"] == 1.0


def test_hard_reject_with_injected_taxonomy():
    taxonomy = build_taxonomy(weather_table={"T-Shirt": (["hot"], [])})
    context = ScoringContext(liked_combinations=[ColorCombination("blue", "black")], temperature_category="hot")
    result = score_outfit(TOP, None, BOTTOM, SHOES, context, taxonomy=taxonomy)
    assert result.composite == 0.0
    assert result.rejected


def test_variety_counts_recent_items():
    assert variety_score(TOP, BOTTOM, SHOES, None, [_wear()]) == pytest.approx(0.25)
    jacket = _item("J", "Jacket", "navy")
    assert variety_score(TOP, BOTTOM, SHOES, jacket, [_wear(outerwear="J")]) == 0.0
    assert variety_score(TOP, BOTTOM, SHOES, None, [_wear("X", "Y", "Z")]) == 1.0


def test_occasion_fraction_of_passed_checks():
    button_up = _item("t", "Button-Up Shirt", "white")
    pants = _item("p", "Pants", "black")
    assert occasion_score(button_up, pants, None, "Work") == 1.0
    assert occasion_score(TOP, pants, None, "Work") == 0.5
    assert occasion_score(TOP, pants, _item("j", "Jacket"), "Work") == pytest.approx(1 / 3)
    assert occasion_score(button_up, pants, _item("w", "Sweater"), "Work") == 1.0


def test_occasion_top_check_requires_top_section():
    sweater_as_top = _item("w", "Sweater", "beige")
    assert occasion_score(sweater_as_top, BOTTOM, None, "Casual") == 0.5


def test_comfort_weights_ratings_by_overlap():
    assert comfort_score(TOP, BOTTOM, SHOES, [_wear(comfort=8)]) == pytest.approx(0.8)
    partial = _wear(top="A", bottom="X", shoes="Y", rating=6)
    assert comfort_score(TOP, BOTTOM, SHOES, [partial]) == pytest.approx(0.2)
    assert comfort_score(TOP, BOTTOM, SHOES, [_wear(comfort=8), partial]) == pytest.approx(0.5)


def test_comfort_prefers_comfort_rating_then_rating_then_default():
    assert comfort_score(TOP, BOTTOM, SHOES, [_wear(rating=2, comfort=9)]) == pytest.approx(0.9)
    assert comfort_score(TOP, BOTTOM, SHOES, [_wear(rating=4)]) == pytest.approx(0.4)
    assert comfort_score(TOP, BOTTOM, SHOES, [_wear()]) == pytest.approx(0.5)


def test_comfort_ignores_outerwear_and_unrelated_wears():
    jacket_only = _wear(top="X", bottom="Y", shoes="Z", outerwear="A", comfort=10)
    assert comfort_score(TOP, BOTTOM, SHOES, [jacket_only]) == NEUTRAL_SCORE
