"""Deterministic scoring for candidate outfits.

Five independent scorers each map a candidate and part of the context to a
value in ``[0, 1]``. A scorer without enough context to discriminate returns
:data:`NEUTRAL_SCORE`. The weather scorer can also hard-reject a candidate,
which forces the composite to exactly zero.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from models.outfit import OutfitWear
from models.preferences import ColorCombination, liked_pairs
from models.taxonomy import DEFAULT_TAXONOMY, Taxonomy
from models.wardrobe_item import ClothingItem

NEUTRAL_SCORE = 0.5

WEIGHTS: Dict[str, float] = {
    "color_harmony": 0.30,
    "weather": 0.25,
    "variety": 0.20,
    "occasion": 0.15,
    "comfort": 0.10,
}

if math.fsum(WEIGHTS.values()) != 1.0:
    raise RuntimeError(f"Outfit scoring weights must sum to 1.0, got {math.fsum(WEIGHTS.values())}")

LIKED_PAIR_SCORE = 1.0
UNLIKED_PAIR_SCORE = 0.3
MISSING_COLOR_SCORE = 0.3
OUTERWEAR_HARMONY_BONUS = 0.15

SUGGESTED_ITEM_BONUS = 0.15
MISSING_REQUIRED_OUTERWEAR_PENALTY = 0.3
SUGGESTED_OUTERWEAR_BONUS = 0.1
HOT_OUTERWEAR_PENALTY = 0.2

RECENT_ITEM_PENALTY = 0.25
DEFAULT_COMFORT_RATING = 5
COMFORT_SLOTS = 3


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


@dataclass(frozen=True)
class ScoringContext:
    """Soft constraints for one generation call. Empty or ``None`` means no signal."""

    liked_combinations: Sequence[ColorCombination] = ()
    temperature_category: Optional[str] = None
    recent_wears: Sequence[OutfitWear] = ()
    occasion: Optional[str] = None
    rated_wears: Sequence[OutfitWear] = ()


@dataclass(frozen=True)
class WeatherAssessment:
    score: float
    blocked_item_id: Optional[str] = None

    @property
    def rejected(self) -> bool:
        return self.blocked_item_id is not None


@dataclass(frozen=True)
class OutfitScore:
    """Composite score plus the per-scorer values that produced it."""

    composite: float
    sub_scores: Dict[str, float] = field(default_factory=dict)
    rejected: bool = False
    reason: Optional[str] = None


def color_harmony_score(
    top: ClothingItem,
    bottom: ClothingItem,
    outerwear: Optional[ClothingItem],
    liked_combinations: Sequence[ColorCombination],
) -> float:
    if not liked_combinations:
        return NEUTRAL_SCORE

    top_color = top.primary_color
    bottom_color = bottom.primary_color
    if not top_color or not bottom_color:
        return MISSING_COLOR_SCORE

    liked = liked_pairs(liked_combinations)
    score = LIKED_PAIR_SCORE if (top_color, bottom_color) in liked else UNLIKED_PAIR_SCORE

    # outerwear is layered over the top, so it plays the "top" role of the pair
    if outerwear is not None and outerwear.primary_color:
        if (outerwear.primary_color, top_color) in liked:
            score = min(1.0, score + OUTERWEAR_HARMONY_BONUS)
    return score


def assess_weather(
    top: ClothingItem,
    bottom: ClothingItem,
    outerwear: Optional[ClothingItem],
    temperature_category: Optional[str],
    taxonomy: Taxonomy = DEFAULT_TAXONOMY,
) -> WeatherAssessment:
    """Weather fitness with the id of the first blocked item, if any."""

    if not temperature_category:
        return WeatherAssessment(score=NEUTRAL_SCORE)

    score = NEUTRAL_SCORE
    for item in (top, bottom, outerwear):
        if item is None:
            continue
        if not taxonomy.is_appropriate(item.clothing_type, temperature_category):
            return WeatherAssessment(score=0.0, blocked_item_id=item.item_id)
        if taxonomy.is_suggested(item.clothing_type, temperature_category):
            score += SUGGESTED_ITEM_BONUS

    if taxonomy.outerwear_required(temperature_category) and outerwear is None:
        score -= MISSING_REQUIRED_OUTERWEAR_PENALTY
    if taxonomy.outerwear_suggested(temperature_category) and outerwear is not None:
        score += SUGGESTED_OUTERWEAR_BONUS
    if temperature_category == "hot" and outerwear is not None:
        score -= HOT_OUTERWEAR_PENALTY
    return WeatherAssessment(score=_clamp(score))


def weather_score(
    top: ClothingItem,
    bottom: ClothingItem,
    outerwear: Optional[ClothingItem],
    temperature_category: Optional[str],
    taxonomy: Taxonomy = DEFAULT_TAXONOMY,
) -> float:
    """Weather fitness in ``[0, 1]``; exactly ``0.0`` when any piece is blocked."""

    return assess_weather(top, bottom, outerwear, temperature_category, taxonomy).score


def variety_score(
    top: ClothingItem,
    bottom: ClothingItem,
    shoes: ClothingItem,
    outerwear: Optional[ClothingItem],
    recent_wears: Sequence[OutfitWear],
) -> float:
    if not recent_wears:
        return NEUTRAL_SCORE

    recent_ids = {item_id for wear in recent_wears for item_id in wear.item_ids}
    candidate_ids = [item.item_id for item in (top, bottom, shoes, outerwear) if item is not None]
    overlap = sum(1 for item_id in candidate_ids if item_id in recent_ids)
    return max(0.0, 1.0 - RECENT_ITEM_PENALTY * overlap)


def occasion_score(
    top: ClothingItem,
    bottom: ClothingItem,
    outerwear: Optional[ClothingItem],
    occasion: Optional[str],
    taxonomy: Taxonomy = DEFAULT_TAXONOMY,
) -> float:
    if not occasion:
        return NEUTRAL_SCORE

    rules = taxonomy.occasion_allow_list(occasion)
    checks: List[bool] = [
        taxonomy.section_of(top.clothing_type) == "Top" and top.clothing_type in rules.tops,
        bottom.clothing_type in rules.bottoms,
    ]
    if outerwear is not None:
        checks.append(outerwear.clothing_type in rules.outerwear)

    if not checks:
        return NEUTRAL_SCORE
    return sum(1 for passed in checks if passed) / len(checks)


def _wear_rating(wear: OutfitWear) -> int:
    if wear.comfort_rating is not None:
        return wear.comfort_rating
    if wear.rating is not None:
        return wear.rating
    return DEFAULT_COMFORT_RATING


def comfort_score(
    top: ClothingItem,
    bottom: ClothingItem,
    shoes: ClothingItem,
    rated_wears: Sequence[OutfitWear],
) -> float:
    """Overlap-weighted mean of past ratings. Outerwear never takes part."""

    if not rated_wears:
        return NEUTRAL_SCORE

    candidate_ids = {top.item_id, bottom.item_id, shoes.item_id}
    weighted_total = 0.0
    matches = 0
    for wear in rated_wears:
        wear_ids = [item_id for item_id in (wear.top_id, wear.bottom_id, wear.shoes_id) if item_id]
        overlap = sum(1 for item_id in wear_ids if item_id in candidate_ids)
        if overlap == 0:
            continue
        weighted_total += (_wear_rating(wear) / 10) * (overlap / COMFORT_SLOTS)
        matches += 1

    return weighted_total / matches if matches else NEUTRAL_SCORE


def score_outfit(
    top: ClothingItem,
    outerwear: Optional[ClothingItem],
    bottom: ClothingItem,
    shoes: ClothingItem,
    context: ScoringContext,
    taxonomy: Taxonomy = DEFAULT_TAXONOMY,
) -> OutfitScore:
    """Calculate the weighted composite score and sub scores for one candidate."""

    weather = assess_weather(top, bottom, outerwear, context.temperature_category, taxonomy)
    sub_scores = {
        "color_harmony": color_harmony_score(top, bottom, outerwear, context.liked_combinations),
        "weather": weather.score,
        "variety": variety_score(top, bottom, shoes, outerwear, context.recent_wears),
        "occasion": occasion_score(top, bottom, outerwear, context.occasion, taxonomy),
        "comfort": comfort_score(top, bottom, shoes, context.rated_wears),
    }

    if context.temperature_category and weather.score == 0.0:
        if weather.rejected:
            reason = f"{weather.blocked_item_id} blocked in {context.temperature_category} weather"
        else:
            reason = "weather fitness is zero"
        return OutfitScore(composite=0.0, sub_scores=sub_scores, rejected=True, reason=reason)

    composite = math.fsum(sub_scores[name] * weight for name, weight in WEIGHTS.items())
    return OutfitScore(composite=_clamp(composite), sub_scores=sub_scores)


__all__ = [
    "NEUTRAL_SCORE",
    "WEIGHTS",
    "ScoringContext",
    "OutfitScore",
    "WeatherAssessment",
    "assess_weather",
    "color_harmony_score",
    "weather_score",
    "variety_score",
    "occasion_score",
    "comfort_score",
    "score_outfit",
]
