"""Bounded randomized outfit assembly with transparent diagnostics."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set, Tuple

from logic.outfit_scoring import ScoringContext, score_outfit
from models.outfit import OutfitCandidate
from models.taxonomy import DEFAULT_TAXONOMY, Taxonomy
from models.wardrobe_item import ClothingItem
from stylist_app.logging_config import get_logger, log_event

logger = get_logger(__name__)

MAX_COMBINATIONS = 500
OVERSAMPLING_FACTOR = 3
OPTIONAL_OUTERWEAR_PROBABILITY = 0.4
DEFAULT_DESIRED_COUNT = 10
_LAYERING_CATEGORIES = {"cold", "cool"}


@dataclass
class WardrobePartition:
    """Wardrobe items split by body section. Unmapped types land in ``unmapped_ids``."""

    tops: List[ClothingItem] = field(default_factory=list)
    outerwear: List[ClothingItem] = field(default_factory=list)
    bottoms: List[ClothingItem] = field(default_factory=list)
    shoes: List[ClothingItem] = field(default_factory=list)
    unmapped_ids: List[str] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return bool(self.tops and self.bottoms and self.shoes)


@dataclass
class GenerationDiagnostics:
    attempts: int = 0
    duplicate_draws: int = 0
    rejected: int = 0
    kept: int = 0
    cap: int = 0
    reason: Optional[str] = None


def partition_wardrobe(items: Sequence[ClothingItem], taxonomy: Taxonomy = DEFAULT_TAXONOMY) -> WardrobePartition:
    """Group items by section, silently excluding types the taxonomy does not know."""

    partition = WardrobePartition()
    buckets: Dict[str, List[ClothingItem]] = {
        "Top": partition.tops,
        "Outerwear": partition.outerwear,
        "Bottom": partition.bottoms,
        "Shoes": partition.shoes,
    }
    for item in items:
        section = taxonomy.section_of(item.clothing_type)
        if section in buckets:
            buckets[section].append(item)
        else:
            partition.unmapped_ids.append(item.item_id)
    if partition.unmapped_ids:
        logger.debug("Excluded %s items with unmapped clothing types", len(partition.unmapped_ids))
    return partition


def combination_cap(partition: WardrobePartition) -> int:
    """Upper bound on unique candidates collected in one call."""

    total = len(partition.tops) * len(partition.bottoms) * len(partition.shoes) * (len(partition.outerwear) + 1)
    return min(total, MAX_COMBINATIONS)


def _draw(
    partition: WardrobePartition, temperature_category: Optional[str], rng: random.Random
) -> Tuple[ClothingItem, Optional[ClothingItem], ClothingItem, ClothingItem]:
    top = rng.choice(partition.tops)
    bottom = rng.choice(partition.bottoms)
    shoes = rng.choice(partition.shoes)
    outerwear = None
    if partition.outerwear:
        if temperature_category in _LAYERING_CATEGORIES or rng.random() < OPTIONAL_OUTERWEAR_PROBABILITY:
            outerwear = rng.choice(partition.outerwear)
    return top, outerwear, bottom, shoes


def _ranking_key(candidate: OutfitCandidate) -> Tuple[float, str, str, str, str]:
    outerwear_id = candidate.outerwear.item_id if candidate.outerwear else ""
    return (
        -candidate.score,
        candidate.top.item_id,
        outerwear_id,
        candidate.bottom.item_id,
        candidate.shoes.item_id,
    )


def generate_outfits(
    items: Sequence[ClothingItem],
    context: ScoringContext,
    desired_count: int = DEFAULT_DESIRED_COUNT,
    rng: Optional[random.Random] = None,
    taxonomy: Taxonomy = DEFAULT_TAXONOMY,
) -> List[OutfitCandidate]:
    """Sample, score and rank up to ``desired_count`` unique outfits.

    An empty list is a normal result when the wardrobe lacks a top, bottom or
    pair of shoes, or when every sampled candidate is hard-rejected. Ties on
    score are broken by ascending (top, outerwear, bottom, shoes) ids, with a
    missing outerwear sorting first.
    """

    if desired_count < 1:
        raise ValueError(f"desired_count must be positive, got {desired_count}")

    rng = rng or random.Random()
    partition = partition_wardrobe(items, taxonomy)
    diagnostics = GenerationDiagnostics()

    if not partition.is_complete:
        diagnostics.reason = "missing_required_sections"
        _log_generation(partition, diagnostics, returned=0)
        return []

    cap = combination_cap(partition)
    diagnostics.cap = cap
    seen: Set[Tuple[str, str, str, str]] = set()
    kept: List[OutfitCandidate] = []

    while diagnostics.attempts < cap * OVERSAMPLING_FACTOR and len(kept) < cap:
        diagnostics.attempts += 1
        top, outerwear, bottom, shoes = _draw(partition, context.temperature_category, rng)
        candidate = OutfitCandidate(top=top, outerwear=outerwear, bottom=bottom, shoes=shoes)
        if candidate.key in seen:
            diagnostics.duplicate_draws += 1
            continue
        seen.add(candidate.key)

        result = score_outfit(top, outerwear, bottom, shoes, context, taxonomy)
        if result.composite <= 0:
            diagnostics.rejected += 1
            continue
        candidate.score = result.composite
        candidate.sub_scores = result.sub_scores
        kept.append(candidate)

    diagnostics.kept = len(kept)
    kept.sort(key=_ranking_key)
    ranked = kept[:desired_count]
    _log_generation(partition, diagnostics, returned=len(ranked))
    return ranked


def _log_generation(partition: WardrobePartition, diagnostics: GenerationDiagnostics, returned: int) -> None:
    log_event(
        logger,
        logging.INFO,
        "outfit_generation_completed",
        tops=len(partition.tops),
        outerwear_items=len(partition.outerwear),
        bottoms=len(partition.bottoms),
        shoes=len(partition.shoes),
        unmapped=len(partition.unmapped_ids),
        cap=diagnostics.cap,
        attempts=diagnostics.attempts,
        duplicate_draws=diagnostics.duplicate_draws,
        rejected=diagnostics.rejected,
        kept=diagnostics.kept,
        returned=returned,
        reason=diagnostics.reason,
    )


__all__ = [
    "MAX_COMBINATIONS",
    "OVERSAMPLING_FACTOR",
    "OPTIONAL_OUTERWEAR_PROBABILITY",
    "DEFAULT_DESIRED_COUNT",
    "WardrobePartition",
    "partition_wardrobe",
    "combination_cap",
    "generate_outfits",
]
