"""Outfit stylist agent wiring wardrobe snapshots into the outfit generator."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, List, Optional, Tuple

from agents.weather_agent import WeatherAgent
from logic.outfit_builder import generate_outfits
from logic.outfit_scoring import ScoringContext
from logic.suggestion_cycle import OutfitSuggestionCycle
from logic.weather_classifier import classify_temperature
from models.outfit import OutfitCandidate, OutfitWear, SavedOutfit
from models.preferences import ColorCombination
from models.taxonomy import validate_occasion, validate_temperature_category
from models.wardrobe_item import ClothingItem
from stylist_app.config import StylistConfig
from stylist_app.logging_config import get_logger, log_event, operation_context
from tools.wardrobe_store import WardrobeStore

logger = get_logger(__name__)

NO_OUTFITS_MESSAGE = "No valid outfits found. Try adding more items or adjusting your preferences."


@dataclass
class WardrobeSnapshot:
    """Everything the generator reads for one user at one point in time."""

    items: List[ClothingItem] = field(default_factory=list)
    liked_combinations: List[ColorCombination] = field(default_factory=list)
    recent_wears: List[OutfitWear] = field(default_factory=list)
    rated_wears: List[OutfitWear] = field(default_factory=list)


class OutfitStylistAgent:
    """Builds ranked outfit suggestions from a user's stored wardrobe."""

    def __init__(
        self,
        config: StylistConfig,
        store: WardrobeStore,
        weather_agent: WeatherAgent | None = None,
    ) -> None:
        self.config = config
        self.store = store
        self.weather_agent = weather_agent

    def load_snapshot(self, user_id: str, today: date | None = None) -> WardrobeSnapshot:
        """Read clean items, liked pairs, the recent-wear window and rated history."""

        today = today or date.today()
        since = today - timedelta(days=self.config.recent_window_days)
        return WardrobeSnapshot(
            items=self.store.list_items_for_user(user_id, include_dirty=False),
            liked_combinations=self.store.list_color_combinations(user_id),
            recent_wears=self.store.list_recent_wears(user_id, since=since),
            rated_wears=self.store.list_rated_wears(user_id, limit=self.config.rated_history_limit),
        )

    def resolve_temperature_category(
        self,
        temperature_category: Optional[str] = None,
        temperature_f: Optional[float] = None,
        zip_code: Optional[str] = None,
    ) -> Optional[str]:
        if temperature_category:
            return validate_temperature_category(temperature_category)
        if temperature_f is not None:
            return classify_temperature(temperature_f)
        zip_code = zip_code or self.config.default_zip_code
        if zip_code and self.weather_agent:
            return self.weather_agent.temperature_category(zip_code)
        return None

    def _generate(
        self,
        user_id: str,
        occasion: Optional[str],
        temperature_category: Optional[str],
        temperature_f: Optional[float],
        zip_code: Optional[str],
        count: Optional[int],
        today: date | None,
        rng: random.Random | None,
    ) -> Tuple[List[OutfitCandidate], WardrobeSnapshot, Dict[str, object]]:
        snapshot = self.load_snapshot(user_id, today=today)
        category = self.resolve_temperature_category(temperature_category, temperature_f, zip_code)
        resolved_occasion = validate_occasion(occasion) if occasion else None
        context = ScoringContext(
            liked_combinations=snapshot.liked_combinations,
            temperature_category=category,
            recent_wears=snapshot.recent_wears,
            occasion=resolved_occasion,
            rated_wears=snapshot.rated_wears,
        )
        desired = self.config.suggestion_count if count is None else count
        candidates = generate_outfits(snapshot.items, context, desired_count=desired, rng=rng)
        summary = {
            "temperature_category": category,
            "occasion": resolved_occasion,
            "requested": desired,
        }
        return candidates, snapshot, summary

    def recommend_outfits(
        self,
        user_id: str,
        occasion: Optional[str] = None,
        temperature_category: Optional[str] = None,
        temperature_f: Optional[float] = None,
        zip_code: Optional[str] = None,
        count: Optional[int] = None,
        today: date | None = None,
        rng: random.Random | None = None,
    ) -> Dict[str, object]:
        """Return ranked outfits, a user-facing rationale and a debug summary."""

        with operation_context("agent:stylist.recommend_outfits") as correlation_id:
            log_event(
                logger,
                level=logging.INFO,
                event="agent_call_started",
                agent="stylist",
                method="recommend_outfits",
                correlation_id=correlation_id,
                user_id=user_id,
                occasion=occasion,
            )
            candidates, snapshot, summary = self._generate(
                user_id, occasion, temperature_category, temperature_f, zip_code, count, today, rng
            )

            if candidates:
                user_facing_rationale = (
                    f"Generated {len(candidates)} outfits"
                    f" for {summary['temperature_category'] or 'any'} weather"
                    f" and {summary['occasion'] or 'any'} occasion."
                )
            else:
                user_facing_rationale = NO_OUTFITS_MESSAGE

            response = {
                "ranked_outfits": [candidate.to_dict() for candidate in candidates],
                "user_facing_rationale": user_facing_rationale,
                "debug_summary": {
                    "wardrobe_items": len(snapshot.items),
                    "liked_combinations": len(snapshot.liked_combinations),
                    "recent_wears": len(snapshot.recent_wears),
                    "rated_wears": len(snapshot.rated_wears),
                    **summary,
                },
            }
            log_event(
                logger,
                level=logging.INFO,
                event="agent_call_completed",
                agent="stylist",
                method="recommend_outfits",
                correlation_id=correlation_id,
                outfit_count=len(candidates),
            )
            return response

    def suggestion_cycle(
        self,
        user_id: str,
        occasion: Optional[str] = None,
        temperature_category: Optional[str] = None,
        temperature_f: Optional[float] = None,
        zip_code: Optional[str] = None,
        count: Optional[int] = None,
        today: date | None = None,
        rng: random.Random | None = None,
    ) -> OutfitSuggestionCycle:
        """Generate once and hand back a cycle for "next suggestion" browsing."""

        with operation_context("agent:stylist.suggestion_cycle") as correlation_id:
            candidates, _, _ = self._generate(
                user_id, occasion, temperature_category, temperature_f, zip_code, count, today, rng
            )
            log_event(
                logger,
                level=logging.INFO,
                event="agent_call_completed",
                agent="stylist",
                method="suggestion_cycle",
                correlation_id=correlation_id,
                outfit_count=len(candidates),
            )
            return OutfitSuggestionCycle(candidates)

    def log_wear(self, user_id: str, candidate: OutfitCandidate, worn_date: date | None = None) -> OutfitWear:
        """Record a chosen suggestion as worn on ``worn_date`` (today by default)."""

        wear = OutfitWear(
            worn_date=worn_date or date.today(),
            top_id=candidate.top.item_id,
            bottom_id=candidate.bottom.item_id,
            shoes_id=candidate.shoes.item_id,
            outerwear_id=candidate.outerwear.item_id if candidate.outerwear else None,
        )
        stored = self.store.record_wear(user_id, wear)
        logger.info("Logged wear %s", stored.wear_id)
        return stored

    def rate_wear(
        self, user_id: str, wear_id: str, rating: int, comfort_rating: Optional[int] = None
    ) -> Optional[OutfitWear]:
        return self.store.rate_wear(user_id, wear_id, rating=rating, comfort_rating=comfort_rating)

    def pending_rating(self, user_id: str, today: date | None = None) -> Optional[OutfitWear]:
        """Yesterday's wear if it still needs a rating, else ``None``."""

        today = today or date.today()
        pending = self.store.list_unrated_wears(user_id, before=today, since=today - timedelta(days=1), limit=1)
        return pending[0] if pending else None

    def save_outfit(self, user_id: str, candidate: OutfitCandidate) -> SavedOutfit:
        """Keep a suggestion as a favourite."""

        saved = self.store.save_outfit(user_id, candidate.to_saved())
        logger.info("Saved outfit %s", saved.outfit_id)
        return saved


__all__ = ["OutfitStylistAgent", "WardrobeSnapshot", "NO_OUTFITS_MESSAGE"]
