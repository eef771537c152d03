"""Lightweight evaluation harness for deterministic scenarios."""

from __future__ import annotations

import random
from pathlib import Path
from tempfile import TemporaryDirectory
from typing import Dict, List

from agents.outfit_stylist_agent import OutfitStylistAgent
from evaluation.scenarios import EvaluationScenario, SCENARIOS
from models.outfit import OutfitWear
from models.preferences import ColorCombination
from models.wardrobe_item import from_raw_metadata
from stylist_app.config import StylistConfig
from tools.wardrobe_store import SQLiteWardrobeStore


def _seed_store(store: SQLiteWardrobeStore, user_id: str, scenario: EvaluationScenario) -> None:
    for item in scenario.wardrobe_items:
        store.create_item(from_raw_metadata({**item, "user_id": user_id}))
    for combination in scenario.liked_combinations:
        store.add_color_combination(user_id, ColorCombination(**combination))
    for wear in scenario.wears:
        store.record_wear(user_id, OutfitWear(**wear))


def _ids(outfit: Dict[str, object]) -> List[str]:
    return [piece["item_id"] for piece in (outfit["top"], outfit["outerwear"], outfit["bottom"], outfit["shoes"]) if piece]


def _evaluate_expectations(expectations: Dict[str, object], outfits: List[Dict[str, object]]) -> Dict[str, object]:
    checks: Dict[str, bool] = {}
    if "min_outfits" in expectations:
        checks["min_outfits"] = len(outfits) >= int(expectations["min_outfits"])
    if "max_outfits" in expectations:
        checks["max_outfits"] = len(outfits) <= int(expectations["max_outfits"])
    if expectations.get("forbid_outerwear"):
        checks["forbid_outerwear"] = all(outfit["outerwear"] is None for outfit in outfits)
    if expectations.get("forbid_items"):
        forbidden = set(expectations["forbid_items"])
        checks["forbid_items"] = all(not forbidden.intersection(_ids(outfit)) for outfit in outfits)
    if outfits and expectations.get("best_has_outerwear"):
        checks["best_has_outerwear"] = outfits[0]["outerwear"] is not None
    if outfits and expectations.get("best_top"):
        checks["best_top"] = outfits[0]["top"]["item_id"] == expectations["best_top"]
    if outfits and expectations.get("best_avoids"):
        checks["best_avoids"] = not set(expectations["best_avoids"]).intersection(_ids(outfits[0]))
    return {"passed": all(checks.values()), "checks": checks}


def run_scenario(scenario: EvaluationScenario, user_id: str = "eval_user") -> Dict[str, object]:
    with TemporaryDirectory() as tmpdir:
        config = StylistConfig(database_path=str(Path(tmpdir) / "wardrobe.db"))
        store = SQLiteWardrobeStore(config.database_path)
        _seed_store(store, user_id, scenario)
        stylist = OutfitStylistAgent(config=config, store=store)

        response = stylist.recommend_outfits(
            user_id=user_id,
            occasion=scenario.occasion,
            temperature_category=scenario.temperature_category,
            today=scenario.target_date,
            rng=random.Random(scenario.seed),
        )
        outfits = response.get("ranked_outfits", [])
        evaluation = _evaluate_expectations(scenario.expectations, outfits)
        return {
            "scenario": scenario.name,
            "passed": evaluation["passed"],
            "checks": evaluation["checks"],
            "outfit_count": len(outfits),
            "response": response,
        }


def run_evaluation_suite() -> List[Dict[str, object]]:
    return [run_scenario(scenario) for scenario in SCENARIOS]


def run_smoke_checks() -> List[str]:
    results = run_evaluation_suite()
    return [f"{result['scenario']}: {'passed' if result['passed'] else 'failed'}" for result in results]


__all__ = ["run_evaluation_suite", "run_scenario", "run_smoke_checks"]
