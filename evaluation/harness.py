"""Lightweight evaluation harness for deterministic scenarios."""

from __future__ import annotations

import random
from typing import Dict, List

from engine_app.app import OutfitEngineApp
from engine_app.config import EngineConfig
from evaluation.scenarios import EvaluationScenario, SCENARIOS
from tools.weather_provider import MockWeatherProvider


def _item_ids(outfit: Dict[str, object]) -> List[str]:
    return [str(item.get("item_id")) for item in outfit.get("items", [])]


def _evaluate_expectations(
    expectations: Dict[str, object],
    outfits: List[Dict[str, object]],
    advice: List[List[str]],
) -> Dict[str, object]:
    checks: Dict[str, bool] = {}
    checks["min_outfits"] = len(outfits) >= int(expectations.get("min_outfits", 1))
    if "max_outfits" in expectations:
        checks["max_outfits"] = len(outfits) <= int(expectations["max_outfits"])
    checks["scores_in_range"] = all(0 <= float(outfit.get("score", -1)) <= 100 for outfit in outfits)
    if expectations.get("requires_outerwear"):
        checks["requires_outerwear"] = any(
            any(item.get("category") == "outerwear" for item in outfit.get("items", [])) for outfit in outfits
        )
    excluded = set(expectations.get("excluded_items", []))
    if excluded:
        checks["excluded_items"] = not any(excluded.intersection(_item_ids(outfit)) for outfit in outfits)
    if expectations.get("reasoning_contains"):
        phrase = str(expectations["reasoning_contains"])
        checks["reasoning_contains"] = all(phrase in str(outfit.get("reasoning", "")) for outfit in outfits)
    if expectations.get("advice_contains"):
        needle = str(expectations["advice_contains"]).lower()
        checks["advice_contains"] = any(needle in line.lower() for lines in advice for line in lines)
    return {"passed": all(checks.values()), "checks": checks}


def run_scenario(scenario: EvaluationScenario) -> Dict[str, object]:
    config = EngineConfig(random_seed=scenario.seed)
    app = OutfitEngineApp(
        config=config,
        weather_provider=MockWeatherProvider(scenario.weather),
        rng=random.Random(scenario.seed),
    )
    weather = app.current_weather("evaluation")["weather"]
    context = {"weather": weather, "occasion": scenario.occasion, "season": scenario.season}

    response = app.recommend(scenario.wardrobe_items, context=context)
    outfits = response.get("recommendations", [])
    advice = [app.score_weather(outfit["items"], weather).get("advice", []) for outfit in outfits]
    evaluation = _evaluate_expectations(scenario.expectations, outfits, advice)
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
