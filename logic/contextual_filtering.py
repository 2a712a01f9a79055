"""Deterministic filtering of the wardrobe pool by season and temperature."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from models.context import RecommendationContext
from models.taxonomy import ALL_SEASONS
from models.wardrobe_item import WardrobeItem
from models.weather import WeatherCondition

COLD_LIMIT_C = 5
HOT_LIMIT_C = 30
COLD_EXCLUDED_KEYWORDS = ("shorts", "sandals", "tank")
HOT_EXCLUDED_KEYWORDS = ("coat", "heavy jacket")


@dataclass(frozen=True)
class FilteringResult:
    """Captures the outcome of a single filtering step."""

    items: List[WardrobeItem]
    removed: Dict[str, str]
    debug: Dict[str, object]


def filter_by_season(items: Sequence[WardrobeItem], season: Optional[str]) -> FilteringResult:
    """Drop items tagged for a different season; untagged and ``all`` items pass."""

    removed: Dict[str, str] = {}
    kept: List[WardrobeItem] = []
    for item in items:
        if season and item.season and item.season not in {ALL_SEASONS, season}:
            removed[item.item_id] = f"tagged for {item.season}, not {season}"
        else:
            kept.append(item)

    debug = {
        "input_count": len(items),
        "kept_count": len(kept),
        "removed_count": len(removed),
        "season": season,
    }
    return FilteringResult(items=kept, removed=removed, debug=debug)


def filter_by_temperature(items: Sequence[WardrobeItem], weather: Optional[WeatherCondition]) -> FilteringResult:
    """Drop category keywords that are incompatible with temperature extremes."""

    removed: Dict[str, str] = {}
    kept: List[WardrobeItem] = []
    temperature = weather.temperature if weather else None
    for item in items:
        reason = None
        descriptor = item.descriptor
        if temperature is not None and temperature < COLD_LIMIT_C:
            if any(keyword in descriptor for keyword in COLD_EXCLUDED_KEYWORDS):
                reason = "too light for cold weather"
        elif temperature is not None and temperature > HOT_LIMIT_C:
            if any(keyword in descriptor for keyword in HOT_EXCLUDED_KEYWORDS):
                reason = "too heavy for hot weather"
        if reason:
            removed[item.item_id] = reason
        else:
            kept.append(item)

    debug = {
        "input_count": len(items),
        "kept_count": len(kept),
        "removed_count": len(removed),
        "temperature": temperature,
        "cold": temperature is not None and temperature < COLD_LIMIT_C,
        "hot": temperature is not None and temperature > HOT_LIMIT_C,
    }
    return FilteringResult(items=kept, removed=removed, debug=debug)


def normalize_items(items: Sequence[WardrobeItem], context: RecommendationContext) -> FilteringResult:
    """Apply the season and temperature filters in order and merge diagnostics."""

    season_result = filter_by_season(items, context.season)
    temperature_result = filter_by_temperature(season_result.items, context.weather)
    removed = {**season_result.removed, **temperature_result.removed}
    debug = {
        "input_count": len(items),
        "final_count": len(temperature_result.items),
        "steps": [
            {"step": "season", "debug": season_result.debug},
            {"step": "temperature", "debug": temperature_result.debug},
        ],
    }
    return FilteringResult(items=temperature_result.items, removed=removed, debug=debug)


__all__ = [
    "filter_by_season",
    "filter_by_temperature",
    "normalize_items",
    "FilteringResult",
]
