"""Evaluation scenarios exercising weather extremes, occasions and empty input."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from models.weather import WeatherCondition


@dataclass
class EvaluationScenario:
    name: str
    description: str
    weather: WeatherCondition
    wardrobe_items: List[Dict[str, object]]
    expectations: Dict[str, object]
    occasion: Optional[str] = None
    season: Optional[str] = None
    seed: int = 11


def _wardrobe_fixtures() -> List[Dict[str, object]]:
    return [
        {"item_id": "top_tee", "category": "top", "name": "Crew tee", "color": "white", "style": "casual", "material": "cotton"},
        {"item_id": "top_sweater", "category": "top", "name": "Knit sweater", "color": "gray", "style": "casual", "material": "wool", "season": "winter"},
        {"item_id": "top_tank", "category": "top", "name": "Tank top", "color": "black", "style": "sporty", "material": "cotton", "season": "summer"},
        {"item_id": "top_blouse", "category": "top", "name": "Silk blouse", "color": "white", "style": "elegant", "material": "silk"},
        {"item_id": "bottom_jeans", "category": "bottom", "name": "Straight jeans", "color": "blue", "style": "casual", "material": "denim"},
        {"item_id": "bottom_shorts", "category": "bottom", "name": "Denim shorts", "color": "blue", "style": "casual", "material": "cotton", "season": "summer"},
        {"item_id": "bottom_trousers", "category": "bottom", "name": "Tailored trousers", "color": "black", "style": "formal", "material": "wool"},
        {"item_id": "dress_evening", "category": "dress", "name": "Evening dress", "color": "black", "style": "formal", "material": "silk"},
        {"item_id": "shoes_sneakers", "category": "shoes", "name": "Running sneakers", "color": "white", "style": "sporty", "material": "synthetic"},
        {"item_id": "shoes_sandals", "category": "shoes", "name": "Sandals", "color": "beige", "style": "casual", "material": "leather", "season": "summer"},
        {"item_id": "shoes_oxfords", "category": "shoes", "name": "Oxfords", "color": "black", "style": "formal", "material": "leather"},
        {"item_id": "outer_rain_jacket", "category": "outerwear", "name": "Rain jacket", "color": "navy", "style": "casual", "material": "synthetic"},
        {"item_id": "outer_wool_coat", "category": "outerwear", "name": "Wool coat", "color": "camel", "style": "classic", "material": "wool", "season": "winter"},
        {"item_id": "accessory_scarf", "category": "accessory", "name": "Scarf", "color": "red", "style": "casual", "material": "wool"},
        {"item_id": "accessory_clutch", "category": "accessory", "name": "Clutch", "color": "gold", "style": "formal", "material": "leather"},
    ]


SCENARIOS = [
    EvaluationScenario(
        name="cold_rain",
        description="Chilly autumn day with steady rain requiring outerwear.",
        weather=WeatherCondition(
            temperature=4.0,
            condition="rainy",
            humidity=75.0,
            wind_speed=12.0,
            precipitation=70.0,
        ),
        season="fall",
        wardrobe_items=_wardrobe_fixtures(),
        expectations={
            "min_outfits": 1,
            "requires_outerwear": True,
            "excluded_items": ["top_tank", "bottom_shorts", "shoes_sandals"],
            "advice_contains": "waterproof",
        },
    ),
    EvaluationScenario(
        name="heat_wave",
        description="Hot, sunny summer afternoon where heavy layers must be dropped.",
        weather=WeatherCondition(temperature=34.0, condition="sunny", humidity=40.0, uv_index=9.0),
        season="summer",
        wardrobe_items=_wardrobe_fixtures(),
        expectations={"min_outfits": 1, "excluded_items": ["outer_wool_coat", "top_sweater"]},
    ),
    EvaluationScenario(
        name="formal_evening",
        description="Formal dinner on a cool, cloudy evening.",
        weather=WeatherCondition(temperature=16.0, condition="cloudy", humidity=55.0),
        occasion="formal",
        season="fall",
        wardrobe_items=_wardrobe_fixtures(),
        expectations={"min_outfits": 1, "reasoning_contains": "Ideal for formal occasions"},
    ),
    EvaluationScenario(
        name="empty_wardrobe",
        description="No items supplied; the engine should answer with nothing rather than fail.",
        weather=WeatherCondition(temperature=20.0, condition="sunny"),
        wardrobe_items=[],
        expectations={"min_outfits": 0, "max_outfits": 0},
    ),
]


__all__ = ["EvaluationScenario", "SCENARIOS"]
