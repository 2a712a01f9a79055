"""Fabric-driven weather suitability scoring and advisory generation."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from models.fabrics import FabricProperties, get_fabric_properties, resolve_fabric_name
from models.outfit import ItemWeatherScore, OutfitWeatherScore, WeatherGuidance
from models.wardrobe_item import WardrobeItem
from models.weather import BAND_GUIDANCE, WeatherCondition, layering_strategy_for, temperature_band

logger = logging.getLogger(__name__)

NEUTRAL_PROTECTION = 0.7
BASE_APPROPRIATENESS = 0.7
MAX_REASONS = 5
MAX_ADVICE = 3


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def _temperature_component(fabric: FabricProperties, weather: WeatherCondition, name: str, reasons: List[str]) -> float:
    if weather.temperature < 10:
        if fabric.insulation > 0.7:
            reasons.append(f"{name} provides good insulation for cold weather")
        return fabric.insulation
    if weather.temperature > 25:
        if fabric.breathability > 0.7:
            reasons.append(f"{name} is breathable for warm weather")
        return fabric.breathability
    return (fabric.insulation + fabric.breathability) / 2


def _comfort_component(fabric: FabricProperties, weather: WeatherCondition, name: str, reasons: List[str]) -> float:
    if weather.humidity > 70:
        if fabric.moisture_wicking > 0.6:
            reasons.append(f"{name} wicks moisture well in humid conditions")
        return fabric.moisture_wicking
    return fabric.breathability


def _protection_component(fabric: FabricProperties, weather: WeatherCondition, name: str, reasons: List[str]) -> float:
    if weather.precipitation > 30:
        if fabric.water_resistance > 0.7:
            reasons.append(f"{name} offers water protection")
        return fabric.water_resistance
    if weather.uv_index > 6:
        if fabric.uv_protection > 0.5:
            reasons.append(f"{name} provides UV protection")
        return fabric.uv_protection
    if weather.wind_speed > 15:
        if fabric.wind_resistance > 0.6:
            reasons.append(f"{name} resists wind")
        return fabric.wind_resistance
    return NEUTRAL_PROTECTION


def score_item_for_weather(item: WardrobeItem, weather: WeatherCondition) -> ItemWeatherScore:
    """Score one item's fabric against the temperature, comfort and protection needs."""

    fabric = get_fabric_properties(item.material)
    name = item.display_name
    reasons: List[str] = []
    temperature = _clamp(_temperature_component(fabric, weather, name, reasons))
    comfort = _clamp(_comfort_component(fabric, weather, name, reasons))
    protection = _clamp(_protection_component(fabric, weather, name, reasons))
    return ItemWeatherScore(
        item_id=item.item_id,
        fabric=resolve_fabric_name(item.material),
        temperature=temperature,
        comfort=comfort,
        protection=protection,
        overall=(temperature + comfort + protection) / 3,
        reasoning=tuple(reasons),
    )


def appropriateness_score(items: Sequence[WardrobeItem], weather: WeatherCondition) -> float:
    """Reward outerwear in cold or wet weather and any footwear."""

    score = BASE_APPROPRIATENESS
    has_outerwear = any(item.category == "outerwear" for item in items)
    has_footwear = any(item.category == "shoes" for item in items)
    if weather.temperature < 15 and has_outerwear:
        score += 0.15
    if weather.precipitation > 50 and has_outerwear:
        score += 0.1
    if has_footwear:
        score += 0.05
    return _clamp(score)


def analyze_outfit_for_weather(items: Sequence[WardrobeItem], weather: WeatherCondition) -> OutfitWeatherScore:
    """Aggregate item scores into an outfit-level weather score.

    Dimension scores are plain averages over the items (zero for an empty
    outfit). The overall score folds appropriateness in as one extra vote, so
    an empty outfit scores its appropriateness baseline.
    """

    item_scores = [score_item_for_weather(item, weather) for item in items]
    count = len(item_scores)
    divisor = count or 1
    appropriateness = appropriateness_score(items, weather)
    reasoning = [reason for score in item_scores for reason in score.reasoning][:MAX_REASONS]

    result = OutfitWeatherScore(
        overall=_clamp((sum(score.overall for score in item_scores) + appropriateness) / (count + 1)),
        temperature=_clamp(sum(score.temperature for score in item_scores) / divisor),
        comfort=_clamp(sum(score.comfort for score in item_scores) / divisor),
        protection=_clamp(sum(score.protection for score in item_scores) / divisor),
        appropriateness=appropriateness,
        reasoning=tuple(reasoning),
        band=temperature_band(weather.temperature),
        items=tuple(item_scores),
    )
    logger.debug("Weather score for %s items -> %.3f", count, result.overall)
    return result


def generate_weather_advice(
    items: Sequence[WardrobeItem],
    weather: WeatherCondition,
    score: Optional[OutfitWeatherScore] = None,
) -> List[str]:
    """Return up to three advisories, checked in fixed priority order."""

    score = score or analyze_outfit_for_weather(items, weather)
    advice: List[str] = []

    if weather.temperature < 5 and score.temperature < 0.6:
        advice.append("Add a warm coat or heavy jacket for cold weather")
    elif weather.temperature > 30 and score.temperature < 0.6:
        advice.append("Choose lighter, more breathable fabrics for hot weather")
    if weather.precipitation > 50 and score.protection < 0.7:
        advice.append("Consider waterproof outerwear or an umbrella")
    if weather.uv_index > 7 and score.protection < 0.6:
        advice.append("Add sun protection: hat, sunglasses, or UV-protective clothing")
    if weather.wind_speed > 15 and score.protection < 0.6:
        advice.append("Choose wind-resistant layers or a windbreaker")
    if weather.humidity > 80 and score.comfort < 0.6:
        advice.append("Select moisture-wicking fabrics for high humidity")

    return advice[:MAX_ADVICE]


def generate_band_guidance(items: Sequence[WardrobeItem], weather: WeatherCondition) -> WeatherGuidance:
    """Layering and fabric guidance for the weather's temperature band.

    Materials match by lower-cased substring, so "merino wool" counts as wool.
    The material suggestion names at most two preferred fabrics the outfit
    lacks; items made of an avoided fabric are listed by id.
    """

    band = temperature_band(weather.temperature)
    rules = BAND_GUIDANCE[band]
    materials = {item.material.lower() for item in items if item.material}
    suggestions: List[str] = []

    strategy = layering_strategy_for(weather.temperature)
    if strategy is not None:
        suggestions.append(f"Use {strategy.name.lower()} for optimal comfort")

    missing = [wanted for wanted in rules.preferred_materials if not any(wanted in current for current in materials)]
    if missing:
        suggestions.append(f"Consider materials like {' or '.join(missing[:2])}")

    avoided_ids = tuple(
        item.item_id
        for item in items
        if item.material and any(avoided in item.material.lower() for avoided in rules.avoided_materials)
    )
    return WeatherGuidance(
        band=band,
        required_layers=rules.required_layers,
        preferred_materials=rules.preferred_materials,
        avoided_materials=rules.avoided_materials,
        suggestions=tuple(suggestions),
        layering_strategy=strategy.name if strategy else None,
        layering_advantages=strategy.advantages if strategy else (),
        avoided_item_ids=avoided_ids,
    )


__all__ = [
    "score_item_for_weather",
    "appropriateness_score",
    "analyze_outfit_for_weather",
    "generate_weather_advice",
    "generate_band_guidance",
]
