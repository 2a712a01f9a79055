"""Deterministic multi-factor scoring for candidate outfits."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, List, Optional, Sequence

from models.color_theory import NEUTRAL_RATIO_THRESHOLD, harmonious_set_for, neutral_ratio
from models.context import RecommendationContext, UserPreferences
from models.taxonomy import OCCASION_KEYWORDS, STYLE_COMPATIBILITY_GROUPS
from models.wardrobe_item import WardrobeItem
from models.weather import WeatherCondition

WEIGHTS = MappingProxyType(
    {
        "style": 0.25,
        "color": 0.20,
        "weather": 0.20,
        "occasion": 0.15,
        "variety": 0.10,
        "preference": 0.10,
    }
)

NEUTRAL_SCORE = 0.5
# Recency is not compared against history yet; see DESIGN.md.
VARIETY_PLACEHOLDER = 0.7

WARM_LAYER_KEYWORDS = ("jacket", "coat", "sweater", "hoodie")
LIGHT_PIECE_KEYWORDS = ("t-shirt", "shorts", "dress", "tank")
SUN_KEYWORDS = ("sunglasses", "hat")


def _clamp(value: float, upper: float = 1.0) -> float:
    return max(0.0, min(upper, value))


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def style_match_score(outfit_items: Sequence[WardrobeItem]) -> float:
    """1.0 when one compatibility group holds every style, 0.6 otherwise."""

    styles = {item.style for item in outfit_items if item.style}
    if not styles:
        return NEUTRAL_SCORE
    if any(styles <= group for group in STYLE_COMPATIBILITY_GROUPS):
        return 1.0
    return 0.6


def calculate_color_harmony_metrics(outfit_items: Sequence[WardrobeItem]) -> Dict[str, object]:
    """Compute colour harmony using the fixed harmonious sets and neutral share."""

    colors = [item.color for item in outfit_items if item.color]
    if not colors:
        return {"rule_applied": "none", "harmony_score": NEUTRAL_SCORE, "colors": []}

    palette = harmonious_set_for(colors)
    ratio = neutral_ratio(colors)
    if palette is not None:
        rule_applied, harmony_score = "harmonious_set", 1.0
    elif ratio >= NEUTRAL_RATIO_THRESHOLD:
        rule_applied, harmony_score = "neutral_base", 0.9
    else:
        rule_applied, harmony_score = "mixed", 0.5

    return {
        "rule_applied": rule_applied,
        "harmony_score": _clamp(harmony_score),
        "colors": colors,
        "palette": list(palette) if palette else [],
        "neutral_ratio": ratio,
    }


def weather_fit_score(outfit_items: Sequence[WardrobeItem], weather: WeatherCondition) -> float:
    score = NEUTRAL_SCORE
    for item in outfit_items:
        descriptor = item.descriptor
        if weather.temperature < 10 and _contains_any(descriptor, WARM_LAYER_KEYWORDS):
            score += 0.2
        elif weather.temperature > 25 and _contains_any(descriptor, LIGHT_PIECE_KEYWORDS):
            score += 0.2
        if weather.condition == "rainy" and "jacket" in descriptor:
            score += 0.15
        if weather.condition == "sunny" and _contains_any(descriptor, SUN_KEYWORDS):
            score += 0.1
    return _clamp(score)


def occasion_score(outfit_items: Sequence[WardrobeItem], occasion: str) -> float:
    """Share of items whose descriptor mentions an occasion keyword."""

    keywords = OCCASION_KEYWORDS.get(occasion.lower(), ())
    if not keywords or not outfit_items:
        return NEUTRAL_SCORE
    matches = sum(1 for item in outfit_items if _contains_any(item.descriptor, keywords))
    return _clamp(matches / len(outfit_items))


def variety_score(outfit_items: Sequence[WardrobeItem], recent_outfits: Sequence[str]) -> float:
    return VARIETY_PLACEHOLDER


def _any_field_matches(values: List[Optional[str]], preferred: Sequence[str]) -> bool:
    lowered = [value.lower() for value in values if value]
    return any(choice.lower() in value for value in lowered for choice in preferred)


def preference_score(outfit_items: Sequence[WardrobeItem], preferences: UserPreferences) -> float:
    """Average of the style, colour and brand matches that were asked for."""

    checks = [
        (preferences.styles, [item.style for item in outfit_items]),
        (preferences.colors, [item.color for item in outfit_items]),
        (preferences.brands, [item.brand for item in outfit_items]),
    ]
    results = [_any_field_matches(values, preferred) for preferred, values in checks if preferred]
    if not results:
        return NEUTRAL_SCORE
    return sum(1.0 for matched in results if matched) / len(results)


def score_outfit(
    outfit_items: Sequence[WardrobeItem],
    context: RecommendationContext,
    color_harmony_metrics: Optional[Dict[str, object]] = None,
) -> Dict[str, object]:
    """Calculate the 0-100 composite score and the sub scores behind it.

    Optional terms (weather, occasion, variety, preference) are omitted when
    their context is absent and the remaining weights are not rescaled, so the
    attainable maximum drops with each missing signal.
    """

    metrics = color_harmony_metrics or calculate_color_harmony_metrics(outfit_items)
    sub_scores: Dict[str, float] = {
        "style": style_match_score(outfit_items),
        "color": _clamp(float(metrics.get("harmony_score", NEUTRAL_SCORE))),
    }
    if context.weather is not None:
        sub_scores["weather"] = weather_fit_score(outfit_items, context.weather)
    if context.occasion:
        sub_scores["occasion"] = occasion_score(outfit_items, context.occasion)
    if context.recent_outfits is not None:
        sub_scores["variety"] = variety_score(outfit_items, context.recent_outfits)
    if context.preferences is not None:
        sub_scores["preference"] = preference_score(outfit_items, context.preferences)

    weights_applied = {name: WEIGHTS[name] for name in sub_scores}
    weighted = sum(sub_scores[name] * weights_applied[name] for name in sub_scores)
    return {
        "score": _clamp(weighted * 100, upper=100.0),
        "sub_scores": sub_scores,
        "weights_applied": weights_applied,
        "color_rule": metrics.get("rule_applied"),
    }


__all__ = [
    "WEIGHTS",
    "VARIETY_PLACEHOLDER",
    "score_outfit",
    "calculate_color_harmony_metrics",
    "style_match_score",
    "weather_fit_score",
    "occasion_score",
    "variety_score",
    "preference_score",
]
