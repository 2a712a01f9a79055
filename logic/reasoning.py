"""Human-readable justification, tagging and ranking of scored outfits."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from models.context import RecommendationContext
from models.outfit import OutfitRecommendation
from models.wardrobe_item import WardrobeItem

MAX_TAGS = 5
MAX_REASON_PARTS = 3
FALLBACK_REASONING = "Well-balanced outfit combination"


def _format_temperature(value: float) -> str:
    return f"{value:g}" if float(value).is_integer() else f"{value:.1f}"


def generate_reasoning(items: Sequence[WardrobeItem], context: RecommendationContext) -> str:
    """Build a short justification from weather, occasion and shared styles."""

    reasons: List[str] = []
    if context.weather is not None:
        reasons.append(
            f"Perfect for {_format_temperature(context.weather.temperature)}°C {context.weather.condition} weather"
        )
    if context.occasion:
        reasons.append(f"Ideal for {context.occasion} occasions")

    styles: List[str] = []
    for item in items:
        if item.style and item.style not in styles:
            styles.append(item.style)
    if styles:
        reasons.append(f"{' and '.join(styles)} style")

    return ". ".join(reasons[:MAX_REASON_PARTS]) or FALLBACK_REASONING


def extract_tags(items: Iterable[WardrobeItem]) -> Tuple[str, ...]:
    """Deduplicated style, colour and category tags in first-seen order."""

    tags: List[str] = []
    for item in items:
        for value in (item.style, item.color, item.category):
            if value and value.lower() not in tags:
                tags.append(value.lower())
    return tuple(tags[:MAX_TAGS])


def rank_recommendations(recommendations: Sequence[OutfitRecommendation], limit: int) -> List[OutfitRecommendation]:
    """Stable descending sort by score, truncated to ``limit``.

    ``sorted`` is stable, so equal scores keep candidate generation order.
    """

    ranked = sorted(recommendations, key=lambda recommendation: recommendation.score, reverse=True)
    return ranked[: max(0, limit)]


__all__ = ["generate_reasoning", "extract_tags", "rank_recommendations", "MAX_TAGS"]
