"""End-to-end outfit recommendation pipeline over an in-memory wardrobe."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from logic.contextual_filtering import normalize_items
from logic.outfit_builder import DEFAULT_COMBINATION_CAP, generate_combinations
from logic.outfit_scoring import calculate_color_harmony_metrics, score_outfit
from logic.reasoning import extract_tags, generate_reasoning, rank_recommendations
from models.context import RecommendationContext
from models.outfit import OutfitCandidate, OutfitRecommendation
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5


@dataclass(frozen=True)
class RecommendationResult:
    recommendations: List[OutfitRecommendation]
    diagnostics: Dict[str, object]


def _recommend_candidate(candidate: OutfitCandidate, context: RecommendationContext) -> OutfitRecommendation:
    color_metrics = calculate_color_harmony_metrics(candidate.items)
    scored = score_outfit(candidate.items, context, color_metrics)
    return OutfitRecommendation(
        outfit_id=candidate.outfit_id,
        items=candidate.items,
        score=float(scored["score"]),
        reasoning=generate_reasoning(candidate.items, context),
        tags=extract_tags(candidate.items),
        sub_scores=dict(scored["sub_scores"]),
        template=candidate.template,
        occasion=context.occasion,
        weather=context.weather.condition if context.weather else None,
        season=context.season,
    )


def generate_recommendations(
    items: Sequence[WardrobeItem],
    context: RecommendationContext,
    limit: int = DEFAULT_LIMIT,
    rng: Optional[random.Random] = None,
    cap: int = DEFAULT_COMBINATION_CAP,
    draws_per_template: int = 1,
) -> RecommendationResult:
    """Filter, combine, score and rank outfits for a single request.

    Pass a seeded ``rng`` for reproducible per-bucket draws; without one the
    draws are non-deterministic.
    """

    rng = rng or random.Random()
    filtered = normalize_items(items, context)
    combinations = generate_combinations(filtered.items, rng, cap=cap, draws_per_template=draws_per_template)
    scored = [_recommend_candidate(candidate, context) for candidate in combinations.candidates]
    ranked = rank_recommendations(scored, limit)

    logger.info(
        "Ranked %s of %s candidates (limit=%s) from %s wardrobe items",
        len(ranked),
        len(scored),
        limit,
        len(items),
    )
    diagnostics: Dict[str, object] = {
        "filters": filtered.debug,
        "removed": filtered.removed,
        "combinations": combinations.diagnostics,
        "ranked": [
            {"id": recommendation.outfit_id, "score": round(recommendation.score, 2)}
            for recommendation in ranked
        ],
    }
    return RecommendationResult(recommendations=ranked, diagnostics=diagnostics)


__all__ = ["generate_recommendations", "RecommendationResult", "DEFAULT_LIMIT"]
