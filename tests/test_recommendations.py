"""Reasoning, ranking and end-to-end recommendation coverage."""
from __future__ import annotations

import random

from logic.reasoning import FALLBACK_REASONING, extract_tags, generate_reasoning, rank_recommendations
from logic.recommender import generate_recommendations
from models.context import RecommendationContext
from models.outfit import OutfitRecommendation
from models.wardrobe_item import WardrobeItem
from models.weather import WeatherCondition


def _items():
    return [
        WardrobeItem(item_id="t1", category="top", name="Tee", color="White", style="casual"),
        WardrobeItem(item_id="t2", category="top", name="Blazer", color="navy", style="business"),
        WardrobeItem(item_id="b1", category="bottom", name="Jeans", color="blue", style="casual"),
        WardrobeItem(item_id="s1", category="shoes", name="Sneakers", color="white", style="sporty"),
        WardrobeItem(item_id="a1", category="accessory", name="Cap", color="black", style="streetwear"),
    ]


def _recommendation(outfit_id: str, score: float) -> OutfitRecommendation:
    return OutfitRecommendation(outfit_id=outfit_id, items=(), score=score, reasoning="", tags=())


def test_reasoning_mentions_weather_occasion_and_styles() -> None:
    context = RecommendationContext(weather=WeatherCondition(temperature=2.0, condition="snowy"), occasion="Casual")
    reasoning = generate_reasoning(_items()[:3], context)

    assert reasoning == "Perfect for 2°C snowy weather. Ideal for casual occasions. casual and business style"


def test_reasoning_fallback() -> None:
    items = [WardrobeItem(item_id="x", category="top")]
    assert generate_reasoning(items, RecommendationContext()) == FALLBACK_REASONING


def test_tags_are_deduplicated_and_capped() -> None:
    tags = extract_tags(_items())

    assert tags[:3] == ("casual", "white", "top")
    assert len(tags) == 5
    assert len(set(tags)) == len(tags)


def test_ranking_is_stable_for_ties() -> None:
    ranked = rank_recommendations(
        [_recommendation("a", 50), _recommendation("b", 70), _recommendation("c", 50), _recommendation("d", 70)],
        limit=3,
    )
    assert [r.outfit_id for r in ranked] == ["b", "d", "a"]
    assert rank_recommendations([_recommendation("a", 1)], limit=0) == []


def test_generate_recommendations_end_to_end() -> None:
    context = RecommendationContext(weather=WeatherCondition(temperature=20, condition="sunny"), occasion="casual")
    result = generate_recommendations(_items(), context, limit=5, rng=random.Random(4))

    assert 1 <= len(result.recommendations) <= 5
    scores = [r.score for r in result.recommendations]
    assert scores == sorted(scores, reverse=True)
    for recommendation in result.recommendations:
        assert 0 <= recommendation.score <= 100
        assert recommendation.occasion == "casual"
        assert recommendation.weather == "sunny"
        assert recommendation.outfit_id.startswith("outfit-")
    assert result.diagnostics["combinations"]["candidate_count"] == 2
    assert len(result.diagnostics["ranked"]) == len(result.recommendations)


def test_empty_wardrobe_returns_nothing() -> None:
    result = generate_recommendations([], RecommendationContext(), rng=random.Random(0))

    assert result.recommendations == []
    assert result.diagnostics["combinations"]["candidate_count"] == 0


def test_recommendation_payload_is_json_ready() -> None:
    result = generate_recommendations(_items(), RecommendationContext(), limit=1, rng=random.Random(8))
    payload = result.recommendations[0].to_dict()

    assert set(payload) >= {"id", "items", "score", "reasoning", "tags", "sub_scores"}
    assert isinstance(payload["items"][0], dict)
