"""Multi-factor outfit scoring coverage."""

import pytest

from logic.outfit_scoring import (
    VARIETY_PLACEHOLDER,
    WEIGHTS,
    calculate_color_harmony_metrics,
    occasion_score,
    preference_score,
    score_outfit,
    style_match_score,
    weather_fit_score,
)
from models.context import RecommendationContext, UserPreferences
from models.wardrobe_item import WardrobeItem
from models.weather import WeatherCondition


def _outfit():
    return [
        WardrobeItem(item_id="t", category="top", name="Linen t-shirt", color="white", style="casual", brand="Acme"),
        WardrobeItem(item_id="b", category="bottom", name="Jeans", color="blue", style="streetwear"),
        WardrobeItem(item_id="s", category="shoes", name="Sneakers", color="white", style="sporty"),
    ]


def test_weights_sum_to_one() -> None:
    assert sum(WEIGHTS.values()) == pytest.approx(1.0)


def test_style_score_groups() -> None:
    assert style_match_score(_outfit()) == 1.0
    mixed = _outfit() + [WardrobeItem(item_id="x", category="accessory", style="formal")]
    assert style_match_score(mixed) == 0.6
    assert style_match_score([WardrobeItem(item_id="n", category="top")]) == 0.5


def test_color_rules() -> None:
    harmonious = calculate_color_harmony_metrics(_outfit())
    assert harmonious["rule_applied"] == "harmonious_set"
    assert harmonious["harmony_score"] == 1.0

    neutral = calculate_color_harmony_metrics(
        [WardrobeItem(item_id=str(i), category="top", color=color) for i, color in enumerate(["black", "navy", "cream", "beige", "gold"])]
    )
    assert neutral["rule_applied"] == "neutral_base"
    assert neutral["harmony_score"] == 0.9

    mixed = calculate_color_harmony_metrics(
        [WardrobeItem(item_id="a", category="top", color="orange"), WardrobeItem(item_id="b", category="bottom", color="purple")]
    )
    assert mixed["rule_applied"] == "mixed"
    assert mixed["harmony_score"] == 0.5

    empty = calculate_color_harmony_metrics([WardrobeItem(item_id="a", category="top")])
    assert empty["rule_applied"] == "none"
    assert empty["harmony_score"] == 0.5


def test_weather_fit_rewards_warm_layers_when_cold() -> None:
    cold = WeatherCondition(temperature=3, condition="rainy")
    outfit = [
        WardrobeItem(item_id="j", category="outerwear", name="Rain jacket"),
        WardrobeItem(item_id="p", category="bottom", name="Trousers"),
    ]
    assert weather_fit_score(outfit, cold) == pytest.approx(0.85)


def test_weather_fit_is_clamped() -> None:
    hot = WeatherCondition(temperature=30, condition="sunny")
    outfit = [WardrobeItem(item_id=str(i), category="top", name="Tank top with hat") for i in range(5)]
    assert weather_fit_score(outfit, hot) == 1.0


def test_occasion_score_share_of_matching_items() -> None:
    assert occasion_score(_outfit(), "casual") == pytest.approx(1.0)
    assert occasion_score(_outfit(), "formal") == 0.0
    assert occasion_score(_outfit(), "picnic") == 0.5
    assert occasion_score([], "casual") == 0.5


def test_preference_score_averages_requested_checks() -> None:
    prefs = UserPreferences(styles=("casual",), colors=("red",), brands=("acme",))
    assert preference_score(_outfit(), prefs) == pytest.approx(2 / 3)
    assert preference_score(_outfit(), UserPreferences()) == 0.5


def test_score_without_optional_context_is_not_renormalised() -> None:
    result = score_outfit(_outfit(), RecommendationContext())

    assert set(result["sub_scores"]) == {"style", "color"}
    assert result["score"] == pytest.approx(45.0)
    assert set(result["weights_applied"]) == {"style", "color"}


def test_score_with_full_context() -> None:
    context = RecommendationContext(
        weather=WeatherCondition(temperature=18, condition="cloudy"),
        occasion="casual",
        preferences=UserPreferences(styles=("casual",)),
        recent_outfits=(),
    )
    result = score_outfit(_outfit(), context)

    assert result["sub_scores"]["variety"] == VARIETY_PLACEHOLDER
    expected = 25 + 20 + 0.5 * 20 + 1.0 * 15 + VARIETY_PLACEHOLDER * 10 + 1.0 * 10
    assert result["score"] == pytest.approx(expected)
    assert 0 <= result["score"] <= 100


def test_variety_omitted_without_history() -> None:
    result = score_outfit(_outfit(), RecommendationContext(occasion="casual"))
    assert "variety" not in result["sub_scores"]
    assert result["color_rule"] == "harmonious_set"
