"""Synthetic weather sampling from named climate profiles."""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from datetime import date
from typing import Optional

from models.taxonomy import SEASONS, normalize_season
from models.weather import (
    DEFAULT_CONDITION_WEIGHTS,
    REGION_CONDITION_WEIGHTS,
    SAMPLED_CONDITIONS,
    SEASONAL_ADJUSTMENTS,
    ClimateProfile,
    WeatherCondition,
    get_climate_profile,
    season_for_date,
)

logger = logging.getLogger(__name__)


def _bounded(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def _jitter(rng: random.Random, spread: float) -> float:
    """Uniform noise in [-spread/2, spread/2)."""

    return (rng.random() - 0.5) * spread


def resolve_profile(location: Optional[str], season: Optional[str] = None, today: Optional[date] = None) -> ClimateProfile:
    """Look up a climate profile and pin it to an explicit or date-derived season."""

    profile = get_climate_profile(location)
    resolved = normalize_season(season)
    if resolved not in SEASONS:
        resolved = season_for_date(today or date.today())
    return replace(profile, season=resolved)


def choose_condition(region: str, rng: random.Random) -> str:
    """Draw a condition from the region's categorical distribution."""

    weights = REGION_CONDITION_WEIGHTS.get(region, DEFAULT_CONDITION_WEIGHTS)
    draw = rng.random()
    cumulative = 0.0
    for condition, weight in zip(SAMPLED_CONDITIONS, weights):
        cumulative += weight
        if draw <= cumulative:
            return condition
    return "sunny"


def sample_weather(
    location: Optional[str],
    rng: random.Random,
    season: Optional[str] = None,
    today: Optional[date] = None,
) -> WeatherCondition:
    """Synthesize a plausible weather snapshot for a climate profile."""

    profile = resolve_profile(location, season=season, today=today)
    adjustment = SEASONAL_ADJUSTMENTS[profile.season]
    baseline = profile.avg_temp + adjustment.temperature

    weather = WeatherCondition(
        temperature=baseline + _jitter(rng, 10),
        feels_like=baseline + _jitter(rng, 15),
        humidity=_bounded(profile.avg_humidity + _jitter(rng, 30), 0, 100),
        wind_speed=rng.random() * 25,
        condition=choose_condition(profile.region, rng),
        uv_index=_bounded(5 + adjustment.uv_index + _jitter(rng, 4), 0, 11),
        precipitation=rng.random() * (profile.rainy_days / 365) * 100,
        visibility=_bounded(8 + _jitter(rng, 4), 0.1, 10),
    )
    logger.debug(
        "Sampled %s weather for %s/%s: %.1fC",
        weather.condition,
        profile.region,
        profile.season,
        weather.temperature,
    )
    return weather


__all__ = ["sample_weather", "choose_condition", "resolve_profile"]
