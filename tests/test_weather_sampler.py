"""Synthetic weather sampling coverage."""

import random
from datetime import date

import pytest

from logic.weather_sampler import choose_condition, resolve_profile, sample_weather
from models.weather import SAMPLED_CONDITIONS


def test_resolve_profile_uses_explicit_season() -> None:
    profile = resolve_profile("miami", season="autumn")
    assert profile.region == "tropical"
    assert profile.season == "fall"


def test_resolve_profile_derives_season_from_date() -> None:
    profile = resolve_profile("unknown town", today=date(2024, 7, 4))
    assert profile.region == "temperate"
    assert profile.season == "summer"


@pytest.mark.parametrize("location", ["new_york", "los_angeles", "miami", "phoenix", None])
@pytest.mark.parametrize("season", ["spring", "summer", "fall", "winter"])
def test_samples_stay_within_bounds(location, season) -> None:
    rng = random.Random(2024)
    for _ in range(25):
        weather = sample_weather(location, rng, season=season)
        assert 0 <= weather.humidity <= 100
        assert 0 <= weather.wind_speed < 25
        assert 0 <= weather.uv_index <= 11
        assert 0.1 <= weather.visibility <= 10
        assert 0 <= weather.precipitation <= 100
        assert weather.condition in SAMPLED_CONDITIONS


def test_winter_samples_are_colder_than_summer() -> None:
    rng = random.Random(9)
    winter = [sample_weather("new_york", rng, season="winter").temperature for _ in range(20)]
    summer = [sample_weather("new_york", rng, season="summer").temperature for _ in range(20)]

    assert max(winter) < min(summer)


def test_seeded_sampling_is_reproducible() -> None:
    first = sample_weather("los_angeles", random.Random(5), season="spring")
    second = sample_weather("los_angeles", random.Random(5), season="spring")
    assert first == second


def test_desert_condition_draws_favour_sun() -> None:
    rng = random.Random(1)
    draws = [choose_condition("desert", rng) for _ in range(500)]
    assert draws.count("sunny") > len(draws) / 2
