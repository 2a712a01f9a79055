"""Weather provider abstractions and implementations."""

from __future__ import annotations

import logging
import random
import time
from abc import ABC, abstractmethod
from typing import Callable, Dict, Mapping, Optional, Tuple

import requests
from pydantic import BaseModel, ValidationError

from logic.weather_sampler import sample_weather
from engine_app.config import DEFAULT_WEATHER_API_URL
from models.weather import WeatherCondition


LOGGER = logging.getLogger(__name__)

CACHE_TTL_SECONDS = 30 * 60
MAX_CACHE_ENTRIES = 128

LOCATION_COORDINATES: Mapping[str, Tuple[float, float]] = {
    "new_york": (40.7128, -74.0060),
    "los_angeles": (34.0522, -118.2437),
    "miami": (25.7617, -80.1918),
    "phoenix": (33.4484, -112.0740),
}


def condition_for_weather_code(code: int) -> str:
    """Map a WMO weather interpretation code onto an engine condition."""

    if code <= 1:
        return "sunny"
    if code <= 3:
        return "cloudy"
    if code <= 48:
        return "foggy"
    if code <= 67 or 80 <= code <= 82:
        return "rainy"
    if code <= 77 or code in (85, 86):
        return "snowy"
    if code >= 95:
        return "stormy"
    return "cloudy"


class _CurrentWeather(BaseModel):
    temperature_2m: float
    apparent_temperature: Optional[float] = None
    relative_humidity_2m: float = 50.0
    wind_speed_10m: float = 0.0
    weather_code: int = 3
    uv_index: float = 0.0
    precipitation_probability: float = 0.0
    visibility: float = 10000.0


class _ForecastResponse(BaseModel):
    current: _CurrentWeather


class WeatherProvider(ABC):
    """Abstract weather provider interface."""

    @abstractmethod
    def get_current(self, location: str) -> WeatherCondition:
        """Return a weather snapshot for a location."""


class ClimateWeatherProvider(WeatherProvider):
    """Offline provider that samples from the named climate profiles."""

    def __init__(self, rng: random.Random | None = None, season: str | None = None) -> None:
        self.rng = rng or random.Random()
        self.season = season

    def get_current(self, location: str) -> WeatherCondition:
        return sample_weather(location, self.rng, season=self.season)


class OpenMeteoProvider(WeatherProvider):
    """Open-Meteo provider with schema validation, caching and graceful fallbacks."""

    def __init__(
        self,
        api_url: str = DEFAULT_WEATHER_API_URL,
        timeout_seconds: float = 5.0,
        fallback: WeatherProvider | None = None,
        cache_ttl_seconds: float = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        max_cache_entries: int = MAX_CACHE_ENTRIES,
    ) -> None:
        self.api_url = api_url
        self.timeout_seconds = timeout_seconds
        self.fallback = fallback or ClimateWeatherProvider()
        self.cache_ttl_seconds = cache_ttl_seconds
        self.clock = clock
        self.max_cache_entries = max_cache_entries
        self._cache: Dict[str, Tuple[float, WeatherCondition]] = {}

    def _coordinates(self, location: str) -> Optional[Tuple[float, float]]:
        key = location.strip().lower().replace(" ", "_")
        if key in LOCATION_COORDINATES:
            return LOCATION_COORDINATES[key]
        parts = [part.strip() for part in location.split(",")]
        if len(parts) == 2:
            try:
                return float(parts[0]), float(parts[1])
            except ValueError:
                return None
        return None

    def _fallback_weather(self, location: str, reason: str) -> WeatherCondition:
        LOGGER.warning("Using sampled fallback weather", extra={"reason": reason})
        return self.fallback.get_current(location)

    def _parse(self, payload: dict) -> WeatherCondition:
        current = _ForecastResponse.model_validate(payload).current
        return WeatherCondition(
            temperature=current.temperature_2m,
            feels_like=current.apparent_temperature,
            humidity=max(0.0, min(100.0, current.relative_humidity_2m)),
            wind_speed=max(0.0, current.wind_speed_10m),
            condition=condition_for_weather_code(current.weather_code),
            uv_index=max(0.0, current.uv_index),
            precipitation=max(0.0, min(100.0, current.precipitation_probability)),
            visibility=max(0.0, current.visibility / 1000),
        )

    def _remember(self, cache_key: str, weather: WeatherCondition) -> None:
        """Store a fresh entry, dropping expired ones and then the oldest when full."""

        now = self.clock()
        for key in [key for key, (stored_at, _) in self._cache.items() if now - stored_at >= self.cache_ttl_seconds]:
            del self._cache[key]
        while self._cache and len(self._cache) >= self.max_cache_entries and cache_key not in self._cache:
            del self._cache[min(self._cache, key=lambda key: self._cache[key][0])]
        self._cache[cache_key] = (now, weather)

    def get_current(self, location: str) -> WeatherCondition:
        if not location:
            raise ValueError("location is required for weather lookups")

        cache_key = location.strip().lower()
        cached = self._cache.get(cache_key)
        if cached and self.clock() - cached[0] < self.cache_ttl_seconds:
            return cached[1]

        coordinates = self._coordinates(location)
        if coordinates is None:
            return self._fallback_weather(location, "unknown_location")

        LOGGER.info("Fetching current weather", extra={"location": location})
        params = {
            "latitude": coordinates[0],
            "longitude": coordinates[1],
            "current": ",".join(_CurrentWeather.model_fields),
            "timezone": "auto",
        }

        try:
            response = requests.get(self.api_url, params=params, timeout=self.timeout_seconds)
            response.raise_for_status()
            weather = self._parse(response.json())
        except (requests.Timeout, requests.RequestException) as exc:
            LOGGER.error("Weather API unreachable", exc_info=exc)
            return self._fallback_weather(location, "request_error")
        except ValidationError as exc:
            LOGGER.error("Weather payload schema validation failed", exc_info=exc)
            return self._fallback_weather(location, "schema_validation")

        self._remember(cache_key, weather)
        return weather


class MockWeatherProvider(WeatherProvider):
    """Offline deterministic weather provider for tests."""

    def __init__(self, weather: WeatherCondition | None = None) -> None:
        self.weather = weather or WeatherCondition(temperature=18.0, condition="sunny", humidity=50.0)
        self.calls = 0

    def get_current(self, location: str) -> WeatherCondition:
        LOGGER.info("Returning mock weather", extra={"location": location})
        self.calls += 1
        return self.weather


__all__ = [
    "WeatherProvider",
    "ClimateWeatherProvider",
    "OpenMeteoProvider",
    "MockWeatherProvider",
    "condition_for_weather_code",
    "LOCATION_COORDINATES",
]
