"""Weather snapshots, climate profiles and the seasonal tables behind sampling."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

CONDITIONS: Tuple[str, ...] = ("sunny", "cloudy", "rainy", "snowy", "stormy", "foggy")
DEFAULT_CONDITION = "cloudy"

REGIONS: Tuple[str, ...] = ("tropical", "temperate", "arctic", "desert", "mediterranean")


@dataclass(frozen=True)
class WeatherCondition:
    """A single weather snapshot in metric units.

    ``precipitation`` is a 0-100 likelihood, ``visibility`` is in kilometres
    and ``wind_speed`` in km/h.
    """

    temperature: float
    condition: str = DEFAULT_CONDITION
    feels_like: Optional[float] = None
    humidity: float = 50.0
    wind_speed: float = 0.0
    uv_index: float = 0.0
    precipitation: float = 0.0
    visibility: float = 10.0

    def __post_init__(self) -> None:
        condition = (self.condition or "").strip().lower()
        object.__setattr__(self, "condition", condition if condition in CONDITIONS else DEFAULT_CONDITION)
        if self.feels_like is None:
            object.__setattr__(self, "feels_like", self.temperature)

    def to_dict(self) -> dict:
        return {
            "temperature": self.temperature,
            "feels_like": self.feels_like,
            "humidity": self.humidity,
            "wind_speed": self.wind_speed,
            "condition": self.condition,
            "uv_index": self.uv_index,
            "precipitation": self.precipitation,
            "visibility": self.visibility,
        }


@dataclass(frozen=True)
class ClimateProfile:
    """Named baseline used to synthesise plausible weather samples."""

    region: str
    avg_temp: float
    avg_humidity: float
    rainy_days: int
    season: Optional[str] = None


@dataclass(frozen=True)
class SeasonalAdjustment:
    temperature: float
    uv_index: float


DEFAULT_CLIMATE_PROFILE = "new_york"

CLIMATE_PROFILES: Mapping[str, ClimateProfile] = MappingProxyType(
    {
        "new_york": ClimateProfile(region="temperate", avg_temp=15, avg_humidity=65, rainy_days=120),
        "los_angeles": ClimateProfile(region="mediterranean", avg_temp=22, avg_humidity=50, rainy_days=35),
        "miami": ClimateProfile(region="tropical", avg_temp=28, avg_humidity=80, rainy_days=150),
        "phoenix": ClimateProfile(region="desert", avg_temp=24, avg_humidity=30, rainy_days=30),
    }
)

SEASONAL_ADJUSTMENTS: Mapping[str, SeasonalAdjustment] = MappingProxyType(
    {
        "spring": SeasonalAdjustment(temperature=0, uv_index=0),
        "summer": SeasonalAdjustment(temperature=8, uv_index=3),
        "fall": SeasonalAdjustment(temperature=-5, uv_index=-2),
        "winter": SeasonalAdjustment(temperature=-12, uv_index=-4),
    }
)

SAMPLED_CONDITIONS: Tuple[str, ...] = ("sunny", "cloudy", "rainy", "stormy", "foggy")

REGION_CONDITION_WEIGHTS: Mapping[str, Tuple[float, ...]] = MappingProxyType(
    {
        "tropical": (0.4, 0.3, 0.2, 0.05, 0.05),
        "desert": (0.7, 0.2, 0.05, 0.03, 0.02),
    }
)
DEFAULT_CONDITION_WEIGHTS: Tuple[float, ...] = (0.3, 0.4, 0.15, 0.05, 0.1)

TEMPERATURE_BANDS: Tuple[Tuple[float, str], ...] = (
    (0, "freezing"),
    (10, "cold"),
    (18, "cool"),
    (25, "mild"),
    (32, "warm"),
)


@dataclass(frozen=True)
class BandGuidance:
    """Layers and fabrics that suit one temperature band."""

    required_layers: Tuple[str, ...]
    preferred_materials: Tuple[str, ...]
    avoided_materials: Tuple[str, ...]


@dataclass(frozen=True)
class LayeringStrategy:
    """A layering approach for an inclusive temperature range in °C."""

    name: str
    min_temp: float
    max_temp: float
    advantages: Tuple[str, ...]

    def covers(self, temperature: float) -> bool:
        return self.min_temp <= temperature <= self.max_temp


BAND_GUIDANCE: Mapping[str, BandGuidance] = MappingProxyType(
    {
        "freezing": BandGuidance(
            ("base", "insulation", "outer", "extremities"),
            ("wool", "down", "fleece", "synthetic insulation"),
            ("cotton", "linen", "silk"),
        ),
        "cold": BandGuidance(
            ("base", "mid", "outer"),
            ("wool", "fleece", "cotton blend", "synthetic"),
            ("linen", "mesh"),
        ),
        "cool": BandGuidance(
            ("base", "mid"),
            ("cotton", "light wool", "denim", "polyester"),
            ("heavy wool", "down"),
        ),
        "mild": BandGuidance(
            ("base",),
            ("cotton", "linen blend", "modal", "viscose"),
            ("wool", "fleece", "heavy denim"),
        ),
        "warm": BandGuidance(
            ("base",),
            ("cotton", "linen", "modal", "bamboo", "tencel"),
            ("wool", "polyester", "acrylic"),
        ),
        "hot": BandGuidance(
            ("minimal",),
            ("linen", "cotton", "bamboo", "moisture-wicking"),
            ("synthetic", "wool", "heavy fabrics"),
        ),
    }
)

# Ranges overlap at their edges; the first match wins.
LAYERING_STRATEGIES: Tuple[LayeringStrategy, ...] = (
    LayeringStrategy("Base Layer System", -20, 10, ("Temperature regulation", "Moisture control", "Adaptability")),
    LayeringStrategy("Light Layering", 10, 25, ("Style flexibility", "Easy adjustment", "Professional appearance")),
    LayeringStrategy("Minimal Approach", 25, 45, ("Maximum comfort", "Optimal breathability", "Minimal restriction")),
)


def get_climate_profile(location: Optional[str]) -> ClimateProfile:
    """Return the climate profile for a location key, defaulting to New York."""

    key = (location or "").strip().lower().replace(" ", "_")
    return CLIMATE_PROFILES.get(key, CLIMATE_PROFILES[DEFAULT_CLIMATE_PROFILE])


def season_for_date(day: date) -> str:
    """Meteorological northern-hemisphere season for a date."""

    month = day.month
    if 3 <= month <= 5:
        return "spring"
    if 6 <= month <= 8:
        return "summer"
    if 9 <= month <= 11:
        return "fall"
    return "winter"


def temperature_band(temperature: float) -> str:
    """Label a temperature using the freezing/cold/cool/mild/warm/hot bands."""

    for upper_bound, label in TEMPERATURE_BANDS:
        if temperature < upper_bound:
            return label
    return "hot"


def layering_strategy_for(temperature: float) -> Optional[LayeringStrategy]:
    """First layering strategy whose range covers ``temperature``, if any."""

    return next((strategy for strategy in LAYERING_STRATEGIES if strategy.covers(temperature)), None)


__all__ = [
    "CONDITIONS",
    "REGIONS",
    "WeatherCondition",
    "ClimateProfile",
    "SeasonalAdjustment",
    "CLIMATE_PROFILES",
    "DEFAULT_CLIMATE_PROFILE",
    "SEASONAL_ADJUSTMENTS",
    "SAMPLED_CONDITIONS",
    "REGION_CONDITION_WEIGHTS",
    "DEFAULT_CONDITION_WEIGHTS",
    "BandGuidance",
    "LayeringStrategy",
    "BAND_GUIDANCE",
    "LAYERING_STRATEGIES",
    "get_climate_profile",
    "season_for_date",
    "temperature_band",
    "layering_strategy_for",
]
