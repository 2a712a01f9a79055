"""Model package exports."""

from models.context import RecommendationContext, UserPreferences
from models.fabrics import FabricProperties, get_fabric_properties
from models.outfit import OutfitCandidate, OutfitRecommendation, OutfitWeatherScore
from models.taxonomy import *  # noqa: F401,F403
from models.wardrobe_item import WardrobeItem, from_raw_metadata
from models.weather import ClimateProfile, WeatherCondition

__all__ = [
    "ClimateProfile",
    "FabricProperties",
    "OutfitCandidate",
    "OutfitRecommendation",
    "OutfitWeatherScore",
    "RecommendationContext",
    "UserPreferences",
    "WardrobeItem",
    "WeatherCondition",
    "from_raw_metadata",
    "get_fabric_properties",
]
