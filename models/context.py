"""Recommendation context supplied by the caller for a single request."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from models.taxonomy import normalize_label, normalize_season
from models.weather import WeatherCondition


def _as_tuple(values: Optional[Iterable[str]]) -> Tuple[str, ...]:
    if not values:
        return ()
    return tuple(str(value).strip() for value in values if value and str(value).strip())


@dataclass(frozen=True)
class UserPreferences:
    styles: Tuple[str, ...] = field(default_factory=tuple)
    colors: Tuple[str, ...] = field(default_factory=tuple)
    brands: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "styles", _as_tuple(self.styles))
        object.__setattr__(self, "colors", _as_tuple(self.colors))
        object.__setattr__(self, "brands", _as_tuple(self.brands))


@dataclass(frozen=True)
class RecommendationContext:
    """Optional signals that steer filtering and scoring.

    ``recent_outfits`` distinguishes ``None`` (no history supplied, the
    variety term is omitted) from an empty tuple (history supplied but empty).
    """

    weather: Optional[WeatherCondition] = None
    occasion: Optional[str] = None
    season: Optional[str] = None
    preferences: Optional[UserPreferences] = None
    recent_outfits: Optional[Tuple[str, ...]] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "occasion", normalize_label(self.occasion))
        object.__setattr__(self, "season", normalize_season(self.season))
        if self.recent_outfits is not None:
            object.__setattr__(self, "recent_outfits", _as_tuple(self.recent_outfits))


__all__ = ["UserPreferences", "RecommendationContext"]
