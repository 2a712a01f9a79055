"""Pydantic schemas and helpers for validating engine requests."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from models.context import RecommendationContext, UserPreferences
from models.wardrobe_item import WardrobeItem
from models.weather import CONDITIONS, WeatherCondition


class WardrobeItemInput(BaseModel):
    """Caller payload for one wardrobe item; extra persistence fields are ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    item_id: str = Field(min_length=1, validation_alias=AliasChoices("item_id", "id"))
    category: str = Field(min_length=1)
    name: Optional[str] = None
    sub_category: Optional[str] = None
    color: Optional[str] = None
    style: Optional[str] = None
    material: Optional[str] = None
    season: Optional[str] = None
    brand: Optional[str] = None

    @field_validator("item_id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value

    def to_domain(self) -> WardrobeItem:
        return WardrobeItem(**self.model_dump())


class WeatherInput(BaseModel):
    """Weather snapshot contract, accepting camelCase keys from web callers."""

    model_config = ConfigDict(populate_by_name=True)

    temperature: float
    condition: str = "cloudy"
    feels_like: Optional[float] = Field(default=None, alias="feelsLike")
    humidity: float = Field(default=50.0, ge=0, le=100)
    wind_speed: float = Field(default=0.0, ge=0, alias="windSpeed")
    uv_index: float = Field(default=0.0, ge=0, alias="uvIndex")
    precipitation: float = Field(default=0.0, ge=0, le=100)
    visibility: float = Field(default=10.0, ge=0)

    @field_validator("condition")
    @classmethod
    def _known_condition(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in CONDITIONS:
            raise ValueError(f"condition must be one of {list(CONDITIONS)}")
        return normalized

    def to_domain(self) -> WeatherCondition:
        return WeatherCondition(**self.model_dump())


class PreferencesInput(BaseModel):
    styles: List[str] = []
    colors: List[str] = []
    brands: List[str] = []


class ContextInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    weather: Optional[WeatherInput] = None
    occasion: Optional[str] = None
    season: Optional[str] = None
    preferences: Optional[PreferencesInput] = Field(default=None, alias="userPreferences")
    recent_outfits: Optional[List[str]] = Field(default=None, alias="recentOutfits")

    def to_domain(self) -> RecommendationContext:
        preferences = None
        if self.preferences is not None:
            preferences = UserPreferences(
                styles=tuple(self.preferences.styles),
                colors=tuple(self.preferences.colors),
                brands=tuple(self.preferences.brands),
            )
        return RecommendationContext(
            weather=self.weather.to_domain() if self.weather else None,
            occasion=self.occasion,
            season=self.season,
            preferences=preferences,
            recent_outfits=tuple(self.recent_outfits) if self.recent_outfits is not None else None,
        )


class RecommendationRequest(BaseModel):
    items: List[WardrobeItemInput] = []
    context: ContextInput = Field(default_factory=ContextInput)
    limit: int = Field(default=5, ge=0, le=50)


class WeatherScoreRequest(BaseModel):
    items: List[WardrobeItemInput] = []
    weather: WeatherInput


class WeatherSampleRequest(BaseModel):
    location: Optional[str] = None
    season: Optional[Literal["spring", "summer", "fall", "autumn", "winter"]] = None


class ValidationResult(BaseModel):
    """Wrapper returned to callers when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    details = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
    return ValidationResult(message=message, details=details).model_dump()


__all__ = [
    "WardrobeItemInput",
    "WeatherInput",
    "PreferencesInput",
    "ContextInput",
    "RecommendationRequest",
    "WeatherScoreRequest",
    "WeatherSampleRequest",
    "ValidationResult",
    "validation_failure",
]
