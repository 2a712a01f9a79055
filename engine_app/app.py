"""Outfit engine app bootstrap."""

import logging
import random
from typing import Any, Dict, Iterable, Mapping, Optional

from pydantic import ValidationError

from engine_app.config import EngineConfig
from engine_app.logging_config import configure_logging, get_logger, log_event, operation_context
from logic.recommender import generate_recommendations
from logic.validation import (
    RecommendationRequest,
    WeatherSampleRequest,
    WeatherScoreRequest,
    validation_failure,
)
from logic.weather_matching import analyze_outfit_for_weather, generate_band_guidance, generate_weather_advice
from logic.weather_sampler import resolve_profile, sample_weather
from models.wardrobe_item import WardrobeItem
from models.weather import WeatherCondition, temperature_band
from tools.observability import instrument_operation
from tools.weather_provider import ClimateWeatherProvider, OpenMeteoProvider, WeatherProvider


LOGGER = get_logger(__name__)


def _as_payload(value: Any) -> Any:
    """Turn domain objects back into plain dicts so every entry point validates the same way."""

    if isinstance(value, (WardrobeItem, WeatherCondition)):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_as_payload(entry) for entry in value]
    return value


class OutfitEngineApp:
    """Wires together config, the random source, the weather provider and the engine."""

    def __init__(
        self,
        config: EngineConfig | None = None,
        weather_provider: WeatherProvider | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or EngineConfig.from_env()
        configure_logging()
        self.rng = rng or random.Random(self.config.random_seed)
        self.weather_provider = weather_provider or OpenMeteoProvider(
            api_url=self.config.weather_api_url,
            timeout_seconds=self.config.weather_timeout_seconds,
            fallback=ClimateWeatherProvider(rng=self.rng),
        )

    @instrument_operation("recommend")
    def recommend(
        self,
        items: Iterable[Any],
        context: Mapping[str, Any] | None = None,
        limit: int | None = None,
    ) -> dict:
        """Rank outfits for raw wardrobe items and an optional context payload."""

        with operation_context("app:recommend") as correlation_id:
            payload = {
                "items": _as_payload(list(items or [])),
                "context": dict(context or {}),
                "limit": self.config.default_limit if limit is None else limit,
            }
            try:
                request = RecommendationRequest.model_validate(payload)
            except ValidationError as exc:
                log_event(
                    LOGGER,
                    level=logging.WARNING,
                    event="app_request_invalid",
                    method="recommend",
                    details=str(exc),
                    correlation_id=correlation_id,
                )
                return validation_failure("Invalid recommendation request payload", exc)

            engine_context = request.context.to_domain()
            result = generate_recommendations(
                [item.to_domain() for item in request.items],
                engine_context,
                limit=request.limit,
                rng=self.rng,
                cap=self.config.combination_cap,
                draws_per_template=self.config.draws_per_template,
            )

            log_event(
                LOGGER,
                level=logging.INFO,
                event="app_call_completed",
                method="recommend",
                correlation_id=correlation_id,
                item_count=len(request.items),
                outfit_count=len(result.recommendations),
            )
            return {
                "status": "ok",
                "recommendations": [recommendation.to_dict() for recommendation in result.recommendations],
                "diagnostics": result.diagnostics,
            }

    @instrument_operation("score_weather")
    def score_weather(self, items: Iterable[Any], weather: Mapping[str, Any] | WeatherCondition) -> dict:
        """Score a fixed item set against a weather snapshot and attach advice and band guidance."""

        with operation_context("app:score_weather") as correlation_id:
            payload = {"items": _as_payload(list(items or [])), "weather": _as_payload(weather)}
            try:
                request = WeatherScoreRequest.model_validate(payload)
            except ValidationError as exc:
                log_event(
                    LOGGER,
                    level=logging.WARNING,
                    event="app_request_invalid",
                    method="score_weather",
                    details=str(exc),
                    correlation_id=correlation_id,
                )
                return validation_failure("Invalid weather score payload", exc)

            domain_items = [item.to_domain() for item in request.items]
            snapshot = request.weather.to_domain()
            score = analyze_outfit_for_weather(domain_items, snapshot)
            advice = generate_weather_advice(domain_items, snapshot, score)
            guidance = generate_band_guidance(domain_items, snapshot)

            log_event(
                LOGGER,
                level=logging.INFO,
                event="app_call_completed",
                method="score_weather",
                correlation_id=correlation_id,
                overall=round(score.overall, 4),
                advice_count=len(advice),
            )
            return {
                "status": "ok",
                "score": score.to_dict(),
                "advice": advice,
                "guidance": guidance.to_dict(),
            }

    @instrument_operation(
        "sample_weather",
        input_model=WeatherSampleRequest,
        on_validation_error=lambda exc: validation_failure("Invalid weather sample payload", exc),
    )
    def sample_weather(self, location: Optional[str] = None, season: Optional[str] = None) -> dict:
        """Synthesize weather for a named climate profile.

        ``location`` and ``season`` arrive already validated by
        ``WeatherSampleRequest``.
        """

        with operation_context("app:sample_weather") as correlation_id:
            resolved_location = location or self.config.default_climate_profile
            profile = resolve_profile(resolved_location, season=season)
            weather = sample_weather(resolved_location, self.rng, season=profile.season)
            band = temperature_band(weather.temperature)

            log_event(
                LOGGER,
                level=logging.INFO,
                event="app_call_completed",
                method="sample_weather",
                correlation_id=correlation_id,
                region=profile.region,
                season=profile.season,
                band=band,
            )
            return {
                "status": "ok",
                "region": profile.region,
                "season": profile.season,
                "weather": weather.to_dict(),
                "band": band,
            }

    @instrument_operation("current_weather")
    def current_weather(self, location: Optional[str] = None) -> dict:
        """Return the provider's current weather for a location."""

        resolved_location = location or self.config.default_climate_profile
        weather = self.weather_provider.get_current(resolved_location)
        return {
            "status": "ok",
            "weather": weather.to_dict(),
            "band": temperature_band(weather.temperature),
        }


__all__ = ["OutfitEngineApp"]
