"""Application facade, configuration, validation and logging coverage."""

import contextlib
import json
import logging
import random
from pathlib import Path

import pytest
from pydantic import BaseModel, ValidationError

from engine_app.app import OutfitEngineApp
from engine_app.config import DEFAULT_WEATHER_API_URL, EngineConfig
from engine_app.logging_config import JsonFormatter, correlation_context, log_event, redact_for_log
from logic.validation import RecommendationRequest, WardrobeItemInput, WeatherInput, validation_failure
from models.weather import WeatherCondition
from tools.observability import instrument_operation
from tools.weather_provider import MockWeatherProvider

WARDROBE = [
    {"id": 1, "category": "tops", "name": "Wool sweater", "color": "navy", "style": "casual", "material": "wool"},
    {"id": 2, "category": "bottom", "name": "Jeans", "color": "blue", "style": "casual", "material": "denim"},
    {"id": 3, "category": "shoes", "name": "Boots", "color": "brown", "style": "casual", "material": "leather"},
    {"id": 4, "category": "outerwear", "name": "Rain jacket", "color": "black", "material": "synthetic", "image_url": "x"},
]


def _app(**overrides) -> OutfitEngineApp:
    config = EngineConfig(random_seed=3, **overrides)
    weather = WeatherCondition(temperature=6, condition="rainy", precipitation=70)
    return OutfitEngineApp(config=config, weather_provider=MockWeatherProvider(weather), rng=random.Random(3))


def test_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("APP_ENV", "APP_CONFIG_PATH", "ENGINE_RANDOM_SEED", "ENGINE_COMBINATION_CAP"):
        monkeypatch.delenv(key, raising=False)

    config = EngineConfig.from_env()

    assert config.combination_cap == 50
    assert config.default_limit == 5
    assert config.random_seed is None
    assert config.weather_api_url == DEFAULT_WEATHER_API_URL


def test_config_reads_yaml_and_env_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_file = tmp_path / "staging.yaml"
    config_file.write_text("# staging\ncombination_cap: 20\nrandom_seed: '11'\ndefault_climate_profile: miami\n")
    monkeypatch.setenv("APP_CONFIG_PATH", str(config_file))
    monkeypatch.setenv("ENGINE_COMBINATION_CAP", "12")

    config = EngineConfig.from_env()

    assert config.combination_cap == 12
    assert config.random_seed == 11
    assert config.default_climate_profile == "miami"


def test_validation_models_accept_aliases() -> None:
    item = WardrobeItemInput.model_validate({"id": 5, "category": "Shoes", "extra": True})
    assert item.item_id == "5"
    assert item.to_domain().category == "shoes"

    weather = WeatherInput.model_validate({"temperature": 3, "condition": "Snowy", "windSpeed": 12, "uvIndex": 1})
    assert weather.to_domain().wind_speed == 12
    assert weather.to_domain().condition == "snowy"

    request = RecommendationRequest.model_validate({"items": [], "context": {"userPreferences": {"styles": ["casual"]}}})
    assert request.context.to_domain().preferences.styles == ("casual",)
    assert request.context.to_domain().recent_outfits is None


def test_validation_failure_payload() -> None:
    with pytest.raises(ValidationError) as excinfo:
        WeatherInput.model_validate({"temperature": 10, "condition": "hail"})

    payload = validation_failure("bad weather", excinfo.value)
    assert payload["status"] == "needs_review"
    assert payload["details"][0]["loc"] == ["condition"]


def test_recommend_returns_ranked_payload() -> None:
    app = _app()
    weather = app.current_weather("new_york")["weather"]

    response = app.recommend(WARDROBE, context={"weather": weather, "occasion": "casual"}, limit=2)

    assert response["status"] == "ok"
    assert 1 <= len(response["recommendations"]) <= 2
    top = response["recommendations"][0]
    assert top["reasoning"].startswith("Perfect for 6°C rainy weather")
    assert response["diagnostics"]["combinations"]["candidate_count"] == 2


def test_recommend_uses_configured_default_limit() -> None:
    response = _app(default_limit=1).recommend(WARDROBE)
    assert len(response["recommendations"]) == 1


def test_recommend_rejects_invalid_payload() -> None:
    response = _app().recommend([{"category": "top"}])

    assert response["status"] == "needs_review"
    assert response["details"]


def test_score_weather_includes_advice() -> None:
    response = _app().score_weather(
        WARDROBE[:3],
        {"temperature": 2, "condition": "snowy", "humidity": 40, "windSpeed": 20, "precipitation": 60},
    )

    assert response["status"] == "ok"
    assert response["score"]["overall"] == pytest.approx(0.6375)
    assert response["advice"] == ["Consider waterproof outerwear or an umbrella"]


def test_score_weather_accepts_domain_weather() -> None:
    response = _app().score_weather([], WeatherCondition(temperature=20, condition="sunny"))
    assert response["score"]["overall"] == pytest.approx(0.7)
    assert response["advice"] == []


def test_sample_weather_defaults_to_configured_profile() -> None:
    response = _app(default_climate_profile="miami").sample_weather(season="summer")

    assert response["region"] == "tropical"
    assert response["season"] == "summer"
    assert response["band"] in {"freezing", "cold", "cool", "mild", "warm", "hot"}


def test_sample_weather_rejects_unknown_season() -> None:
    assert _app().sample_weather(season="monsoon")["status"] == "needs_review"


def test_current_weather_uses_provider() -> None:
    provider = MockWeatherProvider(WeatherCondition(temperature=-4, condition="snowy"))
    app = OutfitEngineApp(config=EngineConfig(), weather_provider=provider)

    response = app.current_weather()

    assert response["band"] == "freezing"
    assert provider.calls == 1


def test_redaction_scrubs_location_fields() -> None:
    payload = {"location": "Paris", "nested": {"latitude": 1.0, "occasion": "formal"}, "values": [{"user_id": "u"}]}
    assert redact_for_log(payload) == {
        "location": "[redacted]",
        "nested": {"latitude": "[redacted]", "occasion": "formal"},
        "values": [{"user_id": "[redacted]"}],
    }


def test_json_formatter_includes_correlation_id() -> None:
    logger = logging.getLogger("tests.json")
    records = []

    class _Capture(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            records.append(JsonFormatter().format(record))

    handler = _Capture()
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    try:
        with correlation_context("abc123"):
            log_event(logger, logging.INFO, "sample_event", location="Oslo", outfit_count=2)
    finally:
        logger.removeHandler(handler)

    entry = json.loads(records[0])
    assert entry["event"] == "sample_event"
    assert entry["correlation_id"] == "abc123"
    assert entry["location"] == "[redacted]"
    assert entry["outfit_count"] == 2


class _Echo(BaseModel):
    value: int


def test_instrument_operation_validates_inputs() -> None:
    @instrument_operation("echo", input_model=_Echo, on_validation_error=lambda exc: {"status": "needs_review"})
    def echo(value: int, note: str = "") -> dict:
        return {"status": "ok", "value": value}

    assert echo(value="4") == {"status": "ok", "value": 4}
    assert echo(value="four") == {"status": "needs_review"}


def test_instrument_operation_reraises_errors() -> None:
    @instrument_operation("boom")
    def boom() -> None:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        boom()


@contextlib.contextmanager
def _captured(*names: str):
    entries = []

    class _Capture(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            entries.append(json.loads(JsonFormatter().format(record)))

    handler = _Capture()
    loggers = [logging.getLogger(name) for name in names]
    levels = [logger.level for logger in loggers]
    for logger in loggers:
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    try:
        yield entries
    finally:
        for logger, level in zip(loggers, levels):
            logger.removeHandler(handler)
            logger.setLevel(level)


def test_instrument_operation_binds_positional_arguments() -> None:
    @instrument_operation("echo", input_model=_Echo)
    def echo(value: int) -> int:
        return value * 2

    assert echo("21") == 42
    with pytest.raises(ValidationError):
        echo("many")


def test_each_operation_gets_its_own_correlation_id() -> None:
    @instrument_operation("noop")
    def noop() -> None:
        return None

    with _captured("tools.observability") as entries:
        noop()
        noop()
        with correlation_context("outer-id"):
            noop()

    started = [entry for entry in entries if entry["event"] == "operation_started"]
    assert [entry["operation"] for entry in started] == ["noop", "noop", "noop"]
    assert started[0]["correlation_id"] != started[1]["correlation_id"]
    assert started[2]["correlation_id"] == "outer-id"
    assert all(entry["correlation_id"] for entry in entries)


def test_sample_weather_logs_validation_failures() -> None:
    app = _app()

    with _captured("tools.observability", "engine_app.app") as entries:
        response = app.sample_weather(location="phoenix", season="monsoon")

    assert response["status"] == "needs_review"
    assert response["details"][0]["loc"] == ["season"]
    failed = [entry for entry in entries if entry["event"] == "operation_validation_failed"]
    assert len(failed) == 1
    assert failed[0]["operation"] == "sample_weather"
    assert not any(entry["event"] == "operation_started" for entry in entries)


def test_sample_weather_logs_completion_inside_operation_context() -> None:
    app = _app()

    with _captured("tools.observability", "engine_app.app") as entries:
        response = app.sample_weather("phoenix", season="summer")

    assert response["region"] == "desert"
    completed = [entry for entry in entries if entry["event"] == "app_call_completed"]
    assert completed[0]["operation"] == "app:sample_weather"
    assert completed[0]["method"] == "sample_weather"
    assert len({entry["correlation_id"] for entry in entries}) == 1
    started = next(entry for entry in entries if entry["event"] == "operation_started")
    assert started["arguments"]["location"] == "[redacted]"


def test_score_weather_returns_band_guidance() -> None:
    response = _app().score_weather(
        [{"id": "tee", "category": "top", "material": "cotton"}, {"id": "jeans", "category": "bottom", "material": "denim"}],
        {"temperature": 15, "condition": "cloudy"},
    )

    guidance = response["guidance"]
    assert guidance["band"] == "cool"
    assert guidance["layering_strategy"] == "Light Layering"
    assert guidance["suggestions"] == [
        "Use light layering for optimal comfort",
        "Consider materials like light wool or polyester",
    ]
    assert guidance["avoided_item_ids"] == []
