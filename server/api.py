"""FastAPI server exposing the outfit engine for deployment."""

from fastapi import FastAPI, HTTPException

from engine_app.app import OutfitEngineApp
from engine_app.logging_config import configure_logging
from logic.validation import RecommendationRequest, WeatherSampleRequest, WeatherScoreRequest

configure_logging()

engine_app = OutfitEngineApp()
app = FastAPI(title="Outfit Engine", version="0.1.0")


def _ensure_ok(response: dict) -> dict:
    if response.get("status") != "ok":
        raise HTTPException(status_code=400, detail=response.get("details") or response.get("message"))
    return response


@app.get("/healthz")
async def healthcheck() -> dict:
    """Lightweight readiness probe."""

    return {
        "status": "ok",
        "service": "outfit-engine",
        "environment": engine_app.config.environment or "local",
    }


@app.post("/recommendations")
def recommend(request: RecommendationRequest) -> dict:
    """Rank outfits for the supplied wardrobe items and context."""

    response = engine_app.recommend(
        items=[item.model_dump() for item in request.items],
        context=request.context.model_dump(),
        limit=request.limit,
    )
    return _ensure_ok(response)


@app.post("/weather/score")
def score_weather(request: WeatherScoreRequest) -> dict:
    """Score a fixed set of items against a weather snapshot."""

    response = engine_app.score_weather(
        items=[item.model_dump() for item in request.items],
        weather=request.weather.model_dump(),
    )
    return _ensure_ok(response)


@app.post("/weather/sample")
def sample_weather(request: WeatherSampleRequest) -> dict:
    """Synthesize weather for a named climate profile."""

    return _ensure_ok(engine_app.sample_weather(location=request.location, season=request.season))


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:app", host="0.0.0.0", port=8080, reload=False)
