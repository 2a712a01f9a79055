"""Simple entrypoint to run the outfit engine locally."""

import json

from engine_app.app import OutfitEngineApp
from engine_app.config import EngineConfig

DEMO_WARDROBE = [
    {"id": "t1", "category": "tops", "name": "Wool sweater", "color": "navy", "style": "casual", "material": "wool"},
    {"id": "t2", "category": "top", "name": "Silk blouse", "color": "white", "style": "elegant", "material": "silk"},
    {"id": "b1", "category": "bottom", "name": "Jeans", "color": "blue", "style": "casual", "material": "denim"},
    {"id": "s1", "category": "shoes", "name": "Leather boots", "color": "brown", "style": "classic", "material": "leather"},
    {"id": "o1", "category": "outerwear", "name": "Rain coat", "color": "black", "style": "classic", "material": "synthetic"},
]


def main() -> None:
    app = OutfitEngineApp(config=EngineConfig(random_seed=7))
    weather = app.sample_weather(location="new_york")
    print(json.dumps(weather, indent=2))

    result = app.recommend(
        DEMO_WARDROBE,
        context={"weather": weather["weather"], "occasion": "casual", "season": weather["season"]},
        limit=3,
    )
    for recommendation in result["recommendations"]:
        print(f"{recommendation['score']:6.2f}  {recommendation['id']}  {recommendation['reasoning']}")


if __name__ == "__main__":
    main()
