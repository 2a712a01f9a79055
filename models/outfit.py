"""Outfit candidates, recommendations and weather score schemas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from models.wardrobe_item import WardrobeItem


def outfit_id_for(items: Tuple[WardrobeItem, ...]) -> str:
    """Stable outfit identifier built from the sorted item ids."""

    return "outfit-" + "-".join(sorted(item.item_id for item in items))


@dataclass(frozen=True)
class OutfitCandidate:
    """Provisional grouping produced by a template, not yet scored."""

    items: Tuple[WardrobeItem, ...]
    template: str

    @property
    def outfit_id(self) -> str:
        return outfit_id_for(self.items)


@dataclass(frozen=True)
class OutfitRecommendation:
    outfit_id: str
    items: Tuple[WardrobeItem, ...]
    score: float
    reasoning: str
    tags: Tuple[str, ...]
    sub_scores: Dict[str, float] = field(default_factory=dict)
    template: Optional[str] = None
    occasion: Optional[str] = None
    weather: Optional[str] = None
    season: Optional[str] = None

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.outfit_id,
            "items": [item.to_dict() for item in self.items],
            "score": round(self.score, 2),
            "reasoning": self.reasoning,
            "tags": list(self.tags),
            "sub_scores": {name: round(value, 4) for name, value in self.sub_scores.items()},
            "template": self.template,
            "occasion": self.occasion,
            "weather": self.weather,
            "season": self.season,
        }


@dataclass(frozen=True)
class ItemWeatherScore:
    item_id: str
    fabric: str
    temperature: float
    comfort: float
    protection: float
    overall: float
    reasoning: Tuple[str, ...] = ()


@dataclass(frozen=True)
class OutfitWeatherScore:
    """Weather suitability of a fixed item set; every dimension lies in [0, 1]."""

    overall: float
    temperature: float
    comfort: float
    protection: float
    appropriateness: float
    reasoning: Tuple[str, ...] = ()
    band: Optional[str] = None
    items: Tuple[ItemWeatherScore, ...] = ()

    def to_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {
            "overall": round(self.overall, 4),
            "temperature": round(self.temperature, 4),
            "comfort": round(self.comfort, 4),
            "protection": round(self.protection, 4),
            "appropriateness": round(self.appropriateness, 4),
            "reasoning": list(self.reasoning),
            "band": self.band,
        }
        items: List[Dict[str, object]] = [
            {
                "item_id": score.item_id,
                "fabric": score.fabric,
                "temperature": score.temperature,
                "comfort": score.comfort,
                "protection": score.protection,
                "overall": round(score.overall, 4),
            }
            for score in self.items
        ]
        payload["items"] = items
        return payload


@dataclass(frozen=True)
class WeatherGuidance:
    """Band-level layering and fabric guidance for a fixed item set."""

    band: str
    required_layers: Tuple[str, ...]
    preferred_materials: Tuple[str, ...]
    avoided_materials: Tuple[str, ...]
    suggestions: Tuple[str, ...] = ()
    layering_strategy: Optional[str] = None
    layering_advantages: Tuple[str, ...] = ()
    avoided_item_ids: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, object]:
        return {
            "band": self.band,
            "required_layers": list(self.required_layers),
            "preferred_materials": list(self.preferred_materials),
            "avoided_materials": list(self.avoided_materials),
            "suggestions": list(self.suggestions),
            "layering_strategy": self.layering_strategy,
            "layering_advantages": list(self.layering_advantages),
            "avoided_item_ids": list(self.avoided_item_ids),
        }


__all__ = [
    "OutfitCandidate",
    "OutfitRecommendation",
    "ItemWeatherScore",
    "OutfitWeatherScore",
    "WeatherGuidance",
    "outfit_id_for",
]
