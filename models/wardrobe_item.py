"""Wardrobe item data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from models.taxonomy import normalize_category, normalize_label, normalize_season


def _clean_text(value: Any) -> Optional[str]:
    """Strip a free-text value while preserving its case."""

    if value is None:
        return None
    cleaned = str(value).strip()
    return cleaned or None


@dataclass(frozen=True)
class WardrobeItem:
    """Represents an item in the user's wardrobe.

    Items are supplied by the persistence layer; the engine only reads them.
    Every attribute except ``item_id`` and ``category`` is optional and a
    missing value leads to neutral scoring rather than an error.
    """

    item_id: str
    category: str
    name: Optional[str] = None
    sub_category: Optional[str] = None
    color: Optional[str] = None
    style: Optional[str] = None
    material: Optional[str] = None
    season: Optional[str] = None
    brand: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "item_id", str(self.item_id))
        object.__setattr__(self, "category", normalize_category(self.category))
        object.__setattr__(self, "name", _clean_text(self.name))
        object.__setattr__(self, "sub_category", normalize_label(self.sub_category))
        object.__setattr__(self, "color", normalize_label(self.color))
        object.__setattr__(self, "style", normalize_label(self.style))
        object.__setattr__(self, "material", normalize_label(self.material))
        object.__setattr__(self, "season", normalize_season(self.season))
        object.__setattr__(self, "brand", _clean_text(self.brand))

    @property
    def descriptor(self) -> str:
        """Lower-cased text used for category keyword matching."""

        parts = [self.category, self.sub_category or "", (self.name or "").lower()]
        return " ".join(part for part in parts if part)

    @property
    def display_name(self) -> str:
        return self.name or self.sub_category or self.category

    def to_dict(self) -> Dict[str, Any]:
        return {
            "item_id": self.item_id,
            "category": self.category,
            "name": self.name,
            "sub_category": self.sub_category,
            "color": self.color,
            "style": self.style,
            "material": self.material,
            "season": self.season,
            "brand": self.brand,
        }


def from_raw_metadata(metadata: Dict[str, Any]) -> WardrobeItem:
    """Factory to build a :class:`WardrobeItem` from a loose caller payload."""

    item_id = metadata.get("item_id") or metadata.get("id")
    category = metadata.get("category")
    missing = [name for name, value in (("item_id", item_id), ("category", category)) if not value]
    if missing:
        raise ValueError(f"Missing required fields for WardrobeItem: {missing}")

    return WardrobeItem(
        item_id=str(item_id),
        category=str(category),
        name=metadata.get("name"),
        sub_category=metadata.get("sub_category"),
        color=metadata.get("color") or metadata.get("primary_color"),
        style=metadata.get("style"),
        material=metadata.get("material"),
        season=metadata.get("season"),
        brand=metadata.get("brand"),
    )


__all__ = ["WardrobeItem", "from_raw_metadata"]
