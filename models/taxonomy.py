"""Canonical taxonomy definitions for wardrobe items.

This module centralises the labels the engine reasons about: outfit
categories and their aliases, seasons, style-compatibility groups and the
occasion keyword table. Every table is immutable and built once at import so
that concurrent callers can share it safely.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a taxonomy key."""

    return value.strip().lower().replace("_", " ")


CATEGORIES: Tuple[str, ...] = ("top", "bottom", "dress", "shoes", "outerwear", "accessory")

CATEGORY_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "tops": "top",
        "bottoms": "bottom",
        "pants": "bottom",
        "dresses": "dress",
        "footwear": "shoes",
        "shoe": "shoes",
        "outerwears": "outerwear",
        "accessories": "accessory",
    }
)

SEASONS: Tuple[str, ...] = ("spring", "summer", "fall", "winter")
ALL_SEASONS = "all"

SEASON_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "autumn": "fall",
        "all year": "all",
        "all-year": "all",
        "all season": "all",
        "all-season": "all",
        "all seasons": "all",
    }
)

STYLE_COMPATIBILITY_GROUPS: Tuple[frozenset, ...] = (
    frozenset({"casual", "streetwear", "sporty"}),
    frozenset({"formal", "business", "professional"}),
    frozenset({"elegant", "chic", "sophisticated"}),
    frozenset({"bohemian", "vintage", "retro"}),
    frozenset({"minimalist", "modern", "contemporary"}),
)

OCCASION_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "formal": ("suit", "dress", "blazer", "tie", "heels"),
        "casual": ("jeans", "t-shirt", "sneakers", "shorts"),
        "business": ("blazer", "trousers", "shirt", "dress shoes"),
        "athletic": ("sportswear", "sneakers", "shorts", "activewear"),
        "party": ("dress", "heels", "accessories"),
    }
)


def normalize_category(value: Optional[str]) -> str:
    """Map a raw category string onto a canonical category.

    Unknown categories are returned lower-cased rather than rejected; they
    never match an outfit template but still flow through scoring.
    """

    if not value:
        return "other"
    key = _normalize_key(value)
    return CATEGORY_ALIASES.get(key, key)


def normalize_season(value: Optional[str]) -> Optional[str]:
    """Map a raw season tag onto ``spring``/``summer``/``fall``/``winter``/``all``."""

    if not value:
        return None
    key = _normalize_key(value)
    return SEASON_ALIASES.get(key, key)


def normalize_label(value: Optional[str]) -> Optional[str]:
    """Lower-case and strip an optional free-text label, mapping blanks to None."""

    if value is None:
        return None
    cleaned = str(value).strip().lower()
    return cleaned or None


__all__ = [
    "CATEGORIES",
    "CATEGORY_ALIASES",
    "SEASONS",
    "ALL_SEASONS",
    "STYLE_COMPATIBILITY_GROUPS",
    "OCCASION_KEYWORDS",
    "normalize_category",
    "normalize_season",
    "normalize_label",
]
