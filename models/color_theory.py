"""Colour harmony tables and helpers for deterministic outfit scoring."""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

HARMONIOUS_COLOR_SETS: Tuple[Tuple[str, ...], ...] = (
    ("black", "white", "gray", "grey"),
    ("blue", "white", "beige"),
    ("black", "red", "white"),
    ("navy", "brown", "cream"),
    ("green", "brown", "beige"),
)

NEUTRAL_COLORS: Tuple[str, ...] = ("black", "white", "gray", "grey", "beige", "cream", "navy")

NEUTRAL_RATIO_THRESHOLD = 0.7


def _normalise_colors(colors: Iterable[Optional[str]]) -> List[str]:
    return [color.strip().lower() for color in colors if color and color.strip()]


def _mentions_any(color: str, palette: Sequence[str]) -> bool:
    return any(shade in color for shade in palette)


def harmonious_set_for(colors: Iterable[Optional[str]]) -> Optional[Tuple[str, ...]]:
    """Return the first harmonious set that covers every colour, if any.

    Matching is by substring so that ``"light blue"`` or ``"off white"``
    count towards ``blue`` and ``white``.
    """

    normalized = _normalise_colors(colors)
    if not normalized:
        return None
    for palette in HARMONIOUS_COLOR_SETS:
        if all(_mentions_any(color, palette) for color in normalized):
            logger.debug("harmonious set %s covers %s", palette, normalized)
            return palette
    return None


def neutral_ratio(colors: Iterable[Optional[str]]) -> float:
    """Return the share of colours that contain a neutral shade."""

    normalized = _normalise_colors(colors)
    if not normalized:
        return 0.0
    neutral_count = sum(1 for color in normalized if _mentions_any(color, NEUTRAL_COLORS))
    return neutral_count / len(normalized)


__all__ = [
    "HARMONIOUS_COLOR_SETS",
    "NEUTRAL_COLORS",
    "NEUTRAL_RATIO_THRESHOLD",
    "harmonious_set_for",
    "neutral_ratio",
]
