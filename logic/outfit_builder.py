"""Template-driven outfit candidate generation with transparent diagnostics."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from models.outfit import OutfitCandidate
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

DEFAULT_COMBINATION_CAP = 50
MIN_OUTFIT_SIZE = 2

OUTFIT_TEMPLATES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("casual_basics", ("top", "bottom", "shoes")),
    ("dress_look", ("dress", "shoes", "accessory")),
    ("layered", ("top", "bottom", "outerwear", "shoes")),
    ("accessorised", ("top", "bottom", "shoes", "accessory")),
)


@dataclass(frozen=True)
class CombinationResult:
    candidates: List[OutfitCandidate]
    diagnostics: Dict[str, object]


def group_by_category(items: Sequence[WardrobeItem]) -> Dict[str, List[WardrobeItem]]:
    """Bucket items by category, keeping input order inside each bucket."""

    grouped: Dict[str, List[WardrobeItem]] = {}
    for item in items:
        grouped.setdefault(item.category or "other", []).append(item)
    return grouped


def build_combination(
    template: Sequence[str], grouped: Dict[str, List[WardrobeItem]], rng: random.Random
) -> Optional[Tuple[WardrobeItem, ...]]:
    """Draw one item per required category, or ``None`` if a bucket is empty."""

    if not all(grouped.get(category) for category in template):
        return None
    return tuple(rng.choice(grouped[category]) for category in template)


def generate_combinations(
    items: Sequence[WardrobeItem],
    rng: random.Random,
    cap: int = DEFAULT_COMBINATION_CAP,
    draws_per_template: int = 1,
) -> CombinationResult:
    """Apply every outfit template to the filtered pool.

    Candidates come out in template order, then draw order; ranking relies on
    this order to break score ties. Duplicate outfits are dropped and the
    total never exceeds ``cap``.
    """

    grouped = group_by_category(items)
    candidates: List[OutfitCandidate] = []
    seen_ids = set()
    skipped: Dict[str, List[str]] = {}
    duplicates = 0
    limit = max(0, cap)

    for name, template in OUTFIT_TEMPLATES:
        missing = [category for category in template if not grouped.get(category)]
        if missing:
            skipped[name] = missing
            continue
        for _ in range(max(1, draws_per_template)):
            if len(candidates) >= limit:
                break
            combo = build_combination(template, grouped, rng)
            if combo is None or len(combo) < MIN_OUTFIT_SIZE:
                continue
            candidate = OutfitCandidate(items=combo, template=name)
            if candidate.outfit_id in seen_ids:
                duplicates += 1
                continue
            seen_ids.add(candidate.outfit_id)
            candidates.append(candidate)

    logger.info("Generated %s outfit candidates from %s items", len(candidates), len(items))
    diagnostics: Dict[str, object] = {
        "bucket_sizes": {category: len(values) for category, values in grouped.items()},
        "skipped_templates": skipped,
        "duplicates_dropped": duplicates,
        "candidate_count": len(candidates),
        "cap": limit,
    }
    return CombinationResult(candidates=candidates, diagnostics=diagnostics)


__all__ = [
    "OUTFIT_TEMPLATES",
    "DEFAULT_COMBINATION_CAP",
    "CombinationResult",
    "group_by_category",
    "build_combination",
    "generate_combinations",
]
