"""Static fabric property table used as a weather-suitability proxy."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_FABRIC = "cotton"


@dataclass(frozen=True)
class FabricProperties:
    """Normalised [0, 1] physical traits of a fabric."""

    breathability: float
    insulation: float
    water_resistance: float
    wind_resistance: float
    uv_protection: float
    moisture_wicking: float


# Lookup walks this table in order, so "cotton blend" resolves to cotton.
FABRIC_TABLE: Mapping[str, FabricProperties] = MappingProxyType(
    {
        "cotton": FabricProperties(0.8, 0.3, 0.1, 0.2, 0.3, 0.4),
        "wool": FabricProperties(0.6, 0.9, 0.7, 0.8, 0.5, 0.3),
        "polyester": FabricProperties(0.4, 0.4, 0.6, 0.5, 0.4, 0.7),
        "silk": FabricProperties(0.9, 0.4, 0.2, 0.1, 0.2, 0.3),
        "linen": FabricProperties(1.0, 0.1, 0.1, 0.1, 0.4, 0.6),
        "denim": FabricProperties(0.5, 0.6, 0.3, 0.7, 0.6, 0.2),
        "leather": FabricProperties(0.2, 0.7, 0.9, 0.9, 0.8, 0.1),
        "synthetic": FabricProperties(0.6, 0.5, 0.8, 0.6, 0.5, 0.8),
    }
)


def resolve_fabric_name(material: Optional[str]) -> str:
    """Return the table key that a material string resolves to."""

    normalized = (material or "").strip().lower()
    if not normalized:
        return DEFAULT_FABRIC
    for fabric in FABRIC_TABLE:
        if fabric in normalized:
            return fabric
    logger.debug("Unknown material '%s', defaulting to %s", material, DEFAULT_FABRIC)
    return DEFAULT_FABRIC


def get_fabric_properties(material: Optional[str]) -> FabricProperties:
    """Resolve a material to its properties; never returns ``None``."""

    return FABRIC_TABLE[resolve_fabric_name(material)]


__all__ = [
    "DEFAULT_FABRIC",
    "FABRIC_TABLE",
    "FabricProperties",
    "get_fabric_properties",
    "resolve_fabric_name",
]
