"""
Distance adapters.
"""

from src.airport_network.adapters.distance.haversine_distance import (
    HaversineDistance,
    resolve_unit,
)

__all__ = [
    "HaversineDistance",
    "resolve_unit",
]
