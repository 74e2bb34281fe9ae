"""
Distance Function port.

Any callable taking two (latitude, longitude) coordinates and returning
a scalar distance satisfies this protocol. Implementations must be
deterministic, symmetric, non-negative and return 0 for coincident
points. A single graph must be built with a single unit.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from src.airport_network.schemas.airport import Coordinate


@runtime_checkable
class DistanceFunction(Protocol):
    """Protocol for great-circle distance collaborators."""

    def __call__(self, a: Coordinate, b: Coordinate) -> float:
        ...
