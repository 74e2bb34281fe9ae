"""
Haversine Distance Adapter.

Wraps the ``haversine`` package behind the DistanceFunction protocol.
The unit is fixed per instance so every edge of a graph shares it.
"""

from haversine import Unit, haversine

from src.airport_network.exceptions import UnknownDistanceUnitError
from src.airport_network.schemas.airport import Coordinate


def resolve_unit(unit) -> Unit:
    """
    Map a unit name ('km', 'm', 'mi', 'nmi', ...) or Unit to a Unit.

    Raises:
        UnknownDistanceUnitError: If the name is not a haversine unit.
    """
    if isinstance(unit, Unit):
        return unit
    try:
        return Unit(str(unit).strip().lower())
    except ValueError as e:
        raise UnknownDistanceUnitError(str(unit)) from e


class HaversineDistance:
    """
    Great-circle distance in a fixed unit.

    Example:
        >>> km = HaversineDistance("km")
        >>> round(km((0.0, 0.0), (1.0, 0.0)), 1)
        111.2
    """

    def __init__(self, unit="km") -> None:
        self._unit = resolve_unit(unit)

    @property
    def unit(self) -> Unit:
        return self._unit

    def __call__(self, a: Coordinate, b: Coordinate) -> float:
        if a == b:
            return 0.0
        return float(haversine(a, b, unit=self._unit))

    def __repr__(self) -> str:
        return f"HaversineDistance(unit={self._unit.value!r})"
