"""
Airport and record layout schemas.

Airports are immutable value objects keyed by IATA code. RecordLayout
pins the fixed column positions the loaders read from raw records.
"""

from dataclasses import dataclass
from typing import Tuple

import pandera as pa
from pandera.typing import DataFrame, Series

from src.airport_network.exceptions import ConfigurationError

# (latitude, longitude) in degrees
Coordinate = Tuple[float, float]


@dataclass(frozen=True)
class Airport:
    """
    Immutable airport record.

    Attributes:
        iata: Airport identifier used as the graph node key.
        latitude: Latitude in degrees.
        longitude: Longitude in degrees.
    """

    iata: str
    latitude: float
    longitude: float

    @property
    def coordinate(self) -> Coordinate:
        """(latitude, longitude) pair consumed by distance functions."""
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class RecordLayout:
    """
    Positional layout of the airport and route datasets.

    Ingestion is positional, not header-based. A record must carry at
    least ``max(index) + 1`` fields to be considered well formed.

    Attributes:
        airport_id_col: Column holding the airport IATA code.
        latitude_col: Column holding the latitude.
        longitude_col: Column holding the longitude.
        route_source_col: Column holding the route origin code.
        route_destination_col: Column holding the route destination code.
    """

    airport_id_col: int = 5
    latitude_col: int = 7
    longitude_col: int = 8
    route_source_col: int = 3
    route_destination_col: int = 5

    def __post_init__(self) -> None:
        """Validate column indices."""
        for name in (
            "airport_id_col",
            "latitude_col",
            "longitude_col",
            "route_source_col",
            "route_destination_col",
        ):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise ConfigurationError(
                    f"{name} must be a non-negative int, got {value!r}"
                )

    @property
    def airport_min_fields(self) -> int:
        """Minimum field count for an airport record."""
        return max(self.airport_id_col, self.latitude_col, self.longitude_col) + 1

    @property
    def route_min_fields(self) -> int:
        """Minimum field count for a route record."""
        return max(self.route_source_col, self.route_destination_col) + 1


DEFAULT_LAYOUT = RecordLayout()


class AirportSchema(pa.DataFrameModel):
    """Schema for the coordinate table produced from the Coordinate Store."""

    iata: Series[str] = pa.Field(
        nullable=False,
        unique=True,
        description="Airport IATA code",
    )
    latitude: Series[float] = pa.Field(
        description="Latitude in degrees",
    )
    longitude: Series[float] = pa.Field(
        description="Longitude in degrees",
    )

    class Config:
        strict = False
        coerce = True
        name = "AirportSchema"


AirportDataFrame = DataFrame[AirportSchema]
