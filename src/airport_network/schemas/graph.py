"""
Graph schemas.

The graph is a plain adjacency mapping from airport code to a list of
Edges. Every route contributes one Edge to each endpoint, both carrying
the same weight object.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

import pandera as pa
from pandera.typing import DataFrame, Series


@dataclass(frozen=True)
class Edge:
    """
    One directed half of an undirected route.

    Attributes:
        neighbor: Airport code at the other end.
        weight: Non-negative great-circle distance.
    """

    neighbor: str
    weight: float


Graph = Dict[str, List[Edge]]


@dataclass(frozen=True)
class BuildStats:
    """
    Diagnostics collected while building a graph.

    Attributes:
        valid_routes: Routes that produced edges.
        invalid_routes: Routes dropped (malformed or missing endpoint).
        accepted_records: Raw records of the valid routes, in input order.
    """

    valid_routes: int = 0
    invalid_routes: int = 0
    accepted_records: Tuple[Sequence[str], ...] = field(default=(), repr=False)

    @property
    def total_routes(self) -> int:
        """Number of route records seen."""
        return self.valid_routes + self.invalid_routes


class EdgeSchema(pa.DataFrameModel):
    """Schema for the flattened adjacency list (one row per Edge)."""

    airport: Series[str] = pa.Field(nullable=False)
    neighbor: Series[str] = pa.Field(nullable=False)
    weight: Series[float] = pa.Field(ge=0, description="Edge distance")

    class Config:
        strict = False
        coerce = True
        name = "EdgeSchema"
        ordered = True


EdgeDataFrame = DataFrame[EdgeSchema]
