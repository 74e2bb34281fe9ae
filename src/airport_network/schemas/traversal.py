"""
Traversal result schemas.

A traversal maps every discovered airport to the distance and path by
which breadth-first expansion first reached it.
"""

import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import pandera as pa
from pandera.typing import DataFrame, Series


@dataclass(frozen=True)
class NodeRecord:
    """
    Distance, path and hop count to one node.

    Unreachable nodes carry ``distance=inf``, an empty path and
    ``hops=-1``. When ``hops`` is omitted it is taken from the path, so
    callers that do not track paths must pass it.
    """

    distance: float
    path: Tuple[str, ...]
    hops: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.is_reachable:
            hops = -1
        elif self.hops is not None:
            return
        else:
            hops = len(self.path) - 1 if self.path else -1
        object.__setattr__(self, "hops", hops)

    @property
    def is_reachable(self) -> bool:
        return math.isfinite(self.distance)


UNREACHABLE = NodeRecord(distance=math.inf, path=())

TraversalResult = Dict[str, NodeRecord]


class TraversalSchema(pa.DataFrameModel):
    """Schema for a traversal flattened into one row per destination."""

    source: Series[str] = pa.Field(nullable=False)
    airport: Series[str] = pa.Field(nullable=False)
    distance: Series[float] = pa.Field(
        ge=0,
        description="BFS-order distance, inf when unreachable",
    )
    hops: Series[int] = pa.Field(ge=-1)
    path: Series[str] = pa.Field(
        nullable=False,
        description="Path joined with '->', empty when unreachable",
    )

    class Config:
        strict = False
        coerce = True
        name = "TraversalSchema"
        ordered = True


TraversalDataFrame = DataFrame[TraversalSchema]
