"""
Schema definitions for the airport network.

Frozen dataclasses for in-memory values, Pandera models for the
DataFrames handed to reporting.
"""

from .airport import (
    DEFAULT_LAYOUT,
    Airport,
    AirportDataFrame,
    AirportSchema,
    Coordinate,
    RecordLayout,
)
from .graph import BuildStats, Edge, EdgeDataFrame, EdgeSchema, Graph
from .traversal import (
    UNREACHABLE,
    NodeRecord,
    TraversalDataFrame,
    TraversalResult,
    TraversalSchema,
)

__all__ = [
    # Airports
    "Airport",
    "AirportSchema",
    "AirportDataFrame",
    "Coordinate",
    "RecordLayout",
    "DEFAULT_LAYOUT",
    # Graph
    "Edge",
    "Graph",
    "BuildStats",
    "EdgeSchema",
    "EdgeDataFrame",
    # Traversal
    "NodeRecord",
    "TraversalResult",
    "TraversalSchema",
    "TraversalDataFrame",
    "UNREACHABLE",
]
