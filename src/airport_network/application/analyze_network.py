"""
AnalyzeAirportNetwork Use Case - public API for network analysis.

Acts as a facade: wires a record source and a distance function to the
coordinate store, graph builder and traversal engine, and keeps the
built graph for repeated queries.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Dict, List, Optional, Union

from src.airport_network.adapters.data_providers.csv_provider import CsvRecordSource
from src.airport_network.adapters.distance.haversine_distance import HaversineDistance
from src.airport_network.config import Settings
from src.airport_network.ports.distance import DistanceFunction
from src.airport_network.ports.record_source import RecordSource
from src.airport_network.schemas.airport import DEFAULT_LAYOUT, Coordinate, RecordLayout
from src.airport_network.schemas.graph import BuildStats, Graph
from src.airport_network.schemas.traversal import TraversalResult
from src.airport_network.services.coordinate_store import load_coordinates
from src.airport_network.services.graph_builder import build_graph, edge_count
from src.airport_network.services.sampling import RandomSource, sample_sources
from src.airport_network.services.traversal import (
    EdgeWeight,
    edge_distance,
    reachable_count,
    traverse_resolved,
    traverse_resolved_from,
)

logger = logging.getLogger(__name__)


class AnalyzeAirportNetwork:
    """
    Public API for building and querying the airport graph.

    The graph is built lazily on first access and then treated as read
    only. Every query returns a fresh result.

    Example usage:
        >>> analyzer = AnalyzeAirportNetwork.from_paths("airports.csv", "routes.csv")
        >>> result = analyzer.distances_from("WAW")
        >>> result["BCN"].distance, result["BCN"].path

    Attributes:
        _source: Record source for airports and routes.
        _distance: Distance function used for every edge.
        _layout: Column positions of the raw records.
    """

    def __init__(
        self,
        source: RecordSource,
        distance: Optional[DistanceFunction] = None,
        layout: RecordLayout = DEFAULT_LAYOUT,
    ) -> None:
        """
        Initialize the analyzer.

        Args:
            source: Where airport and route records come from.
            distance: Distance function. Defaults to haversine kilometers.
            layout: Column positions of the raw records.
        """
        self._source = source
        self._distance = distance if distance is not None else HaversineDistance("km")
        self._layout = layout

        self._coordinates: Optional[Dict[str, Coordinate]] = None
        self._graph: Optional[Graph] = None
        self._stats: Optional[BuildStats] = None

    @classmethod
    def from_paths(
        cls,
        airports_csv: Union[str, Path],
        routes_csv: Union[str, Path],
        unit: str = "km",
        layout: RecordLayout = DEFAULT_LAYOUT,
    ) -> "AnalyzeAirportNetwork":
        """Analyzer over two CSV files with haversine distances in ``unit``."""
        return cls(
            source=CsvRecordSource(airports_csv, routes_csv),
            distance=HaversineDistance(unit),
            layout=layout,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "AnalyzeAirportNetwork":
        """Analyzer configured from validated Settings."""
        return cls.from_paths(
            settings.airports_csv,
            settings.routes_csv,
            unit=settings.distance_unit,
        )

    def build(self) -> Graph:
        """
        Load coordinates and build the graph (blocking).

        Returns:
            The built graph.

        Raises:
            DataSourceUnavailableError: If either dataset cannot be read.
                Nothing is cached in that case.
        """
        start = time.perf_counter()

        coordinates = load_coordinates(self._source.airport_records(), self._layout)
        graph, stats = build_graph(
            self._source.route_records(),
            coordinates,
            self._distance,
            self._layout,
        )

        self._coordinates = coordinates
        self._graph = graph
        self._stats = stats

        logger.info(
            "Network built from %s in %.3fms: %d airports with coordinates, "
            "%d graph nodes, %d edges",
            self._source.name,
            (time.perf_counter() - start) * 1000,
            len(coordinates),
            len(graph),
            edge_count(graph),
        )
        return graph

    @property
    def graph(self) -> Graph:
        """Built graph (builds on first access)."""
        if self._graph is None:
            self.build()
        return self._graph

    @property
    def coordinates(self) -> Dict[str, Coordinate]:
        """Coordinate store (builds on first access)."""
        if self._coordinates is None:
            self.build()
        return self._coordinates

    @property
    def stats(self) -> BuildStats:
        """Route counters from the last build."""
        if self._stats is None:
            self.build()
        return self._stats

    @property
    def distance(self) -> DistanceFunction:
        return self._distance

    @property
    def is_built(self) -> bool:
        return self._graph is not None

    def distances_from(
        self,
        source: str,
        weight: EdgeWeight = edge_distance,
        track_paths: bool = True,
    ) -> TraversalResult:
        """
        BFS-order distances and paths from ``source`` to every graph node.

        Unreachable nodes carry infinite distance and an empty path.
        """
        return traverse_resolved(self.graph, source, weight, track_paths)

    def sample_sources(self, k: int, rng: RandomSource = None) -> List[str]:
        """Pick ``k`` distinct graph nodes using ``rng`` (RNG or seed)."""
        return sample_sources(self.graph, k, rng)

    def analyze_sample(
        self,
        k: int,
        rng: RandomSource = None,
        weight: EdgeWeight = edge_distance,
    ) -> Dict[str, TraversalResult]:
        """Resolved traversals from ``k`` randomly sampled sources."""
        sources = self.sample_sources(k, rng)
        logger.info("Analyzing %d sampled sources: %s", len(sources), sources)
        results = traverse_resolved_from(self.graph, sources, weight)
        for source, result in results.items():
            logger.info(
                "Source %s reaches %d of %d airports",
                source,
                reachable_count(result) - 1,
                len(result) - 1,
            )
        return results
