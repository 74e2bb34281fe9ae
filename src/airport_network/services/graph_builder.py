"""
Graph Builder - joins routes against the coordinate store.

Each valid route adds one Edge to both endpoints' neighbor lists. The
weight is computed once and shared, so the adjacency mapping is
symmetric by construction. Parallel routes and self-loops are kept
as-is.
"""

import logging
from typing import Iterable, List, Mapping, Sequence, Tuple

from src.airport_network.exceptions import MalformedRecordError
from src.airport_network.ports.distance import DistanceFunction
from src.airport_network.schemas.airport import (
    DEFAULT_LAYOUT,
    Coordinate,
    RecordLayout,
)
from src.airport_network.schemas.graph import BuildStats, Edge, Graph

logger = logging.getLogger(__name__)


def parse_route(
    record: Sequence[str],
    layout: RecordLayout = DEFAULT_LAYOUT,
) -> Tuple[str, str]:
    """
    Extract (source, destination) codes from a raw route record.

    Raises:
        MalformedRecordError: If the record has too few fields.
    """
    if len(record) < layout.route_min_fields:
        raise MalformedRecordError(record, "invalid format")
    return record[layout.route_source_col], record[layout.route_destination_col]


def add_route(graph: Graph, origin: str, destination: str, weight: float) -> None:
    """Append the two halves of an undirected route to ``graph``."""
    graph.setdefault(origin, []).append(Edge(destination, weight))
    graph.setdefault(destination, []).append(Edge(origin, weight))


def build_graph(
    route_records: Iterable[Sequence[str]],
    coordinates: Mapping[str, Coordinate],
    distance: DistanceFunction,
    layout: RecordLayout = DEFAULT_LAYOUT,
) -> Tuple[Graph, BuildStats]:
    """
    Build the weighted adjacency mapping.

    Args:
        route_records: Raw route records, header already removed.
        coordinates: Output of the coordinate store.
        distance: Great-circle distance function. Its unit becomes the
            unit of every edge weight.
        layout: Column positions.

    Returns:
        Tuple of (graph, stats). Routes that are malformed or reference
        an airport without coordinates are dropped and counted invalid.
    """
    graph: Graph = {}
    accepted: List[Sequence[str]] = []
    invalid = 0

    for record in route_records:
        try:
            origin, destination = parse_route(record, layout)
        except MalformedRecordError as e:
            logger.warning("Skipping route record with %s: %r", e.reason, e.record)
            invalid += 1
            continue

        origin_coord = coordinates.get(origin)
        destination_coord = coordinates.get(destination)
        if origin_coord is None or destination_coord is None:
            logger.warning(
                "Missing location data for airports in route: %r - %r (record %r)",
                origin,
                destination,
                list(record),
            )
            invalid += 1
            continue

        weight = distance(origin_coord, destination_coord)
        add_route(graph, origin, destination, weight)
        accepted.append(record)

    stats = BuildStats(
        valid_routes=len(accepted),
        invalid_routes=invalid,
        accepted_records=tuple(accepted),
    )
    logger.info(
        "Graph built: %d airports, %d routes loaded, %d invalid routes",
        len(graph),
        stats.valid_routes,
        stats.invalid_routes,
    )
    return graph, stats


def edge_count(graph: Graph) -> int:
    """Number of Edge entries (twice the number of routes)."""
    return sum(len(edges) for edges in graph.values())

