"""
Domain services for the airport network.

Coordinate store, graph builder, traversal engine and sampling.
"""

from src.airport_network.services.coordinate_store import (
    load_airports,
    load_coordinates,
    parse_airport,
)
from src.airport_network.services.graph_builder import (
    add_route,
    build_graph,
    edge_count,
    parse_route,
)
from src.airport_network.services.sampling import (
    make_rng,
    sample_pairs,
    sample_sources,
)
from src.airport_network.services.traversal import (
    edge_distance,
    hop_count,
    reachable_count,
    resolve_unreachable,
    traverse_resolved,
    traverse_resolved_from,
    traverse,
)

__all__ = [
    "load_airports",
    "load_coordinates",
    "parse_airport",
    "add_route",
    "build_graph",
    "edge_count",
    "parse_route",
    "make_rng",
    "sample_pairs",
    "sample_sources",
    "edge_distance",
    "hop_count",
    "reachable_count",
    "resolve_unreachable",
    "traverse_resolved",
    "traverse_resolved_from",
    "traverse",
]
