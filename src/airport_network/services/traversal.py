"""
Weighted breadth-first traversal.

One engine covers the hop-count and the distance-weighted variants:
the ``weight`` argument maps an Edge to the quantity accumulated along
a path (``hop_count`` gives classic BFS levels, ``edge_distance`` sums
great-circle distances).

Distances are BFS-order distances: each node keeps the total of the
path by which it was first enqueued. That path has the minimum number
of hops but not necessarily the minimum weight. Use a priority-queue
search if true shortest weighted paths are needed.
"""

import logging
import math
import time
from collections import deque
from typing import Callable, Deque, Dict, Iterable, Mapping, Tuple

from src.airport_network.schemas.graph import Edge, Graph
from src.airport_network.schemas.traversal import (
    UNREACHABLE,
    NodeRecord,
    TraversalResult,
)

logger = logging.getLogger(__name__)

EdgeWeight = Callable[[Edge], float]


def edge_distance(edge: Edge) -> float:
    """Use the stored great-circle distance."""
    return edge.weight


def hop_count(edge: Edge) -> float:
    """Count every edge as one hop."""
    return 1.0


def traverse(
    graph: Mapping[str, Iterable[Edge]],
    source: str,
    weight: EdgeWeight = edge_distance,
    track_paths: bool = True,
) -> TraversalResult:
    """
    Breadth-first expansion from ``source``.

    A node is marked visited when first enqueued and its record is fixed
    at that moment. Neighbors are expanded in stored order. Nodes that
    are never reached are absent from the result; see
    ``resolve_unreachable``.

    Args:
        graph: Adjacency mapping (read only).
        source: Start node. Need not be a key of ``graph``.
        weight: Quantity accumulated per edge.
        track_paths: When False, only the source keeps a path.

    Returns:
        Fresh mapping of node -> NodeRecord. ``result[source]`` is always
        ``NodeRecord(0.0, (source,), hops=0)``. Hop counts are recorded
        whether or not paths are tracked.
    """
    start = time.perf_counter()

    result: TraversalResult = {source: NodeRecord(0.0, (source,), hops=0)}
    queue: Deque[Tuple[str, float, Tuple[str, ...], int]] = deque()
    queue.append((source, 0.0, (source,), 0))

    while queue:
        node, distance, path, hops = queue.popleft()
        for edge in graph.get(node, ()):
            neighbor = edge.neighbor
            if neighbor in result:
                continue
            neighbor_distance = distance + weight(edge)
            neighbor_path = path + (neighbor,) if track_paths else ()
            result[neighbor] = NodeRecord(neighbor_distance, neighbor_path, hops + 1)
            queue.append((neighbor, neighbor_distance, neighbor_path, hops + 1))

    logger.debug(
        "Traversal from %s reached %d nodes in %.3fms",
        source,
        len(result),
        (time.perf_counter() - start) * 1000,
    )
    return result


def resolve_unreachable(
    graph: Mapping[str, Iterable[Edge]],
    result: Mapping[str, NodeRecord],
) -> TraversalResult:
    """
    Make a traversal total over the graph's nodes.

    Every graph key missing from ``result`` is added with infinite
    distance and an empty path. The input mapping is not modified.

    Returns:
        New mapping covering every graph key plus the traversal source.
    """
    resolved: TraversalResult = dict(result)
    missing = 0
    for node in graph:
        if node not in resolved:
            resolved[node] = UNREACHABLE
            missing += 1

    if missing:
        logger.debug("Marked %d of %d nodes unreachable", missing, len(resolved))
    return resolved


def traverse_resolved(
    graph: Mapping[str, Iterable[Edge]],
    source: str,
    weight: EdgeWeight = edge_distance,
    track_paths: bool = True,
) -> TraversalResult:
    """Traverse from ``source`` and resolve unreachable nodes."""
    return resolve_unreachable(graph, traverse(graph, source, weight, track_paths))


def traverse_resolved_from(
    graph: Graph,
    sources: Iterable[str],
    weight: EdgeWeight = edge_distance,
    track_paths: bool = True,
) -> Dict[str, TraversalResult]:
    """
    Run one independent, resolved traversal per source.

    Returns:
        Mapping of source -> its TraversalResult. Results share no
        mutable state.
    """
    return {
        source: traverse_resolved(graph, source, weight, track_paths)
        for source in sources
    }


def reachable_count(result: Mapping[str, NodeRecord]) -> int:
    """Number of entries with a finite distance."""
    return sum(1 for record in result.values() if math.isfinite(record.distance))
