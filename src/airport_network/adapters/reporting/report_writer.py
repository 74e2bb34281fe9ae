"""
Report Writer - tabular views and text reports.

Flattens the graph and traversal results into Pandera-validated
DataFrames and writes the adjacency dump, per-source distance reports
and the CSV exports (valid routes, coordinates, edges).
"""

import logging
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from src.airport_network.ports.distance import DistanceFunction
from src.airport_network.schemas.airport import (
    AirportDataFrame,
    AirportSchema,
    Coordinate,
)
from src.airport_network.schemas.graph import EdgeDataFrame, EdgeSchema, Graph
from src.airport_network.schemas.traversal import (
    NodeRecord,
    TraversalDataFrame,
    TraversalSchema,
)

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "->"
UNTRACKED_PATH = "(path not tracked)"

# Header of the routes dataset, used for the valid-route export
ROUTES_HEADER: Tuple[str, ...] = (
    "index",
    "Airline",
    "Airline ID",
    "Source airport",
    "Source airport ID",
    "Destination airport",
    "Destination airport ID",
    "Codeshare",
    "Stops",
    "Equipment",
)


# =============================================================================
# DATAFRAME VIEWS
# =============================================================================


def coordinates_to_frame(coordinates: Mapping[str, Coordinate]) -> AirportDataFrame:
    """Coordinate store as a validated DataFrame, sorted by code."""
    rows = [(iata, lat, lon) for iata, (lat, lon) in sorted(coordinates.items())]
    df = pd.DataFrame(rows, columns=["iata", "latitude", "longitude"])
    return AirportSchema.validate(df)


def graph_to_frame(graph: Graph) -> EdgeDataFrame:
    """One row per Edge, in adjacency order."""
    rows = [
        (airport, edge.neighbor, edge.weight)
        for airport, edges in graph.items()
        for edge in edges
    ]
    df = pd.DataFrame(rows, columns=["airport", "neighbor", "weight"])
    return EdgeSchema.validate(df)


def traversal_to_frame(
    source: str,
    result: Mapping[str, NodeRecord],
) -> TraversalDataFrame:
    """
    One row per destination in ``result``.

    Unreachable entries keep ``distance=inf``, ``hops=-1`` and an empty
    path string.
    """
    rows = [
        (
            source,
            airport,
            float(record.distance),
            record.hops,
            PATH_SEPARATOR.join(record.path),
        )
        for airport, record in result.items()
    ]
    df = pd.DataFrame(rows, columns=["source", "airport", "distance", "hops", "path"])
    return TraversalSchema.validate(df)


def average_distance(source: str, result: Mapping[str, NodeRecord]) -> float:
    """
    Mean distance from ``source`` to every other reachable node.

    The source entry and unreachable (infinite) entries are excluded.

    Returns:
        The mean, or NaN when no other node is reachable.
    """
    df = traversal_to_frame(source, result)
    distances = df.loc[df["airport"] != source, "distance"].to_numpy(dtype=float)
    finite = distances[np.isfinite(distances)]
    if finite.size == 0:
        return float("nan")
    return float(finite.mean())


def pair_distances(
    pairs: Iterable[Tuple[str, str]],
    coordinates: Mapping[str, Coordinate],
    distance: DistanceFunction,
) -> pd.DataFrame:
    """
    Direct great-circle distance for each airport pair.

    Pairs naming an unknown airport are dropped with a warning.
    """
    rows: List[Tuple[str, str, float]] = []
    for origin, destination in pairs:
        if origin not in coordinates or destination not in coordinates:
            logger.warning("No coordinates for pair %s - %s", origin, destination)
            continue
        rows.append(
            (origin, destination, distance(coordinates[origin], coordinates[destination]))
        )
    return pd.DataFrame(rows, columns=["origin", "destination", "distance"])


# =============================================================================
# FILE REPORTS
# =============================================================================


def format_adjacency(graph: Graph, limit: Optional[int] = None) -> List[str]:
    """Lines of the form ``Airport JFK: [(LAX, 3974.20), ...]``."""
    lines: List[str] = []
    for count, (airport, edges) in enumerate(graph.items()):
        if limit is not None and count >= limit:
            break
        neighbors = ", ".join(f"({e.neighbor}, {e.weight:.2f})" for e in edges)
        lines.append(f"Airport {airport}: [{neighbors}]")
    return lines


def format_distance_report(
    source: str,
    result: Mapping[str, NodeRecord],
    metric: str = "distance",
) -> List[str]:
    """
    Per-destination lines followed by the average summary.

    ``metric`` names the accumulated quantity in the summary line, for
    example "hops" for a hop-count traversal.
    """
    lines = []
    for airport, record in result.items():
        if not record.is_reachable:
            path = "unreachable"
        elif record.path:
            path = PATH_SEPARATOR.join(record.path)
        else:
            path = UNTRACKED_PATH
        lines.append(f"{source}[{airport}: {record.distance:.2f}] {path}")

    mean = average_distance(source, result)
    lines.append(
        f"Average {metric} from {source} to reachable airports "
        f"(excluding self): {mean:.2f}"
    )
    return lines


def _write_lines(path: Union[str, Path], lines: Iterable[str]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        for line in lines:
            handle.write(line + "\n")
    return path


def write_adjacency_report(
    graph: Graph,
    path: Union[str, Path],
    limit: Optional[int] = None,
) -> Path:
    """Write the adjacency dump; returns the written path."""
    written = _write_lines(path, format_adjacency(graph, limit))
    logger.info("Adjacency report written to %s", written)
    return written


def write_distance_report(
    source: str,
    result: Mapping[str, NodeRecord],
    path: Union[str, Path],
    metric: str = "distance",
) -> Path:
    """Write one source's distance report; returns the written path."""
    written = _write_lines(path, format_distance_report(source, result, metric))
    logger.info("Distance report for %s written to %s", source, written)
    return written


def write_valid_routes(
    records: Sequence[Sequence[str]],
    path: Union[str, Path],
    header: Sequence[str] = ROUTES_HEADER,
) -> Path:
    """
    Export accepted route records as CSV.

    Records longer than ``header`` get generic ``field_N`` column names;
    shorter ones are padded with empty strings.
    """
    width = max([len(header)] + [len(r) for r in records])
    columns = list(header) + [f"field_{i}" for i in range(len(header), width)]
    rows = [list(r) + [""] * (width - len(r)) for r in records]

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame(rows, columns=columns).to_csv(path, index=False)
    logger.info("Exported %d valid routes to %s", len(rows), path)
    return path


def write_coordinates(coordinates: Mapping[str, Coordinate], path: Union[str, Path]) -> Path:
    """Export the coordinate store as ``iata,latitude,longitude`` CSV."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df = coordinates_to_frame(coordinates)
    df.to_csv(path, index=False)
    logger.info("Exported %d airport coordinates to %s", len(df), path)
    return path


def write_edges(graph: Graph, path: Union[str, Path]) -> Path:
    """Export every Edge as ``airport,neighbor,weight`` CSV."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df = graph_to_frame(graph)
    df.to_csv(path, index=False)
    logger.info("Exported %d edges to %s", len(df), path)
    return path
