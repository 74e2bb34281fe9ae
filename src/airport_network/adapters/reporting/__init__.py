"""
Reporting adapters: DataFrame views and text/CSV reports.
"""

from src.airport_network.adapters.reporting.report_writer import (
    average_distance,
    coordinates_to_frame,
    graph_to_frame,
    pair_distances,
    traversal_to_frame,
    write_adjacency_report,
    write_distance_report,
    write_valid_routes,
)

__all__ = [
    "average_distance",
    "coordinates_to_frame",
    "graph_to_frame",
    "pair_distances",
    "traversal_to_frame",
    "write_adjacency_report",
    "write_distance_report",
    "write_valid_routes",
]
