"""Shared fixtures for airport network tests."""

from typing import Dict, List

import pytest

from src.airport_network.schemas.airport import Coordinate
from src.airport_network.schemas.graph import Graph
from src.airport_network.services.graph_builder import add_route
from tests.helpers import UnitDistance


@pytest.fixture
def unit_distance() -> UnitDistance:
    return UnitDistance()


@pytest.fixture
def chain_graph() -> Graph:
    """A-B-C-D, each leg 1.0."""
    graph: Graph = {}
    add_route(graph, "A", "B", 1.0)
    add_route(graph, "B", "C", 1.0)
    add_route(graph, "C", "D", 1.0)
    return graph


@pytest.fixture
def split_graph(chain_graph: Graph) -> Graph:
    """Chain A-B-C-D plus the disconnected pair E-F."""
    add_route(chain_graph, "E", "F", 1.0)
    return chain_graph


@pytest.fixture
def sample_coordinates() -> Dict[str, Coordinate]:
    return {
        "WAW": (52.1657, 20.9671),
        "BCN": (41.2974, 2.0833),
        "MAD": (40.4983, -3.5676),
        "LHR": (51.4700, -0.4543),
    }


@pytest.fixture
def airports_header() -> List[str]:
    return [
        "index", "Name", "City", "Country", "IATA", "Code",
        "ICAO", "Latitude", "Longitude",
    ]


@pytest.fixture
def routes_header() -> List[str]:
    return [
        "index", "Airline", "Airline ID", "Source airport", "Source airport ID",
        "Destination airport", "Destination airport ID", "Codeshare", "Stops",
        "Equipment",
    ]
