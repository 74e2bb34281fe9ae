"""
Port interfaces for the airport network.

Ports define the abstract interfaces the services use to reach data
sources and distance collaborators.
"""

from src.airport_network.ports.distance import DistanceFunction
from src.airport_network.ports.record_source import RecordSource

__all__ = [
    "DistanceFunction",
    "RecordSource",
]
