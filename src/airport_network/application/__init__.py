"""
Application layer for the airport network.

Provides the public facade used by the CLI and by library consumers.
"""

from src.airport_network.application.analyze_network import AnalyzeAirportNetwork

__all__ = ["AnalyzeAirportNetwork"]
