"""
Tests for airport network schema definitions.

Validates dataclass behavior, layout validation and that the Pandera
models reject invalid frames.
"""

import dataclasses
import math

import pandas as pd
import pandera as pa
import pytest

from src.airport_network.exceptions import AirportNetworkError, ConfigurationError
from src.airport_network.schemas.airport import (
    DEFAULT_LAYOUT,
    Airport,
    AirportSchema,
    RecordLayout,
)
from src.airport_network.schemas.graph import BuildStats, Edge, EdgeSchema
from src.airport_network.schemas.traversal import UNREACHABLE, NodeRecord, TraversalSchema


# -------------------------
# Dataclasses
# -------------------------


class TestAirport:
    def test_frozen(self):
        airport = Airport("WAW", 52.0, 21.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            airport.latitude = 0.0

    def test_coordinate(self):
        assert Airport("WAW", 52.0, 21.0).coordinate == (52.0, 21.0)


class TestRecordLayout:
    def test_defaults_match_dataset(self):
        assert DEFAULT_LAYOUT.airport_min_fields == 9
        assert DEFAULT_LAYOUT.route_min_fields == 6

    def test_custom_min_fields(self):
        layout = RecordLayout(airport_id_col=0, latitude_col=1, longitude_col=2,
                              route_source_col=0, route_destination_col=1)
        assert layout.airport_min_fields == 3
        assert layout.route_min_fields == 2

    @pytest.mark.parametrize("value", [-1, 1.5, "3", "7", None])
    def test_invalid_index_rejected(self, value):
        with pytest.raises(ConfigurationError, match="latitude_col"):
            RecordLayout(latitude_col=value)

    def test_invalid_index_is_a_network_error(self):
        with pytest.raises(AirportNetworkError):
            RecordLayout(route_destination_col=-2)


class TestGraphValues:
    def test_edge_equality(self):
        assert Edge("B", 1.0) == Edge("B", 1.0)
        assert Edge("B", 1.0) != Edge("B", 2.0)

    def test_build_stats_total(self):
        assert BuildStats(valid_routes=3, invalid_routes=2).total_routes == 5


class TestNodeRecord:
    def test_unreachable_marker(self):
        assert math.isinf(UNREACHABLE.distance)
        assert UNREACHABLE.path == ()

    def test_reachable(self):
        record = NodeRecord(0.0, ("A",))
        assert record.is_reachable
        assert record.hops == 0

    def test_explicit_hops_without_path(self):
        record = NodeRecord(4.0, (), hops=2)
        assert record.is_reachable
        assert record.hops == 2

    def test_infinite_distance_forces_no_hops(self):
        assert NodeRecord(math.inf, (), hops=5).hops == -1


# -------------------------
# Pandera models
# -------------------------


class TestPanderaSchemas:
    def test_airport_schema_rejects_duplicates(self):
        df = pd.DataFrame({"iata": ["WAW", "WAW"], "latitude": [1.0, 2.0], "longitude": [1.0, 2.0]})
        with pytest.raises(pa.errors.SchemaError):
            AirportSchema.validate(df)

    def test_airport_schema_coerces_numbers(self):
        df = pd.DataFrame({"iata": ["WAW"], "latitude": ["52.5"], "longitude": ["21"]})
        validated = AirportSchema.validate(df)
        assert validated["latitude"].iloc[0] == 52.5

    def test_edge_schema_rejects_negative_weight(self):
        df = pd.DataFrame({"airport": ["A"], "neighbor": ["B"], "weight": [-1.0]})
        with pytest.raises(pa.errors.SchemaError):
            EdgeSchema.validate(df)

    def test_traversal_schema_allows_infinity(self):
        df = pd.DataFrame({
            "source": ["A", "A"],
            "airport": ["A", "E"],
            "distance": [0.0, math.inf],
            "hops": [0, -1],
            "path": ["A", ""],
        })
        validated = TraversalSchema.validate(df)
        assert math.isinf(validated["distance"].iloc[1])

    def test_traversal_schema_rejects_bad_hops(self):
        df = pd.DataFrame({
            "source": ["A"],
            "airport": ["B"],
            "distance": [1.0],
            "hops": [-2],
            "path": ["A->B"],
        })
        with pytest.raises(pa.errors.SchemaError):
            TraversalSchema.validate(df)
