"""
Coordinate Store - airport code to coordinate mapping.

Parses raw airport records positionally. Malformed rows are logged and
skipped; ingestion never stops because of a single bad record.
"""

import logging
import math
from typing import Dict, Iterable, Sequence

from src.airport_network.exceptions import MalformedRecordError
from src.airport_network.schemas.airport import (
    DEFAULT_LAYOUT,
    Airport,
    Coordinate,
    RecordLayout,
)

logger = logging.getLogger(__name__)


def parse_airport(record: Sequence[str], layout: RecordLayout = DEFAULT_LAYOUT) -> Airport:
    """
    Build an Airport from one raw record.

    Args:
        record: Positional fields.
        layout: Column positions.

    Returns:
        Parsed Airport.

    Raises:
        MalformedRecordError: If the record is too short or the
            latitude/longitude fields are not finite floats within
            [-90, 90] and [-180, 180].
    """
    if len(record) < layout.airport_min_fields:
        raise MalformedRecordError(record, "invalid format")

    try:
        latitude = float(record[layout.latitude_col])
        longitude = float(record[layout.longitude_col])
    except ValueError as e:
        raise MalformedRecordError(record, "invalid latitude or longitude") from e

    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise MalformedRecordError(record, "invalid latitude or longitude")
    if not (-90.0 <= latitude <= 90.0 and -180.0 <= longitude <= 180.0):
        raise MalformedRecordError(record, "invalid latitude or longitude")

    return Airport(
        iata=record[layout.airport_id_col],
        latitude=latitude,
        longitude=longitude,
    )


def load_airports(
    records: Iterable[Sequence[str]],
    layout: RecordLayout = DEFAULT_LAYOUT,
) -> Dict[str, Airport]:
    """
    Load airports keyed by IATA code.

    Duplicate codes are resolved last-write-wins.

    Args:
        records: Raw airport records, header already removed.
        layout: Column positions.

    Returns:
        Mapping of code to Airport. Empty input yields an empty mapping.
    """
    airports: Dict[str, Airport] = {}
    skipped = 0

    for record in records:
        try:
            airport = parse_airport(record, layout)
        except MalformedRecordError as e:
            logger.warning("Skipping airport record with %s: %r", e.reason, e.record)
            skipped += 1
            continue
        airports[airport.iata] = airport

    logger.info("Loaded %d airports (%d records skipped)", len(airports), skipped)
    return airports


def load_coordinates(
    records: Iterable[Sequence[str]],
    layout: RecordLayout = DEFAULT_LAYOUT,
) -> Dict[str, Coordinate]:
    """
    Load the coordinate store: code -> (latitude, longitude).

    Same skip and overwrite rules as ``load_airports``.
    """
    return {
        iata: airport.coordinate
        for iata, airport in load_airports(records, layout).items()
    }
