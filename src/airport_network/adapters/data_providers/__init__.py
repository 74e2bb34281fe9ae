"""
Data provider adapters for airport and route records.
"""

from src.airport_network.adapters.data_providers.csv_provider import (
    CsvRecordSource,
    read_records,
)

__all__ = [
    "CsvRecordSource",
    "read_records",
]
