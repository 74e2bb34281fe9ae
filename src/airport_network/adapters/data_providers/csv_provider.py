"""
CSV Record Source - file to raw record adapter.

Reads the airports and routes datasets as field-delimited text and
yields positional records. The first row of each file is a header and
is skipped. Blank lines are ignored.
"""

import csv
import logging
from pathlib import Path
from typing import Iterator, List, Union

from src.airport_network.exceptions import DataSourceUnavailableError
from src.airport_network.ports.record_source import RecordSource

logger = logging.getLogger(__name__)


def read_records(
    path: Union[str, Path],
    delimiter: str = ",",
    skip_header: bool = True,
) -> Iterator[List[str]]:
    """
    Yield records from a delimited text file.

    Args:
        path: File to read.
        delimiter: Field separator.
        skip_header: Drop the first row.

    Yields:
        Lists of raw string fields.

    Raises:
        DataSourceUnavailableError: If the file cannot be opened or is
            not parseable as delimited text.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            reader = csv.reader(handle, delimiter=delimiter)
            if skip_header:
                next(reader, None)
            count = 0
            for record in reader:
                if not record:
                    continue
                count += 1
                yield record
    except OSError as e:
        raise DataSourceUnavailableError(path, f"cannot be read: {e}") from e
    except (csv.Error, UnicodeDecodeError) as e:
        raise DataSourceUnavailableError(path, f"is not valid delimited text: {e}") from e

    logger.debug("Read %d records from %s", count, path)


class CsvRecordSource(RecordSource):
    """
    Record source backed by two CSV files.

    Attributes:
        airports_path: Airports dataset.
        routes_path: Routes dataset.
    """

    def __init__(
        self,
        airports_path: Union[str, Path],
        routes_path: Union[str, Path],
        delimiter: str = ",",
    ) -> None:
        """
        Initialize the CSV source.

        Args:
            airports_path: Path to the airports CSV.
            routes_path: Path to the routes CSV.
            delimiter: Field separator shared by both files.
        """
        self.airports_path = Path(airports_path)
        self.routes_path = Path(routes_path)
        self._delimiter = delimiter

    def airport_records(self) -> Iterator[List[str]]:
        return read_records(self.airports_path, self._delimiter)

    def route_records(self) -> Iterator[List[str]]:
        return read_records(self.routes_path, self._delimiter)

    @property
    def name(self) -> str:
        return f"CSV ({self.airports_path.name}, {self.routes_path.name})"
