"""
Record Source port interface.

Defines the abstract contract for anything that supplies raw airport
and route records. Records are positional sequences of strings with
the header row already removed.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List


class RecordSource(ABC):
    """
    Abstract interface for tabular record sources.

    Implementations:
    - CsvRecordSource: Reads two CSV files from disk
    """

    @abstractmethod
    def airport_records(self) -> Iterator[List[str]]:
        """
        Yield raw airport records.

        Returns:
            Iterator over records, header excluded.

        Raises:
            DataSourceUnavailableError: If the dataset cannot be read.
        """
        ...

    @abstractmethod
    def route_records(self) -> Iterator[List[str]]:
        """
        Yield raw route records.

        Returns:
            Iterator over records, header excluded.

        Raises:
            DataSourceUnavailableError: If the dataset cannot be read.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this source."""
        ...
