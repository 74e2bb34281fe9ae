"""
Custom exceptions for the airport network package.

Provides a hierarchy of exceptions separating recoverable data-quality
problems (a single bad row) from fatal infrastructure failures.
"""

from pathlib import Path
from typing import Sequence, Union


class AirportNetworkError(Exception):
    """Base exception for all airport network errors."""

    pass


class MalformedRecordError(AirportNetworkError):
    """Raised when a raw record cannot be interpreted.

    Loaders catch this, log the offending record and move on.
    """

    def __init__(self, record: Sequence[str], reason: str) -> None:
        self.record = list(record)
        self.reason = reason
        super().__init__(f"{reason}: {self.record!r}")


class DataSourceUnavailableError(AirportNetworkError):
    """Raised when an input dataset cannot be opened or read at all."""

    def __init__(self, path: Union[str, Path], reason: str = "cannot be read") -> None:
        self.path = Path(path)
        super().__init__(f"Data source '{self.path}' {reason}")


class ConfigurationError(AirportNetworkError):
    """Raised when configuration values are invalid."""

    pass


class UnknownDistanceUnitError(ConfigurationError):
    """Raised when a distance unit name is not supported."""

    def __init__(self, unit: str) -> None:
        self.unit = unit
        super().__init__(f"Unknown distance unit: '{unit}'")
