"""
Configuration module for the airport network analysis.

Loads environment variables (optionally from a .env file) and exposes
validated settings for input locations, distance units and sampling.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from src.airport_network.exceptions import ConfigurationError

# Load environment variables from .env file
load_dotenv()

ENV_PREFIX = "AIRPORT_NETWORK_"


@dataclass(frozen=True)
class Settings:
    """
    Immutable run settings.

    Attributes:
        airports_csv: Path to the airports dataset.
        routes_csv: Path to the routes dataset.
        distance_unit: Unit name understood by the haversine adapter.
        sample_size: Number of source airports sampled for a demo run.
        seed: Seed for the sampling RNG (None = nondeterministic).
        output_dir: Directory receiving generated reports.
    """

    airports_csv: Path
    routes_csv: Path
    distance_unit: str = "km"
    sample_size: int = 1
    seed: Optional[int] = None
    output_dir: Path = Path("output")

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.sample_size < 0:
            raise ConfigurationError(
                f"sample_size must be >= 0, got {self.sample_size}"
            )


class Config:
    """
    Application configuration class.

    Class attributes hold the defaults; ``from_env`` reads overrides
    from the process environment.
    """

    AIRPORTS_CSV: str = "data/airports.csv"
    ROUTES_CSV: str = "data/routes.csv"
    DISTANCE_UNIT: str = "km"
    SAMPLE_SIZE: int = 1
    OUTPUT_DIR: str = "output"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """
        Build Settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            Validated Settings instance.

        Raises:
            ConfigurationError: If a numeric variable cannot be parsed.
        """
        env = os.environ if environ is None else environ

        def get(name: str, default: Optional[str] = None) -> Optional[str]:
            value = env.get(ENV_PREFIX + name)
            return value if value not in (None, "") else default

        sample_size = _parse_int("SAMPLE_SIZE", get("SAMPLE_SIZE", str(cls.SAMPLE_SIZE)))
        seed_raw = get("SEED")
        seed = _parse_int("SEED", seed_raw) if seed_raw is not None else None

        return Settings(
            airports_csv=Path(get("AIRPORTS_CSV", cls.AIRPORTS_CSV)),
            routes_csv=Path(get("ROUTES_CSV", cls.ROUTES_CSV)),
            distance_unit=get("DISTANCE_UNIT", cls.DISTANCE_UNIT),
            sample_size=sample_size,
            seed=seed,
            output_dir=Path(get("OUTPUT_DIR", cls.OUTPUT_DIR)),
        )


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(
            f"{ENV_PREFIX}{name} must be an integer, got '{value}'"
        ) from e
