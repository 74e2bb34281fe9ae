"""Record builders and fakes shared by the test suite."""

from pathlib import Path
from typing import List, Sequence

from src.airport_network.schemas.airport import Coordinate


def airport_row(iata: str, lat, lon) -> List[str]:
    """Airport record in the default positional layout (9 fields)."""
    return ["0", f"{iata} Intl", "City", "Country", iata, iata, f"K{iata}", str(lat), str(lon)]


def route_row(origin: str, destination: str) -> List[str]:
    """Route record in the default positional layout (10 fields)."""
    return ["0", "XX", "100", origin, "1", destination, "2", "", "0", "320"]


def write_csv(path: Path, header: Sequence[str], rows: Sequence[Sequence[str]]) -> Path:
    lines = [",".join(header)] + [",".join(str(f) for f in row) for row in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


class UnitDistance:
    """Fake distance: 1.0 between distinct points, 0.0 for the same point."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self, a: Coordinate, b: Coordinate) -> float:
        self.calls += 1
        return 0.0 if a == b else 1.0
