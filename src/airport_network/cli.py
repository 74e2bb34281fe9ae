"""
Airport Network - command line entry point.

Builds the airport graph from the two CSV datasets, writes the adjacency
dump and the CSV exports (valid routes, coordinates, edges), then runs BFS-order distance reports
from explicit or randomly sampled source airports.

Usage:
    airport-network --airports data/airports.csv --routes data/routes.csv \
        --samples 3 --seed 42
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from src.airport_network.adapters.reporting.report_writer import (
    average_distance,
    pair_distances,
    write_adjacency_report,
    write_coordinates,
    write_distance_report,
    write_edges,
    write_valid_routes,
)
from src.airport_network.application.analyze_network import AnalyzeAirportNetwork
from src.airport_network.config import Config, Settings
from src.airport_network.exceptions import AirportNetworkError, DataSourceUnavailableError
from src.airport_network.services.sampling import make_rng, sample_pairs
from src.airport_network.services.traversal import (
    edge_distance,
    hop_count,
    reachable_count,
)

# Module-level logger
logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO, log_file: Optional[Path] = None) -> None:
    """
    Configure root logging to the console and, optionally, a file.

    Args:
        level: Console log level.
        log_file: If given, DEBUG and above are also written there.
    """
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if log_file else level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="airport-network",
        description="Build a great-circle weighted airport graph and report BFS distances.",
    )
    parser.add_argument("--airports", type=Path, help="Airports CSV (overrides env)")
    parser.add_argument("--routes", type=Path, help="Routes CSV (overrides env)")
    parser.add_argument("--unit", help="Distance unit: km, m, mi, nmi, ...")
    parser.add_argument(
        "--source",
        action="append",
        default=[],
        help="Source airport code; repeat for several. Disables sampling.",
    )
    parser.add_argument("--samples", type=int, help="Number of random source airports")
    parser.add_argument("--seed", type=int, help="Seed for sampling")
    parser.add_argument(
        "--pairs",
        type=int,
        default=0,
        help="Also print direct distances for N random airport pairs",
    )
    parser.add_argument(
        "--hops",
        action="store_true",
        help="Accumulate hop counts instead of distances",
    )
    parser.add_argument("--output-dir", type=Path, help="Directory for reports")
    parser.add_argument(
        "--adjacency-limit",
        type=int,
        default=None,
        help="Only dump the first N airports of the adjacency list",
    )
    parser.add_argument("--log-file", type=Path, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Environment settings with command line overrides applied."""
    env = Config.from_env()
    return Settings(
        airports_csv=args.airports or env.airports_csv,
        routes_csv=args.routes or env.routes_csv,
        distance_unit=args.unit or env.distance_unit,
        sample_size=env.sample_size if args.samples is None else args.samples,
        seed=env.seed if args.seed is None else args.seed,
        output_dir=args.output_dir or env.output_dir,
    )


def run(
    settings: Settings,
    sources: List[str],
    pairs: int = 0,
    hops: bool = False,
    adjacency_limit: Optional[int] = None,
) -> int:
    """Execute one analysis run. Returns the process exit code."""
    analyzer = AnalyzeAirportNetwork.from_settings(settings)
    graph = analyzer.graph
    stats = analyzer.stats

    print(f"Total number of routes loaded: {stats.valid_routes}")
    print(f"Total number of invalid routes: {stats.invalid_routes}")

    output_dir = settings.output_dir
    write_adjacency_report(graph, output_dir / "adjacency.txt", limit=adjacency_limit)
    write_valid_routes(stats.accepted_records, output_dir / "valid_routes.csv")
    write_coordinates(analyzer.coordinates, output_dir / "airports.csv")
    write_edges(graph, output_dir / "edges.csv")

    rng = make_rng(settings.seed)
    if not sources:
        sources = analyzer.sample_sources(settings.sample_size, rng)

    weight = hop_count if hops else edge_distance
    metric = "hops" if hops else "distance"
    for source in sources:
        result = analyzer.distances_from(source, weight=weight)
        write_distance_report(
            source, result, output_dir / f"distances_{source}.txt", metric=metric
        )
        print(
            f"Reachable airports from {source}: "
            f"{reachable_count(result) - 1} of {len(result) - 1}"
        )
        print(
            f"Average {metric} from {source} (excluding self and unreachable): "
            f"{average_distance(source, result):.2f}"
        )

    if pairs:
        frame = pair_distances(
            sample_pairs(analyzer.coordinates, pairs, rng),
            analyzer.coordinates,
            analyzer.distance,
        )
        for row in frame.itertuples(index=False):
            print(
                f"Distance between Airport {row.origin} and Airport "
                f"{row.destination} = {row.distance:.2f} {settings.distance_unit}"
            )

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    try:
        settings = resolve_settings(args)
        return run(settings, args.source, args.pairs, args.hops, args.adjacency_limit)
    except DataSourceUnavailableError as e:
        logger.critical("%s", e)
        return 1
    except AirportNetworkError as e:
        logger.error("%s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
