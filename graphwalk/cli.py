"""Command-line interface for graphwalk."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from time import perf_counter
from typing import List, Optional, Sequence

from graphwalk.config import GraphWalkConfig, load_config
from graphwalk.errors import GraphWalkError
from graphwalk.io import dump_results, load_graph, write_results
from graphwalk.logging import apply_verbosity, get_logger
from graphwalk.runner import run_algorithm
from graphwalk.types import Mode

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise duration string, e.g. "12.3 ms" or "1.23 s"."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _run(
    config: GraphWalkConfig,
    mode: Mode,
    node_keys: Sequence[str],
    stdout: bool = False,
) -> None:
    """Load the graph, run one algorithm and write the result document.

    Args:
        config: File locations and output formatting.
        mode: Algorithm to run.
        node_keys: Node arguments for the algorithm.
        stdout: Whether to also print the result JSON to stdout.
    """
    _start_time = perf_counter()

    try:
        graph = load_graph(config.graph_path)
        results = run_algorithm(graph, mode, *node_keys)

        logger.info(f"Writing results to: {config.results_path}")
        write_results(config.results_path, results, indent=config.indent)

        if stdout:
            print(dump_results(results, indent=config.indent))

        _elapsed = perf_counter() - _start_time
        logger.info(
            f"Algorithm '{mode.value}' completed successfully in "
            f"{_format_duration(_elapsed)}"
        )
    except GraphWalkError as e:
        logger.error(f"Failed to run {mode.value}: {type(e).__name__}: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphwalk",
        description=(
            "Compute BFS/DFS visitation orders or the widest (maximum "
            "bottleneck capacity) path over an undirected weighted graph."
        ),
        epilog=(
            "Node keys that start with '-' go after a '--' separator, e.g. "
            "graphwalk widest -- -x B"
        ),
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help=(
            "YAML file setting graph_path, results_path and indent"
            " (default: data/graph.json and data/results.json)"
        ),
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Also print the result JSON to stdout",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Algorithms",
        metavar="{bfs,dfs,widest}",
        help="Algorithm to run",
    )

    bfs_parser = subparsers.add_parser("bfs", help="Breadth-first visitation order")
    bfs_parser.add_argument("start", help="Start node")

    dfs_parser = subparsers.add_parser("dfs", help="Depth-first visitation order")
    dfs_parser.add_argument("start", help="Start node")

    widest_parser = subparsers.add_parser(
        "widest", help="Maximum bottleneck capacity path"
    )
    widest_parser.add_argument("src", help="Source node")
    widest_parser.add_argument("dest", help="Destination node")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``graphwalk`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = _build_parser()

    effective_args = sys.argv[1:] if argv is None else argv

    # Too few arguments is a usage error
    if not effective_args:
        parser.print_help(sys.stderr)
        raise SystemExit(2)

    args = parser.parse_args(effective_args)

    apply_verbosity(verbose=args.verbose, quiet=args.quiet)
    logger.debug("Debug logging enabled")

    mode = Mode.from_string(args.command)
    if mode is Mode.WIDEST:
        node_keys = [args.src, args.dest]
    else:
        node_keys = [args.start]

    try:
        config = load_config(args.config)
    except GraphWalkError as e:
        logger.error(f"Failed to load configuration: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    _run(config, mode, node_keys, stdout=args.stdout)


if __name__ == "__main__":
    main()
