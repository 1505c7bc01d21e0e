"""Command-line interface for netalgo."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

import jsonschema
import yaml

from netalgo.algorithms.registry import RunParams, algorithm_names, get_runner
from netalgo.graph.io import GraphSpec, load_graph_file
from netalgo.logging import enable_debug_logging, get_logger, set_global_log_level
from netalgo.types.base import INF

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[Any]],
    min_width: int = 8,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [[str(h) for h in headers]] + [[str(item) for item in row] for row in rows]
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(row[col_idx]) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{item:<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(all_data[0])]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in all_data[1:]:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    if seconds < 1.0:
        return f"{seconds * 1000:.1f} ms"
    return f"{seconds:.2f} s"


def _format_weight(value: Optional[int]) -> str:
    if value is None:
        return "-"
    if value >= INF:
        return "inf"
    return str(value)


def _load(path: Path) -> GraphSpec:
    logger.info(f"Loading graph from: {path}")
    return load_graph_file(path)


def _inspect_graph(path: Path, detail: bool = False) -> None:
    """Validate a graph file and print its structural summary.

    Args:
        path: Graph YAML file.
        detail: Also list every edge.
    """
    _start_time = perf_counter()
    try:
        spec = _load(path)
        graph = spec.build()
        stats = graph.stats()

        print("\n" + "=" * 60)
        print(f"GRAPH: {spec.name or path.stem}")
        print("=" * 60)
        rows = [
            ["Vertices", stats.num_vertices],
            ["Edges", stats.num_edges],
            ["Directed", "yes" if spec.directed else "no"],
            ["Min weight", _format_weight(stats.min_weight)],
            ["Max weight", _format_weight(stats.max_weight)],
            ["Self-loops", stats.self_loops],
            ["Isolated", len(stats.isolated_vertices)],
        ]
        print(_format_table(["Property", "Value"], rows))

        if detail and stats.num_edges:
            print("\nEdges:")
            edge_rows = [[e.source, e.target, e.weight] for e in graph.edges()]
            print(_format_table(["Source", "Target", "Weight"], edge_rows))

        _elapsed = perf_counter() - _start_time
        logger.info(f"Graph inspection completed in {_format_duration(_elapsed)}")

    except FileNotFoundError:
        print(f"ERROR: Graph file not found: {path}")
        sys.exit(1)
    except (ValueError, jsonschema.ValidationError, yaml.YAMLError) as e:
        logger.error(f"Failed to inspect graph: {e}")
        print("ERROR: Failed to inspect graph")
        print(f"  {type(e).__name__}: {getattr(e, 'message', e)}")
        sys.exit(1)


def _run_algorithm(
    path: Path,
    algorithm: str,
    params: RunParams,
    output: Optional[Path] = None,
) -> None:
    """Run one named algorithm on a graph file and print its JSON result.

    Args:
        path: Graph YAML file.
        algorithm: Registered algorithm name (see ``netalgo list``).
        params: Source/sink/start and augmentation limit.
        output: Optional file to also write the JSON result to.
    """
    _start_time = perf_counter()
    try:
        runner = get_runner(algorithm)
        spec = _load(path)
        graph = spec.build()
        result = runner(graph, params)
        payload = {
            "graph": spec.name or path.stem,
            "algorithm": algorithm,
            "result": result,
        }
        text = json.dumps(payload, indent=2)
        print(text)
        if output is not None:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(text + "\n", encoding="utf-8")
            logger.info(f"Results written to: {output}")

        _elapsed = perf_counter() - _start_time
        logger.info(f"Algorithm '{algorithm}' completed in {_format_duration(_elapsed)}")

    except FileNotFoundError:
        print(f"ERROR: Graph file not found: {path}")
        sys.exit(1)
    except (ValueError, jsonschema.ValidationError, yaml.YAMLError) as e:
        logger.error(f"Failed to run '{algorithm}': {e}")
        print(f"ERROR: Failed to run '{algorithm}'")
        print(f"  {type(e).__name__}: {getattr(e, 'message', e)}")
        sys.exit(1)


def _list_algorithms() -> None:
    for name in algorithm_names():
        print(name)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``netalgo`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="netalgo",
        description="Run graph algorithms on YAML graph files.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress informational logs"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,inspect,list}",
        help="Available commands",
    )

    # Run command
    run_parser = subparsers.add_parser("run", help="Run an algorithm on a graph file")
    run_parser.add_argument("graph", type=Path, help="Path to graph YAML")
    run_parser.add_argument(
        "--algorithm",
        "-a",
        required=True,
        help="Algorithm name (see 'netalgo list')",
    )
    run_parser.add_argument(
        "--source", "-s", type=int, default=0, help="Source vertex (default: 0)"
    )
    run_parser.add_argument(
        "--sink", "-t", type=int, default=None, help="Sink vertex for max-flow"
    )
    run_parser.add_argument(
        "--start", type=int, default=0, help="Start vertex for Prim (default: 0)"
    )
    run_parser.add_argument(
        "--max-augmentations",
        type=int,
        default=None,
        help="Stop max-flow after this many augmenting paths",
    )
    run_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Also write the JSON result to this file",
    )

    # Inspect command
    inspect_parser = subparsers.add_parser(
        "inspect", help="Validate a graph file and show its summary"
    )
    inspect_parser.add_argument("graph", type=Path, help="Path to graph YAML")
    inspect_parser.add_argument(
        "--detail",
        "-d",
        action="store_true",
        help="Also list every edge",
    )

    # List command
    subparsers.add_parser("list", help="List registered algorithm names")

    # Determine effective arguments (support both direct calls and module entrypoint)
    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    # Configure logging based on arguments
    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "run":
        _run_algorithm(
            path=args.graph,
            algorithm=args.algorithm,
            params=RunParams(
                source=args.source,
                sink=args.sink,
                start=args.start,
                max_augmentations=args.max_augmentations,
            ),
            output=args.output,
        )
    elif args.command == "inspect":
        _inspect_graph(args.graph, args.detail)
    elif args.command == "list":
        _list_algorithms()


if __name__ == "__main__":
    main()
