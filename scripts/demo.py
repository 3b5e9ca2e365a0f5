#!/usr/bin/env python3
"""
Weighted graph demo - run BFS, DFS or Dijkstra on a small sample graph.

Usage:
    python scripts/demo.py
    python scripts/demo.py --algorithm bfs --start A --end F
    python scripts/demo.py --algorithm dfs --start A --end G --verbose

Sample graph (directed, weights in parentheses):
    A -> B (4), A -> C (2)
    B -> D (5)
    C -> B (1), C -> D (8), C -> E (10)
    D -> E (2), D -> F (6)
    E -> F (2)
    G (isolated)

Algorithms:
    bfs      - Breadth-first search, stops at --end
    dfs      - Depth-first search, stops at --end
    dijkstra - Shortest path from --start to --end
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

load_dotenv(project_root / ".env")

from weighted_graph import GraphError, LoggingObserver, RecordingObserver, WeightedGraph  # noqa: E402
from weighted_graph.config import (  # noqa: E402
    DEMO_ALGORITHM,
    DEMO_END,
    DEMO_START,
    LOG_DATEFMT,
    LOG_FORMAT,
    LOG_LEVEL,
    resolve_log_level,
)

SAMPLE_EDGES = [
    ("A", "B", 4),
    ("A", "C", 2),
    ("B", "D", 5),
    ("C", "B", 1),
    ("C", "D", 8),
    ("C", "E", 10),
    ("D", "E", 2),
    ("D", "F", 6),
    ("E", "F", 2),
]


def build_sample_graph() -> WeightedGraph[str]:
    """Build the sample graph described in the module docstring."""
    graph: WeightedGraph[str] = WeightedGraph()
    for vertex in "ABCDEFG":
        graph.add_vertex(vertex)
    for source, target, weight in SAMPLE_EDGES:
        graph.add_edge(source, target, weight)
    return graph


def demo_log_level(verbose: bool) -> int:
    """Logging level for the demo: DEBUG when verbose, else LOG_LEVEL."""
    if verbose:
        return logging.DEBUG
    return resolve_log_level(LOG_LEVEL)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run a graph algorithm on a sample graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--algorithm",
        type=str,
        default=DEMO_ALGORITHM,
        choices=["bfs", "dfs", "dijkstra"],
        help=f"Algorithm to run (default: {DEMO_ALGORITHM})",
    )
    parser.add_argument(
        "--start",
        type=str,
        default=DEMO_START,
        help=f"Start vertex (default: {DEMO_START})",
    )
    parser.add_argument(
        "--end",
        type=str,
        default=DEMO_END,
        help=f"End vertex (default: {DEMO_END})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    logging.basicConfig(
        level=demo_log_level(args.verbose),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )

    graph = build_sample_graph()
    recorder: RecordingObserver[str] = RecordingObserver()
    graph.add_observer(LoggingObserver())
    graph.add_observer(recorder)

    print("=" * 60)
    print(f"  Graph:     {graph!r}")
    print(f"  Algorithm: {args.algorithm}")
    print(f"  Start:     {args.start}")
    print(f"  End:       {args.end}")
    print("=" * 60 + "\n")

    try:
        if args.algorithm == "bfs":
            result = graph.do_bfs(args.start, args.end)
        elif args.algorithm == "dfs":
            result = graph.do_dfs(args.start, args.end)
        else:
            result = graph.do_dijkstra(args.start, args.end)
    except GraphError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\n" + "=" * 60)
    if args.algorithm == "dijkstra":
        print(f"Shortest path ({result.total_cost}): {' -> '.join(result.path)}")
        print("\nFinished vertices:")
        for vertex, cost in recorder.finished:
            print(f"  {vertex}: {cost}")
    else:
        status = "found" if result.found else "not reachable"
        print(f"{args.end} {status} after visiting: {', '.join(result.visited)}")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
