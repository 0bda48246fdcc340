"""slncyclic CLI entry point.

Usage: slncyclic [-v] [--separator SEP] [--fail-on-cycles] {solution,graph} ...

    slncyclic solution path/to/App.sln
    slncyclic graph "a->b;b->c;c->a"
    slncyclic graph @deps.txt

Exit status: 0 on success, 1 on unusable input, 2 when --fail-on-cycles
is given and at least one cycle was found.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from slncyclic.graph.adjacency import DuplicateNodeError, Graph
from slncyclic.graph.cycle_detector import find_cycles
from slncyclic.graph.notation import GraphNotationError, parse_graph
from slncyclic.report import format_report
from slncyclic.solution.builder import build_solution_graph
from slncyclic.solution.parser import SolutionError

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_CYCLES_FOUND = 2


def _add_solution_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "solution",
        help="Find cyclic dependencies within a VS solution file.",
    )
    p.add_argument("file", type=Path, help="Path to the .sln file")


def _add_graph_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "graph",
        help="Find cycles in a graph written as 'a->b,c;b->a'.",
    )
    p.add_argument(
        "text",
        help="Graph notation, or @FILE to read it from a file",
    )
    p.add_argument(
        "--ignore-case", action="store_true",
        help="Compare node names case-insensitively.",
    )


def _load_graph(args: argparse.Namespace) -> Graph[str]:
    if args.command == "solution":
        return build_solution_graph(args.file)
    text = args.text
    if text.startswith("@"):
        text = Path(text[1:]).read_text(encoding="utf-8")
    return parse_graph(text, key=str.casefold if args.ignore_case else None)


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(format="%(levelname)s:%(message)s", level=level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slncyclic",
        description="Find cyclic dependency chains between projects.",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Log progress (-v) or every parsed edge list (-vv).",
    )
    parser.add_argument(
        "--separator", default=".",
        help="Separator between nodes of a cycle (default: '.')",
    )
    parser.add_argument(
        "--fail-on-cycles", action="store_true",
        help=f"Exit with status {EXIT_CYCLES_FOUND} when a cycle is found.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_solution_parser(subparsers)
    _add_graph_parser(subparsers)
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(EXIT_OK)

    _configure_logging(args.verbose)

    try:
        graph = _load_graph(args)
    except (
        SolutionError, GraphNotationError, DuplicateNodeError, OSError, UnicodeDecodeError,
    ) as exc:
        log.critical("%s", exc)
        sys.exit(EXIT_INPUT_ERROR)

    log.info("finding cycles in %r", graph)
    cycles = find_cycles(graph)
    print(format_report(cycles, separator=args.separator))

    if cycles and args.fail_on_cycles:
        sys.exit(EXIT_CYCLES_FOUND)
