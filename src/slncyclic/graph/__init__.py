"""Graph model and cycle detection for project dependency graphs."""

from slncyclic.graph.adjacency import DuplicateNodeError, Graph
from slncyclic.graph.cycle_detector import (
    Color,
    CycleDetectionError,
    find_cycles,
    has_cycles,
)
from slncyclic.graph.notation import GraphNotationError, format_graph, parse_graph

__all__ = [
    "Color",
    "CycleDetectionError",
    "DuplicateNodeError",
    "Graph",
    "GraphNotationError",
    "find_cycles",
    "format_graph",
    "has_cycles",
    "parse_graph",
]
