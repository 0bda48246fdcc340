"""Find cyclic dependency chains between the projects of a solution."""

from slncyclic.graph import DuplicateNodeError, Graph, find_cycles, parse_graph

__all__ = ["DuplicateNodeError", "Graph", "find_cycles", "parse_graph"]

__version__ = "0.1.0"
