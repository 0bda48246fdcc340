"""Solution and project file parsing: the graph builder."""

from slncyclic.solution.builder import build_solution_graph
from slncyclic.solution.parser import (
    SolutionError,
    parse_assembly_name,
    parse_project_references,
    parse_solution_projects,
)

__all__ = [
    "SolutionError",
    "build_solution_graph",
    "parse_assembly_name",
    "parse_project_references",
    "parse_solution_projects",
]
