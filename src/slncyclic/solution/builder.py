"""Build a project dependency graph from a Visual Studio solution.

Flow:
    read .sln -> project paths -> for each .csproj:
        read -> assembly name (node) + references (edges)

Project paths in a solution use Windows separators; they are resolved
against the solution's directory on every platform.  Assembly names
compare case-insensitively, matching how the build treats them.
"""
from __future__ import annotations

import logging
from pathlib import Path, PureWindowsPath

from slncyclic.graph.adjacency import Graph
from slncyclic.solution.parser import (
    SolutionError,
    as_single_line,
    parse_assembly_name,
    parse_project_references,
    parse_solution_projects,
)

log = logging.getLogger(__name__)


def read_file(path: Path) -> str:
    """Read *path* as text, raising SolutionError if it does not exist."""
    if not path.is_file():
        raise SolutionError(f"file not exists. fail to read {path}.")
    return path.read_text(encoding="utf-8-sig", errors="replace")


def resolve_project_path(solution_dir: Path, project: str) -> Path:
    return solution_dir.joinpath(*PureWindowsPath(project).parts)


def build_solution_graph(solution_path: str | Path) -> Graph[str]:
    """Return the assembly dependency graph of the solution at *solution_path*.

    Raises SolutionError when a file is missing, the solution lists no
    projects, or a project has no assembly name.  Two projects with the
    same assembly name raise DuplicateNodeError.
    """
    solution_path = Path(solution_path)
    content = as_single_line(read_file(solution_path))
    projects = parse_solution_projects(content)
    if not projects:
        raise SolutionError("zero projects found in sln")
    log.info("sln contains %d projects", len(projects))

    graph: Graph[str] = Graph(key=str.casefold)
    for project in projects:
        log.info("> process %s", project)
        csproj = as_single_line(read_file(resolve_project_path(solution_path.parent, project)))
        assembly = parse_assembly_name(csproj)
        references = parse_project_references(csproj)
        log.debug("assembly=%s", assembly)
        log.debug("edges (%d)=%s", len(references), ";".join(references))
        graph.add_node(assembly, references)

    log.info("graph built: %r", graph)
    return graph
