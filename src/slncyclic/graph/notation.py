"""Compact text notation for dependency graphs.

    a->b,c,d;
    b->e,f;
    f->g;

or on one line: ``a->b,c,d;b->e,f;f->g;``.  Segments are separated by
``;``, line breaks are ignored, and each segment declares one node with
its ordered dependencies.  Node names are alphanumeric.
"""
from __future__ import annotations

import re
from typing import Callable, Hashable

from slncyclic.graph.adjacency import Graph

_SEGMENT = re.compile(
    r"^(?P<node>[a-zA-Z0-9]+)\s*->\s*(?P<edges>[a-zA-Z0-9]+(?:\s*,\s*[a-zA-Z0-9]+)*)$"
)


class GraphNotationError(ValueError):
    """Raised when a segment does not match ``node->dep[,dep...]``."""


def parse_graph(
    text: str, key: Callable[[str], Hashable] | None = None
) -> Graph[str]:
    """Parse *text* into a Graph.

    Raises GraphNotationError on a malformed segment and
    DuplicateNodeError when a node is declared twice.
    """
    graph: Graph[str] = Graph(key=key)
    single_line = "".join(text.splitlines())
    for segment in single_line.split(";"):
        segment = segment.strip()
        if not segment:
            continue
        m = _SEGMENT.match(segment)
        if m is None:
            raise GraphNotationError(f"Invalid graph segment: {segment!r}")
        edges = [e.strip() for e in m.group("edges").split(",")]
        graph.add_node(m.group("node"), edges)
    return graph


def format_graph(graph: Graph[str]) -> str:
    """Render *graph* back to notation.  Nodes without edges are dropped."""
    segments = []
    for node in graph.nodes():
        succ = graph.successors(node)
        if succ:
            segments.append(f"{node}->{','.join(succ)}")
    return ";".join(segments)
