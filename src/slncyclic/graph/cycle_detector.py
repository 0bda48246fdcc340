"""Cycle detection in directed graphs using iterative DFS with three colors.

The three colors:
  WHITE  -- node not yet visited
  GRAY   -- node has a frame on the stack (on the current DFS path)
  BLACK  -- node fully explored (its frame was popped)

Recursion is replaced by an explicit stack of frames.  A frame pairs a
node with the iterator over its successors, so the iterator itself is
the cursor: it only moves forward and every edge is looked at once per
traversal.  Long dependency chains therefore never hit the interpreter
recursion limit.

Every edge into a GRAY node is a back edge and yields one cycle: the
stack slice from that node's frame up to the top frame, closed by the
node again.  Cycles are not merged or deduplicated, so two back edges
into the same ancestor give two records.
"""
from __future__ import annotations

from enum import Enum
from typing import Hashable, Iterable, Iterator, Mapping, TypeVar, Union

from slncyclic.graph.adjacency import Graph

T = TypeVar("T", bound=Hashable)

# one entry of the explicit DFS stack: (node, cursor over its successors)
_Frame = tuple[T, Iterator[T]]

_EXHAUSTED = object()


class Color(Enum):
    WHITE = "white"
    GRAY = "gray"
    BLACK = "black"


class CycleDetectionError(RuntimeError):
    """Raised when the traversal state is inconsistent.

    This is an internal fault, not bad input: the run is aborted rather
    than returning a partial list of cycles.
    """


def find_cycles(
    graph: Union[Graph[T], Mapping[T, Iterable[T]]],
) -> list[list[T]]:
    """Return every back-edge cycle in *graph*, in discovery order.

    Each cycle is a list [v, n1, ..., nk, v] where every consecutive pair
    is an edge of the graph.  Roots are tried in node order and colors
    are shared between roots, so a BLACK node is never explored twice.

    A plain mapping is accepted and converted with Graph.from_mapping.
    """
    if not isinstance(graph, Graph):
        graph = Graph.from_mapping(graph)

    color: dict[Hashable, Color] = {}
    cycles: list[list[T]] = []
    for root in graph.nodes():
        if color.get(graph.canonical(root), Color.WHITE) is not Color.WHITE:
            continue
        cycles.extend(_explore(graph, root, color))
    return cycles


def has_cycles(graph: Union[Graph[T], Mapping[T, Iterable[T]]]) -> bool:
    """True if *graph* has at least one cycle."""
    return bool(find_cycles(graph))


def _explore(
    graph: Graph[T], root: T, color: dict[Hashable, Color]
) -> list[list[T]]:
    """Run one DFS from *root* and return the cycles it finds."""
    cycles: list[list[T]] = []
    stack: list[_Frame] = []
    # stack position of every GRAY node's frame
    position: dict[Hashable, int] = {}

    def push(node: T) -> None:
        k = graph.canonical(node)
        color[k] = Color.GRAY
        position[k] = len(stack)
        stack.append((node, iter(graph.successors(node))))

    push(root)
    while stack:
        node, cursor = stack[-1]
        succ = next(cursor, _EXHAUSTED)

        if succ is _EXHAUSTED:
            stack.pop()
            k = graph.canonical(node)
            del position[k]
            color[k] = Color.BLACK
            continue

        k = graph.canonical(succ)
        state = color.get(k, Color.WHITE)
        if state is Color.WHITE:
            push(succ)
        elif state is Color.GRAY:
            cycles.append(_cycle_path(stack, position, k, succ))
        # BLACK: fully explored, no path back to the current stack

    return cycles


def _cycle_path(
    stack: list[_Frame], position: dict[Hashable, int], key: Hashable, node: T
) -> list[T]:
    """Slice the stack from *node*'s frame to the top and close the loop."""
    if not stack:
        raise CycleDetectionError(
            f"Back edge to {node!r} found with an empty stack"
        )
    start = position.get(key)
    if start is None:
        raise CycleDetectionError(f"Node {node!r} is GRAY but has no stack frame")

    path = [frame_node for frame_node, _ in stack[start:]]
    path.append(path[0])
    return path
