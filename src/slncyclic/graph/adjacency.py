"""Directed graph stored as ordered adjacency lists.

The graph maps each declared node to the ordered list of nodes it
depends on.  Order matters: the cycle detector walks neighbors in
insertion order, so it decides which back edge is found first.

Node identity is decided by an optional *key* function, the comparison
key of a node.  Passing ``str.casefold`` makes project names compare
case-insensitively; the default compares nodes as they are.  The key
is fixed when the graph is created and every lookup goes through it.

A node that was never declared is a sink: ``successors`` returns an
empty list for it instead of raising.
"""
from __future__ import annotations

from typing import Callable, Generic, Hashable, Iterable, Iterator, Mapping, TypeVar

T = TypeVar("T", bound=Hashable)


class DuplicateNodeError(ValueError):
    """Raised when a node is declared twice."""

    def __init__(self, node: object) -> None:
        self.node = node
        super().__init__(f"Node {node!r} already exists in graph")


def _identity(node: Hashable) -> Hashable:
    return node


class Graph(Generic[T]):
    """Directed graph backed by adjacency lists.

    Internally ``_fwd`` maps a comparison key to the successor list and
    ``_labels`` maps the same key back to the node as it was declared.
    """

    __slots__ = ("_fwd", "_labels", "_key")

    def __init__(self, key: Callable[[T], Hashable] | None = None) -> None:
        self._fwd: dict[Hashable, list[T]] = {}
        self._labels: dict[Hashable, T] = {}
        self._key: Callable[[T], Hashable] = key or _identity

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[T, Iterable[T] | None],
        key: Callable[[T], Hashable] | None = None,
    ) -> Graph[T]:
        """Build a graph from ``{node: neighbors}``.

        Key order and neighbor order are preserved.  A ``None`` value is
        read as no neighbors.  Keys that collide under *key* raise
        DuplicateNodeError.
        """
        graph: Graph[T] = cls(key=key)
        for node, successors in mapping.items():
            graph.add_node(node, successors or ())
        return graph

    # ---- mutation --------------------------------------------------------

    def add_node(self, node: T, successors: Iterable[T] = ()) -> None:
        """Declare *node* with its ordered successors.

        Raises DuplicateNodeError if *node* is already declared.
        """
        k = self._key(node)
        if k in self._fwd:
            raise DuplicateNodeError(node)
        self._fwd[k] = list(successors)
        self._labels[k] = node

    def add_edge(self, src: T, dst: T) -> None:
        """Append the edge src -> dst.

        Declares *src* if needed.  *dst* is not declared; until it is,
        it is a sink.
        """
        k = self._key(src)
        if k not in self._fwd:
            self._fwd[k] = []
            self._labels[k] = src
        self._fwd[k].append(dst)

    # ---- queries ---------------------------------------------------------

    def canonical(self, node: T) -> Hashable:
        """Comparison key of *node*."""
        return self._key(node)

    def same(self, a: T, b: T) -> bool:
        """True if *a* and *b* are the same node under the graph key."""
        return self._key(a) == self._key(b)

    def has_node(self, node: T) -> bool:
        return self._key(node) in self._fwd

    def has_edge(self, src: T, dst: T) -> bool:
        target = self._key(dst)
        return any(self._key(n) == target for n in self._fwd.get(self._key(src), ()))

    def successors(self, node: T) -> list[T]:
        """Direct successors in insertion order; [] for undeclared nodes."""
        return list(self._fwd.get(self._key(node), ()))

    def nodes(self) -> Iterator[T]:
        """Declared nodes in insertion order."""
        return iter(self._labels.values())

    def edges(self) -> Iterator[tuple[T, T]]:
        for k, dsts in self._fwd.items():
            src = self._labels[k]
            for dst in dsts:
                yield src, dst

    @property
    def node_count(self) -> int:
        return len(self._fwd)

    @property
    def edge_count(self) -> int:
        return sum(len(dsts) for dsts in self._fwd.values())

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, node: T) -> bool:  # type: ignore[override]
        return self.has_node(node)

    def __len__(self) -> int:
        return self.node_count

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count}, edges={self.edge_count})"
