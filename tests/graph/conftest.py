"""Shared fixtures for graph model and cycle detector tests."""
from __future__ import annotations

import pytest

from slncyclic.graph.adjacency import Graph


@pytest.fixture
def empty_graph() -> Graph[str]:
    return Graph()


@pytest.fixture
def linear_graph() -> Graph[str]:
    """a -> b -> c -> d -> e -> f"""
    g: Graph[str] = Graph()
    for src, dst in [("a", "b"), ("b", "c"), ("c", "d"), ("d", "e"), ("e", "f")]:
        g.add_edge(src, dst)
    return g


@pytest.fixture
def diamond_graph() -> Graph[str]:
    """
    a -> b -> d
    a -> c -> d
    """
    g: Graph[str] = Graph()
    g.add_node("a", ["b", "c"])
    g.add_node("b", ["d"])
    g.add_node("c", ["d"])
    return g


@pytest.fixture
def casefold_graph() -> Graph[str]:
    """a -> B, b -> A compared case-insensitively."""
    g: Graph[str] = Graph(key=str.casefold)
    g.add_node("a", ["B"])
    g.add_node("b", ["A"])
    return g
