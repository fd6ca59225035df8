"""Shared fixtures for the MST tool tests."""
import os
import sys

os.environ.setdefault("MPLBACKEND", "Agg")
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from mst_graph import Graph


@pytest.fixture
def small_connected_graph():
    """5 nodes, 7 edges; minimum spanning tree cost 16."""
    return Graph(
        1,
        ["A", "B", "C", "D", "E"],
        [
            ("A", "B", 4),
            ("A", "C", 3),
            ("B", "C", 2),
            ("B", "D", 5),
            ("C", "D", 7),
            ("C", "E", 8),
            ("D", "E", 6),
        ],
    )


@pytest.fixture
def triangle_graph():
    return Graph(2, ["X", "Y", "Z"], [("X", "Y", 1), ("Y", "Z", 2), ("X", "Z", 3)])


@pytest.fixture
def disconnected_graph():
    return Graph(3, ["A", "B", "C", "D"], [("A", "B", 1), ("C", "D", 2)])


@pytest.fixture
def single_node_graph():
    return Graph(4, ["A"], [])
