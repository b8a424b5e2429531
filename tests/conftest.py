"""Shared graph fixtures."""

from __future__ import annotations

import pytest

from graphwalk.graph import build_graph


@pytest.fixture
def line1():
    #  A ──5── B ──3── C      D
    return build_graph(
        ["A", "B", "C", "D"],
        [("A", "B", 5), ("B", "C", 3)],
    )


@pytest.fixture
def square1():
    #  A ──1── B
    #  │       │
    #  2       1
    #  │       │
    #  D ──2── C
    return build_graph(
        ["A", "B", "C", "D"],
        [("A", "B", 1), ("B", "C", 1), ("A", "D", 2), ("D", "C", 2)],
    )


@pytest.fixture
def tree1():
    #        A
    #      /   \
    #     B     C
    #    / \     \
    #   D   E     F
    return build_graph(
        ["A", "B", "C", "D", "E", "F"],
        [("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("B", "E", 1), ("C", "F", 1)],
    )


@pytest.fixture
def graph1():
    # Parallel A-B edges with weights 2 and 4.
    #
    #      [2,4]     [3]
    #   A ─────── B ───── C ──[1]── F
    #   │ \              / │        │
    #  [2] └──[5]── E ─[4] [3]     [2]
    #   │                  │        │
    #   └───────────────── D ───────┘
    return build_graph(
        ["A", "B", "C", "D", "E", "F"],
        [
            ("A", "B", 2),
            ("A", "B", 4),
            ("B", "C", 3),
            ("C", "D", 3),
            ("A", "E", 5),
            ("E", "C", 4),
            ("A", "D", 2),
            ("C", "F", 1),
            ("F", "D", 2),
        ],
    )


@pytest.fixture
def graph_document():
    return {
        "nodes": [
            {"data": {"id": "A", "label": "A"}},
            {"data": {"id": "B"}},
            {"data": {"id": "C"}, "position": {"x": 10, "y": 20}},
            {"data": {"id": "D"}},
        ],
        "edges": [
            {"data": {"source": "A", "target": "B", "weight": 5}},
            {"data": {"id": "B-C", "source": "B", "target": "C", "weight": 3}},
        ],
    }
