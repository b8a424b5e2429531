import pytest

from graphwalk.algorithms.types import UNBOUNDED, PathEdge, WidestPathResult
from graphwalk.results import (
    MAX_CAPACITY,
    assemble,
    traversal_results,
    widest_path_results,
)
from graphwalk.types import Mode


def test_traversal_results_keys():
    assert traversal_results(Mode.BFS, ["A", "B"]) == {"bfs_order": ["A", "B"]}
    assert traversal_results(Mode.DFS, ("A",)) == {"dfs_order": ["A"]}


def test_traversal_results_rejects_widest():
    with pytest.raises(ValueError):
        traversal_results(Mode.WIDEST, ["A"])


def test_widest_path_results():
    result = WidestPathResult(
        path=["A", "B", "C"],
        edges=[PathEdge("A", "B"), PathEdge("B", "C")],
        capacity=3,
    )
    assert widest_path_results(result) == {
        "widest_path": ["A", "B", "C"],
        "widest_path_edges": [{"from": "A", "to": "B"}, {"from": "B", "to": "C"}],
        "widest_path_capacity": 3,
    }


def test_widest_path_results_no_path():
    assert widest_path_results(WidestPathResult()) == {
        "widest_path": [],
        "widest_path_edges": [],
        "widest_path_capacity": 0,
    }


def test_widest_path_results_unbounded_capacity_is_max_int():
    result = WidestPathResult(path=["A"], edges=[], capacity=UNBOUNDED)
    capacity = widest_path_results(result)["widest_path_capacity"]
    assert capacity == MAX_CAPACITY == 2147483647
    assert isinstance(capacity, int)


def test_widest_keys_keep_order():
    keys = list(widest_path_results(WidestPathResult()).keys())
    assert keys == ["widest_path", "widest_path_edges", "widest_path_capacity"]


def test_assemble_dispatches_by_mode():
    assert assemble(Mode.BFS, ["A"]) == {"bfs_order": ["A"]}
    assert assemble(Mode.DFS, ["A"]) == {"dfs_order": ["A"]}
    assert assemble(Mode.WIDEST, WidestPathResult())["widest_path_capacity"] == 0


def test_assemble_widest_requires_result_object():
    with pytest.raises(TypeError):
        assemble(Mode.WIDEST, ["A"])
