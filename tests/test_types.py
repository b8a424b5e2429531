import pytest

from graphwalk.errors import UsageError
from graphwalk.types import Mode


@pytest.mark.parametrize(
    "value,expected",
    [("bfs", Mode.BFS), ("DFS", Mode.DFS), (" widest ", Mode.WIDEST)],
)
def test_mode_from_string(value, expected):
    assert Mode.from_string(value) is expected


def test_mode_from_string_unknown():
    with pytest.raises(UsageError) as exc_info:
        Mode.from_string("dijkstra")
    assert "bfs, dfs, widest" in str(exc_info.value)


def test_mode_arity():
    assert Mode.BFS.arity == 1
    assert Mode.DFS.arity == 1
    assert Mode.WIDEST.arity == 2
