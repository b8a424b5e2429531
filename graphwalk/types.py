"""Base enums shared across graphwalk."""

from __future__ import annotations

from enum import Enum

from graphwalk.errors import UsageError


class Mode(str, Enum):
    """Algorithm selected for a run."""

    BFS = "bfs"
    DFS = "dfs"
    WIDEST = "widest"

    @classmethod
    def from_string(cls, value: str) -> "Mode":
        """Parse a mode name (case-insensitive).

        Raises:
            UsageError: If ``value`` does not name a mode.
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise UsageError(
                f"Unknown algorithm: {value!r}. Valid values are: {valid}"
            ) from None

    @property
    def arity(self) -> int:
        """Number of node keys the mode takes on the command line."""
        return 2 if self is Mode.WIDEST else 1
