"""Exception hierarchy for graphwalk.

Every failure surfaced by the package derives from :class:`GraphWalkError` so
the command-line driver can report it and exit non-zero. Lookup, validation
and file errors also inherit from ``KeyError``, ``ValueError`` and ``OSError``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class GraphWalkError(Exception):
    """Base exception for all graphwalk errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class UsageError(GraphWalkError):
    """Raised for an unknown mode or a wrong number of node arguments."""


class GraphIOError(GraphWalkError, OSError):
    """Raised when the graph file cannot be read or the results file written."""


class MalformedInputError(GraphWalkError, ValueError):
    """Raised when the graph description is missing fields or has wrong types."""


class ConfigError(GraphWalkError, ValueError):
    """Raised when a configuration file is invalid."""


class MissingNodeError(GraphWalkError, KeyError):
    """Raised during construction when an edge references an undeclared node."""


class NodeNotFoundError(GraphWalkError, KeyError):
    """Raised when a requested node key is not part of the graph."""
