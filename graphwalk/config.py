"""Run configuration for graphwalk."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from graphwalk.errors import ConfigError


@dataclass(frozen=True)
class GraphWalkConfig:
    """Locations of the input and output documents and output formatting."""

    # Graph description read on every run
    graph_path: Path = Path("data/graph.json")

    # Result document written on success
    results_path: Path = Path("data/results.json")

    # JSON indentation of the result document
    indent: int = 2

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], base_dir: Optional[Path] = None
    ) -> GraphWalkConfig:
        """Build a config from a mapping, resolving relative paths to ``base_dir``.

        Args:
            data: Mapping with any of ``graph_path``, ``results_path``, ``indent``.
            base_dir: Directory relative paths are resolved against. When None
                relative paths stay relative to the working directory.

        Raises:
            ConfigError: On unknown keys or values of the wrong type.
        """
        allowed = {f.name for f in fields(cls)}
        extra = set(data.keys()) - allowed
        if extra:
            raise ConfigError(
                f"Unrecognized configuration key(s): {', '.join(sorted(map(str, extra)))}. "
                f"Allowed keys are {sorted(allowed)}"
            )

        kwargs: Dict[str, Any] = {}
        for key in ("graph_path", "results_path"):
            if key not in data:
                continue
            value = data[key]
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"'{key}' must be a non-empty string")
            path = Path(value)
            if base_dir is not None and not path.is_absolute():
                path = base_dir / path
            kwargs[key] = path

        if "indent" in data:
            indent = data["indent"]
            if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
                raise ConfigError("'indent' must be a non-negative integer")
            kwargs["indent"] = indent

        return cls(**kwargs)


def load_config(path: Optional[Union[str, Path]] = None) -> GraphWalkConfig:
    """Load configuration from a YAML file.

    Relative paths inside the file are resolved against the file's directory.
    With no path the defaults are returned.

    Raises:
        ConfigError: If the file cannot be read or does not describe a mapping.
    """
    if path is None:
        return GraphWalkConfig()

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Could not read config file: {path} ({exc})") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config file is not valid YAML: {path}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("The provided YAML must map to a dictionary at top-level.")

    return GraphWalkConfig.from_dict(data, base_dir=path.parent)
