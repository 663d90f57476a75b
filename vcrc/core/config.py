"""Analysis state management and project I/O for VCRC.

Handles saving/loading cycle definitions together with their solved
performance and entropy analysis results in JSON.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import numpy as np

from vcrc.core.errors import ConfigurationError

logger = logging.getLogger(__name__)


# --- Project metadata ---


@dataclass
class ProjectMeta:
    """Top-level project metadata."""

    name: str = "Untitled"
    description: str = ""
    author: str = ""
    version: str = "0.1.0"
    created: str = ""
    modified: str = ""
    unit_system: str = "SI"

    def touch(self) -> None:
        """Update the modified timestamp (and the creation one, if unset)."""
        now = datetime.now(timezone.utc).isoformat()
        if not self.created:
            self.created = now
        self.modified = now


@dataclass
class AnalysisState:
    """Complete analysis state persisted to disk.

    ``cycle`` holds a :class:`~vcrc.cycle.solver.CycleDefinition` as a
    plain dictionary (or, for averaged analyses, a list of them under
    ``cycles``).
    """

    meta: ProjectMeta = field(default_factory=ProjectMeta)

    # Cycle definition(s)
    cycle: dict[str, Any] = field(default_factory=dict)
    cycles: list[dict[str, Any]] = field(default_factory=list)

    # Source temperatures [K]
    cold_sources: list[float] = field(default_factory=list)
    hot_sources: list[float] = field(default_factory=list)

    # Cycle performance summary
    performance: dict[str, Any] = field(default_factory=dict)

    # Entropy analysis result
    analysis: dict[str, Any] = field(default_factory=dict)


# --- JSON serialization ---


class _NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy types."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, (np.integer,)):
            return int(obj)
        if isinstance(obj, (np.floating,)):
            return float(obj)
        return super().default(obj)


def save_state_json(state: AnalysisState, path: str | Path) -> None:
    """Save analysis state to a JSON file."""
    path = Path(path)
    state.meta.touch()

    with open(path, "w") as f:
        json.dump(asdict(state), f, indent=2, cls=_NumpyEncoder)

    logger.info("Saved analysis to %s", path)


def load_state_json(path: str | Path) -> AnalysisState:
    """Load analysis state from a JSON file."""
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    meta = ProjectMeta(**data.pop("meta", {}))
    return AnalysisState(meta=meta, **data)


def load_cycle_definition_dict(path: str | Path) -> dict[str, Any]:
    """Read a cycle definition dictionary from *path*.

    Accepts either a bare definition or a saved :class:`AnalysisState`.

    Raises:
        ConfigurationError: If the file holds no cycle definition.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)
    if "meta" in data:
        data = data.get("cycle") or {}
    if not data:
        raise ConfigurationError(f"No cycle definition found in {path}")
    logger.debug("Loaded cycle definition from %s", path)
    return data
