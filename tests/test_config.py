"""Tests for analysis state persistence."""

import json

import numpy as np
import pytest

from vcrc.core.config import (
    AnalysisState,
    ProjectMeta,
    load_cycle_definition_dict,
    load_state_json,
    save_state_json,
)
from vcrc.core.errors import ConfigurationError
from vcrc.cycle.solver import CycleDefinition, CycleType


class TestAnalysisState:
    def test_defaults(self):
        state = AnalysisState()
        assert state.meta.name == "Untitled"
        assert state.cycle == {}
        assert state.cold_sources == []

    def test_meta_touch(self):
        meta = ProjectMeta(name="Test")
        meta.touch()
        assert meta.modified != ""
        assert meta.created == meta.modified

    def test_touch_keeps_creation_time(self):
        meta = ProjectMeta(created="2024-01-01T00:00:00+00:00")
        meta.touch()
        assert meta.created == "2024-01-01T00:00:00+00:00"


class TestJsonPersistence:
    def test_save_and_load(self, tmp_path):
        state = AnalysisState(
            meta=ProjectMeta(name="Split unit"),
            cycle=CycleDefinition(cycle_type=CycleType.ECONOMIZER).to_dict(),
            cold_sources=[291.15],
            hot_sources=[308.15],
            analysis={"thermodynamic_perfection": 0.3},
        )
        path = tmp_path / "analysis.json"
        save_state_json(state, path)

        loaded = load_state_json(path)
        assert loaded.meta.name == "Split unit"
        assert loaded.meta.modified != ""
        assert loaded.cycle["cycle_type"] == "economizer"
        assert loaded.cold_sources == pytest.approx([291.15])
        assert loaded.analysis["thermodynamic_perfection"] == pytest.approx(0.3)

    def test_numpy_serialization(self, tmp_path):
        """Numpy scalars and arrays should be serialized to plain JSON."""
        state = AnalysisState()
        state.performance = {"eer": np.float64(4.3), "points": np.linspace(0, 1, 5), "n": np.int64(3)}
        path = tmp_path / "np.json"
        save_state_json(state, path)

        with open(path) as f:
            data = json.load(f)
        assert data["performance"]["eer"] == pytest.approx(4.3)
        assert len(data["performance"]["points"]) == 5
        assert data["performance"]["n"] == 3


class TestLoadCycleDefinition:
    def test_bare_definition(self, tmp_path):
        path = tmp_path / "cycle.json"
        path.write_text(json.dumps({"cycle_type": "economizer", "refrigerant": "R134a"}))
        data = load_cycle_definition_dict(path)
        assert CycleDefinition.from_dict(data).refrigerant == "R134a"

    def test_saved_state(self, tmp_path):
        path = tmp_path / "analysis.json"
        save_state_json(AnalysisState(cycle=CycleDefinition().to_dict()), path)
        data = load_cycle_definition_dict(path)
        assert data["cycle_type"] == "simple"

    def test_state_without_cycle(self, tmp_path):
        path = tmp_path / "analysis.json"
        save_state_json(AnalysisState(), path)
        with pytest.raises(ConfigurationError, match="No cycle definition"):
            load_cycle_definition_dict(path)
