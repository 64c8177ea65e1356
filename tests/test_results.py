"""Tests for versioned result files and replay serialization."""

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from leapfrog.core.results import SCHEMA_VERSION, load_result_json, save_result_json
from leapfrog.ui.replay.serialization import load_replay, load_summary, save_replay
from simulator import simulate
from leapfrog.simulation.policies import IdlePolicy


class TestResultJson:
    def test_save_adds_version_and_kind(self, tmp_path):
        path = save_result_json(tmp_path / "out" / "r.json", {"avg_score": 1.5})
        data = load_result_json(path)
        assert data["schema_version"] == SCHEMA_VERSION
        assert data["kind"] == "summary"
        assert data["avg_score"] == 1.5

    def test_legacy_file_is_version_zero(self, tmp_path):
        path = tmp_path / "old.json"
        path.write_text(json.dumps({"avg_score": 2}))
        data = load_summary(path)
        assert data["schema_version"] == 0
        assert data["kind"] == "summary"

    def test_kind_mismatch(self, tmp_path):
        path = save_result_json(tmp_path / "r.json", {"runs": []}, kind="replay")
        with pytest.raises(ValueError):
            load_result_json(path, kind="summary")

    def test_unknown_kind(self, tmp_path):
        with pytest.raises(ValueError):
            save_result_json(tmp_path / "r.json", {}, kind="movie")


class TestReplay:
    def test_replay_file(self, tmp_path):
        run = simulate(IdlePolicy(), seed=9, max_ticks=20)
        path = save_replay(tmp_path / "replay.json", run, policy="idle")
        bundle = load_replay(path)
        assert bundle.policy == "idle"
        assert len(bundle.runs) == 1
        replay = bundle.runs[0]
        assert replay.seed == 9
        assert replay.ticks == 20
        assert replay.frames[0]["tick"] == 0
        assert bundle.metrics["level"] == 1
