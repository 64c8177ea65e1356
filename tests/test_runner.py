"""Tests for the simulation runner aggregation helpers."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from leapfrog.core.results import load_result_json
from leapfrog.simulation.runner import _chunked, save_summary, summarize_runs


def _run(seed, ticks, score, level=1, refuges=0, deaths=None, game_over=True):
    return {
        "seed": seed,
        "ticks": ticks,
        "score": score,
        "level": level,
        "refuges_filled": refuges,
        "deaths": deaths or {},
        "game_over": game_over,
        "frames": [],
    }


class TestChunked:
    def test_chunks(self):
        assert list(_chunked(range(7), 3)) == [[0, 1, 2], [3, 4, 5], [6]]

    def test_rejects_non_positive_size(self):
        with pytest.raises(ValueError):
            list(_chunked([1, 2], 0))


class TestSummarize:
    def test_aggregates(self):
        runs = [
            _run(1, 100, 0, deaths={"vehicle": 4}),
            _run(2, 300, 1100, level=2, refuges=3, deaths={"no-support": 3, "vehicle": 1}),
        ]
        s = summarize_runs(runs)
        assert s["games"] == 2
        assert s["avg_ticks"] == 200.0
        assert s["min_ticks"] == 100
        assert s["max_ticks"] == 300
        assert s["avg_score"] == 550.0
        assert s["max_level"] == 2
        assert s["refuges_per_game"] == 1.5
        assert s["game_over_rate"] == 1.0
        assert s["deaths"] == {"vehicle": 5, "fell-off": 0, "no-support": 3, "invalid-refuge": 0}

    def test_empty(self):
        with pytest.raises(ValueError):
            summarize_runs([])

    def test_save_summary_drops_frames(self, tmp_path):
        runs = [_run(1, 10, 100), _run(2, 20, 0)]
        results = {**summarize_runs(runs), "policy": "idle", "runs": runs}
        path = save_summary(tmp_path / "results.json", results)
        data = load_result_json(path, kind="summary")
        assert "runs" not in data
        assert data["seeds"] == [1, 2]
        assert data["scores"] == [100, 0]
        assert data["policy"] == "idle"
