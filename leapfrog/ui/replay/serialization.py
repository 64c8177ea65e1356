from __future__ import annotations

from pathlib import Path
from typing import Any

from leapfrog.core.results import load_result_json, save_result_json
from leapfrog.ui.replay.dto import ReplayBundle, ReplayRun


def load_summary(path: Path) -> dict[str, Any]:
    return load_result_json(path, kind="summary")


def save_replay(path: Path, run: dict[str, Any], *, policy: str) -> Path:
    payload = {
        "policy": policy,
        "runs": [{k: run.get(k) for k in ("ticks", "seed", "score", "frames")}],
        "metrics": {k: run.get(k) for k in ("level", "refuges_filled", "deaths")},
    }
    return save_result_json(path, payload, kind="replay")


def load_replay(path: Path) -> ReplayBundle:
    data = load_result_json(path, kind="replay")
    return ReplayBundle(
        policy=str(data.get("policy", "unknown")),
        runs=[ReplayRun.from_dict(r) for r in data.get("runs", [])],
        metrics=dict(data.get("metrics", {})),
    )
