from __future__ import annotations

import importlib.util
from dataclasses import dataclass

from leapfrog.config.schema import Settings
from leapfrog.simulation.policies import available_policies


@dataclass(frozen=True)
class Check:
    name: str
    ok: bool
    detail: str


def _has_module(name: str) -> bool:
    return importlib.util.find_spec(name) is not None


def run_doctor(settings: Settings) -> list[Check]:
    checks: list[Check] = []
    checks.append(Check("policy", settings.policy in available_policies(), f"policy={settings.policy}"))
    checks.append(Check("sim_workers", settings.sim_workers > 0, f"workers={settings.sim_workers}"))
    checks.append(Check("batch_size", settings.batch_size > 0, f"batch_size={settings.batch_size}"))
    checks.append(Check("pygame", _has_module("pygame"), "required for the game window / replay viewer"))
    checks.append(Check("numpy", _has_module("numpy"), "required for simulation statistics"))

    paths = settings.paths
    checks.append(Check("data_dir", paths.data_dir.exists(), str(paths.data_dir)))
    checks.append(Check("results_dir", paths.results_dir.exists(), str(paths.results_dir)))
    replay_state = "found" if paths.replay_json.exists() else "none recorded yet"
    checks.append(Check("replay", True, f"{paths.replay_json} ({replay_state})"))
    return checks
