from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path


@dataclass(frozen=True)
class Paths:
    project_dir: Path
    data_dir: Path
    results_dir: Path

    replay_json: Path
    results_json: Path

    def ensure_dirs(self) -> None:
        for p in (self.data_dir, self.results_dir):
            p.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class Settings:
    policy: str
    paths: Paths

    sims_per_policy: int
    sim_workers: int
    batch_size: int
    max_ticks: int

    game_over_delay: int
    swipe_min_distance: int
    seed: int | None = None

    def with_overrides(self, **kwargs) -> "Settings":
        return replace(self, **kwargs)
