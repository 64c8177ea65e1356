from __future__ import annotations

from pathlib import Path

import config as legacy_config

from .schema import Paths, Settings


def from_legacy_config() -> Settings:
    project_dir = Path(getattr(legacy_config, "PROJECT_DIR", Path(__file__).resolve().parents[2]))
    paths = Paths(
        project_dir=project_dir,
        data_dir=Path(legacy_config.DATA_DIR),
        results_dir=Path(legacy_config.RESULTS_DIR),
        replay_json=Path(legacy_config.REPLAY_JSON),
        results_json=Path(legacy_config.RESULTS_JSON),
    )
    return Settings(
        policy=str(getattr(legacy_config, "POLICY", "cautious")),
        paths=paths,
        sims_per_policy=int(getattr(legacy_config, "SIMS_PER_POLICY", 20)),
        sim_workers=int(getattr(legacy_config, "SIM_WORKERS", 2)),
        batch_size=int(getattr(legacy_config, "BATCH_SIZE", 10)),
        max_ticks=int(getattr(legacy_config, "MAX_TICKS", 12_000)),
        game_over_delay=int(getattr(legacy_config, "GAME_OVER_DELAY", 36)),
        swipe_min_distance=int(getattr(legacy_config, "SWIPE_MIN_DISTANCE", 12)),
    )
