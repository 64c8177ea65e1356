from __future__ import annotations

"""Parallel simulation runner."""

import multiprocessing
import random
import time
from itertools import islice
from pathlib import Path
from typing import Any

import numpy as np

from game_engine import CAUSES, FPS
from leapfrog.config.schema import Settings
from leapfrog.core.contracts import SimSummary
from leapfrog.core.results import save_result_json
from leapfrog.ui.replay.serialization import save_replay


def _run_seed_batch(args):
    """Worker function: play one chunk of seeds with a fresh policy per seed."""
    from simulator import simulate_batch

    policy_name, seeds, max_ticks, keep_frames = args
    runs = simulate_batch(policy_name, seeds, max_ticks=max_ticks)
    if not keep_frames:
        for run in runs:
            run["frames"] = []
    return runs


def _chunked(items, chunk_size):
    if chunk_size <= 0:
        raise ValueError("chunk_size must be > 0")
    it = iter(items)
    while True:
        chunk = list(islice(it, chunk_size))
        if not chunk:
            return
        yield chunk


def summarize_runs(runs: list[dict[str, Any]]) -> dict[str, Any]:
    """Aggregate per-game results into batch statistics."""
    if not runs:
        raise ValueError("no runs to summarize")
    ticks = np.array([r["ticks"] for r in runs])
    scores = np.array([r["score"] for r in runs])
    levels = np.array([r["level"] for r in runs])
    refuges = np.array([r["refuges_filled"] for r in runs])
    deaths = {cause: int(sum(r["deaths"].get(cause, 0) for r in runs)) for cause in CAUSES}
    return {
        "games": len(runs),
        "avg_ticks": float(np.mean(ticks)),
        "std_ticks": float(np.std(ticks)),
        "min_ticks": int(np.min(ticks)),
        "max_ticks": int(np.max(ticks)),
        "avg_score": float(np.mean(scores)),
        "std_score": float(np.std(scores)),
        "max_score": int(np.max(scores)),
        "max_level": int(np.max(levels)),
        "refuges_per_game": float(np.mean(refuges)),
        "game_over_rate": float(np.mean([bool(r["game_over"]) for r in runs])),
        "deaths": deaths,
    }


def run_simulations(
    settings: Settings,
    policy: str | None = None,
    *,
    n_sims: int | None = None,
    batch_size: int | None = None,
    keep_frames: bool = False,
) -> dict[str, Any]:
    """Run repeated simulations for one policy and aggregate metrics."""
    policy = policy or settings.policy
    n_sims = n_sims or settings.sims_per_policy
    batch_size = batch_size or settings.batch_size

    if settings.seed is not None:
        seeds = list(range(settings.seed, settings.seed + n_sims))
    else:
        seeds = random.sample(range(100_000), n_sims)

    all_runs: list[dict[str, Any]] = []
    n_batches = (n_sims + batch_size - 1) // batch_size

    for batch_idx, batch_seeds in enumerate(_chunked(seeds, batch_size)):
        worker_count = min(len(batch_seeds), settings.sim_workers)
        seeds_per_worker = max(1, (len(batch_seeds) + worker_count - 1) // worker_count)
        args_list = [
            (policy, seed_chunk, settings.max_ticks, keep_frames)
            for seed_chunk in _chunked(batch_seeds, seeds_per_worker)
        ]

        with multiprocessing.Pool(processes=worker_count) as pool:
            batch_results = pool.map(_run_seed_batch, args_list)

        for worker_runs in batch_results:
            all_runs.extend(worker_runs)

        avg_so_far = sum(r["score"] for r in all_runs) / len(all_runs)
        print(
            f"  Batch {batch_idx + 1}/{n_batches} complete "
            f"({len(all_runs)}/{n_sims} games, running avg score: {avg_so_far:.0f})"
        )

    return {**summarize_runs(all_runs), "policy": policy, "runs": all_runs}


def save_summary(path: Path, results: dict[str, Any]) -> Path:
    summary = {k: v for k, v in results.items() if k != "runs"}
    summary["seeds"] = [r["seed"] for r in results.get("runs", [])]
    summary["scores"] = [r["score"] for r in results.get("runs", [])]
    summary["ticks"] = [r["ticks"] for r in results.get("runs", [])]
    return save_result_json(path, summary, kind="summary")


def run_policy(settings: Settings, *, save_replay_run: bool = False) -> SimSummary:
    """Simulate the configured policy, save its summary and optionally its best game."""
    print("\n" + "=" * 50)
    print(f"SIMULATION: {settings.policy} policy ({settings.sims_per_policy} games)")
    print("=" * 50)
    start = time.time()
    results = run_simulations(settings, keep_frames=save_replay_run)
    elapsed = time.time() - start
    print(f"  Time: {elapsed:.1f}s")

    summary_path = save_summary(settings.paths.results_json, results)

    replay_path = None
    if save_replay_run:
        best = max(results["runs"], key=lambda r: (r["score"], r["ticks"]))
        replay_path = save_replay(settings.paths.replay_json, best, policy=settings.policy)
        print(f"  Saved replay of seed {best['seed']} (score {best['score']}) to {replay_path}")

    print(
        f"  avg score = {results['avg_score']:.0f} (+/- {results['std_score']:.0f}), "
        f"avg survival = {results['avg_ticks']:.0f} ticks ({results['avg_ticks'] / FPS:.1f}s)"
    )
    print(f"  refuges/game = {results['refuges_per_game']:.2f}, best level = {results['max_level']}")
    print(f"  deaths: {results['deaths']}")
    return SimSummary(
        policy=settings.policy,
        results={k: v for k, v in results.items() if k != "runs"},
        summary_path=summary_path,
        replay_path=replay_path,
        metadata={"elapsed": elapsed},
    )
