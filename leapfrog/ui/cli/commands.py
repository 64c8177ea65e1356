from __future__ import annotations

from pathlib import Path

from leapfrog.config.loader import load_settings
from leapfrog.core.doctor import run_doctor
from leapfrog.ui.replay.serialization import load_summary


def cmd_play(args):
    from leapfrog.ui.game.app_game import run_from_settings

    settings = load_settings(seed=args.seed)
    run_from_settings(settings)


def cmd_simulate(args):
    from leapfrog.simulation.runner import run_policy

    settings = load_settings(policy=args.policy, sims=args.sims, seed=args.seed)
    summary = run_policy(settings, save_replay_run=args.save_replay)
    print(f"[simulate] Summary written to {summary.summary_path}")


def cmd_report(args):
    settings = load_settings()
    path = Path(settings.paths.results_json)
    if not path.exists():
        print(f"[report] Missing results: {path}")
        return
    data = load_summary(path)
    print(f"\nRESULTS ({path})")
    print(f"  schema_version: {data.get('schema_version', 'n/a')}")
    print(f"  policy: {data.get('policy', settings.policy)}")
    for key in ("games", "avg_score", "std_score", "max_score", "avg_ticks", "std_ticks",
                "max_level", "refuges_per_game", "game_over_rate", "deaths"):
        if key in data:
            print(f"  {key}: {data[key]}")


def cmd_replay(args):
    from leapfrog.ui.replay.viewer import run_from_settings

    settings = load_settings()
    try:
        run_from_settings(settings, args.path)
    except (RuntimeError, ValueError) as exc:
        print(f"[replay] {exc}")


def cmd_doctor(args):
    settings = load_settings()
    checks = run_doctor(settings)
    ok_count = 0
    for chk in checks:
        mark = "OK" if chk.ok else "FAIL"
        print(f"[{mark}] {chk.name}: {chk.detail}")
        ok_count += int(chk.ok)
    print(f"\n{ok_count}/{len(checks)} checks passing")
