#!/usr/bin/env python3
"""Headless game simulator — runs a game with policy decisions, records replay data."""

from game_engine import GameState, FPS

# Safety limit: stop if game exceeds this many ticks (~3 minutes at 60fps)
MAX_TICKS = 12_000

# Policies decide a few times per second, like a player tapping keys
DECISION_INTERVAL = max(1, FPS // 6)


def simulate(policy, seed=0, max_ticks=MAX_TICKS, record_every=2):
    """
    Run one headless game until game over or the tick limit.

    Args:
        policy: object with a ``decide(game)`` method returning an intent
                ("up", "down", "left", "right", "restart") or None
        seed: random seed for deterministic replay
        max_ticks: hard stop for games the policy never loses
        record_every: keep every n-th frame for replay

    Returns:
        dict: {
            'ticks': int (frames played),
            'seed': int,
            'score': int, 'level': int, 'refuges_filled': int,
            'deaths': {cause: count},
            'game_over': bool,
            'frames': list of frame dicts for replay
        }

    Each frame dict contains the output of GameState.encode() plus a
    'decision' key with the policy's decision for that tick (or None).
    """
    game = GameState(seed=seed)
    frames = []

    while not game.game_over and game.tick < max_ticks:
        decision = None
        if game.tick % DECISION_INTERVAL == 0:
            decision = policy.decide(game)

        if game.tick % record_every == 0:
            state = game.encode()
            state["decision"] = decision
            frames.append(state)

        game.step(decision)

    # Record final frame on game over
    last = frames[-1] if frames else {}
    if last.get("tick") != game.tick or last.get("phase") != game.phase:
        final = game.encode()
        final["decision"] = None
        frames.append(final)

    return {
        "ticks": game.tick,
        "seed": seed,
        "score": game.score,
        "level": game.level,
        "refuges_filled": game.refuges_filled,
        "deaths": dict(game.deaths),
        "game_over": game.game_over,
        "frames": frames,
    }


def simulate_batch(policy_name, seeds, max_ticks=MAX_TICKS):
    """Run multiple simulations sequentially.

    Used by the runner's worker processes; each seed gets its own policy
    instance so random policies stay reproducible per seed.
    """
    from leapfrog.simulation.policies import load_policy

    return [simulate(load_policy(policy_name, seed=seed), seed=seed, max_ticks=max_ticks) for seed in seeds]


if __name__ == "__main__":
    from leapfrog.simulation.policies import load_policy

    result = simulate(load_policy("cautious", seed=42), seed=42)
    print(f"Ticks: {result['ticks']} ({result['ticks'] / FPS:.1f} sec)")
    print(f"Score: {result['score']}  Level: {result['level']}  Deaths: {result['deaths']}")
    print(f"Frames recorded: {len(result['frames'])}")
