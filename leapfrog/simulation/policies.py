from __future__ import annotations

"""Scripted players used to drive headless simulations."""

import random

from game_engine import REFUGE_COUNT, REFUGE_ROW, REFUGE_SPAN, GameState


class IdlePolicy:
    name = "idle"

    def decide(self, game: GameState) -> str | None:
        return None


class RandomPolicy:
    """Mashes keys, biased toward hopping forward."""

    name = "random"
    CHOICES = ("up", "up", "up", "left", "right", "down", None)

    def __init__(self, seed: int | None = None):
        self.rng = random.Random(seed)

    def decide(self, game: GameState) -> str | None:
        return self.rng.choice(self.CHOICES)


class ForwardPolicy:
    name = "forward"

    def __init__(self, every: int = 2):
        self.every = max(1, every)
        self.calls = 0

    def decide(self, game: GameState) -> str | None:
        self.calls += 1
        return "up" if self.calls % self.every == 0 else None


class CautiousPolicy:
    """Hops forward only into cells that are safe right now."""

    name = "cautious"

    def decide(self, game: GameState) -> str | None:
        p = game.player
        if game.is_cell_safe(p.col, p.row - 1):
            return "up"
        if p.row == REFUGE_ROW + 1:
            target = _nearest_open_refuge_col(game, p.col)
            if target is not None and target != p.col:
                step = 1 if target > p.col else -1
                if game.is_cell_safe(p.col + step, p.row):
                    return "right" if step > 0 else "left"
        return None


def _nearest_open_refuge_col(game: GameState, col: int) -> int | None:
    cols = [
        idx * REFUGE_SPAN + offset
        for idx in range(REFUGE_COUNT)
        if not game.refuges[idx]
        for offset in range(REFUGE_SPAN)
    ]
    if not cols:
        return None
    return min(cols, key=lambda c: (abs(c - col), c))


_POLICIES = {
    "idle": lambda seed: IdlePolicy(),
    "random": lambda seed: RandomPolicy(seed),
    "forward": lambda seed: ForwardPolicy(),
    "cautious": lambda seed: CautiousPolicy(),
}


def load_policy(name: str, *, seed: int | None = None):
    try:
        factory = _POLICIES[name]
    except KeyError as exc:
        raise ValueError(f"Unknown policy: {name!r}. Expected one of {sorted(_POLICIES)}") from exc
    return factory(seed)


def available_policies() -> list[str]:
    return sorted(_POLICIES)
