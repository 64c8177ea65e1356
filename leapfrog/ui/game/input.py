from __future__ import annotations

"""Keyboard and swipe input, translated into engine intents."""

import pygame

from game_engine import RESTART

KEY_INTENTS = {
    pygame.K_UP: "up",
    pygame.K_w: "up",
    pygame.K_DOWN: "down",
    pygame.K_s: "down",
    pygame.K_LEFT: "left",
    pygame.K_a: "left",
    pygame.K_RIGHT: "right",
    pygame.K_d: "right",
    pygame.K_RETURN: RESTART,
    pygame.K_KP_ENTER: RESTART,
}


def intent_for_key(key: int) -> str | None:
    return KEY_INTENTS.get(key)


def classify_swipe(dx: float, dy: float, min_distance: float = 0) -> str | None:
    """Resolve a drag into a direction: the longer axis wins, its sign picks the way."""
    if max(abs(dx), abs(dy)) < min_distance:
        return None
    if abs(dx) > abs(dy):
        return "right" if dx > 0 else "left"
    return "down" if dy > 0 else "up"


class SwipeTracker:
    """Turns mouse/finger press-release pairs into swipe intents."""

    def __init__(self, min_distance: float = 0):
        self.min_distance = min_distance
        self.start: tuple[float, float] | None = None

    def press(self, pos) -> None:
        self.start = (float(pos[0]), float(pos[1]))

    def release(self, pos) -> str | None:
        if self.start is None:
            return None
        sx, sy = self.start
        self.start = None
        return classify_swipe(pos[0] - sx, pos[1] - sy, self.min_distance)
