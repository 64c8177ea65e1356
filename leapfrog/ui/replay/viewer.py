#!/usr/bin/env python3
from __future__ import annotations
"""
LEAPFROG Replay — plays back frames recorded by the headless simulator.

Controls: [SPACE] pause/resume, [←/→] step while paused, [N] next run, [ESC] quit.

Requirements:
    pip install pygame
"""

import sys
from pathlib import Path

import pygame

from game_engine import FPS
from leapfrog.config.schema import Settings
from leapfrog.ui.game.render import C_DIM, WIDTH, HEIGHT, draw_overlay, draw_snapshot, load_fonts
from leapfrog.ui.replay.dto import ReplayBundle, ReplayRun
from leapfrog.ui.replay.serialization import load_replay

REPLAY_SPEED = 1  # recorded frames per display frame
FOOTER_H = 22


class ReplayCursor:
    """Position within one recorded run."""

    def __init__(self, run: ReplayRun):
        self.run = run
        self.index = 0
        self.paused = False

    @property
    def done(self) -> bool:
        return self.index >= len(self.run.frames) - 1

    def advance(self, n: int = REPLAY_SPEED) -> None:
        if not self.paused:
            self.seek(n)

    def seek(self, delta: int) -> None:
        last = max(0, len(self.run.frames) - 1)
        self.index = min(last, max(0, self.index + delta))

    def frame(self):
        return self.run.frames[self.index]


def run_viewer(bundle: ReplayBundle) -> None:
    runs = [r for r in bundle.runs if r.frames]
    if not runs:
        raise RuntimeError("replay contains no recorded frames")

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT + FOOTER_H))
    pygame.display.set_caption(f"LEAPFROG replay — {bundle.policy}")
    clock = pygame.time.Clock()
    fonts = load_fonts()

    run_idx = 0
    cursor = ReplayCursor(runs[run_idx])

    running = True
    while running:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    cursor.paused = not cursor.paused
                elif event.key == pygame.K_RIGHT and cursor.paused:
                    cursor.seek(1)
                elif event.key == pygame.K_LEFT and cursor.paused:
                    cursor.seek(-1)
                elif event.key == pygame.K_n:
                    run_idx = (run_idx + 1) % len(runs)
                    cursor = ReplayCursor(runs[run_idx])

        cursor.advance()

        frame = cursor.frame()
        screen.fill((0, 0, 0))
        draw_snapshot(screen, fonts["hud"], frame)
        if cursor.done:
            draw_overlay(screen, fonts["title"], fonts["sub"], "END OF RUN", f"seed {cursor.run.seed}  score {cursor.run.score}")

        info = f"tick {frame.get('tick', 0)}  decision {frame.get('decision') or '-'}"
        if cursor.paused:
            info += "  [paused]"
        t = fonts["sub"].render(info, True, C_DIM)
        screen.blit(t, (8, HEIGHT + FOOTER_H // 2 - t.get_height() // 2))

        pygame.display.flip()

    pygame.quit()


def run_from_settings(settings: Settings, path: Path | None = None) -> None:
    """Compatibility helper used by the package CLI."""
    path = Path(path) if path is not None else settings.paths.replay_json
    if not path.exists():
        raise RuntimeError(f"no replay at {path}; run `leapfrog simulate --save-replay` first")
    run_viewer(load_replay(path))


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("usage: viewer.py REPLAY_JSON")
        sys.exit(2)
    run_viewer(load_replay(Path(sys.argv[1])))
