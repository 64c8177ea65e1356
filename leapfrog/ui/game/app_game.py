#!/usr/bin/env python3
from __future__ import annotations
"""
LEAPFROG — cross the road, ride the logs, fill every refuge.

Requirements:
    pip install pygame
"""

import sys

import pygame

import config
from game_engine import GameState, FPS
from leapfrog.config.schema import Settings
from leapfrog.ui.game.input import SwipeTracker, intent_for_key
from leapfrog.ui.game.render import (
    WIDTH,
    HEIGHT,
    draw_overlay,
    draw_snapshot,
    load_fonts,
)

# ─────────────────────────────────────────
# Main
# ─────────────────────────────────────────

def main(seed=None, game_over_delay=config.GAME_OVER_DELAY, swipe_min_distance=config.SWIPE_MIN_DISTANCE):
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("LEAPFROG")
    clock = pygame.time.Clock()
    fonts = load_fonts()

    game = GameState(seed=seed)
    swipe = SwipeTracker(min_distance=swipe_min_distance)
    best = 0
    over_frames = 0  # frames spent in game over, for the dialog delay

    pygame.key.set_repeat(0, 0)

    while True:
        clock.tick(FPS)
        dialog_up = game.game_over and over_frames >= game_over_delay

        # ── Events ──────────────────────
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    pygame.quit(); sys.exit()
                if dialog_up:
                    game.acknowledge_game_over()
                    over_frames = 0
                    continue
                intent = intent_for_key(event.key)
                if intent is not None:
                    game.submit(intent)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                swipe.press(event.pos)
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                intent = swipe.release(event.pos)
                if dialog_up:
                    game.acknowledge_game_over()
                    over_frames = 0
                elif intent is not None:
                    game.submit(intent)

        # ── Update ──────────────────────
        if game.game_over:
            over_frames += 1
        else:
            game.step()
            if game.game_over:
                best = max(best, game.score)

        # ── Draw ────────────────────────
        draw_snapshot(screen, fonts["hud"], game.encode())

        if game.game_over and over_frames >= game_over_delay:
            sub = f"score {game.score}  best {best}  -  press any key"
            draw_overlay(screen, fonts["title"], fonts["sub"], "GAME OVER", sub)

        pygame.display.flip()


def run_from_settings(settings: Settings) -> None:
    """Entry point used by the package CLI."""
    main(
        seed=settings.seed,
        game_over_delay=settings.game_over_delay,
        swipe_min_distance=settings.swipe_min_distance,
    )


if __name__ == "__main__":
    main()
