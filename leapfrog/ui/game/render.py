from __future__ import annotations

"""pygame drawing for LEAPFROG; reads only GameState.encode() snapshots."""

import pygame

from game_engine import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    FELL_OFF,
    GRID_SIZE,
    NO_SUPPORT,
    NUM_ROWS,
    REFUGE_COUNT,
    REFUGE_ROW,
    REFUGE_SPAN,
    lane_kind,
)

HUD_H = 36
WIDTH, HEIGHT = CANVAS_WIDTH, CANVAS_HEIGHT + HUD_H

C_BG = (10, 10, 16)
C_LAND = (126, 217, 87)
C_ROAD = (40, 40, 52)
C_STRIPE = (90, 90, 110)
C_WATER = (30, 90, 200)
C_REFUGE_ROW = (20, 60, 140)
C_SLOT_OPEN = (255, 255, 0)
C_SLOT_TAKEN = (0, 255, 0)
C_CAR = (221, 17, 17)
C_LOG = (150, 75, 0)
C_LOG_GRAIN = (110, 55, 0)
C_FROG = (0, 200, 60)
C_FROG_EYE = (255, 255, 255)
C_DEAD = (180, 30, 30)
C_SKULL = (235, 235, 235)
C_WHITE = (255, 255, 255)
C_DIM = (160, 160, 180)

LANE_COLORS = {
    "refuge": C_REFUGE_ROW,
    "water": C_WATER,
    "road": C_ROAD,
    "land": C_LAND,
}


def draw_background(surf) -> None:
    """Paint every lane by terrain and the dashed road dividers."""
    surf.fill(C_BG)
    for row in range(NUM_ROWS):
        y = row * GRID_SIZE
        kind = lane_kind(row)
        pygame.draw.rect(surf, LANE_COLORS[kind], (0, y, CANVAS_WIDTH, GRID_SIZE))
        if kind == "road" and lane_kind(row + 1) == "road":
            for x in range(0, CANVAS_WIDTH, GRID_SIZE):
                pygame.draw.rect(surf, C_STRIPE, (x + 8, y + GRID_SIZE - 2, GRID_SIZE // 2, 3))


def draw_refuges(surf, refuges) -> None:
    for i in range(REFUGE_COUNT):
        x = (i * REFUGE_SPAN + 1) * GRID_SIZE
        color = C_SLOT_TAKEN if refuges[i] else C_SLOT_OPEN
        pygame.draw.rect(surf, color, (x, REFUGE_ROW * GRID_SIZE, int(GRID_SIZE * 0.8), GRID_SIZE))


def draw_car(surf, row, x, width) -> None:
    y = row * GRID_SIZE
    pygame.draw.rect(surf, C_CAR, (int(x), y + 4, width, GRID_SIZE - 8), border_radius=6)
    pygame.draw.rect(surf, (35, 8, 8), (int(x) + width // 4, y + 8, width // 2, GRID_SIZE - 16), border_radius=3)


def draw_log(surf, row, x, width) -> None:
    y = row * GRID_SIZE
    pygame.draw.rect(surf, C_LOG, (int(x), y + 3, width, GRID_SIZE - 6), border_radius=10)
    for gx in range(int(x) + 12, int(x) + width - 6, 18):
        pygame.draw.line(surf, C_LOG_GRAIN, (gx, y + 10), (gx + 6, y + GRID_SIZE - 10), 2)


def draw_marker(surf, col, row, cause) -> None:
    cx = col * GRID_SIZE + GRID_SIZE // 2
    cy = row * GRID_SIZE + GRID_SIZE // 2
    if cause in (FELL_OFF, NO_SUPPORT):
        pygame.draw.circle(surf, C_SKULL, (cx, cy - 3), GRID_SIZE // 4)
        pygame.draw.rect(surf, C_SKULL, (cx - 6, cy + 3, 12, 8))
        pygame.draw.circle(surf, C_BG, (cx - 4, cy - 4), 3)
        pygame.draw.circle(surf, C_BG, (cx + 4, cy - 4), 3)
    else:
        pygame.draw.line(surf, C_DEAD, (cx - 10, cy - 10), (cx + 10, cy + 10), 4)
        pygame.draw.line(surf, C_DEAD, (cx - 10, cy + 10), (cx + 10, cy - 10), 4)


def draw_frog(surf, x, row) -> None:
    rx, ry = int(x), row * GRID_SIZE
    pygame.draw.ellipse(surf, C_FROG, (rx + 4, ry + 6, GRID_SIZE - 8, GRID_SIZE - 10))
    pygame.draw.circle(surf, C_FROG_EYE, (rx + 13, ry + 10), 4)
    pygame.draw.circle(surf, C_FROG_EYE, (rx + GRID_SIZE - 13, ry + 10), 4)


def draw_hud(surf, font, snapshot) -> None:
    y = CANVAS_HEIGHT
    pygame.draw.rect(surf, C_BG, (0, y, WIDTH, HUD_H))
    parts = [
        f"SCORE {snapshot['score']}",
        f"LEVEL {snapshot['level']}",
        f"LIVES {snapshot['lives']}",
    ]
    slot_w = WIDTH // len(parts)
    for i, text in enumerate(parts):
        t = font.render(text, True, C_WHITE)
        surf.blit(t, (i * slot_w + slot_w // 2 - t.get_width() // 2, y + HUD_H // 2 - t.get_height() // 2))


def draw_snapshot(surf, font, snapshot) -> None:
    """Draw a full frame from an encoded game state."""
    draw_background(surf)
    draw_refuges(surf, snapshot["refuges"])
    for row, x, width in snapshot["cars"]:
        draw_car(surf, row, x, width)
    for row, x, width in snapshot["logs"]:
        draw_log(surf, row, x, width)
    for col, row, cause in snapshot["markers"]:
        draw_marker(surf, col, row, cause)
    player = snapshot["player"]
    draw_frog(surf, player["render_x"], player["row"])
    draw_hud(surf, font, snapshot)


def draw_overlay(surf, title_font, sub_font, title, subtitle=None) -> None:
    dim = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    dim.fill((0, 0, 0, 155))
    surf.blit(dim, (0, 0))
    t = title_font.render(title, True, C_WHITE)
    surf.blit(t, (WIDTH // 2 - t.get_width() // 2, HEIGHT // 2 - 50))
    if subtitle:
        s = sub_font.render(subtitle, True, C_DIM)
        surf.blit(s, (WIDTH // 2 - s.get_width() // 2, HEIGHT // 2 + 10))


def load_fonts() -> dict[str, "pygame.font.Font"]:
    try:
        return {
            "hud": pygame.font.SysFont("Courier New", 18, bold=True),
            "title": pygame.font.SysFont("Courier New", 40, bold=True),
            "sub": pygame.font.SysFont("Courier New", 15),
        }
    except Exception:
        return {
            "hud": pygame.font.SysFont(None, 18),
            "title": pygame.font.SysFont(None, 40),
            "sub": pygame.font.SysFont(None, 15),
        }
