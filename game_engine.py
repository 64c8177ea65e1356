"""
Pure game logic for LEAPFROG — no pygame dependency.
Used by the pygame app, the headless simulator and the replay tools.
"""

import math
import random
from collections import deque

# ─────────────────────────────────────────
# Grid
# ─────────────────────────────────────────
GRID_SIZE = 40
NUM_COLS = 11
NUM_ROWS = 11
CANVAS_WIDTH = NUM_COLS * GRID_SIZE
CANVAS_HEIGHT = NUM_ROWS * GRID_SIZE
FPS = 60

REFUGE_ROW = 0
WATER_ROWS = range(1, 5)
ROAD_ROWS = range(6, 10)

START_COL = NUM_COLS // 2
START_ROW = NUM_ROWS - 1

CAR_W = GRID_SIZE * 2
LOG_W = GRID_SIZE * 3
CAR_BASE_SPEED = 2.0
LOG_BASE_SPEED = 1.0

# ─────────────────────────────────────────
# Progress
# ─────────────────────────────────────────
START_LIVES = 4
REFUGE_COUNT = NUM_COLS // 3
REFUGE_SPAN = NUM_COLS // REFUGE_COUNT
REFUGE_POINTS = 100
LEVEL_BONUS = 500
MAX_MARKERS = 12

PLAYING = "playing"
GAME_OVER = "game_over"

VEHICLE = "vehicle"
FELL_OFF = "fell-off"
NO_SUPPORT = "no-support"
INVALID_REFUGE = "invalid-refuge"
CAUSES = (VEHICLE, FELL_OFF, NO_SUPPORT, INVALID_REFUGE)

DIRECTIONS = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}
RESTART = "restart"


def lane_kind(row):
    """Terrain class of a row: refuge, water, road or land."""
    if row == REFUGE_ROW:
        return "refuge"
    if is_water(row):
        return "water"
    if is_road(row):
        return "road"
    return "land"


def is_water(row):
    return row in WATER_ROWS


def is_road(row):
    return row in ROAD_ROWS


def cell_to_px(col):
    return col * GRID_SIZE


def px_to_cell(px):
    """Nearest column, halves rounding up."""
    return math.floor(px / GRID_SIZE + 0.5)


def refuge_index(col):
    """Map a column in the refuge row to its slot index (may be out of range)."""
    return col // REFUGE_SPAN


# ─────────────────────────────────────────
# Game objects
# ─────────────────────────────────────────

class Obstacle:
    def __init__(self, kind, row, x, width, speed):
        self.kind = kind
        self.row = row
        self.x = float(x)
        self.width = width
        self.speed = speed

    @property
    def direction(self):
        return 1 if self.speed >= 0 else -1

    def advance(self):
        """Move one tick and wrap around so the lane never empties."""
        self.x += self.speed
        if self.direction == 1 and self.x > CANVAS_WIDTH:
            self.x = float(-self.width)
        elif self.direction == -1 and self.x < -self.width:
            self.x = float(CANVAS_WIDTH)

    def overlaps(self, px, width=GRID_SIZE):
        return px < self.x + self.width and px + width > self.x

    def encode(self):
        return [self.row, self.x, self.width]


def build_obstacles(rng):
    """One car per road row and one log per water row, alternating direction."""
    cars = []
    for row in ROAD_ROWS:
        d = 1 if row % 2 == 0 else -1
        start_x = 0 if d == 1 else CANVAS_WIDTH - CAR_W
        cars.append(Obstacle("car", row, start_x, CAR_W, d * (CAR_BASE_SPEED + rng.random())))
    logs = []
    for row in WATER_ROWS:
        d = 1 if row % 2 == 0 else -1
        start_x = 0 if d == 1 else CANVAS_WIDTH - LOG_W
        logs.append(Obstacle("log", row, start_x, LOG_W, d * (LOG_BASE_SPEED + rng.random())))
    return cars, logs


class Player:
    def __init__(self):
        self.col = START_COL
        self.row = START_ROW
        self.px = float(cell_to_px(self.col))
        self.on_log = None

    def move(self, dcol, drow):
        """Hop one cell. Out-of-bounds hops are ignored; returns True if moved."""
        nc, nr = self.col + dcol, self.row + drow
        if not (0 <= nc < NUM_COLS and 0 <= nr < NUM_ROWS):
            return False
        self.col, self.row = nc, nr
        self.px = float(cell_to_px(nc))
        return True

    def reset(self):
        self.col = START_COL
        self.row = START_ROW
        self.px = float(cell_to_px(self.col))
        self.on_log = None

    def render_x(self):
        """Pixel x used for drawing: continuous on water, grid-snapped elsewhere."""
        if is_water(self.row):
            return self.px
        return float(cell_to_px(self.col))


class Marker:
    """Where and how the frog last died; presentation only."""

    def __init__(self, col, row, cause):
        self.col = col
        self.row = row
        self.cause = cause

    def encode(self):
        return [self.col, self.row, self.cause]


class GameState:
    def __init__(self, seed=None):
        self.seed = seed
        self.rng = random.Random(seed)
        self.player = Player()
        self.markers = deque(maxlen=MAX_MARKERS)
        self.pending = None
        self.reset_game()

    # ── Resets ──────────────────────────

    def reset_player(self):
        self.player.reset()

    def reset_level(self):
        self.refuges = [False] * REFUGE_COUNT

    def reset_game(self):
        self.cars, self.logs = build_obstacles(self.rng)
        self.markers.clear()
        self.pending = None
        self.score = 0
        self.level = 1
        self.lives = START_LIVES
        self.phase = PLAYING
        self.tick = 0
        self.refuges_filled = 0
        self.deaths = {cause: 0 for cause in CAUSES}
        self.reset_level()
        self.reset_player()

    @property
    def game_over(self):
        return self.phase == GAME_OVER

    def acknowledge_game_over(self):
        """Dismiss the game-over state and start over."""
        if self.game_over:
            self.reset_game()

    # ── Input ───────────────────────────

    def submit(self, intent):
        """Queue an intent for the next tick; a newer intent replaces an older one."""
        if intent != RESTART and intent not in DIRECTIONS:
            raise ValueError(f"Unknown intent: {intent!r}")
        self.pending = intent

    def apply(self, intent):
        if intent == RESTART:
            self.reset_player()
        elif intent in DIRECTIONS:
            self.move(*DIRECTIONS[intent])
        else:
            raise ValueError(f"Unknown intent: {intent!r}")

    def move(self, dcol, drow):
        if self.game_over:
            return False
        if not self.player.move(dcol, drow):
            return False
        if self.player.row == REFUGE_ROW:
            self._arrive_at_refuge()
        return True

    # ── Tick ────────────────────────────

    def step(self, intent=None):
        """Advance the game by one frame, consuming at most one intent."""
        if self.game_over:
            return
        if intent is None:
            intent = self.pending
        self.pending = None
        if intent is not None:
            self.apply(intent)
            if self.game_over:
                self.tick += 1
                return

        for o in self.cars:
            o.advance()
        for o in self.logs:
            o.advance()

        self._resolve_hazards()
        self.tick += 1

    def _resolve_hazards(self):
        p = self.player
        if self._struck_by_car():
            self._destroy(VEHICLE, px_to_cell(p.px))
            return

        if not is_water(p.row):
            p.on_log = None
            p.px = float(cell_to_px(p.col))
            return

        p.on_log = self._find_support()
        if p.on_log is None:
            self._destroy(NO_SUPPORT, px_to_cell(p.px))
            return

        p.px += p.on_log.speed
        if p.px < 0 or p.px + GRID_SIZE > CANVAS_WIDTH:
            self._destroy(FELL_OFF, px_to_cell(p.px))
            return
        p.col = px_to_cell(p.px)

    def _struck_by_car(self):
        p = self.player
        return any(c.row == p.row and c.overlaps(p.px) for c in self.cars)

    def _find_support(self):
        """First log on the player's row (in creation order) under the player."""
        p = self.player
        for log in self.logs:
            if log.row == p.row and log.overlaps(p.px):
                return log
        return None

    # ── Progress ────────────────────────

    def _arrive_at_refuge(self):
        idx = refuge_index(self.player.col)
        if 0 <= idx < REFUGE_COUNT and not self.refuges[idx]:
            self.refuges[idx] = True
            self.refuges_filled += 1
            self.score += REFUGE_POINTS
            self.reset_player()
            self._check_level_complete()
        else:
            self._destroy(INVALID_REFUGE, self.player.col)

    def _check_level_complete(self):
        if all(self.refuges):
            self.level += 1
            self.score += self.level * LEVEL_BONUS
            self.reset_level()
            self.reset_player()

    def _destroy(self, cause, col):
        self.markers.append(Marker(col, self.player.row, cause))
        self.deaths[cause] += 1
        self.lives -= 1
        self.reset_player()
        if self.lives <= 0:
            self.phase = GAME_OVER

    # ── Queries ─────────────────────────

    def is_cell_safe(self, col, row):
        """Whether the frog would survive standing in (col, row) right now."""
        if not (0 <= col < NUM_COLS and 0 <= row < NUM_ROWS):
            return False
        px = cell_to_px(col)
        kind = lane_kind(row)
        if kind == "road":
            return not any(c.row == row and c.overlaps(px) for c in self.cars)
        if kind == "water":
            return any(log.row == row and log.overlaps(px) for log in self.logs)
        if kind == "refuge":
            idx = refuge_index(col)
            return 0 <= idx < REFUGE_COUNT and not self.refuges[idx]
        return True

    def encode(self):
        """Encode current state as dict for rendering and replay."""
        p = self.player
        return {
            "tick": self.tick,
            "player": {
                "col": p.col,
                "row": p.row,
                "px": p.px,
                "render_x": p.render_x(),
                "on_log": p.on_log is not None,
            },
            "cars": [c.encode() for c in self.cars],
            "logs": [log.encode() for log in self.logs],
            "refuges": list(self.refuges),
            "markers": [m.encode() for m in self.markers],
            "score": self.score,
            "level": self.level,
            "lives": self.lives,
            "phase": self.phase,
        }
