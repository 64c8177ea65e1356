"""Shared configuration for LEAPFROG tooling."""
from pathlib import Path
import multiprocessing as _mp

from game_engine import FPS, GRID_SIZE, NUM_COLS, NUM_ROWS, START_LIVES

# Directories
PROJECT_DIR = Path(__file__).parent
DATA_DIR = PROJECT_DIR / "data"
RESULTS_DIR = PROJECT_DIR / "results"

# Create directories
for d in [DATA_DIR, RESULTS_DIR]:
    d.mkdir(exist_ok=True)

# Game settings come from the canonical headless engine constants to avoid drift.

# Presentation settings
GAME_OVER_DELAY = 36  # frames (~0.6 s at 60 fps) before the game-over dialog
SWIPE_MIN_DISTANCE = 12

# Simulation settings
POLICY = "cautious"
SIMS_PER_POLICY = 20
SIM_WORKERS = max(2, _mp.cpu_count() - 2)
BATCH_SIZE = 10
MAX_TICKS = 12_000  # ~3 minutes at 60 fps

# File paths
REPLAY_JSON = DATA_DIR / "replay.json"
RESULTS_JSON = RESULTS_DIR / "results.json"
