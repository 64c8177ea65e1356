"""Tests for input mapping, CLI parsing and settings."""

import argparse
import inspect
import sys
from pathlib import Path

import pygame

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import config
from leapfrog.config.loader import load_settings
from leapfrog.core.results import save_result_json
from leapfrog.ui.game import app_game
from leapfrog.ui.cli import commands
from leapfrog.ui.cli.main import build_parser
from leapfrog.ui.game.input import SwipeTracker, classify_swipe, intent_for_key


class TestInput:
    def test_keys(self):
        assert intent_for_key(pygame.K_UP) == "up"
        assert intent_for_key(pygame.K_a) == "left"
        assert intent_for_key(pygame.K_RETURN) == "restart"
        assert intent_for_key(pygame.K_q) is None

    def test_swipe_larger_axis_wins(self):
        assert classify_swipe(30, 10) == "right"
        assert classify_swipe(-30, 10) == "left"
        assert classify_swipe(5, 40) == "down"
        assert classify_swipe(5, -40) == "up"

    def test_short_drag_ignored(self):
        assert classify_swipe(3, 2, min_distance=12) is None

    def test_tracker(self):
        t = SwipeTracker(min_distance=12)
        assert t.release((0, 0)) is None
        t.press((100, 100))
        assert t.release((100, 60)) == "up"


class TestCli:
    def test_simulate_args(self):
        args = build_parser().parse_args(["simulate", "--policy", "idle", "--sims", "3", "--save-replay"])
        assert args.func is commands.cmd_simulate
        assert args.policy == "idle"
        assert args.sims == 3
        assert args.save_replay is True

    def test_replay_path_optional(self):
        args = build_parser().parse_args(["replay"])
        assert args.path is None
        assert args.func is commands.cmd_replay

    def test_replay_rejects_summary_file(self, tmp_path, capsys):
        path = save_result_json(tmp_path / "results.json", {"avg_score": 0.0})
        commands.cmd_replay(argparse.Namespace(path=str(path)))
        out = capsys.readouterr().out
        assert out.startswith("[replay]")
        assert "expected a replay file" in out

    def test_replay_missing_file(self, tmp_path, capsys):
        commands.cmd_replay(argparse.Namespace(path=str(tmp_path / "nope.json")))
        assert "[replay] no replay at" in capsys.readouterr().out


class TestSettings:
    def test_overrides(self):
        settings = load_settings(policy="random", sims=4, seed=10)
        assert settings.policy == "random"
        assert settings.sims_per_policy == 4
        assert settings.seed == 10
        assert settings.paths.results_dir.exists()


class TestAppDefaults:
    def test_defaults_come_from_config(self):
        params = inspect.signature(app_game.main).parameters
        assert params["game_over_delay"].default == config.GAME_OVER_DELAY
        assert params["swipe_min_distance"].default == config.SWIPE_MIN_DISTANCE
