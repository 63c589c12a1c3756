"""
Tests for main.py and the command-line tools.
"""

import argparse
import json
import sys
import os
from unittest.mock import patch

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from data_access import SqliteKeyValueStore
from domain import Coords, GameConfig
from main import run_simulation, main


def make_args(**overrides):
    params = {
        "ticks": 60,
        "player": "greedy",
        "seed": 11,
        "realtime": False,
        "show_board": False,
        "replay": None,
        "gif": None,
        "db": None,
        "in_memory": True,
        "owner": None,
    }
    params.update(overrides)
    return argparse.Namespace(**params)


class TestRunSimulation:
    """Tests for run_simulation()."""

    def test_runs_requested_ticks(self):
        result = run_simulation(make_args(), config=GameConfig())
        assert result["ticks"] == 60
        assert result["score"] >= 0
        assert result["high_score"] >= result["score"]
        assert result["length"] >= 5

    def test_greedy_player_eats_apples(self):
        result = run_simulation(make_args(ticks=200), config=GameConfig())
        assert result["apples_eaten"] > 0

    def test_score_consistent_with_apples_when_no_deaths(self):
        config = GameConfig(points_per_apple=10)
        result = run_simulation(make_args(ticks=40), config=config)
        if result["deaths"] == 0:
            assert result["score"] == result["apples_eaten"] * 10
            assert result["length"] == 5 + result["apples_eaten"]

    def test_writes_replay(self, tmp_path):
        replay = tmp_path / "replay.json"
        run_simulation(make_args(ticks=15, replay=str(replay)), config=GameConfig())

        with open(replay) as f:
            data = json.load(f)
        assert len(data["ticks"]) == 15
        assert data["metadata"]["ticks"] == 15

    def test_writes_gif(self, tmp_path):
        gif = tmp_path / "game.gif"
        config = GameConfig(grid_size=10, start_head=Coords(2, 2), apple_start=Coords(7, 7))
        run_simulation(make_args(ticks=5, gif=str(gif)), config=config)
        assert gif.exists()

    def test_high_score_banked_in_sqlite(self, tmp_path):
        db_path = str(tmp_path / "scores.db")
        result = run_simulation(
            make_args(ticks=200, in_memory=False, db=db_path, owner="dee"),
            config=GameConfig(),
        )

        store = SqliteKeyValueStore(db_path)
        assert int(store.get("highScore") or 0) == result["high_score"]
        if result["high_score"] > 0:
            assert store.get("highScoreOwner") == "dee"

    def test_show_board_prints_each_tick(self, capsys):
        run_simulation(make_args(ticks=2, show_board=True), config=GameConfig())
        out = capsys.readouterr().out
        assert "Tick 1" in out
        assert "Tick 2" in out


class TestMain:
    """Tests for the argparse entry point."""

    def test_main_prints_summary(self, capsys):
        result = main(["--ticks", "10", "--in-memory", "--seed", "3", "--player", "random"])
        assert result["ticks"] == 10
        assert "Simulation Result Summary" in capsys.readouterr().out

    def test_negative_ticks_rejected(self):
        with pytest.raises(ValueError):
            main(["--ticks", "-1", "--in-memory"])

    def test_unknown_player_rejected(self):
        with pytest.raises(SystemExit):
            main(["--player", "psychic", "--in-memory"])


class TestClearHighScore:
    """Tests for cli/clear_high_score.py."""

    def test_clear_with_confirm(self, tmp_path):
        from cli.clear_high_score import clear_high_score

        db_path = str(tmp_path / "scores.db")
        store = SqliteKeyValueStore(db_path)
        store.set("highScore", "42")
        store.set("highScoreOwner", "eve")

        assert clear_high_score(confirm=True, db_path=db_path) is True
        assert store.get("highScore") == "0"
        assert store.get("highScoreOwner") == ""

    def test_cancelled_without_confirmation(self, tmp_path):
        from cli.clear_high_score import clear_high_score

        db_path = str(tmp_path / "scores.db")
        store = SqliteKeyValueStore(db_path)
        store.set("highScore", "42")

        with patch("builtins.input", return_value="no"):
            assert clear_high_score(db_path=db_path) is False
        assert store.get("highScore") == "42"

    def test_confirmed_at_prompt(self, tmp_path):
        from cli.clear_high_score import clear_high_score

        db_path = str(tmp_path / "scores.db")
        SqliteKeyValueStore(db_path).set("highScore", "5")

        with patch("builtins.input", return_value="CLEAR"):
            assert clear_high_score(db_path=db_path) is True
        assert SqliteKeyValueStore(db_path).get("highScore") == "0"
