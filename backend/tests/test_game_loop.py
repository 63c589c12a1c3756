"""
Tests for game_loop.py - the tick-driven controller.

All tests run on a ManualScheduler so timing is deterministic.
"""

import json
import sqlite3
import sys
import os

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from data_access import InMemoryKeyValueStore
from domain import Coords, GameConfig, GameSession, UP, DOWN, LEFT, RIGHT
from domain.constants import SNAKE_COLOR, APPLE_COLOR
from domain.snake import DIED
from game_loop import GameLoop
from players import KeyboardPlayer
from services.render_surface import NullRenderSurface
from services.scheduler import ManualScheduler


class LockedStore(InMemoryKeyValueStore):
    """Readable store whose writes always fail."""

    def set(self, key, value):
        raise sqlite3.OperationalError("database is locked")


def make_loop(store=None, config=None, **kwargs):
    session = GameSession.create(store or InMemoryKeyValueStore(), config=config, seed=42)
    scheduler = ManualScheduler()
    loop = GameLoop(session, scheduler, **kwargs)
    loop.start()
    return loop, session, scheduler


class TestLoopTiming:
    """Tests for timer arming and re-arming."""

    def test_start_arms_timer_at_starting_speed(self):
        loop, session, scheduler = make_loop()
        assert scheduler.interval_ms == pytest.approx(125.0)
        assert loop.tick_interval_ms == pytest.approx(125.0)

    def test_ticks_fire_once_per_interval(self):
        loop, session, scheduler = make_loop()
        fired = scheduler.advance(1000)
        assert fired == 8
        assert session.tick_number == 8

    def test_pause_suppresses_ticks_but_timer_keeps_firing(self):
        loop, session, scheduler = make_loop()
        loop.set_direction(RIGHT)
        loop.toggle_pause()

        scheduler.advance(500)

        assert scheduler.ticks_fired == 4
        assert session.tick_number == 0
        assert session.snake.head == Coords(10, 10)

        loop.toggle_pause()
        scheduler.fire()
        assert session.tick_number == 1

    def test_suspended_loop_does_nothing(self):
        loop, session, scheduler = make_loop()
        loop.toggle_suspended()
        scheduler.advance(250)
        assert session.tick_number == 0
        assert loop.set_direction(UP) is False

    def test_stop_cancels_timer(self):
        loop, session, scheduler = make_loop()
        loop.stop()
        assert scheduler.advance(1000) == 0
        assert not loop.running


class TestLoopInput:
    """Tests for key handling through the loop."""

    def test_arrow_key_turns_snake(self):
        loop, session, scheduler = make_loop()
        assert loop.handle_key("ArrowRight") is True
        scheduler.fire()
        assert session.snake.head == Coords(11, 10)

    def test_only_first_turn_per_tick_applies(self):
        loop, session, scheduler = make_loop()
        loop.handle_key("ArrowUp")
        assert loop.handle_key("ArrowLeft") is False
        scheduler.fire()
        assert session.snake.head == Coords(10, 9)

        assert loop.handle_key("ArrowLeft") is True
        scheduler.fire()
        assert session.snake.head == Coords(9, 9)

    def test_control_keys(self):
        loop, session, scheduler = make_loop()
        assert loop.handle_key("Space") is True
        assert loop.paused is True
        assert loop.handle_key("KeyP") is True
        assert loop.paused is False
        assert loop.handle_key("KeyB") is True
        assert loop.suspended is True

    def test_unbound_key_is_ignored(self):
        loop, session, scheduler = make_loop()
        assert loop.handle_key("KeyZ") is False
        assert session.snake.has_changed_direction is False

    def test_player_is_polled_each_tick(self):
        player = KeyboardPlayer(["ArrowRight", "ArrowDown"])
        loop, session, scheduler = make_loop(player=player)

        scheduler.fire()
        assert session.snake.head == Coords(11, 10)
        scheduler.fire()
        assert session.snake.head == Coords(11, 11)
        scheduler.fire()
        assert session.snake.head == Coords(11, 12)


class TestLoopScenarios:
    """End-to-end tick sequences."""

    def test_wraps_after_twenty_moves_right(self):
        loop, session, scheduler = make_loop()
        loop.set_direction(RIGHT)
        scheduler.fire()
        assert session.snake.head == Coords(11, 10)

        for _ in range(19):
            scheduler.fire()
        assert session.snake.head == Coords(0, 10)

    def test_eating_apple_grows_speeds_up_and_scores(self):
        """Reaching the apple at (15,15) grows the snake and re-arms the timer."""
        refreshes = []
        session = GameSession.create(
            InMemoryKeyValueStore(),
            seed=3,
            on_score_change=lambda score, high: refreshes.append(score),
        )
        scheduler = ManualScheduler()
        loop = GameLoop(session, scheduler)
        loop.start()

        loop.set_direction(RIGHT)
        for _ in range(5):
            scheduler.fire()
        loop.set_direction(DOWN)
        for _ in range(4):
            scheduler.fire()
        assert session.snake.length == 5

        scheduler.fire()

        assert session.snake.head == Coords(15, 15)
        assert session.snake.length == 6
        assert session.snake.speed == pytest.approx(8.4)
        assert session.scoreboard.score == 1
        assert refreshes == [1]
        assert session.apples_eaten == 1
        assert scheduler.history[-1] == pytest.approx(1000 / 8.4)
        assert not session.snake.collides_with(session.apple.position)

    def test_points_per_apple_is_configurable(self):
        config = GameConfig(points_per_apple=10, apple_start=Coords(11, 10))
        loop, session, scheduler = make_loop(config=config)
        loop.set_direction(RIGHT)
        scheduler.fire()
        assert session.scoreboard.score == 10

    def test_self_collision_resets_snake_and_banks_score(self):
        """A tight loop bites the trail: length and score reset, high score banked."""
        store = InMemoryKeyValueStore()
        config = GameConfig(apple_start=Coords(11, 10))
        loop, session, scheduler = make_loop(store=store, config=config)

        loop.handle_key("ArrowRight")
        scheduler.fire()
        assert session.scoreboard.score == 1
        assert session.snake.length == 6
        session.apple.position = Coords(0, 0)

        for key in ("ArrowDown", "ArrowLeft", "ArrowUp"):
            loop.handle_key(key)
            scheduler.fire()
        assert session.deaths == 0

        loop.handle_key("ArrowRight")
        scheduler.fire()

        snake = session.snake
        assert session.deaths == 1
        assert snake.last_event == DIED
        assert snake.length == 5
        assert snake.speed == 8
        assert snake.head == Coords(10, 10)
        assert snake.direction == "NONE"
        assert list(snake.trail) == [Coords(10, 10)]
        assert session.scoreboard.score == 0
        assert session.scoreboard.high_score == 1
        assert store.get("highScore") == "1"
        assert scheduler.history[-1] == pytest.approx(125.0)

    def test_death_with_failing_store_still_resets(self):
        """A high score that cannot be written does not stop the reset."""
        config = GameConfig(apple_start=Coords(11, 10))
        loop, session, scheduler = make_loop(store=LockedStore(), config=config)

        loop.set_direction(RIGHT)
        scheduler.fire()
        session.apple.position = Coords(0, 0)
        for direction in (DOWN, LEFT, UP, RIGHT):
            loop.set_direction(direction)
            scheduler.fire()

        snake = session.snake
        assert session.deaths == 1
        assert session.tick_number == 5
        assert session.scoreboard.score == 0
        assert session.scoreboard.high_score == 1
        assert session.scoreboard.store.get("highScore") is None
        assert snake.length == 5
        assert snake.head == Coords(10, 10)
        assert list(snake.trail) == [Coords(10, 10)]
        assert scheduler.history[-1] == pytest.approx(125.0)

        scheduler.fire()
        assert session.tick_number == 6

    def test_apple_on_start_cell_moves_after_death(self):
        """The restarted snake does not eat an apple waiting on its start cell."""
        config = GameConfig(apple_start=Coords(11, 10))
        loop, session, scheduler = make_loop(config=config)

        loop.set_direction(RIGHT)
        scheduler.fire()
        session.apple.position = Coords(10, 10)
        for direction in (RIGHT, DOWN, LEFT, UP):
            loop.set_direction(direction)
            scheduler.fire()

        assert session.deaths == 1
        assert session.snake.head == Coords(10, 10)
        assert session.apple.position != Coords(10, 10)
        assert not session.snake.collides_with(session.apple.position)

        scheduler.fire()
        assert session.apples_eaten == 1
        assert session.scoreboard.score == 0
        assert session.snake.length == 5

    def test_death_keeps_better_existing_high_score(self):
        store = InMemoryKeyValueStore({"highScore": "30"})
        config = GameConfig(apple_start=Coords(11, 10))
        loop, session, scheduler = make_loop(store=store, config=config)

        loop.set_direction(RIGHT)
        scheduler.fire()
        session.apple.position = Coords(0, 0)
        for direction in (DOWN, LEFT, UP, RIGHT):
            loop.set_direction(direction)
            scheduler.fire()

        assert session.deaths == 1
        assert session.scoreboard.high_score == 30
        assert store.get("highScore") == "30"

    def test_stationary_snake_survives(self):
        loop, session, scheduler = make_loop()
        scheduler.advance(1000)
        assert session.deaths == 0
        assert session.snake.head == Coords(10, 10)

    def test_trail_bounded_by_length_every_tick(self):
        loop, session, scheduler = make_loop(player=None)
        loop.set_direction(DOWN)
        for _ in range(40):
            scheduler.fire()
            assert len(session.snake.trail) <= session.snake.length

    def test_sessions_are_independent(self):
        loop_a, session_a, scheduler_a = make_loop()
        loop_b, session_b, scheduler_b = make_loop()

        loop_a.set_direction(LEFT)
        scheduler_a.advance(500)

        assert session_a.snake.head == Coords(6, 10)
        assert session_b.snake.head == Coords(10, 10)
        assert session_b.tick_number == 0


class TestLoopOutput:
    """Tests for rendering and history recording."""

    def test_tick_clears_then_draws_snake_and_apple(self):
        surface = NullRenderSurface()
        loop, session, scheduler = make_loop(surface=surface)
        loop.set_direction(RIGHT)
        scheduler.fire()
        scheduler.fire()

        assert surface.clears == 2
        assert surface.cells == [
            (Coords(11, 10), SNAKE_COLOR),
            (Coords(12, 10), SNAKE_COLOR),
            (Coords(15, 15), APPLE_COLOR),
        ]

    def test_on_tick_hook_runs_after_each_tick(self):
        seen = []
        loop, session, scheduler = make_loop(on_tick=lambda game: seen.append(game.session.tick_number))
        scheduler.advance(375)
        assert seen == [1, 2, 3]

    def test_history_is_saved_to_json(self, tmp_path):
        loop, session, scheduler = make_loop(record_history=True, game_id="game-1")
        loop.set_direction(RIGHT)
        scheduler.advance(250)

        path = loop.save_history_to_json(str(tmp_path / "replays" / "game.json"))

        with open(path) as f:
            data = json.load(f)
        assert data["metadata"]["game_id"] == "game-1"
        assert data["metadata"]["ticks"] == 2
        assert [t["head"] for t in data["ticks"]] == [[11, 10], [12, 10]]
