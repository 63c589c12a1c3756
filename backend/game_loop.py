"""
Game loop controller.

Drives one GameSession from a tick scheduler. Every tick runs, in order:
  1) ask the player (if any) for a direction
  2) move the snake
  3) clear the render surface
  4) eat the apple if the head reached it (grow, score, new apple, faster timer)
  5) reset the snake if it bit itself (bank score, timer back to starting speed)
  6) append the head to the trail and trim it to length
  7) draw the snake and the apple
"""

import json
import logging
import os
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from domain.config import tick_interval_ms
from domain.constants import KEY_BINDINGS, VALID_MOVES, PAUSE, SUSPEND, SNAKE_COLOR, APPLE_COLOR
from domain.game_state import GameState
from domain.session import GameSession
from players.base import Player
from services.render_surface import NullRenderSurface, RenderSurface
from services.scheduler import Scheduler

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Manages:
      - the session being simulated
      - the tick scheduler and its interval
      - pause / suspend flags
      - an optional automated player
      - optional per-tick history for replays
    """

    def __init__(
        self,
        session: GameSession,
        scheduler: Scheduler,
        surface: Optional[RenderSurface] = None,
        player: Optional[Player] = None,
        record_history: bool = False,
        game_id: Optional[str] = None,
        on_tick: Optional[Callable[["GameLoop"], None]] = None,
    ):
        self.session = session
        self.scheduler = scheduler
        self.surface = surface if surface is not None else NullRenderSurface()
        self.player = player
        self.record_history = record_history
        self.on_tick = on_tick
        self.game_id = game_id or str(uuid.uuid4())

        self.paused = False
        self.suspended = False
        self.start_time: Optional[float] = None
        self.history: List[GameState] = []

    @property
    def tick_interval_ms(self) -> float:
        return tick_interval_ms(self.session.snake.speed)

    @property
    def running(self) -> bool:
        return self.scheduler.running

    def start(self):
        self.start_time = time.time()
        self.scheduler.start(self.tick, self.tick_interval_ms)
        logger.info("Game %s started at %.1f ms per tick", self.game_id, self.tick_interval_ms)

    def stop(self):
        self.scheduler.cancel()
        logger.info(
            "Game %s stopped after %d ticks", self.game_id, self.session.tick_number
        )

    def _rearm(self):
        if self.scheduler.running:
            self.scheduler.reschedule(self.tick_interval_ms)

    def snapshot(self) -> GameState:
        return self.session.snapshot(paused=self.paused, suspended=self.suspended)

    def tick(self):
        if self.paused or self.suspended:
            return

        session = self.session
        snake = session.snake
        apple = session.apple

        if self.player is not None:
            move = self.player.get_move(self.snapshot())
            if move is not None:
                snake.set_direction(move)

        snake.move()
        self.surface.clear()

        if snake.collides_with(apple.position):
            session.feed_snake()
            self._rearm()

        if snake.bites_itself():
            session.kill_snake()
            self._rearm()

        snake.append_trail_and_trim()

        for cell in snake.trail:
            self.surface.draw_cell(cell, SNAKE_COLOR)
        self.surface.draw_cell(apple.position, APPLE_COLOR)

        session.tick_number += 1
        if self.record_history:
            self.history.append(self.snapshot())
        if self.on_tick is not None:
            self.on_tick(self)

    def set_direction(self, direction: str) -> bool:
        """Direction input; ignored while paused or suspended."""
        if self.paused or self.suspended:
            return False
        return self.session.snake.set_direction(direction)

    def handle_key(self, code: str) -> bool:
        """
        Dispatch a key code from the input source.

        Returns:
            True if the key changed anything.
        """
        action = KEY_BINDINGS.get(code)
        if action == PAUSE:
            self.toggle_pause()
            return True
        if action == SUSPEND:
            self.toggle_suspended()
            return True
        if action in VALID_MOVES:
            return self.set_direction(action)
        return False

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        logger.info("Game %s", "paused" if self.paused else "resumed")
        return self.paused

    def toggle_suspended(self) -> bool:
        self.suspended = not self.suspended
        logger.info("Game %s", "suspended" if self.suspended else "unsuspended")
        return self.suspended

    def serialize_history(self) -> List[Dict[str, Any]]:
        return [state.to_dict() for state in self.history]

    def save_history_to_json(self, filename: Optional[str] = None) -> str:
        """
        Write the recorded ticks plus game metadata to a JSON replay file.

        Returns:
            The path written.
        """
        if filename is None:
            filename = os.path.join('completed_games', f"snake_game_{self.game_id}.json")

        session = self.session
        config = session.config
        started = self.start_time or time.time()

        metadata = {
            "game_id": self.game_id,
            "start_time": datetime.fromtimestamp(started, timezone.utc).isoformat(),
            "end_time": datetime.now(timezone.utc).isoformat(),
            "grid_size": config.grid_size,
            "starting_speed": config.starting_speed,
            "max_speed": config.max_speed,
            "points_per_apple": config.points_per_apple,
            "ticks": session.tick_number,
            "apples_eaten": session.apples_eaten,
            "deaths": session.deaths,
            "final_score": session.scoreboard.score,
            "high_score": session.scoreboard.high_score,
        }

        data = {
            "metadata": metadata,
            "ticks": self.serialize_history(),
        }

        directory = os.path.dirname(filename)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(filename, "w") as f:
            json.dump(data, f, indent=2)

        logger.info("Saved %d ticks of history to %s", len(self.history), filename)
        return filename
