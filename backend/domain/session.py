"""
GameSession - everything one running game owns.

Each session carries its own snake, apple, scoreboard and random source,
so several games can be simulated side by side in one process.
"""

import logging
import random
from typing import Any, Callable, Optional

from .apple import Apple
from .config import GameConfig
from .game_state import GameState
from .scoreboard import Scoreboard
from .snake import Snake, DIED

logger = logging.getLogger(__name__)


class GameSession:
    def __init__(
        self,
        config: GameConfig,
        snake: Snake,
        apple: Apple,
        scoreboard: Scoreboard,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.snake = snake
        self.apple = apple
        self.scoreboard = scoreboard
        self.rng = rng or random.Random()
        self.tick_number = 0
        self.apples_eaten = 0
        self.deaths = 0

    @classmethod
    def create(
        cls,
        store: Any,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        on_score_change: Optional[Callable[[int, int], None]] = None,
        owner_prompt: Optional[Callable[[int], Optional[str]]] = None,
    ) -> "GameSession":
        config = config or GameConfig()
        scoreboard = Scoreboard(
            store,
            points_per_apple=config.points_per_apple,
            on_change=on_score_change,
            owner_prompt=owner_prompt,
        )
        return cls(
            config=config,
            snake=Snake(config),
            apple=Apple(config.apple_start),
            scoreboard=scoreboard,
            rng=random.Random(seed),
        )

    def feed_snake(self):
        """Grow the snake, score the apple and put a new one on a free cell."""
        self.snake.grow()
        self.scoreboard.increase_score()
        self.apples_eaten += 1
        self.apple.replace(self.snake.occupied_cells(), self.config.grid_size, self.rng)
        logger.debug("Apple eaten at tick %d, next apple at %s", self.tick_number, self.apple.position)

    def kill_snake(self):
        """Bank the score and restart the snake from scratch."""
        logger.info(
            "Snake bit itself at %s on tick %d with score %d",
            self.snake.head, self.tick_number, self.scoreboard.score,
        )
        self.deaths += 1
        self.scoreboard.reset()
        self.snake.reset()
        self.snake.last_event = DIED
        # The restarted snake must not find the apple under its head
        if self.snake.collides_with(self.apple.position):
            self.apple.replace(self.snake.occupied_cells(), self.config.grid_size, self.rng)

    def snapshot(self, paused: bool = False, suspended: bool = False) -> GameState:
        return GameState(
            tick_number=self.tick_number,
            head=self.snake.head,
            trail=list(self.snake.trail),
            direction=self.snake.direction,
            apple=self.apple.position,
            length=self.snake.length,
            speed=self.snake.speed,
            score=self.scoreboard.score,
            high_score=self.scoreboard.high_score,
            grid_size=self.config.grid_size,
            paused=paused,
            suspended=suspended,
        )
