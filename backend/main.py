import argparse
import json
import logging
from typing import Dict, Optional

from dotenv import load_dotenv

from data_access import InMemoryKeyValueStore, SqliteKeyValueStore
from domain.config import GameConfig
from domain.session import GameSession
from game_loop import GameLoop
from players import get_player_class, AVAILABLE_VARIANTS
from services.image_renderer import ImageRenderSurface
from services.render_surface import TextRenderSurface
from services.scheduler import IntervalScheduler, ManualScheduler

load_dotenv()

LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


def _print_score(score: int, high_score: int):
    print(f"Score: {score}    Highest score: {high_score}")


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(game_params: argparse.Namespace, config: Optional[GameConfig] = None) -> Dict:
    """
    Runs a single snake game with an automated player.

    Args:
        game_params: An object (like argparse.Namespace) containing run settings
                     (ticks, player, seed, realtime, show_board, replay, gif, db, in_memory, owner).
        config: Board and pacing settings; read from the environment when omitted.

    Returns:
        A dictionary summarizing the run.
    """
    config = config or GameConfig.from_env()

    if getattr(game_params, 'in_memory', False):
        store = InMemoryKeyValueStore()
    else:
        store = SqliteKeyValueStore(getattr(game_params, 'db', None))

    owner = getattr(game_params, 'owner', None)
    show_board = getattr(game_params, 'show_board', False)

    session = GameSession.create(
        store,
        config=config,
        seed=game_params.seed,
        on_score_change=_print_score if show_board else None,
        owner_prompt=(lambda score: owner) if owner else None,
    )

    player_class = get_player_class(game_params.player)
    player = player_class(seed=game_params.seed)

    gif_path = getattr(game_params, 'gif', None)
    if gif_path:
        surface = ImageRenderSurface(config.grid_size, keep_frames=True)
    else:
        surface = TextRenderSurface(config.grid_size)

    realtime = getattr(game_params, 'realtime', False)
    scheduler = IntervalScheduler() if realtime else ManualScheduler()

    def show(game_loop: GameLoop):
        print(f"\nTick {session.tick_number}")
        if isinstance(surface, TextRenderSurface):
            print(surface.render())
        else:
            print(game_loop.snapshot().print_board())

    loop = GameLoop(
        session,
        scheduler,
        surface=surface,
        player=player,
        record_history=bool(getattr(game_params, 'replay', None)),
        on_tick=show if show_board else None,
    )

    loop.start()

    if realtime:
        scheduler.run_forever(stop_condition=lambda: session.tick_number >= game_params.ticks)
    else:
        while session.tick_number < game_params.ticks:
            scheduler.fire()

    loop.stop()
    logger.info(
        "Run finished: %d apples eaten, %d deaths, score %d",
        session.apples_eaten, session.deaths, session.scoreboard.score,
    )

    # The run ends like a death: bank whatever is on the board
    session.scoreboard.save_high_score()

    if getattr(game_params, 'replay', None):
        loop.save_history_to_json(game_params.replay)
    if gif_path:
        surface.save_gif(gif_path, fps=config.starting_speed)

    return {
        "game_id": loop.game_id,
        "ticks": session.tick_number,
        "score": session.scoreboard.score,
        "high_score": session.scoreboard.high_score,
        "high_score_owner": session.scoreboard.high_score_owner,
        "length": session.snake.length,
        "speed": round(session.snake.speed, 2),
        "apples_eaten": session.apples_eaten,
        "deaths": session.deaths,
    }


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Run a headless snake game driven by an automated player."
    )
    parser.add_argument("--ticks", type=int, required=False, default=500,
                        help="Number of ticks to simulate")
    parser.add_argument("--player", type=str, required=False, default="greedy",
                        choices=AVAILABLE_VARIANTS,
                        help="Automated player variant")
    parser.add_argument("--seed", type=int, required=False, default=None,
                        help="Random seed for apples and the player")
    parser.add_argument("--realtime", action="store_true",
                        help="Tick on the wall clock at the snake's speed instead of as fast as possible")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the board after every tick")
    parser.add_argument("--replay", type=str, required=False, default=None,
                        help="Write a JSON replay of every tick to this path")
    parser.add_argument("--gif", type=str, required=False, default=None,
                        help="Render the game to an animated GIF at this path")
    parser.add_argument("--db", type=str, required=False, default=None,
                        help="SQLite file for the high score (default: SNAKE_DB_PATH or backend/snake_arcade.db)")
    parser.add_argument("--in-memory", action="store_true",
                        help="Keep the high score in memory only")
    parser.add_argument("--owner", type=str, required=False, default=None,
                        help="Name recorded with a new high score")

    args = parser.parse_args(argv)

    if args.ticks < 0:
        raise ValueError("--ticks must not be negative")

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    result = run_simulation(args)

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
