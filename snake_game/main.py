import argparse
import curses
import json
import logging
import random
import sys
import time
from typing import Dict, Optional

from domain.phase import LevelTransition
from errors import GameError
from game import GameState
from players import Player, RandomPlayer
from settings import GameConfig, load_config
from ui import InputAction, InputHandler, Renderer

logger = logging.getLogger(__name__)

FRAME_INTERVAL = 0.033  # ~30 FPS
LOOP_SLEEP = 0.01
AUTOPILOT_CONTINUE_DELAY = 1.5
DEFAULT_MAX_TICKS = 10_000
GAME_OVER_PAUSE = 1.0
KEY_WAIT_INTERVAL = 0.1


# -------------------------------
# Terminal Game Loop
# -------------------------------

def run_game(stdscr, config: GameConfig, player: Optional[Player] = None,
             rng: Optional[random.Random] = None) -> GameState:
    """
    Run one interactive game inside a curses window.

    Input is polled without blocking every loop iteration. The game ticks
    whenever the current tick interval has elapsed (it shrinks as the snake
    eats) and the screen is redrawn at a fixed frame rate. With a ``player``
    the snake steers itself and level transitions continue on their own.

    Once the game is over the final screen stays up until a key is pressed
    after it appeared; keys typed before that are discarded.

    Returns the final GameState.
    """
    game = GameState(config, logger=logging.getLogger("game"), rng=rng)
    renderer = Renderer(stdscr, config.width, config.height)
    input_handler = InputHandler(stdscr)
    renderer.init()
    renderer.render(game.get_current_state())

    last_tick = time.monotonic()
    last_render = last_tick
    transition_started: Optional[float] = None

    while not game.is_game_over:
        event = input_handler.get_input()
        if event is not None:
            if event.action == InputAction.QUIT:
                logger.info("Player quit at level %s with score %s", game.current_level, game.score)
                return game
            if event.action == InputAction.TURN:
                game.change_direction(event.direction)
            elif event.action == InputAction.CONTINUE:
                game.start_next_level()

        now = time.monotonic()

        if player is not None and isinstance(game.phase, LevelTransition):
            if transition_started is None:
                transition_started = now
            if now - transition_started >= AUTOPILOT_CONTINUE_DELAY:
                game.start_next_level()
                transition_started = None

        if (now - last_tick) * 1000 >= game.get_tick_rate():
            if player is not None:
                move = player.get_move(game.get_current_state())
                if move is not None:
                    game.change_direction(move)
            game.update()
            last_tick = now

        if now - last_render >= FRAME_INTERVAL:
            renderer.render(game.get_current_state())
            last_render = now

        time.sleep(LOOP_SLEEP)

    renderer.render(game.get_current_state())
    time.sleep(GAME_OVER_PAUSE)
    input_handler.discard_pending()
    while not input_handler.key_pressed():
        time.sleep(KEY_WAIT_INTERVAL)

    logger.info("Leaving game at level %s with score %s", game.current_level, game.score)
    return game


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(config: GameConfig, player: Player, max_ticks: int = DEFAULT_MAX_TICKS,
                   rng: Optional[random.Random] = None) -> Dict:
    """
    Runs a single game without a terminal, steered by ``player``.

    Level transitions are continued immediately. The run stops at game over
    or after ``max_ticks`` updates.

    Returns:
        A dictionary summarizing the game (score, level, phase, reason, ticks).
    """
    game = GameState(config, logger=logging.getLogger("game"), rng=rng)
    ticks = 0

    while not game.is_game_over and ticks < max_ticks:
        if game.start_next_level():
            continue
        move = player.get_move(game.get_current_state())
        if move is not None:
            game.change_direction(move)
        game.update()
        ticks += 1

    final_state = game.get_current_state()
    logger.info("Simulation finished after %s ticks: %r", ticks, final_state)
    state = final_state.as_dict()

    return {
        "score": state["score"],
        "level": state["level"],
        "phase": state["phase"],
        "reason": state["reason"],
        "ticks": ticks,
    }


def setup_logging(level: str, log_file: Optional[str]) -> None:
    """Log to a file; the terminal belongs to curses while the game runs."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        filename=log_file,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play Snake in the terminal: clear each level's score target to advance."
    )
    parser.add_argument("--config", type=str, default=None,
                        help="Path to a YAML config file (default: config/default.yaml)")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: INFO)")
    parser.add_argument("--log-file", type=str, default="snake_game.log",
                        help="File to write logs to (default: snake_game.log)")
    parser.add_argument("--autopilot", action="store_true",
                        help="Let a random player steer the snake")
    parser.add_argument("--headless", action="store_true",
                        help="Run an autopilot game without a terminal and print a JSON summary")
    parser.add_argument("--max-ticks", type=int, default=DEFAULT_MAX_TICKS,
                        help=f"Tick limit for --headless runs (default: {DEFAULT_MAX_TICKS})")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for food placement and the autopilot")
    return parser


# -------------------------------
# Main Entry Point
# -------------------------------
def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        config = load_config(args.config)
    except GameError as e:
        logger.error("Invalid configuration: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    rng = random.Random(args.seed)
    player = RandomPlayer(random.Random(args.seed)) if (args.autopilot or args.headless) else None

    try:
        if args.headless:
            result = run_simulation(config, player, max_ticks=args.max_ticks, rng=rng)
            print(json.dumps(result, indent=2))
            return 0

        game = curses.wrapper(run_game, config, player, rng)
    except GameError as e:
        logger.error("Game aborted: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Final score: {game.score} (level {game.current_level} of {game.max_levels})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
