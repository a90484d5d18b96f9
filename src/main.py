"""
Terminal Snake: frame loop and command-line entry point.

Each frame the loop samples the input source until the frame deadline,
keeping only the latest direction, then advances the board exactly once
and hands a snapshot to the renderer. The loop ends when the board reaches
GAME_OVER.
"""

import argparse
import curses
import dataclasses
import logging
import random
import sys
import time
from typing import Callable, Optional

from dotenv import load_dotenv

from config import GameSettings, get_settings
from domain import Board, BoardSnapshot, BoardState, FOOD_MARGIN, InvalidGameStateError, KEYMAPS
from players import KeyboardPlayer, Player, RandomPlayer
from services.renderer import CursesRenderer, Renderer, TextRenderer
from services.terminal import setup_window

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


# -------------------------------
# Frame Loop
# -------------------------------

def capture_controls(
    board: Board,
    player: Player,
    deadline: float,
    poll_interval: float,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep
) -> None:
    """
    Poll the player until the deadline, applying every direction it returns.

    Later directions overwrite earlier ones, so only the most recent control
    of the window is used by the next move.
    """
    snapshot = board.snapshot()
    while clock() < deadline:
        control = player.get_control(snapshot)
        if control is not None:
            board.change_control(control)
            snapshot = board.snapshot()
            continue

        remaining = deadline - clock()
        if remaining > 0:
            sleep(min(poll_interval, remaining))


def run_game(
    board: Board,
    player: Player,
    renderer: Renderer,
    frame_interval: float,
    poll_interval: float,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
    max_frames: Optional[int] = None
) -> BoardSnapshot:
    """
    Drive the board at a fixed cadence until the game is over.

    Args:
        board: The board to advance, owned by this loop for the whole run.
        player: Input source polled during every frame window.
        renderer: Receives a snapshot after every transition.
        frame_interval: Seconds per frame.
        poll_interval: Seconds to idle between polls that yield no input.
        clock, sleep: Time sources, injectable for tests.
        max_frames: Optional upper limit on the number of frames.

    Returns:
        The snapshot of the board after the last frame.
    """
    if frame_interval <= 0 or poll_interval <= 0:
        raise ValueError("frame_interval and poll_interval must be positive")

    logger.info(
        f"Starting game on a {board.width}x{board.height} board "
        f"({frame_interval * 1000:.0f} ms per frame)"
    )

    frames = 0
    snapshot = board.snapshot()
    while True:
        deadline = clock() + frame_interval
        capture_controls(board, player, deadline, poll_interval, clock, sleep)

        board.update()
        snapshot = board.snapshot()
        renderer.draw(snapshot)
        frames += 1

        if snapshot.state is BoardState.GAME_OVER:
            logger.info(f"Game over after {frames} frames, final length {len(snapshot.snake)}")
            break
        if max_frames is not None and frames >= max_frames:
            logger.info(f"Stopping after {frames} frames (frame limit reached)")
            break

    return snapshot


# -------------------------------
# Game Setup
# -------------------------------

def configure_logging(level: str, log_file: Optional[str] = None):
    """Configure root logging; curses games should log to a file."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        filename=log_file,
    )


def build_board(settings: GameSettings, seed: Optional[int] = None) -> Board:
    rng = random.Random(seed) if seed is not None else None
    return Board(settings.width, settings.height, rng=rng)


def run_interactive(settings: GameSettings, autopilot: bool = False,
                    seed: Optional[int] = None) -> BoardSnapshot:
    """Play in the terminal using curses."""
    board = build_board(settings, seed)

    def _play(stdscr):
        window = setup_window(stdscr)
        if autopilot:
            player = RandomPlayer(random.Random(seed) if seed is not None else None)
        else:
            player = KeyboardPlayer(window, settings.keymap)
        return run_game(
            board,
            player,
            CursesRenderer(window),
            frame_interval=settings.speed_ms / 1000,
            poll_interval=settings.poll_ms / 1000,
        )

    return curses.wrapper(_play)


def run_headless(settings: GameSettings, seed: Optional[int] = None,
                 max_frames: Optional[int] = None, stream=None) -> BoardSnapshot:
    """Let the autopilot play and print every frame as text."""
    board = build_board(settings, seed)
    player = RandomPlayer(random.Random(seed) if seed is not None else None)
    return run_game(
        board,
        player,
        TextRenderer(stream),
        frame_interval=settings.speed_ms / 1000,
        poll_interval=settings.poll_ms / 1000,
        max_frames=max_frames,
    )


# -------------------------------
# Main Entry Point
# -------------------------------

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play Snake in the terminal. Steer with w/a/s/d or i/j/k/l."
    )
    parser.add_argument("--width", type=int, default=None,
                        help="Board width in cells (default: SNAKE_BOARD_WIDTH or 78)")
    parser.add_argument("--height", type=int, default=None,
                        help="Board height in cells (default: SNAKE_BOARD_HEIGHT or 24)")
    parser.add_argument("--speed-ms", type=int, default=None,
                        help="Milliseconds per frame (default: SNAKE_GAME_SPEED_MS or 100)")
    parser.add_argument("--poll-ms", type=int, default=None,
                        help="Milliseconds between input polls (default: SNAKE_INPUT_POLL_MS or 10)")
    parser.add_argument("--keymap", choices=sorted(KEYMAPS), default=None,
                        help="Key bindings: 'full' (wasd + ijkl) or 'wasd'")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and the autopilot")
    parser.add_argument("--autopilot", action="store_true",
                        help="Let the random autopilot steer instead of the keyboard")
    parser.add_argument("--headless", action="store_true",
                        help="Run the autopilot without curses, printing frames to stdout")
    parser.add_argument("--max-frames", type=int, default=None,
                        help="Stop a headless run after this many frames")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level (default: SNAKE_LOG_LEVEL or WARNING)")
    parser.add_argument("--log-file", type=str, default=None,
                        help="Write logs to this file (default: SNAKE_LOG_FILE or stderr)")
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> GameSettings:
    """Environment settings overridden by any flags given on the command line."""
    settings = get_settings()
    overrides = {
        "width": args.width,
        "height": args.height,
        "speed_ms": args.speed_ms,
        "poll_ms": args.poll_ms,
        "keymap": args.keymap,
        "log_level": args.log_level.upper() if args.log_level else None,
        "log_file": args.log_file,
    }
    settings = dataclasses.replace(
        settings, **{key: value for key, value in overrides.items() if value is not None}
    )
    if settings.speed_ms <= 0 or settings.poll_ms <= 0:
        raise ValueError("--speed-ms and --poll-ms must be positive")
    if settings.width <= 2 * FOOD_MARGIN or settings.height <= 2 * FOOD_MARGIN:
        raise ValueError(
            f"Board {settings.width}x{settings.height} is too small, "
            f"width and height must exceed {2 * FOOD_MARGIN}"
        )
    if not isinstance(logging.getLevelName(settings.log_level), int):
        raise ValueError(f"Unknown log level {settings.log_level!r}")
    return settings


def main(argv=None):
    load_dotenv()
    args = parse_args(argv)

    try:
        settings = resolve_settings(args)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(2)

    configure_logging(settings.log_level, settings.log_file)

    try:
        if args.headless:
            final = run_headless(settings, seed=args.seed, max_frames=args.max_frames)
        else:
            final = run_interactive(settings, autopilot=args.autopilot, seed=args.seed)
    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        return
    except InvalidGameStateError as e:
        logger.error(f"Internal error, aborting game: {e}", exc_info=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)

    if final.state is BoardState.GAME_OVER:
        print(f"Game over, final length {len(final.snake)}")
    else:
        print(f"Stopped, length {len(final.snake)}")


if __name__ == "__main__":
    main()
