"""Command-line interface: play Gomoku in the terminal."""

import argparse
import asyncio
import logging
import random
import re
from typing import Optional, Tuple
from .config import GameConfig, load_config
from .core.models import MoveOutcome
from .core.session import GameSession
from .exceptions import ConfigError
from .oracle import create_oracle
from .utils.visualization import BoardFormatter, create_formatter

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  <row> <col>   place a stone, e.g. "7 7" or "7,7"
  r, reset      start a new game
  ai            toggle the opponent between AI and human
  h, help       show this help
  q, quit       leave the game"""

_MOVE_PATTERN = re.compile(r"^\s*(\d+)\s*[,\s]\s*(\d+)\s*$")


def parse_move(text: str) -> Optional[Tuple[int, int]]:
    """Parse "row col" or "row,col"; None if the text is not a move."""
    match = _MOVE_PATTERN.match(text)
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(description="Zen Gomoku - five in a row against a human or an LLM")

    parser.add_argument("--config", metavar="PATH", help="JSON configuration file")
    parser.add_argument("--model", help="LLM model name (default: gpt-4o-mini)")
    parser.add_argument("--endpoint", help="OpenAI-compatible API base URL")
    parser.add_argument(
        "--ai-color",
        dest="oracle_player",
        choices=["black", "white"],
        help="Colour played by the AI (default: white)",
    )
    parser.add_argument(
        "--human",
        dest="ai_mode",
        action="store_false",
        default=None,
        help="Two human players, no AI opponent",
    )
    parser.add_argument("--think-delay", type=float, help="Seconds the AI pauses before asking the model (default: 0.6)")
    parser.add_argument("--seed", type=int, help="Seed for the random fallback move")
    parser.add_argument("--formatter", choices=["color", "simple"], default="color", help="Board renderer")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    return parser


def build_config(args) -> GameConfig:
    """Effective configuration: file and environment, then CLI flags."""
    config = load_config(args.config).with_overrides(
        model=args.model,
        endpoint=args.endpoint,
        oracle_player=args.oracle_player,
        ai_mode=args.ai_mode,
        think_delay=args.think_delay,
        seed=args.seed,
    )
    config.validate()
    return config


def build_session(config: GameConfig) -> GameSession:
    rng = random.Random(config.seed)
    return GameSession(
        oracle=create_oracle(config, rng=rng),
        ai_mode=config.ai_mode,
        oracle_player=config.oracle_color,
        rng=rng,
        think_delay=config.think_delay,
    )


async def _read_line(prompt: str) -> str:
    return await asyncio.to_thread(input, prompt)


async def run_game(session: GameSession, formatter: BoardFormatter):
    """Interactive loop. Input is read only while a human may act."""
    print(HELP_TEXT)
    session.start_oracle_turn()

    while True:
        # Let a freshly scheduled oracle task raise its thinking flag
        await asyncio.sleep(0)
        print()
        print(formatter.format_snapshot(session.snapshot()))

        task = session.oracle_task
        if task is not None:
            await task
            continue

        try:
            line = (await _read_line("> ")).strip().lower()
        except EOFError:
            return

        if line in ("q", "quit", "exit"):
            return
        if line in ("h", "help"):
            print(HELP_TEXT)
        elif line in ("r", "reset"):
            session.reset()
        elif line == "ai":
            if session.oracle is None:
                print("No AI opponent configured.")
            else:
                session.set_ai_mode(not session.ai_mode)
        else:
            move = parse_move(line)
            if move is None:
                print(f"Unrecognised input: {line!r}. Type 'h' for help.")
            elif session.submit_move(*move) == MoveOutcome.REJECTED:
                print(f"Move {move} is not allowed right now.")


async def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    try:
        config = build_config(args)
    except ConfigError as e:
        parser.error(str(e))

    session = build_session(config)
    logger.info(f"Starting game, AI {'on' if session.ai_mode else 'off'} as {session.oracle_player.name}")
    await run_game(session, create_formatter(args.formatter))


def run():
    """Console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
