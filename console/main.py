"""Main entry point for the terminal Race to 21 game."""

import argparse
import logging
import sys
from random import Random

from config import config
from console.table import ConsoleCardTable
from core.game import SessionController

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Race to 21 at the terminal.")
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        default=config.game.seed,
        help="seed for shuffling and seating order (default: random)",
    )
    parser.add_argument(
        "--log-level",
        default=config.logging.level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="logging verbosity (default: %(default)s)",
    )
    parser.add_argument(
        "--show-deck",
        action="store_true",
        default=config.game.show_deck,
        help="log the deck order after every shuffle (needs --log-level DEBUG)",
    )
    parser.add_argument(
        "--max-players",
        type=int,
        default=config.game.max_players,
        help="largest number of players allowed at the table (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format=config.logging.format)

    table = ConsoleCardTable(max_players=args.max_players)
    controller = SessionController(
        table=table,
        rng=Random(args.seed),
        show_deck=args.show_deck,
    )
    logger.debug("Starting session with seed %s", args.seed)

    try:
        summary = controller.run()
    except KeyboardInterrupt:
        print()
        return 130
    except EOFError:
        # Input closed: treat it as everyone leaving
        print()
        logger.info("Input closed after %d rounds", controller.rounds_played)
        return 0

    print(f"Thanks for playing! {summary.rounds_played} round(s) played.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
