"""Main entry point for the console blackjack game."""

import argparse
import logging
import sys
from random import Random
from typing import TextIO

from blackjack.errors import EmptyDeck, InvalidArgument, ResourceExhausted
from blackjack.game import BlackjackGame
from blackjack.scoring import RoundResult
from config import AppConfig
from console_ui.prompts import InputFn, ask_action, ask_replay
from console_ui.renderer import ConsoleRenderer

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _non_negative_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {value}")
    return value


def build_parser(settings: AppConfig | None = None) -> argparse.ArgumentParser:
    """Build the command line parser; defaults come from the environment."""
    settings = settings or AppConfig()
    parser = argparse.ArgumentParser(
        prog="blackjack",
        description="Play Blackjack against the dealer at the console.",
    )
    parser.add_argument(
        "--packs",
        type=_positive_int,
        default=settings.game.num_packs,
        help="number of 52-card packs in the shoe (default: %(default)s)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.game.seed,
        help="seed for the shuffle, for repeatable games",
    )
    parser.add_argument(
        "--pause",
        type=_non_negative_float,
        default=settings.game.dealer_pause,
        help="seconds to pause between dealer hits (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=LOG_LEVELS,
        type=str.upper,
        help="logging level (default: %(default)s)",
    )
    parser.add_argument(
        "--show-shoe",
        action="store_true",
        default=settings.debug,
        help="print the shuffled shoe at the start of each round",
    )
    return parser


def play_round(game: BlackjackGame, input_fn: InputFn = input) -> RoundResult | None:
    """Deal a round and feed the player's actions in until it is resolved."""
    game.start_round()
    while not game.is_round_over:
        game.act(ask_action(input_fn))
    return game.result


def run(game: BlackjackGame, input_fn: InputFn = input) -> None:
    """Play rounds until the player declines another."""
    while True:
        try:
            result = play_round(game, input_fn)
        except EmptyDeck:
            logger.info("Round %d abandoned: shoe exhausted", game.rounds_played)
        else:
            if result is not None:
                logger.debug(
                    "Round %d: %s (player %s, dealer %s)",
                    game.rounds_played,
                    result.outcome,
                    result.player_score,
                    result.dealer_score,
                )
        if not ask_replay(input_fn):
            return


def _check_args(args: argparse.Namespace) -> None:
    """
    Re-check values argparse took from the environment without converting.

    Raises:
        InvalidArgument: If a default from the environment is out of range
    """
    if args.log_level not in LOG_LEVELS:
        raise InvalidArgument(f"unknown log level {args.log_level!r}")
    if args.packs < 1:
        raise InvalidArgument(f"the shoe needs at least 1 pack, got {args.packs}")
    if args.pause < 0:
        raise InvalidArgument(f"the dealer pause must not be negative, got {args.pause}")


def _invalid_configuration(exc: Exception) -> int:
    logging.basicConfig(format=LOG_FORMAT)
    logger.error("Invalid configuration: %s", exc)
    return 1


def main(
    argv: list[str] | None = None,
    input_fn: InputFn = input,
    out: TextIO | None = None,
) -> int:
    """Run the game and return the process exit status."""
    try:
        settings = AppConfig()
    except ValueError as exc:
        return _invalid_configuration(exc)

    args = build_parser(settings).parse_args(argv)
    out = out or sys.stdout

    try:
        _check_args(args)
    except InvalidArgument as exc:
        return _invalid_configuration(exc)

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)
    logger.debug("Starting with %d packs, seed %s", args.packs, args.seed)

    game = BlackjackGame(
        packs=args.packs,
        rng=Random(args.seed),
        dealer_stands_on=settings.game.dealer_stands_on,
    )
    ConsoleRenderer(game, out=out, pause=args.pause, show_shoe=args.show_shoe).attach()

    try:
        run(game, input_fn)
    except (EOFError, KeyboardInterrupt):
        out.write("\n")
    except ResourceExhausted as exc:
        logger.error("Cannot continue the game: %s", exc)
        return 1

    logger.info("Played %d round(s)", game.rounds_played)
    return 0


if __name__ == "__main__":
    sys.exit(main())
