"""Command-line entry point: two players share one console."""

import argparse
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Dict, List, Optional

from .board import MARKS
from .game import DRAW_RESULT, Game, GameAborted, scripted_input

LOGGER_NAME = "tictactoe"
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(log_file: Optional[str] = None, level: str = "INFO") -> logging.Logger:
    """Send package logs to a rotating file, or warnings and up to stderr."""
    logger = logging.getLogger(LOGGER_NAME)
    # Fresh handlers on every call; a closed handler can block writes.
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    if log_file:
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        handler: logging.Handler = RotatingFileHandler(
            log_file, maxBytes=200_000, backupCount=3, encoding="utf-8", delay=True
        )
        logger.setLevel(getattr(logging, level))
    else:
        handler = logging.StreamHandler(sys.stderr)
        logger.setLevel(logging.WARNING)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def parse_moves(text: str) -> List[str]:
    return [part for part in text.replace(",", " ").split() if part]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Two-player Tic-Tac-Toe in the terminal.")
    parser.add_argument(
        "--moves",
        help="Play these 1-based positions (e.g. '1,4,2,5,3') instead of reading the console.",
    )
    parser.add_argument(
        "--output",
        choices=("text", "json"),
        default="text",
        help="Choose text (default) or json summary output after the game.",
    )
    parser.add_argument("--result-file", help="Optional path to write the summary JSON.")
    parser.add_argument(
        "--expect-winner",
        choices=MARKS + (DRAW_RESULT,),
        help="If set, exit non-zero unless the game ends this way.",
    )
    parser.add_argument("--log-file", help="Write a rotating debug log to this path.")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="INFO", help="Level for --log-file (default INFO).")
    return parser.parse_args(argv)


def write_summary(summary: Dict[str, object], result_file: Optional[str]) -> None:
    payload = json.dumps(summary, indent=2)
    print(payload)
    if result_file:
        try:
            os.makedirs(os.path.dirname(result_file) or ".", exist_ok=True)
            with open(result_file, "w", encoding="utf-8") as f:
                f.write(payload)
        except OSError as exc:
            print(f"Could not write result file: {exc}")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logger = configure_logging(args.log_file, args.log_level)
    prompt_fn = scripted_input(parse_moves(args.moves)) if args.moves is not None else input

    try:
        game = Game(prompt_fn)
        result = game.play()
    except MemoryError:
        logger.exception("Out of memory while building the board history")
        print("Critical error. Unable to allocate memory.", file=sys.stderr)
        return 1
    except GameAborted:
        print("Error occurred while trying to take input. Exiting.", file=sys.stderr)
        return 1

    if args.output == "json":
        write_summary(game.summary(), args.result_file)

    if args.expect_winner and result.winner != args.expect_winner:
        print(f"Expected winner {args.expect_winner}, but got {result.winner}.")
        raise SystemExit(1)
    return 0


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
