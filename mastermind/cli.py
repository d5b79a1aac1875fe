"""
Terminal Mastermind (thin glue around the game).

Run:
  mastermind                 (or: python -m mastermind.cli)
  mastermind --seed 7        same secret every time
  mastermind --verbose       debug logging

Type 4 letters per guess: R O Y G B P (Red, Orange, Yellow, Green, Blue, Purple).
Shortcuts:
  quit / q / exit  -> leave without finishing
"""

import argparse
import logging
import random
from typing import Callable, List, Optional

from pydantic import ValidationError

from .game import Game, new_game
from .schemas import GuessRequest

logger = logging.getLogger(__name__)

QUIT_WORDS = {"q", "quit", "exit"}


def _first_error(exc: ValidationError) -> str:
    msg = exc.errors()[0]["msg"]
    # pydantic prefixes our own ValueError messages
    return msg.removeprefix("Value error, ")


def play(
    game: Game,
    read: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
) -> bool:
    """
    Runs the guess loop until the code is broken.
    read/write default to input()/print().
    Returns True on a win, False if the player quit (or input ran out).
    """
    read = read or input
    write = write or print

    write("Welcome To Mastermind!")

    while game.status == "playing":
        try:
            text = read("Please Enter Your Guess: ")
        except EOFError:
            logger.debug("input closed after %d guess(es)", game.attempts)
            return False

        if text.strip().lower() in QUIT_WORDS:
            write("bye!")
            return False

        try:
            request = GuessRequest(guess=text)
        except ValidationError as exc:
            write("Invalid guess: " + _first_error(exc))
            continue

        feedback = game.guess(request.to_code()).response().feedback
        write(f"Right Color Wrong Position: {feedback.color_only}")
        write(f"Right Color Right Position: {feedback.exact}")

    secret = game.response().secret
    write(f"You win! The code was {' '.join(secret)}.")
    return True


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Play Mastermind: break a 4-color code.")
    ap.add_argument("--seed", type=int, default=None, help="Seed for a reproducible secret code")
    ap.add_argument("--verbose", action="store_true", help="Print debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    randbelow = None
    if args.seed is not None:
        randbelow = random.Random(args.seed).randrange

    play(new_game(randbelow))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
