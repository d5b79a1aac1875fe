"""
One game of Mastermind, held in memory.
States: "playing" -> "won". Once won, extra guesses are ignored.
"""

import logging
from dataclasses import dataclass, field
from time import time
from typing import List, Optional

from .types import Code, GameStatus
from .engine import score_guess, is_win
from .generator import RandBelow, generate_code
from .schemas import GuessResponse, RoundOut, code_names

logger = logging.getLogger(__name__)


@dataclass
class Round:
    guess: Code
    exact: int
    color_only: int
    message: str
    timestamp: float


@dataclass
class Game:
    secret: Code
    status: GameStatus = "playing"
    history: List[Round] = field(default_factory=list)
    created_at: float = field(default_factory=time)
    updated_at: float = field(default_factory=time)

    @property
    def attempts(self) -> int:
        return len(self.history)

    def guess(self, attempt: Code) -> "Game":
        if self.status != "playing":
            # Game already ended, just return it (ignore extra guesses)
            return self

        exact, color_only = score_guess(self.secret, attempt)

        # Build a message without revealing which pegs are correct
        if exact == 0 and color_only == 0:
            msg = "all incorrect"
        else:
            msg = f"{exact} right position(s) and {color_only} right color(s)"

        self.history.append(
            Round(
                guess=tuple(attempt),
                exact=exact,
                color_only=color_only,
                message=msg,
                timestamp=time(),
            )
        )
        logger.debug("round %d: exact=%d color_only=%d", self.attempts, exact, color_only)

        if is_win(self.secret, attempt):
            self.status = "won"
            logger.info("game won in %d guess(es)", self.attempts)

        self.updated_at = time()
        return self

    def reveal(self) -> Optional[Code]:
        """The secret, but only once it has been found."""
        if self.status == "won":
            return self.secret
        return None

    def response(self) -> GuessResponse:
        """What the player sees after the latest guess."""
        feedback = None
        if self.history:
            last = self.history[-1]
            feedback = RoundOut(
                guess=code_names(last.guess),
                exact=last.exact,
                color_only=last.color_only,
                message=last.message,
            )

        secret = self.reveal()
        return GuessResponse(
            status=self.status,
            attempts=self.attempts,
            feedback=feedback,
            secret=code_names(secret) if secret is not None else None,
            note="Game won. No more guesses allowed." if self.status == "won" else None,
        )


def new_game(randbelow: Optional[RandBelow] = None) -> Game:
    return Game(secret=generate_code(randbelow))
