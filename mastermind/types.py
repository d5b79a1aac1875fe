"""
Labels for clarity.
Everything about the board is fixed: 4 pegs, 6 colors.
"""

from enum import IntEnum
from typing import Literal, NamedTuple, Tuple

CODE_LENGTH = 4  # pegs per code


class Color(IntEnum):
    RED = 0
    ORANGE = 1
    YELLOW = 2
    GREEN = 3
    BLUE = 4
    PURPLE = 5

    @property
    def letter(self) -> str:
        # R, O, Y, G, B, P
        return self.name[0]

    @property
    def label(self) -> str:
        return self.name.title()


Code = Tuple[Color, ...]  # always CODE_LENGTH long
GameStatus = Literal["playing", "won"]

# Input letter -> color, ex. "R" -> Color.RED
LETTERS = {color.letter: color for color in Color}


class Score(NamedTuple):
    exact: int       # right color, right position
    color_only: int  # right color, wrong position
