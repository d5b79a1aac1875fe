"""
Random secret codes.
Each peg is drawn on its own, uniformly from the 6 colors, so duplicates are allowed.

The random source is a randbelow(n)-style function (returns 0..n-1).
Default is secrets.randbelow (OS entropy, nothing to seed or share);
tests pass random.Random(seed).randrange to get a predictable code.
"""

import logging
from secrets import randbelow as system_randbelow
from typing import Callable, Optional

from .types import Code, Color, CODE_LENGTH

logger = logging.getLogger(__name__)

RandBelow = Callable[[int], int]


def generate_code(randbelow: Optional[RandBelow] = None) -> Code:
    if randbelow is None:
        randbelow = system_randbelow

    palette = list(Color)
    size = len(palette)

    pegs = []
    k = 0
    while k < CODE_LENGTH:
        index = randbelow(size)
        if index < 0 or index >= size:
            raise ValueError(f"Random source returned {index}, expected 0..{size - 1}.")
        pegs.append(palette[index])
        k += 1

    code = tuple(pegs)
    logger.debug("generated code %s", "".join(color.letter for color in code))
    return code
