"""
Pure game logic (no I/O, no randomness).
We compute two feedback numbers for each guess:
- exact: how many positions hold the right color (right color, right place)
- color_only: how many guess pegs have a color the code also has, but sit in
  the wrong place. Pegs already counted in exact are NOT counted again.

Duplicates are allowed in both code and guess.
"""

from typing import List

from .types import Code, Color, Score, CODE_LENGTH


def _check_lengths(code: Code, guess: Code) -> None:
    if len(code) != CODE_LENGTH or len(guess) != CODE_LENGTH:
        raise ValueError(
            f"Code and guess must both have exactly {CODE_LENGTH} colors "
            f"(got {len(code)} and {len(guess)})."
        )


def _tally(code: Code) -> List[int]:
    # counts[color] = how many times that color shows up in the code
    counts = [0] * len(Color)
    for color in code:
        counts[color] += 1
    return counts


def exact_matches(code: Code, guess: Code) -> int:
    """
    Example:
      code  = [Red, Blue, Blue, Blue]
      guess = [Red, Yellow, Yellow, Yellow]
      exact = 1  (only the first Red lines up)
    """
    _check_lengths(code, guess)

    exact = 0
    i = 0
    while i < CODE_LENGTH:
        if code[i] == guess[i]:
            exact += 1
        i += 1
    return exact


def color_matches(code: Code, guess: Code) -> int:
    """
    Right color, wrong position.

    Example:
      code  = [Blue, Red, Red, Red]
      guess = [Orange, Blue, Yellow, Red]
      shared colors = 2 (one Blue, one Red), exact = 1 (last Red)
      color_only = 2 - 1 = 1
    """
    _check_lengths(code, guess)

    code_counts = _tally(code)
    guess_counts = _tally(guess)

    # Overlap is the sum of the smaller count for each color.
    # Three Reds in the code and two in the guess only give 2.
    shared = 0
    for color in Color:
        shared += min(code_counts[color], guess_counts[color])

    # Exact matches are always part of the overlap, so this never goes negative
    return shared - exact_matches(code, guess)


def score_guess(code: Code, guess: Code) -> Score:
    """Both feedback numbers for one (code, guess) pair."""
    return Score(
        exact=exact_matches(code, guess),
        color_only=color_matches(code, guess),
    )


def is_win(code: Code, guess: Code) -> bool:
    """
    Win = all colors match in order.
    Wrong lengths are never a win.
    """
    if len(code) != CODE_LENGTH or len(guess) != CODE_LENGTH:
        return False
    return exact_matches(code, guess) == CODE_LENGTH
