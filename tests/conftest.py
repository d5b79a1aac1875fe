"""
- Short color names so test codes read like the board: R, O, Y, G, B, P
- A seeded random source so "random" tests are repeatable
- A game with a known secret
"""
import random
import pytest

from mastermind.types import Color
from mastermind.game import Game

R, O, Y, G, B, P = Color

@pytest.fixture
def rng():
    # Fixed seed: same draws every run
    return random.Random(1234)

@pytest.fixture
def game():
    """Secret is hardcoded so we know what outcome should be."""
    return Game(secret=(R, B, Y, P))
