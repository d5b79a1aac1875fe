"""
Testing random code generation.
"""

import random
import pytest

from mastermind.generator import generate_code
from mastermind.types import Color, CODE_LENGTH


def test_generate_code_is_always_valid():
    # Default source (OS entropy), many times
    for _ in range(25):
        code = generate_code()
        assert isinstance(code, tuple)
        assert len(code) == CODE_LENGTH
        assert all(isinstance(color, Color) for color in code)

def test_generate_code_is_repeatable_with_a_seed():
    first = generate_code(random.Random(42).randrange)
    second = generate_code(random.Random(42).randrange)
    assert first == second

def test_generate_code_uses_every_draw():
    draws = iter([5, 0, 3, 3])
    code = generate_code(lambda n: next(draws))
    assert code == (Color.PURPLE, Color.RED, Color.GREEN, Color.GREEN)

def test_generate_code_asks_for_the_whole_palette():
    seen = []

    def fake_randbelow(n):
        seen.append(n)
        return 0

    generate_code(fake_randbelow)
    assert seen == [len(Color)] * CODE_LENGTH

def test_generate_code_rejects_out_of_range_source():
    with pytest.raises(ValueError):
        generate_code(lambda n: n)
    with pytest.raises(ValueError):
        generate_code(lambda n: -1)
