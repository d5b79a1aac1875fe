"""
Explicit validation & Pydantic models
- GuessRequest turns raw player input ("RBYP") into a Code, or fails with a
  readable message.
- RoundOut / GuessResponse describe what the player gets back each round.
"""

from typing import List, Literal
from pydantic import BaseModel, Field, field_validator, model_validator

from .types import Code, Color, CODE_LENGTH, LETTERS

ALLOWED_LETTERS = ", ".join(LETTERS)


def code_names(code: Code) -> List[str]:
    return [Color(color).label for color in code]


def render_code(code: Code) -> str:
    """Human-readable code, ex. 'Red Blue Yellow Purple'."""
    return " ".join(code_names(code))


# 1. Validates player's guess
class GuessRequest(BaseModel):
    guess: List[Color] = Field(
        ..., description=f"Exactly {CODE_LENGTH} colors, ex. 'RBYP' (letters {ALLOWED_LETTERS})."
    )

    @field_validator("guess", mode="before")
    @classmethod
    def parse_letters(cls, value):
        """
        Letters are the first letter of each color name.
        Case does not matter and spaces are ignored: 'r b y p' == 'RBYP'.
        Lists of Colors (or their numbers 0..5) pass straight through.
        """
        if not isinstance(value, str):
            return value

        text = "".join(value.split()).upper()
        colors = []
        for letter in text:
            if letter not in LETTERS:
                raise ValueError(f"Unknown color '{letter}'. Allowed: {ALLOWED_LETTERS}.")
            colors.append(LETTERS[letter])
        return colors

    @field_validator("guess")
    @classmethod
    def check_length(cls, guess_list: List[Color]) -> List[Color]:
        if len(guess_list) != CODE_LENGTH:
            raise ValueError(f"Guess must have exactly {CODE_LENGTH} colors, got {len(guess_list)}.")
        return guess_list

    def to_code(self) -> Code:
        return tuple(self.guess)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"guess": "RBYP"},
                {"guess": [0, 4, 2, 5]},
            ]
        }
    }


# 2. Feedback for a single guess
class RoundOut(BaseModel):
    guess: List[str] = Field(..., description="The player's guess as color names")
    exact: int = Field(..., ge=0, le=CODE_LENGTH, description="Right color, right position")
    color_only: int = Field(..., ge=0, le=CODE_LENGTH, description="Right color, wrong position")
    message: str = Field(..., description="Feedback message")

    @model_validator(mode="after")
    def check_total(self) -> "RoundOut":
        # A peg is never counted twice
        if self.exact + self.color_only > CODE_LENGTH:
            raise ValueError(f"exact + color_only cannot exceed {CODE_LENGTH}.")
        return self


# 3. Result of a guess (or end of the game)
class GuessResponse(BaseModel):
    status: Literal["playing", "won"] = Field(..., description="Current state of the game")
    attempts: int = Field(..., description="How many guesses have been scored")
    feedback: RoundOut | None = Field(None, description="Feedback from the latest guess")
    secret: List[str] | None = Field(None, description="The secret code (only revealed once won)")
    note: str | None = Field(None, description="Extra note (ex. 'Game won. No more guesses.')")
