"""Parse and roll ``AdX[+/-C]`` dice notation."""

from dicecore.dice import parse, roll, roll_with_rng, roll_with_seed
from dicecore.errors import (
    DiceError,
    InvalidDieSizeError,
    InvalidFormatError,
    InvalidQuantityError,
    NumericOverflowError,
    QuantityLimitExceededError,
)
from dicecore.models import RollResult

__all__ = [
    "DiceError",
    "InvalidDieSizeError",
    "InvalidFormatError",
    "InvalidQuantityError",
    "NumericOverflowError",
    "QuantityLimitExceededError",
    "RollResult",
    "parse",
    "roll",
    "roll_with_rng",
    "roll_with_seed",
]
