"""Public entry points: parse, validate and roll dice notation.

Supports standard notation: XdY, XdY+Z, XdY-Z.
Examples: 2d6, d20, 3d10 + 2, 2d6-1.
"""

from __future__ import annotations

import random

from dicecore.engine import roll_request, seeded_rng, system_rng
from dicecore.models import RollResult, ValidatedRequest
from dicecore.parser import parse_expression
from dicecore.validator import validate


def parse(expression: str) -> ValidatedRequest:
    """Parse and validate dice notation without rolling.

    Args:
        expression: Dice notation string, e.g. "2d6+3".

    Returns:
        ValidatedRequest with the quantity default applied.

    Raises:
        DiceError: If the notation is invalid or out of range.
    """
    return validate(parse_expression(expression))


def roll(expression: str) -> RollResult:
    """Roll dice described by notation using OS entropy.

    Args:
        expression: Dice notation string, e.g. "2d6+3".

    Returns:
        RollResult with each die in roll order and the total.

    Raises:
        DiceError: If the notation is invalid.
    """
    return roll_request(parse(expression), system_rng())


def roll_with_seed(expression: str, seed: bytes | bytearray) -> RollResult:
    """Roll dice deterministically from a 32-byte seed.

    The same expression and seed always give the same dice and total.

    Raises:
        ValueError: If the seed is not 32 bytes. Checked before the notation.
        DiceError: If the notation is invalid.
    """
    rng = seeded_rng(seed)
    return roll_request(parse(expression), rng)


def roll_with_rng(expression: str, rng: random.Random) -> RollResult:
    """Roll dice using a caller-owned generator.

    The generator's state advances by the draws made; share one between
    threads only with external locking.
    """
    return roll_request(parse(expression), rng)
