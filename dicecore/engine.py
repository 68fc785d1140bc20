"""Roll engine: randomness sources and die sampling.

Seeded generator
----------------
Seeded rolls use ``random.Random`` (MT19937) seeded with the 32 seed bytes
read as one big-endian integer. Integer seeds go straight into MT19937's
``init_by_array`` with no hashing, so the same bytes give the same stream on
every platform.

Sampling
--------
A die with N sides draws ``getrandbits(N.bit_length())`` and retries while
the draw is >= N, then adds one. Rejection keeps every face equally likely;
calling ``getrandbits`` directly keeps the mapping from generator output to
faces fixed here rather than in ``randint``.

Changing either rule changes every seeded result, including the pinned
values in tests/test_engine.py.
"""

from __future__ import annotations

import logging
import random

from dicecore.models import RollResult, ValidatedRequest

logger = logging.getLogger(__name__)

SEED_LENGTH = 32


def seeded_rng(seed: bytes | bytearray) -> random.Random:
    """Return a deterministic generator for a 32-byte seed.

    Raises:
        ValueError: If the seed is not exactly SEED_LENGTH bytes.
    """
    seed = bytes(seed)
    if len(seed) != SEED_LENGTH:
        raise ValueError(f"seed must be exactly {SEED_LENGTH} bytes, got {len(seed)}")
    return random.Random(int.from_bytes(seed, "big"))


def system_rng() -> random.Random:
    """Return a fresh generator backed by OS entropy."""
    return random.SystemRandom()


def seed_from_hex(text: str) -> bytes:
    """Decode a seed written as 64 hex digits.

    Raises:
        ValueError: If the text is not valid hex or has the wrong length.
    """
    try:
        seed = bytes.fromhex(text.strip())
    except ValueError as exc:
        raise ValueError(f"seed is not valid hex: {text!r}") from exc
    if len(seed) != SEED_LENGTH:
        raise ValueError(f"seed must be exactly {SEED_LENGTH} bytes, got {len(seed)}")
    return seed


def roll_die(rng: random.Random, sides: int) -> int:
    """Return a uniform sample from [1, sides]."""
    k = sides.bit_length()
    r = rng.getrandbits(k)
    while r >= sides:
        r = rng.getrandbits(k)
    return r + 1


def roll_request(request: ValidatedRequest, rng: random.Random) -> RollResult:
    """Roll every die in the request, in order, and total them with the modifier."""
    rolls = tuple(roll_die(rng, request.sides) for _ in range(request.quantity))
    result = RollResult(
        total=sum(rolls) + request.modifier,
        dice_rolls=rolls,
        modifier=request.modifier,
    )
    logger.debug("Rolled %dd%d%+d: %s", request.quantity, request.sides, request.modifier, result)
    return result
