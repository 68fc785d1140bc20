"""Grammar parser for ``AdX[+/-C]`` dice notation.

Accepted language, where WS is any whitespace::

    WS* [A] WS* 'd' WS* X WS* [('+' | '-') WS* C] WS*

A, X and C are unsigned runs of ASCII digits. A may be omitted (one die).
Whitespace may surround every token but never splits a digit run, so
``1 0d6`` is rejected rather than read as ``10d6``. Anything left over once
the grammar is exhausted (a second term, ``*``, ``.``) is a format error.

Range checks other than 32-bit overflow belong to the validator: ``1001d6``
and ``0d20`` parse cleanly here.
"""

from __future__ import annotations

import logging
import re

from dicecore.errors import InvalidFormatError, NumericOverflowError
from dicecore.models import RawRequest

logger = logging.getLogger(__name__)

_WS_RE = re.compile(r"\s*")
_DIGITS_RE = re.compile(r"[0-9]+")

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class _Scanner:
    """Cursor over the expression text."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def skip_whitespace(self) -> None:
        self.pos = _WS_RE.match(self.text, self.pos).end()

    def digits(self) -> str | None:
        m = _DIGITS_RE.match(self.text, self.pos)
        if m is None:
            return None
        self.pos = m.end()
        return m.group()

    def peek(self) -> str:
        return self.text[self.pos : self.pos + 1]

    def advance(self) -> None:
        self.pos += 1

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def describe_here(self) -> str:
        if self.at_end():
            return "end of input"
        return f"{self.peek()!r} at position {self.pos}"


def _to_int32(token: str, negative: bool = False) -> int:
    # int() refuses strings past sys.get_int_max_str_digits(), so drop leading
    # zeros and reject long runs before converting.
    significant = token.lstrip("0") or "0"
    if len(significant) > len(str(_INT32_MAX)):
        raise NumericOverflowError(("-" if negative else "") + token)
    value = int(significant)
    if negative:
        value = -value
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise NumericOverflowError(("-" if negative else "") + token)
    return value


def parse_expression(expression: str) -> RawRequest:
    """Parse dice notation into an unvalidated RawRequest.

    Args:
        expression: Dice notation string, e.g. "2d6+3" or " d20 - 1 ".

    Returns:
        RawRequest with ``quantity`` None when the expression omits it.

    Raises:
        InvalidFormatError: If the text is not in the grammar.
        NumericOverflowError: If a number does not fit in 32 bits.
    """
    s = _Scanner(expression)
    trimmed = expression.strip()

    def fail(reason: str) -> InvalidFormatError:
        return InvalidFormatError(trimmed, reason)

    s.skip_whitespace()
    if s.at_end():
        raise fail("empty expression")

    quantity_token = s.digits()
    s.skip_whitespace()
    if s.peek() != "d":
        raise fail(f"expected 'd' but found {s.describe_here()}")
    s.advance()

    s.skip_whitespace()
    sides_token = s.digits()
    if sides_token is None:
        raise fail(f"expected die size digits but found {s.describe_here()}")

    s.skip_whitespace()
    sign = s.peek()
    modifier_token = None
    if sign in ("+", "-"):
        s.advance()
        s.skip_whitespace()
        modifier_token = s.digits()
        if modifier_token is None:
            raise fail(f"expected modifier digits after {sign!r} but found {s.describe_here()}")
        s.skip_whitespace()

    if not s.at_end():
        raise fail(f"unexpected trailing input {s.text[s.pos :].rstrip()!r}")

    quantity = _to_int32(quantity_token) if quantity_token is not None else None
    sides = _to_int32(sides_token)
    modifier = _to_int32(modifier_token, negative=sign == "-") if modifier_token else 0

    raw = RawRequest(quantity=quantity, sides=sides, modifier=modifier)
    logger.debug("Parsed %r as %s", trimmed, raw)
    return raw
