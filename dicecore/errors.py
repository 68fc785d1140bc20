"""Exceptions raised for malformed or out-of-range dice notation.

Every failure is a subclass of DiceError, one class per cause. Each class
carries a stable ``kind`` tag and the offending value(s) as attributes so
callers can branch on the cause without parsing the message.
"""

from __future__ import annotations

MAX_QUANTITY = 1000


class DiceError(ValueError):
    """Raised when a dice notation is invalid."""

    kind: str = "dice_error"


class InvalidFormatError(DiceError):
    """The expression does not match the ``AdX[+/-C]`` grammar."""

    kind = "invalid_format"

    def __init__(self, expression: str, reason: str) -> None:
        self.expression = expression
        self.reason = reason
        super().__init__(f"Invalid dice notation format: {reason} in {expression!r}")


class InvalidQuantityError(DiceError):
    kind = "invalid_quantity"

    def __init__(self, quantity: int) -> None:
        self.quantity = quantity
        super().__init__(f"Invalid quantity: {quantity} (must be 1-{MAX_QUANTITY})")


class InvalidDieSizeError(DiceError):
    kind = "invalid_die_size"

    def __init__(self, sides: int) -> None:
        self.sides = sides
        super().__init__(f"Invalid die size: d{sides} (must be positive)")


class QuantityLimitExceededError(DiceError):
    kind = "quantity_limit_exceeded"

    def __init__(self, quantity: int) -> None:
        self.quantity = quantity
        super().__init__(f"Quantity limit exceeded: {quantity} (maximum is {MAX_QUANTITY})")


class NumericOverflowError(DiceError):
    """A digit run does not fit in a 32-bit signed integer."""

    kind = "numeric_overflow"

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Parse error: number too large to fit in target type: {token!r}")
