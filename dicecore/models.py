"""Value types passed between the parser, validator and roll engine.

All three are frozen pydantic models: once built they cannot be mutated, and
RollResult re-checks its own arithmetic on construction.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dicecore.errors import MAX_QUANTITY


class RawRequest(BaseModel):
    """Syntactic capture of an expression. Nothing is range-checked yet.

    ``quantity`` is None when the expression omits it (``d6``); the validator
    applies the default.
    """

    model_config = ConfigDict(frozen=True)

    quantity: int | None = None
    sides: int
    modifier: int = 0


class ValidatedRequest(BaseModel):
    """A request whose quantity and die size are within limits and safe to roll."""

    model_config = ConfigDict(frozen=True)

    quantity: int = Field(ge=1, le=MAX_QUANTITY)
    sides: int = Field(ge=1)
    modifier: int = 0


class RollResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int
    dice_rolls: tuple[int, ...]
    modifier: int = 0

    @model_validator(mode="after")
    def _check_total(self) -> RollResult:
        expected = sum(self.dice_rolls) + self.modifier
        if self.total != expected:
            raise ValueError(
                f"total {self.total} does not equal sum of dice plus modifier ({expected})"
            )
        return self

    def to_dict(self) -> dict:
        return {
            "dice_rolls": list(self.dice_rolls),
            "modifier": self.modifier,
            "total": self.total,
            "text": str(self),
        }

    def __str__(self) -> str:
        rolls = "[" + ", ".join(str(r) for r in self.dice_rolls) + "]"
        if self.modifier > 0:
            return f"{rolls} + {self.modifier} = {self.total}"
        if self.modifier < 0:
            return f"{rolls} - {-self.modifier} = {self.total}"
        return f"{rolls} = {self.total}"
