"""Domain limits applied to a parsed request."""

from __future__ import annotations

import logging

from dicecore.errors import (
    MAX_QUANTITY,
    InvalidDieSizeError,
    InvalidQuantityError,
    QuantityLimitExceededError,
)
from dicecore.models import RawRequest, ValidatedRequest

logger = logging.getLogger(__name__)

DEFAULT_QUANTITY = 1


def validate(raw: RawRequest) -> ValidatedRequest:
    """Apply defaults and range checks to a parsed request.

    Checks run in a fixed order (quantity limit, quantity, die size) so an
    input breaking several rules always reports the same error.

    Raises:
        QuantityLimitExceededError: If quantity is above MAX_QUANTITY.
        InvalidQuantityError: If quantity is below 1.
        InvalidDieSizeError: If sides is below 1.
    """
    quantity = DEFAULT_QUANTITY if raw.quantity is None else raw.quantity

    if quantity > MAX_QUANTITY:
        raise QuantityLimitExceededError(quantity)
    if quantity < 1:
        raise InvalidQuantityError(quantity)
    if raw.sides < 1:
        raise InvalidDieSizeError(raw.sides)

    request = ValidatedRequest(quantity=quantity, sides=raw.sides, modifier=raw.modifier)
    logger.debug("Validated request %s", request)
    return request
