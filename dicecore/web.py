"""HTTP surface: a single JSON roll endpoint."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from dicecore.config import configure_logging, settings
from dicecore.dice import roll, roll_with_seed
from dicecore.engine import seed_from_hex
from dicecore.errors import DiceError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    configure_logging()
    yield


app = FastAPI(title="dicecore", lifespan=lifespan)


@app.get("/roll")
async def roll_dice(expression: str, seed: str | None = None) -> dict:
    seed_text = seed if seed is not None else settings.default_seed
    try:
        seed_bytes = seed_from_hex(seed_text) if seed_text else None
    except ValueError as exc:
        raise HTTPException(
            status_code=422, detail={"kind": "invalid_seed", "message": str(exc)}
        ) from exc

    try:
        if seed_bytes is None:
            result = roll(expression)
        else:
            result = roll_with_seed(expression, seed_bytes)
    except DiceError as exc:
        logger.debug("Rejected %r: %s", expression, exc)
        raise HTTPException(status_code=422, detail={"kind": exc.kind, "message": str(exc)}) from exc

    return {"expression": expression, **result.to_dict()}
