"""Shared test fixtures for the dicecore test suite.

Most tests need no fixture at all. ``seed`` gives the reference seed used by
the pinned regression values; ``client`` drives the FastAPI app in-process.
"""

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from dicecore.config import settings
from dicecore.web import app


@pytest.fixture
def seed() -> bytes:
    return bytes([42] * 32)


@pytest.fixture(autouse=True)
def no_default_seed(monkeypatch):
    """Keep a developer's DICECORE_DEFAULT_SEED from leaking into tests."""
    monkeypatch.setattr(settings, "default_seed", "")


@pytest_asyncio.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
