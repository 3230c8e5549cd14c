"""API test fixtures — FastAPI app behind an httpx AsyncClient.

Invariants:
    - Routes build a fresh automaton per request, so no state to reset between tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from fsm_engine.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
