"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from flowguard.main import app
from flowguard.models import WorkflowMetadata


@pytest.fixture
def metadata() -> WorkflowMetadata:
    """Metadata that passes validation."""
    return WorkflowMetadata(
        code="purchase_approval",
        name="Purchase approval",
        target_entity_type="purchase_order",
    )


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
