"""
StudyPlanner Backend: Health Check Tests
"""

from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.exc import SQLAlchemyError

from studyplanner import __version__


@pytest.mark.asyncio
async def test_healthy(test_client):
    response = await test_client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "connected"
    assert body["version"] == __version__


@pytest.mark.asyncio
async def test_database_down(test_client):
    broken = MagicMock()
    broken.connect.side_effect = SQLAlchemyError("connection refused")
    with patch("studyplanner.routes.health.engine", broken):
        response = await test_client.get("/health")
    assert response.status_code == 503
    assert response.json()["database"] == "disconnected"
