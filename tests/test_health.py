"""Tests for health check endpoint."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """Test that health endpoint returns ok status."""
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "version" in data


@pytest.mark.asyncio
async def test_root_endpoint(client: AsyncClient):
    """Test that root endpoint returns API info."""
    response = await client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Reindeer Maze"
    assert "version" in data
    assert "docs" in data


@pytest.mark.asyncio
async def test_request_id_header(client: AsyncClient):
    """Test that responses carry a correlation ID."""
    response = await client.get("/health")
    assert len(response.headers["X-Request-ID"]) == 8


@pytest.mark.asyncio
async def test_request_id_header_is_echoed(client: AsyncClient):
    """Test that a caller-supplied correlation ID is kept."""
    response = await client.get("/health", headers={"X-Request-ID": "trace-42"})
    assert response.headers["X-Request-ID"] == "trace-42"
