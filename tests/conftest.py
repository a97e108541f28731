"""
Global pytest fixtures and configuration for test suite.

This module provides reusable fixtures for:
- HTTP clients
- Mock settings/configuration
- Sample multipart bodies
- Temporary files
"""

import os
from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from formwire.api.app import app
from formwire.config import Settings
from .fixtures.bodies import (
    BROWSER_BODY,
    BROWSER_CONTENT_TYPE,
    SIMPLE_BODY,
    SIMPLE_CONTENT_TYPE,
)


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """
    Create async HTTP client for testing FastAPI endpoints.

    Yields:
        AsyncClient instance
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def mock_settings() -> Settings:
    """Settings with test-friendly defaults."""
    return Settings(
        max_body_size_mb=1,
        max_parts=10,
        log_level="INFO",
        log_json=False,
    )


@pytest.fixture
def simple_headers() -> dict:
    return {"Content-Type": SIMPLE_CONTENT_TYPE}


@pytest.fixture
def simple_body() -> bytes:
    """Single field ``a`` with body ``hello`` and boundary ``X``."""
    return SIMPLE_BODY


@pytest.fixture
def browser_headers() -> dict:
    return {"Content-Type": BROWSER_CONTENT_TYPE}


@pytest.fixture
def browser_body() -> bytes:
    """Browser-style form with a text field and a text file upload."""
    return BROWSER_BODY


@pytest.fixture
def tmp_body_file(tmp_path) -> Generator[str, None, None]:
    """
    Write the browser body to a temporary file for CLI tests.

    Yields:
        Path to the temporary body file
    """
    body_path = tmp_path / "body.bin"
    body_path.write_bytes(BROWSER_BODY)
    yield str(body_path)


@pytest.fixture(autouse=True)
def reset_env_vars():
    """
    Reset environment variables before each test.

    This prevents test pollution from env var changes.
    """
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
