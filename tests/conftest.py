"""Pytest configuration and shared fixtures"""

import os
from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from dramabox_mcp.config import Config
from dramabox_mcp.models import DramaboxToken

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)

TOKEN_URL = "https://tokens.test/dramabox"


@pytest.fixture
def clean_env():
    """Fixture that temporarily clears DRAMABOX_* environment variables.

    This ensures Config tests see the true defaults without interference
    from environment variables that might be set in the user's shell.
    """
    dramabox_vars = {
        key: value for key, value in os.environ.items() if key.startswith("DRAMABOX_")
    }

    for key in dramabox_vars:
        os.environ.pop(key, None)

    try:
        yield
    finally:
        for key in list(os.environ):
            if key.startswith("DRAMABOX_"):
                os.environ.pop(key, None)
        os.environ.update(dramabox_vars)


@pytest.fixture
def clean_config(clean_env):
    """Config built from defaults only"""
    return Config()


@pytest.fixture
def config(clean_env):
    """Config with a token endpoint configured"""
    return Config(token_url=TOKEN_URL, log_level="DEBUG")


@pytest.fixture
def mock_http_client():
    """Mock httpx AsyncClient"""
    client = Mock(spec=httpx.AsyncClient)
    client.get = AsyncMock()
    client.post = AsyncMock()
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def token():
    return DramaboxToken(token="tok-1", device_id="dev-1")


@pytest.fixture
def fresh_token():
    return DramaboxToken(token="tok-2", device_id="dev-2")


@pytest.fixture
def mock_token_provider(token, fresh_token):
    """Token provider handing out `token`, then `fresh_token` when forced"""
    provider = Mock()

    async def get_token(force=False):
        return fresh_token if force else token

    provider.get_token = AsyncMock(side_effect=get_token)
    return provider
