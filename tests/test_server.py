"""Tests for MCP tool functions"""

from unittest.mock import AsyncMock, Mock, patch

import pytest

from dramabox_mcp import server
from dramabox_mcp.consts import SERVER_NAME
from dramabox_mcp.exceptions import ConfigError, UpstreamError
from dramabox_mcp.models import UpstreamResponse


@pytest.fixture
def mock_client():
    client = Mock()
    client.fetch_latest = AsyncMock(
        return_value=UpstreamResponse(status_code=200, data={"list": ["a"]})
    )
    client.fetch_stream = AsyncMock(
        return_value=UpstreamResponse(status_code=200, data={"chapterList": []})
    )
    client.fetch_suggest = AsyncMock(
        return_value=UpstreamResponse(status_code=200, data={"suggestList": []})
    )
    with patch("dramabox_mcp.server.get_client", return_value=client):
        yield client


def test_server_name():
    assert server.mcp.name == SERVER_NAME


@pytest.mark.asyncio
async def test_tools_registered():
    tools = await server.mcp.list_tools()
    assert {tool.name for tool in tools} == {"list_latest", "get_stream", "search"}


@pytest.mark.asyncio
async def test_list_latest(mock_client):
    response = await server.list_latest(page_no=2)

    mock_client.fetch_latest.assert_awaited_once_with(2)
    assert response.status == "success"
    assert response.data == {"list": ["a"]}
    assert response.metadata["status_code"] == 200


@pytest.mark.asyncio
async def test_get_stream(mock_client):
    response = await server.get_stream("b42", index=3)

    mock_client.fetch_stream.assert_awaited_once_with("b42", 3)
    assert response.status == "success"
    assert response.metadata["operation"] == "get_stream"


@pytest.mark.asyncio
async def test_search(mock_client):
    response = await server.search("romance")

    mock_client.fetch_suggest.assert_awaited_once_with("romance")
    assert response.data == {"suggestList": []}


@pytest.mark.asyncio
async def test_upstream_status_passed_through(mock_client):
    mock_client.fetch_suggest.return_value = UpstreamResponse(
        status_code=500, data={"msg": "internal"}
    )

    response = await server.search("x")

    assert response.status == "error"
    assert response.data == {"msg": "internal"}
    assert response.metadata["status_code"] == 500


@pytest.mark.parametrize(
    "error",
    [ConfigError("DRAMABOX_TOKEN_URL not set"), UpstreamError("Upstream error: boom")],
)
@pytest.mark.asyncio
async def test_errors_become_error_responses(mock_client, error):
    mock_client.fetch_latest.side_effect = error

    response = await server.list_latest()

    assert response.status == "error"
    assert response.message == str(error)
    assert response.metadata["exception_type"] == type(error).__name__
