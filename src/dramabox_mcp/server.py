"""DramaBox MCP server implementation."""

import logging

from mcp.server.fastmcp import FastMCP

from .client import get_client
from .config import get_config, setup_logging
from .consts import SERVER_NAME
from .models import Response

logger = logging.getLogger("dramabox-mcp.server")

mcp = FastMCP(
    name=SERVER_NAME,
    instructions="""
    DramaBox MCP server.

    This MCP server allows you to:
    1. Browse the latest DramaBox titles page by page.
    2. Search titles by keyword.
    3. Fetch stream information for an episode of a title.

    Upstream responses are returned verbatim in `data`; the upstream HTTP
    status is in `metadata.status_code`.
    """,
    log_level=get_config().log_level,
)


@mcp.tool()
async def list_latest(page_no: int = 1) -> Response:
    """List the latest DramaBox titles.

    Args:
        page_no: Page number to fetch, starting at 1

    Returns:
        The upstream listing for the requested page.

    Workflow: **Start here** or search → get_stream
    """
    logger.info(f"Listing latest titles, page {page_no}")

    try:
        result = await get_client().fetch_latest(page_no)
        return Response.from_upstream(result, "list_latest")
    except Exception as e:
        return Response.from_error(e)


@mcp.tool()
async def get_stream(book_id: str, index: int = 1) -> Response:
    """Get stream information for one episode of a title.

    Args:
        book_id: The title's bookId (from list_latest or search)
        index: Episode index, starting at 1

    Returns:
        The upstream episode payload, including playback URLs.

    Workflow: list_latest / search → **You are here**
    """
    logger.info(f"Fetching stream for book {book_id}, episode {index}")

    try:
        result = await get_client().fetch_stream(book_id, index)
        return Response.from_upstream(result, "get_stream")
    except Exception as e:
        return Response.from_error(e)


@mcp.tool()
async def search(keyword: str) -> Response:
    """Search DramaBox titles by keyword.

    Args:
        keyword: Free-text search term

    Returns:
        The upstream search results.

    Workflow: **Start here** or list_latest → get_stream
    """
    logger.info(f"Searching titles for: {keyword}")

    try:
        result = await get_client().fetch_suggest(keyword)
        return Response.from_upstream(result, "search")
    except Exception as e:
        return Response.from_error(e)


def main() -> None:
    """Run the MCP server."""
    setup_logging(get_config().log_level)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
