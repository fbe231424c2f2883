"""DramaBox client: token handling, upstream forwarding and endpoint calls."""

import logging
from collections.abc import Awaitable, Callable
from functools import cache
from typing import Any

import httpx

from .auth import TokenManager
from .config import Config, get_config
from .exceptions import UpstreamError
from .headers import build_headers
from .models import DramaboxToken, UpstreamResponse
from .protocols import TokenProvider

logger = logging.getLogger("dramabox-mcp.client")

RequestFn = Callable[[DramaboxToken], Awaitable[UpstreamResponse]]


class DramaboxClient:
    """DramaBox API client with token retry.

    Responsibilities:
    - Forward JSON POSTs upstream, passing status and body through
    - Refresh the token and retry once on 401/403
    - Shape the request bodies of the three upstream endpoints
    """

    def __init__(
        self,
        config: Config | None = None,
        token_provider: TokenProvider | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize DramaboxClient.

        Args:
            config: Config instance. If None, uses get_config().
            token_provider: Token provider. If None, creates a TokenManager.
            http_client: HTTP client. If None, creates a new one.
        """
        self.config = config or get_config()

        self.http_client = http_client or httpx.AsyncClient(follow_redirects=True)

        self.token_provider = token_provider or TokenManager(
            self.config, self.http_client
        )

        logger.info(f"DramaBox client created for {self.config.upstream_base_url}")

    async def __aenter__(self) -> "DramaboxClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.http_client.aclose()

    async def post_upstream(
        self, url: str, body: dict[str, Any], headers: dict[str, str]
    ) -> UpstreamResponse:
        """POST a JSON body upstream and return whatever comes back.

        Args:
            url: Complete upstream URL.
            body: JSON request body.
            headers: Request headers (see build_headers).

        Returns:
            Upstream status code and parsed body. Non-2xx statuses are
            returned, not raised. Bodies that are not JSON come back as text.

        Raises:
            UpstreamError: For network errors, timeouts, DNS failures.
        """
        logger.debug(f"POST {url}")
        try:
            response = await self.http_client.post(
                url,
                json=body,
                headers=headers,
                timeout=self.config.upstream_timeout_seconds,
            )
        except httpx.RequestError as e:
            logger.error(f"POST {url} failed: {e}")
            raise UpstreamError(
                f"Upstream error: {e}",
                errors=[str(e)],
                suggestions=["Try again - this may be a temporary network issue"],
                context={"url": url},
            ) from e

        try:
            data = response.json()
        except ValueError:
            data = response.text

        logger.debug(f"POST {url} returned {response.status_code}")
        return UpstreamResponse(status_code=response.status_code, data=data)

    async def with_token_retry(self, fn: RequestFn) -> UpstreamResponse:
        """Run a request with a valid token, refreshing once on 401/403.

        Args:
            fn: Coroutine function taking a token and returning the upstream result.

        Returns:
            The first result, or the result of the single retry if the first
            was an auth failure (even if the retry fails too).

        Raises:
            ConfigError: If the token endpoint is not configured.
            TokenError: If a token cannot be obtained.
            UpstreamError: From fn on transport failure.
        """
        token = await self.token_provider.get_token()
        result = await fn(token)

        if result.is_auth_failure:
            logger.warning(
                f"Upstream rejected token ({result.status_code}), "
                "refreshing and retrying"
            )
            token = await self.token_provider.get_token(force=True)
            result = await fn(token)

        return result

    async def _post_with_token(
        self, url: str, body: dict[str, Any]
    ) -> UpstreamResponse:
        """POST with headers rebuilt from whichever token the attempt gets."""

        async def request(token: DramaboxToken) -> UpstreamResponse:
            return await self.post_upstream(
                url, body, build_headers(token, self.config)
            )

        return await self.with_token_retry(request)

    # === API helpers ===

    async def fetch_latest(self, page_no: int = 1) -> UpstreamResponse:
        """List the latest items, one page at a time."""
        body = {
            "newChannelStyle": 1,
            "isNeedRank": 1,
            "pageNo": page_no,
            "index": 1,
            "channelId": int(self.config.platform_p),
        }
        return await self._post_with_token(self.config.latest_url, body)

    async def fetch_stream(self, book_id: str, index: int = 1) -> UpstreamResponse:
        """Fetch stream info for one episode of a book.

        Args:
            book_id: Upstream book identifier.
            index: Episode index (1-based).
        """
        body = {
            "boundaryIndex": 0,
            "comingPlaySectionId": -1,
            "index": index,
            "currencyPlaySource": "discover_new_rec_new",
            "needEndRecommend": 0,
            "currencyPlaySourceName": "",
            "preLoad": False,
            "rid": "",
            "pullCid": "",
            "loadDirection": 0,
            "startUpKey": "",
            "bookId": book_id,
        }
        return await self._post_with_token(self.config.stream_url, body)

    async def fetch_suggest(self, keyword: str) -> UpstreamResponse:
        """Search by keyword."""
        body = {"keyword": keyword}
        return await self._post_with_token(self.config.search_url, body)


@cache
def get_client() -> DramaboxClient:
    """Get a cached DramaboxClient instance with default configuration.

    Raises:
        No exceptions raised directly.
        May propagate exceptions from Config() initialization via get_config().
    """
    return DramaboxClient()
