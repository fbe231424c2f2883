"""Token management with time-based expiry."""

import logging
from datetime import UTC, datetime, timedelta

import httpx

from .config import Config
from .exceptions import ConfigError, TokenError
from .models import CachedToken, DramaboxToken, TokenPayload

logger = logging.getLogger("dramabox-mcp.auth")


class TokenManager:
    """Authentication token manager.

    Responsibilities:
    - Cache a single token/device-id pair with a fixed time-to-live
    - Request new tokens from the configured token endpoint

    Concurrent callers hitting expiry may each refresh; the last one wins.
    """

    def __init__(self, config: Config, http_client: httpx.AsyncClient):
        """Initialize TokenManager.

        Args:
            config: Config instance with token settings.
            http_client: HTTP client (for token requests only)
        """
        self.config = config
        self.http_client = http_client
        self._cached: CachedToken | None = None

    async def get_token(self, force: bool = False) -> DramaboxToken:
        """Get a valid token/device-id pair.

        Args:
            force: Skip the cache and always fetch a fresh token.

        Returns:
            The cached pair if still valid, otherwise a freshly fetched one.

        Raises:
            ConfigError: If token_url is not set.
            TokenError: If the token endpoint fails or returns a bad payload.
        """
        if not force and self._cached and not self._cached.is_expired():
            return self._cached.pair()

        return await self._refresh_token()

    async def _refresh_token(self) -> DramaboxToken:
        """Fetch a new token and replace the cached one."""
        url = self.config.token_url
        if not url:
            raise ConfigError(
                "DRAMABOX_TOKEN_URL not set",
                suggestions=["Set DRAMABOX_TOKEN_URL to the token endpoint URL"],
            )

        logger.debug("Refreshing DramaBox token")
        now = datetime.now(UTC)

        try:
            response = await self.http_client.get(
                url, timeout=self.config.token_timeout_seconds
            )
            response.raise_for_status()
            payload = TokenPayload.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            raise TokenError(
                f"Token endpoint returned {e.response.status_code}",
                errors=[str(e)],
                suggestions=["Check that the token service is healthy"],
                context={"token_url": url, "status_code": e.response.status_code},
            ) from e
        except httpx.RequestError as e:
            raise TokenError(
                f"Token endpoint unreachable: {e}",
                errors=[str(e)],
                suggestions=[
                    "Verify DRAMABOX_TOKEN_URL is correct",
                    "Try again - this may be a temporary network issue",
                ],
                context={"token_url": url},
            ) from e
        except ValueError as e:
            # JSON decode errors and pydantic ValidationError
            logger.error("Invalid token payload")
            raise TokenError(
                "Invalid token payload",
                errors=[str(e)],
                suggestions=["Token endpoint must return {token, deviceid}"],
                context={"token_url": url},
            ) from e

        self._cached = CachedToken(
            token=payload.token,
            device_id=payload.deviceid,
            expires_at=now + timedelta(seconds=self.config.token_ttl_seconds),
        )
        logger.info("Token refreshed successfully")
        return self._cached.pair()
