"""Protocol definitions for dependency injection and interface contracts."""

from typing import Protocol

from .models import DramaboxToken


class TokenProvider(Protocol):
    """Protocol for authentication token providers."""

    async def get_token(self, force: bool = False) -> DramaboxToken:
        """Get a valid token/device-id pair.

        Args:
            force: Fetch a fresh token even if the cached one is still valid.

        Raises:
            ConfigError: If the token endpoint is not configured.
            TokenError: If a token cannot be obtained.
        """
        ...
