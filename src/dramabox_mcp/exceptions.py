"""DramaBox MCP custom exceptions.

Exception Design Principles:
1. Use these custom exceptions only when additional useful context can be provided
2. Upstream non-2xx responses are NOT exceptions - they are passed through
3. Split on domain of actionable information:
   - Recoverable by user reconfiguration outside session (ConfigError)
   - Credential service failures (TokenError)
   - Network failures talking to the upstream API (UpstreamError)
"""


class DramaboxError(Exception):
    """Base exception for all DramaBox MCP errors.

    Provides rich context and actionable suggestions beyond standard exceptions.
    """

    def __init__(
        self,
        message: str,  # the error message
        *,
        errors: list[str] = None,  # detailed list of errors (if available)
        suggestions: list[str] = None,  # remedial actions
        context: dict = None,  # additional detailed context
    ):
        """Initialize DramaboxError.

        Args:
            message: Primary error message for users
            errors: List of specific error details
            suggestions: List of actionable suggestions for resolution
            context: Additional context information as key-value pairs
        """
        super().__init__(message)
        self.message = message
        self.errors = errors or []
        self.suggestions = suggestions or []
        self.context = context or {}


class ConfigError(DramaboxError):
    """Application configuration errors - recoverable by user reconfiguration.

    Raised before any network call is attempted, e.g. when the token
    endpoint URL is not configured.
    """

    pass


class TokenError(DramaboxError):
    """Token endpoint errors - the credential service failed or misbehaved.

    Covers an unreachable token endpoint, non-2xx responses from it, and
    payloads missing the token or device id.
    """

    pass


class UpstreamError(DramaboxError):
    """Transport-level failure talking to the upstream API.

    Timeouts, DNS failures and connection resets. The underlying httpx
    exception is chained as __cause__. HTTP error statuses never raise this.
    """

    pass
