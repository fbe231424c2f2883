from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field, computed_field, field_validator

from .consts import AUTH_FAILURE_STATUSES
from .exceptions import DramaboxError

# =============================================================================
# TOKEN MODELS
# =============================================================================


class TokenPayload(BaseModel):
    """Body returned by the token endpoint. Both fields must be non-empty.

    Some token services send a numeric device id; non-zero integers are
    accepted and sent upstream as their decimal string.
    """

    token: str = Field(..., min_length=1)
    deviceid: str = Field(..., min_length=1)

    @field_validator("token", "deviceid", mode="before")
    @classmethod
    def _coerce_int(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            # zero is falsy, treat it like a missing value
            return str(value) if value else ""
        return value


class DramaboxToken(BaseModel):
    """Credential pair required by the upstream API."""

    token: str = Field(..., description="Bearer token value")
    device_id: str = Field(..., description="Device identifier bound to the token")


class CachedToken(DramaboxToken):
    """Token pair plus the moment it stops being reused."""

    expires_at: datetime = Field(..., description="UTC expiry time")

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or datetime.now(UTC)) >= self.expires_at

    def pair(self) -> DramaboxToken:
        return DramaboxToken(token=self.token, device_id=self.device_id)


# =============================================================================
# UPSTREAM RESPONSE
# =============================================================================


class UpstreamResponse(BaseModel):
    """Upstream status code and parsed body, passed through verbatim."""

    status_code: int = Field(..., description="HTTP status returned by upstream")
    data: Any | None = Field(None, description="Parsed JSON body (or raw text)")

    @computed_field
    @property
    def is_auth_failure(self) -> bool:
        """True for 401/403, the statuses that trigger a token refresh."""
        return self.status_code in AUTH_FAILURE_STATUSES

    @computed_field
    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


# =============================================================================
# UNIFIED RESPONSE MODEL
# =============================================================================
# Single response type for all MCP tools


class Response(BaseModel):
    """Unified response type for all MCP tools."""

    status: Literal["success", "error"] = Field(
        ..., description="Response status indicating outcome"
    )
    message: str = Field(..., description="Human-readable summary of the response")
    data: Any | None = Field(
        None,
        description="Response payload - the upstream body, passed through verbatim",
    )
    errors: list[str] = Field(
        default_factory=list, description="List of error messages"
    )
    suggestions: list[str] = Field(
        default_factory=list, description="Actionable suggestions for the user"
    )
    metadata: dict[str, Any] | None = Field(
        None, description="Additional context and domain-specific information"
    )

    @classmethod
    def from_upstream(cls, result: UpstreamResponse, operation: str) -> "Response":
        """Wrap an upstream result, keeping its status code and body intact.

        Args:
            result: The forwarded upstream response
            operation: Name of the operation, used in the message

        Returns:
            Response with status "success" for 2xx and "error" otherwise
        """
        metadata = {"status_code": result.status_code, "operation": operation}
        if result.ok:
            return cls(
                status="success",
                message=f"{operation} succeeded ({result.status_code})",
                data=result.data,
                metadata=metadata,
            )

        suggestions = []
        if result.is_auth_failure:
            suggestions = [
                "Check the token service - a refreshed token was also rejected"
            ]
        elif result.status_code >= 500:
            suggestions = ["Upstream server error - try again later"]

        return cls(
            status="error",
            message=f"{operation} failed: upstream returned {result.status_code}",
            data=result.data,
            errors=[f"HTTP {result.status_code}"],
            suggestions=suggestions,
            metadata=metadata,
        )

    @classmethod
    def from_error(cls, error: Exception) -> "Response":
        """Create Response from any Exception, with potentially helpful info for recovery.

        Args:
            error: Any Exception instance

        Returns:
            Response object with error details
        """
        if isinstance(error, DramaboxError):
            # Use rich context from DramaboxError
            return cls(
                status="error",
                message=error.message,
                errors=error.errors,
                suggestions=error.suggestions,
                metadata={**error.context, "exception_type": type(error).__name__},
            )
        else:
            # Generic exception handling
            return cls(
                status="error",
                message=f"Unexpected error: {str(error)}",
                errors=[str(error)],
                suggestions=[
                    "Check server logs for detailed information",
                    "Try again - this may be a temporary issue",
                ],
                metadata={"exception_type": type(error).__name__},
            )
