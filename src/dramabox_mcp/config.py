"""Configuration management."""

import logging
from functools import cache

from pydantic import ConfigDict, Field, computed_field
from pydantic_settings import BaseSettings

from .consts import (
    DEFAULT_TOKEN_TIMEOUT_SECONDS,
    DEFAULT_TOKEN_TTL_SECONDS,
    DEFAULT_UPSTREAM_BASE_URL,
    DEFAULT_UPSTREAM_TIMEOUT_SECONDS,
    LATEST_URL_PATH,
    SEARCH_URL_PATH,
    STREAM_URL_PATH,
)


class Config(BaseSettings):
    """Configuration with computed upstream endpoints."""

    model_config = ConfigDict(
        env_prefix="DRAMABOX_", case_sensitive=False, extra="ignore"
    )
    token_url: str | None = Field(
        default=None, description="URL of the token-issuing endpoint"
    )
    upstream_base_url: str = Field(
        default=DEFAULT_UPSTREAM_BASE_URL,
        description="Base URL of the upstream content API",
    )

    # App identity sent with every upstream request
    version_code: str = Field(default="430", description="App version code")
    version_name: str = Field(default="4.3.0", description="App version name")
    cid: str = Field(default="DRA1000042", description="Client id")
    package_name: str = Field(
        default="com.storymatrix.drama", description="Android package name"
    )
    apn: str = Field(default="1", description="APN flag")
    language: str = Field(default="in", description="Content language")
    platform_p: str = Field(
        default="43", pattern=r"^\d+$", description="Platform code / channel id"
    )

    log_level: str = Field(
        default="INFO",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
        description="Logging level",
    )
    token_timeout_seconds: int = Field(
        default=DEFAULT_TOKEN_TIMEOUT_SECONDS,
        gt=0,
        le=300,
        description="Token request timeout in seconds",
    )
    upstream_timeout_seconds: int = Field(
        default=DEFAULT_UPSTREAM_TIMEOUT_SECONDS,
        gt=0,
        le=300,
        description="Upstream request timeout in seconds",
    )
    token_ttl_seconds: int = Field(
        default=DEFAULT_TOKEN_TTL_SECONDS,
        gt=0,
        description="How long a fetched token is reused",
    )

    @computed_field
    @property
    def latest_url(self) -> str:
        """URL for the latest items listing."""
        return f"{self.upstream_base_url}{LATEST_URL_PATH}"

    @computed_field
    @property
    def stream_url(self) -> str:
        """URL for fetching an episode stream."""
        return f"{self.upstream_base_url}{STREAM_URL_PATH}"

    @computed_field
    @property
    def search_url(self) -> str:
        """URL for keyword search."""
        return f"{self.upstream_base_url}{SEARCH_URL_PATH}"


@cache
def get_config() -> Config:
    """Get a cached Config instance."""
    return Config()


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Configure logging for the entire application"""
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,  # Override any existing configuration
    )
    return logging.getLogger("dramabox-mcp")
