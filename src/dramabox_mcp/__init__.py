"""DramaBox MCP Server Package

A Model Context Protocol (MCP) server and async client for the DramaBox
content API, with token caching and a single retry on auth failure.
"""

from .auth import TokenManager
from .client import DramaboxClient, get_client
from .config import Config, get_config, setup_logging
from .consts import PACKAGE_VERSION
from .exceptions import ConfigError, DramaboxError, TokenError, UpstreamError
from .headers import build_headers, timezone_offset
from .models import DramaboxToken, Response, UpstreamResponse

__version__ = PACKAGE_VERSION

__all__ = [
    "__version__",
    "get_config",
    "get_client",
    "setup_logging",
    "build_headers",
    "timezone_offset",
    "Config",
    "DramaboxClient",
    "TokenManager",
    "DramaboxToken",
    "UpstreamResponse",
    "Response",
    "DramaboxError",
    "ConfigError",
    "TokenError",
    "UpstreamError",
]
