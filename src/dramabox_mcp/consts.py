"""High-value constants for the DramaBox MCP package."""

# Package metadata
PACKAGE_VERSION = "0.3.0"
SERVER_NAME = "dramabox-mcp"

# External API contract consts
DEFAULT_UPSTREAM_BASE_URL = "https://dramabox.sansekai.my.id"
LATEST_URL_PATH = "/api/dramabox/vip"
STREAM_URL_PATH = "/api/dramabox/latest"
SEARCH_URL_PATH = "/api/dramabox/randomdrama"

# Upstream only accepts requests that look like the Android app
UPSTREAM_USER_AGENT = "okhttp/4.10.0"

# Business logic consts
DEFAULT_TOKEN_TTL_SECONDS = 60
DEFAULT_TOKEN_TIMEOUT_SECONDS = 10
DEFAULT_UPSTREAM_TIMEOUT_SECONDS = 15
AUTH_FAILURE_STATUSES = frozenset({401, 403})
