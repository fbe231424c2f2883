from dramabox_mcp.consts import (
    AUTH_FAILURE_STATUSES,
    DEFAULT_UPSTREAM_BASE_URL,
    LATEST_URL_PATH,
    PACKAGE_VERSION,
    SEARCH_URL_PATH,
    STREAM_URL_PATH,
)


class TestPackageConstants:
    """Test package constants are properly defined"""

    def test_package_version_defined(self):
        """Test that package version is defined"""
        assert isinstance(PACKAGE_VERSION, str)
        assert "." in PACKAGE_VERSION  # Should be semantic version

    def test_url_path_constants(self):
        """Test that URL path constants are properly defined"""
        for path in (LATEST_URL_PATH, STREAM_URL_PATH, SEARCH_URL_PATH):
            assert path.startswith("/api/dramabox/")

        assert not DEFAULT_UPSTREAM_BASE_URL.endswith("/")

    def test_auth_failure_statuses(self):
        assert AUTH_FAILURE_STATUSES == {401, 403}
