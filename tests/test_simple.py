"""Simple tests (verify pytest working)"""

from unittest import TestCase


class TestPackage(TestCase):

    def test_imports(self):
        """Test that all main imports work"""
        try:
            from dramabox_mcp import (
                Config,
                DramaboxClient,
                DramaboxError,
                TokenManager,
                build_headers,
            )
        except ImportError as e:
            self.fail(e)
