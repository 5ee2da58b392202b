"""Tests for suite URL resolution."""

from src.url_utils import resolve_suite_url


class TestResolveSuiteUrl:
    """Tests for resolve_suite_url function."""

    def test_joins_path_with_root(self):
        """Test a path is resolved against the root URL."""
        assert resolve_suite_url("https://example.com", "/page") == "https://example.com/page"

    def test_keeps_root_path_prefix(self):
        """Test a leading slash does not drop the root URL's path."""
        assert resolve_suite_url("https://example.com/app", "/page") == "https://example.com/app/page"
        assert resolve_suite_url("https://example.com/app/", "page") == "https://example.com/app/page"

    def test_absolute_url_wins(self):
        """Test an absolute suite URL is used as-is."""
        assert resolve_suite_url("https://example.com", "https://other.com/x") == "https://other.com/x"

    def test_no_root_url(self):
        """Test the suite URL is returned unchanged without a root URL."""
        assert resolve_suite_url("", "/page") == "/page"

    def test_no_suite_url(self):
        """Test a suite without a URL resolves to an empty string."""
        assert resolve_suite_url("https://example.com", None) == ""
        assert resolve_suite_url("https://example.com", "") == ""
