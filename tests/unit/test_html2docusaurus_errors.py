"""Unit tests for errors module and the CLI error types."""

import pytest

from html2docusaurus.cli.errors import CLIError, FileAccessError
from html2docusaurus.errors import (
    ConfigError,
    ConversionError,
    FetchError,
    FetchTimeoutError,
    Html2DocusaurusError,
    InputValidationError,
)


class TestErrorHierarchy:
    """Test cases for the exception hierarchy."""

    @pytest.mark.parametrize("error", [
        InputValidationError("bad"),
        ConfigError("bad"),
        ConversionError("bad"),
        FetchError("bad"),
        FetchTimeoutError("https://example.com", 3.0),
        FileAccessError("a.html", "read"),
    ])
    def test_all_errors_share_base(self, error):
        """Every error can be caught as Html2DocusaurusError."""
        assert isinstance(error, Html2DocusaurusError)

    def test_file_access_error_is_cli_error(self):
        """FileAccessError belongs to the CLI errors."""
        assert isinstance(FileAccessError("a", "read"), CLIError)

    def test_timeout_is_fetch_error(self):
        """FetchTimeoutError is a FetchError."""
        assert isinstance(FetchTimeoutError("https://example.com", 1.0), FetchError)


class TestConfigError:
    """Test cases for ConfigError messages."""

    def test_message_with_field(self):
        """The field name is part of the message."""
        error = ConfigError("must be positive", config_field="sidebar_position")

        assert str(error) == "Configuration error in field 'sidebar_position': must be positive"
        assert error.original_message == "must be positive"

    def test_message_without_field(self):
        """Without a field the generic prefix is used."""
        assert str(ConfigError("broken")) == "Configuration error: broken"


class TestFetchErrors:
    """Test cases for fetch error attributes."""

    def test_fetch_error_defaults(self):
        """FetchError defaults to status 500 without a URL."""
        error = FetchError("failed")

        assert error.status == 500
        assert error.url is None

    def test_timeout_attributes(self):
        """FetchTimeoutError answers 408 and remembers the timeout."""
        error = FetchTimeoutError("https://example.com", 7.5)

        assert error.status == 408
        assert error.url == "https://example.com"
        assert error.timeout == 7.5
        assert "took too long" in str(error)


class TestFileAccessError:
    """Test cases for FileAccessError."""

    def test_message_with_reason(self):
        """The reason is appended to the message."""
        error = FileAccessError("docs/a.html", "read", "File not found")

        assert str(error) == "Filesystem operation 'read' failed for docs/a.html: File not found"
        assert error.file_path == "docs/a.html"
        assert error.operation == "read"

    def test_message_without_reason(self):
        """Without a reason the message stops at the path."""
        assert str(FileAccessError("out.md", "write")) == "Filesystem operation 'write' failed for out.md"
