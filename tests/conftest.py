"""Root pytest configuration for all tests."""

import logging

import pytest

from html2docusaurus.models import ConversionConfig


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attaches so they never outlive a CliRunner stream."""
    yield
    package_logger = logging.getLogger("html2docusaurus")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def body_only_config():
    """Config that converts the body without prepending frontmatter."""
    return ConversionConfig(add_frontmatter=False)
