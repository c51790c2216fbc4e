"""Command-line interface for HTML to Docusaurus conversion.

This package provides the `html2docusaurus` CLI tool: converting HTML files
or fetched web pages to Markdown, and serving the HTTP API.
"""

from .config_loader import ConfigLoader
from .errors import CLIError, FileAccessError
from .models import ExitCode
from .output import OutputHandler

__all__ = [
    'CLIError',
    'ConfigLoader',
    'ExitCode',
    'FileAccessError',
    'OutputHandler',
]
