"""Typed exception hierarchy for CLI-related errors.

All exceptions inherit from CLIError so the command can map them to an exit
code in one place.
"""

from typing import Optional

from html2docusaurus.errors import Html2DocusaurusError


class CLIError(Html2DocusaurusError):
    """Base exception for all CLI-related errors."""
    pass


class FileAccessError(CLIError):
    """Raised when a source or output file cannot be read or written."""

    def __init__(self, file_path: str, operation: str, reason: Optional[str] = None):
        message = f"Filesystem operation '{operation}' failed for {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.operation = operation
        self.reason = reason
