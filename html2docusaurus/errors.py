"""Typed exception hierarchy for html2docusaurus errors.

This module defines all custom exceptions used by the conversion engine and
its collaborators. All exceptions inherit from Html2DocusaurusError so callers
can catch any application-level error in one place.
"""

from typing import Optional


class Html2DocusaurusError(Exception):
    """Base exception for all html2docusaurus errors.

    Use this to catch any application-level error from the converter.
    """
    pass


class InputValidationError(Html2DocusaurusError):
    """Raised when the document handed to the engine is not usable input."""

    def __init__(self, message: str):
        super().__init__(message)


class ConfigError(Html2DocusaurusError):
    """Raised when configuration validation fails."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Configuration error in field '{config_field}': {message}"
        else:
            full_message = f"Configuration error: {message}"
        super().__init__(full_message)
        self.config_field = config_field
        self.original_message = message


class ConversionError(Html2DocusaurusError):
    """Raised when the conversion engine fails unexpectedly."""

    def __init__(self, message: str):
        super().__init__(message)


class FetchError(Html2DocusaurusError):
    """Raised when a source document cannot be fetched or extracted.

    Carries the HTTP-style status the request boundary should answer with.
    """

    def __init__(self, message: str, status: int = 500, url: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.url = url


class FetchTimeoutError(FetchError):
    """Raised when the remote page takes longer than the fetch timeout."""

    def __init__(self, url: str, timeout: float):
        super().__init__(
            "Request timeout - the webpage took too long to respond",
            status=408,
            url=url,
        )
        self.timeout = timeout
