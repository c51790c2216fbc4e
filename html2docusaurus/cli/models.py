"""Data models for CLI operations."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Conversion completed
    - GENERAL_ERROR (1): Config problems or unexpected failures
    - INPUT_ERROR (2): Source document missing, unreadable or not convertible
    - NETWORK_ERROR (4): Source URL could not be fetched

    Example:
        >>> raise typer.Exit(ExitCode.INPUT_ERROR)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    INPUT_ERROR = 2
    NETWORK_ERROR = 4
