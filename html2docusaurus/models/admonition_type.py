"""Admonition type enumeration."""

from enum import Enum


class AdmonitionType(str, Enum):
    """Docusaurus admonition kinds.

    The value is the keyword written after the ``:::`` fence.
    """
    NOTE = "note"
    TIP = "tip"
    WARNING = "warning"
    DANGER = "danger"
    INFO = "info"

    @classmethod
    def default(cls) -> 'AdmonitionType':
        return cls.NOTE
