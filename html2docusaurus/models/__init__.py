"""Data models for conversion configuration, results and statistics."""

from html2docusaurus.models.admonition_type import AdmonitionType
from html2docusaurus.models.conversion_config import ConversionConfig
from html2docusaurus.models.conversion_result import (
    ConversionResult,
    ConversionStats,
    StatsDelta,
    StatsSnapshot,
)

__all__ = [
    'AdmonitionType',
    'ConversionConfig',
    'ConversionResult',
    'ConversionStats',
    'StatsDelta',
    'StatsSnapshot',
]
