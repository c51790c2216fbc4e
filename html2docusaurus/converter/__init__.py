"""HTML to Docusaurus Markdown conversion engine."""

from html2docusaurus.converter.engine import (
    DocusaurusConverter,
    convert_html_to_markdown,
)
from html2docusaurus.converter.markdown_converter import DocusaurusMarkdownConverter
from html2docusaurus.converter.post_processor import post_process
from html2docusaurus.converter.sanitizer import HtmlSanitizer
from html2docusaurus.converter.statistics import StatisticsCollector

__all__ = [
    'DocusaurusConverter',
    'DocusaurusMarkdownConverter',
    'HtmlSanitizer',
    'StatisticsCollector',
    'convert_html_to_markdown',
    'post_process',
]
