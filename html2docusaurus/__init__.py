"""Convert HTML documents into Docusaurus-flavoured Markdown."""

from html2docusaurus.converter import DocusaurusConverter, convert_html_to_markdown
from html2docusaurus.models import ConversionConfig, ConversionResult

__version__ = "0.1.0"

__all__ = [
    'ConversionConfig',
    'ConversionResult',
    'DocusaurusConverter',
    'convert_html_to_markdown',
]
