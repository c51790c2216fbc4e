"""Orchestration of a single HTML to Docusaurus Markdown conversion.

Pipeline: sanitize -> scan statistics -> convert blocks -> post-process ->
MDX imports (when tabs were emitted) -> frontmatter -> final line count.
"""

import logging
from typing import List, Optional

from html2docusaurus.converter.markdown_converter import (
    TABS_OPEN,
    DocusaurusMarkdownConverter,
)
from html2docusaurus.converter.post_processor import post_process
from html2docusaurus.converter.sanitizer import HtmlSanitizer
from html2docusaurus.converter.statistics import StatisticsCollector, count_lines
from html2docusaurus.errors import ConversionError, InputValidationError
from html2docusaurus.frontmatter import FrontmatterGenerator
from html2docusaurus.models import ConversionConfig, ConversionResult, ConversionStats

logger = logging.getLogger(__name__)

TABS_IMPORTS = (
    "import Tabs from '@theme/Tabs';\n"
    "import TabItem from '@theme/TabItem';"
)


class DocusaurusConverter:
    """Converts HTML documents into Docusaurus Markdown.

    A converter holds only its config; every call to convert() builds its
    own parse tree, markdownify converter and statistics accumulator, so one
    instance may be shared freely.
    """

    def __init__(self, config: Optional[ConversionConfig] = None):
        self.config = config or ConversionConfig()

    def convert(self, html: str) -> ConversionResult:
        """Convert an HTML document or fragment.

        Args:
            html: HTML source; may be empty

        Returns:
            ConversionResult with the Markdown, statistics and warnings

        Raises:
            InputValidationError: If html is not a string
            ConversionError: If the engine fails unexpectedly
        """
        if not isinstance(html, str):
            raise InputValidationError(
                f"HTML input must be a string, got {type(html).__name__}"
            )

        stats = ConversionStats(html_lines=len(html.split('\n')))
        if not html.strip():
            return ConversionResult(markdown='', stats=stats.snapshot())

        try:
            body, warnings = self._convert_body(html, stats)
        except ConversionError:
            raise
        except Exception as e:
            logger.error(f"Conversion failed: {e}")
            raise ConversionError(f"HTML conversion failed: {e}") from e

        markdown = body
        if self.config.add_frontmatter:
            document, frontmatter_warnings = FrontmatterGenerator.build(self.config)
            warnings.extend(frontmatter_warnings)
            markdown = FrontmatterGenerator.render(document) + body

        stats.markdown_lines = count_lines(markdown)
        logger.info(
            f"Converted {stats.html_lines} HTML line(s) into "
            f"{stats.markdown_lines} Markdown line(s)"
        )
        return ConversionResult(
            markdown=markdown,
            stats=stats.snapshot(),
            warnings=warnings,
        )

    def _convert_body(self, html: str, stats: ConversionStats):
        soup = HtmlSanitizer.sanitize(html)
        stats.add(StatisticsCollector.scan(soup))

        converter = DocusaurusMarkdownConverter(self.config)
        body = post_process(converter.convert_soup(soup))

        if TABS_OPEN in body.split('\n'):
            body = post_process(TABS_IMPORTS + '\n\n' + body)

        # A leading '---' would be read as a frontmatter delimiter
        if body.startswith('---'):
            body = '\\' + body

        warnings: List[str] = list(converter.warnings)
        return body, warnings


def convert_html_to_markdown(
    html: str,
    config: Optional[ConversionConfig] = None,
) -> ConversionResult:
    """Convert HTML to Docusaurus Markdown with the given config.

    Args:
        html: HTML source
        config: Conversion options; defaults apply when omitted

    Returns:
        ConversionResult with the Markdown, statistics and warnings
    """
    return DocusaurusConverter(config).convert(html)
