"""Conversion statistics gathered from the sanitized tree."""

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup, Tag

from html2docusaurus.converter.tables import parse_table_payload
from html2docusaurus.models import StatsDelta

logger = logging.getLogger(__name__)

re_tag = re.compile(r'<[^>]+>')


def _renders_rows(component: Tag) -> bool:
    """True when a table component has a payload row or bare header and data cells."""
    payload = component.get('pluginobject')
    if payload:
        try:
            rows = parse_table_payload(payload)
        except ValueError:
            rows = []
        if any(rows):
            return True
    return bool(component.find('th')) and bool(component.find('td'))


def count_lines(text: str) -> int:
    """Number of newline-separated lines; empty text has none."""
    if not text:
        return 0
    return len(text.split('\n'))


class StatisticsCollector:
    """Counts links, images and tables before the tree is converted.

    Scanning once up front means every element is counted exactly once, no
    matter how many times a rule re-renders its subtree.
    """

    @classmethod
    def scan(cls, soup: BeautifulSoup, html: Optional[str] = None) -> StatsDelta:
        """Count convertible elements of a sanitized document.

        Args:
            soup: Sanitized tree
            html: Serialization of that tree; derived from it when omitted

        Returns:
            StatsDelta with the element, link, image and table counts
        """
        serialized = str(soup) if html is None else html

        links = len(soup.find_all('a', href=True))
        images = len(soup.find_all('img', src=True))
        tables = len(soup.find_all('table'))
        # Table components without an inner <table> count once they can render rows
        tables += sum(
            1 for component in soup.find_all('app-table')
            if component.find('table') is None and _renders_rows(component)
        )
        # Raw tag occurrences, closing tags included
        elements = len(re_tag.findall(serialized))

        logger.debug(
            f"Scanned {elements} tag(s): {links} link(s), {images} image(s), "
            f"{tables} table(s)"
        )
        return StatsDelta(
            elements_converted=elements,
            links_found=links,
            images_found=images,
            tables_found=tables,
        )
