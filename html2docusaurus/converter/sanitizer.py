"""Removal of non-content markup before conversion.

Scripts, styles, comments and navigational boilerplate never reach the
Markdown rules. The parser decodes HTML entities while building the tree, so
every later rule reads decoded text.
"""

import logging
import re

from bs4 import BeautifulSoup, Comment

logger = logging.getLogger(__name__)


class HtmlSanitizer:
    """Strips boilerplate regions from an HTML document.

    Each call parses its own tree; the input string is never modified and no
    state is kept between calls.
    """

    # Parser shared with the markdownify converter so both see the same tree
    PARSER = "html.parser"

    REMOVED_TAGS = ("script", "style", "nav", "footer")

    BOILERPLATE_CLASS_PATTERN = re.compile(
        r"sidebar|navigation|menu|breadcrumb",
        re.IGNORECASE
    )

    # Never removed, even with a matching class, so the document survives
    PROTECTED_TAGS = ("html", "body", "[document]")

    @classmethod
    def sanitize(cls, html: str) -> BeautifulSoup:
        """Parse HTML and drop non-content elements.

        Args:
            html: Raw HTML document or fragment

        Returns:
            BeautifulSoup tree with boilerplate removed
        """
        soup = BeautifulSoup(html, cls.PARSER)

        for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
            comment.extract()

        for element in soup.find_all(cls.REMOVED_TAGS):
            element.decompose()

        removed = 0
        for element in soup.find_all(cls._is_boilerplate):
            # decompose() on an ancestor already detached this element
            if element.decomposed:
                continue
            element.decompose()
            removed += 1

        if removed:
            logger.debug(f"Removed {removed} boilerplate element(s)")

        return soup

    @classmethod
    def clean(cls, html: str) -> str:
        """Return the sanitized document serialized back to HTML."""
        return str(cls.sanitize(html))

    @classmethod
    def _is_boilerplate(cls, tag) -> bool:
        if tag.name in cls.PROTECTED_TAGS:
            return False
        classes = tag.get("class")
        if not classes:
            return False
        return bool(cls.BOILERPLATE_CLASS_PATTERN.search(" ".join(classes)))
