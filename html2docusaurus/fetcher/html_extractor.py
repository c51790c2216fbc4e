"""Fetching a web page and extracting its main content as HTML.

The extractor downloads a page with a bounded timeout, picks the region that
most likely holds the document body and strips scripts, styles, comments and
tracking markup from it. The result is plain HTML ready for the converter.
"""

import logging
import re
from typing import NamedTuple, Optional
from urllib.parse import urlparse

import requests
from bs4 import BeautifulSoup, Comment
from requests.exceptions import ConnectionError, Timeout

from html2docusaurus.errors import FetchError, FetchTimeoutError
from html2docusaurus.settings import Settings

logger = logging.getLogger(__name__)


class ExtractedPage(NamedTuple):
    """Main content of a fetched page."""
    html: str
    title: str
    url: str


class HtmlExtractor:
    """Downloads pages and extracts their main content.

    Example:
        >>> extractor = HtmlExtractor()
        >>> page = extractor.extract("https://example.com/docs/intro")
        >>> print(page.title)
    """

    PARSER = "lxml"

    # Tried in order; the first match with non-blank content wins
    CONTENT_SELECTORS = (
        'main',
        '[role="main"]',
        '.main-content',
        '.content',
        '.post-content',
        '.entry-content',
        '.article-content',
        '.documentation',
        '.docs',
        '.markdown-body',
        'article',
        '.container .row .col',
        '#content',
        '#main',
    )

    # Removed from <body> when no content region matched
    BOILERPLATE_SELECTORS = (
        'nav',
        'header',
        'footer',
        '.navigation',
        '.navbar',
        '.sidebar',
        '.menu',
        '.breadcrumb',
        '.ad',
        '.advertisement',
        '.social',
        '.share',
        '.related',
        '.comments',
        'script',
        'style',
        'noscript',
    )

    TRACKING_PATTERN = re.compile(
        r'google-analytics|gtag|facebook|twitter|linkedin',
        re.IGNORECASE
    )

    DEFAULT_TITLE = "Untitled"

    def __init__(self, settings: Optional[Settings] = None,
                 session: Optional[requests.Session] = None):
        self._settings = settings or Settings()
        self._session = session or requests.Session()

    def _headers(self):
        return {
            'User-Agent': self._settings.user_agent,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.5',
            'Cache-Control': 'no-cache',
            'Pragma': 'no-cache',
        }

    @staticmethod
    def validate_url(url) -> str:
        """Return the URL stripped, or raise FetchError(400) if unusable."""
        if not url or not isinstance(url, str) or not url.strip():
            raise FetchError("URL is required", status=400)
        url = url.strip()
        parsed = urlparse(url)
        if parsed.scheme not in ('http', 'https') or not parsed.netloc:
            raise FetchError("Invalid URL format", status=400, url=url)
        return url

    def fetch(self, url: str) -> str:
        """Download a page and return its HTML text.

        Raises:
            FetchTimeoutError: If the page does not answer within the timeout
            FetchError: On connection failures, non-2xx answers or non-HTML content
        """
        url = self.validate_url(url)
        timeout = self._settings.fetch_timeout
        logger.info(f"Fetching HTML from {url}")

        try:
            response = self._session.get(url, headers=self._headers(), timeout=timeout)
        except Timeout:
            raise FetchTimeoutError(url, timeout)
        except ConnectionError as e:
            logger.debug(f"Connection to {url} failed: {e}")
            raise FetchError("Cannot connect to the specified URL", status=400, url=url)
        except requests.RequestException as e:
            raise FetchError(f"Failed to extract HTML: {e}", status=500, url=url)

        if not response.ok:
            raise FetchError(
                f"Failed to fetch URL: HTTP {response.status_code}",
                status=response.status_code,
                url=url,
            )

        content_type = response.headers.get('Content-Type', '')
        if 'text/html' not in content_type:
            raise FetchError("URL does not return HTML content", status=400, url=url)

        if not response.text or not response.text.strip():
            raise FetchError("No HTML content found at URL", status=400, url=url)
        return response.text

    def extract(self, url: str) -> ExtractedPage:
        """Fetch a page and extract its cleaned main content.

        Args:
            url: Absolute http(s) URL of the page

        Returns:
            ExtractedPage with the cleaned HTML, page title and URL

        Raises:
            FetchTimeoutError: If the page does not answer within the timeout
            FetchError: If the page cannot be fetched or holds no content
        """
        url = self.validate_url(url)
        page_html = self.fetch(url)
        page = self.extract_from_html(page_html, url)
        logger.info(f"Extracted {len(page.html)} characters from {url}")
        return page

    def extract_from_html(self, page_html: str, url: str = '') -> ExtractedPage:
        """Extract the main content of an already downloaded page."""
        soup = BeautifulSoup(page_html, self.PARSER)

        title = self.DEFAULT_TITLE
        if soup.title is not None and soup.title.get_text(strip=True):
            title = soup.title.get_text(strip=True)

        content = self._select_content(soup)
        if not content.strip():
            raise FetchError("No meaningful content found on the page", status=400, url=url)

        return ExtractedPage(html=self.clean_html(content), title=title, url=url)

    def _select_content(self, soup: BeautifulSoup) -> str:
        for selector in self.CONTENT_SELECTORS:
            element = soup.select_one(selector)
            if element is not None and element.decode_contents().strip():
                logger.debug(f"Main content matched selector {selector!r}")
                return element.decode_contents()

        body = soup.body or soup
        for selector in self.BOILERPLATE_SELECTORS:
            for element in body.select(selector):
                if not element.decomposed:
                    element.decompose()
        return body.decode_contents()

    @classmethod
    def clean_html(cls, html: str) -> str:
        """Strip scripts, styles, comments and tracking markup from a fragment."""
        soup = BeautifulSoup(html, "html.parser")

        for element in soup.find_all(['script', 'style']):
            element.decompose()
        for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
            comment.extract()

        # Tracking tags go, their text content stays
        for element in soup.find_all(cls._is_tracking):
            element.unwrap()

        return str(soup).strip()

    @classmethod
    def _is_tracking(cls, tag) -> bool:
        for value in tag.attrs.values():
            if isinstance(value, list):
                value = ' '.join(value)
            if cls.TRACKING_PATTERN.search(str(value)):
                return True
        return False
