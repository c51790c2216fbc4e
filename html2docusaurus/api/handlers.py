"""Request handlers for the conversion and extraction endpoints.

Handlers take the decoded JSON payload and return a ``(body, status)`` tuple,
so they can be exercised without a running server. Errors are reported as
``{"error": message}`` bodies with an HTTP-style status.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from html2docusaurus.converter import convert_html_to_markdown
from html2docusaurus.errors import ConfigError, FetchError, Html2DocusaurusError
from html2docusaurus.fetcher import HtmlExtractor
from html2docusaurus.models import ConversionConfig

logger = logging.getLogger(__name__)

Response = Tuple[Dict[str, Any], int]


def _timestamp() -> str:
    """ISO-8601 UTC timestamp with a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def _error(message: str, status: int) -> Response:
    return {'error': message}, status


def handle_convert_request(payload: Any) -> Response:
    """Convert the ``html`` of a request payload with its optional ``config``.

    Returns:
        (body, status): 200 with markdown, stats, config echo and timestamp;
        400 for missing or blank HTML and invalid config; 500 when the
        conversion fails or produces no output
    """
    if not isinstance(payload, dict):
        return _error('Request body must be a JSON object', 400)

    html = payload.get('html')
    if not html or not isinstance(html, str):
        return _error('HTML content is required', 400)
    if not html.strip():
        return _error('HTML content cannot be empty', 400)

    try:
        config = ConversionConfig.from_dict(payload.get('config'))
    except ConfigError as e:
        return _error(str(e), 400)

    logger.info(f"Converting {len(html)} characters of HTML")
    try:
        result = convert_html_to_markdown(html, config)
    except Html2DocusaurusError as e:
        logger.error(f"Conversion error: {e}")
        return _error(f'Conversion failed: {e}', 500)

    if not result.markdown:
        return _error('Conversion failed - no markdown output generated', 500)

    body = {
        'markdown': result.markdown,
        'stats': result.stats.to_dict(),
        'config': config.to_dict(),
        'convertedAt': _timestamp(),
    }
    if result.warnings:
        body['warnings'] = list(result.warnings)
    return body, 200


def handle_extract_request(payload: Any,
                           extractor: Optional[HtmlExtractor] = None) -> Response:
    """Fetch the page at ``url`` and return its cleaned main content.

    Returns:
        (body, status): 200 with html, title, url, timestamp and content
        length; 400 for a missing or invalid URL and for pages without HTML
        content; 408 on timeout; the upstream status for non-2xx answers;
        500 otherwise
    """
    url = payload.get('url') if isinstance(payload, dict) else None
    extractor = extractor or HtmlExtractor()

    try:
        page = extractor.extract(url)
    except FetchError as e:
        logger.error(f"HTML extraction error: {e}")
        return _error(str(e), e.status)
    except Html2DocusaurusError as e:
        logger.error(f"HTML extraction error: {e}")
        return _error(f'Failed to extract HTML: {e}', 500)

    return {
        'html': page.html,
        'title': page.title,
        'url': page.url,
        'extractedAt': _timestamp(),
        'contentLength': len(page.html),
    }, 200
