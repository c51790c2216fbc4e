"""Flask application exposing the converter over HTTP.

Endpoints:
    POST /api/convert       {"html": "...", "config": {...}} -> Markdown
    POST /api/extract-html  {"url": "..."} -> cleaned main-content HTML

Both answer OPTIONS preflight requests with permissive CORS headers.
"""

import logging
from typing import Optional

from flask import Flask, jsonify, request

from html2docusaurus.api.handlers import handle_convert_request, handle_extract_request
from html2docusaurus.fetcher import HtmlExtractor
from html2docusaurus.settings import Settings

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': 'POST, OPTIONS',
    'Access-Control-Allow-Headers': 'Content-Type',
}


def create_app(settings: Optional[Settings] = None,
               extractor: Optional[HtmlExtractor] = None) -> Flask:
    """Build the Flask app.

    Args:
        settings: Process settings; used for the fetch timeout and user agent
        extractor: HtmlExtractor to use for /api/extract-html (built from
            settings when omitted)
    """
    settings = settings or Settings()
    extractor = extractor or HtmlExtractor(settings)

    app = Flask(__name__)

    @app.after_request
    def add_cors_headers(response):
        response.headers.update(CORS_HEADERS)
        return response

    @app.route("/api/convert", methods=["POST", "OPTIONS"])
    def convert():
        """Convert HTML to Docusaurus Markdown"""
        if request.method == "OPTIONS":
            return "", 200
        body, status = handle_convert_request(request.get_json(silent=True))
        return jsonify(body), status

    @app.route("/api/extract-html", methods=["POST", "OPTIONS"])
    def extract_html():
        """Extract the main content of a web page"""
        if request.method == "OPTIONS":
            return "", 200
        body, status = handle_extract_request(request.get_json(silent=True), extractor)
        return jsonify(body), status

    return app


def run_server(settings: Optional[Settings] = None) -> None:
    """Serve the app with Flask's built-in server."""
    settings = settings or Settings.load()
    logger.info(f"Serving on http://{settings.host}:{settings.port}")
    create_app(settings).run(host=settings.host, port=settings.port)
