"""HTTP boundary: request handlers and the Flask app."""

from html2docusaurus.api.handlers import handle_convert_request, handle_extract_request
from html2docusaurus.api.server import create_app, run_server

__all__ = [
    'create_app',
    'handle_convert_request',
    'handle_extract_request',
    'run_server',
]
