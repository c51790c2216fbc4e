"""Fetch-and-clean collaborator for web pages."""

from html2docusaurus.fetcher.html_extractor import ExtractedPage, HtmlExtractor

__all__ = ['ExtractedPage', 'HtmlExtractor']
