"""Docusaurus frontmatter generation."""

from html2docusaurus.frontmatter.frontmatter_generator import (
    FrontmatterDocument,
    FrontmatterGenerator,
)

__all__ = ['FrontmatterDocument', 'FrontmatterGenerator']
