"""YAML frontmatter generation for Docusaurus documents.

The frontmatter block sits between ``---`` delimiters at the top of the
document. Standard Docusaurus fields come first in a fixed order, followed by
any custom ``key: value`` lines the caller supplied:

    ---
    title: "Getting Started"
    sidebar_position: 1
    tags:
      - setup
    ---

Scalar strings are always double-quoted; list items are written plain.
"""

import logging
from typing import Any, Dict, List, Tuple

import yaml

from html2docusaurus.models import ConversionConfig

logger = logging.getLogger(__name__)

# Ordered mapping of frontmatter key -> scalar or list of strings
FrontmatterDocument = Dict[str, Any]


class _QuotedScalar(str):
    """String rendered in double quotes."""


class _FrontmatterDumper(yaml.SafeDumper):
    """SafeDumper that indents block sequences under their key."""

    def increase_indent(self, flow=False, indentless=False):
        return super().increase_indent(flow, False)


def _represent_quoted(dumper, data):
    return dumper.represent_scalar('tag:yaml.org,2002:str', str(data), style='"')


_FrontmatterDumper.add_representer(_QuotedScalar, _represent_quoted)


class FrontmatterGenerator:
    """Builds the YAML frontmatter block for a conversion config.

    Falsy fields are left out. Custom lines are parsed leniently: a line
    without a key before its first colon is skipped with a warning, and a
    custom key that repeats a standard key replaces that value in place so
    the YAML never holds duplicate keys.
    """

    DELIMITER = '---'

    # (frontmatter key, config attribute) in output order
    STANDARD_FIELDS = (
        ('title', 'title'),
        ('description', 'description'),
        ('sidebar_position', 'sidebar_position'),
        ('sidebar_label', 'sidebar_label'),
        ('slug', 'slug'),
        ('tags', 'tags'),
        ('keywords', 'keywords'),
    )

    @classmethod
    def build(cls, config: ConversionConfig) -> Tuple[FrontmatterDocument, List[str]]:
        """Collect frontmatter fields in output order.

        Args:
            config: Conversion config holding the frontmatter values

        Returns:
            Tuple of (ordered document, warnings for skipped custom lines)
        """
        document: FrontmatterDocument = {}
        for key, attribute in cls.STANDARD_FIELDS:
            value = getattr(config, attribute)
            if not value:
                continue
            if isinstance(value, tuple):
                document[key] = list(value)
            else:
                document[key] = value

        warnings = cls._merge_custom(document, config.custom_frontmatter)
        return document, warnings

    @classmethod
    def _merge_custom(cls, document: FrontmatterDocument, custom: str) -> List[str]:
        warnings = []
        for line in (custom or '').split('\n'):
            if not line.strip():
                continue
            key, separator, value = line.partition(':')
            key = key.strip()
            if not separator or not key:
                message = f"Skipping custom frontmatter line without a key: {line.strip()!r}"
                logger.warning(message)
                warnings.append(message)
                continue

            value = value.strip()
            if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
                value = value[1:-1]
            document[key] = value
        return warnings

    @classmethod
    def render(cls, document: FrontmatterDocument) -> str:
        """Render a document as a delimited YAML block, or '' when empty."""
        if not document:
            return ''

        prepared = {
            key: _QuotedScalar(value) if isinstance(value, str) else value
            for key, value in document.items()
        }
        body = yaml.dump(
            prepared,
            Dumper=_FrontmatterDumper,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            width=float('inf'),
        )
        return f"{cls.DELIMITER}\n{body}{cls.DELIMITER}\n\n"

    @classmethod
    def generate(cls, config: ConversionConfig) -> str:
        """Return the frontmatter block for a config, or '' when no field is set."""
        document, _ = cls.build(config)
        return cls.render(document)
