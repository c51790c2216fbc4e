"""Inline Markdown rules shared by every block rule.

Links, images and inline code are handled here; strong/emphasis come from
markdownify's own inline conversion configured with ``*`` delimiters. Block
rules get these for free because markdownify converts children before the
parent, so a link inside a list item or a table cell is already Markdown when
the block rule sees it.
"""

import re

from markdownify import chomp

re_uri_scheme = re.compile(r'^[a-zA-Z][a-zA-Z0-9+.\-]*:')

ASSETS_PREFIX = './assets/'


def is_absolute_source(src: str) -> bool:
    """True for sources with a URI scheme or a protocol-relative host."""
    return bool(re_uri_scheme.match(src)) or src.startswith('//')


def rewrite_image_source(src: str) -> str:
    """Point relative image sources at the Docusaurus ``./assets/`` folder."""
    if not src or is_absolute_source(src):
        return src
    return ASSETS_PREFIX + src


def _title_part(title: str) -> str:
    return ' "%s"' % title.replace('"', r'\"') if title else ''


class InlineFormatter:
    """markdownify mixin with the Docusaurus inline rules.

    Expects the converter options to carry ``process_images``.
    """

    def convert_a(self, el, text, parent_tags):
        if '_noformat' in parent_tags:
            return text
        prefix, suffix, text = chomp(text)
        if not text:
            return ''
        href = (el.get('href') or '').strip()
        if not href:
            return '%s%s%s' % (prefix, text, suffix)
        title_part = _title_part(el.get('title') or '')
        return '%s[%s](%s%s)%s' % (prefix, text, href, title_part, suffix)

    def convert_img(self, el, text, parent_tags):
        alt = el.attrs.get('alt', None) or ''
        src = (el.attrs.get('src', None) or '').strip()
        if not src:
            return alt
        if self.options.get('process_images'):
            src = rewrite_image_source(src)
        title_part = _title_part(el.attrs.get('title', None) or '')
        # Images stay images inside table cells
        return '![%s](%s%s)' % (alt, src, title_part)

    def convert_code(self, el, text, parent_tags):
        # Backticks inside the span are not re-escaped
        if '_noformat' in parent_tags:
            return text
        prefix, suffix, text = chomp(text)
        if not text:
            return ''
        return '%s`%s`%s' % (prefix, text, suffix)
