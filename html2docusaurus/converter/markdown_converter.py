"""markdownify converter with the Docusaurus block rules.

Each ``convert_<tag>`` method receives its own subtree with the children
already converted, so nesting (a table inside a callout, a list inside a
table cell, a link inside a list item) falls out of the tree walk. Rules that
need a different view of their children (table cells, callout bodies, tab
panes) convert them again on demand through ``process_tag``.
"""

import copy
import json
import logging
import re
from typing import List, Optional

from bs4 import Comment, Tag
from markdownify import MarkdownConverter as BaseMarkdownConverter
from markdownify import strip_pre

from html2docusaurus.converter.classifiers import (
    CALLOUT_CHROME_SELECTOR,
    classify_callout,
    classify_text,
    detect_code_language,
    find_callout_text,
    find_tab_headers,
    find_tab_panes,
    is_callout_div,
    is_tab_container,
)
from html2docusaurus.converter.inline_formatter import InlineFormatter
from html2docusaurus.converter.tables import (
    TableRow,
    chunk_cells,
    clean_cell,
    flatten_payload_cell,
    parse_table_payload,
    render_pipe_table,
)
from html2docusaurus.models import ConversionConfig

logger = logging.getLogger(__name__)

re_all_whitespace = re.compile(r'\s+')
re_repeated_spaces = re.compile(r' {2,}')
re_backtick_run = re.compile(r'`+')

# Children that start a new paragraph when a blockquote is flattened
FLATTENED_BLOCK_TAGS = frozenset({
    'p', 'div', 'section', 'article', 'ul', 'ol', 'li', 'pre', 'table',
    'blockquote', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
})

TABS_OPEN = '<Tabs>'
TABS_CLOSE = '</Tabs>'


def collapse_whitespace(text: str) -> str:
    return re_all_whitespace.sub(' ', text or '').strip()


def code_fence(body: str) -> str:
    """Backtick fence longer than any backtick run inside the code."""
    longest = max((len(run) for run in re_backtick_run.findall(body)), default=0)
    return '`' * max(3, longest + 1)


def flatten_text(element: Tag) -> List[str]:
    """Plain-text paragraphs of an element, one per block child."""
    paragraphs = []
    inline_parts = []

    def flush():
        text = collapse_whitespace(''.join(inline_parts))
        inline_parts.clear()
        if text:
            paragraphs.append(text)

    for child in element.children:
        if isinstance(child, Comment):
            continue
        if isinstance(child, Tag) and child.name in FLATTENED_BLOCK_TAGS:
            flush()
            text = collapse_whitespace(child.get_text())
            if text:
                paragraphs.append(text)
        elif isinstance(child, Tag):
            inline_parts.append(child.get_text())
        else:
            inline_parts.append(str(child))
    flush()
    return paragraphs


class DocusaurusMarkdownConverter(InlineFormatter, BaseMarkdownConverter):
    """markdownify converter emitting Docusaurus-flavoured Markdown.

    The feature switches of a ConversionConfig are passed through as
    converter options. Non-fatal problems (an unparseable table payload)
    are collected in ``warnings``.
    """

    def __init__(self, config: Optional[ConversionConfig] = None, **options):
        config = config or ConversionConfig()
        options.setdefault('heading_style', 'atx')
        options.setdefault('bullets', '-')
        options.setdefault('strong_em_symbol', '*')
        options.setdefault('escape_asterisks', False)
        options.setdefault('escape_underscores', False)
        options.setdefault('autolinks', False)
        options.setdefault('convert_tabs', config.convert_tabs)
        options.setdefault('convert_admonitions', config.convert_admonitions)
        options.setdefault('convert_code_blocks', config.convert_code_blocks)
        options.setdefault('process_images', config.process_images)
        super().__init__(**options)
        self.warnings: List[str] = []

    def _is_in_table_cell(self, parent_tags):
        return 'td' in parent_tags or 'th' in parent_tags

    def _convert_children(self, el, parent_tags):
        """Convert an element's children without applying its own rule."""
        child_tags = set(parent_tags)
        child_tags.add(el.name)
        return ''.join(
            self.process_element(child, parent_tags=child_tags)
            for child in el.children
            if not isinstance(child, Comment)
        )

    # Headings, paragraphs and breaks

    def convert_hN(self, n, el, text, parent_tags):
        text = collapse_whitespace(el.get_text())
        if '_inline' in parent_tags:
            return text
        if not text:
            return ''
        return '\n\n%s %s\n\n' % ('#' * max(1, min(6, n)), text)

    def convert_p(self, el, text, parent_tags):
        text = text.strip(' \t\r\n')
        if not text:
            return ''
        if self._is_in_table_cell(parent_tags):
            return text + '<br>'
        if '_inline' in parent_tags or 'li' in parent_tags:
            return ' ' + text + ' '
        return '\n\n%s\n\n' % text

    def convert_br(self, el, text, parent_tags):
        if self._is_in_table_cell(parent_tags):
            return '<br>'
        if '_inline' in parent_tags:
            return ' '
        return '\n'

    def convert_hr(self, el, text, parent_tags):
        # A leading '---' would be read as a frontmatter delimiter
        return '\n\n***\n\n'

    # Lists

    def convert_list(self, el, text, parent_tags):
        if self._is_in_table_cell(parent_tags):
            return text
        if 'li' in parent_tags:
            # Nested items follow their parent item without extra indentation
            return '\n' + text.strip() + '\n'
        return '\n\n' + text + '\n\n'

    convert_ul = convert_list
    convert_ol = convert_list

    def convert_li(self, el, text, parent_tags):
        text = (text or '').strip()
        if not text:
            return ''
        if el.find('p', recursive=False) is not None:
            # Paragraphs joined inline leave doubled spaces at their seams
            text = re_repeated_spaces.sub(' ', text)
        parent = el.parent
        if parent is not None and parent.name == 'ol':
            marker = '%d.' % (1 + len(el.find_previous_siblings('li')))
        else:
            marker = '-'
        if self._is_in_table_cell(parent_tags):
            if marker == '-':
                marker = '•'
            return '<br>%s %s' % (marker, text)
        return '%s %s\n' % (marker, text)

    # Tables

    def convert_td(self, el, text, parent_tags):
        return text

    convert_th = convert_td

    def convert_tr(self, el, text, parent_tags):
        # Rows are assembled by convert_table
        return ''

    def _convert_cell(self, cell, parent_tags) -> str:
        return clean_cell(self.process_tag(cell, parent_tags=parent_tags))

    def _table_block(self, rows: List[TableRow]) -> str:
        table = render_pipe_table(rows)
        return '\n\n' + table + '\n\n' if table else ''

    def convert_table(self, el, text, parent_tags):
        cell_tags = set(parent_tags) | {el.name, 'tr'}
        rows = []
        for tr in el.find_all('tr'):
            # Rows of a nested table belong to that table's own rule
            if tr.find_parent('table') is not el:
                continue
            cells = tr.find_all(['th', 'td'], recursive=False)
            row = [self._convert_cell(cell, cell_tags) for cell in cells]
            if row:
                rows.append(row)
        return self._table_block(rows)

    def _convert_payload_cell(self, cell) -> str:
        if not isinstance(cell, str):
            return ''
        return flatten_payload_cell(self.convert(cell))

    def convert_app_table(self, el, text, parent_tags):
        payload = el.get('pluginobject')
        if payload:
            try:
                rows = parse_table_payload(payload)
            except ValueError as e:
                message = f"Could not parse table payload: {e}"
                logger.warning(message)
                self.warnings.append(message)
            else:
                block = self._table_block(
                    [[self._convert_payload_cell(cell) for cell in row] for row in rows]
                )
                if block:
                    return block

        table = el.find('table')
        if table is not None:
            return self.process_tag(table, parent_tags=set(parent_tags) | {el.name})

        return self._convert_bare_cells(el, parent_tags)

    def _convert_bare_cells(self, el, parent_tags):
        headers = el.find_all('th')
        data_cells = el.find_all('td')
        if not headers or not data_cells:
            return ''

        cell_tags = set(parent_tags) | {el.name, 'tr'}
        row_elements = el.find_all('tr')
        if row_elements:
            rows = [
                [self._convert_cell(cell, cell_tags) for cell in tr.find_all(['th', 'td'])]
                for tr in row_elements
            ]
        else:
            rows = chunk_cells(
                [self._convert_cell(cell, cell_tags) for cell in headers],
                [self._convert_cell(cell, cell_tags) for cell in data_cells],
            )
        return self._table_block(rows)

    # Code

    def convert_pre(self, el, text, parent_tags):
        code = el.find('code')
        language = ''
        if self.options['convert_code_blocks']:
            language = detect_code_language(code, el)

        body = strip_pre(el.get_text())
        if not body.strip():
            return ''
        if '_inline' in parent_tags:
            return '`%s`' % collapse_whitespace(body)
        fence = code_fence(body)
        return '\n\n%s%s\n%s\n%s\n\n' % (fence, language, body, fence)

    # Callouts

    def _admonition_block(self, admonition: str, title: str, body: str) -> str:
        body = body.strip()
        if not body and not title:
            return ''

        if not self.options['convert_admonitions']:
            lines = ([title] if title else []) + (body.split('\n') if body else [])
            quoted = '\n'.join('> ' + line if line.strip() else '>' for line in lines)
            return '\n\n' + quoted + '\n\n'

        header = ':::' + admonition + (' ' + title if title else '')
        if not body:
            return '\n\n%s\n\n:::\n\n' % header
        return '\n\n%s\n\n%s\n\n:::\n\n' % (header, body)

    def _callout_title(self, el) -> str:
        payload = el.get('pluginobject')
        if payload:
            try:
                data = json.loads(payload)
            except ValueError:
                logger.debug("Ignoring unparseable callout payload")
            else:
                title = data.get('title') if isinstance(data, dict) else None
                if isinstance(title, str) and title.strip():
                    return collapse_whitespace(title)

        title_element = el.select_one('.callout-title')
        if title_element is not None:
            return collapse_whitespace(title_element.get_text())
        return ''

    def _callout_body(self, el, parent_tags) -> str:
        text_element = find_callout_text(el)
        if text_element is not None:
            return self._convert_children(text_element, parent_tags)

        # Work on a detached copy so the chrome stays in the source tree
        body = copy.copy(el)
        for chrome in body.select(CALLOUT_CHROME_SELECTOR):
            chrome.decompose()
        return self._convert_children(body, parent_tags)

    def _render_callout(self, el, parent_tags):
        body = self._callout_body(el, parent_tags)
        if '_inline' in parent_tags:
            return ' ' + collapse_whitespace(body) + ' '
        admonition = classify_callout(el)
        return self._admonition_block(admonition.value, self._callout_title(el), body)

    def convert_app_callout(self, el, text, parent_tags):
        return self._render_callout(el, parent_tags)

    def convert_blockquote(self, el, text, parent_tags):
        paragraphs = flatten_text(el)
        if '_inline' in parent_tags:
            return ' ' + ' '.join(paragraphs) + ' '
        if not paragraphs:
            return ''
        admonition = classify_text(' '.join(paragraphs))
        return self._admonition_block(admonition.value, '', '\n\n'.join(paragraphs))

    # Tabs

    def _render_tabs(self, el, parent_tags) -> Optional[str]:
        headers = find_tab_headers(el)
        if not headers:
            return None

        panes = find_tab_panes(el)
        items = []
        for index, header in enumerate(headers):
            label = collapse_whitespace(header.get_text()) or f"Tab {index + 1}"
            content = ''
            if index < len(panes):
                content = self._convert_children(panes[index], parent_tags).strip()
            items.append(
                '<TabItem value="tab%d" label="%s">\n\n%s\n\n</TabItem>'
                % (index, label.replace('"', '&quot;'), content)
            )

        logger.debug(f"Converted tab group with {len(items)} tab(s)")
        return '\n\n%s\n%s\n%s\n\n' % (TABS_OPEN, '\n'.join(items), TABS_CLOSE)

    def convert_div(self, el, text, parent_tags):
        if '_inline' not in parent_tags:
            if self.options['convert_tabs'] and is_tab_container(el):
                tabs = self._render_tabs(el, parent_tags)
                if tabs is not None:
                    return tabs
        if is_callout_div(el):
            return self._render_callout(el, parent_tags)
        return super().convert_div(el, text, parent_tags)
