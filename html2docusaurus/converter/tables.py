"""Pipe-table rendering and table payload helpers.

Markdown tables cannot hold raw newlines inside a cell, so every cell is
flattened to a single line (line breaks survive as ``<br>`` markers) and
literal pipes are escaped before the row is written.
"""

import json
import re
from typing import Any, List, Sequence

TableRow = List[str]

re_whitespace = re.compile(r'\s+')
re_payload_bullet = re.compile(r'\n-\s+')
re_payload_number = re.compile(r'\n\d+\.\s+')
re_blank_lines = re.compile(r'\n{2,}')
re_repeated_breaks = re.compile(r'(?:<br>\s*){2,}')

SEPARATOR_CELL = '---'


def clean_cell(text: str) -> str:
    """Flatten converted cell content to one escaped line."""
    cell_text = re_whitespace.sub(' ', text or '').strip()
    cell_text = re_repeated_breaks.sub('<br>', cell_text)
    # Trailing <br> markers carry no content (removesuffix, not rstrip)
    while cell_text.endswith('<br>'):
        cell_text = cell_text.removesuffix('<br>').rstrip()
    return cell_text.replace('|', '\\|')


def flatten_payload_cell(markdown: str) -> str:
    """Flatten a converted payload cell, turning list lines into ``; `` runs."""
    text = (markdown or '').strip()
    if '\n' in text:
        text = re_payload_bullet.sub('; ', text)
        text = re_payload_number.sub('; ', text)
        text = re_blank_lines.sub(' ', text)
        text = text.replace('\n', ' ')
    text = re_whitespace.sub(' ', text).strip()
    return text.replace('|', '\\|')


def format_row(cells: Sequence[str]) -> str:
    return '| ' + ' | '.join(cells) + ' |'


def render_pipe_table(rows: Sequence[TableRow]) -> str:
    """Render rows as a pipe table; the first row is always the header.

    The separator row matches the header's column count even when the
    source had no semantic header.

    Returns:
        Table lines joined by newlines, or an empty string when no row has cells
    """
    rows = [row for row in rows if row]
    if not rows:
        return ''

    header = rows[0]
    lines = [format_row(header), format_row([SEPARATOR_CELL] * len(header))]
    lines.extend(format_row(row) for row in rows[1:])
    return '\n'.join(lines)


def parse_table_payload(raw: str) -> List[List[Any]]:
    """Extract the rows of a serialized table component payload.

    The payload is either a JSON list of rows or an object whose
    ``data.contents`` holds that list.

    Raises:
        ValueError: If the payload is not JSON or holds no row list
    """
    data = json.loads(raw)
    if isinstance(data, dict):
        inner = data.get('data')
        data = inner.get('contents') if isinstance(inner, dict) else None
    if not isinstance(data, list):
        raise ValueError("table payload holds no list of rows")
    return [row for row in data if isinstance(row, list)]


def chunk_cells(header: TableRow, cells: TableRow) -> List[TableRow]:
    """Group bare data cells into rows as wide as the header."""
    width = max(1, len(header))
    rows = [header] if header else []
    for start in range(0, len(cells), width):
        rows.append(cells[start:start + width])
    return rows
