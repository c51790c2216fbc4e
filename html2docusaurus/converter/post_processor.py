"""Blank-line normalization around Markdown block elements.

The rules work line by line and never touch the inside of a fenced code
block. Running the post-processor on its own output changes nothing.
"""

import re
from typing import List

re_heading = re.compile(r'^#{1,6} ')
re_fence = re.compile(r'^(`{3,}|~{3,})')
re_list_item = re.compile(r'^(?:[-*+]|\d+\.) ')


def _is_closing_fence(line: str, fence: str) -> bool:
    return line.startswith(fence) and not line.strip(fence[0])


def _ensure_blank(lines: List[str]) -> None:
    if lines and lines[-1] != '':
        lines.append('')


def post_process(markdown: str) -> str:
    """Normalize spacing of converted Markdown.

    Non-code lines are trimmed, blank-line runs collapse to one, headings
    and fenced blocks get exactly one blank line on each side, and a list
    run gets one blank line before it. Leading and trailing blank lines of
    the document are dropped.

    Args:
        markdown: Markdown produced by the block converters

    Returns:
        Normalized Markdown without a trailing newline
    """
    output: List[str] = []
    fence = ''
    blank_after = False
    in_list = False

    for raw_line in (markdown or '').split('\n'):
        if fence:
            stripped = raw_line.strip()
            if _is_closing_fence(stripped, fence):
                output.append(stripped)
                fence = ''
                blank_after = True
            else:
                output.append(raw_line)
            continue

        line = raw_line.strip()
        if not line:
            _ensure_blank(output)
            in_list = False
            continue

        if blank_after:
            _ensure_blank(output)
            blank_after = False

        fence_match = re_fence.match(line)
        if fence_match:
            _ensure_blank(output)
            output.append(line)
            fence = fence_match.group(1)
            in_list = False
        elif re_heading.match(line):
            _ensure_blank(output)
            output.append(line)
            blank_after = True
            in_list = False
        elif re_list_item.match(line):
            if not in_list:
                _ensure_blank(output)
            output.append(line)
            in_list = True
        else:
            output.append(line)

    while output and output[0] == '':
        output.pop(0)
    while output and output[-1] == '':
        output.pop()
    return '\n'.join(output)
