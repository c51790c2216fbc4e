"""Best-effort classifiers for ambiguous HTML patterns.

Each classifier is an ordered table of named predicates; the first match
wins. They are heuristics over class names and text, not parsers, and the
order below is the contract (a blockquote mentioning both "tip" and
"warning" is a warning because the warning rule is checked first).
"""

import re
from typing import List, Optional, Set, Tuple

from bs4 import Tag

from html2docusaurus.models import AdmonitionType

# (type, marker tokens) for structured callouts, checked in order
CALLOUT_MARKER_RULES: List[Tuple[AdmonitionType, Tuple[str, ...]]] = [
    (AdmonitionType.TIP, ("success", "fa-check-circle")),
    (AdmonitionType.WARNING, ("warning", "fa-exclamation-triangle")),
    (AdmonitionType.DANGER, ("danger", "fa-times-circle")),
    (AdmonitionType.INFO, ("info", "fa-info-circle")),
]

# (type, keywords) for blockquote text, checked in order
BLOCKQUOTE_KEYWORD_RULES: List[Tuple[AdmonitionType, Tuple[str, ...]]] = [
    (AdmonitionType.WARNING, ("warning", "caution")),
    (AdmonitionType.TIP, ("tip", "pro tip")),
    (AdmonitionType.DANGER, ("danger", "error")),
    (AdmonitionType.INFO, ("info", "information")),
]

CALLOUT_TYPE_CLASSES = frozenset({"success", "warning", "danger", "info", "note"})

CODE_LANGUAGE_PATTERN = re.compile(r"^(?:language|lang)-(\S+)$")

# Title and icon decorations left out of a callout body
CALLOUT_CHROME_SELECTOR = '.callout-title, .callout-icon, i.fa, i[class*="fa-"]'
CALLOUT_TEXT_SELECTOR = '.callout-text'

TAB_PANE_SELECTOR = '.tab-pane, [role="tabpanel"]'
TAB_PANE_FALLBACK_SELECTOR = '.tab-content'
TAB_HEADER_SELECTOR = '[role="tab"], .tab-header, .nav-tab'


def _class_tokens(element: Tag) -> Set[str]:
    """Collect class names of a callout and its title and icon chrome.

    Classes inside the callout body are content, not markers.
    """
    tokens = set(element.get("class") or [])
    for child in element.select(CALLOUT_CHROME_SELECTOR):
        tokens.update(child.get("class") or [])
    return tokens


def classify_callout(element: Tag) -> AdmonitionType:
    """Classify a structured callout by its class and icon markers."""
    tokens = _class_tokens(element)
    for admonition_type, markers in CALLOUT_MARKER_RULES:
        if any(marker in tokens for marker in markers):
            return admonition_type
    return AdmonitionType.default()


def classify_text(text: str) -> AdmonitionType:
    """Classify a blockquote by keywords in its flattened text."""
    lowered = text.lower()
    for admonition_type, keywords in BLOCKQUOTE_KEYWORD_RULES:
        if any(keyword in lowered for keyword in keywords):
            return admonition_type
    return AdmonitionType.default()


def is_callout_div(element: Tag) -> bool:
    """True for ``<div class="callout warning">`` style callouts."""
    classes = element.get("class") or []
    return "callout" in classes and bool(CALLOUT_TYPE_CLASSES.intersection(classes))


def find_callout_text(element: Tag) -> Optional[Tag]:
    """Return the innermost ``.callout-text`` element, if any."""
    candidates = element.select(CALLOUT_TEXT_SELECTOR)
    for candidate in candidates:
        if candidate.select_one(CALLOUT_TEXT_SELECTOR) is None:
            return candidate
    return None


def detect_code_language(*elements: Optional[Tag]) -> str:
    """Return the language named by ``language-X``/``lang-X`` classes.

    Elements are inspected in the order given (``<code>`` before ``<pre>``);
    an empty string means no language was found.
    """
    for element in elements:
        if element is None:
            continue
        for class_name in element.get("class") or []:
            match = CODE_LANGUAGE_PATTERN.match(class_name)
            if match:
                return match.group(1)
    return ""


def _has_tab_class(element: Tag) -> bool:
    return any("tab" in class_name for class_name in element.get("class") or [])


def _qualifies_as_tab_container(element: Tag) -> bool:
    if element.name != "div":
        return False
    if _has_tab_class(element) and element.select_one(
        f"{TAB_PANE_SELECTOR}, {TAB_PANE_FALLBACK_SELECTOR}"
    ):
        return True
    return bool(
        element.select_one('[role="tab"]') and element.select_one('[role="tabpanel"]')
    )


def is_tab_container(element: Tag) -> bool:
    """True for the innermost ``<div>`` that holds tab headers and panes.

    A nested ``.tab-content`` wrapper carries panes but no headers, so it
    does not shadow the div around it.
    """
    if not _qualifies_as_tab_container(element):
        return False
    return not any(
        _qualifies_as_tab_container(div) and find_tab_headers(div)
        for div in element.find_all("div")
    )


def find_tab_headers(container: Tag) -> List[Tag]:
    return container.select(TAB_HEADER_SELECTOR)


def find_tab_panes(container: Tag) -> List[Tag]:
    """Panes in document order, by position; ``.tab-content`` as last resort."""
    panes = container.select(TAB_PANE_SELECTOR)
    if panes:
        return panes
    return container.select(TAB_PANE_FALLBACK_SELECTOR)
