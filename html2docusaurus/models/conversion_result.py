"""Conversion result and statistics data models."""

from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple


class StatsSnapshot(NamedTuple):
    """Immutable copy of the statistics gathered by one conversion."""
    html_lines: int = 0
    markdown_lines: int = 0
    elements_converted: int = 0
    links_found: int = 0
    images_found: int = 0
    tables_found: int = 0

    def to_dict(self) -> Dict[str, int]:
        """Return the camelCase mapping used in API responses."""
        return {
            'htmlLines': self.html_lines,
            'markdownLines': self.markdown_lines,
            'elementsConverted': self.elements_converted,
            'linksFound': self.links_found,
            'imagesFound': self.images_found,
            'tablesFound': self.tables_found,
        }


@dataclass(frozen=True)
class StatsDelta:
    """Counts contributed by a single conversion stage.

    Stages never touch the shared accumulator; they return a delta and the
    orchestrator folds it in with ConversionStats.add().
    """
    elements_converted: int = 0
    links_found: int = 0
    images_found: int = 0
    tables_found: int = 0


@dataclass
class ConversionStats:
    """Mutable statistics accumulator, created fresh for every conversion.

    Attributes:
        html_lines: Line count of the raw input document
        markdown_lines: Line count of the final Markdown output
        elements_converted: Tag occurrences in the sanitized HTML (approximate)
        links_found: Anchors carrying an href
        images_found: Images carrying a src
        tables_found: Converted tables, whichever encoding they came from
    """
    html_lines: int = 0
    markdown_lines: int = 0
    elements_converted: int = 0
    links_found: int = 0
    images_found: int = 0
    tables_found: int = 0

    def add(self, delta: StatsDelta) -> None:
        """Fold a stage's delta into the running totals."""
        self.elements_converted += delta.elements_converted
        self.links_found += delta.links_found
        self.images_found += delta.images_found
        self.tables_found += delta.tables_found

    def snapshot(self) -> StatsSnapshot:
        return StatsSnapshot(
            html_lines=self.html_lines,
            markdown_lines=self.markdown_lines,
            elements_converted=self.elements_converted,
            links_found=self.links_found,
            images_found=self.images_found,
            tables_found=self.tables_found,
        )


@dataclass(frozen=True)
class ConversionResult:
    """Result of HTML to Docusaurus Markdown conversion.

    Attributes:
        markdown: Converted Markdown, frontmatter included when enabled
        stats: Statistics snapshot for this conversion
        warnings: Non-fatal problems met along the way (skipped frontmatter
            lines, unreadable table payloads)
    """
    markdown: str
    stats: StatsSnapshot = field(default_factory=StatsSnapshot)
    warnings: List[str] = field(default_factory=list)
