"""Unit tests for converter.engine module."""

from unittest.mock import patch

import pytest

from html2docusaurus import ConversionConfig, DocusaurusConverter, convert_html_to_markdown
from html2docusaurus.converter.engine import TABS_IMPORTS
from html2docusaurus.errors import ConversionError, InputValidationError
from html2docusaurus.models import ConversionResult


class TestConvertHtmlToMarkdown:
    """Test cases for the end-to-end conversion pipeline."""

    def test_frontmatter_and_body(self):
        """Default config prepends frontmatter before the converted body."""
        result = convert_html_to_markdown(
            "<h1>Title</h1><p>Hello <strong>world</strong></p>",
            ConversionConfig(title="Title"),
        )

        assert result.markdown == (
            '---\ntitle: "Title"\nsidebar_position: 1\n---\n\n'
            "# Title\n\nHello **world**"
        )
        assert result.stats.markdown_lines == 7

    def test_default_config_used_when_omitted(self):
        """Without a config the defaults apply."""
        result = convert_html_to_markdown("<p>x</p>")

        assert result.markdown == "---\nsidebar_position: 1\n---\n\nx"

    def test_frontmatter_omitted_when_disabled(self, body_only_config):
        """add_frontmatter=False returns the body alone."""
        result = convert_html_to_markdown("<p>Just text</p>", body_only_config)

        assert result.markdown == "Just text"
        assert not result.markdown.startswith("---")

    def test_no_fields_no_frontmatter(self):
        """A config with every frontmatter field empty emits no block."""
        result = convert_html_to_markdown(
            "<p>x</p>", ConversionConfig(sidebar_position=None)
        )

        assert result.markdown == "x"

    def test_no_trailing_newline(self, body_only_config):
        """The result never ends with a newline."""
        result = convert_html_to_markdown("<p>a</p><p>b</p>\n\n", body_only_config)

        assert not result.markdown.endswith("\n")

    def test_sanitized_content_absent(self, body_only_config):
        """Scripts and navigation never reach the output."""
        result = convert_html_to_markdown(
            "<nav>Menu</nav><script>var x;</script><p>Body</p>", body_only_config
        )

        assert result.markdown == "Body"

    def test_tab_imports_only_with_tabs(self, body_only_config):
        """The theme imports appear only when tabs were emitted."""
        plain = convert_html_to_markdown("<p>No tabs</p>", body_only_config)

        assert "@theme/Tabs" not in plain.markdown

    def test_imports_not_added_for_literal_text(self, body_only_config):
        """Text that merely mentions <Tabs> inline does not trigger imports."""
        result = convert_html_to_markdown(
            "<p>Use the &lt;Tabs&gt; component</p>", body_only_config
        )

        assert TABS_IMPORTS not in result.markdown


class TestConversionEdgeCases:
    """Test cases for empty, invalid and failing input."""

    @pytest.mark.parametrize("html", ["", "   ", "\n\n"])
    def test_blank_input(self, html):
        """Blank input gives empty Markdown and zeroed counts."""
        result = convert_html_to_markdown(html)

        assert result.markdown == ""
        assert result.stats.html_lines == len(html.split("\n"))
        assert result.stats.markdown_lines == 0
        assert result.stats.elements_converted == 0
        assert result.warnings == []

    def test_empty_input_counts_one_html_line(self):
        """An empty string still counts as one input line."""
        assert convert_html_to_markdown("").stats.html_lines == 1

    def test_non_string_rejected(self):
        """Non-string input raises InputValidationError."""
        with pytest.raises(InputValidationError, match="must be a string"):
            convert_html_to_markdown(None)

    def test_unexpected_failure_wrapped(self, body_only_config):
        """Unexpected engine errors are raised as ConversionError."""
        with patch(
            "html2docusaurus.converter.engine.post_process",
            side_effect=RuntimeError("boom"),
        ):
            with pytest.raises(ConversionError, match="HTML conversion failed: boom"):
                convert_html_to_markdown("<p>x</p>", body_only_config)

    def test_text_without_markup(self, body_only_config):
        """Plain text passes through as a paragraph."""
        assert convert_html_to_markdown("just words", body_only_config).markdown == "just words"

    @pytest.mark.parametrize("html", [
        "<p>---</p><p>body</p>",
        "---",
        "<p>--- dashes</p>",
        "<div>---</div><p>after</p>",
        "<p>-----</p>",
    ])
    def test_body_never_opens_with_delimiter(self, html, body_only_config):
        """A leading '---' in the body is escaped when frontmatter is off."""
        result = convert_html_to_markdown(html, body_only_config)

        assert not result.markdown.startswith("---")
        assert result.markdown.startswith("\\---")

    def test_escaped_delimiter_keeps_text(self, body_only_config):
        """Only the first line gains the escape; the rest is untouched."""
        result = convert_html_to_markdown("<p>---</p><p>body</p>", body_only_config)

        assert result.markdown == "\\---\n\nbody"

    def test_leading_rule_not_escaped(self, body_only_config):
        """A leading <hr> is already written as '***'."""
        result = convert_html_to_markdown("<hr><p>x</p>", body_only_config)

        assert result.markdown == "***\n\nx"


class TestConversionStatistics:
    """Test cases for statistics on the result."""

    def test_counts(self, body_only_config):
        """Links, images and tables are counted from the sanitized input."""
        html = (
            '<p><a href="/a">a</a> <a href="/b">b</a></p>'
            '<img src="x.png">'
            "<table><tr><td>1</td></tr></table>"
        )

        stats = convert_html_to_markdown(html, body_only_config).stats

        assert stats.links_found == 2
        assert stats.images_found == 1
        assert stats.tables_found == 1
        assert stats.html_lines == 1

    def test_markdown_lines_include_frontmatter(self):
        """markdown_lines counts the final document, frontmatter included."""
        result = convert_html_to_markdown("<p>x</p>", ConversionConfig(title="T"))

        assert result.stats.markdown_lines == len(result.markdown.split("\n"))

    def test_stats_fresh_per_call(self, body_only_config):
        """Repeated conversions on one converter do not accumulate counts."""
        converter = DocusaurusConverter(body_only_config)

        first = converter.convert('<a href="/a">a</a>')
        second = converter.convert('<a href="/a">a</a>')

        assert first.stats == second.stats
        assert second.stats.links_found == 1

    def test_stats_to_dict(self, body_only_config):
        """Snapshots serialise with camelCase keys."""
        stats = convert_html_to_markdown("<p>Hi</p>", body_only_config).stats

        assert stats.to_dict() == {
            "htmlLines": 1,
            "markdownLines": 1,
            "elementsConverted": 2,
            "linksFound": 0,
            "imagesFound": 0,
            "tablesFound": 0,
        }


class TestConversionWarnings:
    """Test cases for non-fatal warnings."""

    def test_skipped_custom_frontmatter_line(self):
        """Custom lines without a key are skipped and reported."""
        result = convert_html_to_markdown(
            "<p>x</p>",
            ConversionConfig(custom_frontmatter="author: Ann\nno separator here"),
        )

        assert 'author: "Ann"' in result.markdown
        assert len(result.warnings) == 1
        assert "no separator here" in result.warnings[0]

    def test_clean_conversion_has_no_warnings(self):
        """A straightforward conversion reports nothing."""
        result = convert_html_to_markdown("<p>x</p>")

        assert isinstance(result, ConversionResult)
        assert result.warnings == []


class TestConversionDeterminism:
    """Test cases for repeatable output."""

    RICH_HTML = (
        "<h1>Guide</h1>"
        '<p>See <a href="/docs">the docs</a> and <img src="diagram.png" alt="Diagram"></p>'
        "<table><tr><th>Name</th><th>Age</th></tr><tr><td>Bob</td><td>30</td></tr></table>"
        "<app-table pluginobject='[[\"H\"], [\"1\"]]'></app-table>"
        "<app-table pluginobject=\"not json\"><table><tr><td>x</td></tr></table></app-table>"
        '<div class="callout warning"><div class="callout-title">Careful</div>'
        "<p>Mind the gap</p></div>"
        "<blockquote>Pro tip: save often</blockquote>"
        '<div class="tabs"><ul><li role="tab">Python</li><li role="tab">JS</li></ul>'
        '<div class="tab-content"><div class="tab-pane"><pre><code class="language-python">'
        "print(1)</code></pre></div>"
        '<div class="tab-pane"><pre><code class="language-js">log(1)</code></pre></div>'
        "</div></div>"
        '<pre><code class="language-bash">ls -la\n  cd /tmp</code></pre>'
        "<ul><li>one<ul><li>nested</li></ul></li><li>two</li></ul>"
    )

    def test_same_input_same_output(self):
        """Two conversions of one document are identical."""
        config = ConversionConfig(title="Guide", tags=("a", "b"))

        first = convert_html_to_markdown(self.RICH_HTML, config)
        second = convert_html_to_markdown(self.RICH_HTML, config)

        assert first.markdown == second.markdown
        assert first.stats == second.stats
        assert first.warnings == second.warnings

    def test_separate_converters_agree(self):
        """Independent converter instances produce the same result."""
        first = DocusaurusConverter(ConversionConfig(title="Guide")).convert(self.RICH_HTML)
        second = DocusaurusConverter(ConversionConfig(title="Guide")).convert(self.RICH_HTML)

        assert first.markdown == second.markdown
        assert first.stats == second.stats
        assert first.warnings == second.warnings
        assert "<Tabs>" in first.markdown
        assert ":::warning" in first.markdown

    def test_reused_converter_repeats_itself(self, body_only_config):
        """A converter reused across calls keeps returning the same result."""
        converter = DocusaurusConverter(body_only_config)

        results = [converter.convert(self.RICH_HTML) for _ in range(3)]

        assert len({result.markdown for result in results}) == 1
        assert all(result.stats == results[0].stats for result in results)
