"""Main CLI entry point for the html2docusaurus command.

This module provides the Typer application with two commands: ``convert``
turns an HTML file or web page into Docusaurus Markdown, ``serve`` runs the
HTTP API.
"""

import dataclasses
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer

from html2docusaurus import __version__
from html2docusaurus.api.server import run_server
from html2docusaurus.cli.config_loader import ConfigLoader
from html2docusaurus.cli.errors import FileAccessError
from html2docusaurus.cli.models import ExitCode
from html2docusaurus.cli.output import OutputHandler
from html2docusaurus.converter import convert_html_to_markdown
from html2docusaurus.errors import (
    ConfigError,
    ConversionError,
    FetchError,
    InputValidationError,
)
from html2docusaurus.fetcher import HtmlExtractor
from html2docusaurus.models import ConversionConfig
from html2docusaurus.settings import Settings

app = typer.Typer(
    name="html2docusaurus",
    help="""Convert HTML documents into Docusaurus Markdown.

QUICK START:
  html2docusaurus convert page.html                         # Print Markdown
  html2docusaurus convert page.html --output docs/page.md   # Write a file
  html2docusaurus convert https://example.com/doc --url     # Fetch a page
  html2docusaurus serve                                     # Run the HTTP API""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=True,
)

# Module logger
logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "html2docusaurus"


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'html2docusaurus' namespace logger to avoid affecting
    third-party libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:  # verbosity >= 2
        level = logging.DEBUG

    app_logger = logging.getLogger(PACKAGE_LOGGER)
    app_logger.setLevel(level)

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"html2docusaurus_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"html2docusaurus version {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Convert HTML documents into Docusaurus Markdown."""


def _build_config(
    config_file: Optional[str],
    overrides: dict,
) -> ConversionConfig:
    """Load the config file (if any) and apply command-line overrides.

    Raises:
        ConfigError: If the file or an override is invalid
    """
    config = ConfigLoader.load(config_file) if config_file else ConversionConfig()
    changes = {name: value for name, value in overrides.items() if value is not None}
    return dataclasses.replace(config, **changes) if changes else config


def _read_source(source: str) -> str:
    try:
        return Path(source).read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FileAccessError(source, "read", "File not found")
    except UnicodeDecodeError:
        raise FileAccessError(source, "read", "File is not UTF-8 text")
    except OSError as e:
        raise FileAccessError(source, "read", str(e))


def _write_output(output_file: str, markdown: str) -> None:
    try:
        path = Path(output_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(markdown + "\n" if markdown else "", encoding="utf-8")
    except OSError as e:
        raise FileAccessError(output_file, "write", str(e))


def _load_html(source: str, is_url: bool, output: OutputHandler) -> str:
    """Return HTML from a file path or, with is_url, from a fetched page."""
    if not is_url:
        output.debug(f"Reading {source}")
        return _read_source(source)

    extractor = HtmlExtractor(Settings.load())
    with output.spinner(f"Fetching {source}..."):
        page = extractor.extract(source)
    output.info(f"Extracted '{page.title}' ({len(page.html)} characters)")
    return page.html


@app.command("convert")
def convert_command(
    source: str = typer.Argument(
        ...,
        help="HTML file to convert, or a page URL when used with --url",
    ),
    is_url: bool = typer.Option(
        False,
        "--url",
        help="Treat SOURCE as a URL and extract the page's main content",
    ),
    title: Optional[str] = typer.Option(None, "--title", help="Frontmatter title"),
    description: Optional[str] = typer.Option(
        None, "--description", help="Frontmatter description"
    ),
    sidebar_position: Optional[int] = typer.Option(
        None, "--sidebar-position", min=1, help="Frontmatter sidebar_position"
    ),
    sidebar_label: Optional[str] = typer.Option(
        None, "--sidebar-label", help="Frontmatter sidebar_label"
    ),
    slug: Optional[str] = typer.Option(None, "--slug", help="Frontmatter slug"),
    tags: Optional[List[str]] = typer.Option(
        None, "--tag", help="Frontmatter tag (can be used multiple times)", metavar="TAG"
    ),
    keywords: Optional[List[str]] = typer.Option(
        None,
        "--keyword",
        help="Frontmatter keyword (can be used multiple times)",
        metavar="KEYWORD",
    ),
    custom_frontmatter: Optional[str] = typer.Option(
        None,
        "--custom-frontmatter",
        help="Extra frontmatter as 'key: value' lines",
    ),
    no_frontmatter: bool = typer.Option(
        False, "--no-frontmatter", help="Do not prepend YAML frontmatter"
    ),
    no_tabs: bool = typer.Option(
        False, "--no-tabs", help="Keep tab containers as plain content"
    ),
    no_admonitions: bool = typer.Option(
        False, "--no-admonitions", help="Render callouts as blockquotes"
    ),
    no_code_blocks: bool = typer.Option(
        False, "--no-code-blocks", help="Omit language tags on code fences"
    ),
    no_process_images: bool = typer.Option(
        False, "--no-process-images", help="Keep image sources unchanged"
    ),
    config_file: Optional[str] = typer.Option(
        None, "--config", help="YAML config file (flags override its values)", metavar="FILE"
    ),
    save_config: Optional[str] = typer.Option(
        None, "--save-config", help="Write the effective config to a YAML file", metavar="FILE"
    ),
    output_file: Optional[str] = typer.Option(
        None, "--output", "-o", help="Write Markdown to FILE instead of stdout", metavar="FILE"
    ),
    show_stats: bool = typer.Option(False, "--stats", help="Show conversion statistics"),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """Convert an HTML file or web page into Docusaurus Markdown.

    \b
    EXAMPLES:
      html2docusaurus convert page.html --title "Intro" --tag setup --tag guide
      html2docusaurus convert page.html --config docs.yaml --output docs/intro.md
      html2docusaurus convert https://example.com/docs/intro --url --stats
    """
    _configure_logging(verbosity, logdir)
    output = OutputHandler(verbosity=verbosity, no_color=no_color)

    overrides = {
        "title": title,
        "description": description,
        "sidebar_position": sidebar_position,
        "sidebar_label": sidebar_label,
        "slug": slug,
        "tags": tuple(tags) if tags else None,
        "keywords": tuple(keywords) if keywords else None,
        "custom_frontmatter": custom_frontmatter,
        "add_frontmatter": False if no_frontmatter else None,
        "convert_tabs": False if no_tabs else None,
        "convert_admonitions": False if no_admonitions else None,
        "convert_code_blocks": False if no_code_blocks else None,
        "process_images": False if no_process_images else None,
    }

    try:
        config = _build_config(config_file, overrides)
        if save_config:
            ConfigLoader.save(save_config, config)
            output.info(f"Saved config to {save_config}")
    except ConfigError as e:
        output.error(str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    if is_url:
        try:
            HtmlExtractor.validate_url(source)
        except FetchError as e:
            output.error(str(e))
            raise typer.Exit(ExitCode.INPUT_ERROR)

    try:
        html = _load_html(source, is_url, output)
        result = convert_html_to_markdown(html, config)
    except FileAccessError as e:
        logger.error(f"Cannot read source: {e}")
        output.error(str(e))
        raise typer.Exit(ExitCode.INPUT_ERROR)
    except FetchError as e:
        logger.error(f"Fetching {source} failed: {e}")
        output.error(str(e))
        raise typer.Exit(ExitCode.NETWORK_ERROR)
    except InputValidationError as e:
        output.error(str(e))
        raise typer.Exit(ExitCode.INPUT_ERROR)
    except ConversionError as e:
        output.error(f"Conversion failed: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)
    except Exception as e:
        logger.exception("Unexpected error during conversion")
        output.error(f"Unexpected error: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    for warning in result.warnings:
        output.warning(warning)
    if not result.markdown:
        output.warning("Conversion produced no Markdown")

    if output_file:
        try:
            _write_output(output_file, result.markdown)
        except FileAccessError as e:
            output.error(str(e))
            raise typer.Exit(ExitCode.GENERAL_ERROR)
        output.success(f"Wrote {result.stats.markdown_lines} line(s) to {output_file}")
    else:
        typer.echo(result.markdown)

    if show_stats:
        output.print_stats(result.stats)


@app.command("serve")
def serve_command(
    host: Optional[str] = typer.Option(None, "--host", help="Address to bind (default 127.0.0.1)"),
    port: Optional[int] = typer.Option(None, "--port", min=1, max=65535, help="Port to listen on"),
    verbosity: int = typer.Option(
        1,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
) -> None:
    """Run the HTTP API (POST /api/convert, POST /api/extract-html)."""
    _configure_logging(verbosity)
    output = OutputHandler(verbosity=verbosity)

    try:
        settings = Settings.load()
    except ConfigError as e:
        output.error(str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    if host:
        settings = settings._replace(host=host)
    if port:
        settings = settings._replace(port=port)

    run_server(settings)


def main() -> None:
    """Main entry point for the CLI application."""
    app()


# Allow running as: python -m html2docusaurus.cli.main
if __name__ == "__main__":
    main()
