"""
Converts the HTML rendition of a Spanish legal document to Markdown.
Writes the result to stdout, or to a file when an output path is given.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from .config import ConfigError, PARSERS, build_config
from .converter import ConvertFileError, convert_file
from .filesystem import resolve_html_path, write_output

__all__ = ["cli"]

LOG_FORMAT = "%(levelname)s: %(message)s"


def setup_logging(verbose: bool) -> None:
    """Route package log records to stderr at DEBUG or WARNING level."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("ley_markdown").setLevel(level)


@click.command()
@click.version_option()
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    help="Write Markdown to this file instead of stdout",
)
@click.option("--encoding", help="Source encoding (detected when omitted)")
@click.option("--parser", type=click.Choice(PARSERS), help="HTML parser backend")
@click.option("--title-tag", help="HTML tag of the document title")
@click.option("--heading-tag", help="HTML tag of section and chapter headings")
@click.option(
    "--report-skipped",
    is_flag=True,
    help="Report nodes that were not converted",
)
@click.option("-v", "--verbose", is_flag=True, help="Log the conversion steps")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def cli(
    filepath: str,
    output: str | None = None,
    encoding: str | None = None,
    parser: str | None = None,
    title_tag: str | None = None,
    heading_tag: str | None = None,
    report_skipped: bool = False,
    verbose: bool = False,
):
    """
    Entry point for converting an HTML legal document to Markdown.

    Args:
        filepath: Path to the HTML document.
        output: Optional path of the Markdown file to write.
        encoding: Override for the source encoding.
        parser: BeautifulSoup parser backend.
        title_tag: HTML tag of the document title.
        heading_tag: HTML tag of structural headings.
        report_skipped: Print the number of nodes that matched no rule.
        verbose: Enable debug logging.

    Returns:
        None.

    Raises:
        click.BadParameter: If the input path or configuration is invalid.
        click.ClickException: If reading, converting, or writing fails.

    Examples:
        ley-markdown ley.html -o ley.md --encoding iso-8859-1
    """
    setup_logging(verbose)

    base_dir = Path.cwd().resolve()
    try:
        filepath = resolve_html_path(filepath, base_dir)
    except ValueError as error:
        raise click.BadParameter(str(error)) from error

    try:
        config = build_config(
            filepath.parent,
            encoding=encoding,
            parser=parser,
            title_tag=title_tag,
            heading_tag=heading_tag,
            report_skipped=report_skipped or None,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        result = convert_file(filepath, config)
    except ConvertFileError as error:
        raise click.ClickException(str(error)) from error

    if config.report_skipped:
        click.echo(
            f"{len(result.skipped)} of {result.visited} nodes skipped "
            f"(final state: {result.final_state.name.lower()})",
            err=True,
        )

    if output is None:
        click.echo(result.markdown, nl=False)
        return

    try:
        write_output(Path(output), result.markdown)
    except IOError as error:
        raise click.ClickException(str(error)) from error


if __name__ == "__main__":
    cli()
