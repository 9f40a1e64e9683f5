"""High-level conversion entry points."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import ConfigError, ConverterConfig, validate_config
from .dom import body_nodes, parse_html
from .exceptions import ConversionError
from .filesystem import read_html
from .models import WalkResult
from .walker import walk

LOGGER = logging.getLogger(__name__)


def convert_document(
    content: bytes | str, config: ConverterConfig | None = None
) -> WalkResult:
    """Parse an HTML document and walk its body.

    Args:
        content: Raw or decoded HTML.
        config: Conversion settings. Defaults to a new `ConverterConfig`.

    Returns:
        WalkResult: Rendered fragments and walk diagnostics.

    Raises:
        ConfigError: If the configuration fails validation.
        ConversionError: If the document cannot be decoded or parsed.

    Examples:
        convert_document(Path("ley.html").read_bytes()).markdown
    """
    config = config or ConverterConfig()
    validate_config(config)

    nodes = body_nodes(parse_html(content, config), config)
    result = walk(nodes)
    LOGGER.debug(
        "Walked %d nodes: %d fragments, %d skipped, final state %s",
        result.visited,
        len(result.fragments),
        len(result.skipped),
        result.final_state.name,
    )
    return result


def convert_html(content: bytes | str, config: ConverterConfig | None = None) -> str:
    """Convert an HTML legal document to Markdown.

    Examples:
        convert_html("<body><h2>Ley Orgánica</h2></body>")  # "Ley Orgánica\\n============\\n"
    """
    return convert_document(content, config).markdown


class ConvertFileError(Exception):
    """Raised when converting an HTML file fails."""


def convert_file(filepath: Path, config: ConverterConfig | None = None) -> WalkResult:
    """Read an HTML file and convert it.

    Args:
        filepath: Path to the HTML document.
        config: Conversion settings; defaults to a new `ConverterConfig`.

    Returns:
        WalkResult: Rendered fragments and walk diagnostics.

    Raises:
        ConvertFileError: If the configuration is invalid, the file is too
            large or unreadable, or the document cannot be decoded or parsed.

    Examples:
        convert_file(Path("ley.html")).markdown
    """
    config = config or ConverterConfig()
    try:
        validate_config(config)
    except ConfigError as error:
        raise ConvertFileError(str(error)) from error

    try:
        content = read_html(filepath, config.max_file_size)
    except IOError as error:
        raise ConvertFileError(str(error)) from error

    try:
        return convert_document(content, config)
    except ConversionError as error:
        raise ConvertFileError(f"{filepath}: {error}") from error
