"""
ley-markdown: Markdown converter for Spanish legal documents published as HTML.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    ley-markdown ley.html -o ley.md

Library Usage:
    from pathlib import Path
    from ley_markdown import body_nodes, parse_html, walk

    body = parse_html(Path("ley.html").read_bytes())
    result = walk(body_nodes(body))
    markdown = result.markdown
"""

from .config import ConfigError, ConverterConfig
from .converter import ConvertFileError, convert_document, convert_file, convert_html
from .dom import body_nodes, parse_html
from .exceptions import ConversionError, DecodingError, MissingBodyError
from .models import DocumentNode, NodeKind, ParsingState, WalkResult
from .text import flatten_text, truncate_spaces
from .walker import walk

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "convert_html",
    "convert_document",
    "convert_file",
    "parse_html",
    "body_nodes",
    "walk",
    # Data models
    "ConverterConfig",
    "DocumentNode",
    "NodeKind",
    "ParsingState",
    "WalkResult",
    # Utilities
    "flatten_text",
    "truncate_spaces",
    # Exceptions
    "ConfigError",
    "ConversionError",
    "ConvertFileError",
    "DecodingError",
    "MissingBodyError",
    # Version
    "__version__",
]
