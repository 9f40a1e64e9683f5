"""HTML decoding and body node extraction.

The walker only consumes already-decoded text: every document goes through
`decode_html` before it reaches BeautifulSoup, so the body nodes always carry
one consistent text encoding regardless of how the source was stored.
"""

from __future__ import annotations

import unicodedata

from bs4 import BeautifulSoup, FeatureNotFound, UnicodeDammit
from bs4.element import PageElement, Tag

from .config import ConverterConfig
from .constants import PARAGRAPH_TAG, RULE_TAG, TABLE_TAG
from .exceptions import ConversionError, DecodingError, MissingBodyError
from .models import DocumentNode, NodeKind


def decode_html(content: bytes | str, encoding: str | None = None) -> str:
    """Decode raw HTML into NFC-normalized text.

    Accented letters stored as a base letter plus a combining mark are
    composed, so ``"Sección"`` reads the same however the source spelled it.

    Args:
        content: Raw document. Text is only normalized.
        encoding: Encoding of `content`; when None it is detected from byte
            order marks, ``<meta charset>`` declarations and the byte content.

    Returns:
        str: Decoded document.

    Raises:
        DecodingError: If the requested encoding is unknown or does not
            decode `content`, or no encoding could be detected.

    Examples:
        decode_html(b"<p>Secci\\xf3n</p>", "iso-8859-1")  # "<p>Sección</p>"
    """
    if isinstance(content, str):
        markup = content
    elif encoding is not None:
        try:
            markup = content.decode(encoding)
        except (LookupError, UnicodeDecodeError) as error:
            raise DecodingError(encoding) from error
    else:
        markup = UnicodeDammit(content, is_html=True).unicode_markup
        if markup is None:
            raise DecodingError(None)

    return unicodedata.normalize("NFC", markup)


def parse_html(content: bytes | str, config: ConverterConfig | None = None) -> Tag:
    """Parse a document and return its ``<body>`` element.

    Args:
        content: Raw or decoded HTML.
        config: Parser and encoding settings; defaults to `ConverterConfig()`.

    Returns:
        Tag: The document body.

    Raises:
        DecodingError: If the document cannot be decoded.
        MissingBodyError: If the document has no body.
        ConversionError: If the configured parser is not installed.

    Examples:
        body = parse_html("<html><body><h2>Ley</h2></body></html>")
    """
    config = config or ConverterConfig()
    markup = decode_html(content, config.encoding)

    try:
        soup = BeautifulSoup(markup, config.parser)
    except FeatureNotFound as error:
        raise ConversionError(f"HTML parser `{config.parser}` is not installed") from error

    body = soup.body
    if body is None:
        raise MissingBodyError()
    return body


def node_kind(element: PageElement, config: ConverterConfig | None = None) -> NodeKind:
    """Map a parsed element onto its tag category.

    Args:
        element: Direct child of the document body.
        config: Settings naming the title and heading tags.

    Returns:
        NodeKind: Category of the element; `NodeKind.OTHER` for non-tags.

    Examples:
        node_kind(BeautifulSoup("<h4>Capítulo I</h4>", "html.parser").h4)  # NodeKind.HEADING
    """
    if not isinstance(element, Tag):
        return NodeKind.OTHER

    config = config or ConverterConfig()
    name = element.name.lower()
    kinds = {
        config.title_tag.lower(): NodeKind.TITLE_HEADING,
        config.heading_tag.lower(): NodeKind.HEADING,
        PARAGRAPH_TAG: NodeKind.PARAGRAPH,
        TABLE_TAG: NodeKind.TABLE,
        RULE_TAG: NodeKind.RULE,
    }
    return kinds.get(name, NodeKind.OTHER)


def body_nodes(body: Tag, config: ConverterConfig | None = None) -> tuple[DocumentNode, ...]:
    """Snapshot the direct children of the body as an immutable sequence."""
    return tuple(
        DocumentNode(kind=node_kind(child, config), element=child, index=index)
        for index, child in enumerate(body.contents)
    )
