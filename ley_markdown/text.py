"""Whitespace normalization and descendant text flattening."""

from __future__ import annotations

import re

from bs4.element import PageElement, Tag

from .models import DocumentNode

_WHITESPACE_RUN = re.compile(r"\s+")


def truncate_spaces(text: str) -> str:
    """Collapse runs of whitespace into single spaces and trim the edges.

    Non-breaking spaces count as whitespace, so ``"&nbsp;"`` padding found in
    the source documents disappears as well.

    Args:
        text: Text to normalize.

    Returns:
        str: Normalized text.

    Examples:
        truncate_spaces("  Ley\\n  Orgánica ")  # "Ley Orgánica"
        truncate_spaces("\\xa0Artículo 1.\\xa0")  # "Artículo 1."
    """
    return _WHITESPACE_RUN.sub(" ", text).strip()


def flatten_text(node: DocumentNode | PageElement) -> str:
    """Concatenate the text of every descendant of a node and normalize it.

    Args:
        node: Body node, tag, or bare string.

    Returns:
        str: Whitespace-normalized descendant text.

    Examples:
        flatten_text(BeautifulSoup("<p>Uno <b>dos</b></p>", "html.parser").p)  # "Uno dos"
    """
    if isinstance(node, DocumentNode):
        return truncate_spaces(node.text)
    if isinstance(node, Tag):
        return truncate_spaces(node.get_text())
    return truncate_spaces(str(node))
