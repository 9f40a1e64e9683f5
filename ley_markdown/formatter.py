"""Markdown rendering for classified body nodes.

Every renderer returns one fragment. Leading and trailing newlines are part
of the fragment and act as block separators once fragments are concatenated.
"""

from __future__ import annotations

from bs4.element import Tag

from .constants import ENDNOTES_SEPARATOR, ERROR_MARKER, TABLE_ROW_TAG
from .models import DocumentNode
from .text import flatten_text
from .tokens import rewrite_article_number, rewrite_item_index, rewrite_note_marker


def render_main_title(node: DocumentNode) -> str:
    """Render the title as a setext heading.

    Examples:
        render_main_title(title_node)  # "Ley Orgánica\\n============\\n"
    """
    title = flatten_text(node)
    return f"{title}\n{'=' * len(title)}\n"


def render_subtitle(node: DocumentNode) -> str:
    return f"\n{flatten_text(node)}\n"


def render_section_title(node: DocumentNode) -> str:
    return f"\n## {flatten_text(node)}\n"


def render_chapter_title(node: DocumentNode) -> str:
    return f"\n### {flatten_text(node)}\n"


def render_special_section_title(node: DocumentNode) -> str:
    return f"\n## {flatten_text(node)}\n"


def render_special_section_part_title(node: DocumentNode) -> str:
    return f"\n### {flatten_text(node)}\n"


def render_article(node: DocumentNode) -> str | None:
    """Render an article paragraph, bolding its leading number.

    Args:
        node: Paragraph node.

    Returns:
        str | None: The rendered paragraph, or None when it holds no text.

    Examples:
        render_article(node)  # "\\n__Artículo 5__. El presente...\\n"
    """
    text = flatten_text(node)
    if not text:
        return None
    return f"\n{rewrite_article_number(text)}\n"


def _table_rows(node: DocumentNode) -> list[Tag]:
    element = node.element
    if not isinstance(element, Tag):
        return []
    return element.find_all(TABLE_ROW_TAG)


def render_item_list(node: DocumentNode) -> str:
    """Render each table row as a ``"N) "`` list line."""
    return "".join(f"\n{rewrite_item_index(flatten_text(row))}\n" for row in _table_rows(node))


def render_endnotes_table(node: DocumentNode) -> str:
    """Render the notes table after a horizontal rule, one note per row."""
    notes = "".join(f"\n{rewrite_note_marker(flatten_text(row))}\n" for row in _table_rows(node))
    return f"{ENDNOTES_SEPARATOR}{notes}"


def render_error(node: DocumentNode) -> str:
    """Render the error marker followed by the offending node's markup."""
    return f"\n{ERROR_MARKER}\n{node.element}\n"
