"""Structural role predicates for body nodes.

Several predicates overlap (any structural heading is also a subtitle
candidate), so callers must test them in the priority order of the walker's
rule table.
"""

from __future__ import annotations

from bs4.element import Tag

from .constants import (
    CHAPTER_PATTERN,
    ROMAN_NUMERAL_PATTERN,
    SECTION_PATTERN,
    SPECIAL_SECTION_PATTERN,
    TABLE_ROW_TAG,
    TABLE_TAG,
)
from .models import DocumentNode, NodeKind


def is_main_title(node: DocumentNode) -> bool:
    return node.kind is NodeKind.TITLE_HEADING


def is_subtitle(node: DocumentNode) -> bool:
    """Fallback for headings and paragraphs with no more specific role."""
    return node.kind in (NodeKind.HEADING, NodeKind.PARAGRAPH)


def is_section_title(node: DocumentNode) -> bool:
    return node.kind is NodeKind.HEADING and SECTION_PATTERN.search(node.text) is not None


def is_chapter_title(node: DocumentNode) -> bool:
    return node.kind is NodeKind.HEADING and CHAPTER_PATTERN.search(node.text) is not None


def is_special_section_title(node: DocumentNode) -> bool:
    return (
        node.kind is NodeKind.HEADING
        and SPECIAL_SECTION_PATTERN.search(node.text) is not None
    )


def is_special_section_part_title(node: DocumentNode) -> bool:
    """Match headings labelled with a Roman numeral, e.g. ``"II"`` or ``"Parte IV"``."""
    return (
        node.kind is NodeKind.HEADING
        and ROMAN_NUMERAL_PATTERN.search(node.text) is not None
    )


def is_article(node: DocumentNode) -> bool:
    # Empty paragraphs are still articles; the formatter drops them.
    return node.kind is NodeKind.PARAGRAPH


def is_item_list(node: DocumentNode) -> bool:
    return node.kind is NodeKind.TABLE


def is_endnotes_boundary(node: DocumentNode) -> bool:
    return node.kind is NodeKind.RULE


def is_endnotes_table(node: DocumentNode) -> bool:
    """Detect a table with rows, either the node itself or nested inside it.

    Some renditions wrap the notes table in a container element, so nested
    tables are accepted too.
    """
    element = node.element
    if not isinstance(element, Tag):
        return False

    tables = [element] if element.name.lower() == TABLE_TAG else []
    tables.extend(element.find_all(TABLE_TAG))
    return any(table.find(TABLE_ROW_TAG) is not None for table in tables)
