"""Leading index tokens and their Markdown rewrites.

Each token type has a matcher, returning the token found at the start of a
line, and a rewriter, which replaces only that leading token and leaves the
rest of the line untouched.
"""

from __future__ import annotations

from .constants import ARTICLE_INDEX_PATTERN, ITEM_INDEX_PATTERN, NOTE_INDEX_PATTERN


def match_article_number(line: str) -> str | None:
    """Return the leading ``"Artículo N"`` token, if any.

    Examples:
        match_article_number("Artículo 5. El presente...")  # "Artículo 5"
        match_article_number("El artículo 5")  # None
    """
    match = ARTICLE_INDEX_PATTERN.match(line)
    return match.group(1) if match else None


def rewrite_article_number(line: str) -> str:
    """Bold the leading article number.

    The punctuation and spacing after the number collapse into ``". "``.

    Examples:
        rewrite_article_number("Artículo 5. El presente...")  # "__Artículo 5__. El presente..."
    """
    return ARTICLE_INDEX_PATTERN.sub(r"__\1__. ", line, count=1)


def match_item_index(line: str) -> str | None:
    """Return the leading list index (digits or a letter), if any.

    Examples:
        match_item_index("1. Objeto de la ley")  # "1"
        match_item_index("b) Segundo")  # "b"
        match_item_index("a') Variante")  # "a'"
        match_item_index("1.Objeto")  # None
    """
    match = ITEM_INDEX_PATTERN.match(line)
    return match.group(1) if match else None


def rewrite_item_index(line: str) -> str:
    """Normalize the leading list index to ``"N) "``.

    Examples:
        rewrite_item_index("1. Objeto de la ley")  # "1) Objeto de la ley"
        rewrite_item_index("2º- Ámbito")  # "2) Ámbito"
    """
    return ITEM_INDEX_PATTERN.sub(r"\1) ", line, count=1)


def match_note_marker(line: str) -> str | None:
    """Return the leading run of asterisks, if any.

    Examples:
        match_note_marker("** Nota")  # "**"
    """
    match = NOTE_INDEX_PATTERN.match(line)
    return match.group(1) if match else None


def rewrite_note_marker(line: str) -> str:
    """Wrap the leading note marker in parentheses.

    Examples:
        rewrite_note_marker("* Nota al pie")  # "(*) Nota al pie"
        rewrite_note_marker("** Otra nota")  # "(**) Otra nota"
    """
    return NOTE_INDEX_PATTERN.sub(r"(\1) ", line, count=1)
