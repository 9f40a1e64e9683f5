from __future__ import annotations

import pytest

from ley_markdown.tokens import (
    match_article_number,
    match_item_index,
    match_note_marker,
    rewrite_article_number,
    rewrite_item_index,
    rewrite_note_marker,
)


@pytest.mark.parametrize(
    ("line", "token"),
    [
        ("Artículo 5. El presente...", "Artículo 5"),
        ("Articulo 12: sin tilde", "Articulo 12"),
        ("ARTÍCULO 3 - Mayúsculas", "ARTÍCULO 3"),
        ("Artículo 1º.- La República", "Artículo 1"),
        ("El artículo 5. dice", None),
        ("Artículo único.", None),
    ],
)
def test_match_article_number(line, token):
    assert match_article_number(line) == token


def test_rewrite_article_number_only_touches_leading_token():
    line = "Artículo 5. Véase el Artículo 6. siguiente"

    assert rewrite_article_number(line) == "__Artículo 5__. Véase el Artículo 6. siguiente"


def test_rewrite_article_number_normalizes_punctuation():
    assert rewrite_article_number("Artículo 7.- Definiciones") == "__Artículo 7__. Definiciones"


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        (
            "Artículo 1º.- La República Oriental del Uruguay",
            "__Artículo 1__. La República Oriental del Uruguay",
        ),
        ("Artículo 2ª. Segunda redacción", "__Artículo 2__. Segunda redacción"),
        ("Artículo 3.º Tercero", "__Artículo 3__. Tercero"),
    ],
)
def test_rewrite_article_number_drops_ordinal_indicator(line, expected):
    assert rewrite_article_number(line) == expected


def test_rewrite_article_number_keeps_accented_first_word():
    assert rewrite_article_number("Artículo 2. Ámbito de aplicación.") == (
        "__Artículo 2__. Ámbito de aplicación."
    )


@pytest.mark.parametrize(
    ("line", "token"),
    [
        ("1. Objeto de la ley", "1"),
        ("12) Doce", "12"),
        ("3º Tercero", "3"),
        ("4.º Cuarto", "4"),
        ("c- Letra", "c"),
        ("a') Prima", "a'"),
        ("1.Objeto", None),
        ("Objeto 1. de", None),
    ],
)
def test_match_item_index(line, token):
    assert match_item_index(line) == token


def test_rewrite_item_index():
    assert rewrite_item_index("1. Objeto de la ley") == "1) Objeto de la ley"
    assert rewrite_item_index("2º- Ámbito") == "2) Ámbito"
    assert rewrite_item_index("Texto 1. sin índice") == "Texto 1. sin índice"


@pytest.mark.parametrize(
    ("line", "token"),
    [("* Nota", "*"), ("*** Tercera", "***"), ("*Pegada", None), ("Nota *", None)],
)
def test_match_note_marker(line, token):
    assert match_note_marker(line) == token


def test_rewrite_note_marker():
    assert rewrite_note_marker("* Nota al pie") == "(*) Nota al pie"
    assert rewrite_note_marker("** Otra * nota") == "(**) Otra * nota"
    assert rewrite_note_marker("Sin marca") == "Sin marca"
