"""Constants used across the ley-markdown package."""

from __future__ import annotations

import re

# Tag names that are not configurable
PARAGRAPH_TAG = "p"
TABLE_TAG = "table"
TABLE_ROW_TAG = "tr"
RULE_TAG = "hr"

HTML_EXTENSIONS = (".html", ".htm")

# Structural markers
SECTION_PATTERN = re.compile(r"secci[oó]n", re.IGNORECASE)
CHAPTER_PATTERN = re.compile(r"cap[ií]tulo", re.IGNORECASE)
SPECIAL_SECTION_PATTERN = re.compile(r"disposici[oó]n(?:es)?\s+transitorias?", re.IGNORECASE)
ROMAN_NUMERAL_PATTERN = re.compile(r"\b[IVXLCDM]+\b", re.IGNORECASE)

# Leading index tokens
# Ordinal indicators count as separators, as in "Artículo 1º.-"
ARTICLE_INDEX_PATTERN = re.compile(r"^(Art[ií]culo \d+)[\Wºª]+", re.IGNORECASE)
ITEM_INDEX_PATTERN = re.compile(r"^(\d+|[a-zA-Z]'?)[.º)\-]+\s")
NOTE_INDEX_PATTERN = re.compile(r"^(\*+)\s")

# Rendering
ENDNOTES_SEPARATOR = "\n---\n"
ERROR_MARKER = ">>> error"
