"""Data models for ley-markdown."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from bs4.element import Comment, PageElement, Tag


class NodeKind(Enum):
    """Tag categories a body node can fall into.

    Attributes:
        TITLE_HEADING: Heading used for the document title.
        HEADING: Heading used for sections, chapters and subtitles.
        PARAGRAPH: Paragraph, the carrier of articles.
        TABLE: Table, used for item lists and endnotes.
        RULE: Horizontal rule separating the endnotes.
        OTHER: Anything else, including bare text between elements.
    """

    TITLE_HEADING = auto()
    HEADING = auto()
    PARAGRAPH = auto()
    TABLE = auto()
    RULE = auto()
    OTHER = auto()


class ParsingState(Enum):
    """Document regions the walker can be in.

    Attributes:
        INTRO: Title and preamble, before the first section.
        SECTION: Inside a section, before its first chapter.
        SPECIAL_SECTION: Inside the transitional provisions.
        CHAPTER: Inside a chapter, where articles live.
        ENDNOTES: After the endnotes rule, waiting for the notes table.
        FINISHED: Terminal; nothing else is emitted.
        ERROR: Terminal diagnostic state, only entered on request.
    """

    INTRO = auto()
    SECTION = auto()
    SPECIAL_SECTION = auto()
    CHAPTER = auto()
    ENDNOTES = auto()
    FINISHED = auto()
    ERROR = auto()


@dataclass(frozen=True)
class DocumentNode:
    """A direct child of the document body.

    Attributes:
        kind: Tag category of the node.
        element: Parsed element (tag, text or comment) backing the node.
        index: Zero-based position among the body children.
    """

    kind: NodeKind
    element: PageElement
    index: int = 0

    @property
    def text(self) -> str:
        """Raw descendant text, whitespace untouched."""
        if isinstance(self.element, Tag):
            return self.element.get_text()
        return str(self.element)

    def is_blank(self) -> bool:
        """Whitespace between elements and comments carry no content."""
        if self.kind is not NodeKind.OTHER:
            return False
        return isinstance(self.element, Comment) or not self.text.strip()


@dataclass
class WalkerContext:
    """Mutable cursor for a single walk.

    Attributes:
        state: Current parsing state.
        position: Index of the node under the cursor.
    """

    state: ParsingState = ParsingState.INTRO
    position: int = 0


@dataclass(frozen=True)
class WalkResult:
    """Outcome of walking a document body.

    Attributes:
        fragments: Rendered fragments in visit order.
        final_state: State the walker ended in.
        visited: Number of nodes visited.
        skipped: Indices of non-blank nodes that matched no rule.
        transitions: ``(index, from_state, to_state)`` for each state change.
        origins: Index of the node each fragment was rendered from.
    """

    fragments: tuple[str, ...]
    final_state: ParsingState
    visited: int
    skipped: tuple[int, ...] = ()
    transitions: tuple[tuple[int, ParsingState, ParsingState], ...] = field(default=())
    origins: tuple[int, ...] = ()

    @property
    def markdown(self) -> str:
        return "".join(self.fragments)
