"""State machine walking the body of a legal document.

The walker holds a read-only cursor over the body nodes. For the node under
the cursor it evaluates the rules of the current state in order and fires the
first one that matches:

* a rendering rule emits its fragment and advances the cursor;
* a transition rule changes state without advancing, so the same node is
  classified again under the new state;
* when nothing matches the node is skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from . import classifier, formatter
from .models import DocumentNode, ParsingState, WalkerContext, WalkResult

LOGGER = logging.getLogger(__name__)

Predicate = Callable[[DocumentNode], bool]
Renderer = Callable[[DocumentNode], str | None]


@dataclass(frozen=True)
class Rule:
    """A guarded action of the walker.

    Attributes:
        matches: Predicate the node under the cursor must satisfy.
        render: Renderer for the node; when set, the rule emits and advances.
        next_state: State to switch to; None keeps the current state.
    """

    matches: Predicate
    render: Renderer | None = None
    next_state: ParsingState | None = None

    @property
    def advances(self) -> bool:
        return self.render is not None


def _any_node(node: DocumentNode) -> bool:
    return True


RULES: dict[ParsingState, tuple[Rule, ...]] = {
    ParsingState.INTRO: (
        Rule(classifier.is_main_title, formatter.render_main_title),
        Rule(classifier.is_section_title, next_state=ParsingState.SECTION),
        Rule(classifier.is_subtitle, formatter.render_subtitle),
    ),
    ParsingState.SECTION: (
        Rule(classifier.is_section_title, formatter.render_section_title),
        Rule(classifier.is_chapter_title, next_state=ParsingState.CHAPTER),
        Rule(classifier.is_subtitle, formatter.render_subtitle),
    ),
    ParsingState.SPECIAL_SECTION: (
        Rule(classifier.is_special_section_title, formatter.render_special_section_title),
        Rule(
            classifier.is_special_section_part_title,
            formatter.render_special_section_part_title,
        ),
        Rule(classifier.is_article, formatter.render_article),
        Rule(classifier.is_item_list, formatter.render_item_list),
        Rule(classifier.is_endnotes_boundary, next_state=ParsingState.ENDNOTES),
        Rule(classifier.is_chapter_title, next_state=ParsingState.CHAPTER),
        Rule(classifier.is_section_title, next_state=ParsingState.SECTION),
    ),
    ParsingState.CHAPTER: (
        Rule(classifier.is_chapter_title, formatter.render_chapter_title),
        Rule(classifier.is_article, formatter.render_article),
        Rule(classifier.is_item_list, formatter.render_item_list),
        Rule(classifier.is_section_title, next_state=ParsingState.SECTION),
        Rule(classifier.is_special_section_title, next_state=ParsingState.SPECIAL_SECTION),
    ),
    ParsingState.ENDNOTES: (
        Rule(
            classifier.is_endnotes_table,
            formatter.render_endnotes_table,
            next_state=ParsingState.FINISHED,
        ),
    ),
    ParsingState.FINISHED: (),
    # Only reachable when a walk is explicitly started in this state.
    ParsingState.ERROR: (Rule(_any_node, formatter.render_error),),
}


def select_rule(state: ParsingState, node: DocumentNode) -> Rule | None:
    """Return the first rule of `state` matching `node`, or None.

    Examples:
        select_rule(ParsingState.SECTION, chapter_heading).next_state  # ParsingState.CHAPTER
    """
    for rule in RULES.get(state, ()):
        if rule.matches(node):
            return rule
    return None


def _apply(
    ctx: WalkerContext, rule: Rule, node: DocumentNode, fragments: list[str]
) -> bool:
    """Fire `rule` for the node under the cursor.

    Returns:
        bool: True when the cursor should advance, False after a transition
            that leaves the node to be classified again.
    """
    if rule.render is not None:
        fragment = rule.render(node)
        if fragment is not None:
            fragments.append(fragment)

    if rule.next_state is not None and rule.next_state is not ctx.state:
        LOGGER.debug("Node %d: %s -> %s", node.index, ctx.state.name, rule.next_state.name)
        ctx.state = rule.next_state

    return rule.advances


def walk(
    nodes: Sequence[DocumentNode], state: ParsingState = ParsingState.INTRO
) -> WalkResult:
    """Render a sequence of body nodes into Markdown fragments.

    Each node is visited once, in order. Nodes that match no rule of the
    current state are skipped without output; once the endnotes table has been
    rendered the remaining nodes are consumed without effect and are not
    reported as skipped.

    Args:
        nodes: Direct children of the document body, in document order. The
            sequence is never modified.
        state: Initial parsing state. Starting in `ParsingState.ERROR` renders
            every node as an error marker, which is useful to inspect input the
            walker does not understand.

    Returns:
        WalkResult: Fragments, final state and diagnostics.

    Examples:
        result = walk(body_nodes(parse_html(html)))
        print(result.markdown)
    """
    ctx = WalkerContext(state=state)
    fragments: list[str] = []
    skipped: list[int] = []
    transitions: list[tuple[int, ParsingState, ParsingState]] = []
    origins: list[int] = []

    while ctx.position < len(nodes):
        node = nodes[ctx.position]
        rule = select_rule(ctx.state, node)

        if rule is None:
            if ctx.state is not ParsingState.FINISHED and not node.is_blank():
                LOGGER.debug(
                    "Skipping node %d (%s) in state %s",
                    node.index,
                    node.kind.name,
                    ctx.state.name,
                )
                skipped.append(node.index)
            ctx.position += 1
            continue

        previous_state = ctx.state
        emitted = len(fragments)
        advance = _apply(ctx, rule, node, fragments)
        origins.extend([node.index] * (len(fragments) - emitted))
        if ctx.state is not previous_state:
            transitions.append((node.index, previous_state, ctx.state))
        if advance:
            ctx.position += 1

    return WalkResult(
        fragments=tuple(fragments),
        final_state=ctx.state,
        visited=len(nodes),
        skipped=tuple(skipped),
        transitions=tuple(transitions),
        origins=tuple(origins),
    )
