from ley_markdown.models import NodeKind, ParsingState, WalkerContext, WalkResult


def test_parsing_state_members():
    assert list(ParsingState) == [
        ParsingState.INTRO,
        ParsingState.SECTION,
        ParsingState.SPECIAL_SECTION,
        ParsingState.CHAPTER,
        ParsingState.ENDNOTES,
        ParsingState.FINISHED,
        ParsingState.ERROR,
    ]


def test_walker_context_defaults():
    ctx = WalkerContext()

    assert ctx.state is ParsingState.INTRO
    assert ctx.position == 0


def test_walk_result_concatenates_fragments():
    result = WalkResult(fragments=("a\n", "\nb\n"), final_state=ParsingState.CHAPTER, visited=2)

    assert result.markdown == "a\n\nb\n"
    assert result.skipped == ()
    assert result.transitions == ()


def test_document_node_text_and_blankness(make_nodes):
    heading, blank, comment, word = make_nodes("<h4> Sección </h4>\n <!-- nota --> palabra")

    assert heading.kind is NodeKind.HEADING
    assert heading.text == " Sección "
    assert not heading.is_blank()
    assert blank.is_blank()
    assert comment.is_blank()
    assert word.text == " palabra"
    assert not word.is_blank()
    assert [heading.index, blank.index, comment.index, word.index] == [0, 1, 2, 3]
