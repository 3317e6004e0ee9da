from livesuggest.application.highlighter import build_pattern, highlight_nodes, highlight_search_term
from livesuggest.application.nodes import RenderNode, parse_markup
from livesuggest.application.renderer import render_results
from livesuggest.domain.config import Templates

MARK = "autocomplete__list__item__search-term"


def _marks(node: RenderNode) -> list[str]:
    marks = [node.text_content] if node.has_class(MARK) else []
    for child in node.children:
        if isinstance(child, RenderNode):
            marks.extend(_marks(child))
    return marks


def test_wraps_case_insensitive_matches() -> None:
    node = render_results([{"text": "Jon Jovi"}], Templates())[0]

    highlighted = highlight_search_term(node, "jo", MARK)

    assert _marks(highlighted) == ["Jo", "Jo"]
    assert highlighted.text_content == "Jon Jovi"
    assert highlighted.to_html() == (
        '<div class="autocomplete__list__item" data-value="Jon Jovi"><strong>'
        f'<span class="{MARK}">Jo</span>n <span class="{MARK}">Jo</span>vi'
        "</strong></div>"
    )


def test_every_word_of_the_term_is_marked() -> None:
    node = parse_markup("Bon Jovi")

    assert _marks(highlight_search_term(node, "  bon   vi ", MARK)) == ["Bon", "vi"]


def test_input_tree_is_not_mutated() -> None:
    node = parse_markup("<b>Jon</b>")
    before = node.to_html()

    highlight_search_term(node, "jo", MARK)

    assert node.to_html() == before


def test_running_twice_does_not_double_wrap() -> None:
    nodes = render_results([{"text": "Jon"}, {"text": "Jovi"}], Templates())

    once = highlight_nodes(nodes, "jo", MARK)
    twice = highlight_nodes(once, "jo", MARK)

    assert [node.to_html() for node in twice] == [node.to_html() for node in once]


def test_regex_characters_are_literal() -> None:
    node = parse_markup("a.b axb (c)")

    assert _marks(highlight_search_term(node, "a.b (c)", MARK)) == ["a.b", "(c)"]


def test_script_and_style_are_skipped() -> None:
    node = parse_markup("<script>jo</script>jo")

    assert _marks(highlight_search_term(node, "jo", MARK)) == ["jo"]


def test_blank_term_returns_copy() -> None:
    node = parse_markup("Jon")

    result = highlight_search_term(node, "   ", MARK)

    assert result is not node
    assert result.to_html() == node.to_html()
    assert build_pattern([]) is None
