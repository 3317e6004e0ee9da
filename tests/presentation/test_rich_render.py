from livesuggest.application.highlighter import highlight_search_term
from livesuggest.application.nodes import parse_markup
from livesuggest.application.renderer import render_results
from livesuggest.domain.config import Templates
from livesuggest.domain.types import ClassNames
from livesuggest.presentation.rich_render import node_to_text

CLASSES = ClassNames()


def _styles_of(text, substring: str) -> list[str]:
    start = text.plain.index(substring)
    end = start + len(substring)
    return [str(span.style) for span in text.spans if span.start <= start and span.end >= end]


def test_plain_text_is_preserved() -> None:
    node = parse_markup("Tom <em>&amp;</em> Jerry<br>again")

    assert node_to_text(node).plain == "Tom & Jerry\nagain"


def test_inline_tags_become_styles() -> None:
    node = render_results([{"text": "Jon"}], Templates())[0]

    text = node_to_text(node, CLASSES)

    assert text.plain == "Jon"
    assert any("bold" in style for style in _styles_of(text, "Jon"))


def test_search_term_is_reversed() -> None:
    node = render_results([{"text": "Jovi"}], Templates(item="{{text}}"))[0]
    node = highlight_search_term(node, "vi", CLASSES.search_term)

    text = node_to_text(node, CLASSES)

    assert text.plain == "Jovi"
    assert any("reverse" in style for style in _styles_of(text, "vi"))
    assert not any("reverse" in style for style in _styles_of(text, "Jo"))


def test_disabled_results_are_dimmed() -> None:
    node = render_results([{"text": "Bon", "disabled": True}], Templates(item="{{text}}"))[0]

    text = node_to_text(node, CLASSES)

    assert any("dim" in style for style in _styles_of(text, "Bon"))


def test_script_content_is_not_displayed() -> None:
    node = parse_markup("<script>alert(1)</script>ok")

    assert node_to_text(node).plain == "ok"
