"""
Convert render nodes into Rich ``Text`` for terminal display.
"""

from __future__ import annotations

from typing import Optional

from rich.style import Style
from rich.text import Text

from livesuggest.application.nodes import RenderNode
from livesuggest.domain.types import ClassNames

TAG_STYLES: dict[str, str] = {
    "strong": "bold",
    "b": "bold",
    "em": "italic",
    "i": "italic",
    "u": "underline",
    "s": "strike",
    "code": "bold cyan",
    "small": "dim",
}

SEARCH_TERM_STYLE = "bold reverse"
DISABLED_STYLE = "dim"


def _append_node(text: Text, node: RenderNode, classes: ClassNames, inherited: Style) -> None:
    style = inherited
    if node.tag in TAG_STYLES:
        style = style + Style.parse(TAG_STYLES[node.tag])
    if node.has_class(classes.search_term):
        style = style + Style.parse(SEARCH_TERM_STYLE)

    if node.tag == "br":
        text.append("\n")
        return

    for child in node.children:
        if isinstance(child, str):
            text.append(child, style=style)
        elif child.tag not in ("script", "style"):
            _append_node(text, child, classes, style)


def node_to_text(node: RenderNode, classes: Optional[ClassNames] = None) -> Text:
    """
    Render a result node as Rich text.

    Inline tags map to text styles, search-term highlight spans are shown
    reversed and disabled results are dimmed.
    """
    classes = classes or ClassNames()
    base = Style.parse(DISABLED_STYLE) if node.has_class(classes.disabled) else Style()
    text = Text(no_wrap=True, overflow="ellipsis")
    _append_node(text, node, classes, base)
    return text
