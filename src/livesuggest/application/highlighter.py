"""
Mark occurrences of the search term words inside rendered results.

The transform is pure: a new tree is returned and the input is left
untouched. Running it again on its own output adds nothing, because
existing highlight spans are not descended into.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional, Sequence

from .nodes import Child, RenderNode

SKIPPED_TAGS = frozenset({"script", "style"})


def build_pattern(words: Iterable[str]) -> Optional[re.Pattern[str]]:
    """Case-insensitive alternation over the non-empty words, ``None`` if there are none."""
    escaped = [re.escape(word) for word in words if word]
    if not escaped:
        return None
    return re.compile("(" + "|".join(escaped) + ")", re.IGNORECASE)


def search_words(search_term: str) -> list[str]:
    return search_term.strip().split()


def _is_highlight(node: RenderNode, element: str, class_name: str) -> bool:
    return node.tag == element and node.classes == class_name.split()


def _split_text(text: str, pattern: re.Pattern[str], element: str, class_name: str) -> list[Child]:
    parts: list[Child] = []
    position = 0
    for match in pattern.finditer(text):
        if not match.group(0):
            continue
        if match.start() > position:
            parts.append(text[position : match.start()])
        parts.append(RenderNode(tag=element, classes=class_name.split(), children=[match.group(0)]))
        position = match.end()
    if position < len(text):
        parts.append(text[position:])
    return parts


def _highlight_node(node: RenderNode, pattern: re.Pattern[str], element: str, class_name: str) -> RenderNode:
    if node.tag in SKIPPED_TAGS or _is_highlight(node, element, class_name):
        return node.copy()

    children: list[Child] = []
    for child in node.children:
        if isinstance(child, str):
            children.extend(_split_text(child, pattern, element, class_name))
        else:
            children.append(_highlight_node(child, pattern, element, class_name))
    return RenderNode(tag=node.tag, attrs=dict(node.attrs), classes=list(node.classes), children=children)


def highlight_search_term(
    node: RenderNode,
    search_term: str,
    class_name: str,
    element: str = "span",
) -> RenderNode:
    """
    Wrap every occurrence of the search term's words in a highlight element.

    Args:
        node: Rendered result node
        search_term: Current search term, split on whitespace into words
        class_name: Class of the highlight element
        element: Tag of the highlight element

    Returns:
        A new tree; an unchanged copy when the term has no words
    """
    pattern = build_pattern(search_words(search_term))
    if pattern is None:
        return node.copy()
    return _highlight_node(node, pattern, element, class_name)


def highlight_nodes(
    nodes: Sequence[RenderNode],
    search_term: str,
    class_name: str,
    element: str = "span",
) -> list[RenderNode]:
    """Apply :func:`highlight_search_term` to every node of a rendered list."""
    return [highlight_search_term(node, search_term, class_name, element) for node in nodes]
