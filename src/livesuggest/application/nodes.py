"""
Structured render tree for result items.

Templates are written as small HTML fragments (``<strong>{{text}}</strong>``).
They are parsed into :class:`RenderNode` trees which the highlighter can
transform and hosts can turn into their own display objects.
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from html.parser import HTMLParser
from typing import Optional, Union

VOID_TAGS = frozenset({"br", "hr", "img", "input", "wbr"})

Child = Union["RenderNode", str]


@dataclass
class RenderNode:
    """An element with attributes, classes and children (nodes or text)."""

    tag: str = "div"
    attrs: dict[str, str] = field(default_factory=dict)
    classes: list[str] = field(default_factory=list)
    children: list[Child] = field(default_factory=list)

    @property
    def text_content(self) -> str:
        """Concatenated text of the whole subtree."""
        return "".join(child if isinstance(child, str) else child.text_content for child in self.children)

    def has_class(self, class_names: str) -> bool:
        """True if every space separated class in ``class_names`` is set."""
        wanted = class_names.split()
        return bool(wanted) and all(name in self.classes for name in wanted)

    def add_class(self, class_names: str) -> None:
        for name in class_names.split():
            if name not in self.classes:
                self.classes.append(name)

    def remove_class(self, class_names: str) -> None:
        for name in class_names.split():
            if name in self.classes:
                self.classes.remove(name)

    def copy(self) -> RenderNode:
        """Deep copy of the subtree."""
        return RenderNode(
            tag=self.tag,
            attrs=dict(self.attrs),
            classes=list(self.classes),
            children=[child if isinstance(child, str) else child.copy() for child in self.children],
        )

    def to_html(self) -> str:
        attrs = dict(self.attrs)
        if self.classes:
            attrs = {"class": " ".join(self.classes), **attrs}
        rendered_attrs = "".join(f' {name}="{html.escape(value, quote=True)}"' for name, value in attrs.items())
        if self.tag in VOID_TAGS:
            return f"<{self.tag}{rendered_attrs}>"
        inner = "".join(html.escape(child, quote=False) if isinstance(child, str) else child.to_html() for child in self.children)
        return f"<{self.tag}{rendered_attrs}>{inner}</{self.tag}>"


class _TreeBuilder(HTMLParser):
    """Builds a RenderNode tree from an HTML fragment."""

    def __init__(self, root: RenderNode) -> None:
        super().__init__(convert_charrefs=True)
        self._stack: list[RenderNode] = [root]

    def _append(self, child: Child) -> None:
        children = self._stack[-1].children
        if isinstance(child, str) and children and isinstance(children[-1], str):
            children[-1] += child
        else:
            children.append(child)

    def handle_starttag(self, tag: str, attrs: list[tuple[str, Optional[str]]]) -> None:
        node = RenderNode(tag=tag)
        for name, value in attrs:
            if name == "class":
                node.add_class(value or "")
            else:
                node.attrs[name] = value or ""
        self._append(node)
        if tag not in VOID_TAGS:
            self._stack.append(node)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, Optional[str]]]) -> None:
        self.handle_starttag(tag, attrs)
        if tag not in VOID_TAGS:
            self._stack.pop()

    def handle_endtag(self, tag: str) -> None:
        # Close up to the matching open tag; stray end tags are ignored
        for depth in range(len(self._stack) - 1, 0, -1):
            if self._stack[depth].tag == tag:
                del self._stack[depth:]
                return

    def handle_data(self, data: str) -> None:
        if data:
            self._append(data)


def parse_markup(markup: str, root: Optional[RenderNode] = None) -> RenderNode:
    """
    Parse an HTML fragment into the children of ``root``.

    Args:
        markup: HTML fragment, plain text is accepted as is
        root: Node receiving the parsed children (a new ``div`` if omitted)

    Returns:
        The root node
    """
    root = root if root is not None else RenderNode()
    builder = _TreeBuilder(root)
    builder.feed(markup)
    builder.close()
    return root
