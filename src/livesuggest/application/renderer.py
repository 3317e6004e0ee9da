"""
Render result items from the configured templates.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional, Sequence

from livesuggest.domain.config import Templates
from livesuggest.domain.types import ClassNames, ResultItem

from .nodes import RenderNode, parse_markup


def substitute(template: str, item: Mapping[str, Any]) -> str:
    """Replace every ``{{field}}`` with the item's value; unknown fields are left as is."""
    for key, value in item.items():
        replacement = _field_text(value)
        template = re.sub(r"\{\{" + re.escape(str(key)) + r"\}\}", lambda _match: replacement, template)
    return template


def _field_text(value: Any) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    return str(value)


def render_item(item: ResultItem, templates: Templates, classes: ClassNames) -> RenderNode:
    """Render one result; the node is disabled iff ``item["disabled"] is True``."""
    node = RenderNode(tag="div", classes=classes.item.split())
    node.attrs["data-value"] = substitute(templates.value or templates.item, item)
    parse_markup(substitute(templates.item, item), root=node)
    if item.get("disabled") is True:
        node.add_class(classes.disabled)
    return node


def render_empty(empty_template: str, classes: ClassNames) -> RenderNode:
    """The single placeholder node shown when there are no results."""
    node = RenderNode(tag="div")
    node.add_class(classes.item)
    node.add_class(classes.empty)
    node.add_class(classes.disabled)
    return parse_markup(empty_template, root=node)


def render_results(
    items: Sequence[ResultItem],
    templates: Templates,
    classes: Optional[ClassNames] = None,
) -> list[RenderNode]:
    """
    Render the result list.

    Args:
        items: Results in display order
        templates: Item, value and empty templates
        classes: Class names to apply (defaults to :class:`ClassNames`)

    Returns:
        One node per item, or a single disabled "empty" node when ``items``
        is empty and an empty template is configured
    """
    classes = classes or ClassNames()
    if not items:
        return [render_empty(templates.empty, classes)] if templates.empty else []
    return [render_item(item, templates, classes) for item in items]
