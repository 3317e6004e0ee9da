"""Core value types shared by the suggestion controller and its hosts."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Mapping, NamedTuple

__all__ = [
    "ResultItem",
    "InputState",
    "Direction",
    "SpecialKey",
    "SPECIAL_KEYS",
    "ClassNames",
]

# A result is a plain mapping of template fields (at minimum ``text``)
ResultItem = Mapping[str, Any]


class InputState(NamedTuple):
    """Snapshot of the anchor input when it changed."""

    text: str
    cursor_position: int


class Direction(str, Enum):
    """Direction of keyboard navigation through the result list."""

    UP = "up"
    DOWN = "down"


class SpecialKey(str, Enum):
    """Keys the controller reacts to while results are displayed."""

    TAB = "tab"
    ESC = "esc"
    ENTER = "enter"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Host key names (Textual, DOM key codes) mapped onto SpecialKey
SPECIAL_KEYS: dict[str | int, SpecialKey] = {
    9: SpecialKey.TAB,
    27: SpecialKey.ESC,
    13: SpecialKey.ENTER,
    38: SpecialKey.UP,
    40: SpecialKey.DOWN,
    37: SpecialKey.LEFT,
    39: SpecialKey.RIGHT,
    "tab": SpecialKey.TAB,
    "esc": SpecialKey.ESC,
    "escape": SpecialKey.ESC,
    "enter": SpecialKey.ENTER,
    "up": SpecialKey.UP,
    "down": SpecialKey.DOWN,
    "left": SpecialKey.LEFT,
    "right": SpecialKey.RIGHT,
}


@dataclass(frozen=True)
class ClassNames:
    """Class names applied to the wrapper and rendered result nodes.

    Each value may hold several space separated classes once extra classes
    have been merged in with :meth:`with_extra`.
    """

    wrapper: str = "autocomplete"
    input: str = "autocomplete__input"
    results: str = "autocomplete__results"
    list: str = "autocomplete__list"
    item: str = "autocomplete__list__item"
    highlighted: str = "autocomplete__list__item--highlighted"
    disabled: str = "autocomplete__list__item--disabled"
    empty: str = "autocomplete__list__item--empty"
    search_term: str = "autocomplete__list__item__search-term"
    loading: str = "is-loading"
    visible: str = "is-visible"

    def with_extra(self, extra: Mapping[str, str] | None) -> ClassNames:
        """Return a copy where every role named in ``extra`` gets the extra classes appended."""
        if not extra:
            return self

        changes: dict[str, str] = {}
        for role in fields(self):
            addition = extra.get(role.name)
            if addition:
                changes[role.name] = f"{getattr(self, role.name)} {addition}"
        return replace(self, **changes)
