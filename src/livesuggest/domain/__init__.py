"""Domain layer: configuration, value types, protocols and events."""

from .config import SuggestConfig, Templates, load_config
from .protocols import Anchor, CallLater, Cancellable, FetchDone, FetchFn, OnItem
from .types import SPECIAL_KEYS, ClassNames, Direction, InputState, ResultItem, SpecialKey

__all__ = [
    "SuggestConfig",
    "Templates",
    "load_config",
    "Anchor",
    "CallLater",
    "Cancellable",
    "FetchDone",
    "FetchFn",
    "OnItem",
    "SPECIAL_KEYS",
    "ClassNames",
    "Direction",
    "InputState",
    "ResultItem",
    "SpecialKey",
]
