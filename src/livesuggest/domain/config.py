"""Suggestion widget configuration.

Options may be given in Python (snake_case) or with the camelCase names used
by JSON configuration files (``forceSelection``, ``debounceTime`` ...).
Unknown options are ignored.
"""

import json
from pathlib import Path
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

from livesuggest.logger import get_logger
from livesuggest.utils import read_json_file

logger = get_logger("config")

DEFAULT_ITEM_TEMPLATE = "<strong>{{text}}</strong>"


class Templates(BaseModel):
    """Markup templates used to render results."""

    item: str = Field(DEFAULT_ITEM_TEMPLATE, description="Markup for each result")
    value: Optional[str] = Field("{{text}}", description="Stored as the item's data-value attribute")
    empty: Optional[str] = Field("No matches found", description="Shown when there are no results")

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _value_falls_back_to_item(cls, data: Any) -> Any:
        if isinstance(data, dict) and "value" in data and not data["value"]:
            data = dict(data)
            data["value"] = data.get("item") or DEFAULT_ITEM_TEMPLATE
        return data


class SuggestConfig(BaseModel):
    """Configuration for a :class:`~livesuggest.application.controller.SuggestionController`."""

    el: str = Field(".js-autocomplete", description="Reference (selector) of the anchor input")
    threshold: int = Field(2, description="Minimum search term length before fetching")
    limit: int = Field(5, description="Maximum number of results kept, <= 0 for unlimited")
    force_selection: bool = Field(False, description="Only accept values picked from the results")
    debounce_time: int = Field(200, description="Quiet period in milliseconds, 0 fetches synchronously")
    trigger_char: Optional[str] = Field(None, description="Character prefixing a triggered word")
    templates: Templates = Field(default_factory=Templates)
    extra_classes: dict[str, str] = Field(default_factory=dict)
    fetch: Optional[Callable[..., Any]] = Field(None, exclude=True)
    on_item: Optional[Callable[..., Any]] = Field(None, exclude=True)
    on_before_show: Optional[Callable[..., Any]] = Field(None, exclude=True)
    search_term_highlight: bool = True
    use_horizontal_nav_keys: bool = False
    discard_stale_results: bool = Field(True, description="Ignore completions of superseded fetches")

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("threshold")
    @classmethod
    def _threshold_at_least_one(cls, value: int) -> int:
        return max(1, value)

    @field_validator("trigger_char")
    @classmethod
    def _blank_trigger_is_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None


def load_config(config_path: str | Path, **overrides: Any) -> SuggestConfig:
    """
    Load a suggestion configuration from a JSON file.

    Args:
        config_path: Path to the JSON configuration file
        **overrides: Options applied on top of the file (callables such as
            ``fetch`` or ``on_item`` can only be supplied this way)

    Returns:
        SuggestConfig: Parsed configuration object

    Raises:
        FileNotFoundError: If the configuration file doesn't exist
        json.JSONDecodeError: If the JSON file is invalid
        ValidationError: If the configuration structure is invalid
    """
    config_path = Path(config_path)
    logger.info(f"Loading suggestion configuration from: {config_path}")

    try:
        data = read_json_file(config_path)
    except FileNotFoundError:
        logger.error(f"Configuration file not found: {config_path}")
        raise
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in configuration file {config_path}: {e}")
        raise

    if not isinstance(data, dict):
        logger.error(f"Configuration file {config_path} must contain a JSON object")
        raise ValueError(f"Configuration file {config_path} must contain a JSON object")

    data.update(overrides)
    try:
        config = SuggestConfig(**data)
    except ValidationError as e:
        logger.error(f"Invalid configuration structure in {config_path}: {e}")
        raise

    logger.debug(
        f"Loaded config: threshold={config.threshold} limit={config.limit} "
        f"debounce={config.debounce_time}ms trigger={config.trigger_char!r}"
    )
    return config
