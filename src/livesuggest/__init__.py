"""livesuggest - live, keyboard and touch navigable suggestions for text inputs."""

from livesuggest.application import SuggestionController
from livesuggest.domain import SuggestConfig, Templates, load_config

__all__ = ["SuggestionController", "SuggestConfig", "Templates", "load_config"]
