"""Textual demo application."""

from .suggest_app import SuggestApp

__all__ = ["SuggestApp"]
