import json

import pytest

from livesuggest.application.sources import DEMO_ITEMS, StaticSource, default_fetch, load_items


def test_static_source_matches_substring_case_insensitively() -> None:
    source = StaticSource(DEMO_ITEMS)
    received = []

    source("JO", received.append)

    assert received == [[{"text": "Jon"}, {"text": "Jovi"}]]


def test_static_source_strips_trigger_prefix() -> None:
    source = StaticSource([{"text": "Jon"}, {"text": "Kat"}], trigger_char="@")

    assert source.matches("@ka") == [{"text": "Kat"}]


def test_default_fetch_answers_from_demo_items() -> None:
    received = []

    default_fetch("on", received.append)

    assert received == [[{"text": "Jon"}, {"text": "Bon", "disabled": True}]]


def test_load_items_accepts_objects_and_strings(tmp_path) -> None:
    path = tmp_path / "items.json"
    path.write_text(json.dumps([{"text": "Jon", "disabled": True}, "Jovi"]), encoding="utf-8")

    assert load_items(path) == [{"text": "Jon", "disabled": True}, {"text": "Jovi"}]


def test_load_items_rejects_non_list(tmp_path) -> None:
    path = tmp_path / "items.json"
    path.write_text(json.dumps({"text": "Jon"}), encoding="utf-8")

    with pytest.raises(ValueError):
        load_items(path)


def test_load_items_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_items(tmp_path / "missing.json")
