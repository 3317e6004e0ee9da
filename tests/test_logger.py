import json

import pytest
from loguru import logger

from livesuggest.application.sources import load_items
from livesuggest.logger import disable_logging, setup_logger


@pytest.fixture
def items_path(tmp_path):
    path = tmp_path / "items.json"
    path.write_text(json.dumps(["Jon"]), encoding="utf-8")
    return path


@pytest.fixture
def host_sink():
    """A sink the embedding application owns."""
    messages = []
    sink_id = logger.add(messages.append, filter="livesuggest", format="{message}")
    yield messages
    logger.remove(sink_id)
    disable_logging()


def test_package_is_silent_until_enabled(items_path, host_sink) -> None:
    disable_logging()

    load_items(items_path)

    assert host_sink == []


def test_setup_writes_package_records_to_file(tmp_path, items_path, host_sink) -> None:
    log_file = setup_logger(tmp_path / "livesuggest.log")

    load_items(items_path)
    disable_logging()

    assert log_file == tmp_path / "livesuggest.log"
    assert "Loaded 1 items" in log_file.read_text(encoding="utf-8")


def test_setup_keeps_host_sinks(tmp_path, items_path, host_sink) -> None:
    setup_logger(tmp_path / "livesuggest.log")
    setup_logger(tmp_path / "livesuggest.log", log_level="DEBUG")

    load_items(items_path)

    assert len(host_sink) == 1
    assert "Loaded 1 items" in host_sink[0]


def test_default_log_file_is_in_working_directory(tmp_path, monkeypatch, host_sink) -> None:
    monkeypatch.chdir(tmp_path)

    assert setup_logger() == tmp_path / "livesuggest.log"
