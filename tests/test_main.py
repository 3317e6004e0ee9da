"""Tests for the command line entry point."""

import json

from typer.testing import CliRunner

from livesuggest.application.sources import StaticSource
from livesuggest.logger import disable_logging
from livesuggest.main import build_config, cli

runner = CliRunner()


class TestExtractCommand:
    def test_prints_triggered_word(self):
        result = runner.invoke(cli, ["extract", "hi @jo there", "--cursor", "6", "--trigger-char", "@"])

        assert result.exit_code == 0
        assert result.output.strip() == "@jo"

    def test_without_trigger_prints_whole_text(self):
        result = runner.invoke(cli, ["extract", "hello world"])

        assert result.exit_code == 0
        assert result.output.strip() == "hello world"


class TestBuildConfig:
    def test_defaults_to_demo_items(self):
        config = build_config(None, None, None)

        received = []
        config.fetch("jo", received.append)

        assert isinstance(config.fetch, StaticSource)
        assert [item["text"] for item in received[0]] == ["Jon", "Jovi"]

    def test_items_file_and_trigger(self, tmp_path):
        items = tmp_path / "items.json"
        items.write_text(json.dumps(["Katherine", "Jon"]), encoding="utf-8")

        config = build_config(None, str(items), "@")

        received = []
        config.fetch("@kat", received.append)
        assert config.trigger_char == "@"
        assert received == [[{"text": "Katherine"}]]

    def test_config_file_options(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"triggerChar": "#", "limit": 2}), encoding="utf-8")

        config = build_config(str(path), None, None)

        assert config.trigger_char == "#"
        assert config.limit == 2
        received = []
        config.fetch("#jo", received.append)
        assert [item["text"] for item in received[0]] == ["Jon", "Jovi"]

    def test_demo_reports_missing_config(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(cli, ["demo", "--config", str(tmp_path / "missing.json")])
        disable_logging()

        assert result.exit_code == 1
        assert "missing.json" in (tmp_path / "livesuggest.log").read_text(encoding="utf-8")
