"""Unit tests for obsidian_link.cli - exit codes and output."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from obsidian_link import __version__
from obsidian_link.cli import main
from obsidian_link.exceptions import ClassificationError, ProviderError

runner = CliRunner()

CONFIG_YAML = """\
vault: {vault}
timezone: UTC
links:
  - name: youtube
    regex: 'youtube\\.com/watch'
    resolution: FHD
    folder: youtube
  - name: default
    regex: 'example\\.com'
    resolution: none
    folder: links
"""


@pytest.fixture(autouse=True)
def _isolate(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in ("YOUTUBE_API_KEY", "FIRECRAWL_API_KEY", "OBSIDIAN_LINK_CONFIG"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yml"
    path.write_text(CONFIG_YAML.format(vault=tmp_path / "vault"), encoding="utf-8")
    return path


class TestCli:
    def test_version(self) -> None:
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_url_required(self) -> None:
        result = runner.invoke(main, [])
        assert result.exit_code == 2

    def test_writes_weblink_note(self, config_file: Path, tmp_path: Path) -> None:
        result = runner.invoke(main, ["-c", str(config_file), "https://example.com/about"])
        assert result.exit_code == 0, result.output
        assert "Processing: https://example.com/about" in result.output
        note = tmp_path / "vault" / "links" / "about.md"
        assert f"Wrote note to: {note}" in result.output
        assert note.exists()

    def test_verbose_shows_rules(self, config_file: Path) -> None:
        result = runner.invoke(main, ["-c", str(config_file), "-v", "https://example.com/"])
        assert result.exit_code == 0, result.output
        assert "Rules: youtube, default" in result.output

    def test_missing_config_exits_2(self, tmp_path: Path) -> None:
        result = runner.invoke(main, ["-c", str(tmp_path / "missing.yml"), "https://example.com"])
        assert result.exit_code == 2
        assert "Configuration error" in result.output

    def test_missing_youtube_key_exits_2(self, config_file: Path) -> None:
        result = runner.invoke(main, ["-c", str(config_file), "https://www.youtube.com/watch?v=abc"])
        assert result.exit_code == 2
        assert "YOUTUBE_API_KEY" in result.output

    def test_unmatched_url_exits_1(self, config_file: Path) -> None:
        result = runner.invoke(main, ["-c", str(config_file), "https://nothing.test/"])
        assert result.exit_code == 1
        assert "No matching rule" in result.output

    def test_provider_error_exits_1(self, config_file: Path) -> None:
        with patch("obsidian_link.cli.handle_url", side_effect=ProviderError("quota exceeded")):
            result = runner.invoke(main, ["-c", str(config_file), "https://www.youtube.com/watch?v=abc"])
        assert result.exit_code == 1
        assert "Error: quota exceeded" in result.output

    def test_config_from_environment(
        self, config_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("OBSIDIAN_LINK_CONFIG", str(config_file))
        with patch("obsidian_link.cli.handle_url", side_effect=ClassificationError("nope")) as handler:
            result = runner.invoke(main, ["https://example.com"])
        assert result.exit_code == 1
        assert handler.call_args.args[0] == "https://example.com"
