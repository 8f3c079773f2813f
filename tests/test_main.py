"""Tests for configuration loading, logging setup and the command line."""

import json
import logging

import pytest

from src.main import format_puzzle, load_config, main
from src.puzzles import generate_puzzle
from src.utils.logging import setup_logging

CONFIG_YAML = """
seed: 42
max_attempts: 50
word_count: 2
leaderboard_limit: 5
vocabulary:
  - {word: whale, translation: baleine, difficulty: easy, book_id: moby-dick}
  - {word: ship, translation: navire, difficulty: easy, book_id: moby-dick}
  - {word: sea, translation: mer, difficulty: easy, book_id: moby-dick}
"""


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLoadConfig:
    """YAML configuration."""

    def test_loads_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(CONFIG_YAML)

        config = load_config(str(path))

        assert config.seed == 42
        assert config.max_attempts == 50
        assert config.leaderboard_limit == 5
        assert [p.word for p in config.vocabulary] == ["whale", "ship", "sea"]

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")

        config = load_config(str(path))

        assert config.max_attempts == 100
        assert config.leaderboard_limit == 10
        assert config.vocabulary == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))


class TestSetupLogging:
    """Environment-driven logging configuration."""

    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        setup_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_invalid_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError, match="LOG_LEVEL"):
            setup_logging()

    def test_invalid_format(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "xml")
        with pytest.raises(ValueError, match="LOG_FORMAT"):
            setup_logging()


class TestCommandLine:
    """The generate and score sub-commands."""

    def test_score(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["main", "score", "2", "30"])
        assert main() == 0
        assert capsys.readouterr().out.strip() == "840"

    def test_generate_with_words(self, monkeypatch, capsys):
        monkeypatch.setattr(
            "sys.argv",
            ["main", "generate", "--book", "b1", "--words", "cat", "dog", "--word-count", "2", "--seed", "1", "--json"],
        )
        assert main() == 0

        data = json.loads(capsys.readouterr().out)
        assert data["words"] == ["CAT", "DOG"]
        assert data["size"] == 8
        assert len(data["grid"]) == 8

    def test_generate_from_config_vocabulary(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "config.yaml"
        path.write_text(CONFIG_YAML)
        monkeypatch.setattr(
            "sys.argv",
            ["main", "generate", "--book", "moby-dick", "--config", str(path)],
        )
        assert main() == 0

        out = capsys.readouterr().out
        assert "Words (2):" in out
        assert "WHALE" in out
        assert "SHIP" in out

    def test_bad_config(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr(
            "sys.argv",
            ["main", "generate", "--book", "b1", "--config", str(tmp_path / "missing.yaml")],
        )
        assert main() == 1
        assert "Error loading config" in capsys.readouterr().err

    def test_format_puzzle(self, rng):
        puzzle = generate_puzzle("b1", "easy", ["CAT"], 1, rng=rng)
        text = format_puzzle(puzzle)
        assert text.splitlines()[0] == "Book: b1  Difficulty: easy  Size: 8x8"
        assert "CAT" in text
