"""Pytest fixtures for phonohash tests."""

from pathlib import Path

import pytest

from phonohash import config as config_module
from phonohash import logging as logging_module

WORDS = [
    "jumbo",
    "horse",
    "norse",
    "computer",
    "commuter",
    "meyer",
    "lizard",
    "wizard",
]


@pytest.fixture
def phonohash_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config and session logs at a temporary directory."""
    home = tmp_path / "home"
    monkeypatch.setattr(config_module, "CONFIG_DIR", home)
    monkeypatch.setattr(config_module, "CONFIG_FILE", home / "config.toml")
    monkeypatch.setattr(logging_module, "LOGS_DIR", home / "logs")
    logging_module.set_logger(None)
    return home


@pytest.fixture
def word_list_file(tmp_path: Path) -> Path:
    """Return path to a small word list, one word per line."""
    path = tmp_path / "words.txt"
    path.write_text("\n".join(WORDS) + "\n\n", encoding="utf-8")
    return path
