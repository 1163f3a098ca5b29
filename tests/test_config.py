"""Tests for configuration loading and saving."""

from pathlib import Path

from phonohash import config as config_module
from phonohash.config import (
    PhonoHashConfig,
    SuggestConfig,
    load_config,
    resolve_word_list,
    save_config,
)


def test_missing_config_writes_defaults(phonohash_home):
    config = load_config()
    assert config == PhonoHashConfig()
    assert config_module.CONFIG_FILE.exists()


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "config.toml"
    original = PhonoHashConfig(
        word_list=Path("/tmp/words.txt"),
        log_sessions=False,
        suggest=SuggestConfig(max_candidates=10, max_distance=64),
    )
    save_config(original, path)
    assert load_config(path) == original


def test_invalid_config_falls_back_to_defaults(tmp_path, capsys):
    path = tmp_path / "config.toml"
    path.write_text("[suggest]\nmax_candidates = 0\n", encoding="utf-8")
    assert load_config(path) == PhonoHashConfig()
    assert "Warning" in capsys.readouterr().err


def test_malformed_toml_falls_back_to_defaults(tmp_path, capsys):
    path = tmp_path / "config.toml"
    path.write_text("this is = = not toml", encoding="utf-8")
    assert load_config(path) == PhonoHashConfig()
    assert "Warning" in capsys.readouterr().err


def test_resolve_word_list_prefers_override(tmp_path):
    override = tmp_path / "mine.txt"
    configured = PhonoHashConfig(word_list=tmp_path / "configured.txt")
    assert resolve_word_list(configured, override) == override
    assert resolve_word_list(configured) == tmp_path / "configured.txt"


def test_resolve_word_list_falls_back_to_system_lists(tmp_path, monkeypatch):
    system = tmp_path / "words"
    system.write_text("a\n", encoding="utf-8")
    monkeypatch.setattr(config_module, "SYSTEM_WORD_LISTS", (tmp_path / "nope", system))
    assert resolve_word_list(PhonoHashConfig()) == system

    monkeypatch.setattr(config_module, "SYSTEM_WORD_LISTS", (tmp_path / "nope",))
    assert resolve_word_list(PhonoHashConfig()) is None
