"""Configuration management for phonohash."""

import os
import sys
import tempfile
from pathlib import Path

import toml
from pydantic import BaseModel, Field, ValidationError

from phonohash.distance import MAX_DISTANCE, SIMILARITY_THRESHOLD

CONFIG_DIR = Path(os.environ.get("PHONOHASH_HOME", "~/.phonohash")).expanduser()
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Word lists tried when none is configured
SYSTEM_WORD_LISTS = (
    Path("/usr/share/dict/american-english"),
    Path("/usr/share/dict/words"),
)


class SuggestConfig(BaseModel):
    """Defaults for the suggestion scan."""

    max_candidates: int = Field(default=5, ge=1, le=100)
    # Fingerprint distance must be strictly below this
    max_distance: int = Field(default=SIMILARITY_THRESHOLD, ge=1, le=MAX_DISTANCE)


class PhonoHashConfig(BaseModel):
    """Main configuration model."""

    word_list: Path | None = None
    log_sessions: bool = True
    suggest: SuggestConfig = Field(default_factory=SuggestConfig)


def load_config(path: Path | None = None) -> PhonoHashConfig:
    """Load configuration from file, or create defaults."""
    path = path or CONFIG_FILE
    if not path.exists():
        config = PhonoHashConfig()
        save_config(config, path)
        return config

    try:
        data = toml.load(path)
        if isinstance(data.get("word_list"), str):
            data["word_list"] = Path(data["word_list"]).expanduser()
        return PhonoHashConfig(**data)
    except (toml.TomlDecodeError, ValueError, TypeError) as e:
        # pydantic's ValidationError is a ValueError; report it separately
        if isinstance(e, ValidationError):
            print(f"Warning: Config validation failed ({e}), using defaults", file=sys.stderr)
        else:
            print(f"Warning: Failed to load config ({e}), using defaults", file=sys.stderr)
    except OSError as e:
        print(f"Warning: Could not read config {path} ({e}), using defaults", file=sys.stderr)
    return PhonoHashConfig()


def save_config(config: PhonoHashConfig, path: Path | None = None) -> None:
    """Save configuration to file with atomic write."""
    path = path or CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(exclude_none=True)
    if config.word_list is not None:
        data["word_list"] = str(config.word_list)

    # Write to temporary file first (atomic operation)
    temp_fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=".config_", suffix=".toml.tmp")
    try:
        with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
            toml.dump(data, f)
        os.chmod(temp_path, 0o600)
        os.replace(temp_path, path)
    except Exception:
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise


def resolve_word_list(config: PhonoHashConfig, override: Path | None = None) -> Path | None:
    """Pick the word list to use: explicit override, configured, then system lists."""
    if override is not None:
        return override
    if config.word_list is not None:
        return config.word_list
    for candidate in SYSTEM_WORD_LISTS:
        if candidate.exists():
            return candidate
    return None
