"""Application configuration management."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from pompom.models import AppConfig

_DATA_DIR = Path.home() / ".pompom"
_CONFIG_DIR = _DATA_DIR
_CONFIG_FILE = _CONFIG_DIR / "config.json"

_DEFAULT_DB_NAME = "worklog.db"
_DEFAULT_SOUND_NAME = "sound.wav"


def load_config() -> AppConfig:
    """Load config from disk, returning defaults if none exists."""
    if _CONFIG_FILE.exists():
        try:
            data = json.loads(_CONFIG_FILE.read_text())
            return AppConfig(**data)
        except (json.JSONDecodeError, Exception):
            pass
    return AppConfig()


def save_config(config: AppConfig) -> Path:
    """Write config to disk. Returns the config file path."""
    _CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    _CONFIG_FILE.write_text(config.model_dump_json(indent=2))
    return _CONFIG_FILE


def get_db_path(config: Optional[AppConfig] = None) -> Path:
    """Resolve the work log path from config (or default).

    The file and its directory are not created here; the work log does that
    on first use.
    """
    if config is None:
        config = load_config()
    if config.db_path is not None:
        return Path(config.db_path).expanduser()
    return _DATA_DIR / _DEFAULT_DB_NAME


def set_db_path(path: str) -> AppConfig:
    """Set a custom work log path and save config."""
    resolved = Path(path).expanduser().resolve()
    # Ensure it ends with a filename
    if resolved.is_dir():
        resolved = resolved / _DEFAULT_DB_NAME
    config = load_config()
    config.db_path = str(resolved)
    save_config(config)
    return config


def reset_db_path() -> AppConfig:
    """Reset to the default work log path."""
    config = load_config()
    config.db_path = None
    save_config(config)
    return config


def get_sound_path(config: Optional[AppConfig] = None) -> Path:
    """Resolve the completion sound from config (or default)."""
    if config is None:
        config = load_config()
    if config.sound_path is not None:
        return Path(config.sound_path).expanduser()
    return _DATA_DIR / _DEFAULT_SOUND_NAME


def set_sound_path(path: str) -> AppConfig:
    """Set a custom completion sound and save config."""
    config = load_config()
    config.sound_path = str(Path(path).expanduser().resolve())
    save_config(config)
    return config
