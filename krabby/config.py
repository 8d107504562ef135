"""
Global configuration for krabby.
All paths, constants, and user-tunable settings live here.
"""

from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional

from krabby.errors import ConfigurationError

logger = logging.getLogger(__name__)

# ── Paths ────────────────────────────────────────────────────────────────────
PACKAGE_DIR = Path(__file__).resolve().parent
ASSETS_DIR = PACKAGE_DIR / "data"
DATABASE_FILE = ASSETS_DIR / "pokemon.json"

APP_NAME = "krabby"
CONFIG_ENV_VAR = "KRABBY_CONFIG"
CONFIG_FILENAME = "config.json"

# ── Data constants ───────────────────────────────────────────────────────────
GENERATION_MIN = 1
GENERATION_MAX = 9
DEFAULT_GENERATIONS = "1-9"

LANGUAGES = ("en", "fr", "de", "ja", "zh_hans", "zh_hant")

# ── Defaults ─────────────────────────────────────────────────────────────────
DEFAULT_LANGUAGE = "en"
DEFAULT_SHINY_RATE = 1.0 / 128.0


@dataclass(frozen=True)
class Config:
    """User settings consumed by the database and renderer."""
    language: str = DEFAULT_LANGUAGE
    shiny_rate: float = DEFAULT_SHINY_RATE

    def validate(self) -> "Config":
        if not isinstance(self.language, str) or not self.language:
            raise ConfigurationError(f"language must be a non-empty string, got {self.language!r}")
        rate = self.shiny_rate
        if isinstance(rate, bool) or not isinstance(rate, (int, float)):
            raise ConfigurationError(f"shiny_rate must be a number, got {rate!r}")
        if math.isnan(rate) or not 0.0 <= rate <= 1.0:
            raise ConfigurationError(f"shiny_rate must be between 0 and 1, got {rate!r}")
        return self


def default_config_path() -> Path:
    """Resolve the settings file: $KRABBY_CONFIG, then the XDG config dir."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    base = os.environ.get("XDG_CONFIG_HOME")
    config_dir = Path(base) if base else Path.home() / ".config"
    return config_dir / APP_NAME / CONFIG_FILENAME


def load_config(path: Optional[Path] = None) -> Config:
    """
    Read settings from *path* (default: :func:`default_config_path`).

    A missing file yields the defaults, which are written back so the user
    has something to edit.  Malformed content raises ConfigurationError.
    """
    path = path or default_config_path()
    if not path.exists():
        config = Config()
        try:
            save_config(config, path)
        except OSError as exc:
            logger.warning("Could not write default config to %s: %s", path, exc)
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"invalid JSON in {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigurationError(f"{path} must contain a JSON object")

    known = {f.name for f in fields(Config)}
    for key in sorted(set(raw) - known):
        logger.warning("Ignoring unknown config key %r in %s", key, path)

    config = Config(**{k: v for k, v in raw.items() if k in known}).validate()
    if config.language not in LANGUAGES:
        logger.warning("Language %r is not one of %s", config.language, ", ".join(LANGUAGES))
    return config


def save_config(config: Config, path: Optional[Path] = None) -> Path:
    path = path or default_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(asdict(config), f, indent=2)
        f.write("\n")
    return path
