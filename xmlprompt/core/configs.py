"""Configuration management for xmlprompt.

Loads defaults from ~/.config/xmlprompt/config.cfg and an optional .env file,
with XMLPROMPT_* environment variables taking precedence.
Provides PromptSettings (serializer and rendering behavior).
"""

import configparser
from dataclasses import dataclass
from functools import lru_cache
import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import dotenv_values

from xmlprompt.prompts.parser import DEFAULT_MAX_DEPTH

# Default location for user configuration.
CONFIG_PATH = Path.home() / ".config" / "xmlprompt" / "config.cfg"
ENV_PREFIX = "XMLPROMPT_"


@dataclass(frozen=True)
class PromptSettings:
    max_depth: int = DEFAULT_MAX_DEPTH
    strict: bool = False


def load_raw_config(path: Path = CONFIG_PATH) -> Dict[str, str]:
    """
    Load configuration values from the standard config path.
    Values are returned with lowercase keys for convenience.
    """
    cfg = configparser.ConfigParser()
    data: Dict[str, str] = {}

    if path.exists():
        cfg.read(path)
        if "DEFAULT" in cfg:
            data.update({k.lower(): v for k, v in cfg["DEFAULT"].items()})

    return data


def load_env_file(path: Optional[Path] = None) -> Dict[str, str]:
    """
    Load XMLPROMPT_* values from a dotenv file (./.env by default).
    Keys are lowercased with the prefix stripped, matching load_raw_config.
    """
    path = path or Path.cwd() / ".env"
    if not path.exists():
        return {}

    data: Dict[str, str] = {}
    for key, value in dotenv_values(path).items():
        if value is None or not key.upper().startswith(ENV_PREFIX):
            continue
        data[key[len(ENV_PREFIX):].lower()] = value
    return data


def _get_bool(raw: Dict[str, str], key: str, default: bool = False) -> bool:
    value = raw.get(key)
    if isinstance(value, bool):
        return value
    if value is None or str(value).strip() == "":
        return default
    return str(value).strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_int(raw: Dict[str, str], key: str, default: int) -> int:
    value = raw.get(key)
    if value is None or str(value).strip() == "":
        return default
    try:
        return int(float(value))
    except (TypeError, ValueError):
        raise ValueError(f"Invalid value for '{key}': {value!r} is not a number.")


def get_settings(raw: Optional[Dict[str, str]] = None) -> PromptSettings:
    """
    Build PromptSettings from raw configuration values.

    Precedence (highest first): XMLPROMPT_* environment variables, ``raw``
    (or, when omitted, the .env file then config.cfg).
    Raises ValueError if a value is malformed.
    """
    if raw is None:
        raw = {**load_raw_config(CONFIG_PATH), **load_env_file()}
    else:
        raw = dict(raw)

    for key in ("max_depth", "strict"):
        env_value = os.environ.get(f"{ENV_PREFIX}{key.upper()}")
        if env_value is not None and env_value.strip() != "":
            raw[key] = env_value

    max_depth = _get_int(raw, "max_depth", DEFAULT_MAX_DEPTH)
    if max_depth < 1:
        raise ValueError(f"max_depth must be at least 1, got {max_depth}.")

    return PromptSettings(
        max_depth=max_depth,
        strict=_get_bool(raw, "strict", False),
    )


@lru_cache(maxsize=1)
def get_default_settings() -> PromptSettings:
    """Settings from the user's config files and environment, loaded once."""
    return get_settings()


def reset_settings_cache() -> None:
    """Forget cached settings so the next call re-reads files and environment."""
    get_default_settings.cache_clear()
