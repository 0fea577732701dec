"""CLI settings for unienv.

The library itself needs no configuration. The command line tool reads an
optional JSON file so logging and the searched file name can be tuned
without code changes.
"""

from __future__ import annotations

import json
import os
from typing import Optional

from unienv.core.context import DEFAULT_ENV_FILE

DEFAULT_SETTINGS_FILE = "unienv.json"


def load_settings(path: Optional[str] = None) -> dict:
    """Load settings JSON; a missing default file means empty settings."""

    explicit = path is not None
    if path is None:
        path = os.path.join(os.getcwd(), DEFAULT_SETTINGS_FILE)

    if not os.path.exists(path):
        if explicit:
            raise FileNotFoundError(f"Settings file not found: {path}")
        return {}

    with open(path, "r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"Settings file must contain a JSON object: {path}")
    return data


def env_file_name(settings: dict) -> str:
    return str(settings.get("env_file") or DEFAULT_ENV_FILE)


def logging_settings(settings: dict) -> dict:
    # Logging configuration (optional).
    return settings.get("logging", {}) or {}


def settings_dir(path: Optional[str] = None) -> str:
    """Directory relative paths in the settings resolve against."""

    if path is None:
        return os.getcwd()
    return os.path.dirname(os.path.abspath(path))
