from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "Project Folders Generator"
APP_VERSION = "1.0.0"

DEFAULT_ROOT_FOLDER = "Client"
DEFAULT_PLACEHOLDER_NAME = "RemoveMe.txt"

SETTINGS_FILENAME = "settings.json"


def _env_str(name: str) -> str:
    return str(os.environ.get(name) or "").strip()


def settings_path() -> Path:
    explicit = _env_str("FOLDERGEN_SETTINGS")
    if explicit:
        return Path(explicit).expanduser()

    home = _env_str("FOLDERGEN_HOME")
    base = Path(home).expanduser() if home else Path.home() / ".foldergen"
    return base / SETTINGS_FILENAME
