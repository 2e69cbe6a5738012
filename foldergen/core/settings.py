from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from foldergen.config import DEFAULT_PLACEHOLDER_NAME, DEFAULT_ROOT_FOLDER
from foldergen.core.catalog import CATALOG, categories_from_names, category_names
from foldergen.models import Category, ScaffoldRequest


class SettingsError(ValueError):
    pass


@dataclass(frozen=True)
class ScaffoldSettings:
    root_folder: str = DEFAULT_ROOT_FOLDER
    categories: Tuple[str, ...] = tuple(e.folder for e in CATALOG)
    placeholder_enabled: bool = True
    placeholder_name: str = DEFAULT_PLACEHOLDER_NAME

    @property
    def selected(self) -> Category:
        return categories_from_names(self.categories)

    @property
    def effective_placeholder(self) -> Optional[str]:
        # Enabled with an empty name means disabled.
        if self.placeholder_enabled and self.placeholder_name.strip():
            return self.placeholder_name.strip()
        return None

    def to_request(self, base_path: str) -> ScaffoldRequest:
        return ScaffoldRequest(
            base_path=base_path,
            root_folder=self.root_folder,
            categories=self.selected,
            placeholder_name=self.effective_placeholder,
        )


def default_settings() -> ScaffoldSettings:
    return ScaffoldSettings()


def settings_for(
    root_folder: str,
    categories: Category,
    placeholder_enabled: bool,
    placeholder_name: str,
) -> ScaffoldSettings:
    return ScaffoldSettings(
        root_folder=root_folder,
        categories=tuple(category_names(categories)),
        placeholder_enabled=placeholder_enabled,
        placeholder_name=placeholder_name,
    )


def _json_bool(raw: Any, *, default: bool) -> bool:
    # Hand-edited files may hold "false" or 0 instead of a JSON boolean.
    if raw is None:
        return default
    if isinstance(raw, str):
        v = raw.strip().lower()
        if v in ("1", "true", "yes", "on"):
            return True
        if v in ("0", "false", "no", "off"):
            return False
        return default
    return bool(raw)


def to_json_dict(settings: ScaffoldSettings) -> Dict[str, Any]:
    return asdict(settings)


def from_json_dict(d: Dict[str, Any]) -> ScaffoldSettings:
    defaults = default_settings()

    cats_in = d.get("categories")
    if cats_in is None:
        cats = defaults.categories
    else:
        # Normalise spelling and drop names the catalog doesn't know.
        cats = tuple(category_names(categories_from_names([str(x) for x in cats_in])))

    name = d.get("placeholder_name")
    return ScaffoldSettings(
        root_folder=str(d.get("root_folder", defaults.root_folder) or "").strip(),
        categories=cats,
        placeholder_enabled=_json_bool(d.get("placeholder_enabled"), default=defaults.placeholder_enabled),
        placeholder_name=defaults.placeholder_name if name is None else str(name).strip(),
    )


def load_settings(path: Path) -> ScaffoldSettings:
    path = Path(path)
    try:
        d = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise SettingsError(f"Could not read settings {path}: {e}") from e
    if not isinstance(d, dict):
        raise SettingsError(f"Settings file {path} must contain a JSON object")
    return from_json_dict(d)


def load_settings_or_default(path: Path) -> ScaffoldSettings:
    if not Path(path).exists():
        return default_settings()
    return load_settings(path)


def save_settings(settings: ScaffoldSettings, path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(to_json_dict(settings), indent=2), encoding="utf-8")
    return path
