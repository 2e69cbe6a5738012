from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Tuple

from foldergen.models import ALL_CATEGORIES, NO_CATEGORIES, Category


@dataclass(frozen=True)
class CatalogEntry:
    category: Category
    folder: str                         # on-disk name, e.g. "StreamingAssets"
    subfolders: Tuple[str, ...] = ()    # relative to the category folder
    root_only: bool = False             # created under the base path, ignoring the root folder


# Declaration order is the generation order.
CATALOG: Tuple[CatalogEntry, ...] = (
    CatalogEntry(Category.ANIMATIONS, "Animations", ("Sources", "Controllers")),
    CatalogEntry(Category.FONTS, "Fonts"),
    CatalogEntry(Category.IMAGES, "Images", ("AppIcon", "Ui", "Ui/Sources")),
    CatalogEntry(Category.MODELS, "Models"),
    CatalogEntry(Category.PLUGINS, "Plugins", root_only=True),
    CatalogEntry(Category.PREFABS, "Prefabs"),
    CatalogEntry(Category.RESOURCES, "Resources"),
    CatalogEntry(Category.SCENES, "Scenes"),
    CatalogEntry(Category.SCRIPTS, "Scripts"),
    CatalogEntry(Category.SHADERS, "Shaders"),
    CatalogEntry(Category.SOUNDS, "Sounds"),
    CatalogEntry(Category.STREAMING_ASSETS, "StreamingAssets"),
)

_BY_CATEGORY: Dict[Category, CatalogEntry] = {e.category: e for e in CATALOG}


def iter_catalog() -> Iterator[CatalogEntry]:
    return iter(CATALOG)


def entry_for(category: Category) -> CatalogEntry:
    try:
        return _BY_CATEGORY[category]
    except KeyError:
        raise ValueError(f"Not a single catalog category: {category!r}") from None


def folder_name(category: Category) -> str:
    return entry_for(category).folder


def subfolders_for(category: Category) -> Tuple[str, ...]:
    entry = _BY_CATEGORY.get(category)
    return entry.subfolders if entry else ()


def is_root_only(category: Category) -> bool:
    entry = _BY_CATEGORY.get(category)
    return bool(entry and entry.root_only)


def category_names(categories: Category) -> List[str]:
    """Folder names of the selected categories, in catalog order."""
    return [e.folder for e in CATALOG if e.category & categories]


def parse_categories(text: str) -> Category:
    """
    Parse a comma-separated list of folder names (case-insensitive) or "all".
    An empty string selects nothing.
    """
    raw = (text or "").strip()
    if raw.lower() == "all":
        return ALL_CATEGORIES

    lookup = {e.folder.lower(): e.category for e in CATALOG}
    lookup.update({e.category.name.lower(): e.category for e in CATALOG})

    selected = NO_CATEGORIES
    unknown: List[str] = []
    for token in raw.split(","):
        name = token.strip()
        if not name:
            continue
        cat = lookup.get(name.lower())
        if cat is None:
            unknown.append(name)
            continue
        selected |= cat

    if unknown:
        valid = ", ".join(e.folder for e in CATALOG)
        raise ValueError(f"Unknown categories: {', '.join(unknown)} (valid: {valid}, or 'all')")

    return selected


def categories_from_names(names: Iterable[str]) -> Category:
    """Lenient variant of parse_categories: unknown names are dropped."""
    lookup = {e.folder.lower(): e.category for e in CATALOG}
    selected = NO_CATEGORIES
    for n in names:
        cat = lookup.get(str(n).strip().lower())
        if cat is not None:
            selected |= cat
    return selected
