from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple


class Category(enum.Flag):
    # Stable bit values; never renumber.
    ANIMATIONS = 1
    FONTS = 2
    IMAGES = 4
    MODELS = 8
    PLUGINS = 16
    PREFABS = 32
    RESOURCES = 64
    SCENES = 128
    SCRIPTS = 256
    SHADERS = 512
    SOUNDS = 1024
    STREAMING_ASSETS = 2048


NO_CATEGORIES = Category(0)
ALL_CATEGORIES = Category(sum(c.value for c in Category.__members__.values()))


@dataclass(frozen=True)
class ScaffoldRequest:
    base_path: str
    root_folder: Optional[str]
    categories: Category
    placeholder_name: Optional[str] = None


@dataclass(frozen=True)
class PlanItem:
    kind: str      # dir | placeholder
    path: str
    category: Category


@dataclass(frozen=True)
class ScaffoldResult:
    status: str  # success | noop | error
    message: Optional[str] = None
    category: Optional[Category] = None
    path: Optional[str] = None
    created_dirs: Tuple[str, ...] = ()
    created_files: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status != "error"

    def describe(self) -> str:
        if self.status == "success":
            return "Success"
        if self.status == "noop":
            return "Nothing selected"

        where = []
        if self.category is not None:
            where.append(self.category.name.title().replace("_", ""))
        if self.path:
            where.append(f"({self.path})")
        prefix = " ".join(where)
        return f"{prefix}: {self.message}" if prefix else str(self.message)
