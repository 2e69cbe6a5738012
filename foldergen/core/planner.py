from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from foldergen.core.catalog import iter_catalog
from foldergen.models import Category, PlanItem


def category_base_path(base_path: str, root_folder: Optional[str], folder: str, root_only: bool) -> Path:
    if root_only:
        return Path(base_path) / folder
    # An empty root folder collapses to no nesting.
    return Path(base_path) / (root_folder or "") / folder


def build_scaffold_plan(
    base_path: str,
    root_folder: Optional[str],
    categories: Category,
    placeholder_name: Optional[str] = None,
) -> List[PlanItem]:
    """
    Dry-run scaffold plan:
      - one "dir" item per folder to ensure, parents first
      - one "placeholder" item per leaf folder when a placeholder name is set

    Folders that receive subfolders get no placeholder of their own.
    """
    plan: List[PlanItem] = []
    if not categories:
        return plan

    root_folder = root_folder or ""

    for entry in iter_catalog():
        if not (entry.category & categories):
            continue

        base = category_base_path(base_path, root_folder, entry.folder, entry.root_only)
        plan.append(PlanItem("dir", str(base), entry.category))

        leaves = [base / sub for sub in entry.subfolders] if entry.subfolders else [base]
        for leaf in leaves:
            if leaf != base:
                plan.append(PlanItem("dir", str(leaf), entry.category))
            if placeholder_name:
                plan.append(PlanItem("placeholder", str(leaf / placeholder_name), entry.category))

    return plan
