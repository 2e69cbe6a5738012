from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional

from foldergen.core.planner import build_scaffold_plan
from foldergen.models import Category, PlanItem, ScaffoldRequest, ScaffoldResult

logger = logging.getLogger(__name__)


def _ensure_dir(path: Path) -> bool:
    """Returns True when the folder was created by this call."""
    if path.is_dir():
        return False
    path.mkdir(parents=True, exist_ok=True)
    return True


def _ensure_placeholder(path: Path) -> bool:
    """
    Creates an empty file unless one already exists.
    Exclusive create, so a file written concurrently is left as-is.
    """
    try:
        with path.open("x", encoding="utf-8"):
            pass
    except FileExistsError:
        # A folder with the placeholder name is not a placeholder.
        if not path.is_file():
            raise
        return False
    return True


def execute_plan(
    plan: List[PlanItem],
    progress_cb: Optional[Callable[[int, int, PlanItem], None]] = None,
) -> ScaffoldResult:
    """
    Applies a scaffold plan in order. The first filesystem error aborts the run;
    anything created before it stays on disk.
    """
    created_dirs: List[str] = []
    created_files: List[str] = []
    total = len(plan)

    for idx, item in enumerate(plan, start=1):
        if progress_cb:
            progress_cb(idx, total, item)

        path = Path(item.path)
        try:
            if item.kind == "dir":
                if _ensure_dir(path):
                    created_dirs.append(item.path)
                    logger.debug("Created folder %s", path)
            elif item.kind == "placeholder":
                if _ensure_placeholder(path):
                    created_files.append(item.path)
                    logger.debug("Created placeholder %s", path)
            else:
                raise ValueError(f"Unknown plan item kind: {item.kind}")
        except (OSError, ValueError) as e:
            # ValueError covers unusable paths, e.g. an embedded NUL byte.
            logger.info("Scaffold failed at %s: %s", path, e)
            return ScaffoldResult(
                status="error",
                message=str(e),
                category=item.category,
                path=item.path,
                created_dirs=tuple(created_dirs),
                created_files=tuple(created_files),
            )

    logger.info("Scaffold done: %d folder(s), %d placeholder(s) created", len(created_dirs), len(created_files))
    return ScaffoldResult(status="success", created_dirs=tuple(created_dirs), created_files=tuple(created_files))


def scaffold(
    base_path: str,
    root_folder: Optional[str],
    categories: Category,
    placeholder_name: Optional[str] = None,
    progress_cb: Optional[Callable[[int, int, PlanItem], None]] = None,
) -> ScaffoldResult:
    """
    Creates the folder skeleton for the selected categories.

    Root-only categories go directly under base_path; the rest under
    base_path/root_folder. A falsy placeholder_name disables placeholders.
    Names are used as given, without sanitising.
    """
    if not categories:
        logger.info("Scaffold skipped: no categories selected")
        return ScaffoldResult(status="noop")

    plan = build_scaffold_plan(base_path, root_folder or "", categories, placeholder_name)
    return execute_plan(plan, progress_cb=progress_cb)


def scaffold_request(request: ScaffoldRequest, **kwargs) -> ScaffoldResult:
    return scaffold(
        request.base_path,
        request.root_folder,
        request.categories,
        request.placeholder_name,
        **kwargs,
    )
