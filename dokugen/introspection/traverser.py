"""Recursive project file discovery."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Collection, Iterator, List

from ..logging import get_logger

DEFAULT_EXCLUDED_DIRS: frozenset[str] = frozenset(
    {
        ".git",
        ".hg",
        ".svn",
        "node_modules",
        ".vscode",
        ".idea",
        ".next",
        "dist",
        "build",
        "target",
        "__pycache__",
        ".venv",
        ".pytest_cache",
        ".mypy_cache",
    }
)

DEFAULT_EXCLUDED_FILES: frozenset[str] = frozenset(
    {
        "package-lock.json",
        "yarn.lock",
        "pnpm-lock.yaml",
        "Cargo.lock",
        "poetry.lock",
        "go.sum",
        ".DS_Store",
        "Thumbs.db",
    }
)

logger = get_logger("traverser")


def _log_walk_error(error: OSError) -> None:
    logger.warning("Skipping unreadable directory %s: %s", error.filename, error.strerror or error)


def _iter_files(
    root: Path, excluded_dirs: Collection[str], excluded_files: Collection[str]
) -> Iterator[str]:
    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        current_dir = Path(dirpath)
        rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

        # Prune in place so os.walk never descends into excluded subtrees.
        dirnames[:] = sorted(name for name in dirnames if name not in excluded_dirs)

        for filename in sorted(filenames):
            if filename in excluded_files:
                continue
            if not (current_dir / filename).is_file():
                continue
            yield f"{rel_dir}/{filename}" if rel_dir else filename


def scan_files(
    root: Path | str,
    excluded_dirs: Collection[str] = DEFAULT_EXCLUDED_DIRS,
    excluded_files: Collection[str] = DEFAULT_EXCLUDED_FILES,
) -> List[str]:
    """Return every regular file under ``root`` as a forward-slash relative path.

    Directories whose name appears in ``excluded_dirs`` are pruned at any depth.
    Subtrees that cannot be listed are logged and skipped.
    """
    root_path = Path(root)
    files = list(_iter_files(root_path, set(excluded_dirs), set(excluded_files)))
    logger.debug("Traversal of %s found %d files", root_path, len(files))
    return files


__all__ = ["DEFAULT_EXCLUDED_DIRS", "DEFAULT_EXCLUDED_FILES", "scan_files"]
