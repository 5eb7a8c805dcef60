"""Sequences traversal, classification, detection and extraction."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Collection, Optional

from ..config import DokugenConfig, load_config
from ..errors import NoFilesFoundError
from ..logging import get_logger
from ..models import IntrospectionResult
from .features import detect_features
from .language import classify_language
from .rules import SNIPPET_EXTENSIONS
from .snippets import extract_snippets
from .traverser import DEFAULT_EXCLUDED_DIRS, DEFAULT_EXCLUDED_FILES, scan_files


class IntrospectionEngine:
    """Builds an :class:`IntrospectionResult` for a project directory."""

    def __init__(
        self,
        *,
        excluded_dirs: Collection[str] = DEFAULT_EXCLUDED_DIRS,
        excluded_files: Collection[str] = DEFAULT_EXCLUDED_FILES,
        extensions: Collection[str] = SNIPPET_EXTENSIONS,
        max_workers: Optional[int] = None,
        config_loader: Callable[[Path], DokugenConfig] | None = load_config,
    ) -> None:
        self.excluded_dirs = frozenset(excluded_dirs)
        self.excluded_files = frozenset(excluded_files)
        self.extensions = frozenset(extensions)
        self.max_workers = max_workers
        self.config_loader = config_loader
        self.logger = get_logger("engine")

    def introspect(self, path: Path | str) -> IntrospectionResult:
        """Inspect ``path`` and return everything the detectors inferred.

        Raises ``FileNotFoundError`` or ``NotADirectoryError`` before any
        traversal when the root is unusable, and ``NoFilesFoundError`` when
        traversal finds nothing.
        """
        root = self._resolve_root(path)
        config = self.config_loader(root) if self.config_loader is not None else None

        excluded_dirs = set(self.excluded_dirs)
        excluded_files = set(self.excluded_files)
        extensions = set(self.extensions)
        max_workers = self.max_workers
        if config is not None:
            excluded_dirs.update(config.exclude_dirs)
            excluded_files.update(config.exclude_files)
            extensions.update(config.snippets.extra_extensions)
            max_workers = max_workers or config.snippets.max_workers

        files = scan_files(root, excluded_dirs, excluded_files)
        if not files:
            self.logger.warning("No files found in %s", root)
            raise NoFilesFoundError(str(root))
        self.logger.debug("Found %d files in %s", len(files), root)

        language_label = classify_language(root)
        features = detect_features(root, files)
        bundle = extract_snippets(root, files, extensions, max_workers=max_workers)
        self.logger.debug(
            "Extracted %d snippets (%d skipped)", len(bundle.read_paths), len(bundle.skipped)
        )

        return IntrospectionResult(
            root=str(root),
            language_label=language_label,
            files=tuple(files),
            features=features,
            snippet_bundle=bundle.text,
        )

    @staticmethod
    def _resolve_root(path: Path | str) -> Path:
        root = Path(path).expanduser().resolve()
        if not root.exists():
            raise FileNotFoundError(f"Project path not found: {path}")
        if not root.is_dir():
            raise NotADirectoryError(f"Project path is not a directory: {path}")
        if not os.access(root, os.R_OK | os.X_OK):
            raise PermissionError(f"Project path is not readable: {path}")
        return root


__all__ = ["IntrospectionEngine"]
