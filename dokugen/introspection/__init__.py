"""Project introspection: traversal, stack classification, features and snippets."""

from __future__ import annotations

from .engine import IntrospectionEngine
from .features import check_dependency, detect_features
from .language import classify_language
from .snippets import extract_snippets, format_snippet
from .traverser import DEFAULT_EXCLUDED_DIRS, DEFAULT_EXCLUDED_FILES, scan_files

__all__ = [
    "DEFAULT_EXCLUDED_DIRS",
    "DEFAULT_EXCLUDED_FILES",
    "IntrospectionEngine",
    "check_dependency",
    "classify_language",
    "detect_features",
    "extract_snippets",
    "format_snippet",
    "scan_files",
]
