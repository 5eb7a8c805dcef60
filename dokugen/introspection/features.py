"""Architectural feature detection from manifest keywords."""

from __future__ import annotations

from pathlib import Path
from typing import Collection, Dict, Iterable, Sequence

from ..logging import get_logger
from ..models import FeatureSet, ManifestKeywordRule
from .rules import CONTAINER_MARKERS, FEATURE_API, FEATURE_DATABASE, FEATURE_RULES

logger = get_logger("features")


def check_dependency(path: Path, keywords: Iterable[str]) -> bool:
    """Return True when the manifest at ``path`` contains any keyword, ignoring case.

    A missing manifest simply does not match.
    """
    if not path.is_file():
        return False
    try:
        content = path.read_text(encoding="utf-8").casefold()
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Unable to read manifest %s: %s", path, exc)
        return False
    return any(keyword.casefold() in content for keyword in keywords)


def has_container_marker(files: Collection[str], markers: Sequence[str] = CONTAINER_MARKERS) -> bool:
    """Return True when a containerization marker sits at the project root."""
    file_set = set(files)
    return any(marker in file_set for marker in markers)


def evaluate_rules(root: Path, rules: Sequence[ManifestKeywordRule]) -> Dict[str, bool]:
    """OR together every rule's match into one flag per feature name."""
    flags: Dict[str, bool] = {}
    for rule in rules:
        if flags.get(rule.feature):
            continue
        flags[rule.feature] = check_dependency(root / rule.manifest, rule.keywords)
    return flags


def detect_features(
    root: Path | str,
    files: Collection[str],
    rules: Sequence[ManifestKeywordRule] = FEATURE_RULES,
) -> FeatureSet:
    """Infer containerization, API and database usage for the project."""
    root_path = Path(root)
    flags = evaluate_rules(root_path, rules)
    features = FeatureSet(
        has_container=has_container_marker(files),
        has_api=flags.get(FEATURE_API, False),
        has_database=flags.get(FEATURE_DATABASE, False),
    )
    logger.debug("Detected features for %s: %s", root_path, features)
    return features


__all__ = ["check_dependency", "detect_features", "evaluate_rules", "has_container_marker"]
