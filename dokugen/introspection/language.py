"""Project stack classification from root-level marker files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Sequence

from ..models import MarkerRule
from .rules import MARKER_RULES, UNKNOWN_STACK


def matched_labels(root: Path | str, rules: Sequence[MarkerRule] = MARKER_RULES) -> List[str]:
    """Return the labels of every rule with a marker present, in rule order."""
    root_path = Path(root)
    listing = set(os.listdir(root_path))

    def _present(marker: str) -> bool:
        if "/" in marker:
            return (root_path / marker).is_file()
        return marker in listing

    labels: List[str] = []
    for rule in rules:
        if rule.label in labels:
            continue
        if any(_present(marker) for marker in rule.markers):
            labels.append(rule.label)
    return labels


def classify_language(root: Path | str, rules: Sequence[MarkerRule] = MARKER_RULES) -> str:
    """Describe the project's stack(s), or explain which markers are expected."""
    labels = matched_labels(root, rules)
    if not labels:
        return UNKNOWN_STACK
    return ", ".join(labels)


__all__ = ["classify_language", "matched_labels"]
