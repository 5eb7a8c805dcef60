"""Source snippet extraction for the README generator."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path, PurePosixPath
from typing import Collection, List, Optional, Sequence

from ..logging import get_logger
from ..models import (
    SNIPPET_MISSING,
    SNIPPET_READ,
    SNIPPET_UNREADABLE,
    SnippetBundle,
    SnippetOutcome,
)
from .rules import NO_SNIPPETS, SNIPPET_EXTENSIONS

logger = get_logger("snippets")


def format_snippet(path: str, content: str) -> str:
    """Render one file as a labelled fenced block."""
    return f"\n### {path}\n```\n{content}\n```\n"


def select_files(files: Sequence[str], extensions: Collection[str] = SNIPPET_EXTENSIONS) -> List[str]:
    """Keep only files whose extension is on the allow-list."""
    allowed = {ext.lower() for ext in extensions}
    return [file for file in files if PurePosixPath(file).suffix.lower() in allowed]


def read_snippet(root: Path, rel_path: str) -> SnippetOutcome:
    target = root / rel_path
    if not target.exists():
        return SnippetOutcome(path=rel_path, status=SNIPPET_MISSING, reason="file no longer exists")
    try:
        # Raw decode; CRLF line endings stay intact.
        content = target.read_bytes().decode("utf-8")
    except FileNotFoundError:
        return SnippetOutcome(path=rel_path, status=SNIPPET_MISSING, reason="file no longer exists")
    except (OSError, UnicodeDecodeError) as exc:
        return SnippetOutcome(path=rel_path, status=SNIPPET_UNREADABLE, reason=str(exc))
    return SnippetOutcome(path=rel_path, status=SNIPPET_READ, content=content)


def extract_snippets(
    root: Path | str,
    files: Sequence[str],
    extensions: Collection[str] = SNIPPET_EXTENSIONS,
    *,
    max_workers: Optional[int] = None,
) -> SnippetBundle:
    """Read allow-listed files concurrently and bundle them as fenced blocks.

    Every read is awaited before the bundle is assembled. Files that vanish
    or cannot be decoded are recorded as skipped outcomes rather than raised.
    """
    root_path = Path(root)
    selected = select_files(files, extensions)
    if not selected:
        return SnippetBundle(outcomes=(), text=NO_SNIPPETS)

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="dokugen-snippet") as pool:
        # map() yields results in submission order, one slot per file.
        outcomes = tuple(pool.map(lambda rel_path: read_snippet(root_path, rel_path), selected))

    for outcome in outcomes:
        if not outcome.ok:
            logger.debug("Skipped snippet %s (%s): %s", outcome.path, outcome.status, outcome.reason)

    blocks = [format_snippet(outcome.path, outcome.content or "") for outcome in outcomes if outcome.ok]
    text = "".join(blocks) if blocks else NO_SNIPPETS
    return SnippetBundle(outcomes=outcomes, text=text)


__all__ = ["extract_snippets", "format_snippet", "read_snippet", "select_files"]
