"""Markdown summaries of introspection results rendered with Jinja2."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .models import IntrospectionResult

_TEMPLATES_DIR = Path(__file__).with_name("templates")


def _create_env(templates_dir: Path | None = None) -> Environment:
    directories = []
    if templates_dir:
        directories.append(str(templates_dir))
    directories.append(str(_TEMPLATES_DIR))
    loader = FileSystemLoader(directories)
    return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)


def render_summary(
    result: IntrospectionResult,
    *,
    include_snippets: bool = False,
    templates_dir: Path | None = None,
) -> str:
    """Render the summary template for ``result``."""
    env = _create_env(templates_dir)
    template = env.get_template("summary.md.j2")
    features = [
        ("Containerized", result.features.has_container),
        ("HTTP API", result.features.has_api),
        ("Database", result.features.has_database),
    ]
    return (
        template.render(
            project_name=Path(result.root).name or "Project",
            result=result,
            features=features,
            include_snippets=include_snippets,
        ).strip()
        + "\n"
    )


__all__ = ["render_summary"]
