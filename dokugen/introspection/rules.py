"""Declarative rule tables for stack classification and feature detection.

Adding support for another ecosystem means adding entries here; the
detectors iterate these tables without knowing about specific languages.
"""

from __future__ import annotations

from typing import Tuple

from ..models import ManifestKeywordRule, MarkerRule

FEATURE_CONTAINER = "has_container"
FEATURE_API = "has_api"
FEATURE_DATABASE = "has_database"

UNKNOWN_STACK = (
    "Unknown please make sure u have a (e.g., package.json, go.mod, Cargo.toml, etc.)"
)

MARKER_RULES: Tuple[MarkerRule, ...] = (
    MarkerRule(("go.mod",), "Golang"),
    MarkerRule(("requirements.txt", "pyproject.toml"), "Python"),
    MarkerRule(("Cargo.toml",), "Rust"),
    MarkerRule(("package.json",), "JavaScript/TypeScript"),
    MarkerRule(("index.html", "src/App.tsx", "src/App.jsx"), "Frontend (React)"),
    MarkerRule(("pom.xml", "build.gradle"), "Java"),
    MarkerRule(
        ("next.config.ts", "next.config.js", "app/page.jsx", "app/page.tsx"),
        "Frontend (Next Js)",
    ),
    MarkerRule(("src/App.vue",), "Frontend (Vue Js)"),
)

CONTAINER_MARKERS: Tuple[str, ...] = ("Dockerfile", "docker-compose.yml")

_PYTHON_API = ("flask", "django", "fastapi")
_PYTHON_DATABASE = ("sqlalchemy", "psycopg2", "pymongo", "redis")

API_RULES: Tuple[ManifestKeywordRule, ...] = (
    ManifestKeywordRule("package.json", ("express", "fastify", "koa", "hapi"), FEATURE_API),
    ManifestKeywordRule("go.mod", ("net/http", "gin-gonic", "fiber"), FEATURE_API),
    ManifestKeywordRule("Cargo.toml", ("actix-web", "rocket"), FEATURE_API),
    ManifestKeywordRule("requirements.txt", _PYTHON_API, FEATURE_API),
    ManifestKeywordRule("pyproject.toml", _PYTHON_API, FEATURE_API),
    ManifestKeywordRule("pom.xml", ("spring-boot", "jakarta.ws.rs"), FEATURE_API),
)

DATABASE_RULES: Tuple[ManifestKeywordRule, ...] = (
    ManifestKeywordRule(
        "package.json",
        ("mongoose", "sequelize", "typeorm", "pg", "mysql", "sqlite", "redis"),
        FEATURE_DATABASE,
    ),
    ManifestKeywordRule("go.mod", ("gorm.io/gorm", "database/sql", "pgx"), FEATURE_DATABASE),
    ManifestKeywordRule("Cargo.toml", ("diesel", "sqlx", "redis"), FEATURE_DATABASE),
    ManifestKeywordRule("requirements.txt", _PYTHON_DATABASE, FEATURE_DATABASE),
    ManifestKeywordRule("pyproject.toml", _PYTHON_DATABASE, FEATURE_DATABASE),
    ManifestKeywordRule("pom.xml", ("spring-data", "jdbc", "hibernate"), FEATURE_DATABASE),
)

FEATURE_RULES: Tuple[ManifestKeywordRule, ...] = API_RULES + DATABASE_RULES

SNIPPET_EXTENSIONS: frozenset[str] = frozenset(
    {
        ".ts",
        ".js",
        ".json",
        ".jsx",
        ".tsx",
        ".html",
        ".go",
        ".ejs",
        ".mjs",
        ".py",
        ".rs",
        ".c",
        ".cs",
        ".cpp",
        ".h",
        ".hpp",
        ".java",
        ".kt",
        ".swift",
        ".php",
        ".rb",
    }
)

NO_SNIPPETS = "No code snippets available"

__all__ = [
    "API_RULES",
    "CONTAINER_MARKERS",
    "DATABASE_RULES",
    "FEATURE_API",
    "FEATURE_CONTAINER",
    "FEATURE_DATABASE",
    "FEATURE_RULES",
    "MARKER_RULES",
    "NO_SNIPPETS",
    "SNIPPET_EXTENSIONS",
    "UNKNOWN_STACK",
]
