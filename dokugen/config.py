"""Configuration loading for dokugen (.dokugen.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import ConfigError

CONFIG_FILENAME = ".dokugen.yml"
DEFAULT_ENDPOINT = "https://dokugen-ochre.vercel.app/api/generate-readme"
DEFAULT_REQUEST_TIMEOUT = 120.0
ENV_ENDPOINT_KEY = "DOKUGEN_API_URL"


@dataclass
class SnippetConfig:
    """Snippet extraction tuning."""

    extra_extensions: List[str] = field(default_factory=list)
    max_workers: Optional[int] = None


@dataclass
class APIConfig:
    """Remote README generator settings."""

    endpoint: str = DEFAULT_ENDPOINT
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT


@dataclass
class DokugenConfig:
    """Represents the settings defined in .dokugen.yml."""

    root: Path
    exclude_dirs: List[str] = field(default_factory=list)
    exclude_files: List[str] = field(default_factory=list)
    snippets: SnippetConfig = field(default_factory=SnippetConfig)
    api: APIConfig = field(default_factory=APIConfig)


def load_config(config_path: Path) -> DokugenConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return _apply_env(DokugenConfig(root=root))

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    snippets = SnippetConfig()
    snippet_data = _as_dict(data.get("snippets"))
    if snippet_data:
        snippets.extra_extensions = [
            _normalise_extension(ext) for ext in _as_str_list(snippet_data.get("extra_extensions"))
        ]
        max_workers = _as_int(snippet_data.get("max_workers"))
        snippets.max_workers = max_workers if max_workers and max_workers > 0 else None

    api = APIConfig()
    api_data = _as_dict(data.get("api"))
    if api_data:
        endpoint = _as_str(api_data.get("endpoint"))
        if endpoint:
            api.endpoint = endpoint
        timeout = _as_float(api_data.get("request_timeout"))
        if timeout is not None and timeout > 0:
            api.request_timeout = timeout

    config = DokugenConfig(
        root=root,
        exclude_dirs=_as_str_list(data.get("exclude_dirs")),
        exclude_files=_as_str_list(data.get("exclude_files")),
        snippets=snippets,
        api=api,
    )
    return _apply_env(config)


def _apply_env(config: DokugenConfig) -> DokugenConfig:
    endpoint = os.getenv(ENV_ENDPOINT_KEY)
    if endpoint:
        config.api.endpoint = endpoint
    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _normalise_extension(value: str) -> str:
    value = value.strip().lower()
    return value if value.startswith(".") else f".{value}"


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "APIConfig",
    "CONFIG_FILENAME",
    "DEFAULT_ENDPOINT",
    "DokugenConfig",
    "SnippetConfig",
    "load_config",
]
