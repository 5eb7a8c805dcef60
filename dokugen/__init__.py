"""Generate README files from a local project's layout and sources."""

__version__ = "2.2.0"

__all__ = ["__version__"]
