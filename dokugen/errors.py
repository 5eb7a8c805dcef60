"""Exception hierarchy shared across dokugen components."""


class DokugenError(RuntimeError):
    """Base class for errors raised by dokugen."""


class NoFilesFoundError(DokugenError):
    """Raised when traversal finds nothing to introspect."""

    def __init__(self, root: str) -> None:
        super().__init__("No files found in your project")
        self.root = root


class GenerationError(DokugenError):
    """Raised when the README generator fails or returns no document."""


class PromptInterrupted(DokugenError):
    """Raised when the user aborts an interactive question."""


class ConfigError(DokugenError):
    """Raised when .dokugen.yml cannot be parsed."""


__all__ = [
    "ConfigError",
    "DokugenError",
    "GenerationError",
    "NoFilesFoundError",
    "PromptInterrupted",
]
