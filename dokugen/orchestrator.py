"""Pipeline orchestration for the generate and inspect flows."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from .client import GenerationClient
from .config import DokugenConfig, load_config
from .introspection import IntrospectionEngine
from .logging import get_logger
from .models import GenerationRequest, IntrospectionResult
from .prompts import ConsolePrompt, PromptProvider, StaticPrompt

README_NAME = "README.md"
OVERWRITE_QUESTION = "Looks like a README file already exists. Overwrite?"
CONTRIBUTING_QUESTION = "Do you want to include contribution guidelines to your README?"


@dataclass
class GenerateOutcome:
    """Result of a successful README generation."""

    path: Path
    readme: str
    overwritten: bool
    result: IntrospectionResult


class Orchestrator:
    """Runs introspection, asks the user, and writes the generated README."""

    def __init__(
        self,
        engine: IntrospectionEngine | None = None,
        client: GenerationClient | None = None,
        prompt: PromptProvider | None = None,
        *,
        config_loader: Callable[[Path], DokugenConfig] = load_config,
    ) -> None:
        self.engine = engine or IntrospectionEngine()
        self._client = client
        self.prompt = prompt or ConsolePrompt()
        self.config_loader = config_loader
        self.logger = get_logger("orchestrator")

    def run_inspect(self, path: str) -> IntrospectionResult:
        """Introspect a project without contacting the README service."""
        return self.engine.introspect(path)

    def run_generate(self, path: str, *, assume_yes: bool = False) -> Optional[GenerateOutcome]:
        """Generate README.md for ``path``.

        Returns None when the user declines to overwrite an existing README.
        The existing file is only replaced once the service returns a document.
        """
        repo_path = Path(path).expanduser().resolve()
        self.logger.info("Generating README.md for %s", repo_path)

        result = self.engine.introspect(repo_path)
        self.logger.info("Detected project type: %s", result.language_label)
        self.logger.info("Found: %d files in the project", len(result.files))

        prompt = StaticPrompt(True) if assume_yes else self.prompt
        readme_path = repo_path / README_NAME
        existed = readme_path.exists()
        if existed and not prompt.ask_yes_no(OVERWRITE_QUESTION):
            self.logger.info("README was not modified.")
            return None

        is_open_source = prompt.ask_yes_no(CONTRIBUTING_QUESTION)

        self.logger.info("Generating README....")
        client = self._resolve_client(repo_path)
        readme = client.generate(GenerationRequest.from_result(result, is_open_source=is_open_source))

        readme_path.write_text(readme, encoding="utf-8")
        if existed:
            self.logger.info("Existing README has been replaced.")
        self.logger.info("README Generated Successfully")
        return GenerateOutcome(path=readme_path, readme=readme, overwritten=existed, result=result)

    def _resolve_client(self, repo_path: Path) -> GenerationClient:
        if self._client is not None:
            return self._client
        config = self.config_loader(repo_path)
        return GenerationClient.from_config(config.api)


__all__ = ["GenerateOutcome", "Orchestrator"]
