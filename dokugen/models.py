"""Core data models shared across dokugen components."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

SNIPPET_READ = "read"
SNIPPET_MISSING = "missing"
SNIPPET_UNREADABLE = "unreadable"


@dataclass(frozen=True)
class MarkerRule:
    """Labels a stack when any of its marker files exists at the project root."""

    markers: Tuple[str, ...]
    label: str


@dataclass(frozen=True)
class ManifestKeywordRule:
    """Contributes to a feature flag when a manifest mentions one of its keywords."""

    manifest: str
    keywords: Tuple[str, ...]
    feature: str


@dataclass(frozen=True)
class FeatureSet:
    """Architectural features inferred from manifests and marker files."""

    has_container: bool = False
    has_api: bool = False
    has_database: bool = False

    def to_dict(self) -> Dict[str, bool]:
        return {
            "hasContainer": self.has_container,
            "hasApi": self.has_api,
            "hasDatabase": self.has_database,
        }


@dataclass(frozen=True)
class SnippetOutcome:
    """Result of attempting to read one file for the snippet bundle."""

    path: str
    status: str
    content: Optional[str] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == SNIPPET_READ


@dataclass(frozen=True)
class SnippetBundle:
    """All extraction outcomes plus the concatenated snippet text."""

    outcomes: Tuple[SnippetOutcome, ...]
    text: str

    @property
    def read_paths(self) -> List[str]:
        return [outcome.path for outcome in self.outcomes if outcome.ok]

    @property
    def skipped(self) -> List[SnippetOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.ok]


@dataclass(frozen=True)
class IntrospectionResult:
    """Everything the engine learned about a project in one run."""

    root: str
    language_label: str
    files: Tuple[str, ...]
    features: FeatureSet
    snippet_bundle: str

    def to_payload(self, *, include_snippets: bool = True) -> Dict[str, object]:
        payload: Dict[str, object] = {
            "languageLabel": self.language_label,
            "files": list(self.files),
            "features": self.features.to_dict(),
        }
        if include_snippets:
            payload["snippetBundle"] = self.snippet_bundle
        return payload


@dataclass
class GenerationRequest:
    """Body sent to the remote README generator."""

    project_type: str
    project_files: List[str]
    full_code: str
    features: FeatureSet
    is_open_source: bool = False

    @classmethod
    def from_result(
        cls, result: IntrospectionResult, *, is_open_source: bool
    ) -> "GenerationRequest":
        return cls(
            project_type=result.language_label,
            project_files=list(result.files),
            full_code=result.snippet_bundle,
            features=result.features,
            is_open_source=is_open_source,
        )

    def to_wire(self) -> Dict[str, object]:
        payload: Dict[str, object] = {
            "projectType": self.project_type,
            "projectFiles": self.project_files,
            "fullCode": self.full_code,
            "options": {
                "useDocker": self.features.has_container,
                "hasAPI": self.features.has_api,
                "hasDatabase": self.features.has_database,
                "isOpenSource": self.is_open_source,
            },
        }
        return payload
