"""Tests for dokugen.orchestrator."""

from __future__ import annotations

from pathlib import Path

import pytest

from dokugen.client import GenerationClient
from dokugen.errors import GenerationError, NoFilesFoundError, PromptInterrupted
from dokugen.orchestrator import CONTRIBUTING_QUESTION, OVERWRITE_QUESTION, Orchestrator
from dokugen.prompts import StaticPrompt


class RecordingTransport:
    """Fake HTTP transport that records payloads and returns a canned README."""

    def __init__(self, readme: str = "# Generated README\n") -> None:
        self.readme = readme
        self.calls: list[dict[str, object]] = []

    def __call__(self, endpoint: str, payload: dict[str, object], timeout: float) -> dict[str, object]:
        self.calls.append({"endpoint": endpoint, "payload": payload, "timeout": timeout})
        return {"readme": self.readme}


def _seed_sample_repo(root: Path) -> None:
    (root / "src").mkdir(parents=True, exist_ok=True)
    (root / "src" / "app.py").write_text("print('hello world')\n", encoding="utf-8")
    (root / "requirements.txt").write_text("fastapi\npsycopg2\n", encoding="utf-8")
    (root / "Dockerfile").write_text("FROM python:3.11-slim\n", encoding="utf-8")


def _orchestrator(transport: RecordingTransport, answers) -> tuple[Orchestrator, StaticPrompt]:
    prompt = StaticPrompt(answers)
    client = GenerationClient("http://svc.test/generate", transport=transport)
    return Orchestrator(client=client, prompt=prompt), prompt


def test_run_generate_writes_readme_and_sends_payload(tmp_path: Path) -> None:
    _seed_sample_repo(tmp_path)
    transport = RecordingTransport()
    orchestrator, prompt = _orchestrator(transport, [True])

    outcome = orchestrator.run_generate(str(tmp_path))

    assert outcome is not None
    assert outcome.overwritten is False
    assert (tmp_path / "README.md").read_text(encoding="utf-8") == "# Generated README\n"
    assert prompt.asked == [CONTRIBUTING_QUESTION]

    payload = transport.calls[0]["payload"]
    assert payload["projectType"] == "Python"
    assert set(payload["projectFiles"]) == {"src/app.py", "requirements.txt", "Dockerfile"}
    assert "### src/app.py" in payload["fullCode"]
    assert payload["options"] == {
        "useDocker": True,
        "hasAPI": True,
        "hasDatabase": True,
        "isOpenSource": True,
    }


def test_declining_overwrite_leaves_readme_untouched(tmp_path: Path) -> None:
    _seed_sample_repo(tmp_path)
    (tmp_path / "README.md").write_text("original\n", encoding="utf-8")
    transport = RecordingTransport()
    orchestrator, prompt = _orchestrator(transport, [False])

    outcome = orchestrator.run_generate(str(tmp_path))

    assert outcome is None
    assert prompt.asked == [OVERWRITE_QUESTION]
    assert transport.calls == []
    assert (tmp_path / "README.md").read_text(encoding="utf-8") == "original\n"


def test_accepting_overwrite_replaces_readme(tmp_path: Path) -> None:
    _seed_sample_repo(tmp_path)
    (tmp_path / "README.md").write_text("original\n", encoding="utf-8")
    transport = RecordingTransport()
    orchestrator, prompt = _orchestrator(transport, [True, False])

    outcome = orchestrator.run_generate(str(tmp_path))

    assert outcome is not None
    assert outcome.overwritten is True
    assert prompt.asked == [OVERWRITE_QUESTION, CONTRIBUTING_QUESTION]
    assert transport.calls[0]["payload"]["options"]["isOpenSource"] is False
    assert (tmp_path / "README.md").read_text(encoding="utf-8") == "# Generated README\n"


def test_existing_readme_is_part_of_the_file_list(tmp_path: Path) -> None:
    _seed_sample_repo(tmp_path)
    (tmp_path / "README.md").write_text("original\n", encoding="utf-8")
    transport = RecordingTransport()
    orchestrator, _ = _orchestrator(transport, [True, True])

    orchestrator.run_generate(str(tmp_path))

    assert "README.md" in transport.calls[0]["payload"]["projectFiles"]


def test_generation_failure_keeps_existing_readme(tmp_path: Path) -> None:
    _seed_sample_repo(tmp_path)
    (tmp_path / "README.md").write_text("original\n", encoding="utf-8")
    transport = RecordingTransport(readme="")
    orchestrator, _ = _orchestrator(transport, [True, True])

    with pytest.raises(GenerationError):
        orchestrator.run_generate(str(tmp_path))

    assert (tmp_path / "README.md").read_text(encoding="utf-8") == "original\n"


def test_prompt_interruption_propagates(tmp_path: Path) -> None:
    _seed_sample_repo(tmp_path)
    transport = RecordingTransport()
    orchestrator, _ = _orchestrator(transport, [])

    with pytest.raises(PromptInterrupted):
        orchestrator.run_generate(str(tmp_path))
    assert not (tmp_path / "README.md").exists()


def test_assume_yes_skips_prompts(tmp_path: Path) -> None:
    _seed_sample_repo(tmp_path)
    (tmp_path / "README.md").write_text("original\n", encoding="utf-8")
    transport = RecordingTransport()
    orchestrator, prompt = _orchestrator(transport, [])

    outcome = orchestrator.run_generate(str(tmp_path), assume_yes=True)

    assert outcome is not None
    assert prompt.asked == []
    assert transport.calls[0]["payload"]["options"]["isOpenSource"] is True


def test_empty_project_never_prompts_or_calls_service(tmp_path: Path) -> None:
    transport = RecordingTransport()
    orchestrator, prompt = _orchestrator(transport, [True])

    with pytest.raises(NoFilesFoundError):
        orchestrator.run_generate(str(tmp_path))

    assert prompt.asked == []
    assert transport.calls == []


def test_client_is_built_from_project_config(tmp_path: Path, monkeypatch) -> None:
    _seed_sample_repo(tmp_path)
    monkeypatch.delenv("DOKUGEN_API_URL", raising=False)
    (tmp_path / ".dokugen.yml").write_text(
        "api:\n  endpoint: http://configured.test/readme\n  request_timeout: 5\n",
        encoding="utf-8",
    )
    captured = {}

    def fake_http(endpoint, payload, timeout):
        captured["endpoint"] = endpoint
        captured["timeout"] = timeout
        return {"readme": "# ok\n"}

    monkeypatch.setattr("dokugen.client._http_transport", fake_http)

    Orchestrator(prompt=StaticPrompt(True)).run_generate(str(tmp_path))

    assert captured == {"endpoint": "http://configured.test/readme", "timeout": 5.0}


def test_run_inspect_does_not_contact_service(tmp_path: Path) -> None:
    _seed_sample_repo(tmp_path)
    transport = RecordingTransport()
    orchestrator, prompt = _orchestrator(transport, [])

    result = orchestrator.run_inspect(str(tmp_path))

    assert result.language_label == "Python"
    assert transport.calls == []
    assert prompt.asked == []
