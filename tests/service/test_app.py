"""Tests for the FastAPI service mode."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from dokugen.introspection import IntrospectionEngine
from dokugen.service import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(IntrospectionEngine))


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_introspect_endpoint(client: TestClient, tmp_path: Path) -> None:
    (tmp_path / "go.mod").write_text("module x\n", encoding="utf-8")
    (tmp_path / "Dockerfile").write_text("FROM golang\n", encoding="utf-8")
    (tmp_path / "main.go").write_text("package main\n", encoding="utf-8")

    response = client.post("/introspect", json={"path": str(tmp_path)})

    assert response.status_code == 200
    data = response.json()
    assert data["languageLabel"] == "Golang"
    assert data["features"] == {"hasContainer": True, "hasApi": False, "hasDatabase": False}
    assert sorted(data["files"]) == ["Dockerfile", "go.mod", "main.go"]
    assert "### main.go" in data["snippetBundle"]


def test_introspect_without_snippets(client: TestClient, tmp_path: Path) -> None:
    (tmp_path / "main.py").write_text("print('hi')\n", encoding="utf-8")

    response = client.post("/introspect", json={"path": str(tmp_path), "include_snippets": False})

    assert response.status_code == 200
    assert "snippetBundle" not in response.json()


def test_introspect_missing_path_is_404(client: TestClient, tmp_path: Path) -> None:
    response = client.post("/introspect", json={"path": str(tmp_path / "missing")})
    assert response.status_code == 404


def test_introspect_empty_project_is_422(client: TestClient, tmp_path: Path) -> None:
    response = client.post("/introspect", json={"path": str(tmp_path)})
    assert response.status_code == 422
    assert response.json() == {"detail": "No files found in your project"}


def test_introspect_unreadable_root_is_403(client: TestClient, tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "main.py").write_text("print('hi')\n", encoding="utf-8")
    real_access = os.access
    locked = tmp_path.resolve()

    def fake_access(path, mode, *args, **kwargs):
        if Path(path) == locked:
            return False
        return real_access(path, mode, *args, **kwargs)

    monkeypatch.setattr("dokugen.introspection.engine.os.access", fake_access)

    response = client.post("/introspect", json={"path": str(tmp_path)})

    assert response.status_code == 403
    assert response.json() == {"detail": f"Project path is not readable: {tmp_path}"}
