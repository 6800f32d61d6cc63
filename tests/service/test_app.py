"""Tests for the FastAPI service mode."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from repodoc.config import GitHubConfig, RepoDocConfig
from repodoc.github import ArtifactFetcher
from repodoc.orchestrator import Orchestrator
from repodoc.service import create_app
from tests._fixtures.github_builder import API_URL, FakeGitHub


@pytest.fixture
def client(tmp_path: Path, github: FakeGitHub) -> TestClient:
    github.with_listing(["package.json", "tests"])
    github.with_languages({"JavaScript": 100})
    github.with_package_json({"dependencies": {"express": "4"}, "scripts": {"start": "node ."}})
    config = RepoDocConfig(root=tmp_path, github=GitHubConfig(api_url=API_URL))

    def _factory() -> Orchestrator:
        return Orchestrator(config=config, fetcher=ArtifactFetcher(github.client()))

    return TestClient(create_app(_factory))


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_analyze_returns_profile(client: TestClient, github: FakeGitHub) -> None:
    response = client.post("/analyze", json={"url": github.url})

    assert response.status_code == 200
    profile = response.json()["profile"]
    assert profile["project_type"] == "Express.js API"
    assert profile["capabilities"]["has_api"] is True
    assert profile["start_commands"] == ["npm start"]


def test_readme_returns_document(client: TestClient, github: FakeGitHub) -> None:
    response = client.post("/readme", json={"url": github.url, "style": "modern"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["filename"] == "README.md"
    assert payload["media_type"] == "text/markdown"
    assert payload["style"] == "modern"
    assert payload["style_label"] == "Modern"
    assert "### Testing" in payload["content"]


def test_readme_download_sets_attachment_headers(client: TestClient, github: FakeGitHub) -> None:
    response = client.post("/readme/download", json={"url": github.url})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/markdown")
    assert response.headers["content-disposition"] == 'attachment; filename="README.md"'
    assert response.text.startswith('<p align="center">')


def test_invalid_url_maps_to_400(client: TestClient) -> None:
    response = client.post("/analyze", json={"url": "not-a-repo"})

    assert response.status_code == 400
    assert "Invalid GitHub URL format" in response.json()["detail"]


def test_api_failure_maps_to_502(client: TestClient, github: FakeGitHub) -> None:
    github.fail("/contents", 403, "rate limit exceeded")

    response = client.post("/readme", json={"url": github.url})

    assert response.status_code == 502
    assert response.json()["status_code"] == 403
