"""End-to-end pipeline tests for repodoc.orchestrator."""

from __future__ import annotations

from pathlib import Path

import pytest

from repodoc.config import GitHubConfig, ReadmeConfig, RepoDocConfig
from repodoc.github import ArtifactFetcher, GitHubAPIError, InvalidRepositoryURL
from repodoc.orchestrator import Orchestrator
from tests._fixtures.github_builder import API_URL, FakeGitHub


def test_nextjs_repository_with_container_and_tests(github: FakeGitHub, orchestrator_for) -> None:
    github.with_listing(["package.json", "Dockerfile", "tests", "src"])
    github.with_languages({"TypeScript": 800, "JavaScript": 200})
    github.with_package_json({"dependencies": {"next": "14.0.0", "react": "18.2.0"}})
    github.with_files({"Dockerfile": "FROM node:20-alpine\n"})

    result = orchestrator_for(github).generate(github.url)
    profile = result.profile

    assert profile.project_type == "Next.js Application"
    assert profile.has_container is True
    assert profile.capabilities.has_tests is True
    assert "Server-Side Rendering (SSR)" in profile.features
    assert "Containerized Deployment" in profile.features
    assert "Test Coverage" in profile.features
    assert profile.package_managers == ["npm"]
    assert profile.language == "TypeScript"
    assert profile.language_percentage == "80.0%"

    content = result.document.content
    assert "❯ npm install" in content
    assert "**Using `docker`**" not in content
    assert "### Testing" in content
    assert "- **Container Runtime:** Docker" in content


def test_python_repository_without_manifest(github: FakeGitHub, orchestrator_for) -> None:
    github.with_listing(["requirements.txt", "main.py"])
    github.with_languages({"Python": 4096})
    github.with_files({"requirements.txt": "flask\n", "main.py": "print('hello')\n"})

    result = orchestrator_for(github).generate(github.url)
    profile = result.profile

    assert profile.project_type == "Python Application"
    assert profile.entry_point == "main.py"
    assert profile.package_managers == ["pip"]
    assert profile.start_commands == ["python main.py"]
    assert profile.capabilities.has_tests is False

    content = result.document.content
    assert "❯ pip install -r requirements.txt" in content
    assert "❯ python main.py" in content
    assert "### Testing" not in content


def test_empty_repository_falls_back_to_defaults(github: FakeGitHub, orchestrator_for) -> None:
    profile = orchestrator_for(github).analyze(github.url)

    assert profile.language_percentage == "0.0%"
    assert profile.project_type == "Unknown Project"
    assert profile.features == [
        "Modern Unknown application",
        "Clean and maintainable code structure",
        "Responsive and user-friendly interface",
    ]
    assert profile.package_managers == ["npm"]
    assert profile.file_structure == []


def test_dependency_cap_through_pipeline(github: FakeGitHub, orchestrator_for) -> None:
    dependencies = {f"dep{index}": "1" for index in range(30)}
    dependencies["@types/react"] = "18"
    github.with_listing(["package.json"]).with_package_json({"dependencies": dependencies})

    profile = orchestrator_for(github).analyze(github.url)

    assert profile.dependencies == [f"dep{index}" for index in range(15)]


def test_truncated_listing_through_pipeline(github: FakeGitHub, orchestrator_for) -> None:
    github.with_listing([f"module_{index}.py" for index in range(32)])

    content = orchestrator_for(github).generate(github.url).document.content

    assert "    └── ... +12 more files" in content
    assert "module_20.py" not in content.split("## Project Structure", 1)[1].split("```", 2)[1]


def test_framework_detected_once_through_pipeline(github: FakeGitHub, orchestrator_for) -> None:
    github.with_listing(["package.json"])
    github.with_package_json(
        {"dependencies": {"tailwindcss": "3"}, "devDependencies": {"tailwindcss": "3"}}
    )

    profile = orchestrator_for(github).analyze(github.url)

    assert profile.frameworks.count("Tailwind CSS") == 1


def test_repeated_analysis_is_identical(github: FakeGitHub, orchestrator_for) -> None:
    github.with_listing(["package.json", ".github", "docker-compose.yml"])
    github.with_languages({"JavaScript": 10})
    github.with_package_json({"dependencies": {"express": "4", "socket.io": "4"}})
    orchestrator = orchestrator_for(github)

    first = orchestrator.generate(github.url)
    second = orchestrator.generate(github.url)

    assert first.profile == second.profile
    assert first.document.content == second.document.content


def test_invalid_url_fails_before_any_request(github: FakeGitHub, orchestrator_for) -> None:
    with pytest.raises(InvalidRepositoryURL):
        orchestrator_for(github).analyze("https://example.com/not/github")

    assert github.requests == []


def test_fetch_error_propagates(github: FakeGitHub, orchestrator_for) -> None:
    github.fail("/languages", 500, "Server Error")

    with pytest.raises(GitHubAPIError):
        orchestrator_for(github).generate(github.url)


def test_style_defaults_to_configured_value(github: FakeGitHub, tmp_path: Path) -> None:
    config = RepoDocConfig(
        root=tmp_path,
        github=GitHubConfig(api_url=API_URL),
        readme=ReadmeConfig(style="compact"),
    )
    orchestrator = Orchestrator(config=config, fetcher=ArtifactFetcher(github.client()))

    assert orchestrator.generate(github.url).document.style_label == "Compact"
    assert orchestrator.generate(github.url, style="modern").document.style_label == "Modern"


def test_default_fetcher_uses_configured_client(tmp_path: Path) -> None:
    config = RepoDocConfig(
        root=tmp_path,
        github=GitHubConfig(api_url="https://ghe.example.com/api/v3", timeout=5.0, max_workers=2),
    )

    orchestrator = Orchestrator(config=config)

    assert orchestrator.fetcher.client.api_url == "https://ghe.example.com/api/v3"
    assert orchestrator.fetcher.client.timeout == 5.0
    assert orchestrator.fetcher.max_workers == 2
