"""Signal extraction tests."""

from __future__ import annotations

from repodoc.analyzers import SignalExtractor
from tests._fixtures.artifacts import build_artifacts


def test_manifest_dependencies_keep_declaration_order() -> None:
    artifacts = build_artifacts(
        ["package.json"],
        package_json={
            "dependencies": {"react": "^18", "next": "14", "axios": "1"},
            "devDependencies": {"typescript": "5", "jest": "29"},
        },
    )

    signals = SignalExtractor().extract(artifacts)

    assert signals.dependencies == ["react", "next", "axios"]
    assert signals.dev_dependencies == ["typescript", "jest"]
    assert signals.manifest is not None


def test_malformed_manifest_is_treated_as_absent() -> None:
    artifacts = build_artifacts(["package.json"], files={"package.json": "{not json"})

    signals = SignalExtractor().extract(artifacts)

    assert signals.manifest is None
    assert signals.dependencies == []
    assert signals.scripts == {}


def test_manifest_without_dependency_keys_yields_empty_lists() -> None:
    artifacts = build_artifacts(["package.json"], package_json={"name": "demo"})

    signals = SignalExtractor().extract(artifacts)

    assert signals.manifest == {"name": "demo"}
    assert signals.dependencies == []
    assert signals.dev_dependencies == []


def test_listing_flags() -> None:
    artifacts = build_artifacts(["src", "__tests__", ".github", "vercel.json"])

    flags = SignalExtractor().extract(artifacts).flags

    assert flags.has_test_config is True
    assert flags.has_ci_config is True
    assert flags.has_deploy_config is True
    assert flags.has_container_config is False


def test_spec_directory_counts_as_test_config() -> None:
    flags = SignalExtractor().extract(build_artifacts(["spec"])).flags

    assert flags.has_test_config is True


def test_container_flag_from_fetched_dockerfile_or_listing_name() -> None:
    extractor = SignalExtractor()

    fetched_only = extractor.extract(build_artifacts([], files={"Dockerfile": "FROM node:20\n"}))
    docker_dir = extractor.extract(build_artifacts(["docker"]))
    compose = extractor.extract(build_artifacts(["docker-compose.yml"]))

    assert fetched_only.flags.has_container_config is True
    assert docker_dir.flags.has_container_config is True
    assert compose.flags.has_container_config is True


def test_python_dependencies_merge_requirements_and_pyproject() -> None:
    artifacts = build_artifacts(
        ["requirements.txt", "pyproject.toml"],
        files={
            "requirements.txt": "# web\nflask>=2.0\nrequests==2.31\n-r dev.txt\n",
            "pyproject.toml": (
                "[project]\n"
                'name = "demo"\n'
                'dependencies = ["requests>=2", "pydantic[email]>=2"]\n'
            ),
        },
    )

    signals = SignalExtractor().extract(artifacts)

    assert signals.python_dependencies == ["flask", "requests", "pydantic"]
    assert signals.has_requirements is True
    assert signals.has_pyproject is True


def test_pyproject_presence_from_listing_alone() -> None:
    signals = SignalExtractor().extract(build_artifacts(["pyproject.toml"]))

    assert signals.has_pyproject is True
    assert signals.python_dependencies == []


def test_languages_and_declared_language_are_carried() -> None:
    artifacts = build_artifacts(languages={"Go": 10}, language="Go")

    signals = SignalExtractor().extract(artifacts)

    assert signals.languages == {"Go": 10}
    assert signals.declared_language == "Go"
