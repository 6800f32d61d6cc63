"""Manifest parsing helper tests."""

from __future__ import annotations

from repodoc.analyzers.utils import parse_pyproject, parse_requirements


def test_parse_pyproject_ignores_non_list_dependency_values() -> None:
    text = (
        "[project]\n"
        'name = "demo"\n'
        'dependencies = "requests>=2"\n'
        "\n"
        "[project.optional-dependencies]\n"
        'test = "pytest"\n'
        'docs = ["mkdocs>=1.5"]\n'
    )

    assert parse_pyproject(text) == ["mkdocs"]


def test_parse_pyproject_reads_pep621_and_poetry_tables() -> None:
    text = (
        "[project]\n"
        'dependencies = ["fastapi>=0.110", "uvicorn[standard]"]\n'
        "\n"
        "[tool.poetry.dependencies]\n"
        'python = "^3.11"\n'
        'httpx = "^0.27"\n'
    )

    assert parse_pyproject(text) == ["fastapi", "uvicorn", "httpx"]


def test_parse_pyproject_tolerates_malformed_toml() -> None:
    assert parse_pyproject("[project\n") == []


def test_parse_requirements_skips_comments_and_options() -> None:
    assert parse_requirements("# core\nflask==3.0\n\n-e .\ngunicorn ; sys_platform != 'win32'\n") == [
        "flask",
        "gunicorn",
    ]
