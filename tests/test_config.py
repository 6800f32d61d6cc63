"""Tests for repodoc.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from repodoc.config import ConfigError, GitHubConfig, ReadmeConfig, RepoDocConfig, load_config


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("REPODOC_GITHUB_API_URL", raising=False)
    monkeypatch.delenv("REPODOC_README_STYLE", raising=False)


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, RepoDocConfig)
    assert config.root == tmp_path.resolve()
    assert config.github == GitHubConfig()
    assert config.github.api_url == "https://api.github.com"
    assert config.github.user_agent == "README-Generator"
    assert config.readme == ReadmeConfig()
    assert config.readme.style == "classic"
    assert config.readme.templates_dir is None


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".repodoc.yml"
    config_file.write_text(
        """
github:
  api_url: "https://github.example.com/api/v3/"
  timeout: 12
  user_agent: "repodoc-tests"
  max_workers: 2
readme:
  style: "modern"
  templates_dir: "docs/templates"
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.github.api_url == "https://github.example.com/api/v3"
    assert config.github.timeout == 12.0
    assert config.github.user_agent == "repodoc-tests"
    assert config.github.max_workers == 2
    assert config.readme.style == "modern"
    assert config.readme.templates_dir == tmp_path.resolve() / "docs/templates"


def test_load_config_ignores_invalid_values(tmp_path: Path) -> None:
    (tmp_path / ".repodoc.yml").write_text(
        "github:\n  timeout: soon\n  max_workers: 0\nreadme: []\n", encoding="utf-8"
    )

    config = load_config(tmp_path)

    assert config.github.timeout == 30.0
    assert config.github.max_workers == 4
    assert config.readme.style == "classic"


def test_environment_overrides_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".repodoc.yml").write_text("readme:\n  style: modern\n", encoding="utf-8")
    monkeypatch.setenv("REPODOC_README_STYLE", "compact")
    monkeypatch.setenv("REPODOC_GITHUB_API_URL", "http://localhost:9000/")

    config = load_config(tmp_path)

    assert config.readme.style == "compact"
    assert config.github.api_url == "http://localhost:9000"


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / ".repodoc.yml").write_text("\n", encoding="utf-8")

    assert load_config(tmp_path).readme.style == "classic"


def test_malformed_yaml_raises(tmp_path: Path) -> None:
    (tmp_path / ".repodoc.yml").write_text("github: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(tmp_path)


def test_non_mapping_root_raises(tmp_path: Path) -> None:
    (tmp_path / ".repodoc.yml").write_text("- one\n- two\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="mapping"):
        load_config(tmp_path)
