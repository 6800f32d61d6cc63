"""Configuration loading for repodoc (.repodoc.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import yaml

CONFIG_FILENAME = ".repodoc.yml"

ENV_API_URL = "REPODOC_GITHUB_API_URL"
ENV_README_STYLE = "REPODOC_README_STYLE"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class GitHubConfig:
    """Settings for the hosting-provider API client."""

    api_url: str = "https://api.github.com"
    timeout: float = 30.0
    user_agent: str = "README-Generator"
    max_workers: int = 4


@dataclass
class ReadmeConfig:
    """Document rendering settings."""

    style: str = "classic"
    templates_dir: Optional[Path] = None


@dataclass
class RepoDocConfig:
    """Represents the settings defined in .repodoc.yml."""

    root: Path
    github: GitHubConfig = field(default_factory=GitHubConfig)
    readme: ReadmeConfig = field(default_factory=ReadmeConfig)


def load_config(config_path: Path | None = None) -> RepoDocConfig:
    """Load configuration from disk, applying environment overrides."""
    config_file = _resolve_config_path(config_path or Path.cwd())
    root = config_file.parent.resolve()

    data: Dict[str, Any] = {}
    if config_file.exists():
        data = _read_config(config_file)

    github = GitHubConfig()
    github_data = _as_dict(data.get("github"))
    if github_data:
        github.api_url = (_as_str(github_data.get("api_url")) or github.api_url).rstrip("/")
        github.timeout = _as_float(github_data.get("timeout")) or github.timeout
        github.user_agent = _as_str(github_data.get("user_agent")) or github.user_agent
        max_workers = _as_int(github_data.get("max_workers"))
        if max_workers is not None and max_workers > 0:
            github.max_workers = max_workers

    readme = ReadmeConfig()
    readme_data = _as_dict(data.get("readme"))
    if readme_data:
        readme.style = _as_str(readme_data.get("style")) or readme.style
        templates_dir = _as_str(readme_data.get("templates_dir"))
        readme.templates_dir = root / templates_dir if templates_dir else None

    env_api_url = os.getenv(ENV_API_URL)
    if env_api_url:
        github.api_url = env_api_url.rstrip("/")
    env_style = os.getenv(ENV_README_STYLE)
    if env_style:
        readme.style = env_style

    return RepoDocConfig(root=root, github=github, readme=readme)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    return loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_float(value: Any) -> Optional[float]:
    return _as_number(value, float)


def _as_int(value: Any) -> Optional[int]:
    return _as_number(value, int)


def _as_number(value: Any, kind: Callable[[Any], Any]) -> Any:
    # YAML booleans are ints to Python; they never count as numbers here
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return None
    if kind is int and isinstance(value, float):
        return None
    try:
        return kind(value)
    except ValueError:
        return None
