"""Shared helper utilities for analyzer implementations."""

from __future__ import annotations

import json
import re
import tomllib
from typing import Any, Dict, Iterable, List, Optional

from ..logging import get_logger

logger = get_logger("analyzers.utils")

_REQUIREMENT_SPLIT = re.compile(r"[<>=!~;\[\s@]")


def ordered_unique(values: Iterable[str]) -> List[str]:
    """Drop duplicates while keeping first-seen order."""
    seen: set[str] = set()
    result: List[str] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result


# Node.js manifest helpers


def load_package_json(text: str | None) -> Optional[Dict[str, Any]]:
    """Return the parsed package.json mapping, or None when absent or malformed."""
    if text is None:
        return None
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.debug("Ignoring malformed package.json: %s", exc)
        return None
    if isinstance(data, dict):
        return data
    logger.debug("Ignoring package.json with non-object root")
    return None


def manifest_dependencies(manifest: Optional[Dict[str, Any]], key: str) -> List[str]:
    """Return dependency names declared under `key`, in declaration order."""
    if not manifest:
        return []
    deps = manifest.get(key)
    if isinstance(deps, dict):
        return ordered_unique(str(name) for name in deps.keys())
    return []


def detect_node_package_manager(file_names: Iterable[str]) -> str:
    """Infer the preferred Node package manager based on lockfiles."""
    names = {name.lower() for name in file_names}
    if "pnpm-lock.yaml" in names:
        return "pnpm"
    if "yarn.lock" in names:
        return "yarn"
    return "npm"


def build_node_script_command(script: str, manager: str) -> str:
    manager = manager.lower()
    if manager in {"pnpm", "yarn"}:
        return f"{manager} {script}"
    # npm start / npm test have shorthands, everything else goes through `npm run`
    if script in {"start", "test"}:
        return f"npm {script}"
    return f"npm run {script}"


# Python dependency helpers


def parse_requirements(text: str | None) -> List[str]:
    """Collect package names from requirements.txt content."""
    if not text:
        return []
    packages: List[str] = []
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith(("#", "-")):
            continue
        name = _REQUIREMENT_SPLIT.split(stripped, 1)[0].strip()
        if name:
            packages.append(name)
    return ordered_unique(packages)


def parse_pyproject(text: str | None) -> List[str]:
    """Collect dependency names from PEP 621 and Poetry tables."""
    if not text:
        return []
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        logger.debug("Ignoring malformed pyproject.toml: %s", exc)
        return []

    dependencies: List[Any] = []
    project = data.get("project")
    if isinstance(project, dict):
        declared = project.get("dependencies")
        if isinstance(declared, list):
            dependencies.extend(declared)
        optional = project.get("optional-dependencies")
        if isinstance(optional, dict):
            for values in optional.values():
                if isinstance(values, list):
                    dependencies.extend(values)

    tool = data.get("tool")
    poetry = tool.get("poetry", {}) if isinstance(tool, dict) else {}
    if isinstance(poetry, dict):
        poetry_deps = poetry.get("dependencies", {}) or {}
        if isinstance(poetry_deps, dict):
            dependencies.extend(poetry_deps.keys())

    packages: List[str] = []
    for dep in dependencies:
        if not isinstance(dep, str):
            continue
        name = _REQUIREMENT_SPLIT.split(dep.strip(), 1)[0].strip()
        if name and name.lower() != "python":
            packages.append(name)
    return ordered_unique(packages)
