"""Shared constants for README rendering."""

from __future__ import annotations

# Rendered in order after the header, each followed by a horizontal rule.
DEFAULT_SECTIONS: tuple[str, ...] = (
    "toc",
    "overview",
    "features",
    "structure",
    "getting_started",
    "roadmap",
    "contributing",
    "license",
    "acknowledgments",
)

SECTION_SEPARATOR = "---"

STYLE_LABELS: dict[str, str] = {
    "classic": "Classic",
    "modern": "Modern",
    "compact": "Compact",
}

DEFAULT_STYLE = "classic"

INDEX_FILES: tuple[str, ...] = (
    "package.json",
    "Dockerfile",
    "docker-compose.yml",
    "README.md",
    "pyproject.toml",
    "requirements.txt",
    "Cargo.toml",
    "go.mod",
    "pom.xml",
    "build.gradle",
)

MAX_INDEX_FILES = 6

INDEX_FILE_DESCRIPTION = "Core configuration and setup file"

HEADER_ICON = (
    "https://raw.githubusercontent.com/PKief/vscode-material-icon-theme/"
    "ec559a9f6bfd399b82bb44393651661b08aaf7ba/icons/folder-markdown-open.svg"
)


__all__ = [
    "DEFAULT_SECTIONS",
    "DEFAULT_STYLE",
    "HEADER_ICON",
    "INDEX_FILES",
    "INDEX_FILE_DESCRIPTION",
    "MAX_INDEX_FILES",
    "SECTION_SEPARATOR",
    "STYLE_LABELS",
]
