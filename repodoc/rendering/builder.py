"""Renders a repository profile into a README document."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..logging import get_logger
from ..models import Document, Profile
from .badges import header_badges, manager_badges
from .constants import (
    DEFAULT_SECTIONS,
    DEFAULT_STYLE,
    HEADER_ICON,
    INDEX_FILES,
    INDEX_FILE_DESCRIPTION,
    MAX_INDEX_FILES,
    SECTION_SEPARATOR,
    STYLE_LABELS,
)


@dataclass(frozen=True)
class IndexFile:
    """Row of the Project Index table."""

    name: str
    description: str


class ReadmeRenderer:
    """Deterministic template renderer for the fixed README layout."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        sections: Sequence[str] = DEFAULT_SECTIONS,
    ) -> None:
        self.templates_dir = templates_dir
        self.sections = tuple(sections)
        self._env = self._create_env(templates_dir)
        self.logger = get_logger("rendering")

    def render(self, profile: Profile, style: str | None = None) -> Document:
        """Render `profile`; the style only affects the document label."""
        normalized = self.normalize_style(style)
        template = self._env.get_template("readme.j2")
        content = template.render(
            profile=profile,
            sections=self.sections,
            separator=SECTION_SEPARATOR,
            header_icon=HEADER_ICON,
            header_badges=header_badges(profile.owner, profile.name),
            managers=manager_badges(profile.package_managers, profile.entry_point),
            index_files=self.index_files(profile.file_structure),
        )
        self.logger.debug("Rendered README for %s/%s (%s style)", profile.owner, profile.name, normalized)
        return Document(
            content=content,
            style=normalized,
            style_label=STYLE_LABELS[normalized],
        )

    @staticmethod
    def normalize_style(style: str | None) -> str:
        key = (style or DEFAULT_STYLE).strip().lower()
        return key if key in STYLE_LABELS else DEFAULT_STYLE

    @staticmethod
    def index_files(file_structure: Sequence[str]) -> List[IndexFile]:
        recognized = set(INDEX_FILES)
        matches = [name for name in file_structure if name in recognized]
        return [
            IndexFile(name=name, description=INDEX_FILE_DESCRIPTION)
            for name in matches[:MAX_INDEX_FILES]
        ]

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(Path(__file__).with_name("templates")))
        loader = FileSystemLoader(directories)
        return Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )


__all__ = ["IndexFile", "ReadmeRenderer"]
