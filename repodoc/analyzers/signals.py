"""Signal extraction: raw artifacts to normalized facts."""

from __future__ import annotations

from typing import List

from ..logging import get_logger
from ..models import ConfigFlags, RawArtifacts, Signals
from .utils import (
    load_package_json,
    manifest_dependencies,
    ordered_unique,
    parse_pyproject,
    parse_requirements,
)

CONTAINER_FILES = {"dockerfile", "docker-compose.yml"}
DEPLOY_FILES = {"vercel.json", "netlify.toml"}
CI_ENTRY = ".github"
TEST_MARKERS = ("test", "spec")


class SignalExtractor:
    """Decodes manifests and scans the listing into a Signals record."""

    def __init__(self) -> None:
        self.logger = get_logger("analyzers.signals")

    def extract(self, artifacts: RawArtifacts) -> Signals:
        file_names = [entry.name for entry in artifacts.entries]
        lower_names = [name.lower() for name in file_names]
        fetched = {path.lower() for path in artifacts.files}

        manifest = load_package_json(artifacts.files.get("package.json"))
        if "package.json" in artifacts.files and manifest is None:
            self.logger.debug(
                "package.json for %s could not be parsed; skipping manifest signals",
                artifacts.reference.full_name,
            )

        python_dependencies = ordered_unique(
            parse_requirements(artifacts.files.get("requirements.txt"))
            + parse_pyproject(artifacts.files.get("pyproject.toml"))
        )

        return Signals(
            dependencies=manifest_dependencies(manifest, "dependencies"),
            dev_dependencies=manifest_dependencies(manifest, "devDependencies"),
            python_dependencies=python_dependencies,
            flags=self._flags(lower_names, fetched),
            manifest=manifest,
            file_names=file_names,
            has_pyproject="pyproject.toml" in fetched or "pyproject.toml" in lower_names,
            has_requirements="requirements.txt" in fetched or "requirements.txt" in lower_names,
            languages=dict(artifacts.languages),
            declared_language=artifacts.metadata.language,
        )

    @staticmethod
    def _flags(lower_names: List[str], fetched: set[str]) -> ConfigFlags:
        names = set(lower_names)
        return ConfigFlags(
            has_test_config=any(
                marker in name for name in lower_names for marker in TEST_MARKERS
            ),
            has_ci_config=CI_ENTRY in names,
            has_container_config=bool(CONTAINER_FILES & (names | fetched))
            or any("docker" in name for name in lower_names),
            has_deploy_config=bool(DEPLOY_FILES & names),
        )


__all__ = ["SignalExtractor"]
