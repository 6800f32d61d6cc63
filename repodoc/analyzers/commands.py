"""Command synthesis: package managers, entry point and start commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..models import CommandPlan, Signals
from .utils import build_node_script_command, detect_node_package_manager


@dataclass(frozen=True)
class PackageManager:
    """Install/run/test commands and badge metadata for one manager."""

    name: str
    badge: str
    url: str
    install: str
    run: str
    test: str

    def run_command(self, entry_point: str) -> str:
        return self.run.format(entry_point=entry_point)

    def test_command(self, entry_point: str) -> str:
        return self.test.format(entry_point=entry_point)


PACKAGE_MANAGERS: Dict[str, PackageManager] = {
    "npm": PackageManager(
        name="npm",
        badge="https://img.shields.io/badge/npm-CB3837.svg?style=flat-square&logo=npm&logoColor=white",
        url="https://www.npmjs.com/",
        install="npm install",
        run="npm start",
        test="npm test",
    ),
    "yarn": PackageManager(
        name="yarn",
        badge="https://img.shields.io/badge/Yarn-2C8EBB.svg?style=flat-square&logo=yarn&logoColor=white",
        url="https://yarnpkg.com/",
        install="yarn install",
        run="yarn start",
        test="yarn test",
    ),
    "pnpm": PackageManager(
        name="pnpm",
        badge="https://img.shields.io/badge/pnpm-F69220.svg?style=flat-square&logo=pnpm&logoColor=white",
        url="https://pnpm.io/",
        install="pnpm install",
        run="pnpm start",
        test="pnpm test",
    ),
    "poetry": PackageManager(
        name="poetry",
        badge="https://img.shields.io/endpoint?url=https://python-poetry.org/badge/v0.json",
        url="https://python-poetry.org/",
        install="poetry install",
        run="poetry run python {entry_point}",
        test="poetry run pytest",
    ),
    "pip": PackageManager(
        name="pip",
        badge="https://img.shields.io/badge/Pip-3776AB.svg?style=flat-square&logo=pypi&logoColor=white",
        url="https://pypi.org/project/pip/",
        install="pip install -r requirements.txt",
        run="python {entry_point}",
        test="pytest",
    ),
    "conda": PackageManager(
        name="conda",
        badge="https://img.shields.io/badge/conda-342B029.svg?style=flat-square&logo=anaconda&logoColor=white",
        url="https://docs.conda.io/",
        install="conda env create -f environment.yaml",
        run="conda activate {{venv}}\n❯ python {entry_point}",
        test="conda activate {{venv}}\n❯ pytest",
    ),
    "docker": PackageManager(
        name="docker",
        badge="https://img.shields.io/badge/Docker-2CA5E0.svg?style=flat-square&logo=docker&logoColor=white",
        url="https://www.docker.com/",
        install="docker build -t project-name .",
        run="docker run -it project-name",
        test="docker run -it project-name npm test",
    ),
}

DEFAULT_MANAGER = "npm"

# Listing file names (lowercase) that add a manager, in detection order.
PACKAGE_MANAGER_FILES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("yarn.lock",), "yarn"),
    (("pnpm-lock.yaml",), "pnpm"),
    (("pyproject.toml",), "poetry"),
    (("requirements.txt",), "pip"),
    (("environment.yaml", "environment.yml"), "conda"),
)

# Only used when no language-level manager was detected.
CONTAINER_MANAGER_FILE = "dockerfile"

ENTRY_POINT_FILES: Tuple[str, ...] = ("main.py", "app.py", "index.js", "server.js")
GENERIC_ENTRY_POINT = "main application"

LANGUAGE_DEFAULT_COMMANDS: Dict[str, str] = {
    "Python": "python main.py",
    "Go": "go run main.go",
    "Rust": "cargo run",
    "Java": "mvn spring-boot:run",
}

RUN_SCRIPTS: Tuple[str, ...] = ("dev", "start", "serve")


def lookup_manager(name: str) -> PackageManager:
    """Return the table entry for `name`, falling back to npm."""
    return PACKAGE_MANAGERS.get(name.lower(), PACKAGE_MANAGERS[DEFAULT_MANAGER])


class CommandSynthesizer:
    """Derives package managers, the entry point label and start commands."""

    def synthesize(self, signals: Signals, language: str) -> CommandPlan:
        return CommandPlan(
            package_managers=self.package_managers(signals),
            entry_point=self.entry_point(signals),
            start_commands=self.start_commands(signals, language),
        )

    @staticmethod
    def package_managers(signals: Signals) -> List[str]:
        names = set(signals.lower_file_names)
        managers: List[str] = []
        if signals.manifest is not None:
            managers.append("npm")
        for file_names, manager in PACKAGE_MANAGER_FILES:
            if any(file_name in names for file_name in file_names) and manager not in managers:
                managers.append(manager)
        if not managers and CONTAINER_MANAGER_FILE in names:
            managers.append("docker")
        return managers or [DEFAULT_MANAGER]

    @staticmethod
    def entry_point(signals: Signals) -> str:
        manifest = signals.manifest or {}
        main = manifest.get("main")
        if isinstance(main, str) and main:
            return main
        if signals.scripts.get("start"):
            return GENERIC_ENTRY_POINT
        names = set(signals.lower_file_names)
        for candidate in ENTRY_POINT_FILES:
            if candidate in names:
                return candidate
        return GENERIC_ENTRY_POINT

    @staticmethod
    def start_commands(signals: Signals, language: str) -> List[str]:
        manifest = signals.manifest
        if manifest is None or not isinstance(manifest.get("scripts"), dict):
            default = LANGUAGE_DEFAULT_COMMANDS.get(language)
            return [default] if default else []

        scripts = signals.scripts
        manager = detect_node_package_manager(signals.file_names)
        commands: List[str] = []
        for script in RUN_SCRIPTS:
            if scripts.get(script):
                commands.append(build_node_script_command(script, manager))
                break
        for script in ("build", "test"):
            if scripts.get(script):
                commands.append(build_node_script_command(script, manager))
        return commands


__all__ = [
    "CommandSynthesizer",
    "DEFAULT_MANAGER",
    "GENERIC_ENTRY_POINT",
    "PACKAGE_MANAGERS",
    "PackageManager",
    "lookup_manager",
]
