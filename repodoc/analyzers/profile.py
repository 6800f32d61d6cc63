"""Profile assembly: a pure function of the fetched artifacts."""

from __future__ import annotations

import re
from datetime import datetime
from typing import List, Optional

from ..models import Profile, RawArtifacts, Signals
from .classifier import Classifier
from .commands import CommandSynthesizer
from .signals import SignalExtractor

MAX_DEPENDENCIES = 15
MAX_MAIN_FILES = 5

_MONTHS = ("JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC")
_SOURCE_FILE = re.compile(r"\.(js|ts|py|java|go|rs|cpp|c)$")
_MAIN_FILE_NAMES = {"index.html", "main.py", "app.js"}


class ProfileBuilder:
    """Runs extraction, classification and command synthesis in order."""

    def __init__(
        self,
        extractor: SignalExtractor | None = None,
        classifier: Classifier | None = None,
        synthesizer: CommandSynthesizer | None = None,
    ) -> None:
        self.extractor = extractor or SignalExtractor()
        self.classifier = classifier or Classifier()
        self.synthesizer = synthesizer or CommandSynthesizer()

    def build(self, artifacts: RawArtifacts) -> Profile:
        signals = self.extractor.extract(artifacts)
        classification = self.classifier.classify(signals)
        plan = self.synthesizer.synthesize(signals, classification.language)

        metadata = artifacts.metadata
        reference = artifacts.reference
        file_names = list(signals.file_names)

        return Profile(
            name=metadata.name or reference.name,
            description=metadata.description,
            owner=reference.owner,
            url=reference.html_url,
            stars=metadata.stars,
            forks=metadata.forks,
            license=metadata.license,
            last_updated=month_label(metadata.updated_at),
            default_branch=metadata.default_branch or "main",
            language=classification.language,
            language_percentage=f"{classification.language_percentage}.0%",
            language_count=classification.language_count,
            project_type=classification.project_type,
            frameworks=classification.frameworks,
            dependencies=profile_dependencies(signals),
            purpose=classification.purpose,
            architecture=classification.architecture,
            features=classification.features,
            capabilities=classification.capabilities,
            entry_point=plan.entry_point,
            package_managers=plan.package_managers,
            start_commands=plan.start_commands,
            has_container=classification.capabilities.has_container,
            has_readme=any(name.lower().startswith("readme") for name in file_names),
            main_files=main_files(file_names),
            file_structure=file_names,
            package_json=signals.manifest,
        )


def profile_dependencies(signals: Signals) -> List[str]:
    """Runtime dependencies without `@types/` entries, capped and in declaration order."""
    if signals.manifest is not None:
        names = [name for name in signals.dependencies if not name.startswith("@types/")]
    else:
        names = list(signals.python_dependencies)
    return names[:MAX_DEPENDENCIES]


def main_files(file_names: List[str]) -> List[str]:
    selected = [
        name
        for name in file_names
        if _SOURCE_FILE.search(name) or name in _MAIN_FILE_NAMES
    ]
    return selected[:MAX_MAIN_FILES]


def month_label(timestamp: Optional[str]) -> str:
    if not timestamp:
        return ""
    try:
        parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return ""
    return _MONTHS[parsed.month - 1]


__all__ = ["ProfileBuilder", "main_files", "month_label", "profile_dependencies"]
