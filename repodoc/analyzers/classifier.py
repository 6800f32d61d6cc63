"""Classifier: signals to taxonomy, narrative and capability flags."""

from __future__ import annotations

from typing import List, Optional

from ..logging import get_logger
from ..models import CapabilityFlags, Classification, Signals
from .language import summarize_languages
from .rules import (
    DEFAULT_ARCHITECTURE,
    DEFAULT_PURPOSE,
    FRAMEWORK_DEPENDENCIES,
    FRAMEWORK_FILES,
    NARRATIVE_RULES,
    PROJECT_TYPE_DEPENDENCIES,
    PROJECT_TYPE_FILES,
    PYTHON_FRAMEWORK_DEPENDENCIES,
    NarrativeRule,
)
from .utils import ordered_unique


def generic_features(language: str) -> List[str]:
    return [
        f"Modern {language} application",
        "Clean and maintainable code structure",
        "Responsive and user-friendly interface",
    ]


class Classifier:
    """Maps signals to the project taxonomy using ordered rule tables."""

    def __init__(self, rules: tuple[NarrativeRule, ...] = NARRATIVE_RULES) -> None:
        self.rules = rules
        self.logger = get_logger("analyzers.classifier")

    def classify(self, signals: Signals) -> Classification:
        summary = summarize_languages(signals.languages, signals.declared_language)

        purpose: Optional[str] = None
        architecture: Optional[str] = None
        features: List[str] = []
        capabilities = CapabilityFlags()

        narrative_matched = False

        for rule in self.rules:
            if not rule.predicate(signals):
                continue
            if rule.exclusive:
                if narrative_matched:
                    continue
                narrative_matched = True
                purpose = rule.purpose
                architecture = rule.architecture
            self.logger.debug("Rule %s matched", rule.name)
            if not (rule.unless_feature and any(rule.unless_feature in item for item in features)):
                features.extend(rule.features)
            for flag in rule.capabilities:
                setattr(capabilities, flag, True)

        features = ordered_unique(features)
        if not features:
            features = generic_features(summary.language)

        return Classification(
            language=summary.language,
            language_percentage=summary.percentage,
            language_count=summary.count,
            project_type=self.project_type(signals, summary.language),
            frameworks=self.frameworks(signals),
            purpose=purpose or DEFAULT_PURPOSE,
            architecture=architecture or DEFAULT_ARCHITECTURE,
            features=features,
            capabilities=capabilities,
        )

    @staticmethod
    def frameworks(signals: Signals) -> List[str]:
        """Union of dependency and file matches, first detection order, no duplicates."""
        declared = set(signals.dependencies) | set(signals.dev_dependencies)
        labels: List[str] = [label for key, label in FRAMEWORK_DEPENDENCIES if key in declared]
        python = {name.lower() for name in signals.python_dependencies}
        labels.extend(label for key, label in PYTHON_FRAMEWORK_DEPENDENCIES if key in python)
        names = set(signals.lower_file_names)
        labels.extend(label for key, label in FRAMEWORK_FILES if key in names)
        return ordered_unique(labels)

    @staticmethod
    def project_type(signals: Signals, language: str) -> str:
        runtime = set(signals.dependencies)
        for required, label in PROJECT_TYPE_DEPENDENCIES:
            if all(name in runtime for name in required):
                return label
        names = set(signals.lower_file_names)
        for file_name, label in PROJECT_TYPE_FILES:
            if file_name in names:
                return label
        return f"{language} Project"


__all__ = ["Classifier", "generic_features"]
