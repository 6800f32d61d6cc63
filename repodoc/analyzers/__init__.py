"""Signal extraction, classification and command synthesis."""

from __future__ import annotations

from .classifier import Classifier
from .commands import PACKAGE_MANAGERS, CommandSynthesizer, lookup_manager
from .profile import ProfileBuilder
from .rules import NARRATIVE_RULES, NarrativeRule
from .signals import SignalExtractor

__all__ = [
    "Classifier",
    "CommandSynthesizer",
    "NARRATIVE_RULES",
    "NarrativeRule",
    "PACKAGE_MANAGERS",
    "ProfileBuilder",
    "SignalExtractor",
    "lookup_manager",
]
