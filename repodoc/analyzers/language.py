"""Primary language selection from provider byte counts."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Optional

UNKNOWN_LANGUAGE = "Unknown"


@dataclass(frozen=True)
class LanguageSummary:
    """Primary language, its share of bytes and the number of languages."""

    language: str
    percentage: int
    count: int

    @property
    def percentage_label(self) -> str:
        return f"{self.percentage}.0%"


def summarize_languages(
    languages: Mapping[str, int], declared: Optional[str] = None
) -> LanguageSummary:
    """Pick the language with the most bytes.

    Ties keep the provider's key order, so a byte-sorted mapping resolves to its
    first key. With no byte counts the declared repository language is used.
    """
    if not languages:
        return LanguageSummary(language=declared or UNKNOWN_LANGUAGE, percentage=0, count=0)

    primary = None
    primary_bytes = -1
    for language, count in languages.items():
        if count > primary_bytes:
            primary, primary_bytes = language, count

    total = sum(languages.values())
    percentage = math.floor(100 * primary_bytes / total + 0.5) if total > 0 else 0
    return LanguageSummary(
        language=primary or declared or UNKNOWN_LANGUAGE,
        percentage=int(percentage),
        count=len(languages),
    )


__all__ = ["LanguageSummary", "UNKNOWN_LANGUAGE", "summarize_languages"]
