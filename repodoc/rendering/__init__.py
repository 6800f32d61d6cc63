"""README rendering from repository profiles."""

from .builder import IndexFile, ReadmeRenderer
from .constants import DEFAULT_SECTIONS, DEFAULT_STYLE, STYLE_LABELS

__all__ = ["DEFAULT_SECTIONS", "DEFAULT_STYLE", "IndexFile", "ReadmeRenderer", "STYLE_LABELS"]
