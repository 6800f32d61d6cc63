"""repodoc: GitHub repository profiling and README generation."""

from .models import AnalysisResult, Document, Profile
from .orchestrator import Orchestrator

__all__ = ["AnalysisResult", "Document", "Orchestrator", "Profile"]

__version__ = "0.1.0"
