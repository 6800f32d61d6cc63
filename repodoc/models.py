"""Core data models shared across repodoc components."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

MAX_DISPLAYED_FILES = 20


@dataclass(frozen=True)
class RepositoryReference:
    """Owner/name pair identifying a hosted repository."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    @property
    def html_url(self) -> str:
        return f"https://github.com/{self.owner}/{self.name}"


@dataclass
class RepoMetadata:
    """Subset of the repository metadata record used for profiling."""

    name: str
    description: str = ""
    language: Optional[str] = None
    stars: int = 0
    forks: int = 0
    license: str = ""
    updated_at: Optional[str] = None
    default_branch: str = "main"


@dataclass(frozen=True)
class DirectoryEntry:
    """Top-level entry of the repository listing."""

    name: str
    type: str = "file"


class FetchState(str, Enum):
    """Outcome of an optional file fetch."""

    FOUND = "found"
    MISSING = "missing"
    FAILED = "failed"


@dataclass
class FileFetch:
    """Result of a single allow-listed file fetch attempt."""

    path: str
    state: FetchState
    content: Optional[str] = None
    status_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.state is FetchState.FOUND


@dataclass
class RawArtifacts:
    """Fetched-but-unprocessed inputs for one analysis run."""

    reference: RepositoryReference
    metadata: RepoMetadata
    entries: List[DirectoryEntry] = field(default_factory=list)
    languages: Dict[str, int] = field(default_factory=dict)
    files: Dict[str, str] = field(default_factory=dict)


@dataclass
class ConfigFlags:
    """Presence flags derived from the directory listing and fetched files."""

    has_test_config: bool = False
    has_ci_config: bool = False
    has_container_config: bool = False
    has_deploy_config: bool = False


@dataclass
class Signals:
    """Normalized facts extracted from raw artifacts."""

    dependencies: List[str] = field(default_factory=list)
    dev_dependencies: List[str] = field(default_factory=list)
    python_dependencies: List[str] = field(default_factory=list)
    flags: ConfigFlags = field(default_factory=ConfigFlags)
    manifest: Optional[Dict[str, Any]] = None
    file_names: List[str] = field(default_factory=list)
    has_pyproject: bool = False
    has_requirements: bool = False
    languages: Dict[str, int] = field(default_factory=dict)
    declared_language: Optional[str] = None

    @property
    def lower_file_names(self) -> List[str]:
        return [name.lower() for name in self.file_names]

    @property
    def scripts(self) -> Dict[str, Any]:
        if not self.manifest:
            return {}
        scripts = self.manifest.get("scripts")
        return scripts if isinstance(scripts, dict) else {}

    def has_dependency(self, name: str, *, include_dev: bool = False) -> bool:
        if name in self.dependencies:
            return True
        return include_dev and name in self.dev_dependencies


@dataclass
class CapabilityFlags:
    """Boolean classification outputs."""

    is_full_stack: bool = False
    has_api: bool = False
    has_database: bool = False
    has_auth: bool = False
    has_tests: bool = False
    has_container: bool = False
    deployment_ready: bool = False


@dataclass
class Classification:
    """Classifier output: taxonomy, narrative and capability flags."""

    language: str
    language_percentage: int
    language_count: int
    project_type: str
    frameworks: List[str]
    purpose: str
    architecture: str
    features: List[str]
    capabilities: CapabilityFlags


@dataclass
class CommandPlan:
    """Command synthesizer output."""

    package_managers: List[str]
    entry_point: str
    start_commands: List[str]


@dataclass
class Profile:
    """Structured analysis result for one repository."""

    name: str
    description: str
    owner: str
    url: str
    stars: int
    forks: int
    license: str
    last_updated: str
    default_branch: str
    language: str
    language_percentage: str
    language_count: int
    project_type: str
    frameworks: List[str]
    dependencies: List[str]
    purpose: str
    architecture: str
    features: List[str]
    capabilities: CapabilityFlags
    entry_point: str
    package_managers: List[str]
    start_commands: List[str]
    has_container: bool
    has_readme: bool
    main_files: List[str]
    file_structure: List[str]
    package_json: Optional[Dict[str, Any]] = None

    @property
    def displayed_files(self) -> List[str]:
        return self.file_structure[:MAX_DISPLAYED_FILES]

    @property
    def remaining_files(self) -> int:
        return max(len(self.file_structure) - MAX_DISPLAYED_FILES, 0)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Document:
    """Rendered README text plus download hints."""

    content: str
    style: str
    style_label: str
    filename: str = "README.md"
    media_type: str = "text/markdown"


@dataclass
class AnalysisResult:
    """Profile and document produced by one pipeline run."""

    profile: Profile
    document: Document
