"""Pipeline orchestration: URL to profile to README."""

from __future__ import annotations

from .analyzers import ProfileBuilder
from .config import RepoDocConfig, load_config
from .github import ArtifactFetcher, GitHubClient, parse_repository_url
from .logging import get_logger
from .models import AnalysisResult, Document, Profile
from .rendering import ReadmeRenderer


class Orchestrator:
    """Coordinates fetching, analysis and rendering for one repository at a time."""

    def __init__(
        self,
        config: RepoDocConfig | None = None,
        fetcher: ArtifactFetcher | None = None,
        profile_builder: ProfileBuilder | None = None,
        renderer: ReadmeRenderer | None = None,
    ) -> None:
        self.config = config or load_config()
        github = self.config.github
        self.fetcher = fetcher or ArtifactFetcher(
            GitHubClient(
                github.api_url,
                user_agent=github.user_agent,
                timeout=github.timeout,
            ),
            max_workers=github.max_workers,
        )
        self.profile_builder = profile_builder or ProfileBuilder()
        self.renderer = renderer or ReadmeRenderer(self.config.readme.templates_dir)
        self.logger = get_logger("orchestrator")

    def analyze(self, url: str) -> Profile:
        """Fetch artifacts for `url` and build a fresh profile."""
        reference = parse_repository_url(url)
        self.logger.info("Analyzing %s", reference.full_name)
        artifacts = self.fetcher.fetch(reference)
        self.logger.debug(
            "Fetched %d listing entries and %d key files",
            len(artifacts.entries),
            len(artifacts.files),
        )
        profile = self.profile_builder.build(artifacts)
        self.logger.info(
            "Classified %s as %s (%s)", reference.full_name, profile.project_type, profile.language
        )
        return profile

    def render(self, profile: Profile, style: str | None = None) -> Document:
        return self.renderer.render(profile, style or self.config.readme.style)

    def generate(self, url: str, style: str | None = None) -> AnalysisResult:
        """Analyze `url` and render its README in one pass."""
        profile = self.analyze(url)
        document = self.render(profile, style)
        return AnalysisResult(profile=profile, document=document)


__all__ = ["Orchestrator"]
