from __future__ import annotations

import logging

import pytest

from repodoc.config import GitHubConfig, RepoDocConfig
from repodoc.github import ArtifactFetcher
from repodoc.orchestrator import Orchestrator
from tests._fixtures.github_builder import API_URL, FakeGitHub


@pytest.fixture
def github() -> FakeGitHub:
    """Provide an empty fake repository served through the client transport."""
    return FakeGitHub()


@pytest.fixture
def orchestrator_for(tmp_path):
    """Build an orchestrator wired to a fake repository."""

    def _build(fake: FakeGitHub) -> Orchestrator:
        config = RepoDocConfig(root=tmp_path, github=GitHubConfig(api_url=API_URL))
        return Orchestrator(config=config, fetcher=ArtifactFetcher(fake.client()))

    return _build


@pytest.fixture(autouse=True)
def _reset_repodoc_logger():
    """CLI runs detach the repodoc logger from root; reattach it for caplog."""
    yield
    logger = logging.getLogger("repodoc")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
