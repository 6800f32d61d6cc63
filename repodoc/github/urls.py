"""Repository URL parsing."""

from __future__ import annotations

import re

from ..models import RepositoryReference
from .exceptions import InvalidRepositoryURL

_GITHUB_URL = re.compile(
    r"^(?:https?://)?(?:www\.)?github\.com/(?P<owner>[A-Za-z0-9_.-]+)/(?P<repo>[A-Za-z0-9_.-]+)(?:[/?#].*)?$"
)


def parse_repository_url(url: str) -> RepositoryReference:
    """Return the owner/name reference encoded in a GitHub repository URL."""
    candidate = (url or "").strip()
    match = _GITHUB_URL.match(candidate)
    if not match:
        raise InvalidRepositoryURL(url)
    owner = match.group("owner")
    repo = match.group("repo")
    if repo.endswith(".git"):
        repo = repo[: -len(".git")]
    if not repo or repo in {".", ".."} or owner in {".", ".."}:
        raise InvalidRepositoryURL(url)
    return RepositoryReference(owner=owner, name=repo)


__all__ = ["parse_repository_url"]
