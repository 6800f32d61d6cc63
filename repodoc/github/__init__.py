"""GitHub access: URL parsing, API client and artifact fetching."""

from .client import GitHubClient, HTTPRequest, HTTPResponse
from .exceptions import GitHubAPIError, InvalidRepositoryURL
from .fetcher import KEY_FILES, ArtifactFetcher
from .urls import parse_repository_url

__all__ = [
    "ArtifactFetcher",
    "GitHubAPIError",
    "GitHubClient",
    "HTTPRequest",
    "HTTPResponse",
    "InvalidRepositoryURL",
    "KEY_FILES",
    "parse_repository_url",
]
