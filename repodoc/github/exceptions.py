"""Exceptions raised while resolving and fetching repositories."""

from __future__ import annotations


class InvalidRepositoryURL(ValueError):
    """Raised when the input does not identify an owner/repository pair."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Invalid GitHub URL format: {url!r}")


class GitHubAPIError(RuntimeError):
    """Non-success response from a required GitHub API endpoint."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


__all__ = ["GitHubAPIError", "InvalidRepositoryURL"]
