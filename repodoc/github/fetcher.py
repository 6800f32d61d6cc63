"""Fetches the bounded set of remote artifacts needed to profile a repository."""

from __future__ import annotations

import base64
import binascii
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Mapping, Sequence

from ..logging import get_logger
from ..models import (
    DirectoryEntry,
    FetchState,
    FileFetch,
    RawArtifacts,
    RepoMetadata,
    RepositoryReference,
)
from .client import GitHubClient
from .exceptions import GitHubAPIError

KEY_FILES: tuple[str, ...] = (
    "package.json",
    "README.md",
    "app.js",
    "index.js",
    "main.py",
    "requirements.txt",
    "Dockerfile",
    "docker-compose.yml",
    "pyproject.toml",
)


class ArtifactFetcher:
    """Reads metadata, listing, language stats and allow-listed files."""

    def __init__(
        self,
        client: GitHubClient | None = None,
        *,
        key_files: Sequence[str] = KEY_FILES,
        max_workers: int = 4,
    ) -> None:
        self.client = client or GitHubClient()
        self.key_files = tuple(key_files)
        self.max_workers = max(1, max_workers)
        self.logger = get_logger("github.fetcher")

    def fetch(self, reference: RepositoryReference) -> RawArtifacts:
        """Return raw artifacts; required endpoint failures raise GitHubAPIError."""
        owner, repo = reference.owner, reference.name

        metadata = self._parse_metadata(
            self.client.get_json(self.client.repo_path(owner, repo)), reference
        )
        entries = self._parse_listing(
            self.client.get_json(self.client.repo_path(owner, repo, "contents"))
        )
        languages = self._parse_languages(
            self.client.get_json(self.client.repo_path(owner, repo, "languages"))
        )

        files: Dict[str, str] = {}
        for result in self.fetch_files(reference):
            if result.found and result.content is not None:
                files[result.path] = result.content
            elif result.state is FetchState.FAILED:
                self.logger.warning(
                    "Skipping %s for %s: %s", result.path, reference.full_name, result.error
                )
            else:
                self.logger.debug("%s not present in %s", result.path, reference.full_name)

        return RawArtifacts(
            reference=reference,
            metadata=metadata,
            entries=entries,
            languages=languages,
            files=files,
        )

    def fetch_files(self, reference: RepositoryReference) -> List[FileFetch]:
        """Attempt every allow-listed file; results keep allow-list order."""
        if not self.key_files:
            return []
        workers = min(self.max_workers, len(self.key_files))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="repodoc-fetch") as pool:
            return list(pool.map(lambda path: self.fetch_file(reference, path), self.key_files))

    def fetch_file(self, reference: RepositoryReference, path: str) -> FileFetch:
        endpoint = self.client.repo_path(reference.owner, reference.name, "contents", path)
        try:
            response = self.client.request(endpoint)
        except GitHubAPIError as exc:
            return FileFetch(path=path, state=FetchState.FAILED, error=str(exc))

        if response.status == 404:
            return FileFetch(path=path, state=FetchState.MISSING, status_code=404)
        if not response.ok:
            return FileFetch(
                path=path,
                state=FetchState.FAILED,
                status_code=response.status,
                error=f"HTTP {response.status}",
            )

        try:
            payload = self.client.decode_json(response, endpoint)
        except GitHubAPIError as exc:
            return FileFetch(
                path=path, state=FetchState.FAILED, status_code=response.status, error=str(exc)
            )

        if not isinstance(payload, dict) or not payload.get("content"):
            return FileFetch(path=path, state=FetchState.MISSING, status_code=response.status)

        try:
            content = decode_content(payload["content"], payload.get("encoding"))
        except ValueError as exc:
            return FileFetch(
                path=path, state=FetchState.FAILED, status_code=response.status, error=str(exc)
            )
        return FileFetch(
            path=path, state=FetchState.FOUND, content=content, status_code=response.status
        )

    @staticmethod
    def _parse_metadata(payload: Any, reference: RepositoryReference) -> RepoMetadata:
        if not isinstance(payload, dict):
            raise GitHubAPIError("GitHub API returned an unexpected repository payload")
        license_info = payload.get("license")
        license_name = ""
        if isinstance(license_info, Mapping):
            license_name = str(license_info.get("name") or "")
        return RepoMetadata(
            name=str(payload.get("name") or reference.name),
            description=str(payload.get("description") or ""),
            language=payload.get("language") if isinstance(payload.get("language"), str) else None,
            stars=_as_int(payload.get("stargazers_count")),
            forks=_as_int(payload.get("forks_count")),
            license=license_name,
            updated_at=payload.get("updated_at") if isinstance(payload.get("updated_at"), str) else None,
            default_branch=str(payload.get("default_branch") or "main"),
        )

    @staticmethod
    def _parse_listing(payload: Any) -> List[DirectoryEntry]:
        if not isinstance(payload, list):
            raise GitHubAPIError("GitHub API returned an unexpected contents payload")
        entries: List[DirectoryEntry] = []
        for item in payload:
            if not isinstance(item, Mapping) or not isinstance(item.get("name"), str):
                continue
            entries.append(DirectoryEntry(name=item["name"], type=str(item.get("type") or "file")))
        return entries

    @staticmethod
    def _parse_languages(payload: Any) -> Dict[str, int]:
        if not isinstance(payload, dict):
            raise GitHubAPIError("GitHub API returned an unexpected languages payload")
        return {
            str(language): int(count)
            for language, count in payload.items()
            if isinstance(count, (int, float)) and not isinstance(count, bool)
        }


def decode_content(content: str, encoding: str | None = "base64") -> str:
    """Decode a contents-API payload into text."""
    if encoding not in (None, "", "base64"):
        return content
    try:
        raw = base64.b64decode(content, validate=False)
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"invalid base64 content: {exc}") from exc
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError("file content is not valid UTF-8") from exc


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return int(value)
    return 0


__all__ = ["ArtifactFetcher", "KEY_FILES", "decode_content"]
