"""Minimal read-only client for the GitHub REST API."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from http.client import HTTPException
from typing import Any, Callable, Dict, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import Request, urlopen

from ..logging import get_logger
from .exceptions import GitHubAPIError


@dataclass
class HTTPRequest:
    """Outbound GET request handed to the transport."""

    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    timeout: float = 30.0


@dataclass
class HTTPResponse:
    """Status and raw body returned by the transport."""

    status: int
    body: bytes = b""
    reason: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


Transport = Callable[[HTTPRequest], HTTPResponse]


class GitHubClient:
    """Issues GET requests against the repository endpoints."""

    DEFAULT_API_URL = "https://api.github.com"
    ACCEPT = "application/vnd.github.v3+json"

    def __init__(
        self,
        api_url: str | None = None,
        *,
        user_agent: str = "README-Generator",
        timeout: float = 30.0,
        transport: Transport | None = None,
    ) -> None:
        self.api_url = (api_url or self.DEFAULT_API_URL).rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self._transport = transport or self._urllib_transport
        self.logger = get_logger("github.client")

    def repo_path(self, owner: str, repo: str, *parts: str) -> str:
        segments = [quote(owner, safe=""), quote(repo, safe="")]
        segments.extend(quote(part, safe="/") for part in parts if part)
        return "/repos/" + "/".join(segments)

    def request(self, path: str) -> HTTPResponse:
        """Send a GET request and return the response without checking its status."""
        url = f"{self.api_url}{path}"
        self.logger.debug("GET %s", url)
        http_request = HTTPRequest(
            url=url,
            headers={"Accept": self.ACCEPT, "User-Agent": self.user_agent},
            timeout=self.timeout,
        )
        return self._transport(http_request)

    def get_json(self, path: str) -> Any:
        """Return the decoded JSON body, raising GitHubAPIError on non-success."""
        response = self.request(path)
        if not response.ok:
            reason = response.reason or _extract_message(response.body)
            detail = f"{response.status} {reason}".strip()
            raise GitHubAPIError(
                f"GitHub API error: {detail} ({path})",
                status_code=response.status,
                endpoint=path,
            )
        return self.decode_json(response, path)

    @staticmethod
    def decode_json(response: HTTPResponse, path: str) -> Any:
        try:
            return json.loads(response.body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise GitHubAPIError(
                f"GitHub API returned invalid JSON ({path})",
                status_code=response.status,
                endpoint=path,
            ) from exc

    @staticmethod
    def _urllib_transport(request: HTTPRequest) -> HTTPResponse:
        http_request = Request(request.url, headers=request.headers, method="GET")
        try:
            with urlopen(http_request, timeout=request.timeout) as response:  # type: ignore[arg-type]
                return HTTPResponse(
                    status=response.status,
                    body=response.read(),
                    reason=str(response.reason or ""),
                )
        except HTTPError as exc:
            body = exc.read() if hasattr(exc, "read") else b""
            return HTTPResponse(status=exc.code, body=body or b"", reason=str(exc.reason or ""))
        except URLError as exc:
            raise GitHubAPIError(
                f"GitHub API request failed: {exc.reason}", endpoint=request.url
            ) from exc
        except (OSError, HTTPException) as exc:
            # timeouts and dropped connections while reading the body
            raise GitHubAPIError(
                f"GitHub API request failed: {exc or type(exc).__name__}", endpoint=request.url
            ) from exc


def _extract_message(body: bytes) -> str:
    try:
        payload: Optional[Any] = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return ""
    if isinstance(payload, dict) and isinstance(payload.get("message"), str):
        return payload["message"]
    return ""


__all__ = ["GitHubClient", "HTTPRequest", "HTTPResponse", "Transport"]
