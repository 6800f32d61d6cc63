"""Repository URL parsing tests."""

from __future__ import annotations

import pytest

from repodoc.github import InvalidRepositoryURL, parse_repository_url


@pytest.mark.parametrize(
    "url",
    [
        "https://github.com/octo/demo",
        "http://github.com/octo/demo",
        "https://www.github.com/octo/demo",
        "github.com/octo/demo",
        "https://github.com/octo/demo.git",
        "https://github.com/octo/demo/tree/main/src",
        "https://github.com/octo/demo?tab=readme",
        "  https://github.com/octo/demo  ",
    ],
)
def test_parse_accepts_common_url_shapes(url: str) -> None:
    reference = parse_repository_url(url)
    assert reference.owner == "octo"
    assert reference.name == "demo"
    assert reference.full_name == "octo/demo"
    assert reference.html_url == "https://github.com/octo/demo"


@pytest.mark.parametrize(
    "url",
    [
        "",
        "https://gitlab.com/octo/demo",
        "https://github.com/octo",
        "https://github.com/",
        "not a url",
    ],
)
def test_parse_rejects_malformed_urls(url: str) -> None:
    with pytest.raises(InvalidRepositoryURL) as excinfo:
        parse_repository_url(url)
    assert "Invalid GitHub URL format" in str(excinfo.value)


def test_invalid_url_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse_repository_url("https://example.com/octo/demo")
