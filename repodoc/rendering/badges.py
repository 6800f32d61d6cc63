"""Badge links for generated README headers and install sections."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..analyzers.commands import lookup_manager

_SHIELDS = "https://img.shields.io/github"


@dataclass(frozen=True)
class Badge:
    """Image badge rendered in the README header."""

    alt: str
    src: str


@dataclass(frozen=True)
class ManagerBadge:
    """Package manager block: display name, badge, link and commands."""

    name: str
    label: str
    badge: str
    url: str
    install: str
    run: str
    test: str


def header_badges(owner: str, name: str) -> List[Badge]:
    """Shields.io badges parameterized by owner/name."""
    return [
        Badge(
            alt="license",
            src=f"{_SHIELDS}/license/{owner}/{name}?style=default&logo=opensourceinitiative&logoColor=white&color=0080ff",
        ),
        Badge(
            alt="last-commit",
            src=f"{_SHIELDS}/last-commit/{owner}/{name}?style=default&logo=git&logoColor=white&color=0080ff",
        ),
        Badge(
            alt="repo-top-language",
            src=f"{_SHIELDS}/languages/top/{owner}/{name}?style=default&color=0080ff",
        ),
        Badge(
            alt="repo-language-count",
            src=f"{_SHIELDS}/languages/count/{owner}/{name}?style=default&color=0080ff",
        ),
    ]


def manager_badges(managers: List[str], entry_point: str) -> List[ManagerBadge]:
    """Resolve each detected manager against the command table."""
    badges: List[ManagerBadge] = []
    for name in managers:
        entry = lookup_manager(name)
        badges.append(
            ManagerBadge(
                name=name,
                label=name[:1].upper() + name[1:],
                badge=entry.badge,
                url=entry.url,
                install=entry.install,
                run=entry.run_command(entry_point),
                test=entry.test_command(entry_point),
            )
        )
    return badges


__all__ = ["Badge", "ManagerBadge", "header_badges", "manager_badges"]
