"""Ordered classification rule tables.

Every table here is evaluated top to bottom. Narrative rules marked
``exclusive`` compete for the purpose/architecture sentences and only the
first match fires; the rest are additive and always evaluated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from ..models import Signals

Predicate = Callable[[Signals], bool]

DEFAULT_PURPOSE = "A modern software application with advanced features and robust architecture."
DEFAULT_ARCHITECTURE = "Modular architecture with clean separation of concerns"


@dataclass(frozen=True)
class NarrativeRule:
    """Predicate plus the narrative effect applied when it matches."""

    name: str
    predicate: Predicate
    features: Tuple[str, ...] = ()
    capabilities: Tuple[str, ...] = ()
    purpose: Optional[str] = None
    architecture: Optional[str] = None
    exclusive: bool = False
    unless_feature: Optional[str] = None


def depends_on(*names: str, include_dev: bool = False) -> Predicate:
    def _predicate(signals: Signals) -> bool:
        return any(signals.has_dependency(name, include_dev=include_dev) for name in names)

    return _predicate


def dev_depends_on(*names: str) -> Predicate:
    def _predicate(signals: Signals) -> bool:
        return any(name in signals.dev_dependencies for name in names)

    return _predicate


NARRATIVE_RULES: Tuple[NarrativeRule, ...] = (
    NarrativeRule(
        name="nextjs",
        predicate=depends_on("next"),
        exclusive=True,
        purpose=(
            "A Next.js full-stack web application with modern React architecture "
            "and server-side capabilities."
        ),
        architecture="Next.js App Router with React Server Components and API routes",
        capabilities=("is_full_stack",),
        features=(
            "Server-Side Rendering (SSR)",
            "Static Site Generation (SSG)",
            "API Routes",
            "React Server Components",
        ),
    ),
    NarrativeRule(
        name="react",
        predicate=depends_on("react"),
        exclusive=True,
        purpose=(
            "A React web application with component-based architecture and modern "
            "development practices."
        ),
        architecture="Component-based React architecture with hooks and context",
        features=(
            "Component-based UI",
            "Virtual DOM",
            "State Management",
            "Modern React Hooks",
        ),
    ),
    NarrativeRule(
        name="vue",
        predicate=depends_on("vue"),
        exclusive=True,
        purpose=(
            "A Vue.js progressive web application with reactive data binding and "
            "component composition."
        ),
        architecture="Vue.js progressive framework with composition API",
        features=(
            "Progressive Framework",
            "Reactive Data Binding",
            "Component Composition",
        ),
    ),
    NarrativeRule(
        name="express",
        predicate=depends_on("express"),
        exclusive=True,
        purpose=(
            "A Node.js Express server application providing RESTful API services "
            "with middleware support."
        ),
        architecture="RESTful API server architecture with Express.js middleware",
        capabilities=("has_api",),
        features=("RESTful API", "Middleware Support", "Route Handling"),
    ),
    NarrativeRule(
        name="python_packaging",
        predicate=lambda signals: signals.has_pyproject,
        exclusive=True,
        purpose=(
            "A Python application with modern packaging and dependency management "
            "using Poetry."
        ),
        architecture="Python modular architecture with clean package structure",
    ),
    NarrativeRule(
        name="python_packaging_features",
        predicate=lambda signals: signals.has_pyproject,
        features=(
            "Modern Python Packaging",
            "Dependency Management",
            "Virtual Environment Support",
        ),
    ),
    NarrativeRule(
        name="database",
        predicate=depends_on("mongoose", "@prisma/client"),
        capabilities=("has_database",),
        features=("Database Integration", "ORM/ODM Support"),
    ),
    NarrativeRule(
        name="auth",
        predicate=depends_on("passport", "next-auth"),
        capabilities=("has_auth",),
        features=("Authentication System", "Session Management"),
    ),
    NarrativeRule(
        name="realtime",
        predicate=depends_on("socket.io"),
        features=("Real-time Communication", "WebSocket Support"),
    ),
    NarrativeRule(
        name="payments",
        predicate=depends_on("stripe"),
        features=("Payment Processing", "E-commerce Integration"),
    ),
    NarrativeRule(
        name="typescript",
        predicate=depends_on("typescript", include_dev=True),
        features=("Type Safety", "Enhanced Developer Experience"),
    ),
    NarrativeRule(
        name="tailwind",
        predicate=depends_on("tailwindcss", include_dev=True),
        features=("Modern Styling", "Utility-first CSS"),
    ),
    NarrativeRule(
        name="test_framework",
        predicate=dev_depends_on("jest", "vitest", "cypress"),
        capabilities=("has_tests",),
        features=("Automated Testing", "Test Coverage"),
    ),
    NarrativeRule(
        name="container",
        predicate=lambda signals: signals.flags.has_container_config,
        capabilities=("has_container", "deployment_ready"),
        features=("Containerized Deployment", "Docker Support"),
    ),
    NarrativeRule(
        name="cloud_deploy",
        predicate=lambda signals: signals.flags.has_deploy_config,
        capabilities=("deployment_ready",),
        features=("Cloud Deployment", "Production Ready"),
    ),
    NarrativeRule(
        name="test_files",
        predicate=lambda signals: signals.flags.has_test_config,
        capabilities=("has_tests",),
        features=("Test Coverage", "Quality Assurance"),
        unless_feature="Testing",
    ),
    NarrativeRule(
        name="ci",
        predicate=lambda signals: signals.flags.has_ci_config,
        features=("CI/CD Pipeline", "GitHub Actions"),
    ),
)


# Framework display names keyed by dependency name. Several keys may share a
# display name; the classifier keeps each name once.
FRAMEWORK_DEPENDENCIES: Tuple[Tuple[str, str], ...] = (
    ("react", "React"),
    ("next", "Next.js"),
    ("vue", "Vue.js"),
    ("angular", "Angular"),
    ("@angular/core", "Angular"),
    ("express", "Express.js"),
    ("fastify", "Fastify"),
    ("nestjs", "NestJS"),
    ("@nestjs/core", "NestJS"),
    ("typescript", "TypeScript"),
    ("tailwindcss", "Tailwind CSS"),
    ("sass", "Sass/SCSS"),
    ("scss", "Sass/SCSS"),
    ("prisma", "Prisma"),
    ("@prisma/client", "Prisma"),
    ("mongoose", "MongoDB"),
    ("redis", "Redis"),
    ("graphql", "GraphQL"),
    ("stripe", "Stripe"),
    ("socket.io", "Socket.IO"),
)

# Python distribution names (lowercase) declared in requirements.txt or pyproject.toml.
PYTHON_FRAMEWORK_DEPENDENCIES: Tuple[Tuple[str, str], ...] = (
    ("fastapi", "FastAPI"),
    ("django", "Django"),
    ("flask", "Flask"),
)

FRAMEWORK_FILES: Tuple[Tuple[str, str], ...] = (
    ("dockerfile", "Docker"),
    ("docker-compose.yml", "Docker Compose"),
    ("requirements.txt", "Python"),
    ("pyproject.toml", "Poetry"),
    ("cargo.toml", "Rust"),
    ("go.mod", "Go"),
)

# (required runtime dependencies, project type label)
PROJECT_TYPE_DEPENDENCIES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("next", "react"), "Next.js Application"),
    (("react",), "React Application"),
    (("vue",), "Vue.js Application"),
    (("angular",), "Angular Application"),
    (("express",), "Express.js API"),
    (("fastify",), "Fastify API"),
    (("nestjs",), "NestJS Application"),
)

PROJECT_TYPE_FILES: Tuple[Tuple[str, str], ...] = (
    ("dockerfile", "Containerized Application"),
    ("pyproject.toml", "Python Poetry Project"),
    ("requirements.txt", "Python Application"),
    ("cargo.toml", "Rust Application"),
    ("go.mod", "Go Application"),
    ("pom.xml", "Java Maven Project"),
    ("build.gradle", "Java Gradle Project"),
)


__all__ = [
    "DEFAULT_ARCHITECTURE",
    "DEFAULT_PURPOSE",
    "FRAMEWORK_DEPENDENCIES",
    "FRAMEWORK_FILES",
    "NARRATIVE_RULES",
    "NarrativeRule",
    "PROJECT_TYPE_DEPENDENCIES",
    "PROJECT_TYPE_FILES",
    "PYTHON_FRAMEWORK_DEPENDENCIES",
]
