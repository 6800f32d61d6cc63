"""HTTP service exposing repository analysis and README generation."""

from .app import create_app, run_service

__all__ = ["create_app", "run_service"]
