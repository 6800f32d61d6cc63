"""FastAPI application entrypoint for repodoc service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from ..config import ConfigError
from ..github import GitHubAPIError, InvalidRepositoryURL
from ..logging import get_logger
from ..models import AnalysisResult, Profile
from ..orchestrator import Orchestrator


class AnalyzeRequest(BaseModel):
    url: str


class AnalyzeResponse(BaseModel):
    profile: Dict[str, Any]


class ReadmeRequest(BaseModel):
    url: str
    style: Optional[str] = None


class ReadmeResponse(BaseModel):
    filename: str
    media_type: str
    style: str
    style_label: str
    content: str


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing repodoc operations."""

    app = FastAPI(title="RepoDoc Service", version="0.1.0")
    logger = get_logger("service")

    async def get_orchestrator() -> Orchestrator:
        # Each request gets a fresh pipeline; nothing is shared between analyses.
        return orchestrator_factory()

    async def _run(func: Callable[[], Any]) -> Any:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, func)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/analyze", response_model=AnalyzeResponse)
    async def analyze_repo(
        payload: AnalyzeRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> AnalyzeResponse:
        def _run_analyze() -> Profile:
            return orchestrator.analyze(payload.url)

        profile = await _run(_run_analyze)
        return AnalyzeResponse(profile=profile.to_dict())

    @app.post("/readme", response_model=ReadmeResponse)
    async def generate_readme(
        payload: ReadmeRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> ReadmeResponse:
        def _run_generate() -> AnalysisResult:
            return orchestrator.generate(payload.url, style=payload.style)

        result = await _run(_run_generate)
        document = result.document
        return ReadmeResponse(
            filename=document.filename,
            media_type=document.media_type,
            style=document.style,
            style_label=document.style_label,
            content=document.content,
        )

    @app.post("/readme/download")
    async def download_readme(
        payload: ReadmeRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> Response:
        def _run_generate() -> AnalysisResult:
            return orchestrator.generate(payload.url, style=payload.style)

        result = await _run(_run_generate)
        document = result.document
        return Response(
            content=document.content,
            media_type=document.media_type,
            headers={"Content-Disposition": f'attachment; filename="{document.filename}"'},
        )

    @app.exception_handler(InvalidRepositoryURL)
    async def invalid_url_handler(_: Any, exc: InvalidRepositoryURL) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(GitHubAPIError)
    async def github_error_handler(_: Any, exc: GitHubAPIError) -> JSONResponse:
        logger.warning("GitHub request failed: %s", exc)
        return JSONResponse(
            status_code=502,
            content={"detail": str(exc), "status_code": exc.status_code},
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(
        _: Any, exc: ConfigError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000, log_level: str = "info"
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port, log_level=log_level)
