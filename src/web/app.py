"""FastAPI application.

The handler streams one line per available domain while the scan is still
running, so the browser can render rows before the slowest lookup returns.
Collaborators are injectable through `create_app` to run the app against
fakes in tests.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import AsyncIterator, Callable

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, StreamingResponse
from fastapi.templating import Jinja2Templates

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import GenerateRequest
from core.interfaces.checker import AvailabilityChecker
from core.interfaces.suggester import NameSuggester
from core.services.availability_scanner import NO_RESULTS_MESSAGE
from core.services.suggestion_pipeline import (
    SuggestionRequest,
    build_checker,
    build_suggester,
    suggest_available,
)

logger = logging.getLogger(__name__)

__version__ = "0.1.0"

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

CheckerFactory = Callable[[AppSettings, httpx.AsyncClient], AvailabilityChecker]

STREAM_HEADERS = {
    "Cache-Control": "no-cache",
    # Evita que proxies (nginx) acumulen el body antes de reenviarlo.
    "X-Accel-Buffering": "no",
}


def create_app(
    settings: AppSettings | None = None,
    *,
    suggester: NameSuggester | None = None,
    checker_factory: CheckerFactory | None = None,
) -> FastAPI:
    settings = settings or AppSettings()
    suggester = suggester or build_suggester(settings)
    checker_factory = checker_factory or build_checker
    templates = Jinja2Templates(directory=str(_TEMPLATES_DIR))

    app = FastAPI(
        title="namescout",
        description="Suggests brandable .com names with an LLM and streams the available ones.",
        version=__version__,
    )
    app.state.settings = settings

    async def stream_available(body: GenerateRequest) -> AsyncIterator[str]:
        request = SuggestionRequest.from_settings(
            settings,
            keywords=body.keywords,
            description=body.description,
        )
        async with build_async_client(settings) as client:
            checker = checker_factory(settings, client)
            async for value in suggest_available(request=request, suggester=suggester, checker=checker):
                yield f"{value}\n"

    @app.post("/api/generate-names")
    async def generate_names(body: GenerateRequest) -> StreamingResponse:
        logger.info("generate-names: keywords=%r", body.keywords[:80])
        return StreamingResponse(
            stream_available(body),
            media_type="text/plain; charset=utf-8",
            headers=STREAM_HEADERS,
        )

    @app.get("/", response_class=HTMLResponse)
    async def home(request: Request) -> HTMLResponse:
        return templates.TemplateResponse(
            request,
            "index.html",
            {"no_results_message": NO_RESULTS_MESSAGE, "max_results": settings.max_results},
        )

    @app.get("/api/health")
    async def health() -> dict[str, str]:
        return {
            "status": "ok",
            "version": __version__,
            "lookup_provider": settings.lookup_provider.value,
        }

    return app
