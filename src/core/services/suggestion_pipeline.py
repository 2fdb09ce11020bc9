"""Suggestion pipeline orchestration.

This module wires the three steps of a request (ask the model, extract
candidates, scan availability) so the web handler and the CLI share a single
flow. Side-effects specific to a UI (printing, progress) go through
`PipelineHooks` and stay out of the core logic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AsyncIterator, Callable

import httpx

from adapters.lookup_sources import DomainsDBChecker, RDAPChecker
from adapters.name_generator import OpenAINameSuggester
from core.config import AppSettings, LookupProvider
from core.interfaces.checker import AvailabilityChecker
from core.interfaces.suggester import NameSuggester
from core.services.availability_scanner import ScanSession, scan
from core.services.candidate_extractor import extract_candidates

logger = logging.getLogger(__name__)


@dataclass
class SuggestionRequest:
    """Parameters that control one pipeline run."""

    keywords: str = ""
    description: str = ""
    max_results: int = 10
    concurrency_limit: int = 5
    lookup_timeout: float | None = None

    @classmethod
    def from_settings(cls, settings: AppSettings, *, keywords: str, description: str) -> "SuggestionRequest":
        return cls(
            keywords=keywords,
            description=description,
            max_results=settings.max_results,
            concurrency_limit=settings.max_concurrency,
            lookup_timeout=settings.lookup_timeout_seconds,
        )


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers."""

    candidates: Callable[[list[str]], None] | None = None
    warning: Callable[[str], None] | None = None


def build_checker(settings: AppSettings, client: httpx.AsyncClient | None = None) -> AvailabilityChecker:
    """Pick the lookup adapter configured in `settings.lookup_provider`."""

    if settings.lookup_provider == LookupProvider.RDAP:
        return RDAPChecker(settings, client=client)
    return DomainsDBChecker(settings, client=client)


def build_suggester(settings: AppSettings) -> NameSuggester:
    return OpenAINameSuggester(settings)


async def suggest_available(
    *,
    request: SuggestionRequest,
    suggester: NameSuggester,
    checker: AvailabilityChecker,
    hooks: PipelineHooks | None = None,
    session: ScanSession | None = None,
) -> AsyncIterator[str]:
    """Yield available names (or the no-results message) for one request."""

    hooks = hooks or PipelineHooks()

    raw_text = await suggester.suggest(keywords=request.keywords, description=request.description)
    candidates = extract_candidates(raw_text)
    logger.info("Extracted %d candidates from %d chars of model output", len(candidates), len(raw_text))

    if not candidates:
        message = "The model reply contained no usable .com names."
        if hooks.warning:
            hooks.warning(message)
    if hooks.candidates:
        hooks.candidates(candidates)

    async for value in scan(
        candidates,
        checker=checker,
        max_results=request.max_results,
        concurrency_limit=request.concurrency_limit,
        lookup_timeout=request.lookup_timeout,
        session=session,
    ):
        yield value
