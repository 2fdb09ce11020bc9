"""CLI de namescout (Typer + Rich).

Comandos:
- `serve`: levanta la app web (uvicorn).
- `suggest`: mismo pipeline que la web, imprimiendo en terminal.
- `check`: consulta disponibilidad de dominios concretos.
- `doctor`: diagnósticos y configuración del proveedor IA.
"""

from __future__ import annotations

import asyncio
from typing import List, Optional

import typer
import uvicorn
from rich.console import Console

from adapters.http_client import build_async_client
from cli import doctor
from cli.ui_components import build_checks_table, build_results_table, print_banner
from core.config import AppSettings, LookupProvider
from core.domain.models import DomainCheck
from core.logging_config import setup_logging
from core.services.availability_scanner import NO_RESULTS_MESSAGE, ScanSession, check_many
from core.services.suggestion_pipeline import (
    PipelineHooks,
    SuggestionRequest,
    build_checker,
    build_suggester,
    suggest_available,
)
from web.app import create_app

app = typer.Typer(no_args_is_help=True, help="Brandable .com name finder (LLM + availability lookups).")
app.add_typer(doctor.app, name="doctor")

_console = Console()

APP_FACTORY = "web.app:create_app"


def _settings(provider: LookupProvider | None = None) -> AppSettings:
    settings = AppSettings()
    if provider is not None:
        settings = settings.model_copy(update={"lookup_provider": provider})
    setup_logging(settings.log_level)
    return settings


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: NAMESCOUT_HOST)."),
    port: Optional[int] = typer.Option(None, help="Port (default: NAMESCOUT_PORT)."),
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes (development)."),
) -> None:
    """Run the web app."""

    settings = _settings()
    print_banner(_console)
    # Reload spawns a fresh interpreter, so uvicorn needs an import string there.
    target = APP_FACTORY if reload else create_app(settings)
    uvicorn.run(
        target,
        factory=reload,
        reload=reload,
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )


async def _run_suggest(settings: AppSettings, request: SuggestionRequest) -> tuple[list[str], ScanSession]:
    found: list[str] = []
    session = ScanSession(max_results=request.max_results, concurrency_limit=request.concurrency_limit)
    hooks = PipelineHooks(
        candidates=lambda names: _console.print(f"[dim]{len(names)} candidates from the model[/dim]"),
        warning=lambda message: _console.print(f"[yellow]{message}[/yellow]"),
    )

    async with build_async_client(settings) as client:
        async for value in suggest_available(
            request=request,
            suggester=build_suggester(settings),
            checker=build_checker(settings, client),
            hooks=hooks,
            session=session,
        ):
            if value == NO_RESULTS_MESSAGE:
                _console.print(f"[yellow]{value}[/yellow]")
                continue
            _console.print(f"[green]✔[/green] {value}")
            found.append(value)
    return found, session


@app.command()
def suggest(
    keywords: str = typer.Argument(..., help="Keywords for the names."),
    description: str = typer.Option("", "--description", "-d", help="What the project is about."),
    max_results: Optional[int] = typer.Option(None, "--max-results", "-n", min=1, help="Stop after this many available names."),
    concurrency: Optional[int] = typer.Option(None, "--concurrency", "-c", min=1, help="Lookups in flight at once."),
    provider: Optional[LookupProvider] = typer.Option(None, "--provider", help="Availability lookup provider."),
) -> None:
    """Ask the model for names and print the available ones as they are confirmed."""

    settings = _settings(provider)
    request = SuggestionRequest.from_settings(settings, keywords=keywords, description=description)
    if max_results:
        request.max_results = max_results
    if concurrency:
        request.concurrency_limit = concurrency

    found, session = asyncio.run(_run_suggest(settings, request))
    if found:
        _console.print(build_results_table(found))
    _console.print(
        f"[dim]checked={session.checked} found={session.found} peak_in_flight={session.peak_in_flight}[/dim]"
    )


@app.command()
def check(
    domains: List[str] = typer.Argument(..., help="Domains to look up."),
    concurrency: Optional[int] = typer.Option(None, "--concurrency", "-c", min=1),
    provider: Optional[LookupProvider] = typer.Option(None, "--provider"),
) -> None:
    """Look up explicit domains and show the raw result of each."""

    settings = _settings(provider)

    async def _run() -> list[DomainCheck]:
        async with build_async_client(settings) as client:
            return await check_many(
                domains,
                checker=build_checker(settings, client),
                concurrency_limit=concurrency or settings.max_concurrency,
            )

    _console.print(build_checks_table(asyncio.run(_run())))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
