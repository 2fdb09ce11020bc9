"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, write_user_env_vars
from core.services.suggestion_pipeline import build_checker

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

PROBE_DOMAIN = "google.com"


async def _check_lookup(settings: AppSettings) -> tuple[bool, str]:
    """Look up a domain that is certainly registered; it must come back as taken."""

    try:
        async with build_async_client(settings) as client:
            result = await build_checker(settings, client).check(PROBE_DOMAIN)
    except Exception as exc:
        return False, str(exc)

    status = result.metadata.get("status_code")
    if result.available:
        return False, f"{PROBE_DOMAIN} reported as available (HTTP {status})"
    if result.metadata.get("error"):
        return False, str(result.metadata["error"])
    return True, f"HTTP {status}"


async def _check_ai(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(
                settings.ai_base_url.rstrip("/") + "/models",
                headers={"Authorization": f"Bearer {settings.ai_api_key or ''}"},
            )
    except Exception as exc:
        return False, str(exc)
    return response.is_success, f"HTTP {response.status_code}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="namescout doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    if bool(settings.ai_api_key):
        table.add_row("AI key", "OK", "Remote AI enabled")
    else:
        table.add_row("AI key", "MISSING", "No key set -> every request ends with the no-results message")
    table.add_row("AI base_url", "OK", settings.ai_base_url)
    table.add_row("AI model", "OK", settings.ai_model)

    # Connectivity (best-effort)
    if settings.ai_api_key:
        ok_ai, detail_ai = asyncio.run(_check_ai(settings))
        table.add_row("AI connectivity", "OK" if ok_ai else "FAIL", detail_ai)

    ok_lookup, detail_lookup = asyncio.run(_check_lookup(settings))
    table.add_row(
        f"Lookup ({settings.lookup_provider.value})",
        "OK" if ok_lookup else "FAIL",
        detail_lookup,
    )
    table.add_row(
        "Scan limits",
        "OK",
        f"max_results={settings.max_results} concurrency={settings.max_concurrency} "
        f"lookup_timeout={settings.lookup_timeout_seconds}s",
    )

    _console.print(table)

    if not ok_lookup:
        _console.print(
            "\n[yellow]Note:[/yellow] failed lookups count as unavailable; "
            "try `NAMESCOUT_LOOKUP_PROVIDER=rdap` if domainsdb is down."
        )


@app.command(name="setup-ai")
def setup_ai() -> None:
    """Interactive AI setup (stores config in the user config .env)."""

    provider = typer.prompt(
        "AI provider",
        default="groq",
        show_default=True,
    ).strip().lower()

    presets: dict[str, dict[str, str]] = {
        "groq": {"NAMESCOUT_AI_BASE_URL": "https://api.groq.com/openai/v1", "NAMESCOUT_AI_MODEL": "llama-3.1-8b-instant"},
        # Calidad (más lento):
        "groq-70b": {"NAMESCOUT_AI_BASE_URL": "https://api.groq.com/openai/v1", "NAMESCOUT_AI_MODEL": "llama-3.3-70b-versatile"},
        "deepseek": {"NAMESCOUT_AI_BASE_URL": "https://api.deepseek.com", "NAMESCOUT_AI_MODEL": "deepseek-chat"},
        "openai": {"NAMESCOUT_AI_BASE_URL": "https://api.openai.com/v1", "NAMESCOUT_AI_MODEL": "gpt-4o-mini"},
        "openrouter": {"NAMESCOUT_AI_BASE_URL": "https://openrouter.ai/api/v1", "NAMESCOUT_AI_MODEL": "openai/gpt-4o-mini"},
        "ollama": {"NAMESCOUT_AI_BASE_URL": "http://localhost:11434/v1", "NAMESCOUT_AI_MODEL": "llama3"},
    }

    values = presets.get(provider, {}).copy()
    if not values:
        _console.print("[yellow]Unknown provider preset. You can still enter custom values.[/yellow]")

    base_url = typer.prompt("AI base URL", default=values.get("NAMESCOUT_AI_BASE_URL", ""), show_default=True).strip()
    model = typer.prompt("AI model", default=values.get("NAMESCOUT_AI_MODEL", ""), show_default=True).strip()
    api_key = typer.prompt("AI API key", default="", hide_input=True, confirmation_prompt=False).strip()

    if not base_url or not model:
        raise typer.BadParameter("base_url and model are required")

    env_path = write_user_env_vars(
        {
            "NAMESCOUT_AI_BASE_URL": base_url,
            "NAMESCOUT_AI_MODEL": model,
            "NAMESCOUT_AI_API_KEY": api_key,
        }
    )

    _console.print(f"[green]Saved AI config to:[/green] {env_path}")
