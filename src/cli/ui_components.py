"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import DomainCheck


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("namescout", style="bold cyan")
    subtitle = Text("Nombres con IA • Disponibilidad en vivo", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_results_table(domains: Iterable[str]) -> Table:
    """Tabla de dominios disponibles, en orden de confirmación."""

    table = Table(title="Available domains")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Domain", style="green")
    for index, domain in enumerate(domains, start=1):
        table.add_row(str(index), domain)
    return table


def build_checks_table(checks: Iterable[DomainCheck]) -> Table:
    table = Table(title="Lookups")
    table.add_column("Domain", style="cyan", no_wrap=True)
    table.add_column("Available", style="green")
    table.add_column("Source", style="white")
    table.add_column("Status", style="magenta")
    table.add_column("Error", style="red")
    for item in checks:
        table.add_row(
            item.domain,
            "yes" if item.available else "no",
            item.source,
            str(item.metadata.get("status_code", "")),
            str(item.metadata.get("error", "")),
        )
    return table
