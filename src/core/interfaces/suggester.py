"""Contrato del proveedor de sugerencias (LLM)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class NameSuggester(Protocol):
    """Devuelve el texto crudo del modelo; nunca una lista ya parseada.

    El parseo vive en `core.services.candidate_extractor` para que cualquier
    proveedor (o un fake) pase por el mismo filtro.
    """

    async def suggest(self, *, keywords: str, description: str) -> str:
        ...
