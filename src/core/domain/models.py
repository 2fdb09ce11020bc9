"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- El mismo modelo sirve de body JSON en la API y de resultado en la CLI.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
- Un candidato es un `str` plano; no necesita modelo propio.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class GenerateRequest(BaseModel):
    """Body de `POST /api/generate-names`."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    keywords: str = Field(
        default="",
        max_length=500,
        description="Palabras clave libres del usuario.",
    )
    description: str = Field(
        default="",
        max_length=2000,
        description="Descripción del negocio/proyecto.",
    )


class DomainCheck(BaseModel):
    """Resultado de consultar la disponibilidad de un dominio.

    Por qué existe:
    - Unifica la salida de varios proveedores (domainsdb, RDAP) en una
      estructura común.
    - Ante cualquier fallo el resultado es `available=False` (fail-closed),
      con el motivo en `metadata`.
    """

    domain: str = Field(
        ...,
        min_length=1,
        max_length=253,
        description="Dominio consultado, tal cual lo produjo el extractor.",
    )
    available: bool = Field(
        default=False,
        description="True solo si el proveedor confirmó que no está registrado.",
    )
    source: str = Field(
        ...,
        min_length=1,
        max_length=64,
        description="Proveedor que respondió (p.ej. 'domainsdb', 'rdap').",
    )
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Evidencia cruda: status_code, match_count, error...",
    )
    checked_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Momento de la consulta (UTC).",
    )
