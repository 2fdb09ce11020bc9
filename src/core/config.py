"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la web/CLI.
- Permite que adaptadores (HTTP/IA/lookup) lean config de forma consistente.
- Se pasa explícitamente a la app y a los adaptadores: nada de globals.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "namescout"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "namescout"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "namescout"
    return Path.home() / ".config" / "namescout"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# namescout user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class LookupProvider(str, Enum):
    """Proveedores de disponibilidad soportados."""

    DOMAINSDB = "domainsdb"
    RDAP = "rdap"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para web/CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="NAMESCOUT_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request HTTP (segundos).",
    )
    user_agent: str = Field(
        default="namescout/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para las consultas de disponibilidad.",
    )

    ai_api_key: str | None = Field(
        default=None,
        description="API key para el proveedor IA (compatible OpenAI, p.ej. Groq).",
    )
    ai_base_url: str = Field(
        default="https://api.groq.com/openai/v1",
        min_length=8,
        description="Base URL compatible OpenAI.",
    )
    ai_model: str = Field(
        default="llama-3.1-8b-instant",
        min_length=1,
        description="Modelo usado para sugerir nombres.",
    )
    ai_timeout_seconds: float = Field(
        default=45.0,
        gt=0,
        description="Timeout para la llamada al proveedor IA (segundos).",
    )
    ai_temperature: float = Field(
        default=0.9,
        ge=0.0,
        le=2.0,
        description="Temperatura de muestreo; alta para nombres variados.",
    )
    suggestion_count: int = Field(
        default=100,
        ge=1,
        le=500,
        description="Cantidad de nombres que se piden al modelo por request.",
    )

    lookup_provider: LookupProvider = Field(
        default=LookupProvider.DOMAINSDB,
        description="Proveedor de disponibilidad (domainsdb | rdap).",
    )
    domainsdb_base_url: str = Field(
        default="https://api.domainsdb.info/v1/domains/search",
        min_length=8,
        description="Endpoint de búsqueda de domainsdb.info.",
    )
    domainsdb_zone: str = Field(
        default="com",
        min_length=1,
        description="Zona consultada en domainsdb.info.",
    )
    rdap_base_url: str = Field(
        default="https://rdap.verisign.com/com/v1",
        min_length=8,
        description="Base RDAP para la zona .com.",
    )
    lookup_timeout_seconds: float = Field(
        default=15.0,
        gt=0,
        description="Tiempo máximo por consulta de disponibilidad antes de darla por no disponible.",
    )

    max_results: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Dominios disponibles a encontrar antes de cortar el stream.",
    )
    max_concurrency: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Consultas de disponibilidad simultáneas por request.",
    )

    log_level: str = Field(
        default="INFO",
        min_length=1,
        description="Nivel de logging (DEBUG, INFO, WARNING...).",
    )
    host: str = Field(default="127.0.0.1", min_length=1)
    port: int = Field(default=8000, ge=1, le=65535)
