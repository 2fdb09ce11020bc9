"""Proveedor de disponibilidad: RDAP (registro .com de Verisign por defecto).

Implementación:
- `GET <rdap_base_url>/domain/<dominio>`.
- 404 => no existe registro (disponible).
- 200 => registrado.
- Otro status (429, 5xx...) => no disponible (fail-closed).
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import DomainCheck
from core.interfaces.checker import AvailabilityChecker


def rdap_domain_url(base: str, domain: str) -> str:
    base = base.rstrip("/")
    if base.endswith("/domain"):
        return f"{base}/{domain}"
    return f"{base}/domain/{domain}"


class RDAPChecker(AvailabilityChecker):
    source = "rdap"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    async def check(self, domain: str) -> DomainCheck:
        url = rdap_domain_url(self._settings.rdap_base_url, domain.lower())

        if self._client is not None:
            response = await self._client.get(url)
        else:
            async with build_async_client(self._settings) as client:
                response = await client.get(url)

        metadata: dict[str, Any] = {
            "status_code": response.status_code,
            "final_url": str(response.url),
        }
        if response.status_code == 404:
            return DomainCheck(domain=domain, available=True, source=self.source, metadata=metadata)
        if response.status_code != 200:
            metadata["error"] = f"rdap_http_{response.status_code}"
        return DomainCheck(domain=domain, available=False, source=self.source, metadata=metadata)
