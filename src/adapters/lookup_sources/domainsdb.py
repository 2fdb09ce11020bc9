"""Proveedor de disponibilidad: domainsdb.info.

Implementación:
- `GET <base>?zone=com&domain=<dominio>`.
- Lista `domains` no vacía => registrado (no disponible).
- Lista vacía o ausente => disponible.

Notas:
- Cualquier status no-2xx o JSON malformado => no disponible (fail-closed).
  Preferimos perder un nombre libre antes que ofrecer uno ocupado.
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import DomainCheck
from core.interfaces.checker import AvailabilityChecker


class DomainsDBChecker(AvailabilityChecker):
    """Consulta la existencia exacta de un dominio en domainsdb.info."""

    source = "domainsdb"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    async def _get(self, params: dict[str, str]) -> httpx.Response:
        url = self._settings.domainsdb_base_url
        if self._client is not None:
            return await self._client.get(url, params=params)
        async with build_async_client(self._settings) as client:
            return await client.get(url, params=params)

    async def check(self, domain: str) -> DomainCheck:
        response = await self._get({"zone": self._settings.domainsdb_zone, "domain": domain})

        metadata: dict[str, Any] = {
            "status_code": response.status_code,
            "final_url": str(response.url),
        }
        if not response.is_success:
            metadata["error"] = f"domainsdb_http_{response.status_code}"
            return DomainCheck(domain=domain, available=False, source=self.source, metadata=metadata)

        try:
            payload = response.json()
        except ValueError:
            metadata["error"] = "domainsdb_invalid_json"
            return DomainCheck(domain=domain, available=False, source=self.source, metadata=metadata)

        if not isinstance(payload, dict):
            metadata["error"] = "domainsdb_unexpected_payload"
            return DomainCheck(domain=domain, available=False, source=self.source, metadata=metadata)

        matches = payload.get("domains") or []
        if not isinstance(matches, list):
            metadata["error"] = "domainsdb_unexpected_payload"
            return DomainCheck(domain=domain, available=False, source=self.source, metadata=metadata)

        metadata["match_count"] = len(matches)
        return DomainCheck(
            domain=domain,
            available=not matches,
            source=self.source,
            metadata=metadata,
        )
