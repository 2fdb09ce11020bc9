"""Contratos de proveedores de disponibilidad.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que adaptadores (domainsdb, RDAP, fakes de tests) sean
  intercambiables sin acoplar el Core a implementaciones concretas.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import DomainCheck


@runtime_checkable
class AvailabilityChecker(Protocol):
    """Contrato mínimo para un proveedor de disponibilidad.

    Reglas de diseño:
    - `check` es asíncrono porque típicamente hará I/O (HTTP).
    - Devuelve un único `DomainCheck` por dominio; puede lanzar excepciones,
      el scanner las traduce a "no disponible".
    """

    async def check(self, domain: str) -> DomainCheck:
        """Consulta el proveedor para `domain` y devuelve el resultado normalizado."""

        ...
