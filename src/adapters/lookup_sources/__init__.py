"""Proveedores de disponibilidad (checkers concretos).

Cada módulo implementa `core.interfaces.checker.AvailabilityChecker`.
"""

from adapters.lookup_sources.domainsdb import DomainsDBChecker
from adapters.lookup_sources.rdap import RDAPChecker

__all__ = [
	"DomainsDBChecker",
	"RDAPChecker",
]
