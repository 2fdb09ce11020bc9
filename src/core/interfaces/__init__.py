"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from core.interfaces.checker import AvailabilityChecker
from core.interfaces.suggester import NameSuggester

__all__ = ["AvailabilityChecker", "NameSuggester"]
