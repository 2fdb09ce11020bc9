"""Adaptador para sugerencias IA (proveedor compatible OpenAI, Groq por defecto).

Responsabilidad:
- Construir el prompt a partir de keywords + descripción.
- Llamar al proveedor IA (SDK OpenAI) una sola vez, sin reintentos.
- Devolver el texto crudo; el parseo lo hace `core.services.candidate_extractor`.

Degradación:
- Sin API key, error del proveedor o respuesta vacía => "" (cero candidatos).
  El scanner entonces emite el mensaje de "sin resultados".
"""

from __future__ import annotations

import logging

from openai import APIError, AsyncOpenAI

from core.config import AppSettings

logger = logging.getLogger(__name__)


def build_ai_client(settings: AppSettings, *, api_key: str) -> AsyncOpenAI:
    return AsyncOpenAI(
        api_key=api_key,
        base_url=settings.ai_base_url,
        timeout=settings.ai_timeout_seconds,
        max_retries=0,
    )


def build_prompt(*, keywords: str, description: str, count: int = 100) -> str:
    return (
        f"Generate {count} short, brandable .com domain names based on the following:\n\n"
        f"Keywords: {keywords}\n"
        f"Description: {description}\n\n"
        "Guidelines:\n"
        "- Max 2 words\n"
        "- 6–15 characters (excluding .com)\n"
        "- Easy to pronounce\n"
        "- Avoid dashes or numbers\n"
        "- No existing trademarks\n"
        "- Likely to be unregistered\n"
        "Only return domain names, one per line. No extra explanation.\n"
        'Each domain must end in ".com"\n'
    )


def _is_local_base_url(url: str) -> bool:
    url_l = (url or "").strip().lower()
    return url_l.startswith("http://localhost") or url_l.startswith("http://127.0.0.1") or url_l.startswith(
        "http://0.0.0.0"
    )


class OpenAINameSuggester:
    """`NameSuggester` sobre `chat.completions` de un proveedor compatible OpenAI."""

    def __init__(self, settings: AppSettings | None = None, *, client: AsyncOpenAI | None = None) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    def _resolve_client(self) -> AsyncOpenAI | None:
        if self._client is not None:
            return self._client

        api_key = (self._settings.ai_api_key or "").strip()
        if not api_key:
            # Providers locales (Ollama, LM Studio) aceptan cualquier key.
            if not _is_local_base_url(self._settings.ai_base_url):
                return None
            api_key = "local"
        self._client = build_ai_client(self._settings, api_key=api_key)
        return self._client

    async def suggest(self, *, keywords: str, description: str) -> str:
        client = self._resolve_client()
        if client is None:
            logger.warning("No AI API key configured (NAMESCOUT_AI_API_KEY); returning no suggestions.")
            return ""

        prompt = build_prompt(
            keywords=keywords,
            description=description,
            count=self._settings.suggestion_count,
        )
        try:
            response = await client.chat.completions.create(
                model=self._settings.ai_model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self._settings.ai_temperature,
            )
        except APIError as exc:
            logger.warning("AI provider failed (%s): %s", type(exc).__name__, exc)
            return ""

        if not response.choices:
            logger.warning("AI provider returned no choices.")
            return ""
        return (response.choices[0].message.content or "").strip()
