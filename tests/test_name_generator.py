from __future__ import annotations

import asyncio

import httpx
from openai import APIConnectionError

from adapters.name_generator import OpenAINameSuggester, build_prompt
from core.config import AppSettings
from fakes import FakeCompletions, fake_ai_client


def suggest(suggester: OpenAINameSuggester) -> str:
    return asyncio.run(suggester.suggest(keywords="coffee", description="monthly beans"))


def test_prompt_embeds_inputs_and_rules() -> None:
    prompt = build_prompt(keywords="coffee, beans", description="A subscription box", count=42)

    assert "Generate 42 short, brandable .com domain names" in prompt
    assert "Keywords: coffee, beans" in prompt
    assert "Description: A subscription box" in prompt
    assert "Max 2 words" in prompt
    assert "Avoid dashes or numbers" in prompt
    assert "one per line" in prompt
    assert 'Each domain must end in ".com"' in prompt


def test_returns_model_text_and_sends_settings(settings: AppSettings) -> None:
    completions = FakeCompletions("  1. brewbox.com\n2. beanloop.com  ")
    suggester = OpenAINameSuggester(settings, client=fake_ai_client(completions))

    assert suggest(suggester) == "1. brewbox.com\n2. beanloop.com"
    assert completions.kwargs["model"] == settings.ai_model
    assert completions.kwargs["temperature"] == settings.ai_temperature
    assert completions.kwargs["messages"][0]["role"] == "user"
    assert "Keywords: coffee" in completions.kwargs["messages"][0]["content"]


def test_missing_api_key_degrades_to_empty_text() -> None:
    settings = AppSettings(_env_file=None, ai_api_key=None)

    assert suggest(OpenAINameSuggester(settings)) == ""


def test_local_provider_does_not_need_a_key() -> None:
    settings = AppSettings(_env_file=None, ai_api_key=None, ai_base_url="http://localhost:11434/v1")
    suggester = OpenAINameSuggester(settings)

    assert suggester._resolve_client() is not None


def test_provider_errors_degrade_to_empty_text(settings: AppSettings) -> None:
    error = APIConnectionError(request=httpx.Request("POST", "https://api.groq.com/openai/v1/chat/completions"))
    suggester = OpenAINameSuggester(settings, client=fake_ai_client(FakeCompletions(error=error)))

    assert suggest(suggester) == ""


def test_empty_choices_or_content_degrade_to_empty_text(settings: AppSettings) -> None:
    no_choices = OpenAINameSuggester(settings, client=fake_ai_client(FakeCompletions(choices=False)))
    no_content = OpenAINameSuggester(settings, client=fake_ai_client(FakeCompletions(None)))

    assert suggest(no_choices) == ""
    assert suggest(no_content) == ""
