"""Fake collaborators shared by the tests."""

from __future__ import annotations

import asyncio
from types import SimpleNamespace
from typing import Iterable

import httpx

from core.domain.models import DomainCheck


class FakeChecker:
    """In-memory lookup provider that records calls and concurrency."""

    def __init__(
        self,
        available: Iterable[str] = (),
        *,
        fail: Iterable[str] = (),
        hang: Iterable[str] = (),
        delays: dict[str, float] | None = None,
        default_delay: float = 0.0,
    ) -> None:
        self.available = set(available)
        self.fail = set(fail)
        self.hang = set(hang)
        self.delays = delays or {}
        self.default_delay = default_delay
        self.calls: list[str] = []
        self.completed: list[str] = []
        self.in_flight = 0
        self.peak = 0

    async def check(self, domain: str) -> DomainCheck:
        self.calls.append(domain)
        self.in_flight += 1
        self.peak = max(self.peak, self.in_flight)
        try:
            if domain in self.hang:
                await asyncio.Event().wait()
            await asyncio.sleep(self.delays.get(domain, self.default_delay))
            if domain in self.fail:
                raise httpx.ConnectError("connection refused")
            self.completed.append(domain)
            return DomainCheck(domain=domain, available=domain in self.available, source="fake")
        finally:
            self.in_flight -= 1


class FakeSuggester:
    def __init__(self, text: str) -> None:
        self.text = text
        self.calls: list[tuple[str, str]] = []

    async def suggest(self, *, keywords: str, description: str) -> str:
        self.calls.append((keywords, description))
        return self.text


class FakeCompletions:
    def __init__(self, content: str | None = None, *, error: Exception | None = None, choices: bool = True) -> None:
        self.content = content
        self.error = error
        self.choices = choices
        self.kwargs: dict = {}

    async def create(self, **kwargs):
        self.kwargs = kwargs
        if self.error is not None:
            raise self.error
        if not self.choices:
            return SimpleNamespace(choices=[])
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_ai_client(completions: FakeCompletions) -> SimpleNamespace:
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


async def collect(agen) -> list:
    return [item async for item in agen]
