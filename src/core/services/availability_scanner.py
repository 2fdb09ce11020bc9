"""Bounded availability scanning.

The scanner takes the ordered candidate list, keeps at most
`concurrency_limit` lookups in flight and yields every name the lookup
provider confirms as available, as soon as it is confirmed. It stops launching
lookups once `max_results` names have been yielded.

Concurrency model:
- Lookups run as asyncio tasks; launch and completion handling happen in one
  coordination loop, so `ScanSession` counters need no lock.
- The loop waits for *one* completion (`FIRST_COMPLETED`) and refills the
  window before waiting again: an eager pipeline, not fixed-size waves.
- Output order is confirmation order, not input order.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import AsyncIterator, Iterable

from core.domain.models import DomainCheck
from core.interfaces.checker import AvailabilityChecker

logger = logging.getLogger(__name__)

NO_RESULTS_MESSAGE = "⚠️ No available domains found this time. Please try again."


@dataclass
class ScanSession:
    """Transient state of one scan (one request)."""

    max_results: int
    concurrency_limit: int
    checked: int = 0
    found: int = 0
    peak_in_flight: int = 0
    in_flight: set[asyncio.Task[bool]] = field(default_factory=set)

    @property
    def capped(self) -> bool:
        return self.found >= self.max_results


async def check_availability(
    checker: AvailabilityChecker,
    domain: str,
    *,
    timeout: float | None = None,
) -> bool:
    """Ask `checker` about `domain`; any failure counts as unavailable."""

    try:
        if timeout is None:
            result = await checker.check(domain)
        else:
            result = await asyncio.wait_for(checker.check(domain), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning("Lookup timed out after %.1fs: %s", timeout, domain)
        return False
    except Exception as exc:
        logger.warning("Lookup failed for %s: %s", domain, exc)
        return False

    logger.debug("Lookup %s -> %s", domain, "available" if result.available else "taken")
    return bool(result.available)


async def _drain(tasks: set[asyncio.Task[bool]]) -> bool:
    """Wait until `tasks` are done, even if the caller is cancelled meanwhile.

    A client disconnect reaches the generator as cancellation, and Starlette's
    cancel scope re-delivers it on every await. The lookups are shielded and
    awaited again until they finish. Returns whether a cancellation was
    absorbed, so the caller can re-raise it.
    """

    pending = asyncio.gather(*tasks, return_exceptions=True)
    cancelled = False
    while not pending.done():
        try:
            await asyncio.shield(pending)
        except asyncio.CancelledError:
            cancelled = True
    return cancelled


async def scan(
    candidates: Iterable[str],
    *,
    checker: AvailabilityChecker,
    max_results: int,
    concurrency_limit: int,
    lookup_timeout: float | None = None,
    session: ScanSession | None = None,
) -> AsyncIterator[str]:
    """Yield confirmed-available candidates, then end.

    Yields `NO_RESULTS_MESSAGE` once, and nothing else, when no candidate was
    confirmed (including an empty candidate list).
    """

    if max_results < 1:
        raise ValueError("max_results must be > 0")
    if concurrency_limit < 1:
        raise ValueError("concurrency_limit must be > 0")

    session = session or ScanSession(max_results=max_results, concurrency_limit=concurrency_limit)
    pending = iter(candidates)
    exhausted = False
    names: dict[asyncio.Task[bool], str] = {}

    def refill() -> None:
        nonlocal exhausted
        while not exhausted and not session.capped and len(session.in_flight) < concurrency_limit:
            domain = next(pending, None)
            if domain is None:
                exhausted = True
                return
            task = asyncio.ensure_future(check_availability(checker, domain, timeout=lookup_timeout))
            names[task] = domain
            session.in_flight.add(task)
            session.peak_in_flight = max(session.peak_in_flight, len(session.in_flight))

    try:
        refill()
        while session.in_flight:
            done, _ = await asyncio.wait(session.in_flight, return_when=asyncio.FIRST_COMPLETED)
            for task in done:
                session.in_flight.discard(task)
                domain = names.pop(task)
                session.checked += 1
                # check_availability never raises, so result() is safe here.
                if task.result() and not session.capped:
                    session.found += 1
                    yield domain
            refill()
    finally:
        cancelled = False
        if session.in_flight:
            # Early stop by the consumer: let lookups finish, drop their results.
            cancelled = await _drain(session.in_flight)
            session.in_flight.clear()
        logger.info(
            "Scan finished: checked=%d found=%d peak_in_flight=%d",
            session.checked,
            session.found,
            session.peak_in_flight,
        )
        if cancelled:
            raise asyncio.CancelledError

    if session.found == 0:
        yield NO_RESULTS_MESSAGE


async def stream_lines(
    candidates: Iterable[str],
    *,
    checker: AvailabilityChecker,
    max_results: int,
    concurrency_limit: int,
    lookup_timeout: float | None = None,
    session: ScanSession | None = None,
) -> AsyncIterator[str]:
    """Line protocol of the HTTP response: one `<value>\\n` per emitted value."""

    async for value in scan(
        candidates,
        checker=checker,
        max_results=max_results,
        concurrency_limit=concurrency_limit,
        lookup_timeout=lookup_timeout,
        session=session,
    ):
        yield f"{value}\n"


async def check_many(
    domains: Iterable[str],
    *,
    checker: AvailabilityChecker,
    concurrency_limit: int,
) -> list[DomainCheck]:
    """Full `DomainCheck` for each domain, bounded by a semaphore.

    Unlike `scan`, failures are kept as unavailable results with the error in
    `metadata`, so the CLI can show why a name was rejected.
    """

    sem = asyncio.Semaphore(max(1, concurrency_limit))

    async def check_one(domain: str) -> DomainCheck:
        async with sem:
            try:
                return await checker.check(domain)
            except Exception as exc:
                return DomainCheck(
                    domain=domain,
                    available=False,
                    source=checker.__class__.__name__.removesuffix("Checker").lower(),
                    metadata={"error": str(exc)},
                )

    return list(await asyncio.gather(*(check_one(d) for d in domains)))
