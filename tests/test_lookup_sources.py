from __future__ import annotations

import asyncio

import httpx
import pytest

from adapters.http_client import build_async_client
from adapters.lookup_sources import DomainsDBChecker, RDAPChecker
from adapters.lookup_sources.rdap import rdap_domain_url
from core.config import AppSettings, LookupProvider
from core.services.suggestion_pipeline import build_checker


def run_check(checker_cls, settings: AppSettings, handler, domain: str = "brewbox.com"):
    async def _run():
        async with build_async_client(settings, transport=httpx.MockTransport(handler)) as client:
            return await checker_cls(settings, client=client).check(domain)

    return asyncio.run(_run())


def test_domainsdb_request_carries_zone_and_domain(settings: AppSettings) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"domains": []})

    run_check(DomainsDBChecker, settings, handler)

    assert seen[0].url.host == "api.domainsdb.info"
    assert seen[0].url.params["zone"] == "com"
    assert seen[0].url.params["domain"] == "brewbox.com"
    assert seen[0].headers["user-agent"] == settings.user_agent


def test_domainsdb_matches_mean_taken(settings: AppSettings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"domains": [{"domain": "brewbox.com"}], "total": 1})

    result = run_check(DomainsDBChecker, settings, handler)

    assert result.available is False
    assert result.source == "domainsdb"
    assert result.metadata["match_count"] == 1


@pytest.mark.parametrize("payload", [{"domains": []}, {"total": 0}, {"domains": None}])
def test_domainsdb_no_matches_mean_available(settings: AppSettings, payload: dict) -> None:
    result = run_check(DomainsDBChecker, settings, lambda request: httpx.Response(200, json=payload))

    assert result.available is True
    assert result.metadata["match_count"] == 0


@pytest.mark.parametrize(
    ("response", "error"),
    [
        (httpx.Response(404, json={"message": "Domains not found"}), "domainsdb_http_404"),
        (httpx.Response(503, text="busy"), "domainsdb_http_503"),
        (httpx.Response(200, text="<html>oops</html>"), "domainsdb_invalid_json"),
        (httpx.Response(200, json=["brewbox.com"]), "domainsdb_unexpected_payload"),
        (httpx.Response(200, json={"domains": "brewbox.com"}), "domainsdb_unexpected_payload"),
    ],
)
def test_domainsdb_failures_are_unavailable(settings: AppSettings, response: httpx.Response, error: str) -> None:
    result = run_check(DomainsDBChecker, settings, lambda request: response)

    assert result.available is False
    assert result.metadata["error"] == error


def test_domainsdb_transport_errors_propagate(settings: AppSettings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("no route", request=request)

    with pytest.raises(httpx.ConnectError):
        run_check(DomainsDBChecker, settings, handler)


def test_rdap_404_means_available(settings: AppSettings) -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(404)

    result = run_check(RDAPChecker, settings, handler, domain="BrewBox.com")

    assert result.available is True
    assert result.domain == "BrewBox.com"
    assert seen == ["https://rdap.verisign.com/com/v1/domain/brewbox.com"]


def test_rdap_200_means_registered(settings: AppSettings) -> None:
    result = run_check(RDAPChecker, settings, lambda request: httpx.Response(200, json={"ldhName": "BREWBOX.COM"}))

    assert result.available is False
    assert "error" not in result.metadata


def test_rdap_other_status_is_fail_closed(settings: AppSettings) -> None:
    result = run_check(RDAPChecker, settings, lambda request: httpx.Response(429))

    assert result.available is False
    assert result.metadata["error"] == "rdap_http_429"


@pytest.mark.parametrize(
    ("base", "expected"),
    [
        ("https://rdap.example/v1", "https://rdap.example/v1/domain/a.com"),
        ("https://rdap.example/v1/", "https://rdap.example/v1/domain/a.com"),
        ("https://rdap.example/v1/domain/", "https://rdap.example/v1/domain/a.com"),
    ],
)
def test_rdap_domain_url(base: str, expected: str) -> None:
    assert rdap_domain_url(base, "a.com") == expected


def test_build_checker_follows_settings(settings: AppSettings) -> None:
    assert isinstance(build_checker(settings), DomainsDBChecker)
    rdap_settings = settings.model_copy(update={"lookup_provider": LookupProvider.RDAP})
    assert isinstance(build_checker(rdap_settings), RDAPChecker)
