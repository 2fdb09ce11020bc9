from __future__ import annotations

import pytest
from fastapi import FastAPI
from typer.testing import CliRunner

import cli.main as cli_main
from core.services.availability_scanner import NO_RESULTS_MESSAGE
from fakes import FakeChecker, FakeSuggester

runner = CliRunner()


@pytest.fixture
def fakes(monkeypatch: pytest.MonkeyPatch) -> FakeChecker:
    checker = FakeChecker(available={"brewbox.com"}, fail={"broken.com"})
    monkeypatch.setattr(cli_main, "build_checker", lambda settings, client=None: checker)
    monkeypatch.setattr(
        cli_main,
        "build_suggester",
        lambda settings: FakeSuggester("1. brewbox.com\n2. taken.com\n"),
    )
    return checker


def test_suggest_prints_available_names(fakes: FakeChecker) -> None:
    result = runner.invoke(cli_main.app, ["suggest", "coffee", "-d", "beans", "-n", "3", "-c", "2"])

    assert result.exit_code == 0, result.output
    assert "brewbox.com" in result.output
    assert "checked=2 found=1" in result.output
    assert sorted(fakes.calls) == ["brewbox.com", "taken.com"]


def test_suggest_reports_no_results(monkeypatch: pytest.MonkeyPatch, fakes: FakeChecker) -> None:
    monkeypatch.setattr(cli_main, "build_suggester", lambda settings: FakeSuggester("nothing useful"))

    result = runner.invoke(cli_main.app, ["suggest", "coffee"])

    assert result.exit_code == 0, result.output
    assert "No available domains found" in result.output
    assert NO_RESULTS_MESSAGE.startswith("⚠️")


def test_check_shows_one_row_per_domain(fakes: FakeChecker) -> None:
    result = runner.invoke(cli_main.app, ["check", "brewbox.com", "taken.com", "broken.com"])

    assert result.exit_code == 0, result.output
    for domain in ("brewbox.com", "taken.com", "broken.com"):
        assert domain in result.output
    assert "connection refused" in result.output


def record_uvicorn_run(monkeypatch: pytest.MonkeyPatch) -> dict:
    seen: dict = {}

    def fake_run(target, **kwargs) -> None:
        seen["target"] = target
        seen.update(kwargs)

    monkeypatch.setattr(cli_main.uvicorn, "run", fake_run)
    return seen


def test_serve_runs_the_app_object(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = record_uvicorn_run(monkeypatch)

    result = runner.invoke(cli_main.app, ["serve", "--host", "0.0.0.0", "--port", "9000"])

    assert result.exit_code == 0, result.output
    assert isinstance(seen["target"], FastAPI)
    assert seen["reload"] is False
    assert seen["factory"] is False
    assert (seen["host"], seen["port"]) == ("0.0.0.0", 9000)


def test_serve_reload_uses_the_app_factory(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = record_uvicorn_run(monkeypatch)

    result = runner.invoke(cli_main.app, ["serve", "--reload"])

    assert result.exit_code == 0, result.output
    assert seen["target"] == "web.app:create_app"
    assert seen["reload"] is True
    assert seen["factory"] is True
