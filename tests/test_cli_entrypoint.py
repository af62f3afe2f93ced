from __future__ import annotations

import pytest

from autocomplete_telemetry.models import DismissReason, FilterReason, TelemetryEventName


def test_events_lists_every_event_and_reason() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from autocomplete_telemetry.main import app

    result = typer_testing.CliRunner().invoke(app, ["events"], catch_exceptions=False)

    assert result.exit_code == 0
    for event in TelemetryEventName:
        assert event.value in result.stdout
    for reason in list(FilterReason) + list(DismissReason):
        assert reason.value in result.stdout


def test_start_reports_telemetry_switch_and_events_path(monkeypatch) -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from autocomplete_telemetry import main

    monkeypatch.setattr(main.settings, "telemetry_enabled", False)
    monkeypatch.setattr(main.settings, "events_path", "events.jsonl")
    result = typer_testing.CliRunner().invoke(main.app, ["start"], catch_exceptions=False)

    assert result.exit_code == 0
    assert "'telemetry_enabled': False" in result.stdout
    assert "'events_path': 'events.jsonl'" in result.stdout


def test_log_level_option_is_accepted_before_a_command() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from autocomplete_telemetry.main import app

    result = typer_testing.CliRunner().invoke(app, ["--log-level", "debug", "events"], catch_exceptions=False)

    assert result.exit_code == 0
    assert TelemetryEventName.CHAT_AUTOCOMPLETE_SUGGESTION_ACCEPTED.value in result.stdout


def test_simulate_help_points_at_debug_diagnostics() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from autocomplete_telemetry.main import app

    result = typer_testing.CliRunner().invoke(app, ["simulate", "--help"], catch_exceptions=False)

    assert result.exit_code == 0
    assert "DEBUG" in result.stdout
