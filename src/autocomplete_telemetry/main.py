"""CLI entrypoint for autocomplete telemetry."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

import typer
from rich import print

from autocomplete_telemetry.config import settings
from autocomplete_telemetry.models import (
    AutocompleteContext,
    DismissReason,
    FilterReason,
    LlmRequestFailure,
    LlmRequestMetrics,
    TelemetryEventName,
)
from autocomplete_telemetry.reporter import AutocompleteTelemetryReporter
from autocomplete_telemetry.telemetry import InMemoryTelemetrySink, JsonlTelemetrySink, TelemetryService

app = typer.Typer(help="Chat autocomplete telemetry tools")


class SimulatedOutcome(str, Enum):
    ACCEPTED = "accepted"
    DISMISSED = "dismissed"
    FILTERED = "filtered"
    FAILED = "failed"


@app.callback()
def main(
    log_level: str = typer.Option(
        None,
        help="Override AUTOCOMPLETE_TELEMETRY_LOG_LEVEL; per-event diagnostic lines are logged at DEBUG",
    ),
) -> None:
    logging.basicConfig(level=(log_level or settings.log_level).upper())


def _build_service(
    events_path: str | None,
) -> tuple[TelemetryService, InMemoryTelemetrySink | JsonlTelemetrySink | None]:
    service = TelemetryService()
    if not settings.telemetry_enabled:
        return service, None

    path = events_path or settings.events_path
    sink = JsonlTelemetrySink(Path(path)) if path else InMemoryTelemetrySink()
    service.register(sink)
    return service, sink


def _run_lifecycle(
    reporter: AutocompleteTelemetryReporter,
    context: AutocompleteContext,
    outcome: SimulatedOutcome,
    user_text: str,
    suggestion: str,
    latency_ms: float,
) -> int:
    """Drive one completion attempt through the reporter and return how many captures it made."""
    reporter.capture_suggestion_requested(context, len(user_text))
    if outcome is SimulatedOutcome.FAILED:
        failure = LlmRequestFailure(latency_ms=latency_ms, error="simulated failure")
        reporter.capture_llm_request_failed(failure, context)
        return 2

    metrics = LlmRequestMetrics(
        latency_ms=latency_ms,
        input_tokens=len(user_text.split()),
        output_tokens=len(suggestion.split()),
    )
    reporter.capture_llm_request_completed(metrics, context)
    if outcome is SimulatedOutcome.FILTERED:
        reporter.capture_suggestion_filtered(FilterReason.UNWANTED_PATTERN, context)
        return 3

    reporter.capture_suggestion_returned(context, len(suggestion))
    if outcome is SimulatedOutcome.ACCEPTED:
        reporter.capture_suggestion_accepted(len(suggestion))
    else:
        reporter.capture_suggestion_dismissed(DismissReason.ESCAPE)
    return 4


@app.command()
def start() -> None:
    """Show effective telemetry configuration."""
    print(
        {
            "app_name": settings.app_name,
            "feature_label": settings.feature_label,
            "telemetry_enabled": settings.telemetry_enabled,
            "events_path": settings.events_path,
            "log_level": settings.log_level,
        }
    )


@app.command()
def events() -> None:
    """List event kinds and accepted reason values."""
    print(
        {
            "events": [event.value for event in TelemetryEventName],
            "filter_reasons": [reason.value for reason in FilterReason],
            "dismiss_reasons": [reason.value for reason in DismissReason],
        }
    )


@app.command()
def simulate(
    model_id: str = typer.Option(None, help="Model id reported in the context"),
    provider: str = typer.Option(None, help="Provider reported in the context"),
    fim: bool = typer.Option(True, "--fim/--no-fim", help="Report fill-in-the-middle completion"),
    outcome: SimulatedOutcome = typer.Option(SimulatedOutcome.ACCEPTED, help="How the attempt ends"),
    user_text: str = typer.Option("def parse_config(", help="Text the user typed before pausing"),
    suggestion: str = typer.Option("path: str) -> dict:", help="Suggestion the model returns"),
    latency_ms: float = typer.Option(120.0, help="Reported model latency"),
    events_path: str = typer.Option(None, help="Append events to this JSONL file"),
) -> None:
    """Run one autocomplete lifecycle through the reporter.

    Each forwarded event is also logged at DEBUG; pass --log-level DEBUG to see those lines.
    """
    service, sink = _build_service(events_path)
    reporter = AutocompleteTelemetryReporter(sink_provider=service.current)
    context = AutocompleteContext(
        model_id=model_id,
        provider=provider,
        used_fim=fim,
        has_visible_code_context=True,
        has_clipboard_context=False,
    )

    captured = _run_lifecycle(reporter, context, outcome, user_text, suggestion, latency_ms)

    if sink is None:
        print({"telemetry_enabled": False, "events": []})
        return
    if isinstance(sink, JsonlTelemetrySink):
        written = reversed(sink.list_recent(limit=captured))
        print({"events_path": str(sink.path), "events": [event.name for event in written]})
        return
    print({"events": [{"event": event.name, "properties": event.properties} for event in sink.events]})


@app.command()
def recent(
    events_path: str = typer.Option(None, help="JSONL file written by a telemetry sink"),
    limit: int = typer.Option(20, help="How many of the newest events to show"),
) -> None:
    """Print the newest events from a JSONL telemetry file."""
    path = events_path or settings.events_path
    if not path:
        raise typer.BadParameter("Provide --events-path or set AUTOCOMPLETE_TELEMETRY_EVENTS_PATH")

    sink = JsonlTelemetrySink(Path(path))
    print(
        {
            "events": [
                {"event": event.name, "properties": event.properties, "captured_at": event.captured_at.isoformat()}
                for event in sink.list_recent(limit=limit)
            ]
        }
    )


if __name__ == "__main__":
    app()
