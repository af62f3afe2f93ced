from __future__ import annotations

import dataclasses

import pytest

from autocomplete_telemetry.models import (
    AutocompleteContext,
    DismissReason,
    FilterReason,
    LlmRequestFailure,
    LlmRequestMetrics,
    TelemetryEventName,
    event_value,
    request_properties,
)


def test_context_is_read_only() -> None:
    context = AutocompleteContext(
        model_id="m",
        provider="p",
        used_fim=False,
        has_visible_code_context=False,
        has_clipboard_context=False,
    )

    with pytest.raises(dataclasses.FrozenInstanceError):
        context.model_id = "other"  # type: ignore[misc]


def test_context_field_groups() -> None:
    context = AutocompleteContext(
        model_id="m",
        provider=None,
        used_fim=True,
        has_visible_code_context=False,
        has_clipboard_context=True,
    )

    assert context.model_fields() == {"modelId": "m", "provider": None, "usedFim": True}
    assert context.request_fields() == {
        "modelId": "m",
        "provider": None,
        "usedFim": True,
        "hasVisibleCodeContext": False,
        "hasClipboardContext": True,
    }


def test_metrics_keep_only_reported_token_counts() -> None:
    assert LlmRequestMetrics(latency_ms=12.5).to_properties() == {"latencyMs": 12.5}
    assert LlmRequestMetrics(latency_ms=1, output_tokens=0).to_properties() == {"latencyMs": 1, "outputTokens": 0}


def test_request_properties_copies_mappings() -> None:
    original = {"latencyMs": 3, "error": "x"}
    copied = request_properties(original)

    copied["extra"] = True
    assert original == {"latencyMs": 3, "error": "x"}
    assert request_properties(LlmRequestFailure(latency_ms=3, error="x")) == original


def test_reason_enums_are_closed() -> None:
    assert {reason.value for reason in FilterReason} == {
        "empty_response",
        "unwanted_pattern",
        "too_short",
        "model_not_loaded",
        "no_credentials",
    }
    assert {reason.value for reason in DismissReason} == {"escape", "continued_typing", "clicked_away", "timeout"}
    with pytest.raises(ValueError):
        FilterReason("unknown")


def test_event_names_are_unique() -> None:
    values = [event.value for event in TelemetryEventName]

    assert len(values) == 7
    assert len(set(values)) == len(values)


def test_event_value_unwraps_enum_members() -> None:
    filtered = TelemetryEventName.CHAT_AUTOCOMPLETE_SUGGESTION_FILTERED

    assert event_value(filtered) == "Chat Autocomplete Suggestion Filtered"
    assert event_value("custom event") == "custom event"
