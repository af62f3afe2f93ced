"""Telemetry reporting for the chat-autocomplete feature."""

from .models import (
    AutocompleteContext,
    DismissReason,
    FilterReason,
    LlmRequestFailure,
    LlmRequestMetrics,
    TelemetryEventName,
)
from .reporter import AutocompleteTelemetryReporter

__all__ = [
    "AutocompleteContext",
    "AutocompleteTelemetryReporter",
    "DismissReason",
    "FilterReason",
    "LlmRequestFailure",
    "LlmRequestMetrics",
    "TelemetryEventName",
]
