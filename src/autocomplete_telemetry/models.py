"""Event identifiers and payload shapes for autocomplete telemetry."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class TelemetryEventName(str, Enum):
    """Event kinds emitted by the chat autocomplete feature."""

    CHAT_AUTOCOMPLETE_SUGGESTION_REQUESTED = "Chat Autocomplete Suggestion Requested"
    CHAT_AUTOCOMPLETE_LLM_REQUEST_COMPLETED = "Chat Autocomplete LLM Request Completed"
    CHAT_AUTOCOMPLETE_LLM_REQUEST_FAILED = "Chat Autocomplete LLM Request Failed"
    CHAT_AUTOCOMPLETE_SUGGESTION_RETURNED = "Chat Autocomplete Suggestion Returned"
    CHAT_AUTOCOMPLETE_SUGGESTION_FILTERED = "Chat Autocomplete Suggestion Filtered"
    CHAT_AUTOCOMPLETE_SUGGESTION_ACCEPTED = "Chat Autocomplete Suggestion Accepted"
    CHAT_AUTOCOMPLETE_SUGGESTION_DISMISSED = "Chat Autocomplete Suggestion Dismissed"


def event_value(event: str) -> str:
    """Plain string form of an event kind, whether or not it is an enum member."""
    if isinstance(event, Enum):
        return str(event.value)
    return str(event)


class FilterReason(str, Enum):
    """Why post-processing discarded a suggestion."""

    EMPTY_RESPONSE = "empty_response"
    UNWANTED_PATTERN = "unwanted_pattern"
    TOO_SHORT = "too_short"
    MODEL_NOT_LOADED = "model_not_loaded"
    NO_CREDENTIALS = "no_credentials"


class DismissReason(str, Enum):
    """How the user got rid of a visible suggestion."""

    ESCAPE = "escape"
    CONTINUED_TYPING = "continued_typing"
    CLICKED_AWAY = "clicked_away"
    TIMEOUT = "timeout"


@dataclass(frozen=True, slots=True)
class AutocompleteContext:
    """Per-request facts shared by every event of one completion attempt."""

    model_id: str | None
    provider: str | None
    used_fim: bool
    has_visible_code_context: bool
    has_clipboard_context: bool

    def model_fields(self) -> dict[str, Any]:
        # None values stay in the mapping.
        return {
            "modelId": self.model_id,
            "provider": self.provider,
            "usedFim": self.used_fim,
        }

    def request_fields(self) -> dict[str, Any]:
        fields = self.model_fields()
        fields["hasVisibleCodeContext"] = self.has_visible_code_context
        fields["hasClipboardContext"] = self.has_clipboard_context
        return fields


@dataclass(frozen=True, slots=True)
class LlmRequestMetrics:
    """Outcome metrics of a successful model request."""

    latency_ms: float
    input_tokens: int | None = None
    output_tokens: int | None = None

    def to_properties(self) -> dict[str, Any]:
        """Return wire fields, leaving out token counts that were never reported."""
        properties: dict[str, Any] = {"latencyMs": self.latency_ms}
        if self.input_tokens is not None:
            properties["inputTokens"] = self.input_tokens
        if self.output_tokens is not None:
            properties["outputTokens"] = self.output_tokens
        return properties


@dataclass(frozen=True, slots=True)
class LlmRequestFailure:
    """Outcome of a model request that raised or returned an error."""

    latency_ms: float
    error: str

    def to_properties(self) -> dict[str, Any]:
        return {"latencyMs": self.latency_ms, "error": self.error}


RequestProperties = LlmRequestMetrics | LlmRequestFailure | Mapping[str, Any]


def request_properties(properties: RequestProperties) -> dict[str, Any]:
    """Copy request properties into a fresh mapping.

    Mappings are copied key by key, so a key the caller left out stays absent.
    """
    if isinstance(properties, (LlmRequestMetrics, LlmRequestFailure)):
        return properties.to_properties()
    return dict(properties)
