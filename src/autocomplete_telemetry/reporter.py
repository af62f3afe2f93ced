"""Reporter that turns chat autocomplete lifecycle events into telemetry."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from autocomplete_telemetry.config import settings
from autocomplete_telemetry.models import (
    AutocompleteContext,
    DismissReason,
    FilterReason,
    RequestProperties,
    TelemetryEventName,
    event_value,
    request_properties,
)
from autocomplete_telemetry.telemetry.sink import TelemetrySink

SinkProvider = Callable[[], "TelemetrySink | None"]


class AutocompleteTelemetryReporter:
    """Forwards autocomplete events to a telemetry sink when one is available.

    Events raised inside an active completion attempt (requested, LLM
    completed/failed, returned, filtered) carry the model, provider and FIM
    fields of the context. Accepted and dismissed happen after the suggestion
    is final and carry only their own fields.

    A missing sink is a normal state (telemetry opted out or not yet
    initialized): captures are dropped without error. Errors raised by the
    sink itself propagate to the caller.
    """

    def __init__(
        self,
        sink: TelemetrySink | None = None,
        *,
        sink_provider: SinkProvider | None = None,
        feature_label: str | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._sink = sink
        self._sink_provider = sink_provider
        self._feature_label = feature_label or settings.feature_label
        self._logger = logger or logging.getLogger("autocomplete_telemetry.reporter")

    def _current_sink(self) -> TelemetrySink | None:
        if self._sink_provider is not None:
            return self._sink_provider()
        return self._sink

    def _capture_event(self, event: TelemetryEventName, properties: dict[str, Any] | None = None) -> None:
        sink = self._current_sink()
        if sink is None:
            return

        name = event_value(event)
        if properties is not None:
            sink.capture_event(event, properties)
            self._logger.debug(
                "%s Telemetry event: %s %s",
                self._feature_label,
                name,
                properties,
                extra={"telemetry_event": name, "telemetry_properties": properties},
            )
        else:
            sink.capture_event(event)
            self._logger.debug(
                "%s Telemetry event: %s",
                self._feature_label,
                name,
                extra={"telemetry_event": name},
            )

    def capture_suggestion_requested(self, context: AutocompleteContext, user_text_length: int) -> None:
        """Capture that the user paused typing and a completion was requested."""
        properties = context.request_fields()
        properties["userTextLength"] = user_text_length
        self._capture_event(TelemetryEventName.CHAT_AUTOCOMPLETE_SUGGESTION_REQUESTED, properties)

    def capture_llm_request_completed(self, properties: RequestProperties, context: AutocompleteContext) -> None:
        """Capture a successful model request with its latency and token counts."""
        merged = request_properties(properties)
        merged.update(context.model_fields())
        self._capture_event(TelemetryEventName.CHAT_AUTOCOMPLETE_LLM_REQUEST_COMPLETED, merged)

    def capture_llm_request_failed(self, properties: RequestProperties, context: AutocompleteContext) -> None:
        """Capture a failed model request with its latency and error message."""
        merged = request_properties(properties)
        merged.update(context.model_fields())
        self._capture_event(TelemetryEventName.CHAT_AUTOCOMPLETE_LLM_REQUEST_FAILED, merged)

    def capture_suggestion_returned(self, context: AutocompleteContext, suggestion_length: int) -> None:
        """Capture a suggestion that passed every filter and was shown."""
        properties = context.model_fields()
        properties["suggestionLength"] = suggestion_length
        self._capture_event(TelemetryEventName.CHAT_AUTOCOMPLETE_SUGGESTION_RETURNED, properties)

    def capture_suggestion_filtered(self, reason: FilterReason | str, context: AutocompleteContext) -> None:
        """Capture a suggestion discarded by post-processing.

        Raises ``ValueError`` for a reason outside :class:`FilterReason`.
        """
        properties: dict[str, Any] = {"reason": FilterReason(reason).value}
        properties.update(context.model_fields())
        self._capture_event(TelemetryEventName.CHAT_AUTOCOMPLETE_SUGGESTION_FILTERED, properties)

    def capture_suggestion_accepted(self, suggestion_length: int) -> None:
        self._capture_event(
            TelemetryEventName.CHAT_AUTOCOMPLETE_SUGGESTION_ACCEPTED,
            {"suggestionLength": suggestion_length},
        )

    def capture_suggestion_dismissed(self, dismiss_reason: DismissReason | str) -> None:
        self._capture_event(
            TelemetryEventName.CHAT_AUTOCOMPLETE_SUGGESTION_DISMISSED,
            {"dismissReason": DismissReason(dismiss_reason).value},
        )
