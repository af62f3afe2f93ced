"""Holder for the telemetry sink that is currently initialized, if any."""

from __future__ import annotations

import logging

from .sink import TelemetrySink


class TelemetryServiceNotInitializedError(RuntimeError):
    """Raised when the active sink is requested before one is registered."""


class TelemetryService:
    """Tracks whether telemetry is initialized and hands out the active sink.

    Reporters take ``service.current`` as their sink provider, so registering
    or tearing down a sink changes what later captures reach without touching
    the reporters themselves.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._sink: TelemetrySink | None = None
        self._logger = logger or logging.getLogger("autocomplete_telemetry.telemetry.service")

    def register(self, sink: TelemetrySink) -> None:
        self._sink = sink
        self._logger.info("telemetry_sink_registered", extra={"sink": type(sink).__name__})

    def unregister(self) -> TelemetrySink | None:
        sink, self._sink = self._sink, None
        if sink is not None:
            self._logger.info("telemetry_sink_unregistered", extra={"sink": type(sink).__name__})
        return sink

    def has_instance(self) -> bool:
        return self._sink is not None

    def current(self) -> TelemetrySink | None:
        return self._sink

    @property
    def instance(self) -> TelemetrySink:
        if self._sink is None:
            raise TelemetryServiceNotInitializedError("No telemetry sink has been registered")
        return self._sink
