"""Telemetry sink contract, holder and implementations."""

from .service import TelemetryService, TelemetryServiceNotInitializedError
from .sink import TelemetrySink
from .sinks import CapturedEvent, InMemoryTelemetrySink, JsonlTelemetrySink

__all__ = [
    "CapturedEvent",
    "InMemoryTelemetrySink",
    "JsonlTelemetrySink",
    "TelemetryService",
    "TelemetryServiceNotInitializedError",
    "TelemetrySink",
]
