"""Contract for telemetry sinks that receive captured events."""

from collections.abc import Mapping
from typing import Any, Protocol


class TelemetrySink(Protocol):
    """Records or transmits captured telemetry events."""

    def capture_event(self, event: str, properties: Mapping[str, Any] | None = None) -> None:
        """Publish a telemetry event to the configured backend."""
