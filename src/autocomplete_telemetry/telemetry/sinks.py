"""Concrete telemetry sinks."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from autocomplete_telemetry.models import event_value


@dataclass(slots=True)
class CapturedEvent:
    """One event as received by a sink."""

    name: str
    properties: dict[str, Any] | None
    captured_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class InMemoryTelemetrySink:
    """Keeps captured events in arrival order."""

    def __init__(self) -> None:
        self._events: list[CapturedEvent] = []

    def capture_event(self, event: str, properties: Mapping[str, Any] | None = None) -> None:
        copied = dict(properties) if properties is not None else None
        self._events.append(CapturedEvent(name=event_value(event), properties=copied))

    @property
    def events(self) -> list[CapturedEvent]:
        return list(self._events)

    def names(self) -> list[str]:
        return [captured.name for captured in self._events]

    def clear(self) -> None:
        self._events.clear()


class JsonlTelemetrySink:
    """Appends each captured event as one JSON line."""

    def __init__(self, file_path: str | Path) -> None:
        self._path = Path(file_path)
        self._path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        return self._path

    def capture_event(self, event: str, properties: Mapping[str, Any] | None = None) -> None:
        captured = CapturedEvent(
            name=event_value(event),
            properties=dict(properties) if properties is not None else None,
        )
        payload = {
            "event": captured.name,
            "properties": captured.properties,
            "captured_at": captured.captured_at.isoformat(),
        }
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(payload) + "\n")

    def list_recent(self, limit: int) -> list[CapturedEvent]:
        if not self._path.exists():
            return []

        events: list[CapturedEvent] = []
        with self._path.open("r", encoding="utf-8") as handle:
            for line in handle:
                if not line.strip():
                    continue
                payload = json.loads(line)
                events.append(
                    CapturedEvent(
                        name=payload["event"],
                        properties=payload.get("properties"),
                        captured_at=datetime.fromisoformat(payload["captured_at"]),
                    )
                )

        events.reverse()
        return events[:limit]
