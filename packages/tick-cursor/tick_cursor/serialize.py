"""Recording <-> JSON-compatible dict conversion."""
from __future__ import annotations

from typing import Any

from tick_cursor.types import (
    CLICK_KINDS,
    EventKind,
    PointerEvent,
    PointerRecording,
    RecordingFormatError,
)

_FORMAT_VERSION = 1

_KINDS = {kind.value: kind for kind in EventKind}


def dump_recording(recording: PointerRecording) -> dict[str, Any]:
    events: list[dict[str, Any]] = []
    for event in recording.events:
        data: dict[str, Any] = {
            "timestampMs": event.timestamp_ms,
            "x": event.x,
            "y": event.y,
            "kind": event.kind.value,
        }
        if event.is_click:
            data["pressed"] = event.pressed
        if event.glyph_id is not None:
            data["glyphId"] = event.glyph_id
        events.append(data)
    return {
        "version": _FORMAT_VERSION,
        "events": events,
        "glyphs": dict(recording.glyphs),
    }


def load_recording(data: dict[str, Any]) -> PointerRecording:
    """Build a recording from dump_recording() output or a bare payload.

    Events are taken in the order given; they are not re-sorted.
    """
    if not isinstance(data, dict):
        raise RecordingFormatError("Recording payload must be a mapping")

    version = data.get("version", _FORMAT_VERSION)
    if version != _FORMAT_VERSION:
        raise RecordingFormatError(
            f"Unsupported recording version {version!r}, expected {_FORMAT_VERSION}"
        )

    raw_events = data.get("events", [])
    if not isinstance(raw_events, list):
        raise RecordingFormatError("'events' must be a list")
    glyphs = data.get("glyphs", data.get("cursorImages", {}))
    if not isinstance(glyphs, dict):
        raise RecordingFormatError("'glyphs' must be a mapping")

    events = tuple(_load_event(i, raw) for i, raw in enumerate(raw_events))
    return PointerRecording(
        events=events,
        glyphs={str(k): v for k, v in glyphs.items()},
    )


def _load_event(index: int, raw: Any) -> PointerEvent:
    if not isinstance(raw, dict):
        raise RecordingFormatError(f"Event {index} is not a mapping")

    kind_name, pressed = raw.get("kind"), raw.get("pressed", False)
    event_type = raw.get("eventType")
    if kind_name is None and isinstance(event_type, dict):
        kind_name = event_type.get("type")
        pressed = event_type.get("pressed", False)
    if kind_name is None:
        kind_name = EventKind.MOVE.value

    kind = _KINDS.get(kind_name) if isinstance(kind_name, str) else None
    if kind is None:
        raise RecordingFormatError(f"Event {index} has unknown kind {kind_name!r}")
    if not isinstance(pressed, bool):
        raise RecordingFormatError(f"Event {index} has a non-boolean 'pressed': {pressed!r}")

    try:
        timestamp_ms = float(raw["timestampMs"])
        x = float(raw["x"])
        y = float(raw["y"])
    except KeyError as exc:
        raise RecordingFormatError(f"Event {index} is missing {exc.args[0]!r}") from exc
    except (TypeError, ValueError) as exc:
        raise RecordingFormatError(f"Event {index} has a non-numeric field: {exc}") from exc

    glyph_id = raw.get("glyphId", raw.get("cursorId"))
    return PointerEvent(
        timestamp_ms=timestamp_ms,
        x=x,
        y=y,
        kind=kind,
        pressed=pressed if kind in CLICK_KINDS else False,
        glyph_id=str(glyph_id) if glyph_id is not None else None,
    )
