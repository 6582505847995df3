"""Active glyph resolution and unsmoothed lookups."""
from __future__ import annotations

from typing import Sequence

from tick_cursor.types import CursorSample, PointerEvent, PointerRecording


def active_glyph_at(events: Sequence[PointerEvent], time_ms: float) -> str | None:
    """Most recent non-null glyph id at or before time_ms (last write wins)."""
    active: str | None = None
    for event in events:
        if event.timestamp_ms > time_ms:
            break
        if event.glyph_id is not None:
            active = event.glyph_id
    return active


def resolve_glyph(recording: PointerRecording, time_ms: float) -> str | None:
    """active_glyph_at, falling back to the first glyph in the recording.

    Older recordings only tag the sample where the glyph changes and may
    leave the first samples untagged.
    """
    glyph = active_glyph_at(recording.events, time_ms)
    if glyph is None:
        glyph = next(iter(recording.glyphs), None)
    return glyph


def raw_at(recording: PointerRecording | None, time_ms: float) -> CursorSample:
    """Latest move at or before time_ms, at rest. No smoothing, no cache."""
    if recording is None:
        return CursorSample()
    moves = recording.moves()
    if not moves:
        return CursorSample()

    closest = moves[0]
    for move in moves:
        if move.timestamp_ms > time_ms:
            break
        closest = move

    return CursorSample(
        x=closest.x,
        y=closest.y,
        glyph_id=resolve_glyph(recording, time_ms),
    )
