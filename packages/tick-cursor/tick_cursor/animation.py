"""Presentation hints: idle fade and click shrink.

All functions accept the raw (non-densified) event stream and return a
float in [0.0, 1.0], except click_scale which returns a scale factor.
"""
from __future__ import annotations

from typing import Sequence

from tick_cursor.types import EventKind, PointerEvent


def smoothstep(edge0: float, edge1: float, x: float) -> float:
    """Cubic Hermite ramp. Degenerate edges act as a step at edge0."""
    if edge1 <= edge0:
        return 0.0 if x < edge0 else 1.0
    t = max(0.0, min(1.0, (x - edge0) / (edge1 - edge0)))
    return t * t * (3.0 - 2.0 * t)


def _fade_in(
    moves: Sequence[PointerEvent],
    time_ms: float,
    hide_delay_ms: float,
    fade_ms: float,
) -> float:
    # Latest move that resumed motion after an idle gap.
    for i in range(len(moves) - 1, 0, -1):
        prev, nxt = moves[i - 1], moves[i]
        if nxt.timestamp_ms <= time_ms and nxt.timestamp_ms - prev.timestamp_ms > hide_delay_ms:
            return smoothstep(0.0, fade_ms, max(time_ms - nxt.timestamp_ms, 0.0))
    return 1.0


def idle_opacity(
    events: Sequence[PointerEvent],
    time_ms: float,
    hide_delay_ms: float = 500.0,
    fade_ms: float = 400.0,
) -> float:
    """Fade the cursor out after hide_delay_ms without movement, and back in
    when movement resumes."""
    moves = [e for e in events if e.is_move]
    if not moves:
        return 0.0
    if time_ms <= moves[0].timestamp_ms:
        return 1.0

    last = moves[0]
    for move in moves:
        if move.timestamp_ms > time_ms:
            break
        last = move

    idle_ms = max(time_ms - last.timestamp_ms, 0.0)
    opacity = _fade_in(moves, time_ms, hide_delay_ms, fade_ms)
    if idle_ms > hide_delay_ms:
        opacity *= 1.0 - smoothstep(0.0, fade_ms, idle_ms - hide_delay_ms)
    return max(0.0, min(1.0, opacity))


def click_progress(
    events: Sequence[PointerEvent],
    time_ms: float,
    duration_ms: float = 250.0,
) -> float:
    """0.0 while the primary button is held, 1.0 at rest, ramping between.

    Only left clicks count. The ramp runs for duration_ms after a release and
    for duration_ms leading up to the next press.
    """
    prev: PointerEvent | None = None
    nxt: PointerEvent | None = None
    for event in events:
        if event.kind is not EventKind.LEFT_CLICK:
            continue
        if event.timestamp_ms > time_ms:
            nxt = event
            break
        prev = event

    if prev is not None:
        if prev.pressed:
            return 0.0
        since_release = time_ms - prev.timestamp_ms
        if since_release <= duration_ms:
            return smoothstep(0.0, duration_ms, since_release)

    if nxt is not None and nxt.pressed:
        until_press = nxt.timestamp_ms - time_ms
        if until_press <= duration_ms:
            return smoothstep(0.0, duration_ms, until_press)

    return 1.0


def click_scale(
    events: Sequence[PointerEvent],
    time_ms: float,
    shrink: float = 0.7,
    duration_ms: float = 250.0,
) -> float:
    """Glyph scale in [shrink, 1.0] following click_progress."""
    return shrink + (1.0 - shrink) * click_progress(events, time_ms, duration_ms)
