"""Gap filling for sparse move streams."""
from __future__ import annotations

import heapq
import logging
import math
from typing import Sequence

from tick_cursor import vec
from tick_cursor.config import DEFAULT_CONFIG, SmoothingConfig
from tick_cursor.types import PointerEvent

logger = logging.getLogger(__name__)


def should_fill_gap(
    current: PointerEvent,
    following: PointerEvent,
    config: SmoothingConfig = DEFAULT_CONFIG,
) -> bool:
    """True when the gap between two moves is both long and far enough."""
    dt_ms = following.timestamp_ms - current.timestamp_ms
    if dt_ms < config.gap_threshold_ms:
        return False
    return vec.distance(current.position, following.position) >= config.min_travel


def _fill(
    current: PointerEvent,
    following: PointerEvent,
    config: SmoothingConfig,
) -> list[PointerEvent]:
    dt_ms = following.timestamp_ms - current.timestamp_ms
    segments = min(
        max(math.ceil(dt_ms / config.tick_ms), 2),
        config.max_interpolated_steps,
    )
    filled: list[PointerEvent] = []
    for step in range(1, segments):
        t = step / segments
        x, y = vec.lerp(current.position, following.position, t)
        filled.append(
            PointerEvent(timestamp_ms=current.timestamp_ms + dt_ms * t, x=x, y=y)
        )
    return filled


def densify(
    events: Sequence[PointerEvent],
    config: SmoothingConfig = DEFAULT_CONFIG,
) -> list[PointerEvent]:
    """Insert linearly interpolated moves into long, large gaps.

    Only consecutive move samples are considered. Click and scroll events
    pass through untouched and keep their place in time order relative to the
    synthetic samples. Input without a qualifying gap is returned as a new list.
    """
    moves = [e for e in events if e.is_move]
    if len(events) < 2 or len(moves) < 2:
        return list(events)
    if not any(should_fill_gap(a, b, config) for a, b in zip(moves, moves[1:])):
        return list(events)

    dense: list[PointerEvent] = []
    pending: list[PointerEvent] = []
    previous: PointerEvent | None = None
    gaps = 0
    inserted = 0

    for event in events:
        if not event.is_move:
            if previous is None:
                dense.append(event)
            else:
                pending.append(event)
            continue

        if previous is not None and should_fill_gap(previous, event, config):
            filled = _fill(previous, event, config)
            gaps += 1
            inserted += len(filled)
            # Stable merge: a click sharing a timestamp with a synthetic sample stays first.
            dense.extend(
                heapq.merge(pending, filled, key=lambda e: e.timestamp_ms)
            )
        else:
            dense.extend(pending)
        pending.clear()
        dense.append(event)
        previous = event

    dense.extend(pending)
    logger.debug("densified %d gaps, inserted %d samples", gaps, inserted)
    return dense
