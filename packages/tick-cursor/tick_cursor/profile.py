"""Spring profile selection from click context and button state."""
from __future__ import annotations

from bisect import bisect_left
from typing import Sequence

from tick_cursor.config import DEFAULT_CONFIG, SmoothingConfig, SpringConfig
from tick_cursor.types import EventKind, PointerEvent


def select_profile(
    time_ms: float,
    clicks: Sequence[PointerEvent],
    primary_button_down: bool,
    config: SmoothingConfig = DEFAULT_CONFIG,
) -> SpringConfig:
    """Snappy near any click, drag while held, default otherwise."""
    window = config.click_window_ms
    if any(abs(time_ms - c.timestamp_ms) <= window for c in clicks):
        return config.snappy_spring
    if primary_button_down:
        return config.drag_spring
    return config.default_spring


class ButtonTracker:
    """Forward-only primary button state over time-ordered clicks.

    Each click is consumed once, so a full pass over ascending times costs
    O(len(clicks)) in total. Querying an earlier time than the previous call
    does not rewind.
    """

    def __init__(self, clicks: Sequence[PointerEvent]) -> None:
        self._clicks = clicks
        self._index = 0
        self._down = False

    @property
    def down(self) -> bool:
        return self._down

    def advance(self, time_ms: float) -> bool:
        clicks = self._clicks
        while self._index < len(clicks) and clicks[self._index].timestamp_ms <= time_ms:
            click = clicks[self._index]
            if click.kind is EventKind.LEFT_CLICK:
                self._down = click.pressed
            self._index += 1
        return self._down


class ProfileSelector:
    """Stateful selector for one forward pass over a recording.

    Equivalent to calling select_profile with a ButtonTracker-derived button
    state, but the click window test is a binary search over click times.
    """

    def __init__(
        self,
        clicks: Sequence[PointerEvent],
        config: SmoothingConfig = DEFAULT_CONFIG,
    ) -> None:
        self._config = config
        self._times = sorted(c.timestamp_ms for c in clicks)
        self._tracker = ButtonTracker(clicks)

    def _near_click(self, time_ms: float) -> bool:
        # The nearest click is either side of the insertion point.
        times = self._times
        i = bisect_left(times, time_ms)
        window = self._config.click_window_ms
        return any(
            abs(time_ms - times[j]) <= window
            for j in (i - 1, i)
            if 0 <= j < len(times)
        )

    def select(self, time_ms: float) -> SpringConfig:
        down = self._tracker.advance(time_ms)
        if self._near_click(time_ms):
            return self._config.snappy_spring
        if down:
            return self._config.drag_spring
        return self._config.default_spring
