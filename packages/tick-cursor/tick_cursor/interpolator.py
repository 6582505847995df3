"""CursorInterpolator - the query surface handed to preview and export."""
from __future__ import annotations

import logging
from collections import OrderedDict

from tick_cursor import animation, identity
from tick_cursor.config import DEFAULT_CONFIG, SmoothingConfig
from tick_cursor.trajectory import Trajectory, build, query
from tick_cursor.types import CursorSample, PointerRecording

logger = logging.getLogger(__name__)

_EMPTY = PointerRecording()


class CursorInterpolator:
    """Smoothed cursor state at arbitrary timestamps for one recording.

    The trajectory is built once on construction (or supplied by a
    TrajectoryCache); at() is side-effect free and safe to call in any order.
    """

    def __init__(
        self,
        recording: PointerRecording | None,
        config: SmoothingConfig | None = None,
        trajectory: Trajectory | None = None,
    ) -> None:
        self._recording = recording if recording is not None else _EMPTY
        if trajectory is None:
            config = config if config is not None else DEFAULT_CONFIG
            trajectory = build(self._recording, config)
        elif config is None:
            config = trajectory.config
        elif config != trajectory.config:
            raise ValueError("config does not match the supplied trajectory's config")
        self._config = config
        self._trajectory = trajectory

    @property
    def recording(self) -> PointerRecording:
        return self._recording

    @property
    def config(self) -> SmoothingConfig:
        return self._config

    @property
    def trajectory(self) -> Trajectory:
        return self._trajectory

    @property
    def glyphs(self) -> dict[str, str]:
        return self._recording.glyphs

    @property
    def has_data(self) -> bool:
        return not self._trajectory.empty

    def at(self, time_ms: float) -> CursorSample:
        state = query(self._trajectory, time_ms)
        events = self._recording.events
        cfg = self._config
        return CursorSample(
            x=state.position[0],
            y=state.position[1],
            velocity_x=state.velocity[0],
            velocity_y=state.velocity[1],
            glyph_id=identity.resolve_glyph(self._recording, time_ms),
            opacity=animation.idle_opacity(
                events, time_ms, cfg.idle_hide_delay_ms, cfg.idle_fade_out_ms
            ),
            scale=animation.click_scale(
                events, time_ms, cfg.click_shrink, cfg.click_duration_ms
            ),
        )

    def raw_at(self, time_ms: float) -> CursorSample:
        return identity.raw_at(self._recording, time_ms)


class TrajectoryCache:
    """LRU memo of build() keyed by recording identity.

    Holds a reference to each cached recording so its id cannot be reused
    while the entry is alive. Not thread-safe; share the trajectories, not
    the cache.
    """

    def __init__(self, maxsize: int = 8, config: SmoothingConfig = DEFAULT_CONFIG) -> None:
        if maxsize <= 0:
            raise ValueError("maxsize must be positive")
        self._maxsize = maxsize
        self._config = config
        self._entries: OrderedDict[int, tuple[PointerRecording, Trajectory]] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, recording: PointerRecording) -> Trajectory:
        key = id(recording)
        entry = self._entries.get(key)
        if entry is not None:
            self._entries.move_to_end(key)
            logger.debug("trajectory cache hit for recording %#x", key)
            return entry[1]

        trajectory = build(recording, self._config)
        self._entries[key] = (recording, trajectory)
        if len(self._entries) > self._maxsize:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("trajectory cache evicted recording %#x", evicted)
        return trajectory

    def interpolator(self, recording: PointerRecording | None) -> CursorInterpolator:
        if recording is None:
            return CursorInterpolator(None, self._config)
        return CursorInterpolator(recording, self._config, self.get(recording))

    def clear(self) -> None:
        self._entries.clear()
