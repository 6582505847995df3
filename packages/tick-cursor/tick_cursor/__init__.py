"""tick-cursor - Spring-smoothed pointer trajectories for preview and export."""
from __future__ import annotations

from tick_cursor import animation, vec
from tick_cursor.config import (
    DEFAULT_CONFIG,
    DEFAULT_SPRING,
    DRAG_SPRING,
    SNAPPY_SPRING,
    SmoothingConfig,
    SpringConfig,
)
from tick_cursor.densify import densify, should_fill_gap
from tick_cursor.identity import active_glyph_at, raw_at, resolve_glyph
from tick_cursor.interpolator import CursorInterpolator, TrajectoryCache
from tick_cursor.profile import ButtonTracker, ProfileSelector, select_profile
from tick_cursor.serialize import dump_recording, load_recording
from tick_cursor.spring import SpringState, advance
from tick_cursor.trajectory import Trajectory, build, precompute, query
from tick_cursor.types import (
    Checkpoint,
    CursorSample,
    EventKind,
    PointerEvent,
    PointerRecording,
    RecordingFormatError,
)

__all__ = [
    "ButtonTracker",
    "Checkpoint",
    "CursorInterpolator",
    "CursorSample",
    "DEFAULT_CONFIG",
    "DEFAULT_SPRING",
    "DRAG_SPRING",
    "EventKind",
    "PointerEvent",
    "PointerRecording",
    "ProfileSelector",
    "RecordingFormatError",
    "SNAPPY_SPRING",
    "SmoothingConfig",
    "SpringConfig",
    "SpringState",
    "Trajectory",
    "TrajectoryCache",
    "active_glyph_at",
    "advance",
    "animation",
    "build",
    "densify",
    "dump_recording",
    "load_recording",
    "precompute",
    "query",
    "raw_at",
    "resolve_glyph",
    "select_profile",
    "should_fill_gap",
    "vec",
]
