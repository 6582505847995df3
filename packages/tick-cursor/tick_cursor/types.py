"""Core data types for pointer recordings and smoothed trajectories."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from tick_cursor.vec import Vec2


class EventKind(Enum):
    """Kind of a recorded pointer event. Values are the serialized names."""

    MOVE = "move"
    LEFT_CLICK = "leftClick"
    RIGHT_CLICK = "rightClick"
    MIDDLE_CLICK = "middleClick"
    # Wheel input. Carries a glyph id but is neither a position sample nor a button.
    SCROLL = "scroll"


CLICK_KINDS = frozenset(
    {EventKind.LEFT_CLICK, EventKind.RIGHT_CLICK, EventKind.MIDDLE_CLICK}
)


@dataclass(frozen=True)
class PointerEvent:
    """One telemetry record. Coordinates are normalized to the unit square.

    Attributes:
        timestamp_ms: Milliseconds from recording start.
        x: Normalized horizontal position.
        y: Normalized vertical position.
        kind: Move, button or scroll event.
        pressed: Button state for click kinds; ignored for moves.
        glyph_id: Cursor image active from this event on, if it changed.
    """

    timestamp_ms: float
    x: float
    y: float
    kind: EventKind = EventKind.MOVE
    pressed: bool = False
    glyph_id: str | None = None

    @property
    def position(self) -> Vec2:
        return (self.x, self.y)

    @property
    def is_move(self) -> bool:
        return self.kind is EventKind.MOVE

    @property
    def is_click(self) -> bool:
        return self.kind in CLICK_KINDS


@dataclass(frozen=True)
class PointerRecording:
    """Immutable input: time-ordered events plus glyph id -> image reference.

    Events must already be sorted by timestamp; this is not checked.
    """

    events: tuple[PointerEvent, ...] = ()
    glyphs: dict[str, str] = field(default_factory=dict)

    def moves(self) -> list[PointerEvent]:
        return [e for e in self.events if e.is_move]

    def clicks(self) -> list[PointerEvent]:
        return [e for e in self.events if e.is_click]


@dataclass(frozen=True, slots=True)
class Checkpoint:
    """Cached simulation result at one input sample's timestamp."""

    time_ms: float
    target: Vec2
    position: Vec2
    velocity: Vec2


@dataclass(frozen=True, slots=True)
class CursorSample:
    """Answer to a point query."""

    x: float = 0.5
    y: float = 0.5
    velocity_x: float = 0.0
    velocity_y: float = 0.0
    glyph_id: str | None = None
    opacity: float = 1.0
    scale: float = 1.0


class RecordingFormatError(Exception):
    """Raised when a serialized recording cannot be loaded."""
