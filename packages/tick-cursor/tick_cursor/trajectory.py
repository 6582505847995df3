"""Trajectory precomputation and point queries.

build() runs one deterministic forward pass over a recording and caches a
checkpoint per (densified) move sample. query() answers an arbitrary
timestamp by resuming integration from the checkpoint at or before it, so
query resolution is independent of the recording's sample rate.
"""
from __future__ import annotations

import logging
from bisect import bisect_right
from dataclasses import dataclass, field

from tick_cursor import spring
from tick_cursor.config import DEFAULT_CONFIG, SmoothingConfig
from tick_cursor.densify import densify
from tick_cursor.profile import ProfileSelector
from tick_cursor.spring import SpringState
from tick_cursor.types import Checkpoint, PointerRecording
from tick_cursor.vec import ZERO

logger = logging.getLogger(__name__)

_IDLE_STATE = SpringState(position=(0.5, 0.5), velocity=ZERO)


@dataclass(frozen=True)
class Trajectory:
    """Immutable, time-ordered checkpoints for one recording."""

    checkpoints: tuple[Checkpoint, ...] = ()
    config: SmoothingConfig = DEFAULT_CONFIG
    times: tuple[float, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "times", tuple(c.time_ms for c in self.checkpoints))

    def __len__(self) -> int:
        return len(self.checkpoints)

    @property
    def empty(self) -> bool:
        return not self.checkpoints


def precompute(
    recording: PointerRecording,
    config: SmoothingConfig = DEFAULT_CONFIG,
) -> list[Checkpoint]:
    """Integrate the densified move stream sample by sample.

    The target for the interval ending at sample i is sample i+1's position
    (the last sample targets itself). Integration starts at the first
    sample's position, at rest, from time 0.
    """
    moves = [e for e in densify(recording.events, config) if e.is_move]
    if not moves:
        return []

    selector = ProfileSelector(recording.clicks(), config)
    first = moves[0].position
    state = SpringState(position=first)
    checkpoints: list[Checkpoint] = []

    if moves[0].timestamp_ms > 0:
        checkpoints.append(
            Checkpoint(time_ms=0.0, target=first, position=first, velocity=ZERO)
        )

    last_time_ms = 0.0
    for i, move in enumerate(moves):
        target = moves[i + 1].position if i + 1 < len(moves) else move.position
        profile = selector.select(move.timestamp_ms)
        state = spring.advance(
            state,
            target,
            profile,
            move.timestamp_ms - last_time_ms,
            config.tick_ms,
        )
        last_time_ms = move.timestamp_ms
        checkpoints.append(
            Checkpoint(
                time_ms=move.timestamp_ms,
                target=target,
                position=state.position,
                velocity=state.velocity,
            )
        )

    return checkpoints


def build(
    recording: PointerRecording,
    config: SmoothingConfig = DEFAULT_CONFIG,
) -> Trajectory:
    checkpoints = precompute(recording, config)
    logger.debug(
        "built trajectory: %d events -> %d checkpoints",
        len(recording.events),
        len(checkpoints),
    )
    return Trajectory(checkpoints=tuple(checkpoints), config=config)


def query(trajectory: Trajectory, time_ms: float) -> SpringState:
    """Smoothed state at time_ms. Clamps outside the recorded range."""
    checkpoints = trajectory.checkpoints
    if not checkpoints:
        return _IDLE_STATE

    first = checkpoints[0]
    if time_ms <= first.time_ms:
        return SpringState(position=first.position, velocity=first.velocity)

    last = checkpoints[-1]
    if time_ms >= last.time_ms:
        return SpringState(position=last.position, velocity=last.velocity)

    # first.time_ms < time_ms < last.time_ms, so 0 <= index < len - 1.
    curr = checkpoints[bisect_right(trajectory.times, time_ms) - 1]
    config = trajectory.config
    return spring.advance(
        SpringState(position=curr.position, velocity=curr.velocity),
        curr.target,
        config.default_spring,
        time_ms - curr.time_ms,
        config.tick_ms,
    )
