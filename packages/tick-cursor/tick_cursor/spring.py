"""Fixed-substep spring-mass-damper integrator."""
from __future__ import annotations

import math
from dataclasses import dataclass

from tick_cursor.config import SpringConfig
from tick_cursor.vec import ZERO, Vec2

_MIN_MASS = 0.001


@dataclass(frozen=True, slots=True)
class SpringState:
    position: Vec2
    velocity: Vec2 = ZERO


def advance(
    state: SpringState,
    target: Vec2,
    spring: SpringConfig,
    elapsed_ms: float,
    tick_ms: float = 1000.0 / 60.0,
) -> SpringState:
    """Semi-implicit Euler: spring + damping force -> velocity -> position.

    The elapsed interval is split into ceil(elapsed / tick) sub-steps of
    min(remaining, tick) ms each. Non-positive intervals return the state
    unchanged.
    """
    if elapsed_ms <= 0:
        return state

    px, py = state.position
    vx, vy = state.velocity
    tx, ty = target
    mass = max(spring.mass, _MIN_MASS)

    remaining = elapsed_ms
    for _ in range(math.ceil(elapsed_ms / tick_ms)):
        step_ms = min(remaining, tick_ms)
        if step_ms <= 0:
            break
        dt = step_ms / 1000.0

        ax = (spring.tension * (tx - px) - spring.friction * vx) / mass
        ay = (spring.tension * (ty - py) - spring.friction * vy) / mass
        vx += ax * dt
        vy += ay * dt
        px += vx * dt
        py += vy * dt

        remaining -= step_ms

    return SpringState(position=(px, py), velocity=(vx, vy))
