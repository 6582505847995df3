"""Spring presets and smoothing configuration."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SpringConfig:
    """Physical constants of a spring-mass-damper.

    Attributes:
        tension: Spring stiffness.
        mass: Simulated mass. Values below 0.001 are floored when integrating.
        friction: Damping coefficient.
    """

    tension: float
    mass: float
    friction: float

    def scaled(self, tension: float, mass: float, friction: float) -> SpringConfig:
        """Derive a profile by multiplying each constant. Mass is floored at 0.1."""
        return SpringConfig(
            tension=self.tension * tension,
            mass=max(self.mass * mass, 0.1),
            friction=self.friction * friction,
        )


DEFAULT_SPRING = SpringConfig(tension=180.0, mass=1.0, friction=26.0)

# Used within the click reaction window.
SNAPPY_SPRING = DEFAULT_SPRING.scaled(tension=1.65, mass=0.65, friction=1.25)

# Used while the primary button is held.
DRAG_SPRING = DEFAULT_SPRING.scaled(tension=1.25, mass=0.85, friction=1.1)


@dataclass(frozen=True)
class SmoothingConfig:
    """Tuning values for densification, profile selection and presentation.

    Attributes:
        tps: Simulation ticks per second. One tick is the integrator sub-step.
        gap_threshold_ticks: Minimum gap, in ticks, worth densifying.
        min_travel: Minimum normalized distance worth densifying.
        max_interpolated_steps: Upper bound on segments per densified gap.
        click_window_ms: Half-width of the snappy window around a click.
        default_spring: Profile away from clicks and drags. Also used to
            resume integration between checkpoints at query time.
        snappy_spring: Profile near clicks.
        drag_spring: Profile while the primary button is held.
        idle_hide_delay_ms: Idle time before the cursor starts fading out.
        idle_fade_out_ms: Length of the fade-out and fade-in ramps.
        click_duration_ms: Length of the click shrink/restore animation.
        click_shrink: Scale applied while the primary button is held.
    """

    tps: int = 60
    gap_threshold_ticks: float = 4.0
    min_travel: float = 0.02
    max_interpolated_steps: int = 120
    click_window_ms: float = 160.0
    default_spring: SpringConfig = DEFAULT_SPRING
    snappy_spring: SpringConfig = SNAPPY_SPRING
    drag_spring: SpringConfig = DRAG_SPRING
    idle_hide_delay_ms: float = 500.0
    idle_fade_out_ms: float = 400.0
    click_duration_ms: float = 250.0
    click_shrink: float = 0.7

    def __post_init__(self) -> None:
        if self.tps <= 0:
            raise ValueError("tps must be positive")
        if self.gap_threshold_ticks < 0:
            raise ValueError(
                f"gap_threshold_ticks must be >= 0, got {self.gap_threshold_ticks}"
            )
        if self.min_travel < 0:
            raise ValueError(f"min_travel must be >= 0, got {self.min_travel}")
        if self.max_interpolated_steps < 2:
            raise ValueError(
                f"max_interpolated_steps must be >= 2, got {self.max_interpolated_steps}"
            )
        if self.click_window_ms < 0:
            raise ValueError(f"click_window_ms must be >= 0, got {self.click_window_ms}")
        if self.idle_hide_delay_ms < 0 or self.idle_fade_out_ms < 0:
            raise ValueError("idle timings must be >= 0")
        if self.click_duration_ms < 0:
            raise ValueError(f"click_duration_ms must be >= 0, got {self.click_duration_ms}")
        if not 0.0 <= self.click_shrink <= 1.0:
            raise ValueError(f"click_shrink must be in [0, 1], got {self.click_shrink}")

    @property
    def tick_ms(self) -> float:
        return 1000.0 / self.tps

    @property
    def gap_threshold_ms(self) -> float:
        return self.tick_ms * self.gap_threshold_ticks


DEFAULT_CONFIG = SmoothingConfig()
