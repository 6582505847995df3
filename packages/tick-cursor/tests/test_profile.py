"""Tests for spring profile selection and button tracking."""
from __future__ import annotations

import pytest

from tick_cursor.config import DEFAULT_CONFIG, SmoothingConfig, SpringConfig
from tick_cursor.profile import ButtonTracker, ProfileSelector, select_profile
from tick_cursor.types import EventKind, PointerEvent


def _click(t: float, kind: EventKind = EventKind.LEFT_CLICK, pressed: bool = True) -> PointerEvent:
    return PointerEvent(timestamp_ms=t, x=0.5, y=0.5, kind=kind, pressed=pressed)


class TestSelectProfile:
    def test_default_without_clicks(self) -> None:
        assert select_profile(100.0, [], False) is DEFAULT_CONFIG.default_spring

    def test_drag_while_held(self) -> None:
        assert select_profile(100.0, [], True) is DEFAULT_CONFIG.drag_spring

    @pytest.mark.parametrize("t", [340.0, 420.0, 500.0, 580.0, 660.0])
    def test_snappy_within_window(self, t: float) -> None:
        assert select_profile(t, [_click(500.0)], False) is DEFAULT_CONFIG.snappy_spring

    @pytest.mark.parametrize("t", [339.0, 661.0, 0.0, 2000.0])
    def test_default_outside_window(self, t: float) -> None:
        assert select_profile(t, [_click(500.0)], False) is DEFAULT_CONFIG.default_spring

    @pytest.mark.parametrize(
        "kind", [EventKind.LEFT_CLICK, EventKind.RIGHT_CLICK, EventKind.MIDDLE_CLICK]
    )
    def test_any_button_and_release_count(self, kind: EventKind) -> None:
        clicks = [_click(500.0, kind=kind, pressed=False)]
        assert select_profile(550.0, clicks, False) is DEFAULT_CONFIG.snappy_spring

    def test_snappy_beats_drag(self) -> None:
        assert select_profile(500.0, [_click(450.0)], True) is DEFAULT_CONFIG.snappy_spring

    def test_custom_config(self) -> None:
        stiff = SpringConfig(tension=500.0, mass=1.0, friction=40.0)
        config = SmoothingConfig(click_window_ms=10.0, snappy_spring=stiff)
        assert select_profile(505.0, [_click(500.0)], False, config) is stiff
        assert select_profile(520.0, [_click(500.0)], False, config) is config.default_spring


class TestButtonTracker:
    def test_press_and_release(self) -> None:
        tracker = ButtonTracker([_click(100.0), _click(300.0, pressed=False)])
        assert tracker.advance(50.0) is False
        assert tracker.advance(100.0) is True
        assert tracker.advance(200.0) is True
        assert tracker.down is True
        assert tracker.advance(300.0) is False

    def test_other_buttons_ignored(self) -> None:
        tracker = ButtonTracker(
            [
                _click(100.0, kind=EventKind.RIGHT_CLICK),
                _click(200.0, kind=EventKind.MIDDLE_CLICK),
            ]
        )
        assert tracker.advance(1000.0) is False

    def test_last_transition_wins_at_same_time(self) -> None:
        tracker = ButtonTracker([_click(100.0), _click(100.0, pressed=False)])
        assert tracker.advance(100.0) is False

    def test_does_not_rewind(self) -> None:
        tracker = ButtonTracker([_click(100.0), _click(300.0, pressed=False)])
        tracker.advance(400.0)
        assert tracker.advance(150.0) is False

    def test_empty(self) -> None:
        assert ButtonTracker([]).advance(1e9) is False


class TestProfileSelector:
    def test_matches_select_profile_over_forward_pass(self) -> None:
        clicks = [
            _click(200.0),
            _click(260.0, pressed=False),
            _click(900.0),
            _click(1000.0, kind=EventKind.RIGHT_CLICK),
            _click(1600.0, pressed=False),
        ]
        selector = ProfileSelector(clicks)
        tracker = ButtonTracker(clicks)
        for t in range(0, 2200, 20):
            expected = select_profile(float(t), clicks, tracker.advance(float(t)))
            assert selector.select(float(t)) is expected

    def test_drag_between_windows(self) -> None:
        selector = ProfileSelector([_click(0.0), _click(2000.0, pressed=False)])
        assert selector.select(100.0) is DEFAULT_CONFIG.snappy_spring
        assert selector.select(1000.0) is DEFAULT_CONFIG.drag_spring
        assert selector.select(1900.0) is DEFAULT_CONFIG.snappy_spring
        assert selector.select(2500.0) is DEFAULT_CONFIG.default_spring
