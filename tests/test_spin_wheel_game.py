"""Tests for the spin wheel game session."""
import pytest

from habitarcade.core.events import Event, EventType
from habitarcade.core.state import State
from habitarcade.games.base import GameContext, MAX_SESSION_XP, award_xp
from habitarcade.games.spin_wheel import SpinWheelGame
from habitarcade.graphics.surface import BufferSurface
from habitarcade.settings import WheelSettings
from habitarcade.wheel.model import Segment, Wheel


def spin_to_rest(game, frame_ms=20.0, limit=10_000):
    assert game.spin() is True
    frames = 0
    while game.is_spinning:
        game.update(frame_ms)
        frames += 1
        assert frames < limit, "spin never stopped"
    return frames


@pytest.fixture
def seven_wheel():
    """Single-segment wheel: every spin lands on 7."""
    return Wheel([Segment(label="7 XP", color="#4cc9f0", value=7)])


@pytest.fixture
def game(context, rng_low):
    return SpinWheelGame(context, rng=rng_low)


class TestSessionLifecycle:
    def test_metadata(self, game):
        assert game.title == "Spin Wheel"
        assert game.description == "Spin the wheel and try your luck!"
        assert game.get_info()["name"] == "spin_wheel"

    def test_not_started_initially(self, game):
        assert game.is_started is False
        assert game.is_over is False
        assert game.state == State.READY

    def test_start_resets_score(self, game):
        assert game.start() is True
        assert game.is_started is True
        assert game.score == 0
        assert game.last_result is None

    def test_start_twice_rejected(self, game):
        game.start()
        assert game.start() is False

    def test_spin_requires_running_game(self, game):
        assert game.spin() is False
        assert game.is_spinning is False

    def test_restart_after_game_over(self, game):
        game.start()
        spin_to_rest(game)
        game.end()
        assert game.is_over is True

        assert game.start() is True
        assert game.score == 0
        assert game.last_result is None
        assert game.spins == []


class TestSpinning:
    def test_spin_resolves_and_scores(self, game):
        game.start()
        frames = spin_to_rest(game)
        assert frames == 460
        assert game.last_result == 2
        assert game.score == 2

    def test_spins_accumulate(self, game):
        game.start()
        for _ in range(3):
            spin_to_rest(game)
        assert len(game.spins) == 3
        assert game.spins[0] == 2
        assert game.score == sum(game.spins)

    def test_spin_while_spinning_ignored(self, game):
        game.start()
        game.spin()
        game.update(20)
        rotation = game.simulator.rotation
        velocity = game.simulator.velocity

        assert game.spin() is False
        assert game.simulator.rotation == rotation
        assert game.simulator.velocity == velocity

    def test_update_converts_time_to_ticks(self, context, rng_mid):
        game = SpinWheelGame(context, rng=rng_mid)
        game.start()
        game.spin()

        game.update(45)  # two ticks, 5 ms carried over
        assert game.simulator.rotation == pytest.approx(15.0 + 15.0 * 0.99)

        game.update(15)  # carried time completes a third tick
        assert game.simulator.rotation == pytest.approx(15.0 + 14.85 + 14.85 * 0.99)

    def test_short_frames_do_not_tick(self, context, rng_mid):
        game = SpinWheelGame(context, rng=rng_mid)
        game.start()
        game.spin()
        game.update(10)
        assert game.simulator.rotation == 0.0

    def test_tick_interval_from_settings(self, context, rng_mid):
        game = SpinWheelGame(context, rng=rng_mid, settings=WheelSettings(tick_interval_ms=10))
        game.start()
        game.spin()
        game.update(20)
        assert game.simulator.rotation == pytest.approx(15.0 + 15.0 * 0.99)

    def test_update_when_not_started_does_nothing(self, game):
        game.update(1000)
        assert game.simulator.rotation == 0.0

    def test_resolved_event_published(self, context, rng_low):
        game = SpinWheelGame(context, rng=rng_low)
        events = []
        context.event_bus.subscribe(EventType.SPIN_RESOLVED, events.append)

        game.start()
        spin_to_rest(game)

        assert len(events) == 1
        assert events[0].data["value"] == 2
        assert events[0].data["index"] == 1
        assert events[0].data["label"] == "2 XP"
        assert events[0].data["score"] == 2


class TestEndGame:
    @pytest.mark.parametrize("score,expected", [(0, 0), (5, 5), (10, 10), (11, 10), (100, 10)])
    def test_award_xp_is_capped(self, score, expected):
        assert award_xp(score) == expected

    def test_cap_constant(self):
        assert MAX_SESSION_XP == 10

    def test_end_awards_capped_xp_and_notifies_once(self, context, rng_low, seven_wheel):
        game = SpinWheelGame(context, wheel=seven_wheel, rng=rng_low)
        notifications = []
        context.event_bus.subscribe(EventType.XP_AWARDED, notifications.append)

        game.start()
        spin_to_rest(game)
        spin_to_rest(game)
        assert game.score == 14

        result = game.end()

        assert result.score == 14
        assert result.awarded_xp == 10
        assert result.data["spins"] == [7, 7]
        assert result.display_text == "You earned 10 XP!"
        assert len(notifications) == 1
        assert notifications[0].data["xp"] == 10
        assert notifications[0].data["title"] == "Game Complete!"
        assert notifications[0].data["message"] == "You earned 10 XP!"

    def test_end_with_no_spins_awards_zero(self, game):
        game.start()
        result = game.end()
        assert result.awarded_xp == 0

    def test_end_when_not_running_is_rejected(self, context, game):
        notifications = []
        context.event_bus.subscribe(EventType.XP_AWARDED, notifications.append)
        assert game.end() is None
        assert notifications == []

    def test_end_twice_notifies_once(self, context, game):
        notifications = []
        context.event_bus.subscribe(EventType.XP_AWARDED, notifications.append)
        game.start()
        game.end()
        assert game.end() is None
        assert len(notifications) == 1

    def test_end_mid_spin_drops_the_spin(self, game):
        game.start()
        game.spin()
        game.update(200)

        result = game.end()

        assert game.is_spinning is False
        assert result.score == 0
        for _ in range(100):
            game.update(20)
        assert game.score == 0

    def test_complete_callback(self, game):
        results = []
        game.set_on_complete(results.append)
        game.start()
        game.end()
        assert len(results) == 1


class TestControlsAndInput:
    def test_controls_idle(self, game):
        game.start()
        spin, end = game.controls()
        assert (spin.label, spin.enabled) == ("Spin", True)
        assert (end.label, end.enabled) == ("End Game", True)

    def test_spin_button_disabled_while_spinning(self, game):
        game.start()
        game.spin()
        spin, _ = game.controls()
        assert spin.label == "Spinning..."
        assert spin.enabled is False

    def test_controls_disabled_before_start(self, game):
        assert all(not c.enabled for c in game.controls())

    def test_input_events_drive_session(self, game):
        assert game.handle_input(Event(EventType.BUTTON_PRESS)) is False
        assert game.handle_input(Event(EventType.START_REQUEST)) is True
        assert game.handle_input(Event(EventType.BUTTON_PRESS)) is True
        assert game.is_spinning is True
        assert game.handle_input(Event(EventType.END_REQUEST)) is True
        assert game.is_over is True

    def test_status_text(self, game):
        game.start()
        assert game.status_text() == "SCORE 0"
        game.spin()
        assert game.status_text() == "SPINNING..."
        while game.is_spinning:
            game.update(20)
        assert game.status_text() == "+2 XP  SCORE 2"


class TestRepaint:
    def test_repaints_on_start_spin_ticks_and_stop(self, rng_low):
        surface = BufferSurface(48, 48)
        game = SpinWheelGame(GameContext(surface=surface), rng=rng_low)

        game.start()
        assert surface.frames_presented == 1

        game.spin()
        assert surface.frames_presented == 2

        game.update(60)  # three ticks
        assert surface.frames_presented == 5

        while game.is_spinning:
            game.update(20)
        assert surface.frames_presented == 2 + 460

    def test_no_surface_is_fine(self, game):
        game.start()
        spin_to_rest(game)
        assert game.score == 2

    def test_teardown_halts_spin(self, game):
        game.start()
        game.spin()
        game.teardown()
        assert game.is_spinning is False
