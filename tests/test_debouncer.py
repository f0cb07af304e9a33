"""Unit tests for IdleReminderDebouncer."""

import pytest

from idlenudge.core.debouncer import IdleReminderDebouncer
from idlenudge.core.models import Decision

A = Decision.ACTION
S = Decision.SUPPRESSED


def _run(times: list[float], cooldown_ms: float = 1500) -> list[Decision]:
    """Feed *times* to a fresh debouncer and collect the decisions."""
    debouncer = IdleReminderDebouncer(cooldown_ms=cooldown_ms)
    return [debouncer.on_idle_notification(t) for t in times]


# ------------------------------------------------------------------
# Construction
# ------------------------------------------------------------------

class TestInit:
    def test_default_cooldown_is_1500ms(self):
        assert IdleReminderDebouncer().state.cooldown_ms == 1500

    def test_starts_never_fired(self):
        assert IdleReminderDebouncer().state.last_fired_at is None

    @pytest.mark.parametrize("bad", [float("nan"), float("inf")])
    def test_non_finite_cooldown_rejected(self, bad):
        with pytest.raises(ValueError):
            IdleReminderDebouncer(cooldown_ms=bad)

    def test_negative_cooldown_rejected(self):
        with pytest.raises(ValueError):
            IdleReminderDebouncer(cooldown_ms=-1)

    def test_instances_do_not_share_state(self):
        first = IdleReminderDebouncer()
        second = IdleReminderDebouncer()
        first.on_idle_notification(1000)
        assert first.state.last_fired_at == 1000
        assert second.state.last_fired_at is None
        assert second.on_idle_notification(1100) == A


# ------------------------------------------------------------------
# Reference scenarios (cooldown 1500 ms)
# ------------------------------------------------------------------

class TestScenarios:
    def test_suppressed_then_fires_after_cooldown(self):
        assert _run([0, 1000, 1600]) == [A, S, A]

    def test_boundary_is_inclusive(self):
        assert _run([0, 1500]) == [A, A]

    def test_first_call_at_arbitrary_time_fires(self):
        assert _run([5000]) == [A]

    def test_rapid_burst_fires_once(self):
        assert _run([0, 100, 200, 300]) == [A, S, S, S]


# ------------------------------------------------------------------
# Properties
# ------------------------------------------------------------------

class TestProperties:
    @pytest.mark.parametrize("first", [0, 1, 1500, 10**12])
    def test_first_call_always_fires(self, first):
        assert IdleReminderDebouncer().on_idle_notification(first) == A

    def test_emitted_actions_are_at_least_cooldown_apart(self):
        times = [0, 200, 900, 1499, 1500, 1700, 2999, 3000, 3001, 4600, 4700, 9000]
        debouncer = IdleReminderDebouncer(cooldown_ms=1500)
        fired = [t for t in times if debouncer.on_idle_notification(t) == A]
        assert fired == [0, 1500, 3000, 4600, 9000]
        for earlier, later in zip(fired, fired[1:]):
            assert later - earlier >= 1500

    def test_suppression_never_mutates_state(self):
        debouncer = IdleReminderDebouncer(cooldown_ms=1500)
        debouncer.on_idle_notification(1000)
        for _ in range(50):
            assert debouncer.on_idle_notification(2000) == S
        assert debouncer.state.last_fired_at == 1000

    def test_suppressed_calls_do_not_extend_window(self):
        # Suppressed calls at 1000 and 1400 must not push the window forward.
        assert _run([0, 1000, 1400, 1500]) == [A, S, S, A]

    def test_action_records_now(self):
        debouncer = IdleReminderDebouncer()
        debouncer.on_idle_notification(42)
        assert debouncer.state.last_fired_at == 42

    def test_just_below_boundary_is_suppressed(self):
        assert _run([0, 1499.999]) == [A, S]

    def test_clock_going_backwards_is_suppressed(self):
        debouncer = IdleReminderDebouncer()
        debouncer.on_idle_notification(10_000)
        assert debouncer.on_idle_notification(5_000) == S
        assert debouncer.state.last_fired_at == 10_000

    def test_zero_cooldown_always_fires(self):
        assert _run([0, 0, 0, 1], cooldown_ms=0) == [A, A, A, A]


# ------------------------------------------------------------------
# reset
# ------------------------------------------------------------------

class TestReset:
    def test_reset_allows_immediate_fire(self):
        debouncer = IdleReminderDebouncer()
        debouncer.on_idle_notification(0)
        assert debouncer.on_idle_notification(100) == S
        debouncer.reset()
        assert debouncer.state.last_fired_at is None
        assert debouncer.on_idle_notification(100) == A

    def test_reset_keeps_cooldown(self):
        debouncer = IdleReminderDebouncer(cooldown_ms=250)
        debouncer.reset()
        assert debouncer.state.cooldown_ms == 250
