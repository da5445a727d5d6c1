"""Tests for the timer-driven reveal scheduler."""

import pytest

from wolf_terminal.Typewriter import (
    EMPTY,
    Container,
    InvalidStepError,
    Leaf,
    RevealScheduler,
    project,
    visible_text,
)


@pytest.fixture
def scheduler(clock):
    return RevealScheduler(clock)


@pytest.fixture
def tree():
    return Container((Leaf("AB"), Container((Leaf("CD"),)), Leaf("E")))


class TestStart:
    """Starting a session."""

    def test_start_creates_one_timer(self, scheduler, clock, tree, recorder):
        scheduler.start(tree, 2, 10, recorder.on_update, recorder.on_complete)
        assert len(clock.timers) == 1
        assert clock.timers[0].interval == pytest.approx(0.01)
        assert scheduler.is_running
        assert scheduler.revealed_count == 0
        assert scheduler.total == 5

    def test_tick_sequence_and_completion(self, scheduler, clock, tree, recorder):
        scheduler.start(tree, 2, 10, recorder.on_update, recorder.on_complete)
        seen = []
        for _ in range(3):
            clock.tick()
            seen.append(visible_text(project(tree, scheduler.revealed_count)))
        assert seen == ["AB", "ABCD", "ABCDE"]
        assert recorder.events == ["update", "update", "update", "complete"]
        assert scheduler.is_complete
        assert not scheduler.is_running
        assert clock.timers[0].stopped

    def test_count_saturates_at_total(self, scheduler, clock, tree):
        scheduler.start(tree, 4, 10)
        clock.tick(2)
        assert scheduler.revealed_count == 5

    def test_no_ticks_after_completion(self, scheduler, clock, tree, recorder):
        scheduler.start(tree, 5, 10, recorder.on_update, recorder.on_complete)
        clock.tick()
        clock.timers[0].fire_late()
        clock.timers[0].fire_late()
        assert recorder.events == ["update", "complete"]
        assert scheduler.revealed_count == 5

    def test_same_tree_is_idempotent(self, scheduler, clock, tree):
        scheduler.start(tree, 1, 10)
        clock.tick(2)
        scheduler.start(tree, 1, 10)
        assert len(clock.timers) == 1
        assert scheduler.revealed_count == 2

    def test_same_tree_adopts_latest_handlers(self, scheduler, clock, tree, recorder):
        stale = []
        scheduler.start(tree, 5, 10, on_complete=lambda: stale.append("complete"))
        scheduler.start(tree, 5, 10, recorder.on_update, recorder.on_complete)
        clock.tick()
        assert stale == []
        assert recorder.events == ["update", "complete"]

    def test_empty_tree_completes_without_update(self, scheduler, clock, recorder):
        scheduler.start(Container((EMPTY, Leaf(""))), 1, 10, recorder.on_update, recorder.on_complete)
        assert recorder.events == ["complete"]
        assert clock.timers == []
        assert scheduler.revealed_count == 0
        assert scheduler.is_complete

    def test_empty_tree_completes_once(self, scheduler, recorder):
        tree = Container()
        scheduler.start(tree, 1, 10, recorder.on_update, recorder.on_complete)
        scheduler.start(tree, 1, 10, recorder.on_update, recorder.on_complete)
        assert recorder.completions == 1

    @pytest.mark.parametrize("step", [0, -1, 1.5, True, "2"])
    def test_invalid_step_rejected(self, scheduler, tree, step):
        with pytest.raises(InvalidStepError):
            scheduler.start(tree, step, 10)

    @pytest.mark.parametrize("interval", [0, -10])
    def test_invalid_interval_rejected(self, scheduler, tree, interval):
        with pytest.raises(InvalidStepError):
            scheduler.start(tree, 1, interval)

    def test_invalid_step_is_value_error(self, scheduler, tree):
        with pytest.raises(ValueError):
            scheduler.start(tree, 0, 10)


class TestRestart:
    """Replacing the content tree."""

    def test_new_tree_resets_count(self, scheduler, clock, tree):
        scheduler.start(tree, 1, 10)
        clock.tick(3)
        replacement = Leaf("xyz")
        scheduler.restart(replacement, 1, 10)
        assert scheduler.revealed_count == 0
        assert scheduler.total == 3
        assert scheduler.session is replacement

    def test_abandoned_session_never_completes(self, scheduler, clock, tree):
        abandoned = []
        scheduler.start(tree, 1, 10, on_complete=lambda: abandoned.append(True))
        clock.tick(2)
        finished = []
        scheduler.restart(Leaf("xy"), 1, 10, on_complete=lambda: finished.append(True))
        clock.tick(5)
        assert abandoned == []
        assert finished == [True]

    def test_old_timer_is_stopped(self, scheduler, clock, tree):
        scheduler.start(tree, 1, 10)
        scheduler.restart(Leaf("xy"), 1, 10)
        assert clock.timers[0].stopped
        assert len(clock.active) == 1

    def test_late_tick_from_old_timer_ignored(self, scheduler, clock, tree):
        scheduler.start(tree, 1, 10)
        scheduler.restart(Leaf("xyz"), 1, 10)
        clock.timers[0].fire_late()
        assert scheduler.revealed_count == 0

    def test_start_with_different_tree_supersedes(self, scheduler, clock, tree, recorder):
        scheduler.start(tree, 1, 10, on_complete=recorder.on_complete)
        clock.tick()
        scheduler.start(Leaf("z"), 1, 10)
        assert scheduler.revealed_count == 0
        assert clock.timers[0].stopped
        assert recorder.completions == 0

    def test_equal_but_distinct_tree_starts_new_session(self, scheduler, clock):
        first = Leaf("same")
        scheduler.start(first, 1, 10)
        clock.tick(2)
        scheduler.restart(Leaf("same"), 1, 10)
        assert scheduler.revealed_count == 0
        assert len(clock.timers) == 2

    def test_restart_with_current_tree_is_noop(self, scheduler, clock, tree):
        scheduler.start(tree, 1, 10)
        clock.tick(2)
        scheduler.restart(tree, 1, 10)
        assert scheduler.revealed_count == 2
        assert len(clock.timers) == 1

    def test_restart_from_update_handler(self, scheduler, clock, tree):
        completions = []
        replacement = Leaf("q")

        def swap():
            scheduler.restart(replacement, 1, 10, on_complete=lambda: completions.append("new"))

        scheduler.start(tree, 5, 10, on_update=swap, on_complete=lambda: completions.append("old"))
        clock.tick()
        assert "old" not in completions
        assert scheduler.session is replacement


class TestStoppedAndCancel:
    """Cooperative pause and teardown."""

    def test_stopped_freezes_count(self, scheduler, clock, tree, recorder):
        scheduler.start(tree, 1, 10, recorder.on_update, recorder.on_complete)
        clock.tick()
        scheduler.set_stopped(True)
        clock.tick(10)
        assert scheduler.revealed_count == 1
        assert recorder.updates == 1
        assert scheduler.is_running

    def test_resume_without_new_timer(self, scheduler, clock, tree, recorder):
        scheduler.start(tree, 1, 10, recorder.on_update, recorder.on_complete)
        scheduler.set_stopped(True)
        clock.tick(3)
        scheduler.set_stopped(False)
        clock.tick(5)
        assert len(clock.timers) == 1
        assert scheduler.revealed_count == 5
        assert recorder.completions == 1

    def test_cancel_stops_timer(self, scheduler, clock, tree, recorder):
        scheduler.start(tree, 1, 10, recorder.on_update, recorder.on_complete)
        scheduler.cancel()
        assert clock.timers[0].stopped
        clock.timers[0].fire_late()
        assert recorder.events == []
        assert not scheduler.is_running

    def test_cancel_ends_session_but_keeps_counts(self, scheduler, clock, tree):
        scheduler.start(tree, 2, 10)
        clock.tick()
        scheduler.cancel()
        assert scheduler.session is None
        assert scheduler.revealed_count == 2
        assert not scheduler.is_complete

    def test_start_same_tree_after_cancel_runs_again(self, scheduler, clock, recorder):
        tree = Leaf("abc")
        scheduler.start(tree, 1, 10)
        scheduler.cancel()
        scheduler.start(tree, 1, 10, recorder.on_update, recorder.on_complete)
        assert len(clock.timers) == 2
        assert scheduler.is_running
        assert scheduler.revealed_count == 0

        clock.tick(10)
        assert scheduler.is_complete
        assert scheduler.revealed_count == 3
        assert recorder.events == ["update", "update", "update", "complete"]

    def test_context_manager_releases_timer(self, clock, tree):
        with RevealScheduler(clock) as scheduler:
            scheduler.start(tree, 1, 10)
        assert clock.timers[0].stopped

    def test_context_manager_releases_timer_on_error(self, clock, tree):
        with pytest.raises(RuntimeError):
            with RevealScheduler(clock) as scheduler:
                scheduler.start(tree, 1, 10)
                raise RuntimeError("boom")
        assert clock.timers[0].stopped

    def test_finish_reveals_everything(self, scheduler, clock, tree, recorder):
        scheduler.start(tree, 1, 10, recorder.on_update, recorder.on_complete)
        clock.tick()
        scheduler.finish()
        assert scheduler.revealed_count == 5
        assert recorder.events == ["update", "update", "complete"]
        assert clock.timers[0].stopped
        scheduler.finish()
        assert recorder.completions == 1

    def test_finish_without_session_is_noop(self, scheduler, recorder):
        scheduler.finish()
        assert scheduler.session is None
        assert not scheduler.is_complete
