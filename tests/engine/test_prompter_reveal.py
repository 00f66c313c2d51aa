"""
Tests for the Prompter reveal timeline driven by a ManualFrameScheduler.

Frames are ticked by hand, so every assertion names the exact timestamp the
reveal was sampled at.
"""

from unittest.mock import Mock

import pytest

from prompter.engine.prompter import Prompter
from prompter.engine.scheduler import ManualFrameScheduler
from prompter.models.config import PromptConfig
from prompter.models.enums import PromptEvent, PromptState
from prompter.models.errors import InvalidContentError
from prompter.surfaces.memory_surface import MemorySurface


class TestConstruction:

    def test_initial_layout_hides_whole_string(self, make_prompter):
        p = make_prompter("ok", duration=100)

        assert p.surface.history == [("", "ok")]
        assert p.state == PromptState.IDLE
        assert p.index == 0
        assert p.splice == 0

    def test_content_taken_from_surface_text(self, make_prompter):
        surface = MemorySurface(id="s", text="a|b")
        p = make_prompter(surface=surface, delimiter="|")

        assert p.content == ("a", "b")
        assert surface.committed == ""
        assert surface.pending == "a"

    def test_invalid_content_raises(self, make_prompter):
        with pytest.raises(InvalidContentError):
            make_prompter(["ok", 1])


class TestSingleReveal:

    def test_reveal_samples(self, make_prompter, scheduler):
        p = make_prompter("ok", duration=100)
        p.play()
        assert p.state == PromptState.RUNNING

        splices = []
        for ts in (0, 50, 100):
            scheduler.tick(ts)
            splices.append(p.splice)

        assert splices == [0, 1, 2]
        assert p.surface.history == [
            ("", "ok"),
            ("o", "k"),
            ("ok", ""),
            ("ok", ""),
        ]
        assert p.surface.text == "ok"
        assert p.complete is True

    def test_no_restart_after_last_string(self, make_prompter, scheduler):
        p = make_prompter("ok", duration=100)
        p.play()
        scheduler.tick(0)
        scheduler.tick(100)

        assert scheduler.run_due() == 1
        assert p.state == PromptState.COMPLETED
        assert scheduler.pending_frames == 0
        assert scheduler.pending_timers == 0

    def test_unchanged_splice_is_not_rewritten(self, make_prompter, scheduler):
        p = make_prompter("abc", duration=1000)
        p.play()
        scheduler.tick(0)
        scheduler.tick(1)
        writes = p.surface.write_count

        scheduler.tick(2)

        assert p.splice == 1
        assert p.surface.write_count == writes

    def test_cursor_covers_next_character(self, make_prompter, scheduler):
        p = make_prompter("hi", duration=100, cursor="|")
        p.play()
        scheduler.tick(0)
        scheduler.tick(50)

        assert p.surface.committed == "h|"
        assert p.surface.pending == ""

        scheduler.tick(100)
        assert p.surface.text == "hi"

    def test_interval_delays_rest_end(self, make_prompter, scheduler):
        p = make_prompter("ok", duration=100, interval=300)
        p.play()
        scheduler.tick(0)
        scheduler.tick(100)

        scheduler.advance(299)
        assert p.state == PromptState.RUNNING

        scheduler.advance(1)
        assert p.state == PromptState.COMPLETED

    def test_late_first_frame_sets_start(self, make_prompter, scheduler):
        p = make_prompter("abcd", duration=100)
        p.play()
        scheduler.tick(1000)
        assert p.start == 1000
        assert p.splice == 0

        scheduler.tick(1050)
        assert p.splice == 2


class TestSequence:

    def test_two_strings_play_back_to_back(self, make_prompter, scheduler):
        p = make_prompter(["a", "b"], duration=100)
        p.play()
        assert p.index == 1

        scheduler.tick(0)
        scheduler.tick(100)
        assert p.surface.text == "a"

        scheduler.run_due()
        assert p.state == PromptState.RUNNING
        assert p.index == 0
        assert p.complete is True

        scheduler.tick(200)
        scheduler.tick(300)
        assert p.surface.text == "b"

        scheduler.run_due()
        assert p.state == PromptState.COMPLETED

    def test_loop_cycles_forever(self, make_prompter, scheduler):
        p = make_prompter(["one", "two"], duration=100, loop=True)
        p.play()

        seen = []
        now = 0
        for _ in range(3):
            scheduler.tick(now)
            scheduler.tick(now + 100)
            seen.append(p.surface.text)
            scheduler.run_due()
            now += 200

        assert seen == ["one", "two", "one"]
        assert p.complete is False
        assert p.state == PromptState.RUNNING

    def test_update_index_wraps(self, make_prompter):
        p = make_prompter(["a", "b", "c"], loop=True, autoplay=False)

        p.update_index()
        p.update_index()
        assert p.index == 2

        p.update_index()
        assert p.index == 0
        assert p.complete is False

    def test_update_index_completes_without_loop(self, make_prompter):
        p = make_prompter(["a", "b"])

        p.update_index()
        p.update_index()

        assert p.index == 0
        assert p.complete is True


class TestControl:

    def test_play_while_running_is_noop(self, make_prompter, scheduler):
        p = make_prompter("abc", duration=100)
        p.play()
        p.play()

        assert scheduler.pending_frames == 1

    def test_stop_is_deferred(self, make_prompter, scheduler):
        p = make_prompter(["abcd", "efgh"], duration=100)
        p.play()
        scheduler.tick(0)
        p.stop()
        assert p.complete is True
        assert p.state == PromptState.RUNNING

        scheduler.tick(50)
        assert p.surface.committed == "ab"

        scheduler.tick(100)
        scheduler.run_due()
        assert p.surface.text == "abcd"
        assert p.state == PromptState.COMPLETED

    def test_play_after_complete_is_noop_until_reset(self, make_prompter, scheduler):
        p = make_prompter("ok", duration=100)
        p.play()
        scheduler.tick(0)
        scheduler.tick(100)
        scheduler.run_due()

        p.play()
        assert scheduler.pending_frames == 0

        p.reset()
        assert p.state == PromptState.IDLE
        p.play()
        assert p.state == PromptState.RUNNING
        assert scheduler.pending_frames == 1

    def test_invisible_surface_does_not_start(self, make_prompter, scheduler):
        p = make_prompter("ok", visibility=lambda surface: False)
        p.play()

        assert p.state == PromptState.IDLE
        assert scheduler.pending_frames == 0

    def test_visibility_predicate_receives_surface(self, make_prompter):
        visibility = Mock(return_value=True)
        p = make_prompter("ok", visibility=visibility)

        p.play()

        visibility.assert_called_once_with(p.surface)

    def test_dispose_cancels_pending_frame(self, make_prompter, scheduler):
        p = make_prompter("ok", duration=100)
        p.play()
        p.dispose()

        assert scheduler.tick(0) == 0

    def test_dispatch_reports_ignored_events(self, make_prompter):
        p = make_prompter("ok")

        assert p.dispatch(PromptEvent.FRAME, 0) is False
        assert p.dispatch(PromptEvent.STOP) is True
        assert p.state == PromptState.COMPLETED


class TestFrameRateCap:

    def test_fps_defers_next_frame_request(self, make_prompter, scheduler):
        p = make_prompter("abcdefghij", duration=1000, fps=10)
        p.play()
        scheduler.tick(0)

        assert scheduler.pending_frames == 0
        assert scheduler.pending_timers == 1

        assert scheduler.tick(50) == 0
        assert scheduler.tick(100) == 1
        assert p.splice == 1


class TestMarkers:

    def test_start_and_end_classes_swap(self, make_prompter, scheduler):
        p = make_prompter(
            ["ab", "cd"],
            duration=100,
            start_prompt_class="typing",
            end_prompt_class="typed",
        )
        p.play()
        assert p.surface.has_class("typing")
        assert not p.surface.has_class("typed")

        scheduler.tick(0)
        scheduler.tick(100)
        assert p.surface.has_class("typed")
        assert not p.surface.has_class("typing")

        scheduler.run_due()
        assert p.surface.has_class("typing")
        assert not p.surface.has_class("typed")


class UnavailableFrameScheduler(ManualFrameScheduler):
    """Frame clock that refuses requests until `available` is set."""

    def __init__(self):
        super().__init__()
        self.available = False

    def request_frame(self, callback):
        if not self.available:
            raise RuntimeError("no frame clock")
        return super().request_frame(callback)


class TestSchedulerFailure:

    def test_failed_frame_request_leaves_instance_idle(self):
        sched = UnavailableFrameScheduler()
        p = Prompter(
            MemorySurface(id="s"),
            "ok",
            PromptConfig(duration=100, start_prompt_class="typing"),
            scheduler=sched,
        )

        with pytest.raises(RuntimeError):
            p.play()

        assert p.state == PromptState.IDLE
        assert p.index == 0
        assert not p.surface.has_class("typing")

    def test_play_recovers_once_frames_available(self):
        sched = UnavailableFrameScheduler()
        p = Prompter(MemorySurface(id="s"), "ok", PromptConfig(duration=100), scheduler=sched)
        with pytest.raises(RuntimeError):
            p.play()

        sched.available = True
        p.play()
        sched.tick(0)
        sched.tick(100)

        assert p.surface.text == "ok"
        assert p.complete is True
