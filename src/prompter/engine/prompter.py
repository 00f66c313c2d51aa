"""
Prompter — animation state for one surface.

One instance = ONE surface. It owns the content sequence, the current index,
the reveal timeline and the split point last written to the surface. All
operations go through dispatch(), which consults the transition table in
engine.state_machine.

Reveal timeline (one content string):

    play()        -> begin_reveal: initial layout, start marker,
                     first frame requested, index pre-advanced
    frame_tick(t) -> advance: progress = (t - start) / duration,
                     write when the splice point moves,
                     request the next frame until progress == 1
    progress == 1 -> commit full string, end marker,
                     INTERVAL_ELAPSED after `interval` ms
    finish_rest   -> running = False, PLAY again (next string or idle)
"""

from typing import Any, Callable, List, Optional

from prompter.engine.render_sink import RenderSink
from prompter.engine.scheduler import FrameScheduler, ScheduledHandle
from prompter.engine.splice import partition, progress_at, splice_point
from prompter.engine.state_machine import derive_state, lookup
from prompter.models.config import PromptConfig
from prompter.models.content import ContentSequence, parse_content
from prompter.models.enums import PromptEvent, PromptState, RenderSource
from prompter.surfaces.surface import Surface
from prompter.utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.ANIMATION)

VisibilityFn = Callable[[Surface], bool]


def _always_visible(surface: Surface) -> bool:
    return True


class Prompter:
    """
    Per-surface reveal animation.

    Args:
        surface: Display target
        content: Sequence of strings, a string, or None to use the surface text
        config: PromptConfig (defaults when omitted)
        scheduler: Frame/timer source
        visibility: Predicate deciding whether the surface is on-screen

    Raises:
        InvalidContentError: content can't be resolved to text
    """

    def __init__(
        self,
        surface: Surface,
        content: Any = None,
        config: Optional[PromptConfig] = None,
        *,
        scheduler: FrameScheduler,
        visibility: Optional[VisibilityFn] = None
    ):
        self.surface = surface
        self.config = config or PromptConfig()
        self.scheduler = scheduler
        self.visibility = visibility or _always_visible

        # Ambient text is captured once, at creation
        self.content: ContentSequence = parse_content(content, surface.text, self.config.delimiter)

        self.sink = RenderSink(surface)

        self.index = 0
        self.complete = False
        self.running = False
        self.start: Optional[float] = None
        self.splice: Optional[int] = None
        self.characters: List[str] = []

        self._pending: Optional[ScheduledHandle] = None
        self.reveals_finished = 0

        self.reset()
        self._init_content()

    # ------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------

    @property
    def state(self) -> PromptState:
        return derive_state(self.running, self.complete)

    def play(self) -> None:
        self.dispatch(PromptEvent.PLAY)

    def stop(self) -> None:
        self.dispatch(PromptEvent.STOP)

    def reset(self) -> None:
        self.dispatch(PromptEvent.RESET)

    def frame_tick(self, timestamp: float) -> None:
        self.dispatch(PromptEvent.FRAME, timestamp)

    def update_index(self) -> None:
        """Pre-select the next content string; wraps (loop) or completes."""
        self.index += 1
        if self.index >= len(self.content):
            self.reset()
            self.complete = not self.config.loop

    def is_visible(self) -> bool:
        return self.visibility(self.surface)

    def dispose(self) -> None:
        """Cancel the pending frame or timer, if any."""
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        log.debug("Prompter disposed", surface=self.surface.id)

    # ------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------

    def dispatch(self, event: PromptEvent, *args) -> bool:
        """
        Route an event through the transition table.

        Returns:
            True if an action ran, False if the event was ignored
        """
        state = self.state
        transition = lookup(state, event)
        if transition is None:
            return False

        if transition.guard and not getattr(self, transition.guard)():
            return False

        getattr(self, f"_{transition.action}")(*args)

        if event is not PromptEvent.FRAME:
            log.debug(
                f"{state.name} --{event.name}--> {self.state.name}",
                surface=self.surface.id,
                index=self.index,
            )
        return True

    # ------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------

    def _rewind(self) -> None:
        self.index = 0
        self.complete = False

    def _mark_complete(self) -> None:
        self.complete = True

    def _init_content(self) -> None:
        """Lay out the current string with nothing revealed."""
        self.characters = list(self.content[self.index])
        self.splice = 0
        self.sink.render(partition(self.characters, 0), RenderSource.INITIAL)

    def _begin_reveal(self) -> None:
        # Scheduled before any state change: if the scheduler raises, the instance stays IDLE
        self._pending = self.scheduler.request_frame(self.frame_tick)
        self.running = True
        self._init_content()
        self.sink.apply_markers(
            add=self.config.start_prompt_class,
            remove=self.config.end_prompt_class,
        )
        log.info(
            "Reveal started",
            surface=self.surface.id,
            index=self.index,
            length=len(self.characters),
        )
        self.update_index()

    def _advance(self, timestamp: float) -> None:
        if self.start is None:
            self.start = timestamp

        progress = progress_at(timestamp, self.start, self.config.duration)
        splice = splice_point(len(self.characters), progress)

        if splice != self.splice:
            self.sink.render(partition(self.characters, splice, self.config.cursor))
            self.splice = splice

        if progress < 1:
            self._schedule_next_frame()
        else:
            self._finish_reveal()

    def _schedule_next_frame(self) -> None:
        if self.config.fps:
            self._pending = self.scheduler.call_later(
                1000 / self.config.fps,
                self._request_frame,
            )
        else:
            self._request_frame()

    def _request_frame(self) -> None:
        self._pending = self.scheduler.request_frame(self.frame_tick)

    def _finish_reveal(self) -> None:
        self.sink.commit("".join(self.characters))
        self.start = None
        self.sink.apply_markers(
            add=self.config.end_prompt_class,
            remove=self.config.start_prompt_class,
        )
        self.reveals_finished += 1
        log.info(
            "Reveal finished",
            surface=self.surface.id,
            next_index=self.index,
            complete=self.complete,
        )
        self._pending = self.scheduler.call_later(
            self.config.interval,
            lambda: self.dispatch(PromptEvent.INTERVAL_ELAPSED),
        )

    def _finish_rest(self) -> None:
        self._pending = None
        self.running = False
        self.dispatch(PromptEvent.PLAY)

    def __repr__(self) -> str:
        return (
            f"Prompter(surface={self.surface.id!r}, state={self.state.name}, "
            f"index={self.index}/{len(self.content)})"
        )
