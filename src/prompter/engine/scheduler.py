"""
Frame Scheduler — display-frame and timer requests with cancellable handles.

Two implementations:

  AsyncioFrameScheduler  real frame clock on the running asyncio loop.
                         All callbacks queued for the same frame receive the
                         same timestamp, like a display refresh.

  ManualFrameScheduler   deterministic clock driven by the caller
                         (tick / advance / run_due). Used by tests and
                         headless embeddings.

Timestamps and delays are milliseconds.
"""

import asyncio
import heapq
import itertools
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Tuple

from prompter.utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SCHEDULER)

FrameCallback = Callable[[float], None]
TimerCallback = Callable[[], None]


class ScheduledHandle:
    """Handle to a pending frame or timer request."""

    def __init__(self, cancel_fn: Optional[Callable[[], None]] = None):
        self._cancel_fn = cancel_fn
        self.cancelled = False
        self.done = False

    @property
    def pending(self) -> bool:
        return not self.cancelled and not self.done

    def cancel(self) -> None:
        if not self.pending:
            return
        self.cancelled = True
        if self._cancel_fn:
            self._cancel_fn()

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "done" if self.done else "pending"
        return f"ScheduledHandle({state})"


class FrameScheduler(ABC):
    """Source of frame callbacks and delayed callbacks."""

    @abstractmethod
    def now(self) -> float:
        """Current clock value in ms."""

    @abstractmethod
    def request_frame(self, callback: FrameCallback) -> ScheduledHandle:
        """Run callback(timestamp) on the next display frame."""

    @abstractmethod
    def call_later(self, delay_ms: float, callback: TimerCallback) -> ScheduledHandle:
        """Run callback() after delay_ms."""


# =====================================================================
# asyncio frame clock
# =====================================================================

class AsyncioFrameScheduler(FrameScheduler):
    """
    Frame clock on the asyncio event loop.

    Frames are aligned to multiples of the refresh period on the loop clock.
    One loop timer is armed per frame, no matter how many callbacks wait on it.
    """

    def __init__(self, refresh_rate: int = 60, loop: Optional[asyncio.AbstractEventLoop] = None):
        """
        Args:
            refresh_rate: Display refresh frequency (1-240, default 60)
            loop: Event loop (the running loop when omitted)
        """
        self.refresh_rate = max(1, min(refresh_rate, 240))
        self._loop = loop
        self._frame_queue: List[Tuple[ScheduledHandle, FrameCallback]] = []
        self._frame_timer: Optional[asyncio.TimerHandle] = None
        self.frames_dispatched = 0

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        """
        Raises:
            RuntimeError: no loop was given and none is running
        """
        if self._loop is None:
            try:
                self._loop = asyncio.get_running_loop()
            except RuntimeError:
                raise RuntimeError(
                    "AsyncioFrameScheduler needs a running event loop: attach inside a "
                    "coroutine, pass loop=..., or use ManualFrameScheduler"
                ) from None
        return self._loop

    @property
    def frame_period(self) -> float:
        return 1000.0 / self.refresh_rate

    def now(self) -> float:
        return self.loop.time() * 1000.0

    def request_frame(self, callback: FrameCallback) -> ScheduledHandle:
        handle = ScheduledHandle()
        self._frame_queue.append((handle, callback))

        if self._frame_timer is None:
            period = self.frame_period
            delay = period - (self.now() % period)
            self._frame_timer = self.loop.call_later(delay / 1000.0, self._dispatch_frame)

        return handle

    def call_later(self, delay_ms: float, callback: TimerCallback) -> ScheduledHandle:
        handle = ScheduledHandle()

        def fire():
            handle.done = True
            callback()

        timer = self.loop.call_later(max(0.0, delay_ms) / 1000.0, fire)
        handle._cancel_fn = timer.cancel
        return handle

    def _dispatch_frame(self) -> None:
        self._frame_timer = None
        queue, self._frame_queue = self._frame_queue, []
        timestamp = self.now()
        self.frames_dispatched += 1

        for handle, callback in queue:
            if handle.cancelled:
                continue
            handle.done = True
            try:
                callback(timestamp)
            except Exception as e:
                # remaining callbacks of this frame still run
                log.error(f"Frame callback failed: {e}", error_type=type(e).__name__)

    def close(self) -> None:
        """Cancel every queued frame callback."""
        for handle, _ in self._frame_queue:
            handle.cancel()
        self._frame_queue.clear()
        if self._frame_timer is not None:
            self._frame_timer.cancel()
            self._frame_timer = None


# =====================================================================
# Deterministic clock
# =====================================================================

class ManualFrameScheduler(FrameScheduler):
    """
    Caller-driven clock.

    Example:
        sched = ManualFrameScheduler()
        prompter.play()          # requests a frame
        sched.tick(0)            # frame callbacks run with timestamp 0
        sched.tick(50)           # timers due <= 50 fire, then frames run
        sched.run_due()          # fire timers due at the current time
    """

    def __init__(self, start: float = 0.0):
        self._now = start
        self._frames: List[Tuple[ScheduledHandle, FrameCallback]] = []
        self._timers: List[Tuple[float, int, ScheduledHandle, TimerCallback]] = []
        self._seq = itertools.count()
        self.frames_dispatched = 0

    def now(self) -> float:
        return self._now

    def request_frame(self, callback: FrameCallback) -> ScheduledHandle:
        handle = ScheduledHandle()
        self._frames.append((handle, callback))
        return handle

    def call_later(self, delay_ms: float, callback: TimerCallback) -> ScheduledHandle:
        handle = ScheduledHandle()
        due = self._now + max(0.0, delay_ms)
        heapq.heappush(self._timers, (due, next(self._seq), handle, callback))
        return handle

    @property
    def pending_frames(self) -> int:
        return sum(1 for handle, _ in self._frames if handle.pending)

    @property
    def pending_timers(self) -> int:
        return sum(1 for _, _, handle, _ in self._timers if handle.pending)

    def _fire_timers_until(self, target: float) -> int:
        fired = 0
        while self._timers and self._timers[0][0] <= target:
            due, _, handle, callback = heapq.heappop(self._timers)
            if handle.cancelled:
                continue
            self._now = max(self._now, due)
            handle.done = True
            callback()
            fired += 1
        return fired

    def run_due(self) -> int:
        """Fire timers due at the current time. Returns how many fired."""
        return self._fire_timers_until(self._now)

    def advance(self, ms: float) -> int:
        """Move the clock forward firing timers on the way (no frames)."""
        target = self._now + ms
        fired = self._fire_timers_until(target)
        self._now = target
        return fired

    def tick(self, timestamp: Optional[float] = None) -> int:
        """
        Run one display frame.

        Timers due up to `timestamp` fire first. Then every frame callback
        pending at that point runs with `timestamp`: those queued before this
        call and those requested by the timers that just fired. Callbacks
        requested by frame callbacks wait for the next tick.

        Returns:
            Number of frame callbacks run
        """
        if timestamp is None:
            timestamp = self._now
        if timestamp < self._now:
            raise ValueError(f"Clock can't go backwards: {timestamp} < {self._now}")

        self._fire_timers_until(timestamp)
        self._now = timestamp

        queue, self._frames = self._frames, []
        ran = 0
        for handle, callback in queue:
            if handle.cancelled:
                continue
            handle.done = True
            callback(timestamp)
            ran += 1

        self.frames_dispatched += 1
        return ran
