"""
Reveal engine: state machine, splice math, scheduling and rendering
"""

from .prompter import Prompter
from .scheduler import FrameScheduler, AsyncioFrameScheduler, ManualFrameScheduler, ScheduledHandle
from .render_sink import RenderSink
from .surface_render_state import SurfaceRenderState
from .state_machine import TRANSITIONS, Transition, derive_state
from .splice import partition, splice_point, progress_at

__all__ = [
    "Prompter",
    "FrameScheduler",
    "AsyncioFrameScheduler",
    "ManualFrameScheduler",
    "ScheduledHandle",
    "RenderSink",
    "SurfaceRenderState",
    "TRANSITIONS",
    "Transition",
    "derive_state",
    "partition",
    "splice_point",
    "progress_at",
]
