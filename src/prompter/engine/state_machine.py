"""
Prompt state machine — explicit transition table.

    state      event              guard      action
    ---------  -----------------  ---------  ----------------
    IDLE       PLAY               visible    begin_reveal
    RUNNING    FRAME              -          advance
    RUNNING    INTERVAL_ELAPSED   -          finish_rest
    *          STOP               -          mark_complete
    *          RESET              -          rewind

Any (state, event) pair missing from the table is ignored: PLAY while
RUNNING or COMPLETED is a no-op, a stray FRAME outside a reveal is dropped.

The state is derived from the instance flags, not stored:
    running            -> RUNNING
    complete           -> COMPLETED
    otherwise          -> IDLE

`complete` may become true while a reveal is still in flight (stop() or the
index wrapping with loop=False); the derived state stays RUNNING until the
rest interval ends.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from prompter.models.enums import PromptEvent, PromptState


@dataclass(frozen=True)
class Transition:
    """Action to run for a (state, event) pair, optionally behind a guard."""
    action: str
    guard: Optional[str] = None


TRANSITIONS: Dict[Tuple[PromptState, PromptEvent], Transition] = {
    (PromptState.IDLE, PromptEvent.PLAY): Transition("begin_reveal", guard="is_visible"),
    (PromptState.RUNNING, PromptEvent.FRAME): Transition("advance"),
    (PromptState.RUNNING, PromptEvent.INTERVAL_ELAPSED): Transition("finish_rest"),
}

for _state in PromptState:
    TRANSITIONS[(_state, PromptEvent.STOP)] = Transition("mark_complete")
    TRANSITIONS[(_state, PromptEvent.RESET)] = Transition("rewind")


def derive_state(running: bool, complete: bool) -> PromptState:
    if running:
        return PromptState.RUNNING
    if complete:
        return PromptState.COMPLETED
    return PromptState.IDLE


def lookup(state: PromptState, event: PromptEvent) -> Optional[Transition]:
    return TRANSITIONS.get((state, event))
