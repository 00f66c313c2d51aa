"""
Middleware for EventBus

Pipeline functions run before handlers: they can modify, block or log events.
"""

from typing import Callable, Optional

from prompter.models.events import Event, EventType
from prompter.utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.EVENT)


def log_middleware(event: Event) -> Event:
    """
    Log all events for debugging

    Usage:
        event_bus.add_middleware(log_middleware)
    """
    source_str = event.source.name if event.source is not None else "-"
    data_str = ", ".join(f"{k}={v}" for k, v in event.data.items())
    log.debug(f"Event: {event.type.name} from {source_str} | {data_str}")
    return event


def dedupe_scroll_middleware() -> Callable[[Event], Optional[Event]]:
    """
    Block scroll events that don't change the offset.

    Hosts often fire scroll notifications in bursts with the same position;
    re-evaluating visibility for those is wasted work.

    Usage:
        event_bus.add_middleware(dedupe_scroll_middleware())
    """
    last = {}

    def middleware(event: Event) -> Optional[Event]:
        if event.type is not EventType.VIEWPORT_SCROLLED:
            return event
        scroll_y = event.data.get("scroll_y")
        if last.get("scroll_y") == scroll_y:
            return None
        last["scroll_y"] = scroll_y
        return event

    middleware.__name__ = "dedupe_scroll_middleware"
    return middleware
