"""
Event system for prompter

Host notifications (viewport resize and scroll) are published as events and
routed through the EventBus to the visibility dispatcher.
"""

from dataclasses import dataclass
import time
from enum import Enum, auto
from typing import Any, Dict, Generic, Optional, TypeVar
from prompter.models.enums import EventSource


class EventType(Enum):
    """Event types in the system"""
    VIEWPORT_RESIZED = auto()
    VIEWPORT_SCROLLED = auto()

TSource = TypeVar("TSource", bound=Enum)

@dataclass
class Event(Generic[TSource]):
    """
    Base event class

    - type: EventType (what kind of event)
    - source: Enum (where it came from)
    - data: dict (event-specific payload)
    - timestamp: float (when it happened)
    """
    type: EventType
    source: Optional[TSource]
    data: Dict[str, Any]
    timestamp: float

@dataclass
class ViewportResizedEvent(Event[EventSource]):
    """Viewport height changed"""

    def __init__(self, height: float, source: EventSource = EventSource.SCREEN):
        super().__init__(
            type=EventType.VIEWPORT_RESIZED,
            source=source,
            data={"height": height},
            timestamp=time.time()
        )

    @property
    def height(self) -> float:
        return self.data["height"]

@dataclass
class ViewportScrolledEvent(Event[EventSource]):
    """Viewport scrolled to a new vertical offset"""

    def __init__(self, scroll_y: float, source: EventSource = EventSource.SCREEN):
        super().__init__(
            type=EventType.VIEWPORT_SCROLLED,
            source=source,
            data={"scroll_y": scroll_y},
            timestamp=time.time()
        )

    @property
    def scroll_y(self) -> float:
        return self.data["scroll_y"]

