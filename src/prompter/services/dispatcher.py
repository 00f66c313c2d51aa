"""
Visibility Dispatcher

Re-evaluates visibility-gated playback whenever the viewport changes:
resize and scroll events arrive through the EventBus, and every autoplay
instance gets a play() attempt. play() is a no-op for instances that are
running, complete or off-screen, so a pass over the whole registry is safe.
"""

from prompter.models.events import Event, EventType
from prompter.services.event_bus import EventBus
from prompter.services.registry import Registry
from prompter.surfaces.screen import Screen
from prompter.surfaces.surface import BoundingBox, Surface
from prompter.utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.VIEWPORT)


def intersects_viewport(box: BoundingBox, viewport_height: float) -> bool:
    """
    Vertical visibility: top above the viewport bottom and bottom below the
    viewport top. Horizontal extent is not checked.
    """
    return box.top < viewport_height and box.bottom > 0


class VisibilityDispatcher:
    """Connects Screen viewport notifications to the Registry."""

    def __init__(self, registry: Registry, screen: Screen, event_bus: EventBus):
        self.registry = registry
        self.screen = screen
        self.event_bus = event_bus
        self.listening = False

    def start(self) -> None:
        """Subscribe to viewport events (once)."""
        if self.listening:
            return
        self.event_bus.subscribe(EventType.VIEWPORT_RESIZED, self.on_viewport_changed)
        self.event_bus.subscribe(EventType.VIEWPORT_SCROLLED, self.on_viewport_changed)
        self.listening = True
        log.info("Visibility dispatcher listening")

    def stop(self) -> None:
        if not self.listening:
            return
        self.event_bus.unsubscribe(EventType.VIEWPORT_RESIZED, self.on_viewport_changed)
        self.event_bus.unsubscribe(EventType.VIEWPORT_SCROLLED, self.on_viewport_changed)
        self.listening = False

    def is_visible(self, surface: Surface) -> bool:
        return intersects_viewport(self.screen.rect_of(surface), self.screen.viewport.height)

    def on_viewport_changed(self, event: Event) -> None:
        self.play_visible()

    def play_visible(self) -> int:
        """
        Attempt play() on every autoplay instance.

        Returns:
            Number of instances that started a reveal
        """
        started = 0
        for prompter in self.registry.autoplay_instances():
            was_running = prompter.running
            prompter.play()
            if prompter.running and not was_running:
                started += 1

        if started:
            log.debug("Visibility pass started reveals", started=started)
        return started
