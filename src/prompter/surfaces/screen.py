"""
Screen — the host a set of surfaces lives on.

Provides what the prompt core consumes from its environment:
- selector lookup (`query`)
- the viewport (height + vertical scroll offset)
- resize / scroll notifications, published on the EventBus
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from prompter.models.events import ViewportResizedEvent, ViewportScrolledEvent
from prompter.surfaces.surface import BoundingBox, Surface
from prompter.utils.logger import get_logger, LogCategory

if TYPE_CHECKING:
    from prompter.services.event_bus import EventBus

log = get_logger().for_category(LogCategory.VIEWPORT)


@dataclass
class Viewport:
    """Visible vertical window over the screen."""
    height: float
    scroll_y: float = 0


class Screen:
    """
    Ordered collection of surfaces plus the viewport over them.

    Example:
        screen = Screen(height=24, event_bus=bus)
        screen.add(MemorySurface(id="title", classes={"banner"}, text="Hello"))
        screen.query(".banner")      # -> [MemorySurface(id='title', ...)]
        await screen.scroll_to(10)   # publishes VIEWPORT_SCROLLED
    """

    def __init__(self, height: float, scroll_y: float = 0, event_bus: Optional["EventBus"] = None):
        self.viewport = Viewport(height=height, scroll_y=scroll_y)
        self.event_bus = event_bus
        self.surfaces: List[Surface] = []

    # ------------------------------------------------------------
    # Surfaces
    # ------------------------------------------------------------

    def add(self, surface: Surface) -> Surface:
        self.surfaces.append(surface)
        log.debug("Surface added", surface=surface.id, top=surface.top)
        return surface

    def query(self, selector: str) -> List[Surface]:
        """
        Resolve a selector to surfaces, in screen order.

        Supported forms (comma separated lists allowed):
            *          every surface
            #id        surface with that id
            .a.b       surfaces carrying every listed class

        Raises:
            ValueError: unsupported selector form
        """
        parts = [p.strip() for p in selector.split(",") if p.strip()]
        for part in parts:
            self._validate(part)

        matched: List[Surface] = []
        for part in parts:
            for surface in self.surfaces:
                if surface not in matched and self._matches(surface, part):
                    matched.append(surface)
        return matched

    @staticmethod
    def _validate(selector: str) -> None:
        if selector == "*":
            return
        if selector.startswith("#") and len(selector) > 1 and " " not in selector:
            return
        if selector.startswith(".") and any(selector.split(".")) and " " not in selector:
            return
        raise ValueError(f"Unsupported selector: {selector!r}")

    @staticmethod
    def _matches(surface: Surface, selector: str) -> bool:
        if selector == "*":
            return True
        if selector.startswith("#"):
            return surface.id == selector[1:]
        names = [n for n in selector.split(".") if n]
        return all(n in surface.classes for n in names)

    # ------------------------------------------------------------
    # Viewport
    # ------------------------------------------------------------

    def rect_of(self, surface: Surface) -> BoundingBox:
        return surface.bounding_box(self.viewport.scroll_y)

    async def resize(self, height: float) -> None:
        self.viewport.height = height
        log.debug("Viewport resized", height=height)
        if self.event_bus:
            await self.event_bus.publish(ViewportResizedEvent(height))

    async def scroll_to(self, scroll_y: float) -> None:
        self.viewport.scroll_y = scroll_y
        log.debug("Viewport scrolled", scroll_y=scroll_y)
        if self.event_bus:
            await self.event_bus.publish(ViewportScrolledEvent(scroll_y))
