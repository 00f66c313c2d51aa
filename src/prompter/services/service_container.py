"""Service Container - the objects one prompt application is wired from"""

from dataclasses import dataclass
from typing import Optional

from prompter.engine.scheduler import AsyncioFrameScheduler, FrameScheduler
from prompter.services.dispatcher import VisibilityDispatcher
from prompter.services.event_bus import EventBus
from prompter.services.registry import Registry
from prompter.surfaces.screen import Screen


@dataclass
class ServiceContainer:
    """
    Aggregates the services an application owns.

    There is no module-level registry: two containers are two independent
    embeddings, each with its own instances, scheduler and event bus.

    Usage (inside a coroutine; the default scheduler needs the running loop):
        services = create_services(Screen(height=24))
        controller = attach(services, ".banner", "Hello|World", {"delimiter": "|"})
    """

    screen: Screen
    registry: Registry
    dispatcher: VisibilityDispatcher
    scheduler: FrameScheduler
    event_bus: EventBus


def create_services(
    screen: Screen,
    scheduler: Optional[FrameScheduler] = None,
    event_bus: Optional[EventBus] = None
) -> ServiceContainer:
    """
    Wire a ServiceContainer around a screen.

    The screen publishes on the container's event bus; an existing bus on
    the screen is reused when none is given.
    """
    event_bus = event_bus or screen.event_bus or EventBus()
    screen.event_bus = event_bus
    registry = Registry()

    return ServiceContainer(
        screen=screen,
        registry=registry,
        dispatcher=VisibilityDispatcher(registry, screen, event_bus),
        scheduler=scheduler or AsyncioFrameScheduler(),
        event_bus=event_bus,
    )
