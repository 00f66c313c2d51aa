import pytest

from prompter.engine.scheduler import ManualFrameScheduler
from prompter.models.config import PromptConfig
from prompter.engine.prompter import Prompter
from prompter.services.event_bus import EventBus
from prompter.services.service_container import create_services
from prompter.surfaces.memory_surface import MemorySurface
from prompter.surfaces.screen import Screen


@pytest.fixture
def scheduler():
    return ManualFrameScheduler()


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def screen(event_bus):
    """
    Viewport 10 rows high:
      #title (.banner)      rows 0-1   visible
      #footer (.banner)     rows 30-31 below the fold
    """
    scr = Screen(height=10, event_bus=event_bus)
    scr.add(MemorySurface(id="title", classes={"banner"}, text="Hello", top=0, height=2))
    scr.add(MemorySurface(id="footer", classes={"banner", "small"}, text="Bye", top=30, height=2))
    return scr


@pytest.fixture
def services(screen, scheduler, event_bus):
    return create_services(screen, scheduler, event_bus)


@pytest.fixture
def make_prompter(scheduler):
    """Build a Prompter on a fresh visible MemorySurface."""

    def factory(content=None, surface=None, visibility=None, **options):
        surface = surface or MemorySurface(id="target", text="")
        return Prompter(
            surface,
            content,
            PromptConfig.from_dict(options),
            scheduler=scheduler,
            visibility=visibility,
        )

    return factory
