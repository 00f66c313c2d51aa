"""
prompter — frame-driven typing reveal for text surfaces

    import asyncio
    from prompter import Screen, MemorySurface, create_services, attach

    async def main():
        screen = Screen(height=24)
        screen.add(MemorySurface(id="title", text="Hello"))
        services = create_services(screen)       # frames on the running loop
        controller = attach(services, "#title", config={"cursor": "_"})
        await asyncio.sleep(1)

    asyncio.run(main())

Outside an event loop, pass a ManualFrameScheduler to create_services and
drive it with tick().
"""

from prompter.engine import Prompter, AsyncioFrameScheduler, ManualFrameScheduler
from prompter.managers import ConfigManager
from prompter.models import (
    PromptConfig,
    PrompterError,
    InvalidContentError,
    ConfigurationError,
    AttachError,
)
from prompter.services import PromptController, Registry, EventBus, attach, create_services
from prompter.surfaces import Screen, Surface, MemorySurface, TerminalSurface

__version__ = "0.3.0"

__all__ = [
    "Prompter",
    "AsyncioFrameScheduler",
    "ManualFrameScheduler",
    "ConfigManager",
    "PromptConfig",
    "PrompterError",
    "InvalidContentError",
    "ConfigurationError",
    "AttachError",
    "PromptController",
    "Registry",
    "EventBus",
    "attach",
    "create_services",
    "Screen",
    "Surface",
    "MemorySurface",
    "TerminalSurface",
]
