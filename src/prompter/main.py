"""
main.py — terminal runner for prompter
--------------------------------------

Reveals TEXT on one terminal line:

    python -m prompter "Hello|World" --delimiter "|" --cursor _ --loop --cycles 4
    python -m prompter "Booting..." --preset terminal --config prompts.yaml

Responsible for:
- loading YAML options and applying command-line overrides
- wiring screen, event bus, scheduler and registry
- running the asyncio loop until the prompt completes (or Ctrl+C)
"""

import argparse
import asyncio
import shutil
import sys
from typing import Dict, List, Optional

from prompter.engine.scheduler import AsyncioFrameScheduler
from prompter.managers.config_manager import ConfigManager
from prompter.models.enums import LogLevel
from prompter.models.errors import PrompterError
from prompter.services.controller import attach
from prompter.services.event_bus import EventBus
from prompter.services.middleware import log_middleware
from prompter.services.service_container import create_services
from prompter.surfaces.screen import Screen
from prompter.surfaces.terminal_surface import TerminalSurface
from prompter.utils.logger import Colors, configure_logger, get_logger, LogCategory

log = get_logger().for_category(LogCategory.SYSTEM)

SURFACE_ID = "prompt"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="prompter", description="Typing reveal on the terminal")
    parser.add_argument("text", help="Text to reveal")
    parser.add_argument("--config", help="YAML file with defaults and presets")
    parser.add_argument("--preset", help="Preset name from the config file")
    parser.add_argument("--duration", type=float, help="Reveal time per string (ms)")
    parser.add_argument("--interval", type=float, help="Pause after each string (ms)")
    parser.add_argument("--cursor", help="Cursor marker")
    parser.add_argument("--delimiter", help="Split TEXT into several strings")
    parser.add_argument("--fps", type=float, help="Cap frame requests per second")
    parser.add_argument("--loop", action="store_true", default=None, help="Cycle strings indefinitely")
    parser.add_argument("--cycles", type=int, default=0, help="With --loop: stop after N reveals (0 = until Ctrl+C)")
    parser.add_argument("--refresh-rate", type=int, default=60, help="Display frame rate")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    return parser


def collect_overrides(args: argparse.Namespace) -> Dict[str, object]:
    names = ("duration", "interval", "cursor", "delimiter", "fps", "loop")
    return {name: getattr(args, name) for name in names if getattr(args, name) is not None}


async def run(args: argparse.Namespace) -> int:
    config_manager = ConfigManager(args.config)
    config_manager.load()
    config = config_manager.build_config(args.preset, **collect_overrides(args))

    event_bus = EventBus()
    event_bus.add_middleware(log_middleware)

    screen = Screen(height=shutil.get_terminal_size().lines, event_bus=event_bus)
    class_styles = {}
    if config.start_prompt_class:
        class_styles[config.start_prompt_class] = Colors.BRIGHT_YELLOW
    if config.end_prompt_class:
        class_styles[config.end_prompt_class] = Colors.BRIGHT_GREEN
    surface = screen.add(TerminalSurface(
        id=SURFACE_ID,
        text=args.text,
        class_styles=class_styles,
        use_colors=sys.stdout.isatty(),
    ))

    services = create_services(screen, AsyncioFrameScheduler(args.refresh_rate), event_bus)
    controller = attach(services, f"#{SURFACE_ID}", None, config)
    prompter = controller.prompters[0]

    try:
        while prompter.running or not prompter.complete:
            if args.cycles and prompter.reveals_finished >= args.cycles:
                controller.stop(SURFACE_ID)
            await asyncio.sleep(0.02)
    finally:
        services.registry.clear()
        surface.finish()

    log.info("Prompt complete", reveals=prompter.reveals_finished)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logger(LogLevel.DEBUG if args.debug else LogLevel.WARN)

    try:
        return asyncio.run(run(args))
    except PrompterError as e:
        log.error(e.message, code=e.code)
        return 2
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
