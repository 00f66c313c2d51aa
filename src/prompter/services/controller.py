"""
Prompt controller - public control surface

attach() turns surfaces into Prompter instances owned by the container's
Registry and returns a PromptController for tag-based play/stop.
"""

from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from prompter.engine.prompter import Prompter
from prompter.models.config import PromptConfig
from prompter.models.errors import AttachError, PrompterError
from prompter.services.registry import Registry
from prompter.services.service_container import ServiceContainer
from prompter.surfaces.surface import Surface
from prompter.utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.REGISTRY)

Target = Union[str, Surface, Iterable[Surface]]
ConfigLike = Union[PromptConfig, Mapping[str, Any], None]


class PromptController:
    """
    Tag-based playback control over a Registry.

    A tag matches a surface by exact id or by membership in its class set.
    A tag matching nothing is a silent no-op.
    """

    def __init__(self, registry: Registry, prompters: Optional[List[Prompter]] = None):
        self.registry = registry
        self.prompters: List[Prompter] = list(prompters or [])

    def play(self, tag: str) -> int:
        """reset() + play() every match. Returns the number of matches."""
        matches = self.registry.match(tag)
        for prompter in matches:
            prompter.reset()
            prompter.play()
        self._log_command("play", tag, matches)
        return len(matches)

    def stop(self, tag: str) -> int:
        """stop() every match. Returns the number of matches."""
        matches = self.registry.match(tag)
        for prompter in matches:
            prompter.stop()
        self._log_command("stop", tag, matches)
        return len(matches)

    @staticmethod
    def _log_command(command: str, tag: str, matches: List[Prompter]) -> None:
        if matches:
            log.info(f"Controller {command}", tag=tag, matched=len(matches))
        else:
            log.debug(f"Controller {command}: no match", tag=tag)


def resolve_config(config: ConfigLike) -> PromptConfig:
    if isinstance(config, PromptConfig):
        return config
    return PromptConfig.from_dict(config)


def resolve_targets(services: ServiceContainer, target: Target) -> List[Surface]:
    if isinstance(target, str):
        return services.screen.query(target)
    if isinstance(target, Surface):
        return [target]
    return list(target)


def attach(
    services: ServiceContainer,
    target: Target,
    content: Any = None,
    config: ConfigLike = None
) -> Union[PromptController, bool]:
    """
    Create a Prompter per target surface.

    Args:
        services: Container owning registry, scheduler, dispatcher
        target: Selector string, a Surface, or an iterable of surfaces
        content: Sequence of strings, a string, or None (surface text)
        config: PromptConfig or mapping of option names

    Returns:
        PromptController, or False when no surface matched

    Raises:
        ConfigurationError: invalid options (before any surface is touched)
        AttachError: some surfaces failed; the others are registered and
            reachable through the error's `controller`
    """
    prompt_config = resolve_config(config)

    surfaces = resolve_targets(services, target)
    if not surfaces:
        log.debug("attach: no surfaces matched", target=repr(target))
        return False

    prompters: List[Prompter] = []
    failures: List[Tuple[Surface, PrompterError]] = []

    for surface in surfaces:
        try:
            prompter = Prompter(
                surface,
                content,
                prompt_config,
                scheduler=services.scheduler,
                visibility=services.dispatcher.is_visible,
            )
        except PrompterError as e:
            log.error("Failed to attach surface", surface=surface.id, error=e.message)
            failures.append((surface, e))
            continue
        prompters.append(services.registry.register(prompter))

    services.dispatcher.start()

    controller = PromptController(services.registry, prompters)
    log.info("Attached", surfaces=len(prompters), failed=len(failures))

    if failures:
        raise AttachError(failures, controller)
    return controller
