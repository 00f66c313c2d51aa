"""Registry - tracks every live Prompter of one application"""

from typing import Iterator, List

from prompter.engine.prompter import Prompter
from prompter.utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.REGISTRY)


class Registry:
    """
    Set of Prompter instances.

    Iteration works on a snapshot, so instances may be registered while a
    visibility pass is iterating. The core never removes an instance; the
    application does, through remove().
    """

    def __init__(self):
        self._prompters: List[Prompter] = []

    def register(self, prompter: Prompter) -> Prompter:
        """Store an instance and, with autoplay, try to start it."""
        if prompter in self._prompters:
            log.warn("Prompter already registered", surface=prompter.surface.id)
            return prompter

        self._prompters.append(prompter)
        log.info(
            "Prompter registered",
            surface=prompter.surface.id,
            strings=len(prompter.content),
            total=len(self._prompters),
        )

        if prompter.config.autoplay:
            prompter.play()
        return prompter

    def remove(self, prompter: Prompter) -> bool:
        """Dispose and forget an instance. Returns False if unknown."""
        if prompter not in self._prompters:
            return False
        prompter.dispose()
        self._prompters.remove(prompter)
        log.info("Prompter removed", surface=prompter.surface.id, total=len(self._prompters))
        return True

    def clear(self) -> None:
        for prompter in self.snapshot():
            self.remove(prompter)

    def snapshot(self) -> List[Prompter]:
        return list(self._prompters)

    def match(self, tag: str) -> List[Prompter]:
        """Instances whose surface id equals `tag` or whose classes contain it."""
        return [p for p in self.snapshot() if p.surface.matches(tag)]

    def autoplay_instances(self) -> List[Prompter]:
        return [p for p in self.snapshot() if p.config.autoplay]

    def __iter__(self) -> Iterator[Prompter]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._prompters)

    def __contains__(self, prompter: object) -> bool:
        return prompter in self._prompters
