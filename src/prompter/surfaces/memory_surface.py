"""
MemorySurface — headless surface that records every write.
"""

from typing import Iterable, List, Optional, Tuple

from prompter.surfaces.surface import Surface


class MemorySurface(Surface):
    """
    Surface keeping a history of (committed, pending) writes.

    Used by tests and by embeddings that render elsewhere and only need the
    computed content.
    """

    def __init__(
        self,
        id: Optional[str] = None,
        classes: Iterable[str] = (),
        text: str = "",
        top: float = 0,
        height: float = 1
    ):
        super().__init__(id=id, classes=classes, text=text, top=top, height=height)
        self.history: List[Tuple[str, str]] = []

    def _draw(self) -> None:
        self.history.append((self.committed, self.pending))

    @property
    def write_count(self) -> int:
        return len(self.history)

    def clear_history(self) -> None:
        self.history.clear()
