"""
Surface — a display target a prompt reveals text on.

A surface exposes the pieces the core consumes: an identifier and class set
for tag matching, its current text (ambient content), vertical geometry for
visibility checks, and two write operations:

    write(committed, pending)   partial reveal (pending tail stays invisible)
    write_text(text)            fully revealed string

Subclasses decide how a write reaches a real display by overriding _draw().
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Set


@dataclass(frozen=True)
class BoundingBox:
    """Vertical extent of a surface relative to the top of the viewport."""
    top: float
    bottom: float


class Surface:
    """
    Base display surface.

    Geometry is in document coordinates (rows or pixels, the host decides):
    `top` is the offset of the first line, `height` the number of lines.
    """

    def __init__(
        self,
        id: Optional[str] = None,
        classes: Iterable[str] = (),
        text: str = "",
        top: float = 0,
        height: float = 1
    ):
        self.id = id
        self.classes: Set[str] = set(classes)
        self.top = top
        self.height = height

        self.committed: str = text
        self.pending: str = ""

    # ------------------------------------------------------------
    # Content
    # ------------------------------------------------------------

    @property
    def text(self) -> str:
        """Currently displayed text (pending tail excluded)."""
        return self.committed

    def write(self, committed: str, pending: str) -> None:
        self.committed = committed
        self.pending = pending
        self._draw()

    def write_text(self, text: str) -> None:
        self.committed = text
        self.pending = ""
        self._draw()

    def _draw(self) -> None:
        """Push current content to the underlying display."""

    # ------------------------------------------------------------
    # Classes / tags
    # ------------------------------------------------------------

    def add_class(self, name: str) -> None:
        self.classes.add(name)

    def remove_class(self, name: str) -> None:
        self.classes.discard(name)

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def matches(self, tag: str) -> bool:
        """Exact identifier match or membership in the class set."""
        return self.id == tag or tag in self.classes

    # ------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------

    def bounding_box(self, scroll_y: float = 0) -> BoundingBox:
        top = self.top - scroll_y
        return BoundingBox(top=top, bottom=top + self.height)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id!r}, "
            f"classes={sorted(self.classes)}, "
            f"text={self.committed!r})"
        )
