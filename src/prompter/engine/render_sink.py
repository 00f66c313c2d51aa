"""
RenderSink — applies partitions and state markers to a surface.

The Prompter decides *when* to write (only when the splice point moves); the
sink decides *how*: committed prefix and pending tail go to Surface.write(),
a finished string goes to Surface.write_text(). Identical consecutive content
is dropped so a surface never receives a redundant write.
"""

from typing import Optional

from prompter.engine.surface_render_state import SurfaceRenderState
from prompter.models.enums import RenderSource
from prompter.models.partition import Partition
from prompter.surfaces.surface import Surface
from prompter.utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.RENDER)


class RenderSink:
    """Rendering adapter between one Prompter and its Surface."""

    def __init__(self, surface: Surface):
        self.surface = surface
        self.state = SurfaceRenderState(
            surface_id=surface.id,
            committed=surface.text,
        )

    def render(self, partition: Partition, source: RenderSource = RenderSource.FRAME) -> bool:
        """
        Write a partial reveal.

        Returns:
            True if the surface was written, False if content was unchanged
        """
        committed, pending = partition.committed, partition.hidden
        if self.state.writes and self.state.matches(committed, pending):
            self.state.skipped += 1
            return False

        self.surface.write(committed, pending)
        self.state.update(committed, pending, source)
        log.debug(
            "Partition written",
            surface=self.surface.id,
            splice=partition.splice,
            committed=repr(committed),
        )
        return True

    def commit(self, text: str) -> None:
        """Write the fully revealed string."""
        self.surface.write_text(text)
        self.state.update(text, "", RenderSource.COMMIT)
        log.debug("Content committed", surface=self.surface.id, text=repr(text))

    def apply_markers(self, add: Optional[str] = None, remove: Optional[str] = None) -> None:
        """Swap state-marker classes on the surface (either may be None)."""
        if remove:
            self.surface.remove_class(remove)
        if add:
            self.surface.add_class(add)

    @property
    def writes(self) -> int:
        return self.state.writes
