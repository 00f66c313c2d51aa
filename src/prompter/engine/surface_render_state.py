"""
SurfaceRenderState — runtime render buffer per surface (not persisted).

Tracks what the sink last wrote to a surface, allowing the RenderSink to:
- Detect content changes (direct comparison; the hash is a cached fingerprint)
- Count writes and skipped writes
- Debug which step of the reveal last updated the surface

This is separate from Prompter state (index, flags, timing).
"""

from __future__ import annotations
import time
from dataclasses import dataclass, field
from typing import Optional

from prompter.models.enums import RenderSource


@dataclass
class SurfaceRenderState:
    """
    Runtime state for a single surface's current content.

    Attributes:
        surface_id: Which surface this render state belongs to
        committed: Text last written as display content
        pending: Text last written as the hidden tail
        source: Which RenderSource last updated this surface
        last_update_ts: When this surface was last written
        writes: Number of writes that reached the surface
        skipped: Number of writes dropped because content was unchanged
        dirty: Whether content changed since the last `mark_clean()`
    """

    surface_id: Optional[str]
    committed: str = ""
    pending: str = ""
    source: Optional[RenderSource] = None
    last_update_ts: float = field(default_factory=time.time)
    writes: int = 0
    skipped: int = 0
    dirty: bool = True

    # Internal: cached content hash (not persisted)
    _content_hash: Optional[int] = field(default=None, init=False, repr=False)

    def update(self, committed: str, pending: str, source: RenderSource) -> None:
        """
        Record a write.

        Args:
            committed: Display content written
            pending: Hidden tail written
            source: Which RenderSource provided the content
        """
        self.committed = committed
        self.pending = pending
        self.source = source
        self.last_update_ts = time.time()
        self.writes += 1
        self.dirty = True
        self._content_hash = None  # Invalidate cached hash

    def get_content_hash(self) -> int:
        """
        Hash of (surface_id, committed, pending), cached until the next update.
        """
        if self._content_hash is None:
            self._content_hash = hash((self.surface_id, self.committed, self.pending))
        return self._content_hash

    def matches(self, committed: str, pending: str) -> bool:
        """True if (committed, pending) equals the last write."""
        return committed == self.committed and pending == self.pending

    def mark_clean(self) -> None:
        self.dirty = False

    def __repr__(self) -> str:
        return (
            f"SurfaceRenderState({self.surface_id}, "
            f"committed={self.committed!r}, "
            f"pending={len(self.pending)}, "
            f"writes={self.writes}, "
            f"source={self.source.name if self.source else None})"
        )
